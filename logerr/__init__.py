"""Levelled logging, located exceptions, thread error hand-off, log models and UDP log distribution."""

__version__ = "0.1.0"

__all__ = [
    "appinfo",
    "blaster",
    "console",
    "errors",
    "log",
    "logmodel",
    "proxy",
    "receiver",
    "stream",
    "threads",
    "timestamp",
]