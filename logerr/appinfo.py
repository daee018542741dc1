"""Information about the running application and the host it runs on."""

from __future__ import annotations

import platform
import socket
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path

from .timestamp import Timestamp


def _default_name() -> str:
    if sys.argv and sys.argv[0]:
        stem = Path(sys.argv[0]).stem
        if stem:
            return stem
    return "logerr"


@dataclass
class _AppInfo:
    name: str
    version: str = "0.0.0"
    organization: str = "Company Name"
    organization_domain: str = ""


_info = _AppInfo(name=_default_name())
_start_time = Timestamp()


def configure(name=None, version=None, organization=None, organization_domain=None) -> None:
    """Set the application details; arguments left as None keep their value."""
    if name is not None:
        _info.name = name
    if version is not None:
        _info.version = version
    if organization is not None:
        _info.organization = organization
    if organization_domain is not None:
        _info.organization_domain = organization_domain


def name() -> str:
    return _info.name


def version() -> str:
    return _info.version


def organization() -> str:
    return _info.organization


def organization_domain() -> str:
    return _info.organization_domain


def host_name() -> str:
    return socket.gethostname()


def host_cpu_architecture() -> str:
    return platform.machine()


def host_kernel_type() -> str:
    return platform.system().lower()


def host_kernel_version() -> str:
    return platform.release()


def home() -> str:
    return str(Path.home())


def temp_dir() -> str:
    return tempfile.gettempdir()


def application_start_time() -> str:
    """Return the time at which the application started."""
    return str(_start_time)


def _section(title: str, rows: list[tuple[str, str]]) -> str:
    width = max(len(label) for label, _ in rows)
    body = "".join(f"    {label.ljust(width)} : {value}\n" for label, value in rows)
    return f"{title}\n\n{body}\n"


def system_details() -> str:
    """Return a multi-line report of application and host details."""
    application = _section(
        "APPLICATION INFO:",
        [
            ("Name", name()),
            ("Organization", organization()),
            ("Domain", organization_domain()),
            ("Version", version()),
            ("Start Time", application_start_time()),
        ],
    )
    host = _section(
        "HOST INFO:",
        [
            ("Host Name", host_name()),
            ("CPU Arch", host_cpu_architecture()),
            ("Kernel Type", host_kernel_type()),
            ("Kernel Version", host_kernel_version()),
            ("Home", home()),
            ("Temp Dir", temp_dir()),
        ],
    )
    return application + host