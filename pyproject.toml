[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logerr"
version = "0.1.0"
description = "Levelled console logging, located exceptions, cross-thread error hand-off, log entry models and UDP multicast log distribution"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "exceptions", "stack trace", "multicast", "log viewer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["logerr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
