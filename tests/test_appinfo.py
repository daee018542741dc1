import socket
import tempfile
import time
from pathlib import Path

import pytest

from logerr import appinfo


@pytest.fixture(autouse=True)
def restore_info():
    saved = (appinfo.name(), appinfo.version(), appinfo.organization(), appinfo.organization_domain())
    yield
    appinfo.configure(*saved)


def test_configure_sets_values():
    appinfo.configure("demo", "1.2.3", "Example Org", "example.com")
    assert appinfo.name() == "demo"
    assert appinfo.version() == "1.2.3"
    assert appinfo.organization() == "Example Org"
    assert appinfo.organization_domain() == "example.com"


def test_configure_keeps_unset_values():
    appinfo.configure(version="9.9")
    before = appinfo.name()
    appinfo.configure(name="other")
    assert appinfo.version() == "9.9"
    assert appinfo.name() == "other"
    assert before != "other"


def test_host_details_match_system():
    assert appinfo.host_name() == socket.gethostname()
    assert appinfo.home() == str(Path.home())
    assert appinfo.temp_dir() == tempfile.gettempdir()


def test_start_time_is_stable():
    first = appinfo.application_start_time()
    time.sleep(0.01)
    later = appinfo.application_start_time()
    assert later == first
    assert str(later) == str(first)


def test_system_details_contains_sections():
    appinfo.configure(name="detailsapp", version="4.5.6")
    details = appinfo.system_details()
    assert "APPLICATION INFO:" in details
    assert "HOST INFO:" in details
    assert "detailsapp" in details
    assert "4.5.6" in details
    assert appinfo.host_name() in details