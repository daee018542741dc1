import socket

import pytest

from logerr.blaster import DEFAULT_GROUP, DEFAULT_PORT, LogBlaster


@pytest.fixture
def listener():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(5)
    yield sock
    sock.close()


def _receive(sock, count):
    return [sock.recvfrom(65535)[0].decode("utf-8") for _ in range(count)]


def test_defaults_match_multicast_address():
    blaster = LogBlaster()
    try:
        assert (blaster.host, blaster.port) == (DEFAULT_GROUP, DEFAULT_PORT)
        assert (DEFAULT_GROUP, DEFAULT_PORT) == ("239.239.239.239", 52387)
    finally:
        blaster.close()


def test_blast_sends_one_datagram_per_entry(listener):
    port = listener.getsockname()[1]
    with LogBlaster("127.0.0.1", port) as blaster:
        assert (blaster.host, blaster.port) == ("127.0.0.1", port)
        blaster.blast("first entry\n")
        blaster.blast("second entry\n")
        received = _receive(listener, 2)
    assert received == ["first entry\n", "second entry\n"]


def test_close_flushes_queued_entries(listener):
    port = listener.getsockname()[1]
    blaster = LogBlaster("127.0.0.1", port)
    assert blaster.port == port
    messages = [f"entry {n}" for n in range(20)]
    for message in messages:
        blaster.blast(message)
    blaster.close()
    assert _receive(listener, len(messages)) == messages
    with pytest.raises(ValueError):
        blaster.blast("after close")


def test_unicode_round_trip(listener):
    port = listener.getsockname()[1]
    with LogBlaster("127.0.0.1", port) as blaster:
        assert blaster.host == "127.0.0.1"
        blaster.blast("température ✓")
    assert _receive(listener, 1) == ["température ✓"]


def test_blast_after_close_raises(listener):
    blaster = LogBlaster("127.0.0.1", listener.getsockname()[1])
    blaster.close()
    blaster.close()
    with pytest.raises(ValueError):
        blaster.blast("too late")