import pytest

from smdterm.xport import DEFAULT_DELAY, DEFAULT_READ_TIMEOUT, XPortClient, XPortError


class FakeAdapter:
    """Answers complete command lines with scripted replies."""

    def __init__(self, replies=None):
        self.replies = {key: list(value) for key, value in (replies or {}).items()}
        self.rx = bytearray()
        self.sent = bytearray()
        self._line = bytearray()

    def write(self, data):
        self.sent += data
        self._line += data
        while b"\n" in self._line:
            end = self._line.index(b"\n") + 1
            line = bytes(self._line[:end])
            del self._line[:end]
            queue = self.replies.get(line)
            if queue:
                self.rx += queue.pop(0)

    def read_byte(self):
        if not self.rx:
            return None
        return self.rx.pop(0)

    def pending(self):
        return bytes(self.rx)

    def flush(self):
        self.rx.clear()


ENTER = b"C0.0.0.0/0\n"
EXIT = b"QU\n"


def monitor_replies(enter=1, leave=1):
    return {ENTER: [b"0.0.0.0/0\r\n>"] * enter, EXIT: [b"QU\r\n>"] * leave}


def client(adapter):
    return XPortClient(adapter, read_timeout=50, delay=0)


def test_enter_and_exit_monitor_mode():
    adapter = FakeAdapter(monitor_replies())
    xp = client(adapter)
    assert xp.enter_monitor_mode() is True
    assert xp.in_monitor_mode is True
    assert xp.exit_monitor_mode() is True
    assert xp.in_monitor_mode is False
    assert adapter.sent == ENTER + EXIT


def test_enter_monitor_mode_times_out():
    xp = client(FakeAdapter())
    assert xp.enter_monitor_mode() is False
    assert xp.in_monitor_mode is False


def test_exit_monitor_mode_times_out_and_flushes():
    adapter = FakeAdapter({EXIT: [b"junk"]})
    xp = client(adapter)
    assert xp.exit_monitor_mode() is False
    assert adapter.pending() == b""


def test_initialize_found():
    adapter = FakeAdapter(monitor_replies())
    xp = XPortClient(adapter, read_timeout=50, delay=1)
    assert xp.initialize() is True


def test_initialize_absent():
    xp = XPortClient(FakeAdapter(), read_timeout=50, delay=1)
    assert xp.initialize() is False


def test_initialize_exit_failure_raises():
    adapter = FakeAdapter({ENTER: [b">"]})
    xp = XPortClient(adapter, read_timeout=50, delay=1)
    with pytest.raises(XPortError):
        xp.initialize()


def test_initialize_restores_zero_timeout():
    xp = XPortClient(FakeAdapter(monitor_replies()), read_timeout=0, delay=1)
    xp.initialize()
    assert xp.read_timeout == DEFAULT_READ_TIMEOUT
    assert xp.delay == 1
    assert DEFAULT_DELAY == 500


def test_connect_sends_command_and_consumes_reply():
    adapter = FakeAdapter({b"Chost.example.com\n": [b"Cdata"]})
    xp = client(adapter)
    assert xp.connect("host.example.com") is True
    assert adapter.sent == b"Chost.example.com\n"
    assert adapter.pending() == b"data"


def test_connect_unreachable_reply_is_consumed():
    adapter = FakeAdapter({b"Chost.example.com\n": [b"N"]})
    xp = client(adapter)
    assert xp.connect("host.example.com") is True
    assert adapter.pending() == b""


def test_connect_silence_fails():
    xp = client(FakeAdapter())
    assert xp.connect("host.example.com") is False


def test_get_ip():
    replies = monitor_replies()
    replies[b"NC\n"] = [b"IP 192.0.2.5 Gateway 192.0.2.1\r\n>"]
    adapter = FakeAdapter(replies)
    xp = client(adapter)
    assert xp.get_ip() == "192.0.2.5"
    assert adapter.sent == ENTER + b"NC\n" + EXIT
    assert xp.in_monitor_mode is False


def test_get_ip_timeout_still_leaves_monitor_mode():
    adapter = FakeAdapter(monitor_replies())
    xp = client(adapter)
    with pytest.raises(XPortError):
        xp.get_ip()
    assert adapter.sent.endswith(EXIT)
    assert xp.in_monitor_mode is False


def test_ping_collects_five_lines():
    lines = [b"Seq %d: 3 ms\r\n" % n for n in range(5)]
    replies = monitor_replies(leave=2)
    replies[b"PI 192.0.2.1\n"] = [b"\r\n" + b"\0".join(lines) + b"extra"]
    adapter = FakeAdapter(replies)
    xp = client(adapter)
    assert xp.ping("192.0.2.1") == b"".join(lines)
    assert adapter.sent == ENTER + b"PI 192.0.2.1\n" + EXIT + EXIT
    assert xp.in_monitor_mode is False


def test_ping_silence_raises():
    adapter = FakeAdapter(monitor_replies(leave=2))
    xp = client(adapter)
    with pytest.raises(XPortError):
        xp.ping("192.0.2.1")
    assert adapter.sent.endswith(EXIT + EXIT)