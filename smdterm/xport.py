"""Client for a serial-attached network adapter driven by monitor-mode commands."""

import time

DEFAULT_CONN_TIMEOUT = 500000
DEFAULT_READ_TIMEOUT = 300000
DEFAULT_DELAY = 500

_ENTER_MONITOR = b"C0.0.0.0/0\n"
_EXIT_MONITOR = b"QU\n"
_EXIT_ECHO = b"QU\r\n"
_NETWORK_INFO = b"NC\n"
_PROMPT = ord(">")
_IP_END = ord("G")
_IP_CHARS = frozenset(b"0123456789.")
_PING_REPLIES = 5
_PING_SKIP = 2


class XPortError(Exception):
    """The adapter did not answer as expected."""


class XPortClient:
    """Talks to the adapter over ``transport``.

    The transport provides ``write(data)``, ``read_byte()`` (the next
    received byte, or None when nothing is waiting), ``pending()`` (the
    received bytes not yet read) and ``flush()`` (drop all buffered data).
    ``read_timeout`` counts polls of the receive buffer; ``delay`` is the
    pause in milliseconds between sending a command and reading the answer.
    """

    def __init__(self, transport, read_timeout=DEFAULT_READ_TIMEOUT, delay=DEFAULT_DELAY):
        self.transport = transport
        self.read_timeout = read_timeout
        self.delay = delay
        self.in_monitor_mode = False

    def _send(self, data):
        self.transport.write(bytes(data))

    def _wait(self):
        if self.delay > 0:
            time.sleep(self.delay / 1000)

    def _polls(self):
        return range(self.read_timeout + 1)

    def initialize(self):
        """Probe for the adapter.

        Returns True if it answered, False if nothing answered. Raises
        XPortError if it entered monitor mode but would not leave it.
        Zero timeouts are first restored to their defaults.
        """
        if self.read_timeout == 0:
            self.read_timeout = DEFAULT_READ_TIMEOUT
        if self.delay == 0:
            self.delay = DEFAULT_DELAY
        if not self.enter_monitor_mode():
            return False
        self._wait()
        if not self.exit_monitor_mode():
            raise XPortError("adapter did not leave monitor mode")
        return True

    def enter_monitor_mode(self):
        """Switch the adapter into monitor mode; True once it shows its prompt."""
        self.transport.flush()
        self._send(_ENTER_MONITOR)
        self._wait()
        for _ in self._polls():
            if self.transport.read_byte() == _PROMPT:
                break
        else:
            return False
        self.in_monitor_mode = True
        return True

    def exit_monitor_mode(self):
        """Leave monitor mode; True once the adapter acknowledges it."""
        self.transport.flush()
        self._send(_EXIT_MONITOR)
        self._wait()
        for _ in self._polls():
            if self.transport.read_byte() == _PROMPT:
                break
            if self.transport.pending()[: len(_EXIT_ECHO)] == _EXIT_ECHO:
                break
        else:
            self.transport.flush()
            return False
        self.transport.flush()
        self.in_monitor_mode = False
        return True

    def connect(self, host):
        """Ask the adapter to open a connection to ``host``.

        Returns True once the adapter has answered (with either its
        connected or its unreachable reply, which is consumed), False if it
        stayed silent.
        """
        self.transport.flush()
        self._send(b"C")
        self._send(host.encode("ascii"))
        self._send(b"\n")
        self._wait()
        for _ in self._polls():
            if self.transport.pending()[:1] in (b"C", b"N"):
                self.transport.read_byte()
                return True
        return False

    def get_ip(self):
        """The adapter's IP address as reported by its network information.

        Raises XPortError if the report does not end in time.
        """
        self.enter_monitor_mode()
        try:
            self.transport.flush()
            self._send(_NETWORK_INFO)
            self._wait()
            address = bytearray()
            idle = 0
            while True:
                byte = self.transport.read_byte()
                if byte is not None:
                    if byte == _IP_END:
                        break
                    if byte in _IP_CHARS:
                        address.append(byte)
                    idle = 0
                if idle >= self.read_timeout:
                    raise XPortError(
                        f"timed out reading network information (got {address.decode('ascii')!r})"
                    )
                idle += 1
        finally:
            self.exit_monitor_mode()
        return address.decode("ascii")

    def ping(self, ip):
        """Ping ``ip`` from the adapter and return the five reply lines as bytes.

        The first two bytes of the answer (the command echo) are dropped and
        NUL bytes are ignored. Raises XPortError if the adapter goes silent.
        """
        self.enter_monitor_mode()
        self._send(b"PI ")
        self._send(ip.encode("ascii"))
        self._send(b"\n")

        output = bytearray()
        replies = 0
        received = 0
        idle = 0
        try:
            while replies < _PING_REPLIES:
                byte = self.transport.read_byte()
                if byte is None:
                    idle += 1
                    if idle > self.read_timeout:
                        raise XPortError("timed out waiting for ping replies")
                    continue
                idle = 0
                if byte == 0:
                    continue
                received += 1
                if received > _PING_SKIP:
                    output.append(byte)
                    if byte == ord("\n"):
                        replies += 1
        finally:
            self.transport.flush()
            self._send(_EXIT_MONITOR)
            self._wait()
            self.exit_monitor_mode()
        return bytes(output)