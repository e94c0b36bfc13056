"""System clock: frame-driven uptime, synchronised wall time and formatting."""

from dataclasses import dataclass

DEFAULT_TIME_SERVER = "time.nist.gov:37"
DEFAULT_TIMEZONE = 2
DEFAULT_EPOCH_START = 1970

_MASK = 0xFFFFFFFF
_DAY = 86400
_LONG_MONTH = 2678400      # 31 days
_LONG_YEAR = 32140800      # 12 months of 31 days
_MONTH = 2629743           # about 30.44 days
_YEAR = 31556926           # about 365.24 days
_RESYNC_INTERVAL = 10


def _s32(value):
    value &= _MASK
    return value - 0x100000000 if value & 0x80000000 else value


@dataclass(frozen=True)
class DateTime:
    """A calendar date and time of day."""

    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0


def seconds_to_datetime(seconds, epoch_start=DEFAULT_EPOCH_START):
    """Convert seconds since ``epoch_start`` to an approximate date and time.

    The time of day is exact; the date uses average month and year lengths,
    so it can drift by a day or so. ``seconds`` is taken as unsigned 32-bit.
    """
    total = seconds & _MASK
    within_day = total % _LONG_YEAR % _LONG_MONTH % _DAY
    hour, rest = divmod(within_day, 3600)
    minute, second = divmod(rest, 60)

    within_year = total % _YEAR
    month, within_month = divmod(within_year, _MONTH)
    return DateTime(
        year=(total // _YEAR + epoch_start) & _MASK,
        month=month + 1,
        day=within_month // _DAY + 1,
        hour=hour,
        minute=minute,
        second=second,
    )


def format_time(t):
    """``HH:MM:SS`` with zero padding."""
    return f"{t.hour:02d}:{t.minute:02d}:{t.second:02d}"


def format_date(t):
    """``D-M-YYYY`` without padding."""
    return f"{t.day}-{t.month}-{t.year}"


def format_full(t):
    """Date followed by time, separated by a space."""
    return f"{format_date(t)} {format_time(t)}"


class SystemClock:
    """Clock advanced once per video frame and set from a time server."""

    def __init__(self, pal=False, timezone=DEFAULT_TIMEZONE, epoch_start=DEFAULT_EPOCH_START):
        self.pal = pal
        self.timezone = timezone
        self.epoch_start = epoch_start
        self.server = DEFAULT_TIME_SERVER
        self.uptime = 0
        self.seconds = 0
        self.last_sync = -999
        self.frame = 0
        self.now = DateTime()

    def tick(self):
        """Advance one video frame; a second passes every 50 (PAL) or 60 frames."""
        rate = 50 if self.pal else 60
        if self.frame % rate == 0:
            self.uptime += 1
            self.seconds = _s32(self.seconds + 1)
            self.now = seconds_to_datetime(self.seconds, self.epoch_start)
        self.frame += 1

    def set_datetime(self, seconds):
        """Set the wall time from UTC seconds, applying the time zone."""
        self.seconds = _s32(seconds + self.timezone * 3600)
        self.last_sync = self.seconds
        self.now = seconds_to_datetime(self.seconds, self.epoch_start)

    def seconds_since_sync(self):
        """Seconds elapsed since the clock was last set."""
        return self.seconds - self.last_sync

    def sync(self, fetch, server=None):
        """Set the clock from a time server.

        ``fetch`` is called with the server address and returns the bytes
        received; the first four are a big-endian count of seconds. Returns
        False without contacting the server if the clock was set less than
        ten seconds ago. Raises ConnectionError on a short response.
        """
        if self.seconds_since_sync() < _RESYNC_INTERVAL:
            return False
        address = server if server is not None else self.server
        data = bytes(fetch(address))
        if len(data) < 4:
            raise ConnectionError(f"time server {address} sent {len(data)} bytes, expected 4")
        self.set_datetime(int.from_bytes(data[:4], "big", signed=True))
        return True