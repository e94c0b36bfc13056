"""Small string and byte helpers used throughout the terminal."""

_U8 = 0xFF
_U16 = 0xFFFF
_U32 = 0xFFFFFFFF


def _parse_unsigned(text, mask):
    value = 0
    for ch in text:
        value = (value * 10 + ((ord(ch) - ord("0")) & _U8)) & mask
    return value


def parse_u8(text):
    """Parse a decimal string into an 8-bit unsigned value, wrapping on overflow.

    No validation is done: every character counts as ``ord(ch) - ord('0')``.
    """
    return _parse_unsigned(text, _U8)


def parse_u16(text):
    """Parse a decimal string into a 16-bit unsigned value, wrapping on overflow."""
    return _parse_unsigned(text, _U16)


def parse_u32(text):
    """Parse a decimal string into a 32-bit unsigned value, wrapping on overflow."""
    return _parse_unsigned(text, _U32)


def int_to_str(n):
    """Render a signed 32-bit integer in decimal."""
    n &= _U32
    if n & 0x80000000:
        n -= 0x100000000
    return str(n)


def to_lower(c):
    """Lower-case an ASCII letter; other characters pass through.

    Accepts a one-character string or an integer character code and returns
    the same kind of value.
    """
    if isinstance(c, int):
        return c | 0x60 if ord("A") <= c <= ord("Z") else c
    return chr(to_lower(ord(c)))


def lower_string(text):
    """Lower-case the ASCII letters of ``text``, leaving everything else."""
    return "".join(to_lower(ch) for ch in text)


def split_tokens(text, delimiter):
    """Split ``text`` at every occurrence of a single-character delimiter.

    Empty tokens between adjacent delimiters and after a trailing delimiter
    are kept.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    return text.split(delimiter)


def bounded_concat(dest, src, limit):
    """Append ``src`` to ``dest`` so the result holds at most ``limit`` characters.

    When ``dest`` is already longer than ``limit`` the remaining count wraps
    around as a 16-bit counter would, and the whole of ``src`` is appended.
    """
    room = min(len(dest) + len(src), limit) - len(dest)
    if room < 0:
        room = len(src)
    return dest + src[:room]


def compare_bytes(a, b, n):
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of unequal bytes, or 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if len(a) < n or len(b) < n:
        raise ValueError("both inputs must hold at least n bytes")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def span(text, accept):
    """Length of the leading run of ``text`` made only of characters in ``accept``."""
    count = 0
    for ch in text:
        if ch not in accept:
            break
        count += 1
    return count


def cspan(text, reject):
    """Length of the leading run of ``text`` with no character from ``reject``."""
    for index, ch in enumerate(text):
        if ch in reject:
            return index
    return len(text)


def find_char(text, ch):
    """Index of the first ``ch`` in ``text``, or None.

    A NUL character is never found.
    """
    if ch == "\0":
        return None
    index = text.find(ch)
    return None if index < 0 else index


def is_printable(ch):
    """True unless ``ch`` is a newline or NUL (string or character code)."""
    if isinstance(ch, int):
        return ch not in (0, ord("\n"))
    return ch not in ("\0", "\n", "")