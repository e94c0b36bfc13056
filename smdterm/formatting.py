"""Bounded printf-style formatting following the terminal's own rules.

Supported conversions are ``c s p x X n u d i`` with the flags ``- + space 0``,
field width and precision (both may be ``*``) and the ignored length
modifiers ``h l L``. Any other conversion character, ``%`` included, is
swallowed and produces no output.
"""

_DIGITS = "0123456789"
_FLAGS = "-+ 0"
_POINTER_DIGITS = 8


def _s32(value):
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _u32(value):
    return value & 0xFFFFFFFF


def _char(value):
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c needs a single character")
        return value
    return chr(_s32(value) & 0xFF)


def _read_number(fmt, pos):
    value = 0
    while pos < len(fmt) and fmt[pos] in _DIGITS:
        value = value * 10 + ord(fmt[pos]) - ord("0")
        pos += 1
    return value, pos


class _Sink:
    """Collects output characters and tracks the remaining space budget."""

    def __init__(self, size):
        self.chars = []
        self.left = size

    def put(self, ch):
        self.chars.append(ch)
        self.left -= 1

    def pre_fill(self, width):
        while True:
            width -= 1
            if width <= 0:
                return width
            self.put(" ")
            if self.left <= 0:
                return width

    def fill_then_check(self, length, width):
        while True:
            more = length < width
            width -= 1
            if not more:
                return width
            self.put(" ")
            if self.left <= 0:
                return width

    def check_then_fill(self, length, width):
        while True:
            more = length < width
            width -= 1
            if not more or self.left <= 0:
                return width
            self.put(" ")

    def zero_fill(self, length, width):
        while True:
            more = length < width
            width -= 1
            if not more:
                return width
            self.chars.append("0")


def format_bounded(fmt, size, *args):
    """Format ``args`` according to ``fmt`` with an output budget of ``size``.

    For ``%n`` the argument must be a mutable sequence; its first item is set
    to the number of characters produced so far.
    """
    pending = iter(args)

    def take():
        try:
            return next(pending)
        except StopIteration:
            raise ValueError(f"format {fmt!r} needs more arguments") from None

    sink = _Sink(size)
    end = len(fmt)
    pos = 0

    while pos < end and sink.left > 0:
        ch = fmt[pos]
        if ch != "%":
            sink.put(ch)
            pos += 1
            continue

        left_align = plus_sign = space_sign = zero_pad = False
        pos += 1
        while pos < end and fmt[pos] in _FLAGS:
            flag = fmt[pos]
            if flag == "-":
                left_align = True
            elif flag == "+":
                plus_sign = True
            elif flag == " ":
                if not plus_sign:
                    space_sign = True
            else:
                zero_pad = True
            pos += 1

        sink.left -= 1
        width = precision = -1

        if pos < end and fmt[pos] in _DIGITS:
            width, pos = _read_number(fmt, pos)
        elif pos < end and fmt[pos] == "*":
            pos += 1
            sink.left -= 1
            width = _s32(take())
            if width < 0:
                width = -width
                left_align = True

        if pos < end and fmt[pos] == ".":
            pos += 1
            sink.left -= 1
            if pos < end and fmt[pos] in _DIGITS:
                precision, pos = _read_number(fmt, pos)
            elif pos < end and fmt[pos] == "*":
                pos += 1
                sink.left -= 1
                precision = _s32(take())
            precision = max(precision, 0)

        if pos < end and fmt[pos] in "hlL":
            pos += 1

        if left_align:
            zero_pad = False

        if pos >= end:
            break
        conv = fmt[pos]
        pos += 1

        if conv == "c":
            if not left_align:
                width = sink.pre_fill(width)
            sink.chars.append(_char(take()))
            sink.pre_fill(width)
            continue

        if conv == "s":
            text = take()
            if text is None:
                text = "<NULL>"
            length = len(text) if precision < 0 else min(len(text), precision)
            if not left_align:
                width = sink.fill_then_check(length, width)
            for out in text[:length]:
                sink.put(out)
                if sink.left <= 0:
                    break
            sink.fill_then_check(length, width)
            continue

        if conv == "n":
            take()[0] = len(sink.chars)
            continue

        negative = False
        if conv in ("p", "x", "X"):
            if conv == "p" and width == -1:
                width = _POINTER_DIGITS
                zero_pad = True
            digits = format(_u32(take()), "x" if conv == "x" else "X")
            plus_sign = False
        elif conv == "u":
            digits = str(_u32(take()))
            plus_sign = False
        elif conv in ("d", "i"):
            value = _s32(take())
            negative = value < 0
            digits = str(abs(value))
        else:
            continue

        length = len(digits) if precision < 0 else min(len(digits), precision)

        if negative:
            sign = "-"
        elif plus_sign:
            sign = "+"
        elif space_sign:
            sign = " "
        else:
            sign = ""
        if sign:
            sink.put(sign)
            width -= 1

        if not left_align:
            if zero_pad:
                width = sink.zero_fill(length, width)
            else:
                width = sink.check_then_fill(length, width)

        for out in digits[:length]:
            sink.put(out)

        sink.check_then_fill(length, width)

    return "".join(sink.chars)