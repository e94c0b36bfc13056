"""Translation of special keys into the bytes a telnet session sends."""

from dataclasses import dataclass, field
from enum import IntFlag

from .keys import Key

ESC = 0x1B
CR = 0x0D
LF = 0x0A
BS = 0x08
DEL = 0x7F


class LineMode(IntFlag):
    """Telnet LINEMODE submode flags."""

    NONE = 0
    EDIT = 1
    TRAPSIG = 2
    MODEACK = 4


@dataclass
class TerminalModes:
    """Negotiated terminal modes that change how keys are sent.

    ``newline_conv`` sends Return as a bare LF; ``backspace`` sends ^H
    instead of DEL and leaves erasing to the remote end.
    """

    decckm: bool = False
    line_mode: LineMode = LineMode.NONE
    newline_conv: bool = False
    backspace: bool = False
    echo: bool = False


@dataclass
class KeyOutput:
    """What pressing a key does.

    ``data`` is sent at once; ``buffered`` is appended to the line buffer,
    which is then transmitted if ``transmit`` is set. ``drop_buffered``
    removes the last buffered byte; ``local_backspace`` moves the cursor one
    cell left and blanks it; ``refresh_cursor`` redraws the cursor.
    """

    data: bytes = b""
    buffered: bytes = b""
    transmit: bool = False
    drop_buffered: bool = False
    local_backspace: bool = False
    refresh_cursor: bool = False
    _unused: tuple = field(default=(), repr=False, compare=False)


_CURSOR_FINALS = {
    Key.UP: b"A",
    Key.KP8_UP: b"A",
    Key.DOWN: b"B",
    Key.KP2_DOWN: b"B",
    Key.LEFT: b"D",
    Key.KP4_LEFT: b"D",
    Key.RIGHT: b"C",
    Key.KP6_RIGHT: b"C",
    Key.HOME: b"1~",
    Key.KP7_HOME: b"1~",
    Key.END: b"4~",
    Key.KP1_END: b"4~",
}


def tty_modes():
    """Modes for a raw serial TTY session: LF newlines, ^H, local echo."""
    return TerminalModes(
        decckm=False,
        line_mode=LineMode.NONE,
        newline_conv=True,
        backspace=True,
        echo=True,
    )


def encode_key(key, modes):
    """The KeyOutput for pressing ``key`` under ``modes``.

    Keys without a special meaning give an empty KeyOutput.
    """
    final = _CURSOR_FINALS.get(key)
    if final is not None:
        introducer = b"O" if modes.decckm else b"["
        return KeyOutput(data=bytes([ESC]) + introducer + final, refresh_cursor=True)

    if key == Key.DELETE:
        return KeyOutput(data=bytes([ESC, ord("["), DEL]))

    if key == Key.RETURN:
        if modes.line_mode & LineMode.EDIT:
            return KeyOutput(buffered=bytes([CR, LF]), transmit=True)
        if modes.newline_conv:
            return KeyOutput(data=bytes([LF]))
        return KeyOutput(data=bytes([CR, LF]))

    if key == Key.BACKSPACE:
        local = not modes.backspace
        if modes.line_mode & LineMode.EDIT:
            return KeyOutput(drop_buffered=True, local_backspace=local)
        if modes.backspace:
            return KeyOutput(data=bytes([BS]), local_backspace=local)
        return KeyOutput(data=bytes([DEL]), local_backspace=local)

    if key == Key.ESCAPE:
        return KeyOutput(data=bytes([ESC]))

    return KeyOutput()