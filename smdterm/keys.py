"""Keyboard scan codes (PS/2 set 2) and key states."""

from enum import IntEnum


class KeyState(IntEnum):
    """State of a key in the input map."""

    NONE = 0x0
    DOWN = 0x1
    UP = 0x2


class Key(IntEnum):
    """Key codes; extended (0xE0-prefixed) keys carry 0x100."""

    F9 = 0x01
    F5 = 0x03
    F3 = 0x04
    F1 = 0x05
    F2 = 0x06
    F12 = 0x07
    F10 = 0x09
    F8 = 0x0A
    F6 = 0x0B
    F4 = 0x0C
    TAB = 0x0D
    LALT = 0x11
    LSHIFT = 0x12
    LCONTROL = 0x14
    Q = 0x15
    DIGIT_1 = 0x16
    Z = 0x1A
    S = 0x1B
    A = 0x1C
    W = 0x1D
    DIGIT_2 = 0x1E
    C = 0x21
    X = 0x22
    D = 0x23
    E = 0x24
    DIGIT_4 = 0x25
    DIGIT_3 = 0x26
    SPACE = 0x29
    V = 0x2A
    F = 0x2B
    T = 0x2C
    R = 0x2D
    DIGIT_5 = 0x2E
    N = 0x31
    B = 0x32
    H = 0x33
    G = 0x34
    Y = 0x35
    DIGIT_6 = 0x36
    M = 0x3A
    J = 0x3B
    U = 0x3C
    DIGIT_7 = 0x3D
    DIGIT_8 = 0x3E
    COMMA = 0x41
    K = 0x42
    I = 0x43  # noqa: E741
    O = 0x44  # noqa: E741
    DIGIT_0 = 0x45
    DIGIT_9 = 0x46
    PERIOD = 0x49
    FSLASH = 0x4A
    L = 0x4B
    P = 0x4D
    CAPSLOCK = 0x58
    RSHIFT = 0x59
    RETURN = 0x5A
    BACKSPACE = 0x66
    KP1_END = 0x69
    KP4_LEFT = 0x6B
    KP7_HOME = 0x6C
    KP0_INS = 0x70
    KP_DECIMAL = 0x71
    KP2_DOWN = 0x72
    KP5 = 0x73
    KP6_RIGHT = 0x74
    KP8_UP = 0x75
    ESCAPE = 0x76
    NUMLOCK = 0x77
    F11 = 0x78
    KP_ADD = 0x79
    KP3_PGDN = 0x7A
    KP_SUBTRACT = 0x7B
    KP_MULTIPLY = 0x7C
    KP9_PGUP = 0x7D
    SCROLLOCK = 0x7E
    F7 = 0x83
    SYSRQ = 0x84

    RALT = 0x111
    RCONTROL = 0x114
    LWIN = 0x11F
    RWIN = 0x127
    MENU = 0x12F
    POWER = 0x137
    SLEEP = 0x13F
    KP_DIVIDE = 0x14A
    KP_RETURN = 0x15A
    WAKE = 0x15E
    END = 0x169
    LEFT = 0x16B
    HOME = 0x16C
    INSERT = 0x170
    DELETE = 0x171
    DOWN = 0x172
    RIGHT = 0x174
    UP = 0x175
    PGDN = 0x17A
    PRTSCR = 0x17C
    PGUP = 0x17D
    BREAK = 0x17E