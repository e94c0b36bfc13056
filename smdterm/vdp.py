"""Video memory layout and window-plane helpers for the terminal display."""

STATUS_TEXT = "SMDTC v0.31"
STATUS_TEXT_SHORT = "SMDTC"

# Tile indices (VRAM address / 32) of the graphics banks.
AVR_BGBLOCK = 0
AVR_CURSOR = 0x10
AVR_POINTER = 0x17
AVR_ICONS = 0x18
AVR_SCRSAV = 0x20
AVR_FONT0 = 0x40
AVR_FONT1 = 0x240
AVR_UI = 0x440

# VRAM addresses of the tables.
AVR_HSCROLL = 0xA000
AVR_SAT = 0xAC00
AVR_WINDOW = 0xB000
AVR_PLANE_A = 0xC000
AVR_PLANE_B = 0xE000

# Status bar icon columns.
ICO_POS_0 = 36
ICO_POS_1 = 37
ICO_POS_2 = 38
ICO_POS_3 = 39
ICO_NONE = 5

SPRITE_ID_CURSOR = 0
SPRITE_ID_SCRSAV = 1
SPRITE_ID_POINTER = 2

SPR_WIDTH_4x1 = 12
SPR_WIDTH_3x1 = 8
SPR_WIDTH_2x1 = 4
SPR_HEIGHT_1x4 = 3
SPR_HEIGHT_1x3 = 2
SPR_HEIGHT_1x2 = 1
SPR_SIZE_1x1 = 0

# Tiles for clearing the window plane.
TRM_CLEAR_WINDOW = AVR_UI
TRM_CLEAR_BG = AVR_UI + 0xBE
TRM_CLEAR_INVISIBLE = 0

_TEXT_COLUMNS = 40
_PLANE_COLUMNS = 64
_PLANE_ROWS = 32
_SPRITE_COUNT = 80
_SPRITE_ENTRY_SIZE = 8


def window_width_command(width, from_right):
    """VDP register 0x11 write that sets the window width and side."""
    return 0x9100 | (width & 0x7F) | (0x80 if from_right else 0)


def window_height_command(height, from_bottom):
    """VDP register 0x12 write that sets the window height and edge."""
    return 0x9200 | (height & 0x7F) | (0x80 if from_bottom else 0)


def text_tiles(text, x, y):
    """Tile indices for drawing ``text`` with the UI font at column ``x``, row ``y``.

    Text is clipped at the right edge of the 40-column screen; positions
    outside the screen produce no tiles.
    """
    if x >= _TEXT_COLUMNS or y >= _PLANE_ROWS:
        return []
    visible = text[: _TEXT_COLUMNS - x]
    return [AVR_UI + ord(ch) - 32 for ch in visible]


def clear_area_rows(x, y, width, height, tile):
    """Rows to write when filling a window rectangle with ``tile``.

    Each row is ``(row, column, tiles)``; the rectangle is clipped to the
    64x32 window plane.
    """
    if x >= _PLANE_COLUMNS or y >= _PLANE_ROWS:
        return []
    clipped_width = min(width, _PLANE_COLUMNS - x)
    clipped_height = min(height, _PLANE_ROWS - y)
    row_tiles = (tile,) * clipped_width
    return [(row, x, row_tiles) for row in range(y, y + clipped_height)]


def sprite_address(index):
    """VRAM address of sprite ``index`` (0-79) in the sprite attribute table."""
    if not 0 <= index < _SPRITE_COUNT:
        raise ValueError(f"sprite index {index} out of range")
    return AVR_SAT + index * _SPRITE_ENTRY_SIZE