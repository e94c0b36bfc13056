"""Bit, alignment, byte-order and CRC helpers used by the flash filesystem.

Values are treated as unsigned 32-bit words. Host byte order is big-endian,
as on the console the filesystem image is built for.
"""

_MASK = 0xFFFFFFFF
_SIGN = 0x80000000

_RTABLE = (
    0x00000000, 0x1DB71064, 0x3B6E20C8, 0x26D930AC,
    0x76DC4190, 0x6B6B51F4, 0x4DB26158, 0x5005713C,
    0xEDB88320, 0xF00F9344, 0xD6D6A3E8, 0xCB61B38C,
    0x9B64C2B0, 0x86D3D2D4, 0xA00AE278, 0xBDBDF21C,
)


def crc32(crc, data):
    """Continue a reflected CRC-32 (polynomial 0x04C11DB7) over ``data``.

    No initial or final inversion is applied; the caller chooses the seed.
    """
    crc &= _MASK
    for byte in memoryview(data).tobytes():
        crc = (crc >> 4) ^ _RTABLE[(crc ^ byte) & 0xF]
        crc = (crc >> 4) ^ _RTABLE[(crc ^ (byte >> 4)) & 0xF]
    return crc


def npw2(a):
    """Exponent of the smallest power of two that is at least ``a``.

    Values of 1 and below give 1, as the portable fallback does.
    """
    return max(((a - 1) & _MASK).bit_length(), 1)


def ctz(a):
    """Number of trailing zero bits in ``a``; undefined for zero, so it raises."""
    a &= _MASK
    if a == 0:
        raise ValueError("ctz is undefined for zero")
    return (a & -a).bit_length() - 1


def popcount(a):
    """Number of set bits in the 32-bit word ``a``."""
    return bin(a & _MASK).count("1")


def align_down(a, alignment):
    """Round ``a`` down to a multiple of ``alignment``."""
    a &= _MASK
    return a - a % alignment


def align_up(a, alignment):
    """Round ``a`` up to a multiple of ``alignment``."""
    return align_down((a + alignment - 1) & _MASK, alignment)


def scmp(a, b):
    """Signed distance from ``b`` to ``a``, ignoring 32-bit overflow."""
    diff = (a - b) & _MASK
    return diff - 0x100000000 if diff & _SIGN else diff


def from_le32(a):
    """Convert a little-endian 32-bit word to host (big-endian) order."""
    return int.from_bytes((a & _MASK).to_bytes(4, "little"), "big")


def to_le32(a):
    """Convert a host-order 32-bit word to little-endian order."""
    return from_le32(a)


def from_be32(a):
    """Convert a big-endian 32-bit word to host order (a no-op here)."""
    return a & _MASK


def to_be32(a):
    """Convert a host-order 32-bit word to big-endian order (a no-op here)."""
    return from_be32(a)