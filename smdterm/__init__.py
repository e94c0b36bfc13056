"""Building blocks for a serial-adapter telnet terminal client.

String and bounded-format helpers, display tile helpers, flash-filesystem
CRC and bit helpers, a frame-driven clock, ELF image checks, a settings
table with a binary save format, key-to-telnet encoding, network adapter
control and controller port device bits.
"""

__version__ = "0.31.0"