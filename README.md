# smdterm

Building blocks for a small telnet terminal client that reaches the
network through a serial XPort-style adapter. Everything is plain Python
with no dependencies outside the standard library.

## Installing

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Modules

### `smdterm.strutil`

Small string and byte helpers:

- `parse_u8`, `parse_u16`, `parse_u32` read a decimal string into an
  unsigned value of that width, wrapping on overflow. They do no
  validation: every character counts as `ord(ch) - ord('0')`.
- `int_to_str(n)` renders a signed 32-bit integer.
- `to_lower(c)` lower-cases an ASCII letter (string or character code);
  `lower_string(text)` does the same for a whole string.
- `split_tokens(text, delimiter)` splits at a single-character delimiter,
  keeping empty tokens.
- `bounded_concat(dest, src, limit)` appends so the result holds at most
  `limit` characters.
- `compare_bytes(a, b, n)` returns the difference of the first unequal
  byte pair within `n` bytes, or 0.
- `span`, `cspan` and `find_char` behave like `strspn`, `strcspn` and
  `strchr` (`find_char` returns an index or `None`).
- `is_printable(ch)` is true for anything but a newline or NUL.

### `smdterm.formatting`

`format_bounded(fmt, size, *args)` is a printf-style formatter with an
output budget of `size`. It supports the conversions `c s p x X n u d i`,
the flags `- + space 0`, field width and precision (either may be `*`)
and ignores the length modifiers `h l L`. Other conversion characters,
`%` included, produce no output. For `%n` pass a mutable sequence; its
first item is set to the number of characters written so far.

    >>> from smdterm.formatting import format_bounded
    >>> format_bounded("%5d|%-4s|%x", 64, 42, "ab", 255)
    '   42|ab  |ff'

### `smdterm.vdp`

VRAM layout constants and helpers for the window plane:
`window_width_command` and `window_height_command` build the register
writes for the window size, `text_tiles(text, x, y)` gives the UI-font
tile indices for a string clipped to 40 columns, `clear_area_rows`
gives the `(row, column, tiles)` writes that fill a rectangle clipped to
the 64x32 plane, and `sprite_address(index)` gives a sprite's entry in
the sprite attribute table (index 0-79, `ValueError` otherwise).

### `smdterm.lfsutil`

The flash filesystem's helpers on unsigned 32-bit words: `crc32(crc, data)`
(reflected CRC-32 with no initial or final inversion), `npw2`, `ctz`
(raises for zero), `popcount`, `align_down`, `align_up`, `scmp`, and the
byte-order conversions `from_le32`, `to_le32`, `from_be32`, `to_be32`
for a big-endian host.

### `smdterm.clock`

- `seconds_to_datetime(seconds, epoch_start)` returns a `DateTime`. The
  time of day is exact; the date uses average month and year lengths and
  can be off by a day or so.
- `format_full`, `format_date` (`D-M-YYYY`) and `format_time`
  (`HH:MM:SS`).
- `SystemClock(pal, timezone, epoch_start)`: `tick()` advances one video
  frame (a second every 50 frames on PAL, 60 otherwise), `set_datetime`
  sets wall time from UTC seconds plus the time zone,
  `seconds_since_sync()` reports the time since it was set, and
  `sync(fetch, server=None)` calls `fetch(address)` and sets the clock
  from the first four received bytes (big-endian seconds). `sync`
  returns `False` without fetching if the clock was set less than ten
  seconds ago and raises `ConnectionError` on a short reply.

### `smdterm.elf`

`ElfHeader.from_bytes`, `ProgramHeader.from_bytes`, `check_file` and
`check_supported` (32-bit, big-endian, 68000, relocatable or executable),
and `load_process(data)`, which returns `(entry, image)` for the first
program segment. Every failure raises `ElfError` with a message naming
the problem.

### `smdterm.varlist` and `smdterm.config`

`default_settings()` returns a `Settings` holding the terminal's saved
variables (`username`, `quitstr`, `timezone`, `timeserver`, `rtime`,
`ctime`, `dtime`, ...) in save order. Each is a `Variable` with a
`VarType`; integer values are truncated to their byte, word or long
width. `Settings` offers `get`, `set`, `get_env` (value as text, or
`None` for an unknown name), `variable`, iteration and `in`.

`encode_config(settings)` produces the binary save format: the magic
`SMDT\0`, version 3 as a big-endian word, then each value (big-endian
integers of their width, NUL-terminated Latin-1 strings).
`decode_config(settings, data)` reads it back, changing nothing and
raising `ConfigError` when the data is invalid. `save_config` and
`load_config` do the same with a file, by default
`/system/smdt_cfg.bin`.

    from smdterm.varlist import default_settings
    from smdterm.config import encode_config, decode_config

    settings = default_settings()
    settings.set("username", "guest")
    restored = decode_config(default_settings(), encode_config(settings))
    assert restored.get("username") == "guest"

### `smdterm.keys` and `smdterm.telnet_input`

`Key` holds PS/2 set 2 scan codes (extended keys carry `0x100`) and
`KeyState` the key states. `encode_key(key, modes)` returns a `KeyOutput`
describing what a key press does under the current `TerminalModes`:
bytes to send now, bytes to add to the line buffer and whether to
transmit it, whether to drop the last buffered byte, whether to erase
locally and whether to redraw the cursor. Cursor keys, Home and End honour
DECCKM; Return follows LINEMODE EDIT and newline conversion; Backspace
sends ^H or DEL. `tty_modes()` gives the modes for a raw serial TTY.

### `smdterm.xport`

`XPortClient(transport, read_timeout, delay)` drives the adapter's
monitor mode: `initialize`, `enter_monitor_mode`, `exit_monitor_mode`,
`connect(host)`, `get_ip()` and `ping(ip)` (returns the five reply lines
as bytes). The transport must provide `write(data)`, `read_byte()` (a
byte or `None`), `pending()` (received bytes not yet read) and `flush()`.
`read_timeout` counts polls of the receive buffer and `delay` is a pause
in milliseconds after each command. Failures raise `XPortError`.

### `smdterm.devices`

`DevPort` names the controller ports (`registers` gives their I/O
addresses), `DeviceId` the bits a device uses, and `Device` models a
device's masked, shifted bits in the port's control and data bytes with
`mask`, `set_ctrl`, `clear_ctrl`, `set_data`, `clear_data`, `get_data`
and `slot`.

## Example

    from smdterm.clock import seconds_to_datetime, format_full
    from smdterm.telnet_input import encode_key, TerminalModes
    from smdterm.keys import Key

    print(format_full(seconds_to_datetime(0, 1970)))   # 1-1-1970 00:00:00
    print(encode_key(Key.UP, TerminalModes()).data)     # b'\x1b[A'

## What the package does not do

- There is no program to run and no command line; the modules are a
  library.
- It does not parse the telnet protocol or escape sequences arriving
  from the remote host, and it draws nothing: `smdterm.vdp` only computes
  register values, tile lists and addresses.
- It opens no network or serial connection itself. `XPortClient` needs a
  transport object supplied by the caller, and `SystemClock.sync` needs a
  `fetch` function.
- It does not implement the flash filesystem, only its CRC and bit
  helpers; configuration files are read and written on the host's own
  filesystem.
- `load_process` returns the segment bytes and entry address; it does not
  place them in memory or run them.