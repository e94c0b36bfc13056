"""Binary configuration file holding the values of all settings."""

from pathlib import Path

from .varlist import VarType

CONFIG_MAGIC = b"SMDT\0"
CONFIG_VERSION = 3
DEFAULT_CONFIG_PATH = "/system/smdt_cfg.bin"

_INT_SIZES = {VarType.BYTE: 1, VarType.WORD: 2, VarType.LONG: 4}
_MAX_STRING = 1024
_HEADER_SIZE = len(CONFIG_MAGIC) + 2


class ConfigError(Exception):
    """The configuration data is invalid or cannot be encoded."""


def encode_config(settings):
    """Serialise ``settings`` in save order: magic, version, then each value.

    Integers are big-endian of their storage width; strings are NUL-terminated.
    """
    out = bytearray(CONFIG_MAGIC)
    out += CONFIG_VERSION.to_bytes(2, "big")
    for var in settings:
        value = settings.get(var.name)
        size = _INT_SIZES.get(var.type)
        if size is not None:
            out += value.to_bytes(size, "big")
            continue
        if "\0" in value:
            raise ConfigError(f"setting {var.name!r} contains a NUL character")
        try:
            out += value.encode("latin-1")
        except UnicodeEncodeError as err:
            raise ConfigError(f"setting {var.name!r} cannot be stored: {err}") from None
        out.append(0)
    return bytes(out)


def decode_config(settings, data):
    """Read values from ``data`` into ``settings`` and return ``settings``.

    Only the first four magic bytes are checked. Nothing is changed if the
    data is invalid; ConfigError is raised instead.
    """
    data = bytes(data)
    if len(data) < _HEADER_SIZE:
        raise ConfigError("configuration data is truncated")
    magic = data[:4]
    version = int.from_bytes(data[5:7], "big")
    if magic != CONFIG_MAGIC[:4] or version != CONFIG_VERSION:
        raise ConfigError(f"save is invalid; magic = {magic!r} - version: {version}")

    values = {}
    offset = _HEADER_SIZE
    for var in settings:
        size = _INT_SIZES.get(var.type)
        if size is not None:
            chunk = data[offset:offset + size]
            if len(chunk) < size:
                raise ConfigError(f"configuration data ends inside {var.name!r}")
            values[var.name] = int.from_bytes(chunk, "big")
            offset += size
            continue
        end = data.find(b"\0", offset, offset + _MAX_STRING)
        if end < 0:
            raise ConfigError(f"unterminated string for {var.name!r}")
        values[var.name] = data[offset:end].decode("latin-1")
        offset = end + 1

    for name, value in values.items():
        settings.set(name, value)
    return settings


def save_config(settings, path=DEFAULT_CONFIG_PATH):
    """Write ``settings`` to the file at ``path``."""
    Path(path).write_bytes(encode_config(settings))


def load_config(settings, path=DEFAULT_CONFIG_PATH):
    """Load ``settings`` from the file at ``path``; OSError if it cannot be read."""
    return decode_config(settings, Path(path).read_bytes())