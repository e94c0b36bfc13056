"""Named, typed settings that the terminal saves and exposes as variables."""

from dataclasses import dataclass
from enum import IntEnum

from .clock import DEFAULT_EPOCH_START, DEFAULT_TIME_SERVER, DEFAULT_TIMEZONE


class VarType(IntEnum):
    """Storage type of a setting."""

    BYTE = 1
    WORD = 2
    LONG = 3
    SPTR = 4
    SARR = 5


_INT_MASKS = {
    VarType.BYTE: 0xFF,
    VarType.WORD: 0xFFFF,
    VarType.LONG: 0xFFFFFFFF,
}


@dataclass(frozen=True)
class Variable:
    """Description of one setting: its name, storage type and default value."""

    name: str
    type: VarType
    default: object = None

    def _coerce(self, value):
        mask = _INT_MASKS.get(self.type)
        if mask is not None:
            if not isinstance(value, int):
                raise TypeError(f"{self.name} takes an integer, not {type(value).__name__}")
            return value & mask
        if not isinstance(value, str):
            raise TypeError(f"{self.name} takes a string, not {type(value).__name__}")
        return value

    def _initial(self):
        if self.default is not None:
            return self._coerce(self.default)
        return 0 if self.type in _INT_MASKS else ""


class Settings:
    """An ordered set of settings with their current values.

    Integer values are truncated to the width of their storage type, as
    they would be when stored in a byte, word or long.
    """

    def __init__(self, variables):
        self._variables = {}
        self._values = {}
        for var in variables:
            if var.name in self._variables:
                raise ValueError(f"duplicate setting {var.name!r}")
            self._variables[var.name] = var
            self._values[var.name] = var._initial()

    def __iter__(self):
        return iter(self._variables.values())

    def __len__(self):
        return len(self._variables)

    def __contains__(self, name):
        return name in self._variables

    def variable(self, name):
        """The Variable named ``name``; raises KeyError if there is none."""
        try:
            return self._variables[name]
        except KeyError:
            raise KeyError(f"unknown setting {name!r}") from None

    def get(self, name):
        """Current value of the setting ``name``."""
        self.variable(name)
        return self._values[name]

    def set(self, name, value):
        """Set the setting ``name``, truncating integers to their storage width."""
        var = self.variable(name)
        self._values[name] = var._coerce(value)

    def get_env(self, name):
        """The value of ``name`` as text, or None if there is no such setting."""
        var = self._variables.get(name)
        if var is None:
            return None
        value = self._values[name]
        return str(value) if var.type in _INT_MASKS else value


_READ_TIMEOUT = 300000
_CONN_TIMEOUT = 500000
_DELAY_TIME = 500
_DEFAULT_DLM = 0x00
_DEFAULT_DLL = 0x01

_DEFAULT_VARIABLES = (
    Variable("hsoffset", VarType.BYTE),
    Variable("termtype", VarType.BYTE),
    Variable("baud", VarType.SARR),
    Variable("termcol", VarType.BYTE),
    Variable("qselbg", VarType.BYTE),
    Variable("qselfg", VarType.BYTE),
    Variable("custbg", VarType.WORD),
    Variable("custfg0", VarType.WORD),
    Variable("custfg1", VarType.WORD),
    Variable("listenport", VarType.LONG),
    Variable("kblayout", VarType.BYTE),
    Variable("quitstr", VarType.SARR),
    Variable("username", VarType.SARR),
    Variable("bhighcl", VarType.BYTE),
    Variable("bscreensaver", VarType.BYTE),
    Variable("ctime", VarType.LONG, _CONN_TIMEOUT),
    Variable("cursorcl", VarType.WORD),
    Variable("qselcrcl", VarType.BYTE),
    Variable("boldfont", VarType.BYTE),
    Variable("remoteenv", VarType.BYTE),
    Variable("rtime", VarType.LONG, _READ_TIMEOUT),
    Variable("dtime", VarType.LONG, _DELAY_TIME),
    Variable("dlm", VarType.BYTE, _DEFAULT_DLM),
    Variable("dll", VarType.BYTE, _DEFAULT_DLL),
    Variable("ircfont", VarType.BYTE),
    Variable("telnetfont", VarType.BYTE),
    Variable("termfont", VarType.BYTE),
    Variable("themeui", VarType.BYTE),
    Variable("timezone", VarType.BYTE, DEFAULT_TIMEZONE),
    Variable("timeserver", VarType.SARR, DEFAULT_TIME_SERVER),
    Variable("epoch", VarType.WORD, DEFAULT_EPOCH_START),
    Variable("ircjqmsg", VarType.BYTE),
    Variable("ircwrap", VarType.BYTE),
)


def default_settings():
    """A fresh Settings holding the terminal's saved variables in save order."""
    return Settings(_DEFAULT_VARIABLES)