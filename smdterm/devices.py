"""Controller port devices: which port bits a device owns and how it drives them."""

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple


class PortRegisters(NamedTuple):
    """I/O addresses of one controller port."""

    data: int
    ctrl: int
    serial_ctrl: int
    rx: int
    tx: int


class DevPort(IntEnum):
    """Controller port a device is assigned to."""

    NONE = 0
    PORT1 = 1
    PORT2 = 2
    PORT3 = 3

    @property
    def registers(self):
        """The I/O addresses of this port; ValueError for NONE."""
        try:
            return PORT_REGISTERS[self]
        except KeyError:
            raise ValueError("no port assigned") from None


PORT_REGISTERS = {
    DevPort.PORT1: PortRegisters(0xA10003, 0xA10009, 0xA10013, 0xA10011, 0xA1000F),
    DevPort.PORT2: PortRegisters(0xA10005, 0xA1000B, 0xA10019, 0xA10017, 0xA10015),
    DevPort.PORT3: PortRegisters(0xA10007, 0xA1000D, 0xA1001F, 0xA1001D, 0xA1001B),
}

DEVMODE_PARALLEL = 1
DEVMODE_SERIAL = 2

ICO_ID_UNKNOWN = 0x1F
ICO_KB_OK = 0x1C
ICO_JP_OK = 0x1E
ICO_ID_ERROR = 0x1D

DEV_MAX = 6

_BYTE = 0xFF


@dataclass
class DeviceId:
    """Identity of a device and the port pins it uses.

    ``bitmask`` lists the used bits before shifting; ``bitshift`` moves them
    to their place on the port. ``mode`` is parallel, serial or both.
    """

    name: str
    bitmask: int
    bitshift: int
    mode: int = DEVMODE_PARALLEL


@dataclass
class Device:
    """A device on a controller port with the port's control and data bytes."""

    id: DeviceId
    port: DevPort = DevPort.NONE
    ctrl: int = 0
    data: int = 0

    def mask(self):
        """The device's bits in their position on the port."""
        return (self.id.bitmask << self.id.bitshift) & _BYTE

    def _shifted(self, value):
        return ((value & self.id.bitmask) << self.id.bitshift) & _BYTE

    def set_ctrl(self, value):
        """Set pin directions of the device's bits (1 = output), keeping the rest."""
        self.ctrl = (self.ctrl & ~self.mask() & _BYTE) | self._shifted(value)

    def clear_ctrl(self):
        """Make all of the device's pins inputs."""
        self.ctrl &= ~self.mask() & _BYTE

    def set_data(self, value):
        """Drive the device's output pins.

        Bits outside the device's mask are taken from the control byte.
        """
        self.data = (self.ctrl & ~self.mask() & _BYTE) | self._shifted(value)

    def clear_data(self):
        """Drive the device's output pins low."""
        self.data &= ~self.mask() & _BYTE

    def get_data(self, bits):
        """Read the data byte masked by ``bits`` within the unshifted bitmask."""
        return self.data & (bits & self.id.bitmask)

    def slot(self):
        """Slot of the device on its port, from its bit position."""
        return self.id.bitshift >> 1