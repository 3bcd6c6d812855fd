"""Tx Identity register (``0x47``).

Holds the data sent in the Discover Identity ACK.  The register is wider
than most, so its fields are decoded directly from the raw bytes, with
bit ``n`` stored in byte ``n // 8`` at position ``n % 8``.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

ADDR = 0x47
"""Address of the Tx Identity register."""

LEN = 25
"""Length of the Tx Identity register, in bytes."""

DEFAULT = bytes(
    [
        0x06,  # Number Valid VDOs = 6
        0x51, 0x04,  # Vendor ID 0x451
        0x00,  # Reserved
        0xD5,  # host, device, UFP type 2, modal op, DFP type 2 (low bit)
        0x51, 0x04, 0x00, 0x00,  # Certification Test ID 0x451
        0x00, 0x00,  # BCD Device
        0x00, 0x00,  # USB Product ID
        0x00, 0x00, 0x00, 0x00,  # UFP1 VDO
        0x00, 0x00, 0x00, 0x00,  # Reserved
        0x00, 0x00, 0x00, 0x00,  # DFP1 VDO
    ]
)
"""Power-on contents of the Tx Identity register."""


def _check_range(data, msb: int, lsb: int) -> None:
    if lsb < 0 or msb < lsb:
        raise ValueError(f"invalid bit range {msb}..{lsb}")
    if msb >= len(data) * 8:
        raise ValueError(f"bit {msb} is beyond the {len(data)}-byte buffer")


def get_bits(data, msb: int, lsb: int) -> int:
    """Return bits ``msb`` down to ``lsb`` (inclusive) of ``data``."""
    _check_range(data, msb, lsb)
    width = msb - lsb + 1
    return (int.from_bytes(bytes(data), "little") >> lsb) & ((1 << width) - 1)


def set_bits(data: bytearray, msb: int, lsb: int, value: int) -> None:
    """Store ``value`` in bits ``msb`` down to ``lsb`` of ``data``, in place.

    Bits of ``value`` beyond the width of the range are ignored.
    """
    _check_range(data, msb, lsb)
    mask = ((1 << (msb - lsb + 1)) - 1) << lsb
    whole = int.from_bytes(bytes(data), "little")
    whole = (whole & ~mask) | ((int(value) << lsb) & mask)
    data[:] = whole.to_bytes(len(data), "little")


class ProductTypeDfp(Enum):
    """Product type of a Downstream Facing Port (bits 33-31)."""

    UNDEFINED_DFP = 0x0
    PD_USB_HUB = 0x1
    PD_USB_HOST = 0x2
    POWER_BRICK = 0x3
    AMC = 0x4
    RESERVED_5 = 0x5
    RESERVED_6 = 0x6
    RESERVED_7 = 0x7

    @classmethod
    def from_bits(cls, value: int) -> ProductTypeDfp:
        """Decode the low three bits of ``value``."""
        return cls(value & 0x7)

    def __int__(self) -> int:
        return self.value

    @property
    def is_reserved(self) -> bool:
        """True for values the specification reserves."""
        return self.value > 0x4


class ProductTypeUfp(Enum):
    """Product type of an Upstream Facing Port (bits 37-35)."""

    UNDEFINED_UFP = 0x0
    PD_USB_HUB = 0x1
    PD_USB_PERIPHERAL = 0x2
    PSD = 0x3
    RESERVED_4 = 0x4
    RESERVED_5 = 0x5
    RESERVED_6 = 0x6
    RESERVED_7 = 0x7

    @classmethod
    def from_bits(cls, value: int) -> ProductTypeUfp:
        """Decode the low three bits of ``value``."""
        return cls(value & 0x7)

    def __int__(self) -> int:
        return self.value

    @property
    def is_reserved(self) -> bool:
        """True for values the specification reserves."""
        return self.value > 0x3


class _Field:
    """A bit range of the register exposed as an attribute."""

    def __init__(
        self,
        msb: int,
        lsb: int,
        max_value: int,
        decode: Optional[Callable[[int], object]] = None,
    ) -> None:
        self.msb = msb
        self.lsb = lsb
        self.max_value = max_value
        self.decode = decode
        self.name = ""

    def __set_name__(self, owner, name: str) -> None:
        self.name = name

    def __get__(self, obj, owner=None):
        if obj is None:
            return self
        raw = get_bits(obj._data, self.msb, self.lsb)
        return self.decode(raw) if self.decode else raw

    def __set__(self, obj, value) -> None:
        raw = int(value)
        if not 0 <= raw <= self.max_value:
            raise ValueError(f"{self.name} must be in 0..={self.max_value:#x}, got {raw:#x}")
        set_bits(obj._data, self.msb, self.lsb, raw)


_U8 = 0xFF
_U16 = 0xFFFF
_U32 = 0xFFFF_FFFF


class TxIdentity:
    """The Tx Identity register, with its fields as attributes."""

    number_valid_vdos = _Field(2, 0, _U8)
    vendor_id = _Field(23, 8, _U16)
    product_type_dfp = _Field(33, 31, _U8, ProductTypeDfp.from_bits)
    modal_operation_supported = _Field(34, 34, 1, bool)
    product_type_ufp = _Field(37, 35, _U8, ProductTypeUfp.from_bits)
    usb_communication_capable_as_device = _Field(38, 38, 1, bool)
    usb_communication_capable_as_host = _Field(39, 39, 1, bool)
    certification_test_id = _Field(71, 40, _U32)
    bcd_device = _Field(87, 72, _U16)
    usb_product_id = _Field(103, 88, _U16)
    ufp1_vdo = _Field(135, 104, _U32)
    dfp1_vdo = _Field(199, 168, _U32)

    __hash__ = None  # mutable

    def __init__(self, data) -> None:
        if len(data) != LEN:
            raise ValueError(f"Tx Identity register is {LEN} bytes, got {len(data)}")
        self._data = bytearray(data)

    @classmethod
    def default(cls) -> TxIdentity:
        """The register with its power-on contents."""
        return cls(DEFAULT)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TxIdentity):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({bytes(self._data).hex()})"