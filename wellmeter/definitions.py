"""Shared enumerations and the system information record."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass, fields
from enum import IntEnum
from typing import ClassVar

SYSINFO_SIZE = 16
MAC_ADDR_SIZE = 18


class UserLevel(IntEnum):
    """Access levels of the signed-in user."""

    EXECUTIVE = 1
    SUPERVISOR = 2
    TECHNICIAN = 3
    OPERATOR = 4


class GraphAxis(IntEnum):
    """Quantities that can be plotted on a sensor graph axis."""

    NONE = -1
    DEPTH = 0
    VELOCITY = 1
    TENSIONS = 2
    TENSION_INCREMENT = 3
    TIME = 4
    TOTAL = 5


class RequestId(IntEnum):
    """Message identifiers exchanged with the controller."""

    HEARTBEAT = 0
    GET_USER_PASSWORD = 1
    SET_USER_PASSWORD = 2
    GET_USER_DETAILS = 3
    GET_PASSCODE_VALIDATE = 4
    GET_BASIC_RECIPE_INFO = 5
    GET_WELD_RECIPE_LIST = 6
    GET_SYSTEM_INFORMATION = 7


class VoiceException(IntEnum):
    """Conditions announced by a voice prompt."""

    WELL_HEAD = 0
    TARGET_CLOSE = 1
    EXCEED_VELOCITY = 2
    LOCKED = 3
    BLOCKED = 4
    TENSION = 5
    SURFACE_CLOSE = 6
    ENCODER_1 = 7
    ENCODER_2 = 8


_TEXT_SIZES = {
    "model_name": SYSINFO_SIZE,
    "version_sc": SYSINFO_SIZE,
    "version_pc": SYSINFO_SIZE,
    "version_ac": SYSINFO_SIZE,
    "ps_assembly_number": SYSINFO_SIZE,
    "actuator_assembly": SYSINFO_SIZE,
    "stack_assembly": SYSINFO_SIZE,
    "ps_mac_id": MAC_ADDR_SIZE,
    "ps_ip": SYSINFO_SIZE,
    "date_time": 2 * SYSINFO_SIZE,
}

# Little-endian with the padding a C compiler puts between and after the fields.
_LAYOUT = struct.Struct(
    "<6iH2xi3B"
    + "".join(f"{size}s" for size in _TEXT_SIZES.values())
    + "x2H2x"
)


@dataclass
class SystemInfo:
    """Power supply and actuator information reported by the controller."""

    SIZE: ClassVar[int] = _LAYOUT.size

    ps_life_counter: int = 0
    actuator_life_counter: int = 0
    general_alarm_counter: int = 0
    overload_alarm_counter: int = 0
    actuator_overloads: int = 0
    actuator_stroke_length: int = 0
    ps_frequency: int = 0
    ps_watt: int = 0
    calibration_status: int = 0
    ps_type: int = 0
    actuator_type: int = 0
    model_name: str = ""
    version_sc: str = ""
    version_pc: str = ""
    version_ac: str = ""
    ps_assembly_number: str = ""
    actuator_assembly: str = ""
    stack_assembly: str = ""
    ps_mac_id: str = ""
    ps_ip: str = ""
    date_time: str = ""
    crc_sc: int = 0
    crc_ac: int = 0

    def to_bytes(self) -> bytes:
        """Pack the record into its fixed-size binary layout."""
        values = []
        for f, value in zip(fields(self), astuple(self)):
            size = _TEXT_SIZES.get(f.name)
            if size is not None:
                encoded = value.encode("latin-1")
                if len(encoded) > size:
                    raise ValueError(f"{f.name} is longer than {size} bytes")
                value = encoded
            values.append(value)
        try:
            return _LAYOUT.pack(*values)
        except struct.error as exc:
            raise ValueError(str(exc)) from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> SystemInfo:
        """Unpack a record from its fixed-size binary layout."""
        if len(data) != _LAYOUT.size:
            raise ValueError(f"expected {_LAYOUT.size} bytes, got {len(data)}")
        values = []
        for f, value in zip(fields(cls), _LAYOUT.unpack(data)):
            if f.name in _TEXT_SIZES:
                value = value.split(b"\0", 1)[0].decode("latin-1")
            values.append(value)
        return cls(*values)