"""Writing scaled decimal values to pairs of Modbus registers."""

from __future__ import annotations

import logging
import math
import struct
from typing import Protocol, Sequence

log = logging.getLogger(__name__)

_FLOAT32 = struct.Struct("<f")


class RegisterWriter(Protocol):
    def write_register(self, address: int, values: Sequence[int]) -> None: ...


def _single(value: float) -> float:
    try:
        return _FLOAT32.unpack(_FLOAT32.pack(value))[0]
    except (OverflowError, struct.error) as exc:
        raise ValueError(f"value out of range: {value!r}") from exc


def split_scaled(value: str | float, scale: float = 100.0) -> tuple[int, int]:
    """Scale ``value`` in single precision, truncate it and split it into
    its high and low 16-bit register words."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"invalid float string: {value!r}") from None
    product = _single(_single(number) * _single(scale))
    if not math.isfinite(product):
        raise ValueError(f"value out of range: {value!r}")
    scaled = int(product)
    return (scaled >> 16) & 0xFFFF, scaled & 0xFFFF


class ModbusUtils:
    """Sends scaled values through a Modbus client once one is set."""

    def __init__(self, client: RegisterWriter | None = None) -> None:
        self.client = client

    def set_modbus_client(self, client: RegisterWriter | None) -> None:
        self.client = client

    def write_scaled_value(
        self, value: str | float, address: int, scale: float = 100.0
    ) -> None:
        """Write ``value`` times ``scale`` to ``address`` and ``address + 1``.

        Does nothing while no client is set.
        """
        if self.client is None:
            return
        high, low = split_scaled(value, scale)
        self.client.write_register(address, [high, low])