"""List model of the configured tensiometers."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any

from wellmeter.database import DatabaseError
from wellmeter.observable import Signal
from wellmeter.tensiometer_store import TensiometerRecord, TensiometerStore

log = logging.getLogger(__name__)

USER_ROLE = 0x0100


class Role(IntEnum):
    """Data roles a view can ask the tensiometer list for."""

    NUMBER = USER_ROLE + 1
    TYPE = USER_ROLE + 2
    RANGE = USER_ROLE + 3
    SIGNAL = USER_ROLE + 4
    INDEX = USER_ROLE + 100


_ROLE_NAMES = {
    Role.NUMBER: "SensorNumber",
    Role.TYPE: "SensorType",
    Role.RANGE: "SensorRange",
    Role.SIGNAL: "AnalogRange",
    Role.INDEX: "index",
}


class TensiometerManager:
    """The tensiometer list shown on screen, kept in step with the database."""

    def __init__(self, store: TensiometerStore) -> None:
        self.store = store
        self.rows_inserted = Signal()
        self.rows_removed = Signal()
        self.data_changed = Signal()
        self.model_reset = Signal()
        try:
            self._items: list[TensiometerRecord] = store.load_all()
        except DatabaseError as exc:
            log.warning("failed to load tensiometer data from database: %s", exc)
            self._items = []

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> tuple[TensiometerRecord, ...]:
        return tuple(self._items)

    def data(self, index: int, role: int) -> Any:
        """Value of ``role`` for row ``index``, or None if there is none."""
        if not 0 <= index < len(self._items):
            return None
        if role == Role.INDEX:
            return index + 1
        item = self._items[index]
        if role == Role.NUMBER:
            return item.tensiometer_number
        if role == Role.TYPE:
            return item.tensiometer_type
        if role == Role.RANGE:
            return item.tensiometer_range
        if role == Role.SIGNAL:
            return item.tensiometer_signal
        return None

    def role_names(self) -> dict[Role, str]:
        return dict(_ROLE_NAMES)

    def add_tensiometer(
        self, number: str, sensor_type: int, sensor_range: int, signal: int
    ) -> TensiometerRecord:
        """Store a new tensiometer and append it to the list."""
        record = self.store.insert(
            TensiometerRecord(
                id=0,
                tensiometer_number=number,
                tensiometer_type=sensor_type,
                tensiometer_range=sensor_range,
                tensiometer_signal=signal,
            )
        )
        row = len(self._items)
        self._items.append(record)
        self.rows_inserted.emit(row, row)
        return record

    def remove_tensiometer(self, index: int) -> None:
        """Delete the tensiometer at ``index``; an index out of range is ignored."""
        if not 0 <= index < len(self._items):
            return
        self.store.delete(self._items[index].id)
        del self._items[index]
        self.rows_removed.emit(index, index)

    def clear(self) -> None:
        """Delete every tensiometer from the database and the list."""
        for item in self._items:
            self.store.delete(item.id)
        self._items.clear()
        self.model_reset.emit()

    def update_tensiometer(
        self, index: int, number: str, sensor_type: int, sensor_range: int, signal: int
    ) -> None:
        """Change the tensiometer at ``index``; an index out of range is ignored."""
        if not 0 <= index < len(self._items):
            return
        record = TensiometerRecord(
            id=self._items[index].id,
            tensiometer_number=number,
            tensiometer_type=sensor_type,
            tensiometer_range=sensor_range,
            tensiometer_signal=signal,
        )
        self.store.update(record)
        self._items[index] = record
        self.data_changed.emit(index)