"""Storage of the tensiometer list in the settings database."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from typing import Any

from wellmeter.database import DatabaseError, MeteringDatabase, RecordNotFoundError

log = logging.getLogger(__name__)


@dataclass
class TensiometerRecord:
    """Row of the ``tensiometer`` table."""

    id: int = 0
    tensiometer_number: str = ""
    tensiometer_type: int = 0
    tensiometer_range: int = 0
    tensiometer_signal: int = 0


def _as_int(value: Any) -> int:
    if value is None:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", "replace")
    return str(value)


def _from_row(row: sqlite3.Row) -> TensiometerRecord:
    return TensiometerRecord(
        id=_as_int(row["id"]),
        tensiometer_number=_as_str(row["tensiometerNumber"]),
        tensiometer_type=_as_int(row["tensiometerType"]),
        tensiometer_range=_as_int(row["tensiometerRange"]),
        tensiometer_signal=_as_int(row["tensiometerSignal"]),
    )


def _params(record: TensiometerRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "tensiometerNumber": record.tensiometer_number,
        "tensiometerType": record.tensiometer_type,
        "tensiometerRange": record.tensiometer_range,
        "tensiometerSignal": record.tensiometer_signal,
    }


class TensiometerStore:
    """Create, read, update and delete rows of the ``tensiometer`` table."""

    def __init__(self, database: MeteringDatabase) -> None:
        self.database = database

    def _fetch(self, sql: str, params: Any = ()) -> list[sqlite3.Row]:
        try:
            return self.database.connection.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(f"load tensiometer data failed: {exc}") from exc

    def load(self, record_id: int) -> TensiometerRecord:
        """Return the tensiometer with ``record_id``."""
        rows = self._fetch("SELECT * FROM tensiometer WHERE id = :id", {"id": record_id})
        if not rows:
            raise RecordNotFoundError(f"no tensiometer data found for id: {record_id}")
        return _from_row(rows[0])

    def insert(self, record: TensiometerRecord) -> TensiometerRecord:
        """Add ``record`` as a new row and set its ``id`` to the generated one."""
        with self.database.transaction() as conn:
            cursor = conn.execute(
                "INSERT INTO tensiometer "
                "(tensiometerNumber, tensiometerType, tensiometerRange, tensiometerSignal) "
                "VALUES (:tensiometerNumber, :tensiometerType, "
                ":tensiometerRange, :tensiometerSignal)",
                _params(record),
            )
            record.id = cursor.lastrowid or 0
        log.debug("inserted tensiometer data, id: %d", record.id)
        return record

    def update(self, record: TensiometerRecord) -> int:
        """Write ``record`` over the row with its id; return the rows changed."""
        with self.database.transaction() as conn:
            cursor = conn.execute(
                "UPDATE tensiometer SET "
                "tensiometerNumber = :tensiometerNumber, "
                "tensiometerType = :tensiometerType, "
                "tensiometerRange = :tensiometerRange, "
                "tensiometerSignal = :tensiometerSignal "
                "WHERE id = :id",
                _params(record),
            )
            changed = cursor.rowcount
        if changed == 0:
            log.debug("no tensiometer data updated (id not found): %d", record.id)
        return changed

    def delete(self, record_id: int) -> int:
        """Remove the row with ``record_id``; return the rows removed."""
        with self.database.transaction() as conn:
            cursor = conn.execute(
                "DELETE FROM tensiometer WHERE id = :id", {"id": record_id}
            )
            removed = cursor.rowcount
        if removed == 0:
            log.debug("no tensiometer data deleted (id not found): %d", record_id)
        return removed

    def load_all(self) -> list[TensiometerRecord]:
        """Return every tensiometer in table order."""
        records = [_from_row(row) for row in self._fetch("SELECT * FROM tensiometer")]
        log.debug("loaded %d tensiometer records", len(records))
        return records