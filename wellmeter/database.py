"""SQLite storage for the well, depth and tension settings."""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import asdict, dataclass, field, fields
from os import PathLike
from typing import Any, ClassVar, TypeVar

from wellmeter.depth import Depth
from wellmeter.depthsafe import DepthSafe
from wellmeter.home import Home
from wellmeter.tensiometer import Tensiometer
from wellmeter.tensionsafe import TensionSafe
from wellmeter.wellparameter import WellParameter

log = logging.getLogger(__name__)

DEFAULT_FILENAME = "DVTT.db"


class DatabaseError(Exception):
    """Raised when the database cannot be opened, read or written."""


class RecordNotFoundError(DatabaseError):
    """Raised when a settings table holds no row."""


def _column(default: Any, name: str) -> Any:
    return field(default=default, metadata={"column": name})


@dataclass
class _Record:
    TABLE: ClassVar[str] = ""

    id: int = 0


@dataclass
class WellParameterRecord(_Record):
    """Row of the ``wellparameter`` table."""

    TABLE: ClassVar[str] = "wellparameter"

    well_number: str = _column("", "wellNumber")
    area_block: str = _column("", "areaBlock")
    well_type: int = _column(0, "wellType")
    well_depth: str = _column("", "wellDepth")
    harness_weight: str = _column("", "harnessWeight")
    sensor_weight: str = _column("", "sensorWeight")
    harness_type: int = _column(0, "harnessType")
    harness_force: str = _column("", "harnessForce")
    tension_unit: int = _column(0, "tensionUnit")
    work_type: int = _column(0, "workType")
    user_name: str = _column("", "userName")
    operator_type: str = _column("", "operatorType")


@dataclass
class DepthSetRecord(_Record):
    """Row of the ``depthset`` table."""

    TABLE: ClassVar[str] = "depthset"

    target_layer_depth: int = _column(0, "targetLayerDepth")
    depth_orientation: int = _column(0, "depthOrientation")
    meter_depth: int = _column(0, "meterDepth")
    depth_calculate_type: int = _column(0, "depthCalculateType")
    code_option: int = _column(0, "codeOption")
    pulse: int = _column(0, "pulse")


@dataclass
class DepthSafeRecord(_Record):
    """Row of the ``depthsafe`` table."""

    TABLE: ClassVar[str] = "depthsafe"

    depth_preset: int = _column(0, "depthPreset")
    well_warning: int = _column(0, "wellWarnig")
    brake: int = _column(0, "brake")
    velocity_limit: int = _column(0, "velocityLimit")
    depth_warning: int = _column(0, "depthWarning")
    total_depth: int = _column(0, "totalDepth")
    depth_brake: int = _column(0, "depthBrake")
    depth_velocity_limit: int = _column(0, "depthVelocityLimit")


@dataclass
class TensionSafeRecord(_Record):
    """Row of the ``tensionsafe`` table."""

    TABLE: ClassVar[str] = "tensionsafe"

    well_type: str = _column("", "wellType")
    max_tension: int = _column(0, "maxTension")
    weak_force: str = _column("", "weakForce")
    tension_safe_factor: str = _column("", "tensionSafeFactor")


@dataclass
class TensionSetRecord(_Record):
    """Row of the ``tensionset`` table."""

    TABLE: ClassVar[str] = "tensionset"

    k_value: int = _column(0, "kValue")
    tension_unit: int = _column(0, "tensionUnit")


_R = TypeVar("_R", bound=_Record)

_SETTINGS_RECORDS: tuple[type[_Record], ...] = (
    WellParameterRecord,
    DepthSetRecord,
    DepthSafeRecord,
    TensionSafeRecord,
    TensionSetRecord,
)

_TENSIOMETER_SCHEMA = """
CREATE TABLE IF NOT EXISTS tensiometer (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    tensiometerNumber TEXT NOT NULL DEFAULT '',
    tensiometerType INTEGER NOT NULL DEFAULT 0,
    tensiometerRange INTEGER NOT NULL DEFAULT 0,
    tensiometerSignal INTEGER NOT NULL DEFAULT 0
)
"""


def _to_int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, float):
        return int(value + 0.5) if value >= 0 else int(value - 0.5)
    if isinstance(value, bytes):
        value = value.decode("utf-8", "replace")
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return int(value)


def _to_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", "replace")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _columns(record_cls: type[_Record]) -> list[tuple[str, str, Any]]:
    """(field name, column name, converter) for every field of a record type."""
    result = []
    for f in fields(record_cls):
        converter = _to_int if isinstance(f.default, int) else _to_str
        result.append((f.name, f.metadata.get("column", f.name), converter))
    return result


class MeteringDatabase:
    """The settings database; each settings table holds a single row."""

    def __init__(self, path: str | PathLike[str] = DEFAULT_FILENAME) -> None:
        self.path = path
        try:
            self._conn: sqlite3.Connection | None = sqlite3.connect(
                path, isolation_level=None
            )
        except sqlite3.Error as exc:
            raise DatabaseError(f"cannot open database {path!s}: {exc}") from exc
        self._conn.row_factory = sqlite3.Row
        log.debug("database path: %s", path)

    def __enter__(self) -> MeteringDatabase:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise DatabaseError("Database is not open")
        return self._conn

    def create_schema(self) -> None:
        """Create any missing table and give each settings table its row 1."""
        with self.transaction() as conn:
            for record_cls in _SETTINGS_RECORDS:
                definitions = []
                for _, column, converter in _columns(record_cls):
                    if column == "id":
                        definitions.append("id INTEGER PRIMARY KEY")
                    elif converter is _to_int:
                        definitions.append(f"{column} INTEGER NOT NULL DEFAULT 0")
                    else:
                        definitions.append(f"{column} TEXT NOT NULL DEFAULT ''")
                conn.execute(
                    f"CREATE TABLE IF NOT EXISTS {record_cls.TABLE} "
                    f"({', '.join(definitions)})"
                )
                conn.execute(f"INSERT OR IGNORE INTO {record_cls.TABLE} (id) VALUES (1)")
            conn.execute(_TENSIOMETER_SCHEMA)

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Run the block in a transaction: commit on success, roll back on error."""
        conn = self.connection
        try:
            conn.execute("BEGIN")
        except sqlite3.Error as exc:
            raise DatabaseError(f"failed to start transaction: {exc}") from exc
        try:
            yield conn
        except sqlite3.Error as exc:
            conn.execute("ROLLBACK")
            raise DatabaseError(str(exc)) from exc
        except BaseException:
            conn.execute("ROLLBACK")
            raise
        try:
            conn.execute("COMMIT")
        except sqlite3.Error as exc:
            raise DatabaseError(f"failed to commit transaction: {exc}") from exc

    def close(self) -> None:
        """Close the connection; closing twice does nothing."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            log.debug("database closed")

    def _load(self, record_cls: type[_R]) -> _R:
        try:
            row = self.connection.execute(
                f"SELECT * FROM {record_cls.TABLE} LIMIT 1"
            ).fetchone()
        except sqlite3.Error as exc:
            raise DatabaseError(f"load failed: {exc}") from exc
        if row is None:
            raise RecordNotFoundError(f"no data found in {record_cls.TABLE} table")
        keys = set(row.keys())
        values = {
            name: converter(row[column] if column in keys else None)
            for name, column, converter in _columns(record_cls)
        }
        return record_cls(**values)

    def _update(self, record: _Record) -> None:
        columns = [(name, column) for name, column, _ in _columns(type(record))]
        assignments = ", ".join(f"{col} = :{col}" for _, col in columns if col != "id")
        data = asdict(record)
        params = {column: data[name] for name, column in columns}
        with self.transaction() as conn:
            conn.execute(
                f"UPDATE {record.TABLE} SET {assignments} WHERE id = :id", params
            )
        log.debug("%s update successful", record.TABLE)

    def load_data_from_database(self) -> dict[str, _Record]:
        """Load every settings table into the screens; return what was loaded."""
        loaders = (
            self.load_well_parameter,
            self.load_depth_set,
            self.load_depth_safe,
            self.load_tension_safe,
            self.load_tension_set,
        )
        loaded: dict[str, _Record] = {}
        for loader in loaders:
            try:
                record = loader()
            except DatabaseError as exc:
                log.warning("failed to load from database: %s", exc)
                continue
            loaded[record.TABLE] = record
        return loaded

    def load_well_parameter(self) -> WellParameterRecord:
        """Read the well parameters and show them on the well parameter screen."""
        record = self._load(WellParameterRecord)
        wp = WellParameter.instance()
        wp.well_number = record.well_number
        wp.area_block = record.area_block
        wp.well_type = record.well_type
        wp.well_depth = record.well_depth
        wp.harness_weight = record.harness_weight
        wp.sensor_weight = record.sensor_weight
        wp.harness_type = record.harness_type
        wp.harness_force = record.harness_force
        wp.tension_unit = record.tension_unit
        wp.work_type = record.work_type
        wp.user_name = record.user_name
        wp.operator_type = record.operator_type
        return record

    def update_well_parameter(self, record: WellParameterRecord) -> None:
        self._update(record)

    def update_well_parameter_from_instance(self) -> WellParameterRecord:
        """Store the well parameter screen's values as row 1."""
        wp = WellParameter.instance()
        record = WellParameterRecord(
            id=1,
            well_number=wp.well_number,
            area_block=wp.area_block,
            well_type=wp.well_type,
            well_depth=wp.well_depth,
            harness_weight=wp.harness_weight,
            sensor_weight=wp.sensor_weight,
            harness_type=wp.harness_type,
            harness_force=wp.harness_force,
            tension_unit=wp.tension_unit,
            work_type=wp.work_type,
            user_name=wp.user_name,
            operator_type=wp.operator_type,
        )
        log.debug("updating record %r", record)
        self.update_well_parameter(record)
        return record

    def load_depth_set(self) -> DepthSetRecord:
        """Read the depth settings into the depth screen and the home pulse count."""
        record = self._load(DepthSetRecord)
        depth = Depth.instance()
        depth.target_layer_depth = record.target_layer_depth
        depth.depth_orientation = record.depth_orientation
        depth.meter_depth = record.meter_depth
        depth.depth_calculate_type = record.depth_calculate_type
        depth.code_option = record.code_option
        Home.instance().pulse = record.pulse
        return record

    def update_depth_set(self, record: DepthSetRecord) -> None:
        self._update(record)

    def update_depth_set_from_instance(self) -> DepthSetRecord:
        """Store the depth screen's values and the home pulse count as row 1."""
        depth = Depth.instance()
        record = DepthSetRecord(
            id=1,
            target_layer_depth=depth.target_layer_depth,
            depth_orientation=depth.depth_orientation,
            meter_depth=depth.meter_depth,
            depth_calculate_type=depth.depth_calculate_type,
            code_option=depth.code_option,
            pulse=Home.instance().pulse,
        )
        self.update_depth_set(record)
        return record

    def load_depth_safe(self) -> DepthSafeRecord:
        """Read the depth safety limits into the depth safety screen."""
        record = self._load(DepthSafeRecord)
        ds = DepthSafe.instance()
        ds.depth_preset = record.depth_preset
        ds.well_warning = record.well_warning
        ds.brake = record.brake
        ds.velocity_limit = record.velocity_limit
        ds.depth_warning = record.depth_warning
        ds.total_depth = record.total_depth
        ds.depth_brake = record.depth_brake
        ds.depth_velocity_limit = record.depth_velocity_limit
        return record

    def update_depth_safe(self, record: DepthSafeRecord) -> None:
        self._update(record)

    def update_depth_safe_from_instance(self) -> DepthSafeRecord:
        """Store the depth safety screen's values as row 1."""
        ds = DepthSafe.instance()
        record = DepthSafeRecord(
            id=1,
            depth_preset=ds.depth_preset,
            well_warning=ds.well_warning,
            brake=ds.brake,
            velocity_limit=ds.velocity_limit,
            depth_warning=ds.depth_warning,
            total_depth=ds.total_depth,
            depth_brake=ds.depth_brake,
            depth_velocity_limit=ds.depth_velocity_limit,
        )
        self.update_depth_safe(record)
        return record

    def load_tension_safe(self) -> TensionSafeRecord:
        """Read the tension safety settings into their screen and the home limit."""
        record = self._load(TensionSafeRecord)
        ts = TensionSafe.instance()
        ts.well_type = record.well_type
        Home.instance().max_tension = record.max_tension
        ts.weak_force = record.weak_force
        ts.tension_safe_factor = record.tension_safe_factor
        return record

    def update_tension_safe(self, record: TensionSafeRecord) -> None:
        self._update(record)

    def update_tension_safe_from_instance(self) -> TensionSafeRecord:
        """Store the tension safety values and the home tension limit as row 1."""
        ts = TensionSafe.instance()
        record = TensionSafeRecord(
            id=1,
            well_type=ts.well_type,
            max_tension=Home.instance().max_tension,
            weak_force=ts.weak_force,
            tension_safe_factor=ts.tension_safe_factor,
        )
        self.update_tension_safe(record)
        return record

    def load_tension_set(self) -> TensionSetRecord:
        """Read the K value into the home screen and the units into the tensiometer."""
        record = self._load(TensionSetRecord)
        Home.instance().k_value = record.k_value
        Tensiometer.instance().tension_units = record.tension_unit
        return record

    def update_tension_set(self, record: TensionSetRecord) -> None:
        self._update(record)

    def update_tension_set_from_instance(self) -> TensionSetRecord:
        """Store the home K value and the tensiometer units as row 1."""
        record = TensionSetRecord(
            id=1,
            k_value=Home.instance().k_value,
            tension_unit=Tensiometer.instance().tension_units,
        )
        self.update_tension_set(record)
        return record