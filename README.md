# wellmeter

`wellmeter` holds the live state and the stored settings of a wireline depth
and tension metering display: depth, speed and tension readings, depth and
tension safety limits, well parameters, the list of tension sensors, and the
SQLite storage that keeps the settings between runs. It has no dependencies
beyond the Python standard library (Python 3.10 or later).

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Observable state

`wellmeter.observable` provides three building blocks:

- `Signal` — a list of callables; `connect(slot)` attaches one (and returns
  it, so it works as a decorator), `disconnect(slot)` detaches it (raising
  `ValueError` if it was never connected), and `emit(*args)` calls every slot
  in connection order.
- `NotifyProperty(default, kind)` — a descriptor that converts each assigned
  value with `kind` (for example `int` or `str`) and emits the owner's
  `<name>_changed` signal only when the stored value really changes.
- `Observable` — a base class that gives every `NotifyProperty` of a subclass
  its own `<name>_changed` signal and its default value.

```python
from wellmeter.home import Home

home = Home.instance()
home.depth_changed.connect(lambda: print("depth is now", home.depth))
home.depth = 1250   # prints once
home.depth = 1250   # same value, no signal
```

The screen state objects are:

| Class | Module | Shared through `instance()` |
| --- | --- | --- |
| `Home` | `wellmeter.home` | yes |
| `Depth`, `DepthMeter` | `wellmeter.depth` | yes |
| `DepthSafe` | `wellmeter.depthsafe` | yes |
| `AutoTestSpeed` | `wellmeter.autotestspeed` | yes |
| `Tensiometer` | `wellmeter.tensiometer` | yes |
| `TensionSafe` | `wellmeter.tensionsafe` | yes |
| `WellParameter` | `wellmeter.wellparameter` | yes |
| `Network` | `wellmeter.network` | no, create your own |
| `RS232` | `wellmeter.rs232` | no, create your own |

`TensionSafe` keeps all its values as text, starting at `"0"`.

## Stored settings

`wellmeter.database.MeteringDatabase` opens an SQLite file (by default
`DVTT.db`) holding five single-row settings tables, each read and written as
a dataclass record: `WellParameterRecord`, `DepthSetRecord`,
`DepthSafeRecord`, `TensionSafeRecord` and `TensionSetRecord`.

- `create_schema()` creates any missing table, gives each settings table its
  row 1, and creates the `tensiometer` table.
- `load_<table>()` reads the row, copies it into the matching screen object
  and returns the record.
- `update_<table>(record)` writes a record over the row with its `id`.
- `update_<table>_from_instance()` builds row 1 from the screen objects'
  current values, writes it and returns it.
- `load_data_from_database()` loads every settings table, skips (and logs)
  those that fail, and returns the loaded records keyed by table name.
- `transaction()` is a context manager that commits on success and rolls
  back on error.

```python
from wellmeter.database import MeteringDatabase

with MeteringDatabase("meter.db") as db:
    db.create_schema()
    record = db.load_well_parameter()
    db.update_well_parameter_from_instance()
```

An empty settings table raises `RecordNotFoundError`; other storage
failures, or use after `close()`, raise `DatabaseError`.

## Tension sensors

`wellmeter.tensiometer_store.TensiometerStore` wraps a `MeteringDatabase` and
reads and writes rows of the `tensiometer` table as `TensiometerRecord`
values: `load(record_id)`, `insert(record)` (which sets the new `id`),
`update(record)` and `delete(record_id)` (both returning the number of rows
affected) and `load_all()`.

`wellmeter.tensiometer_manager.TensiometerManager` presents that list as a
row model. `data(index, role)` answers the roles in `Role` (`NUMBER`, `TYPE`,
`RANGE`, `SIGNAL`, and `INDEX`, which is the 1-based row number) and returns
`None` for a row out of range; `role_names()` maps each role to its display
name. `add_tensiometer`, `update_tensiometer`, `remove_tensiometer` and
`clear` change the database and the list together and emit the
`rows_inserted`, `data_changed`, `rows_removed` and `model_reset` signals.

## Register values

`wellmeter.modbus_utils.split_scaled(value, scale=100.0)` multiplies a
decimal value (a string such as `"12.34"` or a number) by `scale` in single
precision, truncates it, and returns the high and low 16-bit words. An
unparsable or out-of-range value raises `ValueError`.

`ModbusUtils` sends those two words to `address` through any client object
with a `write_register(address, values)` method; until a client is set with
`set_modbus_client`, `write_scaled_value` does nothing.

## Other definitions

`wellmeter.definitions` holds the enumerations `UserLevel`, `GraphAxis`,
`RequestId` and `VoiceException`, and the `SystemInfo` record, which packs to
and unpacks from its fixed-size little-endian binary layout with `to_bytes()`
and `SystemInfo.from_bytes(data)`.

`wellmeter.heartbeat.Heartbeat` holds one heartbeat status report. Two
heartbeats compare equal when their recipe, cycle and power values match;
`alarm_id` takes no part in the comparison, and `copy_from(other)` does not
copy it.

## What this package does not do

`wellmeter` is the state and storage layer only. It has no display or
screens, no command-line program, no serial Modbus client (you supply the
object that writes registers), no network link to a controller, no sensor
graphs and no voice prompt playback; the `VoiceException`, `GraphAxis` and
`RequestId` enumerations only name those values.