"""Well condition parameters entered before a job."""

from __future__ import annotations

from typing import ClassVar

from wellmeter.observable import NotifyProperty, Observable


class WellParameter(Observable):
    """Well, cable and operator details for the current job."""

    _instance: ClassVar[WellParameter | None] = None

    well_number = NotifyProperty("", str)
    area_block = NotifyProperty("", str)
    well_type = NotifyProperty(0, int)
    well_depth = NotifyProperty("", str)
    harness_weight = NotifyProperty("", str)
    sensor_weight = NotifyProperty("", str)
    harness_type = NotifyProperty(0, int)
    harness_force = NotifyProperty("", str)
    tension_unit = NotifyProperty(0, int)
    work_type = NotifyProperty(0, int)
    user_name = NotifyProperty("", str)
    operator_type = NotifyProperty("", str)

    @classmethod
    def instance(cls) -> WellParameter:
        """Return the shared instance, creating it on first use."""
        if cls.__dict__.get("_instance") is None:
            cls._instance = cls()
        return cls._instance