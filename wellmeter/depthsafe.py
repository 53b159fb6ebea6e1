"""Depth safety limits for the well head and the well bottom."""

from __future__ import annotations

from typing import ClassVar

from wellmeter.observable import NotifyProperty, Observable


class DepthSafe(Observable):
    """Warning, brake and speed-limit depths near the surface and the bottom."""

    _instance: ClassVar[DepthSafe | None] = None

    depth_preset = NotifyProperty(0, int)
    well_warning = NotifyProperty(0, int)
    brake = NotifyProperty(0, int)
    velocity_limit = NotifyProperty(0, int)
    depth_warning = NotifyProperty(0, int)
    total_depth = NotifyProperty(0, int)
    depth_brake = NotifyProperty(0, int)
    depth_velocity_limit = NotifyProperty(0, int)

    @classmethod
    def instance(cls) -> DepthSafe:
        """Return the shared instance, creating it on first use."""
        if cls.__dict__.get("_instance") is None:
            cls._instance = cls()
        return cls._instance