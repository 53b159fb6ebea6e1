"""Tensiometer selection and tension units."""

from __future__ import annotations

from typing import ClassVar

from wellmeter.observable import NotifyProperty, Observable


class Tensiometer(Observable):
    """Number, type, range and output signal of the tensiometer, and tension units."""

    _instance: ClassVar[Tensiometer | None] = None

    tensiometer_number = NotifyProperty("", str)
    tensiometer_type = NotifyProperty(0, int)
    tensiometer_range = NotifyProperty(0, int)
    tensiometer_signal = NotifyProperty(0, int)
    tension_units = NotifyProperty(0, int)

    @classmethod
    def instance(cls) -> Tensiometer:
        """Return the shared instance, creating it on first use."""
        if cls.__dict__.get("_instance") is None:
            cls._instance = cls()
        return cls._instance