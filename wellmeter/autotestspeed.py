"""Speed control for the automatic test."""

from __future__ import annotations

from typing import ClassVar

from wellmeter.observable import NotifyProperty, Observable


class AutoTestSpeed(Observable):
    """Direction and speed value used when running the automatic speed test."""

    _instance: ClassVar[AutoTestSpeed | None] = None

    direction = NotifyProperty(0, int)
    speed_value = NotifyProperty(0, int)

    @classmethod
    def instance(cls) -> AutoTestSpeed:
        """Return the shared instance, creating it on first use."""
        if cls.__dict__.get("_instance") is None:
            cls._instance = cls()
        return cls._instance