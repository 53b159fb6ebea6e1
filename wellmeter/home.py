"""Live readings shown on the home screen."""

from __future__ import annotations

from typing import ClassVar

from wellmeter.observable import NotifyProperty, Observable


class Home(Observable):
    """Depth, speed and tension readings together with their limits."""

    _instance: ClassVar[Home | None] = None

    depth = NotifyProperty(0, int)
    speed = NotifyProperty(0, int)
    tension = NotifyProperty(0, int)
    tension_increment = NotifyProperty(0, int)
    pulse = NotifyProperty(0, int)
    max_tension = NotifyProperty(0, int)
    target_depth = NotifyProperty(0, int)
    max_speed = NotifyProperty(0, int)
    max_tension_increment = NotifyProperty(0, int)
    k_value = NotifyProperty(0, int)
    harness_tension = NotifyProperty(0, int)
    max_parameter_status = NotifyProperty(0, int)
    network_status = NotifyProperty(0, int)

    @classmethod
    def instance(cls) -> Home:
        """Return the shared instance, creating it on first use."""
        if cls.__dict__.get("_instance") is None:
            cls._instance = cls()
        return cls._instance