"""Tension safety parameters and the live tension safety preview."""

from __future__ import annotations

from typing import ClassVar

from wellmeter.observable import NotifyProperty, Observable


class TensionSafe(Observable):
    """Cable and weak-point parameters plus the readings derived from them.

    All values are kept as text, as they are shown and edited on screen.
    """

    _instance: ClassVar[TensionSafe | None] = None

    well_type = NotifyProperty("0", str)
    cable_weight = NotifyProperty("0", str)
    tension_safe_factor = NotifyProperty("0", str)
    weak_force = NotifyProperty("0", str)
    current_tension_safe = NotifyProperty("0", str)
    max_tension_safe = NotifyProperty("0", str)
    cable_tension_trend = NotifyProperty("0", str)
    ptime = NotifyProperty("0", str)
    depth_loss = NotifyProperty("0", str)
    current_depth1 = NotifyProperty("0", str)
    current_depth2 = NotifyProperty("0", str)
    current_depth3 = NotifyProperty("0", str)

    @classmethod
    def instance(cls) -> TensionSafe:
        """Return the shared instance, creating it on first use."""
        if cls.__dict__.get("_instance") is None:
            cls._instance = cls()
        return cls._instance