"""Depth settings and the depth meter readout."""

from __future__ import annotations

from typing import ClassVar

from wellmeter.observable import NotifyProperty, Observable


class Depth(Observable):
    """Depth configuration: target layer, orientation, calculation and encoder."""

    _instance: ClassVar[Depth | None] = None

    target_layer_depth = NotifyProperty(0, int)
    depth_orientation = NotifyProperty(0, int)
    meter_depth = NotifyProperty(0, int)
    depth_calculate_type = NotifyProperty(0, int)
    velocity_unit = NotifyProperty(0, int)
    code_option = NotifyProperty(0, int)

    @classmethod
    def instance(cls) -> Depth:
        """Return the shared instance, creating it on first use."""
        if cls.__dict__.get("_instance") is None:
            cls._instance = cls()
        return cls._instance


class DepthMeter(Observable):
    """Preset and current depth shown by the depth meter."""

    _instance: ClassVar[DepthMeter | None] = None

    depth_preset = NotifyProperty(0, int)
    current_depth = NotifyProperty(0, int)

    @classmethod
    def instance(cls) -> DepthMeter:
        """Return the shared instance, creating it on first use."""
        if cls.__dict__.get("_instance") is None:
            cls._instance = cls()
        return cls._instance