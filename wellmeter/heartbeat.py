"""Heartbeat status reported by the controller."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Heartbeat:
    """Cycle and recipe status carried by a heartbeat message.

    Two heartbeats are equal when their recipe, cycle and power values match;
    the alarm id takes no part in the comparison and is not copied.
    """

    active_recipe_num: int = 0
    cycle_time: int = 0
    cycle_num: int = 0
    power_value: int = 0
    alarm_id: int = field(default=0, compare=False)

    def copy_from(self, other: Heartbeat) -> Heartbeat:
        """Take over the recipe, cycle and power values of ``other``."""
        if other is not self:
            self.active_recipe_num = other.active_recipe_num
            self.cycle_num = other.cycle_num
            self.cycle_time = other.cycle_time
            self.power_value = other.power_value
        return self