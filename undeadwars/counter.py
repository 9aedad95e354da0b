"""Limit on the number of regular units in play."""

from __future__ import annotations

from dataclasses import dataclass

from undeadwars.unit import UnitType, is_boss_type


@dataclass
class UnitCounter:
    """Counts regular units against a limit; bosses are never counted."""

    current: int = 0
    limit: int = 0

    def initialize(self, limit: int) -> None:
        self.limit = limit

    def try_register(self, unit_type: UnitType) -> bool:
        """Count one more unit of ``unit_type`` if the limit allows it."""
        if is_boss_type(unit_type):
            return True
        if self.current >= self.limit:
            return False
        self.current += 1
        return True

    def unregister(self, unit_type: UnitType) -> None:
        if not is_boss_type(unit_type):
            self.decrement()

    def increment(self) -> None:
        self.current += 1

    def decrement(self) -> None:
        self.current -= 1


unit_counter = UnitCounter()