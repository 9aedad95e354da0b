"""Core unit model: factions, armour classes, unit types and the abstract unit."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import ClassVar

_BOSS_THRESHOLD = 100


class Faction(IntEnum):
    """Side a unit fights for."""

    NONE = 0
    ALIVE = 1
    UNDEAD = 2


class ArmourType(IntEnum):
    """Armour class; each step above unarmoured absorbs a quarter of the damage."""

    UNARMOURED = 0
    LEATHER = 1
    MEDIUM = 2
    HEAVY = 3


class UnitType(IntEnum):
    """Kind of unit. Regular units are below 100, bosses are 100 and above."""

    NONE = 0

    SKELETON = 1
    GHOUL = 2
    NECROMANCER = 3
    ZOMBIE = 4
    DIBBUK = 5
    REVENANT = 6
    GHOST = 7

    INFANTRY = 10
    ARCHER = 11
    KNIGHT = 12
    HEALER = 13
    WIZARD = 14

    LICH = 100
    DARKLORD = 101
    DEATHKNIGHT = 102

    UNDEADHUNTER = 110
    BLADEDANCER = 111
    PALADIN = 112


def unit_type_from_string(text: str) -> UnitType:
    """Return the unit type spelled by ``text``, or ``UnitType.NONE`` if unknown."""
    try:
        return UnitType[text]
    except KeyError:
        return UnitType.NONE


def is_boss_type(unit_type: UnitType) -> bool:
    """Tell whether ``unit_type`` denotes a boss."""
    return int(unit_type) >= _BOSS_THRESHOLD


class Unit(ABC):
    """A combatant with health, armour and an attack."""

    # Attributes restored by reset_to_max_stats; regular units restore none.
    _reset_stats: ClassVar[dict[str, int]] = {}

    def __init__(
        self,
        health: int,
        max_health: int,
        attack_damage: int,
        armour: int,
        armour_type: ArmourType,
        faction: Faction,
        unit_type: UnitType,
    ) -> None:
        self.health = health
        self.max_health = max_health
        self.attack_damage = attack_damage
        self.armour = armour
        self.armour_type = armour_type
        self.faction = faction
        self.unit_type = unit_type
        self.disposed = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the unit."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, health={self.health}, "
            f"armour={self.armour})"
        )

    def is_boss(self) -> bool:
        return is_boss_type(self.unit_type)

    def is_alive(self) -> bool:
        return self.health > 0

    def change_health(self, value: int) -> None:
        """Adjust health by ``value``.

        Only takes effect when the change would cross zero or the maximum;
        health is then clamped to that bound.
        """
        if value < 0:
            if self.health < -value:
                self.health = 0
        elif value > 0:
            if self.health + value > self.max_health:
                self.health = self.max_health

    def reduce_armour(self) -> None:
        if self.armour > 0:
            self.armour -= 1

    def take_damage(self, amount: int) -> None:
        if amount >= self.health:
            self.health = 0
        self.health -= amount

    def calculate_damage(self, other: Unit, amount: int) -> int:
        """Damage ``amount`` deals to ``other`` after armour; wears down its armour."""
        if other.armour_type == ArmourType.UNARMOURED or other.armour == 0:
            return amount
        reduction = int(other.armour_type) * 0.25
        final_damage = math.floor(amount * (1.0 - reduction))
        other.reduce_armour()
        return max(1, final_damage)

    def attack(self, other: Unit) -> None:
        if other.unit_type == UnitType.GHOST:
            raise ValueError("attempting to attack a ghost")
        other.take_damage(self.calculate_damage(other, self.attack_damage))

    def reset_to_max_stats(self) -> None:
        """Restore the stats listed in ``_reset_stats``; regular units list none."""
        for attribute, value in self._reset_stats.items():
            setattr(self, attribute, value)

    def dispose(self) -> None:
        """Release the unit for good; subclasses may update shared bookkeeping."""
        self.disposed = True


class AliveUnit(Unit, ABC):
    """A unit of the living faction."""


class UndeadUnit(Unit, ABC):
    """A unit of the undead faction."""


class ManaPool(ABC):
    """Mixin for units that spend mana on an ability."""

    mana: int
    max_mana: int
    ability_cost: int

    def init_mana(self, mana: int, max_mana: int, ability_cost: int) -> None:
        self.mana = mana
        self.max_mana = max_mana
        self.ability_cost = ability_cost

    @abstractmethod
    def cast_ability(self, target: Unit | None) -> None:
        """Use the unit's ability on ``target``."""