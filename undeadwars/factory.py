"""Creation of units by type and the gold price list."""

from __future__ import annotations

import sys
from typing import TextIO

from undeadwars.bosses import Bladedancer, DarkLord, DeathKnight, Lich, Paladin, UndeadHunter
from undeadwars.troops import (
    Archer,
    Dibbuk,
    Ghost,
    Ghoul,
    Healer,
    Infantry,
    Knight,
    Necromancer,
    Revenant,
    Skeleton,
    Wizard,
    Zombie,
)
from undeadwars.unit import Unit, UnitType

_CONSTRUCTORS = {
    UnitType.SKELETON: Skeleton,
    UnitType.GHOUL: Ghoul,
    UnitType.NECROMANCER: Necromancer,
    UnitType.ZOMBIE: Zombie,
    UnitType.DIBBUK: Dibbuk,
    UnitType.REVENANT: Revenant,
    UnitType.GHOST: Ghost,
    UnitType.INFANTRY: Infantry,
    UnitType.ARCHER: Archer,
    UnitType.KNIGHT: Knight,
    UnitType.HEALER: Healer,
    UnitType.WIZARD: Wizard,
    UnitType.LICH: Lich,
    UnitType.DARKLORD: DarkLord,
    UnitType.DEATHKNIGHT: DeathKnight,
    UnitType.UNDEADHUNTER: UndeadHunter,
    UnitType.BLADEDANCER: Bladedancer,
    UnitType.PALADIN: Paladin,
}

_GOLD_COSTS = {
    UnitType.SKELETON: Skeleton.GOLD_COST,
    UnitType.GHOUL: Ghoul.GOLD_COST,
    UnitType.NECROMANCER: Necromancer.GOLD_COST,
    UnitType.ZOMBIE: Zombie.GOLD_COST,
    UnitType.DIBBUK: Zombie.GOLD_COST,
    UnitType.REVENANT: Zombie.GOLD_COST,
    UnitType.GHOST: Ghost.GOLD_COST,
    UnitType.INFANTRY: Infantry.GOLD_COST,
    UnitType.ARCHER: Archer.GOLD_COST,
    UnitType.KNIGHT: Knight.GOLD_COST,
    UnitType.HEALER: Healer.GOLD_COST,
    UnitType.WIZARD: Wizard.GOLD_COST,
}

_LIVING_COSTS = (
    "Infantry costs 250 gold.\n"
    "Archer costs 300 gold.\n"
    "Knight costs 700 gold.\n"
    "Healer costs 150 gold.\n"
    "Wizard costs 250 gold.\n"
)


def create_unit(unit_type: UnitType) -> Unit | None:
    """Build a fresh unit of ``unit_type``; ``None`` for an unknown type.

    Bosses draw their name from the shared boss name manager.
    """
    constructor = _CONSTRUCTORS.get(unit_type)
    return constructor() if constructor is not None else None


def gold_cost(unit_type: UnitType) -> int:
    """Gold price of a regular unit of ``unit_type``."""
    try:
        return _GOLD_COSTS[unit_type]
    except KeyError:
        raise ValueError("Unknown or NONE UnitType passed to gold_cost()") from None


def print_living_unit_costs(stream: TextIO | None = None) -> None:
    """Write the price list of the living faction's units."""
    out = sys.stdout if stream is None else stream
    out.write("\n" + _LIVING_COSTS)