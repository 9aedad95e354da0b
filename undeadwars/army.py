"""An army in the field: a list of units that fight another army."""

from __future__ import annotations

import random
from collections.abc import Iterator

from undeadwars.boss_names import get_instance
from undeadwars.bosses import DarkLord, DeathKnight
from undeadwars.counter import unit_counter
from undeadwars.factory import create_unit
from undeadwars.unit import ManaPool, Unit, UnitType

_MAX_DEATH_KNIGHTS = 7
_REVENANTS_PER_LICH = 6
_SKELETONS_PER_NECROMANCER = 3


def _is_target(unit: Unit | None) -> bool:
    return unit is not None and unit.is_alive() and unit.unit_type != UnitType.GHOST


class Army:
    """Units fighting together; random choices come from ``rng``."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._units: list[Unit] = []

    def add_unit(self, unit: Unit | None) -> None:
        if unit is not None:
            self._units.append(unit)

    def remove_unit(self, unit: Unit) -> bool:
        """Take ``unit`` out of the army without disposing of it."""
        for position, member in enumerate(self._units):
            if member is unit:
                del self._units[position]
                return True
        return False

    def get(self, index: int) -> Unit | None:
        """Unit at ``index``, or ``None`` when out of range."""
        if 0 <= index < len(self._units):
            return self._units[index]
        return None

    def __len__(self) -> int:
        return len(self._units)

    def __getitem__(self, index: int) -> Unit:
        return self._units[index]

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units)

    def is_empty(self) -> bool:
        return not self._units

    def reset(self) -> None:
        """Keep only the bosses, restored to full strength."""
        bosses = [unit for unit in self._units if unit.is_boss()]
        for boss in bosses:
            boss.reset_to_max_stats()
        self._units = bosses

    def clear(self) -> None:
        for unit in self._units:
            unit.dispose()
        self._units = []

    def _random_target(self, other: Army, attackable: list[int]) -> Unit | None:
        while attackable:
            position = self._rng.randrange(len(attackable))
            target = other.get(attackable[position])
            if _is_target(target):
                return target
            del attackable[position]
        return None

    def attack(self, other: Army | None) -> None:
        """Every able unit strikes a random attackable enemy."""
        if other is None or other.is_empty():
            return
        attackable = [i for i, enemy in enumerate(other) if _is_target(enemy)]
        for attacker in self._units:
            if not attacker.is_alive() or attacker.unit_type == UnitType.GHOST:
                continue
            if attacker.unit_type in (UnitType.WIZARD, UnitType.DIBBUK):
                if isinstance(attacker, ManaPool) and attacker.mana > attacker.ability_cost:
                    target = self._random_target(other, attackable)
                    if target is not None:
                        attacker.cast_ability(target)
                continue
            target = self._random_target(other, attackable)
            if target is not None:
                attacker.attack(target)

    def use_all_abilities(self, other: Army | None) -> None:
        """Let healers, bosses and summoners use their abilities."""
        if other is None:
            return
        casters = list(self._units)
        own_alive = [unit for unit in casters if unit.is_alive()]

        for caster in casters:
            if not caster.is_alive() or not isinstance(caster, ManaPool):
                continue
            kind = caster.unit_type
            if kind == UnitType.HEALER:
                if not own_alive:
                    continue
                target = own_alive[self._rng.randrange(len(own_alive))]
                if target.is_alive() and target.health < target.max_health:
                    caster.cast_ability(target)
            elif kind in (UnitType.PALADIN, UnitType.DEATHKNIGHT):
                if not own_alive:
                    continue
                target = own_alive[self._rng.randrange(len(own_alive))]
                if target.health < target.max_health:
                    caster.cast_ability(target)
            elif kind == UnitType.DARKLORD:
                self._summon(caster)
            elif kind == UnitType.UNDEADHUNTER:
                boss = next((e for e in other if e.is_alive() and e.is_boss()), None)
                if boss is not None:
                    caster.cast_ability(boss)

    def _summon(self, caster: ManaPool) -> None:
        if caster.mana >= DarkLord.ABILITY_COST_GHOUL:
            summoned = UnitType.GHOUL
        elif caster.mana >= DarkLord.ABILITY_COST_NECROMANCER:
            summoned = UnitType.NECROMANCER
        else:
            return
        if unit_counter.try_register(summoned):
            unit = create_unit(summoned)
            caster.cast_ability(unit)
            self.add_unit(unit)

    def _raise_dead(self, dead_units: list[Unit], unit_type: UnitType, limit: int) -> int:
        raised = min(limit, len(dead_units))
        for _ in range(raised):
            self.add_unit(create_unit(unit_type))
        del dead_units[:raised]
        return raised

    def resurrect_units(self, dead_units: list[Unit]) -> None:
        """Turn fallen enemies into undead; used corpses leave ``dead_units``."""
        if not dead_units:
            return

        remaining = []
        for dead in dead_units:
            if (
                dead.unit_type == UnitType.KNIGHT
                and self._rng.randrange(100)
                and DeathKnight.count < _MAX_DEATH_KNIGHTS
            ):
                self.add_unit(create_unit(UnitType.DEATHKNIGHT))
                continue
            remaining.append(dead)
        dead_units[:] = remaining

        lich = next(
            (
                unit for unit in self._units
                if unit.unit_type == UnitType.LICH and unit.is_alive()
                and isinstance(unit, ManaPool) and unit.mana >= unit.ability_cost
            ),
            None,
        )
        if lich is not None:
            if self._raise_dead(dead_units, UnitType.REVENANT, _REVENANTS_PER_LICH):
                lich.cast_ability(None)

        necromancers = [
            unit for unit in self._units
            if unit.unit_type == UnitType.NECROMANCER and unit.is_alive()
            and isinstance(unit, ManaPool)
        ]
        for necromancer in necromancers:
            if necromancer.mana < necromancer.ability_cost:
                continue
            if self._raise_dead(dead_units, UnitType.SKELETON, _SKELETONS_PER_NECROMANCER):
                necromancer.cast_ability(None)

    def take_dead_units(self) -> list[Unit]:
        """Remove and return the units that are no longer alive."""
        dead = [unit for unit in self._units if not unit.is_alive()]
        self._units = [unit for unit in self._units if unit.is_alive()]
        return dead

    def remove_dead_units(self) -> None:
        """Dispose of fallen units, giving boss names back to the pool."""
        survivors = []
        for unit in self._units:
            if unit.is_alive():
                survivors.append(unit)
                continue
            if unit.is_boss():
                get_instance().return_name(unit.unit_type, unit.name)
            unit.dispose()
        self._units = survivors

    def is_all_ghosts(self) -> bool:
        """True when no living unit other than a ghost remains."""
        return all(
            unit.unit_type == UnitType.GHOST for unit in self._units if unit.is_alive()
        )