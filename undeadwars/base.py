"""A faction's home base: gold treasury and reserve of units."""

from __future__ import annotations

import re
from typing import TextIO

from undeadwars.army import Army
from undeadwars.bosses import (
    Bladedancer,
    BossUnit,
    DarkLord,
    DeathKnight,
    Lich,
    Paladin,
    UndeadHunter,
)
from undeadwars.counter import unit_counter
from undeadwars.factory import create_unit, gold_cost
from undeadwars.unit import Unit, UnitType

_INT = re.compile(r"\s*([+-]?\d+)")
_SPACE = " \t\n\v\f\r"
_SENTINEL = -1

_MANA_BOSSES = {
    UnitType.LICH: Lich,
    UnitType.DEATHKNIGHT: DeathKnight,
    UnitType.DARKLORD: DarkLord,
    UnitType.PALADIN: Paladin,
    UnitType.UNDEADHUNTER: UndeadHunter,
}


class UnitLimitError(RuntimeError):
    """Raised when hiring would exceed the unit limit."""


class _Scanner:
    """Reads whitespace-separated integers and whole lines from text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def ints(self, count: int) -> list[int] | None:
        values = []
        for _ in range(count):
            match = _INT.match(self._text, self._pos)
            if match is None:
                return None
            values.append(int(match.group(1)))
            self._pos = match.end()
        return values

    def line(self) -> str:
        while self._pos < len(self._text) and self._text[self._pos] in _SPACE:
            self._pos += 1
        end = self._text.find("\n", self._pos)
        if end == -1:
            end = len(self._text)
        line = self._text[self._pos:end]
        self._pos = min(end + 1, len(self._text))
        return line


def _clean_name(raw: str) -> str:
    if raw and raw[0] == '"' and raw[-1] == '"':
        raw = raw[1:-1]
    return raw.strip(_SPACE)


class Base:
    """Holds gold and units waiting to be sent into battle."""

    STARTING_GOLD = 1000

    def __init__(self, starting_gold: int = STARTING_GOLD) -> None:
        self.gold = starting_gold
        self._reserve: list[Unit] = []

    def hire_unit(self, unit_type: UnitType) -> bool:
        """Buy a regular unit; False when gold is short."""
        cost = gold_cost(unit_type)
        if self.gold < cost:
            return False
        if not unit_counter.try_register(unit_type):
            raise UnitLimitError("Unit limit reached")
        unit = create_unit(unit_type)
        if unit is None:
            return False
        self.gold -= cost
        self._reserve.append(unit)
        return True

    def spend_gold(self, amount: int) -> bool:
        if self.gold < amount:
            return False
        self.gold -= amount
        return True

    def add_gold(self, amount: int) -> None:
        self.gold += amount

    def add_unit(self, unit: Unit | None) -> None:
        if unit is not None:
            self._reserve.append(unit)

    def get(self, index: int) -> Unit | None:
        """Reserve unit at ``index``, or ``None`` when out of range."""
        if 0 <= index < len(self._reserve):
            return self._reserve[index]
        return None

    def __len__(self) -> int:
        return len(self._reserve)

    def transfer_unit_to_army(self, unit: Unit, army: Army) -> bool:
        """Move ``unit`` from the reserve into ``army``."""
        for position, member in enumerate(self._reserve):
            if member is unit:
                del self._reserve[position]
                army.add_unit(unit)
                return True
        return False

    def reserve_units(self) -> tuple[Unit, ...]:
        return tuple(self._reserve)

    def save_bosses(self, stream: TextIO) -> None:
        """Write every boss in reserve, followed by an END marker."""
        print(f"Saving bosses, army size: {len(self._reserve)}")
        bosses = [unit for unit in self._reserve if unit.is_boss()]
        print(f"Boss units found: {len(bosses)}")
        for boss in bosses:
            if not isinstance(boss, BossUnit):
                raise TypeError("To save non-boss unit")
            boss.save_to_file(stream)
        stream.write("\nEND\n")

    def load_bosses(self, stream: TextIO) -> None:
        """Read boss lines until the data ends, stops parsing, or -1 is met."""
        scanner = _Scanner(stream.read())
        while True:
            head = scanner.ints(1)
            if head is None or head[0] == _SENTINEL:
                break
            type_code = head[0]

            if type_code == UnitType.BLADEDANCER:
                fields = scanner.ints(4)
                if fields is None:
                    break
                health, _max_health, damage, armour = fields
                name = _clean_name(scanner.line())
                self._reserve.append(Bladedancer(name, health, damage, armour))
                continue

            fields = scanner.ints(5)
            if fields is None:
                break
            health, _max_health, damage, armour, mana = fields
            name = _clean_name(scanner.line())
            boss_class = _MANA_BOSSES.get(type_code)
            if boss_class is None:
                raise ValueError("Unknown boss unit type during loading")
            self._reserve.append(boss_class(name, health, damage, armour, mana))

    def reset(self) -> None:
        """Keep restored bosses, dismiss everything else and refill the treasury."""
        survivors = []
        for unit in self._reserve:
            if unit.is_boss():
                unit.reset_to_max_stats()
                survivors.append(unit)
            else:
                unit.dispose()
        self._reserve = survivors
        self.gold = self.STARTING_GOLD

    def empty_units(self) -> None:
        for unit in self._reserve:
            unit.dispose()
        self._reserve = []