"""Boss units: named heroes of both factions that persist between games."""

from __future__ import annotations

from typing import TextIO

from undeadwars.boss_names import get_instance
from undeadwars.unit import (
    AliveUnit,
    ArmourType,
    Faction,
    ManaPool,
    UndeadUnit,
    Unit,
    UnitType,
)


class BossUnit:
    """Mixin for named bosses that can be written to a save file."""

    _name: str

    @property
    def name(self) -> str:
        return self._name

    def _assign_name(self, name: str | None, unit_type: UnitType) -> None:
        self._name = get_instance().next_name(unit_type) if name is None else name

    def save_to_file(self, stream: TextIO) -> None:
        """Write the boss as one save-file line."""
        fields = [int(self.unit_type), self.health, self.max_health,
                  self.attack_damage, int(self.armour)]
        if isinstance(self, ManaPool):
            fields.append(self.mana)
        stream.write(" ".join(str(value) for value in fields) + f' "{self._name}"\n')


class Lich(BossUnit, UndeadUnit, ManaPool):
    HEALTH = 1500
    MANA = 1000
    ABILITY_COST = 750
    ATTACK_DAMAGE = 100
    ARMOUR = 15
    ARMOUR_TYPE = ArmourType.HEAVY

    def __init__(self, name: str | None = None, health: int | None = None,
                 damage: int | None = None, armour: int | None = None,
                 mana: int | None = None) -> None:
        super().__init__(
            self.HEALTH if health is None else health, self.HEALTH,
            self.ATTACK_DAMAGE if damage is None else damage,
            self.ARMOUR if armour is None else armour,
            self.ARMOUR_TYPE, Faction.UNDEAD, UnitType.LICH)
        self.init_mana(self.MANA if mana is None else mana, self.MANA, self.ABILITY_COST)
        self._assign_name(name, UnitType.LICH)

    def cast_ability(self, target: Unit | None) -> None:
        """Pay for raising revenants; the army creates them."""
        self.mana -= self.ability_cost

    def reset_to_max_stats(self) -> None:
        self.health = self.HEALTH
        self.armour = self.ARMOUR
        self.max_mana = self.MANA


class DarkLord(BossUnit, UndeadUnit, ManaPool):
    HEALTH = 3000
    MANA = 2000
    ABILITY_COST_NECROMANCER = 400
    ABILITY_COST_GHOUL = 500
    ATTACK_DAMAGE = 200
    ARMOUR = 20
    ARMOUR_TYPE = ArmourType.HEAVY

    def __init__(self, name: str | None = None, health: int | None = None,
                 damage: int | None = None, armour: int | None = None,
                 mana: int | None = None) -> None:
        super().__init__(
            self.HEALTH if health is None else health, self.HEALTH,
            self.ATTACK_DAMAGE if damage is None else damage,
            self.ARMOUR if armour is None else armour,
            self.ARMOUR_TYPE, Faction.UNDEAD, UnitType.DARKLORD)
        self.init_mana(self.MANA if mana is None else mana, self.MANA,
                       self.ABILITY_COST_NECROMANCER)
        self._assign_name(name, UnitType.DARKLORD)

    def cast_ability(self, target: Unit | None) -> None:
        """Pay for summoning ``target``, which must be a necromancer or a ghoul."""
        summoned = None if target is None else target.unit_type
        if summoned == UnitType.NECROMANCER:
            self.mana -= self.ABILITY_COST_NECROMANCER
        elif summoned == UnitType.GHOUL:
            self.mana -= self.ABILITY_COST_GHOUL
        else:
            raise ValueError("Failed to summon correct unit from DarkLord")

    def reset_to_max_stats(self) -> None:
        self.health = self.HEALTH
        self.armour = self.ARMOUR
        self.max_mana = self.MANA


class DeathKnight(BossUnit, UndeadUnit, ManaPool):
    """Undead knight; the class tracks how many are in existence."""

    count = 0

    HEALTH = 2500
    MANA = 1000
    ABILITY_COST = 350
    HEAL_AMOUNT = 500
    ATTACK_DAMAGE = 150
    ARMOUR = 15
    ARMOUR_TYPE = ArmourType.HEAVY

    def __init__(self, name: str | None = None, health: int | None = None,
                 damage: int | None = None, armour: int | None = None,
                 mana: int | None = None) -> None:
        super().__init__(
            self.HEALTH if health is None else health, self.HEALTH,
            self.ATTACK_DAMAGE if damage is None else damage,
            self.ARMOUR if armour is None else armour,
            self.ARMOUR_TYPE, Faction.UNDEAD, UnitType.DEATHKNIGHT)
        self.init_mana(self.MANA if mana is None else mana, self.MANA, self.ABILITY_COST)
        self._assign_name(name, UnitType.DEATHKNIGHT)
        DeathKnight.count += 1

    def cast_ability(self, target: Unit | None) -> None:
        target.change_health(self.HEAL_AMOUNT)

    def reset_to_max_stats(self) -> None:
        self.health = self.HEALTH
        self.armour = self.ARMOUR
        self.max_mana = self.MANA

    def dispose(self) -> None:
        super().dispose()
        DeathKnight.count -= 1


class Paladin(BossUnit, AliveUnit, ManaPool):
    HEALTH = 5000
    MANA = 3000
    ABILITY_COST = 500
    HEAL_AMOUNT = 1000
    ATTACK_DAMAGE = 250
    ARMOUR = 20
    ARMOUR_TYPE = ArmourType.HEAVY

    def __init__(self, name: str | None = None, health: int | None = None,
                 damage: int | None = None, armour: int | None = None,
                 mana: int | None = None) -> None:
        super().__init__(
            self.HEALTH if health is None else health, self.HEALTH,
            self.ATTACK_DAMAGE if damage is None else damage,
            self.ARMOUR if armour is None else armour,
            self.ARMOUR_TYPE, Faction.ALIVE, UnitType.PALADIN)
        self.init_mana(self.MANA if mana is None else mana, self.MANA, self.ABILITY_COST)
        self._assign_name(name, UnitType.PALADIN)

    def cast_ability(self, target: Unit | None) -> None:
        self.mana -= self.ability_cost
        target.change_health(self.HEAL_AMOUNT)

    def reset_to_max_stats(self) -> None:
        self.health = self.HEALTH
        self.armour = self.ARMOUR
        self.max_mana = self.MANA


class UndeadHunter(BossUnit, AliveUnit, ManaPool):
    HEALTH = 2000
    MANA = 1500
    ABILITY_COST = 1000
    STRIKE = -32768
    ATTACK_DAMAGE = 75
    ARMOUR = 17
    ARMOUR_TYPE = ArmourType.HEAVY

    def __init__(self, name: str | None = None, health: int | None = None,
                 damage: int | None = None, armour: int | None = None,
                 mana: int | None = None) -> None:
        super().__init__(
            self.HEALTH if health is None else health, self.HEALTH,
            self.ATTACK_DAMAGE if damage is None else damage,
            self.ARMOUR if armour is None else armour,
            self.ARMOUR_TYPE, Faction.ALIVE, UnitType.UNDEADHUNTER)
        self.init_mana(self.MANA if mana is None else mana, self.MANA, self.ABILITY_COST)
        self._assign_name(name, UnitType.UNDEADHUNTER)

    def cast_ability(self, target: Unit | None) -> None:
        """Slay ``target`` outright, whatever its armour."""
        target.change_health(self.STRIKE)

    def reset_to_max_stats(self) -> None:
        self.health = self.HEALTH
        self.armour = self.ARMOUR
        self.max_mana = self.MANA


class Bladedancer(BossUnit, AliveUnit):
    HEALTH = 2000
    ATTACK_DAMAGE = 75
    ARMOUR = 17
    ARMOUR_TYPE = ArmourType.MEDIUM

    def __init__(self, name: str | None = None, health: int | None = None,
                 damage: int | None = None, armour: int | None = None) -> None:
        super().__init__(
            self.HEALTH if health is None else health, self.HEALTH,
            self.ATTACK_DAMAGE if damage is None else damage,
            self.ARMOUR if armour is None else armour,
            self.ARMOUR_TYPE, Faction.ALIVE, UnitType.BLADEDANCER)
        self._assign_name(name, UnitType.BLADEDANCER)

    def reset_to_max_stats(self) -> None:
        self.health = self.HEALTH
        self.armour = self.ARMOUR