"""Regular units of both factions."""

from __future__ import annotations

from undeadwars.unit import (
    AliveUnit,
    ArmourType,
    Faction,
    ManaPool,
    UndeadUnit,
    Unit,
    UnitType,
)


class Archer(AliveUnit):
    name = "ARCHER"
    GOLD_COST = 300
    HEALTH = 535
    ATTACK_DAMAGE = 10
    ARMOUR = 3
    ARMOUR_TYPE = ArmourType.MEDIUM

    def __init__(self) -> None:
        super().__init__(self.HEALTH, self.HEALTH, self.ATTACK_DAMAGE, self.ARMOUR,
                         self.ARMOUR_TYPE, Faction.ALIVE, UnitType.ARCHER)


class Infantry(AliveUnit):
    name = "INFANTRY"
    GOLD_COST = 250
    HEALTH = 420
    ATTACK_DAMAGE = 7
    ARMOUR = 8
    ARMOUR_TYPE = ArmourType.MEDIUM

    def __init__(self) -> None:
        super().__init__(self.HEALTH, self.HEALTH, self.ATTACK_DAMAGE, self.ARMOUR,
                         self.ARMOUR_TYPE, Faction.ALIVE, UnitType.INFANTRY)


class Knight(AliveUnit):
    name = "KNIGHT"
    GOLD_COST = 700
    HEALTH = 835
    ATTACK_DAMAGE = 45
    ARMOUR = 10
    ARMOUR_TYPE = ArmourType.HEAVY

    def __init__(self) -> None:
        super().__init__(self.HEALTH, self.HEALTH, self.ATTACK_DAMAGE, self.ARMOUR,
                         self.ARMOUR_TYPE, Faction.ALIVE, UnitType.KNIGHT)


class Healer(AliveUnit, ManaPool):
    name = "HEALER"
    GOLD_COST = 150
    HEALTH = 290
    MANA = 200
    ABILITY_COST = 100
    HEAL_AMOUNT = 100
    ATTACK_DAMAGE = 2
    ARMOUR = 0
    ARMOUR_TYPE = ArmourType.UNARMOURED

    def __init__(self) -> None:
        super().__init__(self.HEALTH, self.HEALTH, self.ATTACK_DAMAGE, self.ARMOUR,
                         self.ARMOUR_TYPE, Faction.ALIVE, UnitType.HEALER)
        self.init_mana(self.MANA, self.MANA, self.ABILITY_COST)

    def cast_ability(self, target: Unit | None) -> None:
        self.mana -= self.ability_cost
        target.change_health(self.HEAL_AMOUNT)


class Wizard(AliveUnit, ManaPool):
    name = "WIZARD"
    GOLD_COST = 250
    HEALTH = 325
    MANA = 200
    ABILITY_COST = 50
    ATTACK_DAMAGE = 10
    ARMOUR = 3
    ARMOUR_TYPE = ArmourType.LEATHER

    def __init__(self) -> None:
        super().__init__(self.HEALTH, self.HEALTH, self.ATTACK_DAMAGE, self.ARMOUR,
                         self.ARMOUR_TYPE, Faction.ALIVE, UnitType.WIZARD)
        self.init_mana(self.MANA, self.MANA, self.ABILITY_COST)

    def cast_ability(self, target: Unit | None) -> None:
        self.mana -= self.ability_cost
        self.attack(target)


class Skeleton(UndeadUnit):
    name = "Skeleton"
    GOLD_COST = 100
    HEALTH = 500
    ATTACK_DAMAGE = 5
    ARMOUR = 8
    ARMOUR_TYPE = ArmourType.MEDIUM

    def __init__(self) -> None:
        super().__init__(self.HEALTH, self.HEALTH, self.ATTACK_DAMAGE, self.ARMOUR,
                         self.ARMOUR_TYPE, Faction.UNDEAD, UnitType.SKELETON)


class Ghoul(UndeadUnit):
    name = "Ghoul"
    GOLD_COST = 250
    HEALTH = 400
    ATTACK_DAMAGE = 12
    ARMOUR = 6
    ARMOUR_TYPE = ArmourType.HEAVY

    def __init__(self) -> None:
        super().__init__(self.HEALTH, self.HEALTH, self.ATTACK_DAMAGE, self.ARMOUR,
                         self.ARMOUR_TYPE, Faction.UNDEAD, UnitType.GHOUL)


class Necromancer(UndeadUnit, ManaPool):
    name = "Necromancer"
    GOLD_COST = 400
    HEALTH = 300
    MANA = 200
    ABILITY_COST = 150
    ATTACK_DAMAGE = 4
    ARMOUR = 0
    ARMOUR_TYPE = ArmourType.UNARMOURED

    def __init__(self) -> None:
        super().__init__(self.HEALTH, self.HEALTH, self.ATTACK_DAMAGE, self.ARMOUR,
                         self.ARMOUR_TYPE, Faction.UNDEAD, UnitType.NECROMANCER)
        self.init_mana(self.MANA, self.MANA, self.ABILITY_COST)

    def cast_ability(self, target: Unit | None) -> None:
        """Pay for raising the dead; the raised units are created by the army."""
        self.mana -= self.ability_cost


class Zombie(UndeadUnit):
    """A zombie; its variants keep the zombie unit type."""

    name = "Zombie"
    GOLD_COST = 300
    HEALTH = 250
    ATTACK_DAMAGE = 15
    ARMOUR = 0
    ARMOUR_TYPE = ArmourType.UNARMOURED

    def __init__(self, health: int | None = None) -> None:
        if health is None:
            health = self.HEALTH
        super().__init__(health, health, self.ATTACK_DAMAGE, self.ARMOUR,
                         self.ARMOUR_TYPE, Faction.UNDEAD, UnitType.ZOMBIE)


class Dibbuk(Zombie, ManaPool):
    name = "Dibbuk"
    MANA = 300
    ABILITY_COST = 150

    def __init__(self) -> None:
        super().__init__()
        self.init_mana(self.MANA, self.MANA, self.ABILITY_COST)

    def cast_ability(self, target: Unit | None) -> None:
        self.mana -= self.ability_cost
        self.attack(target)


class Revenant(Zombie):
    name = "Revenant"
    HEALTH = 600

    def __init__(self) -> None:
        super().__init__(self.HEALTH)


class Ghost(UndeadUnit, ManaPool):
    """A spirit that cannot be attacked; it counts as alive only after sacrificing itself."""

    name = "Ghost"
    GOLD_COST = 500
    HEALTH = 0
    MANA = 0
    ABILITY_COST = 0
    HEAL_AMOUNT = 250
    ATTACK_DAMAGE = 0
    ARMOUR = 0
    ARMOUR_TYPE = ArmourType.UNARMOURED

    def __init__(self) -> None:
        super().__init__(self.HEALTH, self.HEALTH, self.ATTACK_DAMAGE, self.ARMOUR,
                         self.ARMOUR_TYPE, Faction.UNDEAD, UnitType.GHOST)
        self.init_mana(self.MANA, self.MANA, self.ABILITY_COST)
        self.has_suicided = False

    def is_alive(self) -> bool:
        return self.has_suicided

    def cast_ability(self, target: Unit | None) -> None:
        target.change_health(self.HEAL_AMOUNT)
        self.has_suicided = True