"""A single round of combat between the living and the undead army."""

from __future__ import annotations

from enum import IntEnum

from undeadwars.army import Army


class DuelResult(IntEnum):
    """Outcome of a duel, or the winner of the game."""

    DRAW = 0
    LIVING = 1
    UNDEAD = 2


class Duel:
    """Runs one exchange of abilities, attacks and resurrections."""

    def __init__(self) -> None:
        self._living: Army | None = None
        self._undead: Army | None = None
        self._result = DuelResult.DRAW

    def setup(self, living: Army, undead: Army) -> None:
        self._living = living
        self._undead = undead

    def fight(self) -> None:
        """Play the duel; the outcome is kept until ``take_result`` is called."""
        self._result = self._battle()

    def take_result(self) -> DuelResult:
        """Return the last outcome and forget it."""
        result = self._result
        self._result = DuelResult.DRAW
        return result

    def _battle(self) -> DuelResult:
        if self._living is None or self._undead is None:
            raise RuntimeError("Duel has not been set up")
        living, undead = self._living, self._undead

        if undead.is_all_ghosts():
            return DuelResult.LIVING

        undead.use_all_abilities(living)
        undead.attack(living)
        if living.is_empty():
            return DuelResult.UNDEAD

        living.use_all_abilities(undead)
        living.attack(undead)
        if undead.is_empty():
            return DuelResult.LIVING

        dead = living.take_dead_units()
        undead.resurrect_units(dead)
        for corpse in dead:
            corpse.dispose()

        living.attack(undead)
        undead.remove_dead_units()
        living.remove_dead_units()
        if undead.is_empty():
            return DuelResult.LIVING
        return DuelResult.DRAW