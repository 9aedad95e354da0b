"""Pool of boss names read from a sectioned text file."""

from __future__ import annotations

from dataclasses import dataclass, field

from undeadwars.unit import UnitType

_BOSS_SECTIONS = {
    "LICH": UnitType.LICH,
    "DARKLORD": UnitType.DARKLORD,
    "DEATHKNIGHT": UnitType.DEATHKNIGHT,
    "UNDEADHUNTER": UnitType.UNDEADHUNTER,
    "BLADEDANCER": UnitType.BLADEDANCER,
    "PALADIN": UnitType.PALADIN,
}


class BossNameError(RuntimeError):
    """Raised when the name pool cannot satisfy a request."""


@dataclass
class _NamePool:
    unit_type: UnitType
    names: list[str] = field(default_factory=list)
    used: list[bool] = field(default_factory=list)


def _section_type(text: str) -> UnitType:
    try:
        return _BOSS_SECTIONS[text]
    except KeyError:
        raise BossNameError("Reading incorrect unit type") from None


class BossNameManager:
    """Hands out unique boss names per boss type.

    The names file holds ``[TYPE]`` headers, each followed by one name per
    line. Lines before the first header are ignored.
    """

    def __init__(self, filename: str) -> None:
        self._pools: list[_NamePool] = []
        self.load_names_from_file(filename)

    def load_names_from_file(self, filename: str) -> None:
        """Replace the pool with the names read from ``filename``."""
        try:
            with open(filename, encoding="utf-8") as handle:
                lines = handle.readlines()
        except OSError as exc:
            raise BossNameError(f"Failed to open boss names file: {filename}") from exc

        self._pools = []
        current: _NamePool | None = None
        for raw in lines:
            line = raw.rstrip("\n").strip(" \t")
            if not line:
                continue
            if line.startswith("[") and line.endswith("]") and len(line) >= 2:
                current = _NamePool(_section_type(line[1:-1]))
                self._pools.append(current)
            elif current is not None:
                current.names.append(line)
                current.used.append(False)

    def _pool_for(self, unit_type: UnitType) -> _NamePool:
        for pool in self._pools:
            if pool.unit_type == unit_type:
                return pool
        raise ValueError("Invalid unit type")

    def next_name(self, unit_type: UnitType) -> str:
        """Reserve and return the first free name for ``unit_type``."""
        pool = self._pool_for(unit_type)
        for position, used in enumerate(pool.used):
            if not used:
                pool.used[position] = True
                return pool.names[position]
        raise BossNameError("No free boss names available for this type")

    def return_name(self, unit_type: UnitType, name: str) -> None:
        """Give a reserved name back to the pool of ``unit_type``."""
        pool = self._pool_for(unit_type)
        try:
            position = pool.names.index(name)
        except ValueError:
            raise BossNameError("Name not found in pool") from None
        if not pool.used[position]:
            raise BossNameError("Name already free")
        pool.used[position] = False

    def is_name_registered(self, name: str) -> bool:
        """Tell whether ``name`` appears in any pool."""
        return any(name in pool.names for pool in self._pools)

    def register_name(self, name: str) -> None:
        """Mark the first occurrence of ``name`` as taken; unknown names are ignored."""
        for pool in self._pools:
            if name in pool.names:
                pool.used[pool.names.index(name)] = True
                return


_instance: BossNameManager | None = None


def create_instance(filename: str) -> BossNameManager:
    """Create the shared manager from ``filename``."""
    global _instance
    if _instance is not None:
        raise BossNameError("BossNameManager instance already created")
    _instance = BossNameManager(filename)
    return _instance


def get_instance() -> BossNameManager:
    """Return the shared manager."""
    if _instance is None:
        raise BossNameError("BossNameManager instance not created yet")
    return _instance


def destroy_instance() -> BossNameManager | None:
    """Drop the shared manager so that a new one may be created; return the old one."""
    global _instance
    previous, _instance = _instance, None
    return previous