from undeadwars.counter import UnitCounter
from undeadwars.unit import UnitType


def test_default_limit_refuses_regular_units():
    counter = UnitCounter()
    assert counter.try_register(UnitType.SKELETON) is False
    assert counter.current == 0


def test_registers_up_to_limit():
    counter = UnitCounter()
    counter.initialize(2)
    assert counter.limit == 2
    assert counter.try_register(UnitType.INFANTRY) is True
    assert counter.try_register(UnitType.GHOUL) is True
    assert counter.try_register(UnitType.ARCHER) is False
    assert counter.current == counter.limit


def test_bosses_always_allowed_and_not_counted():
    counter = UnitCounter()
    counter.initialize(1)
    counter.try_register(UnitType.KNIGHT)
    assert counter.try_register(UnitType.LICH) is True
    assert counter.try_register(UnitType.PALADIN) is True
    assert counter.current == 1


def test_unregister_regular_frees_slot():
    counter = UnitCounter()
    counter.initialize(1)
    counter.try_register(UnitType.KNIGHT)
    counter.unregister(UnitType.KNIGHT)
    assert counter.current == 0
    assert counter.try_register(UnitType.KNIGHT) is True


def test_unregister_boss_changes_nothing():
    counter = UnitCounter()
    counter.initialize(3)
    counter.try_register(UnitType.SKELETON)
    counter.unregister(UnitType.DARKLORD)
    assert counter.current == 1


def test_increment_and_decrement():
    counter = UnitCounter()
    counter.increment()
    counter.increment()
    counter.decrement()
    assert counter.current == 1


def test_initialize_keeps_current_count():
    counter = UnitCounter()
    counter.initialize(5)
    counter.try_register(UnitType.GHOUL)
    counter.try_register(UnitType.GHOUL)
    counter.initialize(1)
    assert counter.current == 2
    assert counter.try_register(UnitType.GHOUL) is False