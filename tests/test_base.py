import io

import pytest

from undeadwars.army import Army
from undeadwars.base import Base, UnitLimitError
from undeadwars.bosses import Bladedancer, DeathKnight, Lich
from undeadwars.counter import unit_counter
from undeadwars.troops import Archer, Infantry, Skeleton
from undeadwars.unit import UnitType


@pytest.fixture(autouse=True)
def unit_room():
    unit_counter.initialize(unit_counter.current + 100)
    yield


def test_starting_gold():
    assert Base().gold == Base.STARTING_GOLD
    assert Base(500).gold == 500


def test_hire_unit_spends_gold():
    before = unit_counter.current
    base = Base()
    assert base.hire_unit(UnitType.ARCHER) is True
    assert base.gold == Base.STARTING_GOLD - Archer.GOLD_COST
    assert len(base) == 1
    assert base.get(0).unit_type == UnitType.ARCHER
    assert unit_counter.current == before + 1


def test_hire_unit_without_gold():
    before = unit_counter.current
    base = Base(10)
    assert base.hire_unit(UnitType.ARCHER) is False
    assert base.gold == 10
    assert len(base) == 0
    assert unit_counter.current == before


def test_hire_unit_at_limit_raises():
    unit_counter.initialize(0)
    base = Base()
    with pytest.raises(UnitLimitError):
        base.hire_unit(UnitType.INFANTRY)
    assert base.gold == Base.STARTING_GOLD


def test_hire_boss_is_rejected():
    with pytest.raises(ValueError):
        Base().hire_unit(UnitType.LICH)


def test_spend_and_add_gold():
    base = Base(100)
    assert base.spend_gold(150) is False
    assert base.spend_gold(60) is True
    assert base.gold == 40
    base.add_gold(60)
    assert base.gold == 100


def test_add_and_get():
    base = Base()
    base.add_unit(None)
    unit = Skeleton()
    base.add_unit(unit)
    assert len(base) == 1
    assert base.get(0) is unit
    assert base.get(1) is None
    assert base.reserve_units() == (unit,)


def test_transfer_unit_to_army():
    base = Base()
    unit = Infantry()
    base.add_unit(unit)
    army = Army()
    assert base.transfer_unit_to_army(unit, army) is True
    assert len(base) == 0
    assert list(army) == [unit]
    assert base.transfer_unit_to_army(unit, army) is False


def test_save_bladedancer_line(capsys):
    base = Base()
    base.add_unit(Bladedancer("Kira", 1800, 75, 12))
    out = io.StringIO()
    base.save_bosses(out)
    assert out.getvalue() == '111 1800 2000 75 12 "Kira"\n\nEND\n'
    assert "Boss units found: 1" in capsys.readouterr().out


def test_save_load_round_trip(capsys):
    base = Base()
    base.add_unit(Lich(name="Dread King", health=1200, damage=90, armour=10, mana=300))
    base.add_unit(Infantry())
    base.add_unit(Bladedancer("Kira", 1800, 75, 12))
    out = io.StringIO()
    base.save_bosses(out)
    printed = capsys.readouterr().out
    assert "Saving bosses, army size: 3" in printed

    loaded = Base()
    loaded.load_bosses(io.StringIO(out.getvalue()))
    assert len(loaded) == 2
    lich, dancer = loaded.reserve_units()
    assert isinstance(lich, Lich)
    assert (lich.name, lich.health, lich.attack_damage, lich.armour, lich.mana) == (
        "Dread King", 1200, 90, 10, 300)
    assert lich.max_health == Lich.HEALTH
    assert isinstance(dancer, Bladedancer)
    assert (dancer.name, dancer.health, dancer.armour) == ("Kira", 1800, 12)


def test_load_stops_at_sentinel():
    base = Base()
    base.load_bosses(io.StringIO('-1\n100 1500 1500 100 15 1000 "Morvath"\n'))
    assert len(base) == 0


def test_load_stops_at_unparsable_token():
    base = Base()
    base.load_bosses(io.StringIO('END\n100 1500 1500 100 15 1000 "Morvath"\n'))
    assert len(base) == 0


def test_load_unknown_boss_type_raises():
    with pytest.raises(ValueError):
        Base().load_bosses(io.StringIO('5 1 1 1 1 1 "Nobody"\n'))


def test_reset_keeps_bosses_and_gold():
    base = Base()
    lich = Lich(name="Morvath", health=5)
    base.add_unit(lich)
    base.add_unit(Skeleton())
    base.spend_gold(400)
    base.reset()
    assert base.reserve_units() == (lich,)
    assert lich.health == Lich.HEALTH
    assert base.gold == Base.STARTING_GOLD


def test_empty_units_disposes():
    before = DeathKnight.count
    base = Base()
    base.add_unit(DeathKnight(name="Brolg"))
    base.add_unit(Skeleton())
    assert DeathKnight.count == before + 1
    base.empty_units()
    assert len(base) == 0
    assert DeathKnight.count == before