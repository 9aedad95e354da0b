import io

import pytest

from undeadwars import boss_names
from undeadwars.bosses import Paladin
from undeadwars.counter import unit_counter
from undeadwars.duel import DuelResult
from undeadwars.game import GameManager, main, parse_count, tokenize_command
from undeadwars.troops import Archer, Skeleton
from undeadwars.unit import UnitType

NAMES = """[LICH]
Morvath
[DARKLORD]
Xerath
[DEATHKNIGHT]
Karn
[PALADIN]
Aldric
Borin
[UNDEADHUNTER]
Vela
[BLADEDANCER]
Sira
"""

WAVES = """WAVE 1
SKELETON SKELETON
END
WAVE 2
ZOMBIE BOSS LICH
END
"""


@pytest.fixture(autouse=True)
def _fresh_state():
    boss_names.destroy_instance()
    unit_counter.current = 0
    unit_counter.limit = 0
    yield
    boss_names.destroy_instance()
    unit_counter.current = 0


@pytest.fixture
def config(tmp_path):
    names = tmp_path / "names.txt"
    names.write_text(NAMES, encoding="utf-8")
    waves = tmp_path / "waves.txt"
    waves.write_text(WAVES, encoding="utf-8")
    cfg = tmp_path / "config.txt"
    cfg.write_text(f"1500 1000 10 {names} {waves}\n", encoding="utf-8")
    return str(cfg)


@pytest.fixture
def game(config):
    out = io.StringIO()
    manager = GameManager(io.StringIO(""), out)
    manager.initialize(config)
    return manager, out


def test_tokenize_command_splits_on_spaces():
    assert tokenize_command("CREATE  ARCHER 2") == ["CREATE", "ARCHER", "2"]
    assert tokenize_command("   ") == []


def test_parse_count():
    assert parse_count("12") == 12
    for bad in ("", "-3", "1a", "+4"):
        with pytest.raises(ValueError):
            parse_count(bad)


def test_initialize_reads_waves_and_spawns_first(game):
    manager, out = game
    assert manager.undead_waves == [["SKELETON", "SKELETON"], ["ZOMBIE", "BOSS LICH"]]
    assert len(manager.undead_base) == 2
    assert all(isinstance(u, Skeleton) for u in manager.undead_base.reserve_units())
    assert "Spawned Wave #1" in out.getvalue()
    assert manager.living_base.gold == 1500
    assert manager.is_running


def test_initialize_missing_config_raises(tmp_path):
    manager = GameManager(io.StringIO(""), io.StringIO())
    with pytest.raises(RuntimeError):
        manager.initialize(str(tmp_path / "missing.txt"))


def test_create_units_spends_gold(game):
    manager, out = game
    manager.handle_command("CREATE ARCHER 2")
    assert len(manager.living_base) == 2
    assert manager.living_base.gold == 1500 - 2 * Archer.GOLD_COST
    assert "Created 2 ARCHER(s)." in out.getvalue()
    assert unit_counter.current == 2


def test_create_not_enough_gold(game):
    manager, out = game
    manager.handle_command("CREATE KNIGHT 3")
    assert len(manager.living_base) == 0
    assert manager.living_base.gold == 1500
    assert "Not enough gold to create 3 KNIGHT(s)." in out.getvalue()


def test_create_over_limit(game):
    manager, out = game
    manager.handle_command("CREATE HEALER 11")
    assert "Cannot create 11 units. Limit exceeded." in out.getvalue()
    assert len(manager.living_base) == 0


def test_create_invalid_count(game):
    manager, out = game
    manager.handle_command("CREATE ARCHER 0")
    assert "Invalid unit count." in out.getvalue()
    assert manager.living_base.gold == 1500


def test_select_regular_units(game):
    manager, out = game
    manager.handle_command("CREATE ARCHER 2")
    manager.handle_command("SELECT ARCHER 1")
    assert len(manager.living_army) == 1
    assert len(manager.living_base) == 1
    assert "Selected 1 ARCHER(s) for duel." in out.getvalue()
    manager.handle_command("SELECT WIZARD 1")
    assert "No matching units found." in out.getvalue()


def test_select_boss_and_limit(game):
    manager, out = game
    manager.handle_command("SELECT BOSS PALADIN")
    bosses = [u for u in manager.living_base.reserve_units() if u.is_boss()]
    assert [b.name for b in bosses] == ["Aldric"]
    assert manager.bosses_created == 1
    manager.handle_command("SELECT BOSS PALADIN")
    assert "You can only select up to 1 boss(es) at this point." in out.getvalue()
    assert manager.bosses_created == 1


def test_select_boss_rejects_regular_type(game):
    manager, out = game
    manager.handle_command("SELECT BOSS ARCHER")
    assert "ARCHER is not a valid boss type." in out.getvalue()
    assert len(manager.living_base) == 0


def test_select_boss_by_name(game):
    manager, out = game
    manager.handle_command("SELECT BOSS PALADIN")
    manager.handle_command("SELECT BOSSNAME Aldric")
    assert [u.name for u in manager.living_army] == ["Aldric"]
    assert len(manager.living_base) == 0
    manager.handle_command("SELECT BOSSNAME Nobody")
    assert 'Boss named "Nobody" is not registered.' in out.getvalue()


def test_status_and_unknown(game):
    manager, out = game
    manager.handle_command("STATUS")
    manager.handle_command("FLY")
    text = out.getvalue()
    assert "Living Gold: 1500" in text
    assert "Undead Gold: 1000" in text
    assert "Unknown command. Type MENU to see available options." in text


def test_duel_without_living_units_loses_game(game):
    manager, out = game
    manager.handle_command("DUEL")
    text = out.getvalue()
    assert "Undead army wins this duel!" in text
    assert "Undead side has won the game!" in text
    assert manager.undead_duel_wins == 1
    assert not manager.is_running
    assert manager.check_win_condition() == DuelResult.UNDEAD
    assert manager.living_base.gold == 1500 + 1000
    assert len(manager.undead_base) == 2


def test_no_winner_at_start(game):
    manager, _ = game
    assert manager.check_win_condition() == DuelResult.DRAW


def test_save_and_load_round_trip(game, tmp_path, config):
    manager, _ = game
    manager.handle_command("SELECT BOSS PALADIN")
    save = tmp_path / "save.txt"
    assert manager.save_game(str(save))
    text = save.read_text(encoding="utf-8")
    assert text.startswith("0 0\n1500 1000\n0\n")
    assert '"Aldric"' in text
    assert "END" in text

    boss_names.destroy_instance()
    other = GameManager(io.StringIO(""), io.StringIO())
    other.initialize(config)
    assert other.load_game(str(save))
    bosses = [u for u in other.living_base.reserve_units() if u.is_boss()]
    assert len(bosses) == 1
    assert isinstance(bosses[0], Paladin)
    assert bosses[0].name == "Aldric"
    assert bosses[0].health == Paladin.HEALTH
    assert other.bosses_created == 1
    assert boss_names.get_instance().next_name(UnitType.PALADIN) == "Borin"


def test_load_missing_file_returns_false(game, tmp_path):
    manager, _ = game
    assert manager.load_game(str(tmp_path / "nothing.txt")) is False


def test_load_past_last_wave_raises(game, tmp_path):
    manager, _ = game
    save = tmp_path / "save.txt"
    save.write_text("0 0\n1500 1000\n5\n\nEND\n", encoding="utf-8")
    with pytest.raises(ValueError):
        manager.load_game(str(save))


def test_restart_dismisses_regular_units(game):
    manager, out = game
    manager.handle_command("CREATE ARCHER 1")
    manager.handle_command("RESTART")
    assert len(manager.living_base) == 0
    assert manager.living_base.gold == 1500
    assert manager.living_duel_wins == 0
    assert manager.is_running
    assert "Game restarted." in out.getvalue()


def test_run_handles_commands_until_exit(config):
    out = io.StringIO()
    manager = GameManager(io.StringIO("STATUS\nEXIT\nno\n"), out)
    manager.initialize(config)
    manager.run()
    text = out.getvalue()
    assert "=== Available Commands ===" in text
    assert "Living Gold: 1500" in text
    assert "Exit the game? Save first? (yes/no): " in text
    assert not manager.is_running


def test_exit_with_save(config, tmp_path):
    save = tmp_path / "exit_save.txt"
    out = io.StringIO()
    manager = GameManager(io.StringIO(f"yes\n{save}\n"), out)
    manager.initialize(config)
    manager.handle_command("EXIT")
    assert "Game saved successfully." in out.getvalue()
    assert save.read_text(encoding="utf-8").startswith("0 0\n")
    assert not manager.is_running


def test_main_reports_fatal_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Fatal error" in capsys.readouterr().err