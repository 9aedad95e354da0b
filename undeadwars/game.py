"""Interactive game: configuration, undead waves, commands and save files."""

from __future__ import annotations

import io
import re
import sys
from typing import TextIO

from undeadwars import boss_names
from undeadwars.army import Army
from undeadwars.base import Base
from undeadwars.counter import unit_counter
from undeadwars.duel import Duel, DuelResult
from undeadwars.factory import create_unit, gold_cost, print_living_unit_costs
from undeadwars.unit import is_boss_type, unit_type_from_string

DEFAULT_CONFIG = "config.txt"

_MAX_LINE = 255
_DUEL_REWARD = 1000
_WINS_PER_EXTRA_BOSS = 3
_BOSS_PREFIX = "BOSS "
_INT_PATTERN = re.compile(r"[+-]?\d+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_MENU = (
    "\n=== Available Commands ===\n"
    "SAVE <file>            - Save the game state to a file\n"
    "LOAD <file>            - Load the game state from a file\n"
    "RESTART                - Restart the game and reload initial config\n"
    "EXIT                   - Exit the game (option to save first)\n"
    "MENU                   - Show this help menu\n"
    "STATUS                 - Display current gold amounts\n"
    "COSTS                  - Show cost for all living units\n"
    "\n--- Preparation Phase ---\n"
    "PREPARE                - Enter help mode\n"
    "CREATE <unit> [count]  - Hire unit(s) from the living faction\n"
    "SELECT <unit> <count>  - Select regular units for the duel\n"
    "SELECT BOSS <type>     - Create boss unit (if allowed)\n"
    "SELECT BOSSNAME <name> - Select an existing boss from your base\n"
    "\n--- Duel Phase ---\n"
    "DUEL <L> <U>           - Start duel (auto-selects undead units)\n"
    "\nCurrent Living Gold: {gold}\n"
    "============================\n"
)


def tokenize_command(line: str) -> list[str]:
    """Split a command line on spaces, ignoring anything past 255 characters."""
    return [part for part in line[:_MAX_LINE].split(" ") if part]


def parse_count(text: str) -> int:
    """Parse a non-negative decimal count; raise ValueError otherwise."""
    if not text or any(char not in "0123456789" for char in text):
        raise ValueError(f"not a count: {text!r}")
    return int(text)


def _to_int(text: str) -> int | None:
    return int(text) if _INT_PATTERN.fullmatch(text) else None


class GameManager:
    """Owns both sides, runs duels and answers player commands."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self.living_base = Base()
        self.undead_base = Base()
        self.living_army = Army()
        self.undead_army = Army()
        self.duel = Duel()
        self.living_duel_wins = 0
        self.undead_duel_wins = 0
        self.is_running = False
        self.original_config_path = ""
        self.undead_waves: list[list[str]] = []
        self.current_wave_index = 0
        self.bosses_created = 0

    def _say(self, text: str) -> None:
        self._out.write(text)

    @staticmethod
    def _warn(text: str) -> None:
        sys.stderr.write(text)

    def initialize(self, config_path: str) -> None:
        """Load the configuration and spawn the first wave."""
        self.original_config_path = config_path
        if not self.load_config(config_path):
            raise RuntimeError("Failed to load configuration.")
        self.is_running = True
        self.spawn_current_wave()

    def load_config(self, config_path: str) -> bool:
        """Read gold, unit limit, boss names file and waves file; False on error."""
        try:
            with open(config_path, encoding="utf-8") as handle:
                fields = handle.read().split()
        except OSError:
            self._warn(f"Failed to open config file: {config_path}\n")
            return False

        numbers = [_to_int(text) for text in fields[:3]]
        if len(numbers) < 3 or None in numbers:
            self._warn("Invalid format in config file (expected 3 values before filename)\n")
            return False
        living_gold, undead_gold, unit_limit = numbers

        if len(fields) < 4:
            self._warn("Boss names file missing from config\n")
            return False
        names_file = fields[3]
        if len(fields) < 5:
            self._warn("Boss names file missing from config\n")
            return False
        self.load_undead_waves(fields[4])

        self.living_base.gold = living_gold
        self.undead_base.gold = undead_gold
        unit_counter.initialize(unit_limit)
        boss_names.create_instance(names_file)
        return True

    def load_undead_waves(self, filename: str) -> None:
        """Append the waves described in ``filename`` to the wave list."""
        try:
            with open(filename, encoding="utf-8") as handle:
                lines = handle.read().split("\n")
        except OSError:
            self._warn("Failed to open wave file.\n")
            return

        current: list[str] = []
        for line in lines:
            trimmed = line.lstrip(" \t\r\n")
            if not trimmed:
                continue
            if trimmed.startswith("WAVE"):
                current = []
            elif trimmed == "END":
                if current:
                    self.undead_waves.append(list(current))
            else:
                words = iter(trimmed.split())
                for word in words:
                    if word != "BOSS":
                        current.append(word)
                        continue
                    boss_type = next(words, None)
                    if boss_type is None:
                        self._warn("BOSS type missing after BOSS keyword!\n")
                    else:
                        current.append(_BOSS_PREFIX + boss_type)

    def spawn_current_wave(self) -> None:
        """Put the units of the current wave into the undead base."""
        if self.current_wave_index >= len(self.undead_waves):
            self._warn("All waves have been spawned.\n")
            return
        for entry in self.undead_waves[self.current_wave_index]:
            if entry.startswith(_BOSS_PREFIX):
                entry = entry[len(_BOSS_PREFIX):]
            self.undead_base.add_unit(create_unit(unit_type_from_string(entry)))
        self._say(f"Spawned Wave #{self.current_wave_index + 1}\n")

    def _check_and_spawn_next_wave(self) -> None:
        if len(self.undead_base) == 0 and self.current_wave_index + 1 < len(self.undead_waves):
            self.current_wave_index += 1
            self.spawn_current_wave()

    def _auto_select_undead_units(self) -> None:
        for unit in self.undead_base.reserve_units():
            self.undead_base.transfer_unit_to_army(unit, self.undead_army)

    @staticmethod
    def _return_survivors_to_base(base: Base, army: Army) -> None:
        for unit in list(army):
            if unit.is_alive():
                base.add_unit(unit)
                army.remove_unit(unit)
        army.remove_dead_units()

    def _prepare_to_save(self) -> None:
        self._return_survivors_to_base(self.living_base, self.living_army)

    def run(self) -> None:
        """Show the menu and handle commands until the game stops or input ends."""
        self.display_menu()
        while self.is_running:
            line = self._in.readline()
            if not line:
                break
            self.handle_command(line.rstrip("\n"))

    def display_menu(self) -> None:
        self._say(_MENU.format(gold=self.living_base.gold))

    def save_game(self, path: str) -> bool:
        """Write wins, gold, wave index and the living bosses; False if unwritable."""
        try:
            handle = open(path, "w", encoding="utf-8")
        except OSError:
            return False
        with handle:
            handle.write(f"{self.living_duel_wins} {self.undead_duel_wins}\n")
            handle.write(f"{self.living_base.gold} {self.undead_base.gold}\n")
            handle.write(f"{self.current_wave_index}\n")
            self.living_base.save_bosses(handle)
        return True

    def load_game(self, path: str) -> bool:
        """Restore a saved game; False if the file cannot be opened."""
        try:
            with open(path, encoding="utf-8") as handle:
                text = handle.read()
        except OSError:
            return False

        values = []
        position = 0
        for _ in range(5):
            match = _LEADING_INT.match(text, position)
            if match is None:
                raise ValueError("Malformed save file")
            values.append(int(match.group(1)))
            position = match.end()
        living_wins, undead_wins, living_gold, _undead_gold, wave_index = values

        self.living_duel_wins = living_wins
        self.undead_duel_wins = undead_wins
        self.living_base.gold = living_gold
        self.current_wave_index = wave_index

        self.living_base.load_bosses(io.StringIO(text[position:]))

        manager = boss_names.get_instance()
        self.bosses_created = 0
        for unit in self.living_base.reserve_units():
            if unit.is_boss():
                self.bosses_created += 1
                manager.register_name(unit.name)

        self.undead_base.empty_units()
        if self.current_wave_index >= len(self.undead_waves):
            raise ValueError("Attempting to spawn an unexisting wave")
        self.spawn_current_wave()
        return True

    def restart(self) -> None:
        """Reset both sides and reload the original configuration."""
        self.living_duel_wins = 0
        self.undead_duel_wins = 0
        self.living_base.reset()
        self.undead_base.reset()
        self.living_army.reset()
        self.undead_army.reset()
        boss_names.destroy_instance()
        if not self.load_config(self.original_config_path):
            self._warn("Failed to reload configuration during restart.\n")
            self.is_running = False
            return
        self.is_running = True

    def check_win_condition(self) -> DuelResult:
        """Winner of the game so far, ``DRAW`` while it goes on."""
        if self.undead_duel_wins >= 1:
            return DuelResult.UNDEAD
        all_cleared = (
            bool(self.undead_waves)
            and self.current_wave_index >= len(self.undead_waves) - 1
            and len(self.undead_base) == 0
        )
        if all_cleared and self.living_duel_wins >= 1:
            return DuelResult.LIVING
        return DuelResult.DRAW

    def handle_command(self, line: str) -> None:
        """Carry out one command line."""
        words = tokenize_command(line)
        if not words:
            return
        command = words[0]
        if command == "PREPARE":
            self._prepare()
        elif command == "EXIT":
            self._exit()
        elif command == "SAVE" and len(words) > 1:
            self._prepare_to_save()
            if self.save_game(words[1]):
                self._say(f"Game saved to {words[1]}\n")
            else:
                self._say("Failed to save game. Units returned to base.\n")
        elif command == "LOAD" and len(words) > 1:
            if self.load_game(words[1]):
                self._say(f"Game loaded from {words[1]}\n")
            else:
                self._say("Failed to load game.\n")
        elif command == "RESTART":
            self.restart()
            self._say("Game restarted.\n")
        elif command == "MENU":
            self.display_menu()
        elif command == "DUEL":
            self._duel()
        elif command == "CREATE" and len(words) in (2, 3):
            self._create(words)
        elif command == "SELECT" and len(words) == 3 and words[1] == "BOSSNAME":
            self._select_boss_by_name(words[2])
        elif command == "SELECT" and len(words) == 3 and words[1] == "BOSS":
            self._select_boss_type(words[2])
        elif command == "SELECT" and len(words) == 3:
            self._select_units(words[1], words[2])
        elif command == "STATUS":
            self._say(f"Living Gold: {self.living_base.gold}\n")
            self._say(f"Undead Gold: {self.undead_base.gold}\n")
        elif command == "COSTS":
            print_living_unit_costs(self._out)
        else:
            self._say("Unknown command. Type MENU to see available options.\n")

    def _prepare(self) -> None:
        self._say(
            "Preparation mode enabled.\n"
            "Use CREATE <unitname> to create units.\n"
            "Use SELECT BOSS <bossname> to select a boss.\n"
            "Use SELECT <unitname> <count> to select regular units.\n"
            "When ready, use START to begin the duel.\n"
            f"Current Living Gold: {self.living_base.gold}\n"
        )

    def _exit(self) -> None:
        self._say("Exit the game? Save first? (yes/no): ")
        choice = self._in.readline().rstrip("\n")
        if choice == "yes":
            self._say("Enter file name to save: ")
            filename = self._in.readline().rstrip("\n")
            self._prepare_to_save()
            if self.save_game(filename):
                self._say("Game saved successfully.\n")
            else:
                self._say("Failed to save game. Units returned to base.\n")
        self.is_running = False

    def _duel(self) -> None:
        self._auto_select_undead_units()
        self.duel.setup(self.living_army, self.undead_army)
        self.duel.fight()
        self._return_survivors_to_base(self.living_base, self.living_army)
        self._return_survivors_to_base(self.undead_base, self.undead_army)

        result = self.duel.take_result()
        if result == DuelResult.LIVING:
            self.living_duel_wins += 1
            self._say("Living army wins this duel!\n")
            self._check_and_spawn_next_wave()
        elif result == DuelResult.UNDEAD:
            self.undead_duel_wins += 1
            self._say("Undead army wins this duel!\n")
        else:
            self._say("The duel ended in a draw.\n")

        winner = self.check_win_condition()
        if winner == DuelResult.LIVING:
            self._say("Living side has won the game!\n")
            self.is_running = False
        elif winner == DuelResult.UNDEAD:
            self._say("Undead side has won the game!\n")
            self.is_running = False
        self.living_base.add_gold(_DUEL_REWARD)
        self.undead_base.add_gold(_DUEL_REWARD)

    def _create(self, words: list[str]) -> None:
        name = words[1]
        count = 1
        if len(words) == 3:
            try:
                count = parse_count(words[2])
            except ValueError:
                count = 0
            if count <= 0:
                self._say("Invalid unit count.\n")
                return

        unit_type = unit_type_from_string(name)
        if unit_counter.current + count > unit_counter.limit:
            self._say(f"Cannot create {count} units. Limit exceeded.\n")
            return

        if not self.living_base.spend_gold(gold_cost(unit_type) * count):
            self._say(f"Not enough gold to create {count} {name}(s).\n")
            return

        created = 0
        for _ in range(count):
            if not unit_counter.try_register(unit_type):
                self._say(f"Reached unit limit during creation. Created {created} units.\n")
                break
            unit = create_unit(unit_type)
            if unit is None:
                self._say("Invalid unit type.\n")
                break
            self.living_base.add_unit(unit)
            created += 1
        if created > 0:
            self._say(f"Created {created} {name}(s).\n")

    def _select_boss_by_name(self, boss_name: str) -> None:
        if not boss_names.get_instance().is_name_registered(boss_name):
            self._say(f'Boss named "{boss_name}" is not registered.\n')
            return
        for unit in self.living_base.reserve_units():
            if unit.is_boss() and unit.name == boss_name:
                self.living_base.transfer_unit_to_army(unit, self.living_army)
                self._say(f"Boss {boss_name} selected for duel.\n")
                return
        self._say(f'Boss named "{boss_name}" not found in your base.\n')

    def _select_boss_type(self, type_name: str) -> None:
        boss_type = unit_type_from_string(type_name)
        if not is_boss_type(boss_type):
            self._say(f"{type_name} is not a valid boss type.\n")
            return
        allowed = 1 + self.living_duel_wins // _WINS_PER_EXTRA_BOSS
        if self.bosses_created >= allowed:
            self._say(f"You can only select up to {allowed} boss(es) at this point.\n")
            return
        boss = create_unit(boss_type)
        if boss is None:
            self._say(f"Failed to create boss of type: {type_name}\n")
            return
        if not boss.is_boss():
            self._say(f"{type_name} is not marked as a boss unit.\n")
            boss.dispose()
            return
        if any(u.is_boss() and u.name == boss.name for u in self.living_base.reserve_units()):
            self._say(f"Boss {boss.name} is already in your base.\n")
            boss.dispose()
            return
        self.living_base.add_unit(boss)
        self.bosses_created += 1
        self._say(f"Boss {boss.name} added to base for future duels.\n")

    def _select_units(self, unit_name: str, count_text: str) -> None:
        try:
            count = parse_count(count_text)
        except ValueError:
            count = 0
        if count <= 0:
            self._say("Invalid unit count.\n")
            return
        selected = 0
        for unit in self.living_base.reserve_units():
            if selected >= count:
                break
            if unit.name == unit_name and not unit.is_boss():
                self.living_base.transfer_unit_to_army(unit, self.living_army)
                selected += 1
        if selected == 0:
            self._say("No matching units found.\n")
        else:
            self._say(f"Selected {selected} {unit_name}(s) for duel.\n")


def main(argv: list[str] | None = None) -> int:
    """Start the game with the given config file, ``config.txt`` by default."""
    args = sys.argv[1:] if argv is None else argv
    config_path = args[0] if args else DEFAULT_CONFIG
    try:
        game = GameManager()
        game.initialize(config_path)
        game.run()
    except Exception as exc:
        sys.stderr.write(f"Fatal error: {exc}\n")
        return 1
    return 0