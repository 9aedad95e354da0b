# undeadwars

A turn-based console strategy game. You command the living faction. You hire
troops and bosses with gold, send them into duels, and hold out against
successive waves of skeletons, ghouls, necromancers, zombies, ghosts and
undead bosses.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Starting a game

```
undeadwars
```

The game reads its configuration from `config.txt` in the current directory.
You can name another file as the first argument:

```
undeadwars my_config.txt
```

If the game stops on an error, it prints `Fatal error: ...` and exits with
status 1.

### Configuration file

The file holds five whitespace-separated values:

```
1000 1000 50
boss_names.txt
waves.txt
```

1. The starting gold for the living side.
2. The starting gold for the undead side.
3. The limit on regular (non-boss) units.
4. The boss names file.
5. The undead waves file.

### Boss names file

Names are grouped under a boss type in square brackets. Each new boss takes
the first free name of its type. When a boss falls in battle, its name goes
back to the pool.

```
[LICH]
Kel'Thuzad
[DARKLORD]
Malgrath
[DEATHKNIGHT]
Arthos
Valen
[PALADIN]
Uther
[UNDEADHUNTER]
Sylva
[BLADEDANCER]
Ilyra
```

The accepted section names are `LICH`, `DARKLORD`, `DEATHKNIGHT`,
`UNDEADHUNTER`, `BLADEDANCER` and `PALADIN`. Any other section name is an
error. Lines before the first section are ignored.

### Waves file

Each wave begins with a line that starts with `WAVE` and ends with a line
reading `END`. Between them, list unit names separated by spaces or line
breaks. `BOSS <TYPE>` adds a boss.

```
WAVE 1
SKELETON SKELETON GHOUL
NECROMANCER
END
WAVE 2
ZOMBIE DIBBUK GHOST
BOSS LICH
END
```

## Commands

| Command | Effect |
| --- | --- |
| `MENU` | Show the list of commands and the living side's gold |
| `STATUS` | Show both sides' gold |
| `COSTS` | Show the gold cost of the living units |
| `PREPARE` | Show help for the preparation phase |
| `CREATE <unit> [count]` | Hire regular units into your base, for example `INFANTRY`, `ARCHER`, `KNIGHT`, `HEALER`, `WIZARD` |
| `SELECT <unit> <count>` | Move up to `count` hired units of that name into your army |
| `SELECT BOSS <type>` | Create a boss in your base: one boss, plus one more for every three duel wins |
| `SELECT BOSSNAME <name>` | Move the named boss from your base into your army |
| `DUEL` | Fight the current undead wave |
| `SAVE <file>` | Return your surviving army to base, then save the game |
| `LOAD <file>` | Load a saved game and respawn its wave |
| `RESTART` | Start over with the original configuration |
| `EXIT` | Leave the game, with the option to save first |

`CREATE` checks the unit limit and your gold before it hires anything. A unit
name that has no gold price, such as an unknown name or a boss type, stops the
game with an error.

### How a duel runs

If the undead side has nothing but ghosts, the living side wins at once.
Otherwise a duel has four phases:

1. **Undead turn.** The undead use their abilities, then attack.
2. **Living turn.** The living use their abilities, then attack.
3. **Resurrection.** Fallen knights usually rise as death knights, up to seven
   at a time. A lich raises up to six of the remaining dead as revenants. Each
   necromancer raises up to three as skeletons.
4. **Last attack.** The living attack once more, and the dead are removed.

The side whose army is wiped out loses the duel. After the duel, survivors
return to their bases and both sides earn 1000 gold. When the living win a
duel and the undead base is empty, the next wave spawns.

You win the game by clearing the last wave. You lose it if the undead win a
single duel.

## Limitations

- A save file keeps the duel wins, the living side's gold, the wave number and
  the bosses in your base. It does not keep hired regular units or the undead
  side's gold.
- The unit limit counts units hired with `CREATE` and units summoned by a dark
  lord. Units that die are not subtracted from the count.

## Using the library

You can use the game objects directly:

```python
from undeadwars.unit import unit_type_from_string, UnitType
from undeadwars.troops import Knight, Skeleton

assert unit_type_from_string("KNIGHT") is UnitType.KNIGHT

knight = Knight()
skeleton = Skeleton()
knight.attack(skeleton)
print(skeleton.health, skeleton.armour)  # 478 7
```

### Modules

| Module | Contents |
| --- | --- |
| `undeadwars.unit` | Unit types, factions, armour classes, and the base `Unit` and `ManaPool` classes |
| `undeadwars.troops` | Regular units |
| `undeadwars.bosses` | Boss units |
| `undeadwars.counter` | The shared `unit_counter` |
| `undeadwars.boss_names` | `BossNameManager` and the shared instance functions |
| `undeadwars.factory` | `create_unit`, `gold_cost` and `print_living_unit_costs` |
| `undeadwars.army` | `Army` |
| `undeadwars.base` | `Base` |
| `undeadwars.duel` | `Duel` and `DuelResult` |
| `undeadwars.game` | `GameManager` and `main` |

### Bosses need a name pool

A boss built without an explicit name draws its name from the shared name
manager, so you must create that manager first:

```python
from undeadwars import boss_names
from undeadwars.bosses import Lich

boss_names.create_instance("boss_names.txt")
lich = Lich()
```