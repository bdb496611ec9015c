# swordlord

A side-scrolling platformer built on pygame. You play a sword-wielding
warrior who runs, jumps and swings a sword through tile-based levels that
hold NightBorne warriors, Orcs and MrProfessorWurst.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Playing

```
swordlord
```

The command opens a fullscreen window on the first display and runs the game
at up to 250 frames a second. Run it from a directory that holds the game's
`assets/` and `configs/` folders: images and fonts are read from `assets/`,
and levels from `configs/levels/level_<n>.json` (the game plays level 1).
Images or fonts that cannot be loaded are simply not drawn.

The game opens on the start menu, which has **Start**, **Settings** and
**Quit** buttons. In the settings menu the **Displays** button opens a
dropdown of the connected displays; picking one moves the fullscreen window
to it.

| Key / button      | Action                                         |
|-------------------|------------------------------------------------|
| `A` / `D`         | walk left / right                              |
| `Space`           | jump; releasing it early gives a lower jump    |
| Left mouse button | swing the current weapon                       |
| `G`               | switch between the sword and bare hands        |
| `Esc`             | return to the start menu (in a level or in settings) |

In a level the camera follows the player, and hitboxes are outlined in red.
NightBorne and Orc walk towards the player until within 200 pixels and show a
health bar; a NightBorne falls after five hits, an Orc after three.
MrProfessorWurst stays where he is and turns to face the player.

## Level files

A level is a JSON document that holds:

- `player_spawn`: an object with `x` and `y`.
- `backgrounds`: a list of image paths, drawn stretched over the screen.
- `tileset`: maps one-character symbols to `{"path": ..., "solid": ...}`.
  Only solid tiles block movement.
- `tilemap`: a list of strings. Each character is a 32×32 tile, and
  characters not in the tileset are left empty.
- `enemies`: a list of `{"type": ..., "x": ..., "y": ...}` where the type is
  `NightBorne`, `MrProfessorWurst` or `Orc`; other types are skipped.

A missing level file gives an empty level with the player at (0, 0).

## Using it as a library

- `swordlord.level_builder.LevelBuilder(window, width, height, levels_dir=...).load_level(n)`
  reads a level into a `LevelData` (player spawn, enemy spawns, enemies,
  tiles, backgrounds).
- `swordlord.game.Game(window, ...)` holds the scenes; `Game.step(delta_time, events)`
  runs one frame from a list of pygame events and returns whether the game
  is still running, and `Game.run()` loops until it quits.
- `swordlord.inventory` has `Item` and `Inventory`: `Item.add_to_stack`
  adds to a stack up to its `max_amount`, and `Inventory.add_item` merges an
  item into a matching stack or places it in one of 40 slots, returning
  `True` only when it took a new slot.
- `swordlord.tiles.Rect` is a float rectangle with `intersects`,
  `contains_point` and `moved`.

## What it does not do

- The inventory and console panels (`InventoryMenu`, `Console`) exist, but
  the game loop never shows them: pressing `I` in a level or `F2` on the start
  menu records the request and, for the console, creates the panel, yet
  nothing is drawn on top of the scene.
- The console only collects typed text; pressing Enter clears it and no
  commands are run.
- The **Resolution** button in the settings menu does nothing, and displays
  are listed as "Unknown" rather than by name.
- Items cannot be picked up in the game; the inventory classes are not wired
  to the player.
- Enemies do not attack or hurt the player, and there is no saving.