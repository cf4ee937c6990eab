# tilerpg

A small tile-based role-playing game with a built-in level editor, built on pygame.
It opens a 1280×720 window titled "Level Editor RPG" with a main menu, from which you can play the current map or edit it.

## Installing

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Running

```
tilerpg
tilerpg --save-dir path/to/maps
```

The game loads its images from `assets/` relative to the current directory.
The images are not part of the package.
An image that cannot be loaded is skipped: the actor that uses it draws nothing, and a button without an image has no area to click.

Maps are read from and written to `saves/map0.Kdata`, or the same file name in the directory given with `--save-dir`.
A missing map file is treated as an empty map.

## Menu

- **Play** loads the map and starts the game.
- **Base** prints the number of actors in the scene.
- **Editor** opens the level editor on the same map.
- **Escape** or closing the window quits.

A click is a press of the left or middle mouse button.

## Playing

- If the map holds a player with id 0, that player is controlled; otherwise a new player is placed at (1, 1).
- Move the player with **W**, **A**, **S** and **D**. The camera follows the player.
- Tiles block the player's movement: a step that touches a tile is undone.
- The on-screen buttons leave to the menu, save the map, or print the camera rectangle and the coordinates of every actor.

## Editing

- Move the camera freely with the arrow keys.
- The panel button shows or hides the tool panel, which has these tools:
  - **Grass** and **Dirt** create a tile that follows the mouse, snapped to the tile grid, until you click to drop it.
  - **Take** lets you pick up a tile and put it down again.
  - **Delete** removes the tile you click.
- A tile cannot be dropped onto another tile at the same position, and clicks over the open panel are ignored.
- **Save** writes the tiles and the id 0 player in the scene to the map file.

## Map file format

Maps are plain text with one section each for tiles, objects and players:

```
Tiles
{
{ 0 0 0 },
{ 1 128 0 }
}
Objects
{
}
Players
{
{ 0 500 500 }
}
```

Each entry is `{ id x y }`. Entries are separated by `},` and the last one in a section ends with `}`.

Tile ids are:

| Id | Tile |
|----|------|
| 0 | grass |
| 1 | dirt |
| 2–19 | block from the block sheet |

`tilerpg.level_map.format_map` writes this format and `tilerpg.level_map.parse_map_text` reads it into a `MapData`; malformed text raises `MapFormatError`.

## Library modules

- `tilerpg.collider`: `Collider` rectangles with `collides_with`, and `ColliderManager`.
- `tilerpg.camera`: `Camera` with `follow`, `reset` and `to_screen`.
- `tilerpg.level_map`: `LevelMap` to create, load, save and clear numbered maps.
- `tilerpg.wrdata`: a text file of `id x y` player records: `write_player` appends one, `read_player` returns the `(x, y)` of the first record for an id or `None`, `clear` empties the file.
- `tilerpg.network`: `NetworkClient` and `NetworkServer` exchange single integers over TCP, sent as decimal text ending in a NUL byte. The server accepts one client, on port 54000 by default. `receive` returns the leading integer of what arrived (0 if there is none); failures raise `ConnectionError`. Both can be used as context managers.

## What it does not do

- There is no multiplayer: the `tilerpg.network` and `tilerpg.wrdata` modules are not used by the game itself.
- Objects such as `Sword` exist as actors, but nothing places them in a map, and the `Objects` section is always saved empty.
- The editor panel only offers grass and dirt tiles; blocks can be loaded from a map file but not placed in the editor.