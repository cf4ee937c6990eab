"""Scene actors: the base actor, map tiles, objects and the editor panel."""

from __future__ import annotations

import os
from enum import Enum

import pygame

from .collider import Collider

GRASS_SPRITE = "assets/mapTiles/grass.png"
DIRT_SPRITE = "assets/mapTiles/dirt.png"
BLOCK_SHEET = "assets/mapTiles/smb_blocks.png"
OBJECT_SPRITE_DIR = "assets/objects"

BLOCK_CELL = 16
BLOCK_SCALE = 3
BLOCK_COLUMNS = 3
FIRST_BLOCK_ID = 2
LAST_BLOCK_ID = 19


class ActorType(str, Enum):
    """Kind tag stored with every actor."""

    NONE = ""
    TILES = "Tiles"
    OBJECTS = "Objects"
    PLAYERS = "Players"
    BUTTONS_DYNAMIC = "Buttons_Dynamic"
    BUTTONS_STATIC = "Buttons_Static"
    BASE_PANEL = "BasePanel"


def load_sprite(path: str | os.PathLike[str]) -> pygame.Surface | None:
    """Load an image, or return None if it cannot be read."""
    try:
        return pygame.image.load(os.fspath(path))
    except (pygame.error, OSError):
        return None


def _camera_of(game):
    control = getattr(game, "control_manager", None)
    return getattr(control, "camera", None)


class Actor:
    """Something placed in the world that is updated and drawn each frame."""

    actor_type = ActorType.NONE

    def __init__(self, x=0, y=0, actor_id=0, game=None, sprite=None, name=""):
        self.x = x
        self.y = y
        self.id = actor_id
        self.game = game
        self.sprite = sprite
        self.name = name
        self.collider: Collider | None = None
        self.controllable_keyboard = False
        self.taken = False

    @property
    def width(self) -> int:
        return self.sprite.get_width() if self.sprite is not None else 0

    @property
    def height(self) -> int:
        return self.sprite.get_height() if self.sprite is not None else 0

    def _screen_position(self) -> tuple[int, int]:
        camera = _camera_of(self.game)
        if camera is None:
            return (round(self.x), round(self.y))
        sx, sy = camera.to_screen(self.x, self.y)
        return (round(sx), round(sy))

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the actor; the base actor draws nothing."""

    def update(self) -> None:
        """Advance the actor by one frame; the base actor does nothing."""


class Tile(Actor):
    """A map tile with a solid collider registered with the game."""

    actor_type = ActorType.TILES

    def __init__(self, x, y, tile_id, game=None, sprite=None):
        super().__init__(x, y, tile_id, game, sprite)
        self.collider = Collider(x, y, self.width, self.height)
        manager = getattr(game, "collider_manager", None)
        if manager is not None:
            manager.add(self.collider)

    def draw(self, surface: pygame.Surface) -> None:
        if self.sprite is not None:
            surface.blit(self.sprite, self._screen_position())


class GrassTile(Tile):
    def __init__(self, x, y, game=None):
        super().__init__(x, y, 0, game, load_sprite(GRASS_SPRITE))


class DirtTile(Tile):
    def __init__(self, x, y, game=None):
        super().__init__(x, y, 1, game, load_sprite(DIRT_SPRITE))


class BasicBlock(Tile):
    """A block drawn from a cell of the block sheet, scaled up."""

    def __init__(self, x, y, tile_id, game=None):
        super().__init__(x, y, tile_id, game, load_sprite(BLOCK_SHEET))

    @property
    def width(self) -> int:
        return BLOCK_CELL * BLOCK_SCALE

    @property
    def height(self) -> int:
        return BLOCK_CELL * BLOCK_SCALE

    def draw(self, surface: pygame.Surface) -> None:
        if self.sprite is None:
            return
        index = self.id - FIRST_BLOCK_ID
        region = pygame.Rect(
            (index % BLOCK_COLUMNS) * BLOCK_CELL,
            (index // BLOCK_COLUMNS) * BLOCK_CELL,
            BLOCK_CELL,
            BLOCK_CELL,
        )
        try:
            cell = self.sprite.subsurface(region)
        except ValueError:
            return
        scaled = pygame.transform.scale(cell, (self.width, self.height))
        surface.blit(scaled, self._screen_position())


class GameObject(Actor):
    """An item that can lie in the world."""

    actor_type = ActorType.OBJECTS

    def draw(self, surface: pygame.Surface) -> None:
        if self.sprite is not None:
            surface.blit(self.sprite, self._screen_position())


class Sword(GameObject):
    def __init__(
        self,
        x,
        y,
        sword_id,
        damage,
        durability,
        attack_speed,
        attack_area,
        in_map,
        name,
        sprite_name,
        game=None,
    ):
        sprite = load_sprite(os.path.join(OBJECT_SPRITE_DIR, f"{sprite_name}.png"))
        super().__init__(x, y, 0, game, sprite, name)
        self.sword_id = sword_id
        self.damage = damage
        self.durability = durability
        self.attack_speed = attack_speed
        self.attack_area = attack_area
        self.in_map = in_map


class PanelEditor(Actor):
    """Editor background panel that stays fixed on screen."""

    actor_type = ActorType.BASE_PANEL

    def __init__(self, x, y, sprite, game=None):
        super().__init__(x, y, 0, game, sprite)

    def draw(self, surface: pygame.Surface) -> None:
        # Positioned relative to the camera, so its screen position never moves.
        if self.sprite is not None:
            surface.blit(self.sprite, (round(self.x), round(self.y)))


def make_tile(tile_id: int, x: int, y: int, game=None) -> Tile:
    """Create the tile that ``tile_id`` stands for in map files."""
    if tile_id == 0:
        return GrassTile(x, y, game)
    if tile_id == 1:
        return DirtTile(x, y, game)
    if FIRST_BLOCK_ID <= tile_id <= LAST_BLOCK_ID:
        return BasicBlock(x, y, tile_id, game)
    raise ValueError(f"unknown tile id: {tile_id}")