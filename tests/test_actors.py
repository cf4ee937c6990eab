from types import SimpleNamespace

import pygame
import pytest

from tilerpg.actors import (
    DIRT_SPRITE,
    GRASS_SPRITE,
    Actor,
    ActorType,
    BasicBlock,
    DirtTile,
    GameObject,
    GrassTile,
    PanelEditor,
    Sword,
    Tile,
    load_sprite,
    make_tile,
)
from tilerpg.camera import Camera
from tilerpg.collider import ColliderManager

RED = (255, 0, 0)
GREEN = (0, 255, 0)


def make_game(camera=None):
    return SimpleNamespace(
        collider_manager=ColliderManager(),
        control_manager=SimpleNamespace(camera=camera or Camera()),
    )


def solid(size, colour):
    surface = pygame.Surface(size)
    surface.fill(colour)
    return surface


def colour_at(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_actor_type_values():
    assert ActorType("Tiles") is ActorType.TILES
    assert ActorType("Buttons_Static") is ActorType.BUTTONS_STATIC
    assert make_tile(0, 0, 0).actor_type.value == "Tiles"


def test_load_sprite_missing_file(tmp_path):
    assert load_sprite(tmp_path / "none.png") is None


def test_load_sprite_round_trip(tmp_path):
    path = tmp_path / "img.png"
    pygame.image.save(solid((7, 5), RED), str(path))
    sprite = load_sprite(path)
    assert sprite.get_size() == (7, 5)


def test_actor_size_follows_sprite():
    actor = Actor(sprite=solid((12, 8), RED))
    assert (actor.width, actor.height) == (12, 8)
    assert Actor().width == 0


@pytest.mark.parametrize(
    "tile_id,cls",
    [(0, GrassTile), (1, DirtTile), (2, BasicBlock), (19, BasicBlock)],
)
def test_make_tile_chooses_class(tile_id, cls):
    tile = make_tile(tile_id, 3, 4)
    assert type(tile) is cls
    assert tile.id == tile_id
    assert (tile.x, tile.y) == (3, 4)
    assert tile.actor_type is ActorType.TILES


@pytest.mark.parametrize("tile_id", [-1, 20])
def test_make_tile_rejects_unknown_id(tile_id):
    with pytest.raises(ValueError):
        make_tile(tile_id, 0, 0)


def test_tile_registers_collider():
    game = make_game()
    tile = make_tile(5, 10, 20, game)
    assert list(game.collider_manager) == [tile.collider]
    assert (tile.collider.x, tile.collider.y) == (10, 20)
    assert (tile.collider.width, tile.collider.height) == (tile.width, tile.height)


def test_basic_block_size_is_scaled_cell():
    block = BasicBlock(0, 0, 2)
    assert (block.width, block.height) == (16 * 3, 16 * 3)


def test_grass_tile_loads_asset(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "assets" / "mapTiles").mkdir(parents=True)
    pygame.image.save(solid((32, 24), GREEN), GRASS_SPRITE)
    pygame.image.save(solid((10, 10), RED), DIRT_SPRITE)
    grass = GrassTile(0, 0)
    dirt = DirtTile(0, 0)
    assert (grass.width, grass.height) == (32, 24)
    assert colour_at(grass.sprite, (0, 0)) == GREEN
    assert dirt.width == 10


def test_tile_draw_applies_camera():
    camera = Camera(left=10, top=5)
    tile = Tile(20, 15, 0, make_game(camera), solid((4, 4), RED))
    target = solid((40, 40), (0, 0, 0))
    tile.draw(target)
    assert colour_at(target, (10, 10)) == RED
    assert colour_at(target, (20, 15)) == (0, 0, 0)


def _sheet():
    sheet = solid((48, 96), (0, 0, 0))
    sheet.fill(RED, pygame.Rect(0, 0, 16, 16))
    sheet.fill(GREEN, pygame.Rect(16, 0, 16, 16))
    return sheet


@pytest.mark.parametrize("tile_id,colour", [(2, RED), (3, GREEN)])
def test_basic_block_draws_its_cell(tile_id, colour):
    block = BasicBlock(0, 0, tile_id)
    block.sprite = _sheet()
    target = solid((60, 60), (0, 0, 255))
    block.draw(target)
    assert colour_at(target, (0, 0)) == colour
    assert colour_at(target, (47, 47)) == colour
    assert colour_at(target, (50, 50)) == (0, 0, 255)


def test_panel_is_fixed_on_screen():
    camera = Camera()
    camera.follow(400, 400, 48, 48)
    panel = PanelEditor(3, 3, solid((4, 4), RED), make_game(camera))
    target = solid((10, 10), (0, 0, 0))
    panel.draw(target)
    assert colour_at(target, (3, 3)) == RED
    assert panel.actor_type is ActorType.BASE_PANEL


def test_game_object_type():
    assert GameObject().actor_type is ActorType.OBJECTS


def test_sword_attributes():
    sword = Sword(1, 2, 0, 50, 100, 1, 10, False, "SUPER SWORD", "master_sword")
    assert sword.name == "SUPER SWORD"
    assert (sword.damage, sword.durability, sword.attack_speed, sword.attack_area) == (50, 100, 1, 10)
    assert sword.actor_type is ActorType.OBJECTS
    assert sword.sprite is None


def test_base_actor_draw_leaves_surface_untouched():
    target = solid((5, 5), (1, 2, 3))
    Actor(sprite=solid((5, 5), RED)).draw(target)
    assert colour_at(target, (2, 2)) == (1, 2, 3)