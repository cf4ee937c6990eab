from types import SimpleNamespace

from tilerpg.actor_manager import ActorManager
from tilerpg.actors import Actor, Tile
from tilerpg.collider import ColliderManager


class Recorder(Actor):
    def __init__(self, log, label):
        super().__init__()
        self.log = log
        self.label = label

    def update(self):
        self.log.append(self.label)


def test_add_keeps_insertion_order():
    manager = ActorManager()
    actors = [Actor(), Actor(), Actor()]
    for actor in actors:
        manager.add(actor)
    assert list(manager) == actors
    assert len(manager) == len(actors)


def test_add_tile_registers_in_scene_and_tile_list():
    manager = ActorManager()
    tile = Tile(0, 0, 0)
    manager.add_tile(tile)
    assert manager.tiles == (tile,)
    assert list(manager) == [tile]


def test_add_object_and_player_use_their_own_lists():
    manager = ActorManager()
    obj, player = Actor(), Actor()
    manager.add_object(obj)
    manager.add_player(player)
    assert manager.objects == (obj,)
    assert manager.players == (player,)
    assert list(manager) == [obj, player]


def test_remove_only_takes_actor_out_of_scene():
    manager = ActorManager()
    tile = Tile(0, 0, 0)
    manager.add_tile(tile)
    manager.remove(tile)
    assert list(manager) == []
    assert manager.tiles == (tile,)


def test_remove_unknown_actor_leaves_scene_unchanged():
    manager = ActorManager()
    kept = Actor()
    manager.add(kept)
    manager.remove(Actor())
    assert list(manager) == [kept]


def test_destroy_releases_collider():
    game = SimpleNamespace(collider_manager=ColliderManager())
    manager = ActorManager(game)
    tile = Tile(0, 0, 0, game)
    manager.add_tile(tile)
    assert len(game.collider_manager) == 1
    manager.destroy(tile)
    assert len(game.collider_manager) == 0
    assert list(manager) == []
    assert manager.tiles == ()


def test_destroy_unknown_actor_is_ignored():
    manager = ActorManager()
    kept = Actor()
    manager.add(kept)
    manager.destroy(Actor())
    assert list(manager) == [kept]


def test_destroy_all_empties_every_list():
    game = SimpleNamespace(collider_manager=ColliderManager())
    manager = ActorManager(game)
    manager.add_tile(Tile(0, 0, 0, game))
    manager.add_player(Actor())
    manager.add(Actor())
    manager.destroy_all()
    assert len(manager) == 0
    assert manager.tiles == ()
    assert manager.players == ()
    assert len(game.collider_manager) == 0


def test_update_calls_each_actor_in_order():
    log = []
    manager = ActorManager()
    manager.add(Recorder(log, "a"))
    manager.add(Recorder(log, "b"))
    manager.update()
    assert log == ["a", "b"]


def test_iteration_is_a_snapshot():
    manager = ActorManager()
    first, second = Actor(), Actor()
    manager.add(first)
    manager.add(second)
    seen = []
    for actor in manager:
        manager.remove(actor)
        seen.append(actor)
    assert seen == [first, second]
    assert len(manager) == 0