import os
from unittest import mock

import pygame

from tilerpg.actors import Actor
from tilerpg.control import ControlManager
from tilerpg.game import FRAME_EVENT, SECOND_EVENT, Game

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class Counter(Actor):
    def __init__(self):
        super().__init__()
        self.updates = 0

    def update(self):
        self.updates += 1


class ScriptedGame(Game):
    def __init__(self, script):
        super().__init__()
        self.script = script
        self.seen = {}

    def main(self):
        pygame.time.set_timer(FRAME_EVENT, 0)
        pygame.time.set_timer(SECOND_EVENT, 0)
        pygame.event.clear()
        self.script(self)


def test_init_runs_main_with_managers_then_shuts_down(capsys):
    def script(game):
        game.seen["size"] = game.screen.get_size()
        game.seen["actors"] = len(game.actor_manager)
        game.seen["colliders"] = len(game.collider_manager)

    game = ScriptedGame(script)
    game.name = "Level Editor RPG"
    Game.init(game, 320, 240)
    assert game.seen == {"size": (320, 240), "actors": 0, "colliders": 0}
    assert game.actor_manager is None
    out = capsys.readouterr().out
    assert "Level Editor RPG" in out
    assert "Gracias por jugar" in out


def test_update_handles_click_then_frame():
    def script(game):
        actor = Counter()
        game.actor_manager.add(actor)
        pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)))
        Game.update(game)
        game.seen["after_click"] = game.mouse_pressed
        pygame.event.post(pygame.event.Event(FRAME_EVENT))
        Game.update(game)
        game.seen["after_frame"] = game.mouse_pressed
        game.seen["updates"] = actor.updates

    game = ScriptedGame(script)
    Game.init(game, 160, 120)
    assert game.seen == {"after_click": True, "after_frame": False, "updates": 1}


def test_update_notes_quit():
    def script(game):
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        Game.update(game)
        game.seen["closed"] = game.close_requested

    game = ScriptedGame(script)
    Game.init(game, 160, 120)
    assert game.seen == {"closed": True}


def test_shutdown_prints_name_and_message(capsys):
    game = Game()
    game.name = "demo"
    game.control_manager = ControlManager()
    game.shutdown("bye")
    assert game.control_manager is None
    assert capsys.readouterr().out == "demo\nbye\n"


def test_mouse_world_position_adds_camera_offset():
    game = Game()
    game.control_manager = ControlManager()
    game.control_manager.camera.left = 100.0
    game.control_manager.camera.top = -50.0
    with mock.patch("pygame.mouse.get_pos", return_value=(10, 20)):
        assert game.mouse_world_position() == (110, -30)