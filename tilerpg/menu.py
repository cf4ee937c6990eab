"""Main menu of the level editor and the play and edit screens it opens."""

from __future__ import annotations

import argparse
import os
import random
from typing import Callable, Iterator

import pygame

from .actors import ActorType, load_sprite
from .buttons import StaticButton
from .editor import GameEditor
from .game import Game
from .level_map import SAVE_DIR, LevelMap
from .player import Player

TITLE = "Level Editor RPG"
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
BUTTON_ASSETS = "assets/buttons"
EDITOR_ASSETS = "assets/editor"


def _button(x: int, y: int, button_id: int, game: Game, folder: str, name: str) -> StaticButton:
    return StaticButton(
        x,
        y,
        button_id,
        game,
        load_sprite(f"{folder}/{name}_false.png"),
        load_sprite(f"{folder}/{name}_true.png"),
    )


class Menu(Game):
    """The start menu: play a map, inspect the scene or open the editor."""

    def __init__(self, save_dir: str | os.PathLike[str] = SAVE_DIR) -> None:
        super().__init__()
        self.save_dir = save_dir
        self.exit_loop = False

    def _should_exit(self) -> bool:
        keyboard = self.control_manager.keyboard
        if keyboard.is_down(pygame.K_ESCAPE) or self.close_requested:
            self.exit_loop = True
        return self.exit_loop

    def _frames(self, before: Callable[[], None] | None = None) -> Iterator[None]:
        """Process one event per step until the player asks to quit."""
        while not self.exit_loop:
            if before is not None:
                before()
            if self._should_exit():
                return
            self.update()
            yield

    def _enter(self, buttons: tuple[StaticButton, ...], screen: Callable[[], None]) -> None:
        manager = self.actor_manager
        for button in buttons:
            manager.remove(button)
        screen()
        for button in buttons:
            manager.add(button)

    def main(self) -> None:
        """Show the menu buttons and react to them until exit."""
        play = _button(30, 30, 0, self, BUTTON_ASSETS, "play")
        base = _button(100, 200, 1, self, BUTTON_ASSETS, "base")
        editor = _button(170, 30, 2, self, BUTTON_ASSETS, "editor")
        buttons = (play, base, editor)
        for button in buttons:
            self.actor_manager.add(button)

        for _ in self._frames():
            if play.pressed():
                self._enter(buttons, self.game_in)
            if base.pressed():
                print(f"Buttons: {len(self.actor_manager)}")
            if editor.pressed():
                self._enter(buttons, self.editor_in)

    def _print_coordinates(self, player) -> None:
        left, top, right, bottom = self.control_manager.camera.position
        print("\n\nCOORDENADAS")
        print(f" Camara: {left}, {top}, {right}, {bottom}")
        for actor in self.actor_manager:
            print(f"x: {actor.x} y: {actor.y}")
        print(f"Player: {player.x}, {player.y}")

    def game_in(self) -> None:
        """Play the saved map with a keyboard-controlled player."""
        level = LevelMap(self, 0, self.save_dir)
        level.load()

        exit_button = _button(0, 0, 0, self, BUTTON_ASSETS, "exit")
        save_button = _button(240, 30, 1, self, BUTTON_ASSETS, "save")
        coords_button = _button(410, 30, 2, self, BUTTON_ASSETS, "base")
        manager = self.actor_manager
        for button in (exit_button, save_button, coords_button):
            manager.add(button)

        player = next(
            (a for a in manager if a.id == 0 and a.actor_type == ActorType.PLAYERS),
            None,
        )
        if player is None:
            player = Player(1, 1, 1, self)
            manager.add(player)
        self.control_manager.set_keyboard(player)

        for _ in self._frames():
            if exit_button.pressed():
                print("SalirGameIn")
                manager.destroy_all()
                level.destroy_all()
                self.control_manager.reset_camera()
                return
            if save_button.pressed():
                level.save()
            if coords_button.pressed():
                self._print_coordinates(player)

    def editor_in(self) -> None:
        """Edit the saved map with the mouse and a free-moving camera."""
        level = LevelMap(self, 0, self.save_dir)
        editor = GameEditor(self)
        level.load()

        exit_button = _button(426, 20, 0, self, BUTTON_ASSETS, "exit")
        save_button = _button(551, 20, 1, self, BUTTON_ASSETS, "save")
        panel_button = _button(676, 20, 2, self, EDITOR_ASSETS, "panel")
        manager = self.actor_manager
        for button in (exit_button, save_button, panel_button):
            manager.add(button)
        panel_open = False

        for _ in self._frames(before=self.control_manager.free_camera):
            if exit_button.pressed():
                manager.destroy_all()
                editor.remove_tools()
                self.control_manager.reset_camera()
                return
            if save_button.pressed():
                level.save()

            if not panel_open:
                if panel_button.pressed():
                    editor.add_tools()
                    panel_open = True
                editor.show_tools()
            else:
                editor.show_tools()
                if panel_button.pressed():
                    editor.remove_tools()
                    panel_open = False


def main(argv=None) -> int:
    """Start the level editor window."""
    parser = argparse.ArgumentParser(prog="tilerpg", description=TITLE)
    parser.add_argument(
        "--save-dir",
        default=SAVE_DIR,
        help="directory that holds the map files",
    )
    args = parser.parse_args(argv)

    menu = Menu(args.save_dir)
    random.seed()
    menu.name = TITLE
    menu.init(WINDOW_WIDTH, WINDOW_HEIGHT)
    return 0