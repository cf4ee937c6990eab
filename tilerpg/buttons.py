"""Clickable buttons placed in the world or fixed on screen."""

from __future__ import annotations

import pygame

from .actors import Actor, ActorType

COOLDOWN_TICKS = 100


class Button(Actor):
    """A button at a world position that lights up under the mouse."""

    actor_type = ActorType.BUTTONS_DYNAMIC

    def __init__(self, x, y, button_id, game, sprite_false, sprite_true):
        super().__init__(x, y, button_id, game, sprite_false)
        self.sprite_false = sprite_false
        self.sprite_true = sprite_true
        self.sprite_width = sprite_false.get_width() if sprite_false is not None else 0
        self.sprite_height = sprite_false.get_height() if sprite_false is not None else 0
        self.in_range = False
        self._pressed = False
        self._wait_ticks = 0
        self._waiting = False

    def _contains(self, mx: int, my: int) -> bool:
        return (
            self.x <= mx <= self.x + self.sprite_width
            and self.y <= my <= self.y + self.sprite_height
        )

    def update(self) -> None:
        mx, my = self.game.mouse_world_position()
        if self._contains(mx, my):
            self.in_range = True
            if self.game.mouse_pressed:
                self._pressed = True
                self._waiting = True
            else:
                self._pressed = False
        else:
            self.in_range = False

        if self._waiting and self._wait_ticks < COOLDOWN_TICKS:
            self._wait_ticks += 1
        else:
            self._wait_ticks = 0
            self._waiting = False

    def draw(self, surface: pygame.Surface) -> None:
        sprite = self.sprite_true if self.in_range else self.sprite_false
        if sprite is not None:
            surface.blit(sprite, self._screen_position())

    def pressed(self) -> bool:
        """Return True once for each click registered since the last call."""
        if self._pressed:
            self._pressed = False
            return True
        return False


class StaticButton(Button):
    """A button that keeps its place on screen as the camera moves."""

    actor_type = ActorType.BUTTONS_STATIC

    def __init__(self, x, y, button_id, game, sprite_false, sprite_true):
        camera = game.control_manager.camera
        self._rel_x = int(x + camera.left)
        self._rel_y = int(y + camera.top)
        super().__init__(
            self._rel_x, self._rel_y, button_id, game, sprite_false, sprite_true
        )

    def update(self) -> None:
        camera = self.game.control_manager.camera
        self.x = int(self._rel_x + camera.left)
        self.y = int(self._rel_y + camera.top)
        super().update()