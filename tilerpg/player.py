"""The player character moved with the keyboard."""

from __future__ import annotations

import pygame

from .actors import Actor, ActorType, load_sprite
from .collider import Collider

PLAYER_SPRITE = "assets/players/personaje.png"
PLAYER_SIZE = 40
FRAME_SIZE = 48
STEP = 5
COLLIDER_INSET = 10
ANIMATION_FRAMES = 30
TICKS_PER_FRAME = 10

DIRECTION_DOWN = 0
DIRECTION_LEFT = 1
DIRECTION_RIGHT = 2
DIRECTION_UP = 3


class Player(Actor):
    """A walking character that is pushed back when it runs into a collider."""

    actor_type = ActorType.PLAYERS

    def __init__(self, x, y, player_id, game=None):
        super().__init__(x, y, player_id, game, load_sprite(PLAYER_SPRITE))
        self.past_state = (x, y)
        self.animation = 0
        self.direction = DIRECTION_DOWN
        self._moving = False
        self.collider = Collider(
            x + COLLIDER_INSET,
            y + COLLIDER_INSET,
            self.width - COLLIDER_INSET,
            self.height - COLLIDER_INSET,
        )

    @property
    def width(self) -> int:
        return PLAYER_SIZE

    @property
    def height(self) -> int:
        return PLAYER_SIZE

    def update(self) -> None:
        if self.controllable_keyboard:
            self.do_action()
        self.logic()

    def logic(self) -> None:
        """Undo this frame's move if the player now touches any collider."""
        colliders = getattr(self.game, "collider_manager", None)
        if colliders is not None:
            for other in colliders:
                if self.collider.collides_with(other):
                    self.x, self.y = self.past_state
                    self.collider.x = self.past_state[0] + COLLIDER_INSET
                    self.collider.y = self.past_state[1] + COLLIDER_INSET
        self.past_state = (self.x, self.y)

    def do_action(self) -> None:
        """Move according to the W, A, S, D keys and keep the camera on us."""
        control = self.game.control_manager
        keyboard = control.keyboard
        moves = (
            (pygame.K_w, 0, -STEP, DIRECTION_UP),
            (pygame.K_s, 0, STEP, DIRECTION_DOWN),
            (pygame.K_a, -STEP, 0, DIRECTION_LEFT),
            (pygame.K_d, STEP, 0, DIRECTION_RIGHT),
        )
        for key, dx, dy, direction in moves:
            if keyboard.is_down(key):
                self.x += dx
                self.y += dy
                self.direction = direction
                self._moving = True
        if self._moving:
            self.animation += 1
        self._moving = False
        if self.animation >= ANIMATION_FRAMES:
            self.animation = 0

        self.collider.x = self.x + COLLIDER_INSET
        self.collider.y = self.y + COLLIDER_INSET
        control.follow(self)

    def draw(self, surface: pygame.Surface) -> None:
        if self.sprite is None:
            return
        region = pygame.Rect(
            (self.animation // TICKS_PER_FRAME) * FRAME_SIZE,
            self.direction * FRAME_SIZE,
            FRAME_SIZE,
            FRAME_SIZE,
        )
        try:
            frame = self.sprite.subsurface(region)
        except ValueError:
            return
        surface.blit(frame, self._screen_position())