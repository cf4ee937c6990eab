"""Input and camera control shared by the actors of a scene."""

from __future__ import annotations

import pygame

from .camera import Camera
from .keyboard import Keyboard

FREE_CAMERA_STEP = 10
FREE_CAMERA_BOX = 48


class ControlManager:
    """Owns the keyboard snapshot and the camera."""

    def __init__(self) -> None:
        self.keyboard = Keyboard()
        self.camera = Camera()
        self.free_x = 0
        self.free_y = 0

    def update(self, pressed) -> None:
        """Take a new keyboard snapshot."""
        self.keyboard.update(pressed)

    def set_keyboard(self, actor) -> None:
        """Let ``actor`` be driven by the keyboard."""
        actor.controllable_keyboard = True

    def follow(self, actor) -> None:
        """Centre the camera on ``actor``."""
        self.camera.follow(actor.x, actor.y, actor.width, actor.height)

    def free_camera(self) -> None:
        """Move the camera with the arrow keys, independent of any actor."""
        keys = self.keyboard
        if keys.is_down(pygame.K_UP):
            self.free_y -= FREE_CAMERA_STEP
        if keys.is_down(pygame.K_DOWN):
            self.free_y += FREE_CAMERA_STEP
        if keys.is_down(pygame.K_LEFT):
            self.free_x -= FREE_CAMERA_STEP
        if keys.is_down(pygame.K_RIGHT):
            self.free_x += FREE_CAMERA_STEP
        self.camera.follow(self.free_x, self.free_y, FREE_CAMERA_BOX, FREE_CAMERA_BOX)

    def reset_camera(self) -> None:
        self.camera.reset()