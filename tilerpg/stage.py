"""Drawing of the scene once per frame."""

from __future__ import annotations

import pygame

BACKGROUND = (0, 0, 0)


class StageManager:
    """Clears the target surface and draws every actor onto it."""

    def __init__(self, game, width: int, height: int, surface: pygame.Surface | None = None):
        self.game = game
        self.width = width
        self.height = height
        self.surface = surface

    def update(self) -> None:
        self.draw()

    def _target(self) -> pygame.Surface:
        surface = self.surface if self.surface is not None else getattr(self.game, "screen", None)
        if surface is None:
            raise RuntimeError("no surface to draw on")
        return surface

    def draw(self) -> None:
        """Draw all actors in scene order and present the frame."""
        surface = self._target()
        surface.fill(BACKGROUND)
        for actor in self.game.actor_manager:
            actor.draw(surface)
        if pygame.display.get_init() and pygame.display.get_surface() is surface:
            pygame.display.flip()