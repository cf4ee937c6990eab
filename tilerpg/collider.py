"""Axis-aligned rectangular colliders and the registry that holds them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import pygame

OUTLINE_COLOUR = (255, 255, 255)
OUTLINE_WIDTH = 2


@dataclass(eq=False)
class Collider:
    """A rectangle in world coordinates used for collision checks."""

    x: int
    y: int
    width: int
    height: int
    show: bool = False
    active: bool = True

    def collides_with(self, other: Collider) -> bool:
        """Return True if the two rectangles overlap or touch.

        A collider never collides with itself.
        """
        if other is self:
            return False
        separated = (
            self.x > other.x + other.width
            or other.x > self.x + self.width
            or self.y > other.y + other.height
            or other.y > self.y + self.height
        )
        return not separated

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the collider's outline onto ``surface``."""
        rect = pygame.Rect(self.x, self.y, self.width, self.height)
        pygame.draw.rect(surface, OUTLINE_COLOUR, rect, OUTLINE_WIDTH)


class ColliderManager:
    """Ordered collection of the colliders that take part in a scene."""

    def __init__(self, game=None) -> None:
        self.game = game
        self._colliders: list[Collider] = []

    def add(self, collider: Collider) -> None:
        self._colliders.append(collider)

    def remove(self, collider: Collider) -> None:
        """Remove ``collider`` if it is registered; otherwise do nothing."""
        try:
            self._colliders.remove(collider)
        except ValueError:
            pass

    def __iter__(self) -> Iterator[Collider]:
        return iter(list(self._colliders))

    def __len__(self) -> int:
        return len(self._colliders)