"""Camera that keeps a view rectangle over the game world."""

from __future__ import annotations

from dataclasses import dataclass

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720


@dataclass
class Camera:
    """World-space rectangle currently shown on screen."""

    left: float = 0.0
    top: float = 0.0
    right: float = float(SCREEN_WIDTH)
    bottom: float = float(SCREEN_HEIGHT)

    @property
    def position(self) -> tuple[float, float, float, float]:
        return (self.left, self.top, self.right, self.bottom)

    def follow(self, x: float, y: float, width: int, height: int) -> None:
        """Centre the view on a box at ``(x, y)`` of the given size."""
        self.left = -(SCREEN_WIDTH // 2) + (x + int(width / 2))
        self.top = -(SCREEN_HEIGHT // 2) + (y + int(height / 2))
        self.right = self.left + SCREEN_WIDTH
        self.bottom = self.top + SCREEN_HEIGHT

    def reset(self) -> None:
        """Return the view to the world origin."""
        self.left = 0.0
        self.top = 0.0
        self.right = float(SCREEN_WIDTH)
        self.bottom = float(SCREEN_HEIGHT)

    def to_screen(self, x: float, y: float) -> tuple[float, float]:
        """Convert world coordinates to screen coordinates."""
        return (x - self.left, y - self.top)