"""Game shell: window, frame timer, managers and the event step."""

from __future__ import annotations

import pygame

from .actor_manager import ActorManager
from .collider import ColliderManager
from .control import ControlManager
from .stage import StageManager

FRAME_EVENT = pygame.USEREVENT + 1
SECOND_EVENT = pygame.USEREVENT + 2
FRAMES_PER_SECOND = 60
GOODBYE = "Gracias por jugar"


class Game:
    """Base game: subclasses put their loop in :meth:`main`."""

    def __init__(self) -> None:
        self.actor_manager: ActorManager | None = None
        self.stage_manager: StageManager | None = None
        self.control_manager: ControlManager | None = None
        self.collider_manager: ColliderManager | None = None
        self.mouse_pressed = False
        self.close_requested = False
        self.event: pygame.event.Event | None = None
        self.screen: pygame.Surface | None = None
        self.width = 0
        self.height = 0
        self._name = ""

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            pygame.display.set_caption(value)

    def init(self, width: int, height: int) -> None:
        """Open the window, create the managers, run :meth:`main`, then shut down."""
        self.width = width
        self.height = height
        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(self._name)
        pygame.time.set_timer(FRAME_EVENT, 1000 // FRAMES_PER_SECOND)
        pygame.time.set_timer(SECOND_EVENT, 1000)

        self.actor_manager = ActorManager(self)
        self.stage_manager = StageManager(self, width, height, self.screen)
        self.control_manager = ControlManager()
        self.collider_manager = ColliderManager(self)

        self.main()
        self.shutdown(GOODBYE)

    def main(self) -> None:
        """Game loop; the base game has none."""

    def shutdown(self, message: str) -> None:
        """Drop the managers, close the window and print a farewell."""
        self.actor_manager = None
        self.stage_manager = None
        self.control_manager = None
        self.collider_manager = None
        if pygame.get_init():
            pygame.time.set_timer(FRAME_EVENT, 0)
            pygame.time.set_timer(SECOND_EVENT, 0)
            pygame.quit()
        self.screen = None
        print(self._name)
        print(message)

    def update(self) -> None:
        """Wait for the next event and handle it; a frame tick runs the scene."""
        event = pygame.event.wait()
        self.event = event
        if event.type == pygame.QUIT:
            self.close_requested = True
        elif event.type == pygame.MOUSEBUTTONDOWN:
            # Left or middle button.
            if event.button in (1, 2):
                self.mouse_pressed = True
        elif event.type == FRAME_EVENT:
            self.actor_manager.update()
            self.control_manager.update(pygame.key.get_pressed())
            self.stage_manager.update()
            self.mouse_pressed = False

    def mouse_world_position(self) -> tuple[int, int]:
        """Return the mouse position in world coordinates."""
        mx, my = pygame.mouse.get_pos()
        camera = self.control_manager.camera
        return (int(camera.left + mx), int(camera.top + my))