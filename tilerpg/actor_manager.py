"""Registry of the actors in the running scene."""

from __future__ import annotations

from contextlib import suppress
from typing import Iterator

from .actors import Actor


class ActorManager:
    """Ordered collection of actors; the order is the update and draw order."""

    def __init__(self, game=None) -> None:
        self.game = game
        self._actors: list[Actor] = []
        self._tiles: list[Actor] = []
        self._objects: list[Actor] = []
        self._players: list[Actor] = []

    @property
    def tiles(self) -> tuple[Actor, ...]:
        return tuple(self._tiles)

    @property
    def objects(self) -> tuple[Actor, ...]:
        return tuple(self._objects)

    @property
    def players(self) -> tuple[Actor, ...]:
        return tuple(self._players)

    def add(self, actor: Actor) -> None:
        self._actors.append(actor)

    def add_tile(self, tile: Actor) -> None:
        self._tiles.append(tile)
        self.add(tile)

    def add_object(self, obj: Actor) -> None:
        self._objects.append(obj)
        self.add(obj)

    def add_player(self, player: Actor) -> None:
        self._players.append(player)
        self.add(player)

    def remove(self, actor: Actor) -> None:
        """Take ``actor`` out of the scene without releasing it."""
        with suppress(ValueError):
            self._actors.remove(actor)

    def destroy(self, actor: Actor) -> None:
        """Take ``actor`` out of the scene and release its collider."""
        if actor not in self._actors:
            return
        self._actors.remove(actor)
        for group in (self._tiles, self._objects, self._players):
            with suppress(ValueError):
                group.remove(actor)
        collider = actor.collider
        colliders = getattr(self.game, "collider_manager", None)
        if collider is not None and colliders is not None:
            colliders.remove(collider)

    def destroy_all(self) -> None:
        for actor in list(self._actors):
            self.destroy(actor)

    def update(self) -> None:
        """Advance every actor by one frame, in insertion order."""
        for actor in list(self._actors):
            actor.update()

    def __iter__(self) -> Iterator[Actor]:
        return iter(list(self._actors))

    def __len__(self) -> int:
        return len(self._actors)