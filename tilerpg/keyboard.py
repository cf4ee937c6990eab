"""Snapshot of the keyboard state taken once per frame."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable, Union

PressedKeys = Union[Sequence, Iterable[int]]


class Keyboard:
    """Holds which keys were down at the last update."""

    def __init__(self) -> None:
        self.pressing = False
        self._keys: frozenset[int] = frozenset()
        self._state: Sequence | None = None

    def update(self, pressed: PressedKeys) -> None:
        """Store a new snapshot.

        ``pressed`` is either a per-key boolean sequence, such as the value
        returned by ``pygame.key.get_pressed()``, or a collection of key codes
        that are down.
        """
        if isinstance(pressed, (set, frozenset)):
            self._keys = frozenset(pressed)
            self._state = None
        elif isinstance(pressed, Sequence) or hasattr(pressed, "__getitem__"):
            self._state = pressed
            self._keys = frozenset()
        else:
            self._keys = frozenset(pressed)
            self._state = None

    def is_down(self, key: int) -> bool:
        if self._state is None:
            return key in self._keys
        try:
            return bool(self._state[key])
        except IndexError:
            return False