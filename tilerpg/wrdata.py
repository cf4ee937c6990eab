"""Plain-text store of player positions, one ``id x y`` record per line."""

from __future__ import annotations

import os
from typing import Iterator

PathLike = "str | os.PathLike[str]"


def write_player(player_id: int, x: int, y: int, path: str | os.PathLike[str]) -> None:
    """Append a player record to the file at ``path``."""
    with open(path, "a", encoding="utf-8") as stream:
        stream.write(f"{player_id} {x} {y}\n")


def _records(text: str) -> Iterator[tuple[int, int, int]]:
    tokens = text.split()
    for start in range(0, len(tokens) - 2, 3):
        try:
            yield tuple(int(token) for token in tokens[start:start + 3])  # type: ignore[misc]
        except ValueError:
            return


def read_player(player_id: int, path: str | os.PathLike[str]) -> tuple[int, int] | None:
    """Return the position of the first record for ``player_id``.

    Returns None if the file does not exist or holds no such record; reading
    stops at the first record that is not three integers.
    """
    try:
        with open(path, encoding="utf-8") as stream:
            text = stream.read()
    except FileNotFoundError:
        return None
    for record_id, x, y in _records(text):
        if record_id == player_id:
            return (x, y)
    return None


def clear(path: str | os.PathLike[str]) -> None:
    """Empty the file at ``path``, creating it if needed."""
    with open(path, "w", encoding="utf-8"):
        pass