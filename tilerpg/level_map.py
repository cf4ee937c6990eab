"""Level maps: the text format they are saved in and their loading into a scene."""

from __future__ import annotations

import os
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Union

from .actors import LAST_BLOCK_ID, Actor, ActorType, GrassTile, make_tile
from .player import Player

SAVE_DIR = "saves"
MAP_EXTENSION = ".Kdata"
DEFAULT_MAP_SIZE = 10
DEFAULT_TILE_SIZE = 128
SECTION_NAMES = ("Tiles", "Objects", "Players")


class MapFormatError(ValueError):
    """Raised when map text does not follow the map file format."""


@dataclass(frozen=True)
class MapRecord:
    """One ``{ id x y }`` entry of a map file."""

    id: int
    x: int
    y: int


@dataclass
class MapData:
    """The records of the three sections of a map file."""

    tiles: list[MapRecord] = field(default_factory=list)
    objects: list[MapRecord] = field(default_factory=list)
    players: list[MapRecord] = field(default_factory=list)


RecordLike = Union[MapRecord, Actor, tuple]


def _as_record(item: RecordLike) -> MapRecord:
    if isinstance(item, MapRecord):
        return item
    if isinstance(item, Actor):
        return MapRecord(int(item.id), int(item.x), int(item.y))
    record_id, x, y = item
    return MapRecord(int(record_id), int(x), int(y))


def _format_section(name: str, items: Iterable[RecordLike]) -> str:
    entries = [f"{{ {r.id} {r.x} {r.y} }}" for r in map(_as_record, items)]
    body = ",\n".join(entries)
    return f"{name}\n{{\n" + (f"{body}\n" if body else "") + "}\n"


def format_map(tiles, objects, players) -> str:
    """Render the three sections of a map file.

    Each argument is an iterable of records, actors or ``(id, x, y)`` tuples.
    """
    return (
        _format_section("Tiles", tiles)
        + _format_section("Objects", objects)
        + _format_section("Players", players)
    )


def _take(tokens: deque[str]) -> str:
    if not tokens:
        raise MapFormatError("unexpected end of map data")
    return tokens.popleft()


def _take_int(tokens: deque[str]) -> int:
    token = _take(tokens)
    try:
        return int(token)
    except ValueError:
        raise MapFormatError(f"expected an integer, found {token!r}") from None


def _parse_section(tokens: deque[str], target: list[MapRecord]) -> None:
    # An empty section has its closing brace where the first record would open.
    if _take(tokens) != "{":
        return
    while True:
        record = MapRecord(_take_int(tokens), _take_int(tokens), _take_int(tokens))
        closer = _take(tokens)
        if closer == "},":
            target.append(record)
            _take(tokens)  # opening brace of the next record
        elif closer == "}":
            target.append(record)
            _take(tokens)  # closing brace of the section
            return
        else:
            raise MapFormatError(f"unexpected token {closer!r} after a record")


def parse_map_text(text: str) -> MapData:
    """Parse the text of a map file; sections with unknown names are skipped."""
    tokens = deque(text.split())
    data = MapData()
    sections = {"Tiles": data.tiles, "Objects": data.objects, "Players": data.players}
    for _ in SECTION_NAMES:
        if not tokens:
            break
        name = tokens.popleft()
        _take(tokens)  # opening brace of the section
        target = sections.get(name)
        if target is not None:
            _parse_section(tokens, target)
    return data


class LevelMap:
    """A numbered map saved under ``directory`` and loaded into a game's scene.

    ``tiles``, ``objects`` and ``players`` hold actors created for the map that
    are not yet part of the scene; loading moves them into it.
    """

    def __init__(self, game, map_id: int = 0, directory: str | os.PathLike[str] = SAVE_DIR):
        self.game = game
        self.id = map_id
        self.directory = Path(directory)
        self.tiles: list[Actor] = []
        self.objects: list[Actor] = []
        self.players: list[Actor] = []

    @property
    def path(self) -> Path:
        return self.directory / f"map{self.id}{MAP_EXTENSION}"

    def create_map(self) -> None:
        """Fill the pending tiles with the built-in layout of this map id."""
        if self.id == 0:
            self.tiles.extend(
                GrassTile(i * DEFAULT_TILE_SIZE, j * DEFAULT_TILE_SIZE, self.game)
                for i in range(DEFAULT_MAP_SIZE)
                for j in range(DEFAULT_MAP_SIZE)
            )

    def _scene_records(self) -> tuple[list[MapRecord], list[MapRecord]]:
        tiles: list[MapRecord] = []
        players: list[MapRecord] = []
        for actor in self.game.actor_manager:
            if actor.actor_type == ActorType.TILES and 0 <= actor.id <= LAST_BLOCK_ID:
                tiles.append(_as_record(actor))
            elif actor.actor_type == ActorType.PLAYERS and actor.id == 0:
                players.append(_as_record(actor))
        return tiles, players

    def save(self) -> Path:
        """Write the pending actors and the scene's tiles and players to the map file."""
        scene_tiles, scene_players = self._scene_records()
        text = format_map(
            [*self.tiles, *scene_tiles],
            self.objects,
            [*self.players, *scene_players],
        )
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text, encoding="utf-8")
        self.clear()
        return self.path

    def load(self) -> None:
        """Read the map file, if any, and add its tiles and players to the scene."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            text = ""
        data = parse_map_text(text)
        self.tiles.extend(make_tile(r.id, r.x, r.y, self.game) for r in data.tiles)
        self.players.extend(
            Player(r.x, r.y, r.id, self.game) for r in data.players if r.id == 0
        )
        manager = self.game.actor_manager
        for tile in self.tiles:
            manager.add(tile)
        for player in self.players:
            if player.id == 0:
                manager.add(player)
        self.clear()

    def clear(self) -> None:
        """Drop the pending actors, releasing colliders of those not in the scene."""
        in_scene = list(self.game.actor_manager)
        colliders = self.game.collider_manager
        for actor in (*self.tiles, *self.objects, *self.players):
            if actor not in in_scene and actor.collider is not None:
                colliders.remove(actor.collider)
        self.tiles.clear()
        self.objects.clear()
        self.players.clear()

    def destroy_all(self) -> None:
        """Destroy every pending actor that is also part of the scene."""
        manager = self.game.actor_manager
        for actor in (*self.tiles, *self.objects, *self.players):
            manager.destroy(actor)