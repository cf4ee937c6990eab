"""Tile-based role-playing game with a level editor, map files and a simple integer network link."""

__version__ = "0.1.0"