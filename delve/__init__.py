"""delve: pygame front end for a tile-based dungeon exploration engine."""

__version__ = "0.1.0"
