"""Tile palette, glyphs and the tile-kind -> style lookup."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

Colour = Tuple[int, int, int, int]


COLOURS = {
    "background": {
        "wall": (0x72, 0x4C, 0xF9, 255),
        "floor": (0, 0, 0, 255),
        "player": (0, 0, 0, 255),
    },
    "foreground": {
        "wall": (0, 0, 0, 255),
        "floor": (255, 255, 255, 77),   # white at 30%
        "player": (0xF4, 0x22, 0x72, 255),
    },
}

CHARS = {
    "player": "@",
    "wall": "#",
    "floor": ".",
}

# Painted over cells that were seen before but are out of sight now.
DIM_OVERLAY: Colour = (0, 0, 0, 153)


@dataclass(frozen=True)
class StyleOptions:
    text: str
    text_colour: Colour
    bg_colour: Colour
    font_scale: float = 0.9


def _style(kind: str) -> StyleOptions:
    return StyleOptions(
        text=CHARS[kind],
        text_colour=COLOURS["foreground"][kind],
        bg_colour=COLOURS["background"][kind],
    )


WALL_STYLE = _style("wall")
FLOOR_STYLE = _style("floor")
PLAYER_STYLE = _style("player")


class TileKind(Enum):
    WALL = "wall"
    FLOOR = "floor"
    PLAYER = "player"


def classify(tile_type: Any, engine_types: Any = None) -> Optional[TileKind]:
    """
    Map an engine TileType value onto our closed set of kinds.

    Raw values (e.g. 2 for a wall) are first looked up in the engine's own
    TileType enum, then matched by member name (Wall -> WALL). Anything we
    do not recognise comes back as None so the caller can skip the cell.
    """
    if isinstance(tile_type, TileKind):
        return tile_type
    if engine_types is not None:
        try:
            tile_type = engine_types(tile_type)
        except (ValueError, TypeError):
            pass
    name = getattr(tile_type, "name", None)
    if not isinstance(name, str):
        return None
    return TileKind.__members__.get(name.upper())


def resolve_style(kind: Optional[TileKind]) -> Optional[StyleOptions]:
    match kind:
        case TileKind.WALL:
            return WALL_STYLE
        case TileKind.FLOOR:
            return FLOOR_STYLE
        case TileKind.PLAYER:
            return PLAYER_STYLE
        case _:
            return None
