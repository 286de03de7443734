"""
Narrow interface to the external game-logic module.

delve never looks inside the engine. It only relies on the names below,
which the engine module exposes as constructible / inspectable values:

    Game.new(width, height, seed_map) -> Game
    game.size -> Vector            grid dimensions
    game.player -> Vector          player position
    game.get_map() -> [Tile]       row-major snapshot (may be awaitable)
    game.move_player(Direction)
    Vector(x, y), Direction, TileType
"""
from __future__ import annotations

import importlib
import logging
from types import ModuleType
from typing import Any, Awaitable, Protocol, Sequence, Union

from delve.errors import EngineLoadError


log = logging.getLogger("delve.bridge")

REQUIRED_NAMES = ("Game", "Vector", "Direction", "TileType")


class Vector(Protocol):
    x: int
    y: int


class Tile(Protocol):
    tile_type: Any
    seen: bool
    visible: bool


MapSnapshot = Sequence[Tile]


class GameHandle(Protocol):
    size: Vector
    player: Vector

    def get_map(self) -> Union[MapSnapshot, Awaitable[MapSnapshot]]:
        ...

    def move_player(self, direction: Any) -> None:
        ...


def load_engine_module(name: str) -> ModuleType:
    """
    Import the engine module by dotted name and check it exposes the API we use.

    Raises EngineLoadError when the import fails or a required name is missing;
    the caller treats that as a fatal startup condition.
    """
    try:
        mod = importlib.import_module(name)
    except ImportError as exc:
        raise EngineLoadError(f"could not load game module '{name}': {exc}") from exc

    missing = [n for n in REQUIRED_NAMES if not hasattr(mod, n)]
    if missing:
        raise EngineLoadError(f"game module '{name}' is missing: {', '.join(missing)}")
    if not callable(getattr(mod.Game, "new", None)):
        raise EngineLoadError(f"game module '{name}' has no Game.new constructor")

    log.info("Loaded game module %s", name)
    return mod
