from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType

from delve.render.canvas import Canvas
from delve.state.bridge import GameHandle


@dataclass(frozen=True)
class Context:
    """Everything one render pass needs. Replaced wholesale on reset, never patched."""
    game: GameHandle
    canvas: Canvas
    tile_size: int
    mod: ModuleType   # engine module, used to build Vector / Direction values
