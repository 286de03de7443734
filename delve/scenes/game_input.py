from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional

import pygame

from delve.errors import ConfigError


# Default movement bindings (keycode -> direction name). Arrows and the vi
# keys share the four cardinal directions; y/u/b/n cover the diagonals.
DEFAULT_MOVE_BINDINGS: Dict[int, str] = {
    pygame.K_UP: "N",
    pygame.K_DOWN: "S",
    pygame.K_RIGHT: "E",
    pygame.K_LEFT: "W",
    pygame.K_k: "N",
    pygame.K_j: "S",
    pygame.K_l: "E",
    pygame.K_h: "W",
    pygame.K_y: "NW",
    pygame.K_u: "NE",
    pygame.K_b: "SW",
    pygame.K_n: "SE",
}

DEFAULT_RESET_KEYS: List[int] = [pygame.K_m]


def key_from_name(name: str) -> int:
    """
    Resolve a key name such as "up", "k" or "KP8" to its pygame constant.

    Looked up on the pygame module directly so it works before the display
    is initialised.
    """
    for attr in (f"K_{name}", f"K_{name.lower()}", f"K_{name.upper()}"):
        code = getattr(pygame, attr, None)
        if isinstance(code, int):
            return code
    raise ConfigError(f"unknown key name '{name}'")


def bindings_from_names(moves: Mapping[str, Iterable[str]]) -> Dict[int, str]:
    """Turn {"N": ["up", "k"], ...} into {K_UP: "N", K_k: "N", ...}."""
    table: Dict[int, str] = {}
    for direction, names in moves.items():
        for name in names:
            table[key_from_name(name)] = direction
    return table


@dataclass
class GameCommand:
    """Logical command produced from a raw key press."""
    kind: str                        # "move" | "reset" | "quit"
    direction: Optional[str] = None  # direction name for "move"


class GameInput:
    """
    Maps pygame KEYDOWN events to GameCommands.

    Knows nothing about the engine or the renderer; the scene decides what
    to do with each command. Keys without a binding produce no command.
    """

    def __init__(
        self,
        *,
        move_bindings: Optional[Mapping[int, str]] = None,
        reset_keys: Optional[Iterable[int]] = None,
        reset_enabled: bool = True,
    ) -> None:
        self.move_bindings: Dict[int, str] = dict(DEFAULT_MOVE_BINDINGS)
        if move_bindings:
            self.set_move_bindings(move_bindings)
        self.reset_keys: List[int] = list(DEFAULT_RESET_KEYS if reset_keys is None else reset_keys)
        self.reset_enabled = reset_enabled

    @classmethod
    def from_config(cls, cfg) -> "GameInput":
        moves = bindings_from_names(cfg.move_keys) if cfg.move_keys else None
        resets = [key_from_name(n) for n in cfg.reset_keys] if cfg.reset_keys else None
        return cls(move_bindings=moves, reset_keys=resets, reset_enabled=cfg.reset_enabled)

    def set_move_bindings(self, move_bindings: Mapping[int, str]) -> None:
        """Replace current movement bindings."""
        self.move_bindings = {int(k): str(v) for k, v in move_bindings.items()}

    def direction_for(self, key: int) -> Optional[str]:
        return self.move_bindings.get(key)

    def handle_keydown(self, event: pygame.event.Event) -> Optional[GameCommand]:
        key = event.key

        if key == pygame.K_ESCAPE:
            return GameCommand("quit")

        if self.reset_enabled and key in self.reset_keys:
            return GameCommand("reset")

        direction = self.direction_for(key)
        if direction is not None:
            return GameCommand("move", direction=direction)

        return None
