from __future__ import annotations

import logging
from types import ModuleType
from typing import Optional

import pygame

from delve.config import GameConfig
from delve.render.canvas import Canvas
from delve.render.draw import render
from delve.state.context import Context
from .game_input import GameCommand, GameInput


log = logging.getLogger("delve.dungeon")


async def new_session(mod: ModuleType, canvas: Canvas, cfg: GameConfig, tile_size: int) -> Context:
    """
    Start a fresh game: new engine instance, new Context, first frame drawn.

    The returned Context is the caller's to keep; nothing here holds on to it.
    """
    game = mod.Game.new(cfg.map_width, cfg.map_height, cfg.engine_seed_map())
    ctx = Context(game=game, canvas=canvas, tile_size=tile_size, mod=mod)
    await render(ctx)
    return ctx


class DungeonScene:
    """The exploration view: owns the current session and applies input to it."""

    def __init__(
        self,
        mod: ModuleType,
        canvas: Canvas,
        cfg: GameConfig,
        tile_size: int,
        game_input: Optional[GameInput] = None,
    ) -> None:
        self.mod = mod
        self.canvas = canvas
        self.cfg = cfg
        self.tile_size = tile_size
        self.input = game_input if game_input is not None else GameInput.from_config(cfg)
        self.ctx: Optional[Context] = None
        self.quit_requested = False

    async def start(self) -> Context:
        self.ctx = await new_session(self.mod, self.canvas, self.cfg, self.tile_size)
        return self.ctx

    async def reset(self) -> Context:
        log.info("Resetting map (%dx%d)", self.cfg.map_width, self.cfg.map_height)
        # Swap in a brand new Context; the old one keeps pointing at the old game.
        self.ctx = await new_session(self.mod, self.canvas, self.cfg, self.tile_size)
        return self.ctx

    async def render(self) -> None:
        if self.ctx is not None:
            await render(self.ctx)

    async def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply one event. Returns True when the frame was redrawn."""
        if event.type == pygame.QUIT:
            self.quit_requested = True
            return False

        if event.type != pygame.KEYDOWN:
            return False

        cmd = self.input.handle_keydown(event)
        if cmd is None:
            return False
        return await self._handle_command(cmd)

    async def _handle_command(self, cmd: GameCommand) -> bool:
        if cmd.kind == "quit":
            self.quit_requested = True
            return False

        if cmd.kind == "reset":
            await self.reset()
            return True

        if cmd.kind == "move" and self.ctx is not None:
            direction = getattr(self.mod.Direction, cmd.direction)
            self.ctx.game.move_player(direction)
            await render(self.ctx)
            return True

        return False
