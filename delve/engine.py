from __future__ import annotations

"""
Application entry point: startup checks and the event loop.

Each pygame event is handled to completion (engine call, full redraw,
display flip) before the next one is polled, so frames never overlap.
"""

import asyncio
import logging
from typing import Callable, Optional

import pygame

from delve.config import GameConfig, compute_tile_size
from delve.errors import EngineLoadError
from delve.render.canvas import PygameCanvas
from delve.render.fonts import FontBook
from delve.scenes import DungeonScene
from delve.state.bridge import load_engine_module
from delve.ui.alert import alert


log = logging.getLogger("delve.engine")


class Engine:
    def __init__(self, cfg: GameConfig, alert_fn: Callable[[str], None] = alert) -> None:
        pygame.init()
        self.cfg = cfg
        self.alert = alert_fn
        self.fonts = FontBook(cfg.font_name, cfg.font_path)
        self.display: Optional[pygame.Surface] = None
        self.scene: Optional[DungeonScene] = None

    def start(self) -> bool:
        """
        Load the game module and open the window. On any fatal problem the
        user is alerted and False is returned with no scene set up.
        """
        try:
            mod = load_engine_module(self.cfg.engine_module)
        except EngineLoadError as exc:
            self.alert(str(exc))
            return False

        info = pygame.display.Info()
        tile_size = compute_tile_size(self.cfg, info.current_w, info.current_h)
        size = (self.cfg.map_width * tile_size, self.cfg.map_height * tile_size)
        try:
            self.display = pygame.display.set_mode(size)
        except pygame.error as exc:
            self.alert(f"Could not open a {size[0]}x{size[1]} drawing surface: {exc}")
            return False
        pygame.display.set_caption("delve")
        log.info("Map %dx%d, tile %dpx", self.cfg.map_width, self.cfg.map_height, tile_size)

        canvas = PygameCanvas(self.display, self.fonts, self.cfg.clear_colour)
        self.scene = DungeonScene(mod, canvas, self.cfg, tile_size)
        return True

    def present(self) -> None:
        pygame.display.flip()

    async def _run(self) -> None:
        if not self.start():
            return
        scene = self.scene

        await scene.start()
        self.present()

        # Same frame either way; a missing font only changes the glyph face.
        if not self.fonts.load():
            log.info("Continuing with the default font")
        await scene.render()
        self.present()

        clock = pygame.time.Clock()
        while not scene.quit_requested:
            for event in pygame.event.get():
                if await scene.handle_event(event):
                    self.present()
                if scene.quit_requested:
                    break
            clock.tick(self.cfg.fps)
            await asyncio.sleep(0)

    def run(self) -> None:
        try:
            asyncio.run(self._run())
        finally:
            pygame.quit()
