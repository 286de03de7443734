from __future__ import annotations

import logging
from typing import Dict, Optional

import pygame


log = logging.getLogger("delve.fonts")


class FontBook:
    """
    Map glyph font, cached per pixel size.

    Until load() has run (or when it fails) glyphs use pygame's built-in
    default font, so drawing never waits on the font.
    """

    def __init__(self, name: str, path: Optional[str] = None) -> None:
        self.name = name
        self.path = path
        self.source: Optional[str] = None  # resolved font file, None = pygame default
        self._cache: Dict[int, pygame.font.Font] = {}

    def load(self) -> bool:
        """
        Resolve the configured font once. Returns True when the requested
        font was found, False when we are falling back to the default.
        """
        if not pygame.font.get_init():
            pygame.font.init()

        candidate = self.path or pygame.font.match_font(self.name)
        if candidate:
            try:
                pygame.font.Font(candidate, 12)
            except (OSError, pygame.error) as exc:
                log.warning("Could not load font %s from %s: %s", self.name, candidate, exc)
            else:
                self.source = candidate
                self._cache.clear()
                log.info("Using font %s (%s)", self.name, candidate)
                return True
        else:
            log.warning("Font %s not found; using the default font", self.name)

        self.source = None
        self._cache.clear()
        return False

    def get(self, size: int) -> pygame.font.Font:
        size = max(1, int(size))
        font = self._cache.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(self.source, size)
            self._cache[size] = font
        return font
