"""
Drawing surface with an explicit-parameter paint API.

Every call carries its own colour / font size, so nothing painted by one
tile can leak into the next one.
"""
from __future__ import annotations

from typing import Protocol, Sequence, Tuple

import pygame

from delve.render.fonts import FontBook


class Canvas(Protocol):
    def clear_rect(self, rect: pygame.Rect) -> None:
        ...

    def fill_rect(self, rect: pygame.Rect, colour: Sequence[int]) -> None:
        ...

    def fill_text(self, text: str, rect: pygame.Rect, colour: Sequence[int], size: int) -> None:
        ...


def _split_alpha(colour: Sequence[int]) -> Tuple[Tuple[int, int, int], int]:
    rgb = (int(colour[0]), int(colour[1]), int(colour[2]))
    alpha = int(colour[3]) if len(colour) > 3 else 255
    return rgb, max(0, min(255, alpha))


class PygameCanvas:
    def __init__(
        self,
        surface: pygame.Surface,
        fonts: FontBook,
        clear_colour: Sequence[int] = (0, 0, 0),
    ) -> None:
        self.surface = surface
        self.fonts = fonts
        self.clear_colour = tuple(clear_colour)

    def clear_rect(self, rect: pygame.Rect) -> None:
        self.surface.fill(self.clear_colour, rect)

    def fill_rect(self, rect: pygame.Rect, colour: Sequence[int]) -> None:
        rgb, alpha = _split_alpha(colour)
        if alpha >= 255:
            self.surface.fill(rgb, rect)
            return
        # translucent: blend through a per-pixel-alpha layer
        layer = pygame.Surface(rect.size, pygame.SRCALPHA)
        layer.fill((*rgb, alpha))
        self.surface.blit(layer, rect.topleft)

    def fill_text(self, text: str, rect: pygame.Rect, colour: Sequence[int], size: int) -> None:
        if not text:
            return
        rgb, alpha = _split_alpha(colour)
        glyph = self.fonts.get(size).render(text, True, rgb)
        if alpha < 255:
            glyph.set_alpha(alpha)
        self.surface.blit(glyph, glyph.get_rect(center=rect.center))
