"""Map, tile and player drawing for one frame."""
from __future__ import annotations

import inspect
import logging
import math

import pygame

from delve.render.coords import pos_to_index, tile_rect
from delve.render.styles import DIM_OVERLAY, PLAYER_STYLE, StyleOptions, classify, resolve_style
from delve.state.bridge import MapSnapshot, Vector
from delve.state.context import Context


log = logging.getLogger("delve.render")


def draw_tile_square(ctx: Context, pos: Vector, style: StyleOptions) -> pygame.Rect:
    rect = tile_rect(ctx.tile_size, pos.x, pos.y)
    ctx.canvas.fill_rect(rect, style.bg_colour)
    return rect


def draw_tile_text(ctx: Context, rect: pygame.Rect, style: StyleOptions) -> None:
    size = math.floor(ctx.tile_size * style.font_scale)
    ctx.canvas.fill_text(style.text, rect, style.text_colour, size)


def fill_tile(ctx: Context, pos: Vector, style: StyleOptions, visible: bool) -> None:
    """
    Paint one cell: background square, centred glyph and, for cells that were
    seen earlier but are out of sight now, a dark translucent overlay.
    """
    rect = draw_tile_square(ctx, pos, style)
    draw_tile_text(ctx, rect, style)
    if not visible:
        ctx.canvas.fill_rect(rect, DIM_OVERLAY)


async def fetch_map(ctx: Context) -> MapSnapshot:
    snapshot = ctx.game.get_map()
    if inspect.isawaitable(snapshot):
        snapshot = await snapshot
    return snapshot


async def render_map(ctx: Context) -> None:
    size = ctx.game.size
    tiles = await fetch_map(ctx)
    tile = ctx.tile_size

    ctx.canvas.clear_rect(pygame.Rect(0, 0, size.x * tile, size.y * tile))

    for row in range(size.y):
        for col in range(size.x):
            cell = tiles[pos_to_index(size.x, row, col)]
            if not cell.seen:
                continue

            style = resolve_style(classify(cell.tile_type, ctx.mod.TileType))
            if style is None:
                log.warning("Unknown tile type %r at (%d, %d); skipping", cell.tile_type, col, row)
                continue

            fill_tile(ctx, ctx.mod.Vector(col, row), style, cell.visible)


def render_player(ctx: Context) -> None:
    # The player is drawn over the fog model: always at full brightness.
    fill_tile(ctx, ctx.game.player, PLAYER_STYLE, True)


async def render(ctx: Context) -> None:
    await render_map(ctx)
    render_player(ctx)
