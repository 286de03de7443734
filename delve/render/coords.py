"""Grid <-> pixel and grid <-> flat-index conversions."""
import pygame


def x_pos(tile_size: int, col: int) -> int:
    return col * tile_size


def y_pos(tile_size: int, row: int) -> int:
    return row * tile_size


def pos_to_index(width: int, row: int, col: int) -> int:
    # Row-major, no bounds check: callers iterate within the grid size.
    return width * row + col


def tile_rect(tile_size: int, x: int, y: int) -> pygame.Rect:
    """Pixel rect covering the cell at column x, row y."""
    return pygame.Rect(x_pos(tile_size, x), y_pos(tile_size, y), tile_size, tile_size)
