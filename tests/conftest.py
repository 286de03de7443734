import os

# Surfaces and fonts work without a window; keep SDL off real displays/audio.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from delve.config import GameConfig
from delve.state.context import Context
from tests.fakes import FakeGame, RecordingCanvas, make_module


@pytest.fixture(scope="session", autouse=True)
def pygame_font():
    pygame.font.init()
    yield
    pygame.font.quit()


@pytest.fixture
def engine_mod():
    return make_module()


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def small_cfg():
    return GameConfig(map_width=4, map_height=3, seed_map="####\n#..#\n####", tile_size=8)


@pytest.fixture
def make_ctx(engine_mod, canvas):
    def _make(game: FakeGame, tile_size: int = 8) -> Context:
        return Context(game=game, canvas=canvas, tile_size=tile_size, mod=engine_mod)
    return _make
