import sys

import pygame
import pytest

from delve.config import GameConfig
from delve.engine import Engine
from delve.main import main, parse_args
from delve.scenes import DungeonScene
from tests.fakes import Direction, make_module


@pytest.fixture
def fake_engine(monkeypatch):
    mod = make_module("fake_engine_run")
    monkeypatch.setitem(sys.modules, "fake_engine_run", mod)
    return mod


@pytest.fixture
def cfg():
    return GameConfig(map_width=4, map_height=3, tile_size=8, engine_module="fake_engine_run")


def test_missing_engine_module_is_fatal(cfg):
    alerts = []
    cfg.engine_module = "delve_tests_missing_engine"
    engine = Engine(cfg, alert_fn=alerts.append)

    assert engine.start() is False
    assert len(alerts) == 1
    assert "delve_tests_missing_engine" in alerts[0]
    assert engine.scene is None
    assert engine.display is None


def test_start_opens_surface_sized_to_map(fake_engine, cfg):
    engine = Engine(cfg, alert_fn=pytest.fail)

    assert engine.start() is True
    assert isinstance(engine.scene, DungeonScene)
    assert engine.scene.tile_size == 8
    assert engine.display.get_size() == (32, 24)


def test_display_failure_is_fatal(fake_engine, cfg, monkeypatch):
    def broken_set_mode(*args, **kwargs):
        raise pygame.error("no video device")

    monkeypatch.setattr(pygame.display, "set_mode", broken_set_mode)
    alerts = []
    engine = Engine(cfg, alert_fn=alerts.append)

    assert engine.start() is False
    assert "no video device" in alerts[0]
    assert engine.scene is None


def test_run_handles_keys_until_quit(fake_engine, cfg, monkeypatch):
    events = [
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_k, mod=0),
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_b, mod=0),
        pygame.event.Event(pygame.QUIT),
    ]
    monkeypatch.setattr(pygame.event, "get", lambda: events)

    Engine(cfg, alert_fn=pytest.fail).run()

    game = fake_engine.created[0]
    assert game.moves == [Direction.N, Direction.SW]
    # first frame, redraw after the font load, one per move
    assert game.map_calls == 4


def test_run_without_engine_returns(cfg):
    alerts = []
    cfg.engine_module = "delve_tests_missing_engine"
    Engine(cfg, alert_fn=alerts.append).run()
    assert len(alerts) == 1


def test_parse_args():
    args = parse_args(["--config", "x.yaml", "--engine", "eng", "--log-level", "debug"])
    assert (args.config, args.engine, args.log_level) == ("x.yaml", "eng", "debug")


def test_main_rejects_bad_config(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("map: [oops\n")
    with pytest.raises(SystemExit):
        main(["--config", str(path)])
