import pytest

from delve.config import GameConfig, compute_tile_size, load_config
from delve.errors import ConfigError


def test_bundled_defaults():
    cfg = load_config()

    assert (cfg.map_width, cfg.map_height) == (60, 40)
    assert cfg.engine_module == "dungeon_core"
    assert cfg.font_name == "Cutive Mono"
    assert cfg.tile_size is None
    assert cfg.reset_enabled is True
    assert cfg.move_keys["N"] == ["up", "k"]
    assert cfg.reset_keys == ["m"]

    rows = cfg.seed_map.split("\n")
    assert len(rows) == 25
    assert rows[0] == "#" * 54
    assert all(len(r) == 54 for r in rows)


def test_engine_seed_map_has_no_newlines():
    cfg = load_config()
    seed = cfg.engine_seed_map()
    assert "\n" not in seed
    assert len(seed) == 54 * 25


def test_user_file_merges_over_defaults(tmp_path):
    path = tmp_path / "mine.yaml"
    path.write_text(
        "engine:\n  module: my_engine\n"
        "view:\n  tile_size: 12\n"
        "keys:\n  moves:\n    N: [w]\n"
    )

    cfg = load_config(path)

    assert cfg.engine_module == "my_engine"
    assert cfg.tile_size == 12
    assert cfg.map_width == 60
    assert cfg.move_keys["N"] == ["w"]
    assert cfg.move_keys["S"] == ["down", "j"]


def test_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("map: [unclosed\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "keys:\n  moves:\n    UP: [w]\n",
        "map:\n  width: 0\n",
        "map:\n  width: wide\n",
        "view:\n  clear_colour: [1, 2]\n",
        "keys:\n  reset: 5\n",
    ],
)
def test_rejected_values(tmp_path, text):
    path = tmp_path / "c.yaml"
    path.write_text(text)
    with pytest.raises(ConfigError):
        load_config(path)


def test_tile_size_fits_display():
    cfg = GameConfig(map_width=60, map_height=40)
    # width-limited: 1200 / 60 = 20 < 1000 / 40 = 25
    assert compute_tile_size(cfg, 1200, 1000) == 20
    # height-limited
    assert compute_tile_size(cfg, 3000, 600) == 15


def test_tile_size_caps_display_width():
    cfg = GameConfig(map_width=60, map_height=40, max_view_width=600)
    assert compute_tile_size(cfg, 5000, 5000) == 10


def test_tile_size_override_and_floor():
    assert compute_tile_size(GameConfig(tile_size=9), 10, 10) == 9
    assert compute_tile_size(GameConfig(map_width=60, map_height=40), 30, 30) == 1
