from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from delve.errors import ConfigError


DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "content" / "default.yaml"

DIRECTION_NAMES = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


@dataclass
class GameConfig:
    map_width: int = 60
    map_height: int = 40
    seed_map: str = ""
    engine_module: str = "dungeon_core"
    tile_size: Optional[int] = None   # None = fit to display
    max_view_width: int = 2000
    clear_colour: Tuple[int, int, int] = (0, 0, 0)
    fps: int = 60
    font_name: str = "Cutive Mono"
    font_path: Optional[str] = None
    reset_enabled: bool = True
    # direction name -> key names, e.g. {"N": ["up", "k"]}
    move_keys: Dict[str, List[str]] = field(default_factory=dict)
    reset_keys: List[str] = field(default_factory=list)
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def engine_seed_map(self) -> str:
        """Seed layout as the engine expects it: one row-major string, no newlines."""
        return self.seed_map.replace("\n", "")


def compute_tile_size(cfg: GameConfig, display_w: int, display_h: int) -> int:
    """
    Pick the largest whole tile size that fits the map on the display.

    The usable width is capped at cfg.max_view_width so very wide monitors
    don't produce huge tiles.
    """
    if cfg.tile_size:
        return int(cfg.tile_size)
    usable_w = min(display_w, cfg.max_view_width)
    per_col = usable_w / cfg.map_width
    per_row = display_h / cfg.map_height
    return max(1, int(min(per_col, per_row)))


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"config file {path} is not valid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping at top level")
    return data


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"config section '{name}' must be a mapping")
    return section


def _as_key_list(value: Any, where: str) -> List[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return list(value)
    raise ConfigError(f"{where} must be a key name or a list of key names")


def _parse_moves(raw: Dict[str, Any]) -> Dict[str, List[str]]:
    moves: Dict[str, List[str]] = {}
    for direction, keys in raw.items():
        name = str(direction).upper()
        if name not in DIRECTION_NAMES:
            raise ConfigError(
                f"unknown direction '{direction}' in keys.moves (expected one of {', '.join(DIRECTION_NAMES)})"
            )
        moves[name] = _as_key_list(keys, f"keys.moves.{name}")
    return moves


def config_from_dict(data: Dict[str, Any]) -> GameConfig:
    """Build a GameConfig from the nested mapping layout used by the YAML files."""
    map_s = _section(data, "map")
    engine_s = _section(data, "engine")
    view_s = _section(data, "view")
    font_s = _section(data, "font")
    keys_s = _section(data, "keys")
    log_s = _section(data, "logging")

    try:
        width = int(map_s.get("width", 60))
        height = int(map_s.get("height", 40))
        tile_size = view_s.get("tile_size")
        tile_size = int(tile_size) if tile_size is not None else None
        clear = tuple(int(c) for c in view_s.get("clear_colour", (0, 0, 0)))
        max_w = int(view_s.get("max_width", 2000))
        fps = int(view_s.get("fps", 60))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"invalid numeric config value: {exc}") from exc

    if width <= 0 or height <= 0:
        raise ConfigError(f"map size must be positive, got {width}x{height}")
    if tile_size is not None and tile_size <= 0:
        raise ConfigError(f"view.tile_size must be positive, got {tile_size}")
    if len(clear) != 3:
        raise ConfigError("view.clear_colour must be an [r, g, b] triple")

    return GameConfig(
        map_width=width,
        map_height=height,
        seed_map=str(map_s.get("seed") or "").strip(),
        engine_module=str(engine_s.get("module", "dungeon_core")),
        tile_size=tile_size,
        max_view_width=max_w,
        clear_colour=clear,  # type: ignore[arg-type]
        fps=fps,
        font_name=str(font_s.get("name", "Cutive Mono")),
        font_path=font_s.get("path"),
        reset_enabled=bool(keys_s.get("reset_enabled", True)),
        move_keys=_parse_moves(keys_s.get("moves") or {}),
        reset_keys=_as_key_list(keys_s.get("reset") or [], "keys.reset"),
        log_level=str(log_s.get("level", "INFO")).upper(),
        log_file=log_s.get("file"),
    )


def load_config(path: Optional[str | Path] = None) -> GameConfig:
    """
    Load the bundled defaults, then merge the optional user file over them.

    Nested sections merge key by key, so a user file only needs the values it
    changes (e.g. just `engine: {module: my_engine}`).
    """
    data = _read_yaml(DEFAULT_CONFIG_PATH)
    if path is not None:
        data = _merge(data, _read_yaml(Path(path)))
    return config_from_dict(data)
