import argparse
import sys

from delve import config
from delve.engine import Engine
from delve.errors import ConfigError
from delve.log_utils import setup_logging


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="delve", description="Explore a dungeon one tile at a time.")
    parser.add_argument("--config", help="YAML file merged over the bundled defaults")
    parser.add_argument("--engine", help="dotted name of the game-logic module")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ...")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    try:
        cfg = config.load_config(args.config)
    except ConfigError as exc:
        sys.exit(f"delve: {exc}")
    if args.engine:
        cfg.engine_module = args.engine
    if args.log_level:
        cfg.log_level = args.log_level.upper()

    setup_logging(cfg.log_level, cfg.log_file)
    engine = Engine(cfg)
    engine.run()


if __name__ == "__main__":
    main()
