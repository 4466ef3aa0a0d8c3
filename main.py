"""Entrypoint to run the weather outfit recommender in a terminal."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from typing import List, Optional

from stylist_app.app import OutfitRecommenderApp
from stylist_app.config import AppConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Get outfit suggestions for a city's temperature and weather condition."
    )
    parser.add_argument("--config", default=None, help="Path to a key: value config file.")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors.")
    parser.add_argument(
        "--no-animation",
        action="store_true",
        help="Skip the delay in the loading animation.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for the JSON logs written to stderr (default from LOG_LEVEL).",
    )
    return parser


def config_from_args(args: argparse.Namespace, base: AppConfig | None = None) -> AppConfig:
    config = base or AppConfig.from_env(config_path=args.config)
    overrides: dict = {}
    if args.no_color:
        overrides["use_color"] = False
    if args.no_animation:
        overrides["loading_delay_seconds"] = 0.0
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()
    return dataclasses.replace(config, **overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    app = OutfitRecommenderApp(config=config_from_args(args))
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
