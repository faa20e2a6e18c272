"""Manage the games table from the command line.

    python -m scripts.db migrate    # create tables
    python -m scripts.db rollback   # drop tables
    python -m scripts.db seed       # replace rows with the fixture games
    python -m scripts.db reset      # rollback + migrate + seed
"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from repositories.migrations import migrate_latest, migrate_rollback, reset, run_seeds
from repositories.sql_model_game_repository import get_engine

logger = logging.getLogger(__name__)

COMMANDS = {
    "migrate": migrate_latest,
    "rollback": migrate_rollback,
    "seed": run_seeds,
    "reset": reset,
}


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    logging.basicConfig(level=level, handlers=[handler], force=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Migrate and seed the games database")
    parser.add_argument("command", choices=sorted(COMMANDS), help="operation to run")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    engine = get_engine()
    logger.debug("Using database %s", engine.url.render_as_string(hide_password=True))
    COMMANDS[args.command](engine)
    return 0


if __name__ == "__main__":
    sys.exit(main())
