#!/usr/bin/env python3
"""Sliding Puzzle Game.

Usage::

    python main.py                    # 3×3, numbered tiles
    python main.py -s 4 --labels letters
    python main.py --seed 7 --log-level debug
"""

import logging
from enum import StrEnum
from typing import Optional

import typer
from rich.logging import RichHandler

from frontend.cli.rich.app import LabelStyle, run
from tilepuzzle import config


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


def configure_logging(level: LogLevel) -> None:
    """Route engine and frontend logs through Rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: int = typer.Option(
        config.DEFAULT_SIZE, "-s", "--size",
        min=config.CLI_MIN_SIZE, max=config.CLI_MAX_SIZE,
        envvar="SLIDE_SIZE",
        help=f"Initial grid size ({config.CLI_MIN_SIZE}-{config.CLI_MAX_SIZE}).",
    ),
    labels: LabelStyle = typer.Option(
        LabelStyle.numbers, "-l", "--labels",
        envvar="SLIDE_LABELS",
        case_sensitive=False,
        help="Tile faces: numbers or letters.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="SLIDE_SEED",
        help="Seed the scrambler for a reproducible puzzle.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        envvar="SLIDE_LOG_LEVEL",
        case_sensitive=False,
        help="Logging verbosity.",
    ),
) -> None:
    """Sliding Puzzle Game."""
    configure_logging(log_level)
    run(size=size, label_style=labels, seed=seed)


if __name__ == "__main__":
    app()
