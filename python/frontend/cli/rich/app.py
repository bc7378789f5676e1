"""Rich terminal frontend — tables, colours, and panels.

Renders the board of a ``PuzzleEngine`` and forwards key presses to it one
at a time. Tile faces come from a caller-owned ``{tile value: label}``
mapping, so the engine only ever sees integers.
"""

from __future__ import annotations

import logging
import random
import sys
from collections.abc import Mapping
from enum import StrEnum
from string import ascii_uppercase

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from frontend.cli.input_handler import get_key, get_key_timeout
from tilepuzzle import config
from tilepuzzle.engine.gameplay import PuzzleEngine
from tilepuzzle.errors import PuzzleError, user_message
from tilepuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)

console = Console()

_DIRECTIONS: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


class LabelStyle(StrEnum):
    numbers = "numbers"
    letters = "letters"


# -- helpers ------------------------------------------------------------------


def format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _letters(n: int) -> str:
    """Spreadsheet-style column name: 1 → A, 26 → Z, 27 → AA."""
    name = ""
    while n > 0:
        n, rem = divmod(n - 1, 26)
        name = ascii_uppercase[rem] + name
    return name


def tile_labels(size: int, style: LabelStyle = LabelStyle.numbers) -> dict[int, str]:
    """Display label for every tile value on a *size*×*size* board."""
    values = range(1, size * size)
    if style is LabelStyle.letters:
        return {v: _letters(v) for v in values}
    return {v: str(v) for v in values}


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, labels: Mapping[int, str]) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = max((len(label) for label in labels.values()), default=1)
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == config.EMPTY:
                cells.append("[dim]·[/dim]")
                continue
            label = labels.get(val, str(val))
            if board.is_tile_correct(r, c):
                cells.append(f"[bold green]{label:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{label:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


# -- screens ------------------------------------------------------------------


def _draw_menu(sel_size: int) -> None:
    console.clear()

    sizes = Text()
    for s in range(config.CLI_MIN_SIZE, config.CLI_MAX_SIZE + 1):
        if s > config.CLI_MIN_SIZE:
            sizes.append("  ")
        if s == sel_size:
            sizes.append(f" {s}×{s} ", style="bold green on #313244")
        else:
            sizes.append(f" {s}×{s} ", style="dim")

    nav = Text("  ← →  change size", style="dim")

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Play    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )
    panel = Panel(
        body,
        title="[bold]S L I D I N G   P U Z Z L E[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )
    console.print()
    console.print(Align.center(panel))


def _stats(engine: PuzzleEngine) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(engine.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(format_time(engine.elapsed_time), style="bold yellow")
    return stats


def _draw_game(engine: PuzzleEngine, labels: Mapping[int, str], status: str) -> None:
    console.clear()

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        Align.center(render_board(engine.board, labels)),
        title=f"[bold cyan]Sliding Puzzle  {engine.size}×{engine.size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    # Save the cursor so _update_time() can repaint just the stats line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats(engine)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_win(engine: PuzzleEngine, labels: Mapping[int, str]) -> None:
    console.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append("  You solved it!  ", style="green")
    congrats.append("★\n", style="bold yellow")

    panel = Panel(
        Group(
            Align.center(render_board(engine.board, labels)),
            Align.center(congrats),
            Align.center(_stats(engine)),
        ),
        title=f"[bold green]Sliding Puzzle  {engine.size}×{engine.size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to play again, Q to go back.\n", style="dim"))
    )


# -- game loop ----------------------------------------------------------------


def stats_line(engine: PuzzleEngine) -> str:
    """Plain-text moves/time line used for in-place clock updates."""
    return f"Moves: {engine.moves}    Time: {format_time(engine.elapsed_time)}"


def _update_time(engine: PuzzleEngine) -> None:
    """Overwrite the stats line at the saved cursor, without a full redraw."""
    line = stats_line(engine)
    pad = max(0, (console.width - len(line)) // 2)
    sys.stdout.write(f"\033[u\033[K{' ' * pad}\033[33;1m{line}\033[0m")
    sys.stdout.flush()


def _wait_for_key(engine: PuzzleEngine) -> str:
    """Block for a key, ticking the clock every ``config.CLOCK_TICK`` seconds."""
    while True:
        key = get_key_timeout(config.CLOCK_TICK)
        if key is not None:
            return key
        _update_time(engine)


def handle_key(engine: PuzzleEngine, key: str) -> str:
    """Apply one key press to *engine* and return a status line."""
    direction = _DIRECTIONS.get(key)
    if direction is not None:
        if not engine.move(direction):
            return "[dim]Nothing slides that way.[/dim]"
        return ""
    if key == "restart":
        engine.reset_puzzle()
        return "[yellow]Scrambled![/yellow]"
    return ""


def _play_game(engine: PuzzleEngine, labels: Mapping[int, str]) -> None:
    status = ""
    while True:
        while not engine.is_won:
            # No moves are accepted while the board is being repainted.
            with engine.animation():
                _draw_game(engine, labels, status)
            key = _wait_for_key(engine)
            if key == "quit":
                return
            try:
                status = handle_key(engine, key)
            except PuzzleError as exc:
                logger.error("Move failed: %s", exc, exc_info=True)
                status = f"[red]{user_message(exc)}[/red]"

        _draw_win(engine, labels)
        while True:
            key = get_key()
            if key == "restart":
                engine.reset_puzzle()
                status = ""
                break
            if key == "quit":
                return


def _menu_loop(
    size: int, label_style: LabelStyle, rng: random.Random
) -> None:
    sel_size = size

    while True:
        _draw_menu(sel_size)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key == "left":
            sel_size = max(config.CLI_MIN_SIZE, sel_size - 1)
        elif key == "right":
            sel_size = min(config.CLI_MAX_SIZE, sel_size + 1)
        elif key in ("1", "enter"):
            engine = PuzzleEngine(sel_size, rng=rng)
            _play_game(engine, tile_labels(sel_size, label_style))


# -- public entry point -------------------------------------------------------


def run(
    size: int = config.DEFAULT_SIZE,
    label_style: LabelStyle = LabelStyle.numbers,
    seed: int | None = None,
) -> None:
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(size, label_style, random.Random(seed))
