"""Command-line utilities for Dropzones.

``show-board`` loads the settings the server would start with and prints
the configured board, so a bad ``BOARD__CONTAINERS`` value is caught
before ``ui.run``.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dropzones.config import Settings

if TYPE_CHECKING:
    from dropzones.config import BoardConfig

console = Console()


def _board_table(board: BoardConfig) -> Table:
    """One row per container, in display order."""
    policy = "allowed" if board.allow_same_container_drop else "refused"
    table = Table(title="Board", caption=f"Same-container drops: {policy}")
    table.add_column("Key", style="cyan")
    table.add_column("Title")
    table.add_column("Items", justify="right")
    table.add_column("Contents")

    for container in board.containers:
        table.add_row(
            escape(container.key),
            escape(container.title),
            str(len(container.items)),
            escape(", ".join(container.items)) or "[dim](empty)[/]",
        )
    return table


def _cmd_show(*, console: Console | None = None) -> int:
    """Validate the board settings and print them. Returns an exit code."""
    con = console or globals()["console"]
    try:
        settings = Settings()
    except ValidationError as exc:
        con.print("[red]Invalid configuration:[/]")
        for error in exc.errors():
            location = "__".join(str(part) for part in error["loc"]).upper()
            message = escape(error["msg"])
            con.print(f"  [bold]{location or 'SETTINGS'}[/]: {message}")
        return 1

    con.print(_board_table(settings.board))
    return 0


def show_board() -> None:
    """Print the configured board and exit non-zero if it is invalid."""
    sys.exit(_cmd_show())
