"""The drag-and-drop board page.

Each connected client gets its own DragDropBoard seeded from the
``BOARD__*`` settings, so one browser's gesture never interferes with
another's. Placement is not persisted; reloading the page starts over
from the configured layout.
"""

from __future__ import annotations

import logging

from nicegui import ui

from dropzones.board import DragDropBoard
from dropzones.config import get_settings
from dropzones.pages.container_view import ContainerViewAdapter
from dropzones.pages.layout import page_layout
from dropzones.pages.registry import page_route

logger = logging.getLogger(__name__)


def _notify_drop_result(board: DragDropBoard, moved: bool) -> None:
    """Tell the user why a drop did not move anything."""
    if moved:
        return
    if board.last_error is not None:
        ui.notify(str(board.last_error), type="warning", position="bottom")
    else:
        ui.notify("Item is already in this list", type="info", position="bottom")


@page_route("/", title="Board", icon="view_column", order=10)
async def board_page() -> None:
    """Two lists of items that can be dragged between each other."""
    board = DragDropBoard.from_settings(get_settings())
    logger.debug("New board for client: %s", board.store.snapshot())

    with page_layout("Dropzones"):
        adapter = ContainerViewAdapter(
            board, on_drop=lambda moved: _notify_drop_result(board, moved)
        )
        adapter.render()
