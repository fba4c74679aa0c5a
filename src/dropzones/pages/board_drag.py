"""HTML5 drag-and-drop bindings between NiceGUI elements and the board.

Item cards become ``draggable`` and containers become drop targets. The
bindings only translate browser events into board events; the board
decides what each event means for the current gesture.

Design decisions:
- One DragDropBoard per client, passed in explicitly -- no module globals
- ``dragend`` always cancels: after a successful drop the session is
  already Idle and the cancel is ignored, otherwise it abandons the drag
- dragover.prevent throttled to prevent 60/sec event flood
- Pattern: github.com/zauberzeug/nicegui/discussions/932
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from nicegui import ui

    from dropzones.board import DragDropBoard

logger = logging.getLogger(__name__)


def make_draggable_item(
    element: ui.element,
    item: str,
    origin_key: str,
    board: DragDropBoard,
) -> ui.element:
    """Add drag attributes and events to an item card.

    Args:
        element: The NiceGUI element rendering the item.
        item: Label of the item.
        origin_key: Key of the container the card is rendered in.
        board: The client's board.

    Returns:
        The element (for chaining).
    """
    element.props("draggable")
    element.classes("cursor-move")

    def on_dragstart() -> None:
        if not board.drag_start(item, origin_key):
            logger.debug("Drag of %r from %s not started", item, origin_key)

    def on_dragend() -> None:
        board.cancel()

    element.on("dragstart", on_dragstart)
    element.on("dragend", on_dragend)

    return element


def make_drop_container(
    element: ui.element,
    container_key: str,
    board: DragDropBoard,
    on_drop: Callable[[bool], None] | None = None,
) -> ui.element:
    """Make a container element a drop target for item cards.

    Args:
        element: The NiceGUI element rendering the container.
        container_key: Key of the container.
        board: The client's board.
        on_drop: Optional callback receiving whether the drop moved an item.

    Returns:
        The element (for chaining).
    """
    # dragover.prevent marks as valid drop target.
    # Throttle: we only need preventDefault(), not the handler.
    element.on("dragover.prevent", lambda: None, throttle=0.05)

    # enter/leave also fire for child cards; only the outermost pair counts
    depth = 0

    def on_dragenter() -> None:
        nonlocal depth
        depth += 1
        if depth == 1:
            board.pointer_enter_container(container_key)

    def reset_depth_when_idle() -> None:
        nonlocal depth
        if not board.session.is_active:
            depth = 0

    board.subscribe(reset_depth_when_idle)

    def on_dragleave() -> None:
        nonlocal depth
        depth = max(depth - 1, 0)
        if depth == 0:
            board.pointer_leave_container(container_key)

    def on_drop_handler() -> None:
        visual = board.get_drag_visual_state()
        if not visual.is_dragging:
            logger.warning("Drop event on %s with no dragged item", container_key)
            return
        moved = board.drop(container_key)
        logger.info(
            "Drop: item=%s from=%s to=%s moved=%s",
            visual.dragged_item,
            visual.origin_key,
            container_key,
            moved,
        )
        if on_drop is not None:
            on_drop(moved)

    element.on("dragenter", on_dragenter)
    element.on("dragleave", on_dragleave)
    element.on("drop.prevent", on_drop_handler)

    return element
