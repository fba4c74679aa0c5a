"""Container rendering for the drag-and-drop board.

Turns board contents and the drag visual state into ``ContainerView``
descriptions, and renders those as NiceGUI columns of item cards.

Drag transitions only restyle existing elements. Cards are rebuilt only
for containers whose contents changed, which happens after a drop has
completed, so the element the browser is dragging is never removed
mid-gesture.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nicegui import ui

from dropzones.models.board import ContainerView, DropAffordance, ItemView
from dropzones.pages.board_drag import make_draggable_item, make_drop_container

if TYPE_CHECKING:
    from collections.abc import Callable

    from dropzones.board import DragDropBoard

logger = logging.getLogger(__name__)

_ITEM_STYLE = (
    "padding: 8px; margin: 4px; background-color: #f0f0f0; border-radius: 4px;"
)
_CONTAINER_STYLE = "width: 200px; padding: 16px; border-radius: 8px;"

_CONTAINER_BACKGROUND = {
    DropAffordance.NONE: "background-color: #f8f8f8;",
    DropAffordance.ACCEPT: "background-color: #e0e0e0;",
    DropAffordance.REJECT: "background-color: #f8f8f8; outline: 2px dashed #e57373;",
}


def describe_containers(board: DragDropBoard) -> list[ContainerView]:
    """Build a renderable description of every container on the board."""
    visual = board.get_drag_visual_state()
    return [
        ContainerView(
            key=key,
            title=board.title(key),
            items=[
                ItemView(label=label, is_dragged=label == visual.dragged_item)
                for label in board.get_container_items(key)
            ],
            affordance=board.affordance(key),
        )
        for key in board.container_keys()
    ]


def tag_element[E: ui.element](element: E, testid: str, **data: str) -> E:
    """Attach ``data-testid`` and ``data-*`` attributes to ``element``.

    Values go straight into the props dict, so quotes and spaces in
    labels are kept verbatim.
    """
    element._props["data-testid"] = testid
    for name, value in data.items():
        element._props[f"data-{name.replace('_', '-')}"] = value
    return element


def item_style(item: ItemView) -> str:
    opacity = 0.5 if item.is_dragged else 1
    return f"{_ITEM_STYLE} opacity: {opacity};"


def container_style(view: ContainerView) -> str:
    return f"{_CONTAINER_STYLE} {_CONTAINER_BACKGROUND[view.affordance]}"


class ContainerViewAdapter:
    """Renders a board as side-by-side containers and keeps them current.

    Args:
        board: The client's board. The adapter reads from it and forwards
            drag events to it; it never touches the partition directly.
        on_drop: Optional callback receiving whether a drop moved an item.
    """

    def __init__(
        self,
        board: DragDropBoard,
        on_drop: Callable[[bool], None] | None = None,
    ) -> None:
        self._board = board
        self._on_drop = on_drop
        self._columns: dict[str, ui.column] = {}
        self._card_slots: dict[str, ui.column] = {}
        self._cards: dict[str, dict[str, ui.card]] = {}
        self._rendered: dict[str, list[str]] = {}

    def render(self) -> ui.row:
        """Create the container columns under the current NiceGUI context."""
        row = tag_element(
            ui.row().classes("w-full justify-around items-start"), "board"
        )
        with row:
            for view in describe_containers(self._board):
                column = tag_element(
                    ui.column().style(container_style(view)),
                    "container",
                    container_key=view.key,
                )
                with column:
                    ui.label(view.title).classes("text-h5")
                    self._card_slots[view.key] = ui.column().classes("w-full gap-0")
                make_drop_container(column, view.key, self._board, self._on_drop)
                self._columns[view.key] = column
                self._build_cards(view)

        self._board.subscribe(self.refresh)
        return row

    def refresh(self) -> None:
        """Bring the rendered columns in line with the board."""
        for view in describe_containers(self._board):
            column = self._columns.get(view.key)
            if column is None:
                continue
            if view.labels != self._rendered.get(view.key):
                logger.debug("Rebuilding cards for %s", view.key)
                self._build_cards(view)
            column.style(replace=container_style(view))
            for item in view.items:
                self._cards[view.key][item.label].style(replace=item_style(item))

    def _build_cards(self, view: ContainerView) -> None:
        slot = self._card_slots[view.key]
        slot.clear()
        cards: dict[str, ui.card] = {}
        with slot:
            for item in view.items:
                card = tag_element(
                    ui.card().style(item_style(item)).classes("w-full shadow-none"),
                    "item",
                    item=item.label,
                )
                with card:
                    ui.label(item.label)
                make_draggable_item(card, item.label, view.key, self._board)
                cards[item.label] = card
        self._cards[view.key] = cards
        self._rendered[view.key] = view.labels
