"""View models for rendering the drag-and-drop board.

These are plain frozen dataclasses; the UI reads them and never writes
back. All mutation goes through the board controller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class DropAffordance(StrEnum):
    """Visual hint for a container while a drag is in progress."""

    NONE = "none"
    ACCEPT = "accept"
    REJECT = "reject"


@dataclass(frozen=True)
class DragVisualState:
    """What the renderer needs to know about the gesture in progress.

    Attributes:
        dragged_item: Label of the item in flight, or None when idle.
        origin_key: Container the item was picked up from.
        hover_key: Container currently under the pointer, if any.
        is_over_accepting_target: True while hovering a container that
            will take the item on drop.
    """

    dragged_item: str | None = None
    origin_key: str | None = None
    hover_key: str | None = None
    is_over_accepting_target: bool = False

    @property
    def is_dragging(self) -> bool:
        return self.dragged_item is not None


@dataclass(frozen=True)
class ItemView:
    """A single draggable item card."""

    label: str
    is_dragged: bool = False


@dataclass(frozen=True)
class ContainerView:
    """Renderable description of one container."""

    key: str
    title: str
    items: list[ItemView] = field(default_factory=list)
    affordance: DropAffordance = DropAffordance.NONE

    @property
    def labels(self) -> list[str]:
        return [item.label for item in self.items]
