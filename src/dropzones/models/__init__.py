"""View models for the drag-and-drop board."""

from dropzones.models.board import (
    ContainerView,
    DragVisualState,
    DropAffordance,
    ItemView,
)

__all__ = [
    "ContainerView",
    "DragVisualState",
    "DropAffordance",
    "ItemView",
]
