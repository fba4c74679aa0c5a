"""Drag-and-drop core: partition store, drag session and drop policy."""

from dropzones.board.controller import DragDropBoard
from dropzones.board.drag_session import (
    ConcurrentDragRejectedError,
    Dragging,
    DragSession,
    HoveringTarget,
    Idle,
    SessionState,
)
from dropzones.board.drop_target import DropTargetEvaluator
from dropzones.board.partition import (
    BoardError,
    InvalidContainerKeyError,
    ItemNotFoundError,
    PartitionChange,
    PartitionStore,
)
from dropzones.models.board import DropAffordance

__all__ = [
    "BoardError",
    "ConcurrentDragRejectedError",
    "DragDropBoard",
    "DragSession",
    "Dragging",
    "DropAffordance",
    "DropTargetEvaluator",
    "HoveringTarget",
    "Idle",
    "InvalidContainerKeyError",
    "ItemNotFoundError",
    "PartitionChange",
    "PartitionStore",
    "SessionState",
]
