"""Shared fixtures for drag-and-drop core tests."""

from __future__ import annotations

import pytest

from dropzones.board import (
    DragDropBoard,
    DragSession,
    DropTargetEvaluator,
    PartitionStore,
)

# The layout used throughout: three items on the left, two on the right.
INITIAL_LAYOUT: dict[str, list[str]] = {
    "left": ["I1", "I2", "I3"],
    "right": ["I4", "I5"],
}


@pytest.fixture
def store() -> PartitionStore:
    return PartitionStore(INITIAL_LAYOUT)


@pytest.fixture
def session(store: PartitionStore) -> DragSession:
    return DragSession(store, DropTargetEvaluator(allow_same_container_drop=True))


@pytest.fixture
def strict_session(store: PartitionStore) -> DragSession:
    """A session whose evaluator refuses drops back onto the origin."""
    return DragSession(store, DropTargetEvaluator(allow_same_container_drop=False))


@pytest.fixture
def board() -> DragDropBoard:
    return DragDropBoard(
        INITIAL_LAYOUT, titles={"left": "Left List", "right": "Right List"}
    )
