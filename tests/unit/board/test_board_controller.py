"""Tests for the board controller: end-to-end gestures and error reporting.

The scenarios drive the board exactly as the UI does, through the inbound
events, and check the partition and the drag visual state the renderer
would read.
"""

from __future__ import annotations

import pytest

from dropzones.board import (
    ConcurrentDragRejectedError,
    DragDropBoard,
    DropAffordance,
    InvalidContainerKeyError,
    ItemNotFoundError,
)
from dropzones.config import BoardConfig, ContainerConfig, Settings
from dropzones.models.board import DragVisualState


def _layout(board: DragDropBoard) -> dict[str, list[str]]:
    return {key: board.get_container_items(key) for key in board.container_keys()}


class TestGestureScenarios:
    """Full gestures from drag start to drop or cancel."""

    def test_drag_hover_drop_moves_item(self, board: DragDropBoard) -> None:
        """Drag I2 from left, hover right, drop on right."""
        assert board.drag_start("I2", "left")
        assert board.pointer_enter_container("right")
        assert board.drop("right")

        assert _layout(board) == {"left": ["I1", "I3"], "right": ["I4", "I5", "I2"]}

    def test_cancel_leaves_layout_unchanged(self, board: DragDropBoard) -> None:
        """Drag I4 from right, then the gesture is cancelled."""
        board.drag_start("I4", "right")

        assert board.cancel()

        assert _layout(board) == {"left": ["I1", "I2", "I3"], "right": ["I4", "I5"]}

    def test_same_container_drop_moves_to_tail(self, board: DragDropBoard) -> None:
        """Drag I1 from left and drop it back on left."""
        board.drag_start("I1", "left")
        board.pointer_enter_container("left")

        assert board.drop("left")

        assert _layout(board) == {"left": ["I2", "I3", "I1"], "right": ["I4", "I5"]}

    def test_same_container_drop_refused_when_configured(self) -> None:
        board = DragDropBoard(
            {"left": ["I1", "I2", "I3"], "right": ["I4", "I5"]},
            allow_same_container_drop=False,
        )
        board.drag_start("I1", "left")
        board.pointer_enter_container("left")

        assert board.drop("left") is False

        assert _layout(board) == {"left": ["I1", "I2", "I3"], "right": ["I4", "I5"]}
        assert board.last_error is None

    def test_consecutive_gestures(self, board: DragDropBoard) -> None:
        board.drag_start("I1", "left")
        board.drop("right")
        board.drag_start("I1", "right")
        board.drop("left")

        assert _layout(board) == {"left": ["I2", "I3", "I1"], "right": ["I4", "I5"]}


class TestErrorReporting:
    """Errors are reported through last_error and never raised."""

    def test_item_not_in_origin(self, board: DragDropBoard) -> None:
        assert board.drag_start("I4", "left") is False

        assert isinstance(board.last_error, ItemNotFoundError)
        assert not board.session.is_active

    def test_unknown_origin(self, board: DragDropBoard) -> None:
        assert board.drag_start("I1", "middle") is False
        assert isinstance(board.last_error, InvalidContainerKeyError)

    def test_concurrent_drag_ignored(self, board: DragDropBoard) -> None:
        board.drag_start("I1", "left")

        assert board.drag_start("I4", "right") is False

        assert isinstance(board.last_error, ConcurrentDragRejectedError)
        assert board.get_drag_visual_state().dragged_item == "I1"

    def test_drop_on_unknown_container(self, board: DragDropBoard) -> None:
        board.drag_start("I1", "left")

        assert board.drop("middle") is False

        assert isinstance(board.last_error, InvalidContainerKeyError)
        assert not board.session.is_active
        assert _layout(board) == {"left": ["I1", "I2", "I3"], "right": ["I4", "I5"]}

    def test_error_cleared_by_next_event(self, board: DragDropBoard) -> None:
        board.drag_start("I4", "left")
        assert board.last_error is not None

        board.drag_start("I4", "right")

        assert board.last_error is None

    def test_unknown_container_query(self, board: DragDropBoard) -> None:
        assert board.get_container_items("middle") == []
        assert isinstance(board.last_error, InvalidContainerKeyError)


class TestVisualState:
    """The renderer's view of the gesture."""

    def test_idle(self, board: DragDropBoard) -> None:
        visual = board.get_drag_visual_state()

        assert visual == DragVisualState()
        assert not visual.is_dragging

    def test_dragging_outside_any_container(self, board: DragDropBoard) -> None:
        board.drag_start("I2", "left")

        visual = board.get_drag_visual_state()

        assert visual.dragged_item == "I2"
        assert visual.origin_key == "left"
        assert visual.hover_key is None
        assert visual.is_over_accepting_target is False

    def test_over_accepting_target(self, board: DragDropBoard) -> None:
        board.drag_start("I2", "left")
        board.pointer_enter_container("right")

        visual = board.get_drag_visual_state()

        assert visual.hover_key == "right"
        assert visual.is_over_accepting_target is True
        assert board.affordance("right") is DropAffordance.ACCEPT
        assert board.affordance("left") is DropAffordance.NONE

    def test_over_rejecting_target(self) -> None:
        board = DragDropBoard(
            {"left": ["a"], "right": []}, allow_same_container_drop=False
        )
        board.drag_start("a", "left")
        board.pointer_enter_container("left")

        assert board.get_drag_visual_state().is_over_accepting_target is False
        assert board.affordance("left") is DropAffordance.REJECT

    def test_visual_state_resets_after_drop(self, board: DragDropBoard) -> None:
        board.drag_start("I2", "left")
        board.pointer_enter_container("right")
        board.drop("right")

        assert board.get_drag_visual_state() == DragVisualState()


class TestChangeNotification:
    """One callback fires for moves and for drag transitions."""

    def test_gesture_notifies_every_step(self, board: DragDropBoard) -> None:
        calls: list[dict[str, list[str]]] = []
        board.subscribe(lambda: calls.append(_layout(board)))

        board.drag_start("I2", "left")  # Idle -> Dragging
        board.pointer_enter_container("right")  # -> HoveringTarget
        board.drop("right")  # -> Idle, then the move

        assert len(calls) == 4
        assert calls[-1] == {"left": ["I1", "I3"], "right": ["I4", "I5", "I2"]}

    def test_ignored_event_does_not_notify(self, board: DragDropBoard) -> None:
        calls: list[None] = []
        board.subscribe(lambda: calls.append(None))

        board.drop("right")

        assert calls == []

    def test_failing_listener_is_contained(self, board: DragDropBoard) -> None:
        def explode() -> None:
            raise RuntimeError("boom")

        board.subscribe(explode)

        assert board.drag_start("I2", "left")
        assert board.drop("right")
        assert board.get_container_items("right") == ["I4", "I5", "I2"]

    def test_unsubscribe(self, board: DragDropBoard) -> None:
        calls: list[None] = []
        unsubscribe = board.subscribe(lambda: calls.append(None))

        unsubscribe()
        board.drag_start("I2", "left")

        assert calls == []


class TestFromSettings:
    """Boards are built from the BOARD__* configuration."""

    def test_default_layout(self) -> None:
        board = DragDropBoard.from_settings(Settings(_env_file=None))  # type: ignore[call-arg]

        assert board.container_keys() == ("left", "right")
        assert board.get_container_items("left") == ["Item 1", "Item 2", "Item 3"]
        assert board.get_container_items("right") == ["Item 4", "Item 5"]
        assert board.title("left") == "Left List"
        assert board.title("right") == "Right List"

    def test_custom_layout_and_policy(self) -> None:
        settings = Settings(  # type: ignore[call-arg]
            _env_file=None,
            board=BoardConfig(
                allow_same_container_drop=False,
                containers=[
                    ContainerConfig(key="todo", title="To do", items=["a", "b"]),
                    ContainerConfig(key="done", title="Done"),
                ],
            ),
        )

        board = DragDropBoard.from_settings(settings)

        assert board.container_keys() == ("todo", "done")
        assert board.evaluator.allow_same_container_drop is False

    def test_title_falls_back_to_key(self) -> None:
        board = DragDropBoard({"left": []})
        assert board.title("left") == "Left"


@pytest.mark.parametrize("item", ["I1", "I2", "I3"])
def test_every_left_item_can_cross(board: DragDropBoard, item: str) -> None:
    board.drag_start(item, "left")
    board.drop("right")

    assert board.get_container_items("right")[-1] == item
    assert item not in board.get_container_items("left")
