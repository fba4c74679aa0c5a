"""Board controller: the boundary between the UI layer and the drag core.

``DragDropBoard`` owns one partition store, one drop-target evaluator and
one drag session. The UI feeds it pointer events and reads back container
contents and drag visual state. Recoverable board errors are caught here,
logged, and reported through ``last_error``; none of them escapes into the
UI event loop.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dropzones.board.drag_session import DragSession, Idle
from dropzones.board.drop_target import DropTargetEvaluator
from dropzones.board.partition import (
    BoardError,
    InvalidContainerKeyError,
    PartitionStore,
)
from dropzones.models.board import DragVisualState, DropAffordance

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    from dropzones.config import Settings

logger = logging.getLogger(__name__)


class DragDropBoard:
    """Two or more containers of items, rearranged by drag and drop.

    Args:
        containers: Initial container key -> item labels.
        titles: Optional display titles per container key.
        allow_same_container_drop: Whether an item may be dropped back
            onto the container it came from (moving it to the tail).
    """

    def __init__(
        self,
        containers: Mapping[str, Sequence[str]],
        *,
        titles: Mapping[str, str] | None = None,
        allow_same_container_drop: bool = True,
    ) -> None:
        self.store = PartitionStore(containers)
        self.evaluator = DropTargetEvaluator(allow_same_container_drop)
        self.session = DragSession(self.store, self.evaluator)
        self._titles = dict(titles or {})
        self._listeners: list[Callable[[], None]] = []
        self.last_error: BoardError | None = None

        self.store.subscribe(lambda _change: self._changed())
        self.session.subscribe(lambda _old, _new: self._changed())

    @classmethod
    def from_settings(cls, settings: Settings) -> DragDropBoard:
        """Build a board from the ``BOARD__*`` configuration."""
        board_config = settings.board
        return cls(
            {c.key: c.items for c in board_config.containers},
            titles={c.key: c.title for c in board_config.containers},
            allow_same_container_drop=board_config.allow_same_container_drop,
        )

    # --- Inbound events ---

    def drag_start(self, item: str, origin_key: str) -> bool:
        return self._dispatch(self.session.drag_start, item, origin_key)

    def pointer_enter_container(self, container_key: str) -> bool:
        return self._dispatch(self.session.pointer_enter, container_key)

    def pointer_leave_container(self, container_key: str) -> bool:
        return self._dispatch(self.session.pointer_leave, container_key)

    def drop(self, container_key: str) -> bool:
        """Drop the dragged item on ``container_key``.

        Returns:
            True if the item moved.
        """
        return self._dispatch(self.session.drop, container_key)

    def cancel(self) -> bool:
        return self._dispatch(self.session.cancel)

    def _dispatch(self, handler: Callable[..., bool], *args: str) -> bool:
        try:
            result = handler(*args)
        except BoardError as exc:
            logger.warning("%s: %s", type(exc).__name__, exc)
            self.last_error = exc
            return False
        self.last_error = None
        return result

    # --- Outbound queries ---

    def container_keys(self) -> tuple[str, ...]:
        return self.store.keys()

    def title(self, container_key: str) -> str:
        return self._titles.get(container_key, container_key.title())

    def get_container_items(self, container_key: str) -> list[str]:
        """Items of ``container_key`` in display order (empty if unknown)."""
        try:
            return self.store.get_items(container_key)
        except InvalidContainerKeyError as exc:
            logger.warning("%s: %s", type(exc).__name__, exc)
            self.last_error = exc
            return []

    def get_drag_visual_state(self) -> DragVisualState:
        state = self.session.state
        if isinstance(state, Idle):
            return DragVisualState()
        hover_key = self.session.pointer_key
        return DragVisualState(
            dragged_item=state.item,
            origin_key=state.origin_key,
            hover_key=hover_key,
            is_over_accepting_target=(
                self.evaluator.affordance(state, hover_key) is DropAffordance.ACCEPT
            ),
        )

    def affordance(self, container_key: str) -> DropAffordance:
        """Affordance for ``container_key`` given the current gesture."""
        if container_key != self.session.pointer_key:
            return DropAffordance.NONE
        return self.evaluator.affordance(self.session.state, container_key)

    # --- Change notification ---

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register a callback fired after every move and every drag transition.

        Returns:
            A function that removes the callback again.
        """
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _changed(self) -> None:
        for callback in list(self._listeners):
            try:
                callback()
            except Exception:
                logger.exception("Board listener failed")
