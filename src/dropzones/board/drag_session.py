"""Drag gesture state machine.

One ``DragSession`` tracks a single in-progress gesture through three
states::

    Idle --drag_start--> Dragging <--pointer_enter/leave--> HoveringTarget
      ^                     |                                   |
      +------ drop/cancel --+-----------------------------------+

Only ``drag_start`` leaves ``Idle``; every other event arriving while idle
is ignored. ``drop`` and ``cancel`` always return to ``Idle``. A drop only
mutates the partition when the target accepts the item at drop time.

The session is reused across gestures and never queues events: an event
that does not fit the current state is dropped on the floor.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dropzones.board.partition import (
    BoardError,
    InvalidContainerKeyError,
    ItemNotFoundError,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from dropzones.board.drop_target import DropTargetEvaluator
    from dropzones.board.partition import PartitionStore

logger = logging.getLogger(__name__)


class ConcurrentDragRejectedError(BoardError):
    """Raised when a drag starts while another gesture is still active."""

    def __init__(self, item: str, active_item: str) -> None:
        self.item = item
        self.active_item = active_item
        super().__init__(
            f"Cannot start dragging {item!r} while {active_item!r} is being dragged"
        )


@dataclass(frozen=True, slots=True)
class Idle:
    """No gesture in progress."""


@dataclass(frozen=True, slots=True)
class Dragging:
    """An item is in flight but not over an accepting container."""

    item: str
    origin_key: str


@dataclass(frozen=True, slots=True)
class HoveringTarget:
    """An item is in flight over a container that accepts it."""

    item: str
    origin_key: str
    target_key: str


type SessionState = Idle | Dragging | HoveringTarget

IDLE = Idle()


class DragSession:
    """The single drag gesture of a board.

    Args:
        store: Partition the gesture moves items within.
        evaluator: Acceptance policy consulted on hover and on drop.
    """

    def __init__(self, store: PartitionStore, evaluator: DropTargetEvaluator) -> None:
        self._store = store
        self._evaluator = evaluator
        self._state: SessionState = IDLE
        # Container under the pointer, accepting or not (drives the affordance)
        self._pointer_key: str | None = None
        self._subscribers: list[Callable[[SessionState, SessionState], None]] = []

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_active(self) -> bool:
        return not isinstance(self._state, Idle)

    @property
    def pointer_key(self) -> str | None:
        """Container currently under the pointer during a drag, or None."""
        return self._pointer_key

    # --- Events ---

    def drag_start(self, item: str, origin_key: str) -> bool:
        """Begin dragging ``item`` out of ``origin_key``.

        Raises:
            ConcurrentDragRejectedError: If a gesture is already active.
            InvalidContainerKeyError: If ``origin_key`` is unknown.
            ItemNotFoundError: If ``item`` is not in ``origin_key``.
        """
        match self._state:
            case Dragging(item=active) | HoveringTarget(item=active):
                raise ConcurrentDragRejectedError(item, active)
        if item not in self._store.get_items(origin_key):
            raise ItemNotFoundError(item, origin_key)

        self._transition(Dragging(item, origin_key))
        return True

    def pointer_enter(self, target_key: str) -> bool:
        """The pointer entered ``target_key`` while dragging.

        Raises:
            InvalidContainerKeyError: If ``target_key`` is unknown.
        """
        match self._state:
            case Idle():
                logger.debug("Ignoring pointer enter on %s while idle", target_key)
                return False
            case Dragging(item, origin) | HoveringTarget(item, origin, _):
                if not self._store.has_container(target_key):
                    raise InvalidContainerKeyError(target_key)
                self._pointer_key = target_key
                if self._evaluator.can_accept(item, origin, target_key):
                    new_state: SessionState = HoveringTarget(item, origin, target_key)
                else:
                    new_state = Dragging(item, origin)
                self._transition(new_state)
                return True
        return False

    def pointer_leave(self, target_key: str) -> bool:
        """The pointer left ``target_key`` while dragging.

        Leaves for a container other than the one under the pointer are
        ignored; browsers fire ``enter`` on the new container before
        ``leave`` on the old one.
        """
        if not self.is_active or target_key != self._pointer_key:
            logger.debug("Ignoring pointer leave on %s", target_key)
            return False

        self._pointer_key = None
        match self._state:
            case HoveringTarget(item, origin, _):
                self._transition(Dragging(item, origin))
            case _:
                # Leaving a rejecting container changes only the affordance
                self._transition(self._state)
        return True

    def drop(self, target_key: str) -> bool:
        """Release the dragged item over ``target_key``.

        Always returns the session to Idle. The partition is mutated only
        when ``target_key`` accepts the item.

        Returns:
            True if the item was moved.

        Raises:
            InvalidContainerKeyError: If ``target_key`` is unknown (the
                session is already Idle when this propagates).
            ItemNotFoundError: If the item left its origin mid-gesture.
        """
        match self._state:
            case Idle():
                logger.debug("Ignoring drop on %s while idle", target_key)
                return False
            case Dragging(item, origin) | HoveringTarget(item, origin, _):
                self._reset()
                if not self._store.has_container(target_key):
                    raise InvalidContainerKeyError(target_key)
                if not self._evaluator.can_accept(item, origin, target_key):
                    logger.info("Drop of %r on %s refused", item, target_key)
                    return False
                self._store.move_item(item, origin, target_key)
                return True
        return False

    def cancel(self) -> bool:
        """Abandon the current gesture without touching the partition."""
        match self._state:
            case Idle():
                return False
            case Dragging(item) | HoveringTarget(item):
                logger.debug("Drag of %r cancelled", item)
                self._reset()
                return True
        return False

    # --- Observers ---

    def subscribe(
        self, callback: Callable[[SessionState, SessionState], None]
    ) -> Callable[[], None]:
        """Register ``callback(old_state, new_state)`` for every transition.

        Returns:
            A function that removes the callback again.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _reset(self) -> None:
        self._pointer_key = None
        self._transition(IDLE)

    def _transition(self, new_state: SessionState) -> None:
        old_state = self._state
        self._state = new_state
        logger.debug("Drag session %s -> %s", old_state, new_state)
        for callback in list(self._subscribers):
            try:
                callback(old_state, new_state)
            except Exception:
                logger.exception("Drag session subscriber failed")
