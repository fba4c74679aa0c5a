"""Drop acceptance policy for board containers.

Every container accepts every item. The one configurable exception is a
drop back onto the container the item came from, which can be refused
with ``allow_same_container_drop=False``.
"""

from __future__ import annotations

from dropzones.board.drag_session import Idle, SessionState
from dropzones.models.board import DropAffordance


class DropTargetEvaluator:
    """Decides whether a hovered container may take the dragged item."""

    __slots__ = ("allow_same_container_drop",)

    def __init__(self, allow_same_container_drop: bool = True) -> None:
        self.allow_same_container_drop = allow_same_container_drop

    def can_accept(self, item: str, origin_key: str, candidate_key: str) -> bool:  # noqa: ARG002
        """Return True if ``candidate_key`` accepts ``item`` from ``origin_key``."""
        if candidate_key == origin_key:
            return self.allow_same_container_drop
        return True

    def affordance(self, state: SessionState, hover_key: str | None) -> DropAffordance:
        """Affordance for the container under the pointer.

        Args:
            state: Current drag session state.
            hover_key: Container the pointer is over, or None.

        Returns:
            ACCEPT or REJECT while dragging over a container, NONE otherwise.
        """
        if isinstance(state, Idle) or hover_key is None:
            return DropAffordance.NONE
        if self.can_accept(state.item, state.origin_key, hover_key):
            return DropAffordance.ACCEPT
        return DropAffordance.REJECT
