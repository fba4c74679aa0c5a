"""Authoritative item partition for the drag-and-drop board.

Holds the mapping of container key to an ordered list of item labels.
``move_item`` is the only mutator: it removes an item from one container
and appends it to another in a single synchronous step, so readers never
observe an item in two containers (or in none).

Subscribers are notified after each completed move so that views can
re-render the two affected containers.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

logger = logging.getLogger(__name__)


class BoardError(Exception):
    """Base class for recoverable board errors."""


class ItemNotFoundError(BoardError):
    """Raised when an item is not in the container it was claimed to be in."""

    def __init__(self, item: str, container_key: str) -> None:
        self.item = item
        self.container_key = container_key
        super().__init__(f"Item {item!r} not found in container {container_key!r}")


class InvalidContainerKeyError(BoardError):
    """Raised for an operation against a container key that does not exist."""

    def __init__(self, container_key: str) -> None:
        self.container_key = container_key
        super().__init__(f"Unknown container key {container_key!r}")


@dataclass(frozen=True, slots=True)
class PartitionChange:
    """A completed move, delivered to store subscribers."""

    item: str
    from_key: str
    to_key: str

    @property
    def affected_keys(self) -> tuple[str, ...]:
        if self.from_key == self.to_key:
            return (self.from_key,)
        return (self.from_key, self.to_key)


class PartitionStore:
    """Container key -> ordered item labels, with a single atomic move."""

    def __init__(self, initial: Mapping[str, Sequence[str]]) -> None:
        self._containers: dict[str, list[str]] = {
            key: list(items) for key, items in initial.items()
        }
        duplicates = sorted(
            item
            for item, count in Counter(
                item for items in self._containers.values() for item in items
            ).items()
            if count > 1
        )
        if duplicates:
            msg = f"Items must be unique across containers, duplicated: {duplicates}"
            raise ValueError(msg)
        self._subscribers: list[Callable[[PartitionChange], None]] = []

    # --- Queries ---

    def keys(self) -> tuple[str, ...]:
        """Container keys in configuration order."""
        return tuple(self._containers)

    def has_container(self, key: str) -> bool:
        return key in self._containers

    def get_items(self, key: str) -> list[str]:
        """Return a copy of the container's item sequence.

        Raises:
            InvalidContainerKeyError: If ``key`` is not a known container.
        """
        try:
            return list(self._containers[key])
        except KeyError:
            raise InvalidContainerKeyError(key) from None

    def locate(self, item: str) -> str | None:
        """Return the key of the container holding ``item``, or None."""
        for key, items in self._containers.items():
            if item in items:
                return key
        return None

    def snapshot(self) -> dict[str, list[str]]:
        """Return a copy of the whole partition."""
        return {key: list(items) for key, items in self._containers.items()}

    # --- Mutation ---

    def move_item(self, item: str, from_key: str, to_key: str) -> None:
        """Move ``item`` from ``from_key`` to the tail of ``to_key``.

        Removes the first occurrence of ``item`` from ``from_key`` and
        appends it to ``to_key``. When ``from_key == to_key`` the item ends
        up at the tail of that same container.

        Both keys and the item's membership are validated before anything
        is touched, so a failed call leaves the partition unchanged and
        notifies nobody.

        Raises:
            InvalidContainerKeyError: If either key is unknown.
            ItemNotFoundError: If ``item`` is not in ``from_key``.
        """
        if from_key not in self._containers:
            raise InvalidContainerKeyError(from_key)
        if to_key not in self._containers:
            raise InvalidContainerKeyError(to_key)

        source = self._containers[from_key]
        if item not in source:
            raise ItemNotFoundError(item, from_key)

        source.remove(item)
        self._containers[to_key].append(item)

        logger.info("Moved %r from %s to %s", item, from_key, to_key)
        self._notify(PartitionChange(item, from_key, to_key))

    # --- Observers ---

    def subscribe(
        self, callback: Callable[[PartitionChange], None]
    ) -> Callable[[], None]:
        """Register a callback fired after every completed move.

        Returns:
            A function that removes the callback again.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, change: PartitionChange) -> None:
        for callback in list(self._subscribers):
            try:
                callback(change)
            except Exception:
                logger.exception("Partition subscriber failed for %s", change)
