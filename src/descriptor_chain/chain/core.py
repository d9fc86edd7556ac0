"""Chain contract: the operation surface every descriptor chain exposes.

A chain is the ordered, cursor-addressable history of snapshots taken for one
``(object, key)`` pair. Index 0 is the oldest snapshot. The cursor
(``current_index``) selects the "current" snapshot; ``next_index`` and
``previous_index`` are plain arithmetic around it and are never validated,
so callers check ``has()`` before trusting ``next`` / ``previous``.

Every mutator returns the chain itself to allow fluent use::

    chain.add(first).add(second).set_current_index(1).deactivate()

Concrete chains live in :mod:`.base` (stateful), :mod:`.chain` (public
default) and :mod:`.minimal`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

O = TypeVar("O")
D = TypeVar("D")


class DescriptorChainCore(ABC, Generic[O, D]):
    """Abstract contract for a chain of property descriptor snapshots."""

    __slots__ = ()

    # ------------------------------ State -----------------------------------

    @property
    @abstractmethod
    def active(self) -> bool:
        """Active state of the chain."""

    @property
    @abstractmethod
    def enabled(self) -> bool:
        """Enabled state of the chain."""

    @property
    @abstractmethod
    def key(self) -> Any:
        """Property name the chain is bound to."""

    @property
    @abstractmethod
    def object(self) -> O:
        """Object the chain is bound to (held by reference)."""

    @property
    @abstractmethod
    def _data(self) -> list[D]:
        """Underlying snapshot storage."""

    @property
    @abstractmethod
    def _descriptor(self) -> Callable[..., D]:
        """Factory used to build snapshots from plain fields."""

    # ------------------------------ Cursor ----------------------------------

    @property
    @abstractmethod
    def current(self) -> D | None:
        """Snapshot at the cursor, or None when the cursor is out of range."""

    @property
    @abstractmethod
    def current_index(self) -> int:
        """Cursor position."""

    @property
    @abstractmethod
    def last_index(self) -> int:
        """Index of the newest snapshot (``size - 1``)."""

    @property
    @abstractmethod
    def next(self) -> D | None:
        """Snapshot after the cursor, if any."""

    @property
    @abstractmethod
    def next_index(self) -> int:
        """``current_index + 1``, unvalidated."""

    @property
    @abstractmethod
    def previous(self) -> D | None:
        """Snapshot before the cursor, if any."""

    @property
    @abstractmethod
    def previous_index(self) -> int:
        """``current_index - 1``, unvalidated."""

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of stored snapshots."""

    # ------------------------------ Flags -----------------------------------

    @abstractmethod
    def activate(self) -> DescriptorChainCore[O, D]:
        """Set ``active`` to True."""

    @abstractmethod
    def deactivate(self) -> DescriptorChainCore[O, D]:
        """Set ``active`` to False."""

    @abstractmethod
    def enable(self) -> DescriptorChainCore[O, D]:
        """Set ``enabled`` to True."""

    @abstractmethod
    def disable(self) -> DescriptorChainCore[O, D]:
        """Set ``enabled`` to False."""

    # ------------------------------ Mutation --------------------------------

    @abstractmethod
    def add(self, descriptor: Any) -> DescriptorChainCore[O, D]:
        """Append one snapshot."""

    @abstractmethod
    def clear(self) -> DescriptorChainCore[O, D]:
        """Remove all snapshots."""

    @abstractmethod
    def delete(self, index: int) -> DescriptorChainCore[O, D]:
        """Remove the snapshot at ``index``; out-of-range is a no-op."""

    @abstractmethod
    def set(self, index: int, value: D) -> DescriptorChainCore[O, D]:
        """Replace the snapshot at ``index`` wholesale."""

    @abstractmethod
    def update(self, index: int, value: Any) -> DescriptorChainCore[O, D]:
        """Shallow-merge ``value``'s present fields onto the snapshot at ``index``."""

    @abstractmethod
    def set_current_index(self, index: int) -> DescriptorChainCore[O, D]:
        """Move the cursor; no bounds validation."""

    @abstractmethod
    def load(self) -> DescriptorChainCore[O, D]:
        """Append a snapshot read from the descriptor source for ``(object, key)``."""

    # ------------------------------ Read ------------------------------------

    @abstractmethod
    def get(self, index: int) -> D | None:
        """Snapshot at ``index``, or None."""

    @abstractmethod
    def has(self, index: int) -> bool:
        """Return True if ``0 <= index < size``."""

    @abstractmethod
    def first(self) -> D | None:
        """Oldest snapshot, or None on an empty chain."""

    @abstractmethod
    def last(self) -> D | None:
        """Newest snapshot, or None on an empty chain."""

    @abstractmethod
    def entries(self) -> Iterator[tuple[int, D]]:
        """Fresh iterator of ``(index, snapshot)`` pairs in storage order."""

    @abstractmethod
    def values(self) -> Iterator[D]:
        """Fresh iterator of snapshots in storage order."""

    # ------------------------------ Dunders ---------------------------------

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[D]:
        return self.values()

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and not isinstance(index, bool) and self.has(index)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(key={self.key!r}, size={self.size}, "
            f"current_index={self.current_index}, active={self.active}, enabled={self.enabled})"
        )


__all__ = ["DescriptorChainCore"]
