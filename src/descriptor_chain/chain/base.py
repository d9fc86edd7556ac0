"""Stateful descriptor chain: storage, cursor, flags and the ``load`` bridge.

Index policy
------------
- Reads (``get``, ``current``, ``next``, ``previous``, ``first``, ``last``)
  never raise; out-of-range positions yield ``None``. Negative indexes are
  out of range, they never wrap around.
- ``delete`` on an out-of-range index is a no-op.
- ``set`` replaces in range, appends at ``index == size`` and raises
  :class:`ChainIndexError` anywhere else, so storage never has gaps.
- ``update`` requires an existing snapshot at ``index``.
- ``clear`` empties storage and resets the cursor to 0.

Subclasses provide ``add``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from pydantic import BaseModel

from descriptor_chain.core.contracts.descriptor import WrappedDescriptor, merge_descriptor
from descriptor_chain.core.errors import ChainIndexError, DescriptorNotFoundError
from descriptor_chain.core.settings import get_logger, load_settings
from descriptor_chain.core.source import DescriptorSource, from_property

from .core import D, DescriptorChainCore, O

log = get_logger(__name__)


class DescriptorChainBase(DescriptorChainCore[O, D]):
    """
    Reusable chain holding the snapshot list, cursor and active/enabled flags.

    Attributes
    ----------
    _object : O
        Bound object, never reassigned.
    _key : Any
        Bound property name, never reassigned.
    _snapshots : list[D]
        History, index 0 is the oldest.
    _current_index : int
        Cursor; only dereferenced through bounds-checked reads.
    _factory : Callable[..., D]
        Builds a snapshot from plain fields (see ``DescriptorChain.add``).
    _source : DescriptorSource
        Reads a live snapshot for ``load()``.
    """

    __slots__ = (
        "_object",
        "_key",
        "_snapshots",
        "_current_index",
        "_active",
        "_enabled",
        "_factory",
        "_source",
    )

    def __init__(
        self,
        object: O,
        key: Any,
        descriptor: Callable[..., D] | None = None,
        source: DescriptorSource | None = None,
    ) -> None:
        settings = load_settings()
        self._object = object
        self._key = key
        self._snapshots: list[D] = []
        self._current_index: int = 0
        self._active: bool = settings.default_active
        self._enabled: bool = settings.default_enabled
        self._factory: Callable[..., D] = (
            descriptor if descriptor is not None else WrappedDescriptor  # type: ignore[assignment]
        )
        self._source: DescriptorSource = source if source is not None else from_property

    # ------------------------------ State -----------------------------------

    @property
    def active(self) -> bool:
        return self._active

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def key(self) -> Any:
        return self._key

    @property
    def object(self) -> O:
        return self._object

    @property
    def _data(self) -> list[D]:
        return self._snapshots

    @property
    def _descriptor(self) -> Callable[..., D]:
        return self._factory

    # ------------------------------ Cursor ----------------------------------

    @property
    def current(self) -> D | None:
        return self.get(self._current_index)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def last_index(self) -> int:
        return len(self._snapshots) - 1

    @property
    def next(self) -> D | None:
        return self.get(self.next_index)

    @property
    def next_index(self) -> int:
        return self._current_index + 1

    @property
    def previous(self) -> D | None:
        return self.get(self.previous_index)

    @property
    def previous_index(self) -> int:
        return self._current_index - 1

    @property
    def size(self) -> int:
        return len(self._snapshots)

    # ------------------------------ Flags -----------------------------------

    def activate(self) -> DescriptorChainBase[O, D]:
        self._active = True
        return self

    def deactivate(self) -> DescriptorChainBase[O, D]:
        self._active = False
        return self

    def enable(self) -> DescriptorChainBase[O, D]:
        self._enabled = True
        return self

    def disable(self) -> DescriptorChainBase[O, D]:
        self._enabled = False
        return self

    # ------------------------------ Mutation --------------------------------

    def clear(self) -> DescriptorChainBase[O, D]:
        self._snapshots.clear()
        self._current_index = 0
        log.debug("chain cleared key=%s", self._key)
        return self

    def delete(self, index: int) -> DescriptorChainBase[O, D]:
        if self.has(index):
            del self._snapshots[index]
            log.debug("snapshot deleted key=%s index=%d size=%d", self._key, index, self.size)
        return self

    def set(self, index: int, value: D) -> DescriptorChainBase[O, D]:
        """Replace the snapshot at ``index``, or append when ``index == size``.

        Raises
        ------
        ChainIndexError
            If ``index`` is negative or beyond ``size``.
        """
        if self.has(index):
            self._snapshots[index] = value
        elif index == self.size:
            self._snapshots.append(value)
        else:
            raise ChainIndexError(index, self.size, "set")
        return self

    def update(self, index: int, value: Any) -> DescriptorChainBase[O, D]:
        """Merge the fields present on ``value`` onto the snapshot at ``index``.

        Raises
        ------
        ChainIndexError
            If no snapshot exists at ``index``.
        """
        if not self.has(index):
            raise ChainIndexError(index, self.size, "update")
        self._snapshots[index] = merge_descriptor(self._snapshots[index], value)
        return self

    def set_current_index(self, index: int) -> DescriptorChainBase[O, D]:
        self._current_index = index
        return self

    def load(self) -> DescriptorChainBase[O, D]:
        """Read the live descriptor of ``(object, key)`` and append it.

        With a custom snapshot factory a Pydantic result from the source is
        rebuilt through the factory, so the chain holds a single snapshot type.

        Raises
        ------
        DescriptorNotFoundError
            If the source reports no descriptor; the chain is left unchanged.
        """
        descriptor = self._source(self._object, self._key)
        if descriptor is None:
            raise DescriptorNotFoundError(self._key)
        if self._factory is not WrappedDescriptor and isinstance(descriptor, BaseModel):
            # custom factories rebuild the snapshot from its set fields
            descriptor = self._factory(**descriptor.model_dump(exclude_unset=True))
        self.add(descriptor)
        log.debug("descriptor loaded key=%s size=%d", self._key, self.size)
        return self

    # ------------------------------ Read ------------------------------------

    def get(self, index: int) -> D | None:
        return self._snapshots[index] if self.has(index) else None

    def has(self, index: int) -> bool:
        return 0 <= index < len(self._snapshots)

    def first(self) -> D | None:
        return self.get(0)

    def last(self) -> D | None:
        return self.get(self.last_index)

    def entries(self) -> Iterator[tuple[int, D]]:
        return enumerate(self._snapshots)

    def values(self) -> Iterator[D]:
        return iter(self._snapshots)


__all__ = ["DescriptorChainBase"]
