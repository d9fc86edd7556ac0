"""MinimalDescriptorChain — ordered storage with a cursor and no flag semantics.

Used where only insertion and the read/navigation half of the contract
matter. ``active`` and ``enabled`` are the constant ``False``; the flag
mutators are accepted and ignored so fluent call sites keep working.

``add`` appends as given: no coercion from mappings, no validation, no size
cap. The remaining storage operations share the index policy of
:class:`~descriptor_chain.chain.base.DescriptorChainBase`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from descriptor_chain.core.contracts.descriptor import WrappedDescriptor, merge_descriptor
from descriptor_chain.core.errors import ChainIndexError, DescriptorNotFoundError
from descriptor_chain.core.source import DescriptorSource, from_property

from .core import D, DescriptorChainCore, O


class MinimalDescriptorChain(DescriptorChainCore[O, D]):
    """Contract implementation with private storage and fixed False flags."""

    __slots__ = ("_object", "_key", "_items", "_cursor", "_source")

    def __init__(self, object: O, key: Any, source: DescriptorSource | None = None) -> None:
        self._object = object
        self._key = key
        self._items: list[D] = []
        self._cursor = 0
        self._source: DescriptorSource = source if source is not None else from_property

    @property
    def active(self) -> bool:
        return False

    @property
    def enabled(self) -> bool:
        return False

    @property
    def key(self) -> Any:
        return self._key

    @property
    def object(self) -> O:
        return self._object

    @property
    def _data(self) -> list[D]:
        return self._items

    @property
    def _descriptor(self) -> Callable[..., D]:
        return WrappedDescriptor  # type: ignore[return-value]

    @property
    def current(self) -> D | None:
        return self.get(self._cursor)

    @property
    def current_index(self) -> int:
        return self._cursor

    @property
    def last_index(self) -> int:
        return len(self._items) - 1

    @property
    def next(self) -> D | None:
        return self.get(self.next_index)

    @property
    def next_index(self) -> int:
        return self._cursor + 1

    @property
    def previous(self) -> D | None:
        return self.get(self.previous_index)

    @property
    def previous_index(self) -> int:
        return self._cursor - 1

    @property
    def size(self) -> int:
        return len(self._items)

    # Flags are fixed; mutators only keep the fluent contract.
    def activate(self) -> MinimalDescriptorChain[O, D]:
        return self

    def deactivate(self) -> MinimalDescriptorChain[O, D]:
        return self

    def enable(self) -> MinimalDescriptorChain[O, D]:
        return self

    def disable(self) -> MinimalDescriptorChain[O, D]:
        return self

    def add(self, descriptor: D) -> MinimalDescriptorChain[O, D]:
        self._items.append(descriptor)
        return self

    def clear(self) -> MinimalDescriptorChain[O, D]:
        self._items.clear()
        self._cursor = 0
        return self

    def delete(self, index: int) -> MinimalDescriptorChain[O, D]:
        if self.has(index):
            del self._items[index]
        return self

    def set(self, index: int, value: D) -> MinimalDescriptorChain[O, D]:
        if self.has(index):
            self._items[index] = value
        elif index == len(self._items):
            self._items.append(value)
        else:
            raise ChainIndexError(index, len(self._items), "set")
        return self

    def update(self, index: int, value: Any) -> MinimalDescriptorChain[O, D]:
        if not self.has(index):
            raise ChainIndexError(index, len(self._items), "update")
        self._items[index] = merge_descriptor(self._items[index], value)
        return self

    def set_current_index(self, index: int) -> MinimalDescriptorChain[O, D]:
        self._cursor = index
        return self

    def load(self) -> MinimalDescriptorChain[O, D]:
        descriptor = self._source(self._object, self._key)
        if descriptor is None:
            raise DescriptorNotFoundError(self._key)
        return self.add(descriptor)  # type: ignore[arg-type]

    def get(self, index: int) -> D | None:
        return self._items[index] if self.has(index) else None

    def has(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    def first(self) -> D | None:
        return self.get(0)

    def last(self) -> D | None:
        return self.get(self.last_index)

    def entries(self) -> Iterator[tuple[int, D]]:
        return enumerate(self._items)

    def values(self) -> Iterator[D]:
        return iter(self._items)


__all__ = ["MinimalDescriptorChain"]
