"""DescriptorChain — the public default chain."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .base import DescriptorChainBase
from .core import D, O


class DescriptorChain(DescriptorChainBase[O, D]):
    """Stateful chain whose ``add`` accepts a snapshot or its plain fields.

    Example
    -------
    >>> chain = DescriptorChain({"a": 1}, "a")
    >>> chain.load().add({"value": 2, "writable": False}).size
    2
    """

    __slots__ = ()

    def add(self, descriptor: D | Mapping[str, Any]) -> DescriptorChain[O, D]:
        """Append ``descriptor``; a mapping is first built into a snapshot.

        Mappings go through the chain's snapshot factory, so with the default
        factory they are validated as :class:`WrappedDescriptor` fields.
        """
        if isinstance(descriptor, Mapping):
            descriptor = self._descriptor(**descriptor)
        self._data.append(descriptor)
        return self


__all__ = ["DescriptorChain"]
