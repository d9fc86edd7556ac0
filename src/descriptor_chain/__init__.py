"""descriptor-chain: linear, cursor-addressable history of property descriptors.

A chain is bound to one ``(object, key)`` pair and records snapshots of that
property's value and access attributes. Typical use::

    from descriptor_chain import DescriptorChain

    chain = DescriptorChain(config, "timeout").load()
    chain.add({"value": 30, "writable": False}).set_current_index(1)
    chain.current.value  # -> 30
"""

from __future__ import annotations

from .chain import (
    DescriptorChain,
    DescriptorChainBase,
    DescriptorChainCore,
    MinimalDescriptorChain,
)
from .core.contracts.descriptor import WrappedDescriptor, merge_descriptor
from .core.errors import ChainIndexError, DescriptorChainError, DescriptorNotFoundError
from .core.source import DescriptorSource, from_property

__all__ = [
    "__version__",
    "DescriptorChain",
    "DescriptorChainBase",
    "DescriptorChainCore",
    "MinimalDescriptorChain",
    "WrappedDescriptor",
    "merge_descriptor",
    "DescriptorSource",
    "from_property",
    "DescriptorChainError",
    "DescriptorNotFoundError",
    "ChainIndexError",
]
__version__ = "0.1.0"
