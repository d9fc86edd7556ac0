"""Chain implementations.

- :class:`DescriptorChainCore`   — abstract contract.
- :class:`DescriptorChainBase`   — stateful implementation (storage, cursor, flags, load).
- :class:`DescriptorChain`       — public default, adds ``add``.
- :class:`MinimalDescriptorChain` — storage + cursor only, flags fixed to False.
"""

from __future__ import annotations

from .base import DescriptorChainBase
from .chain import DescriptorChain
from .core import DescriptorChainCore
from .minimal import MinimalDescriptorChain

__all__ = [
    "DescriptorChainCore",
    "DescriptorChainBase",
    "DescriptorChain",
    "MinimalDescriptorChain",
]
