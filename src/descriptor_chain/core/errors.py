"""Exception hierarchy for descriptor chains.

Every error raised by the package derives from :class:`DescriptorChainError`.
The concrete types also subclass the matching builtin (``LookupError``,
``IndexError``) so callers can catch them either way.
"""

from __future__ import annotations


class DescriptorChainError(Exception):
    """Base exception for all descriptor chain failures."""


class DescriptorNotFoundError(DescriptorChainError, LookupError):
    """Raised by ``load()`` when the descriptor source reports nothing for a key."""

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(f"Descriptor not found for key: {key!s}")


class ChainIndexError(DescriptorChainError, IndexError):
    """Raised when ``set``/``update`` target an index the chain cannot address."""

    def __init__(self, index: int, size: int, operation: str) -> None:
        self.index = index
        self.size = size
        self.operation = operation
        super().__init__(f"{operation}: index {index} out of range for chain of size {size}")


__all__ = ["DescriptorChainError", "DescriptorNotFoundError", "ChainIndexError"]
