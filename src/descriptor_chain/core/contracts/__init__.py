"""Snapshot contracts (Pydantic v2 models)."""

from __future__ import annotations

from .descriptor import WrappedDescriptor, merge_descriptor

__all__ = ["WrappedDescriptor", "merge_descriptor"]
