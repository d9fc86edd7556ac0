"""WrappedDescriptor — one snapshot of a property's value and access attributes.

The chain treats snapshots as opaque records; this module ships the default
concrete shape plus the shallow-merge rule used by ``update``.

Shape
-----
A snapshot is either a *data* descriptor (``value`` + ``writable``) or an
*accessor* descriptor (``get`` / ``set`` callables). ``configurable`` and
``enumerable`` apply to both. ``active`` / ``enabled`` travel with each
snapshot so a consumer can gate individual entries, independently of the
chain-level flags.

Merging
-------
``merge_descriptor(stored, patch)`` overwrites only the fields *present* on
``patch``: the explicitly set fields of a Pydantic model
(``model_fields_set``) or the keys of a mapping. Everything else is kept from
``stored``. The result is a new object; ``stored`` is never mutated.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class WrappedDescriptor(BaseModel):
    """Immutable snapshot of one property at one point in time."""

    model_config = ConfigDict(frozen=True)

    key: str | None = Field(default=None, description="Property name the snapshot was taken for")
    value: Any = Field(default=None, description="Property value (data descriptors)")
    get: Callable[..., Any] | None = Field(default=None, description="Getter (accessor descriptors)")
    set: Callable[..., Any] | None = Field(default=None, description="Setter (accessor descriptors)")
    writable: bool | None = None
    configurable: bool | None = None
    enumerable: bool | None = None
    active: bool = True
    enabled: bool = True

    @model_validator(mode="after")
    def _data_or_accessor(self) -> WrappedDescriptor:
        """Reject snapshots that mix accessor callables with data fields."""
        has_accessor = self.get is not None or self.set is not None
        has_data = "value" in self.model_fields_set or "writable" in self.model_fields_set
        if has_accessor and has_data:
            raise ValueError("descriptor cannot specify both accessors (get/set) and value/writable")
        return self

    @property
    def is_accessor(self) -> bool:
        """Return True if this snapshot describes a getter/setter pair."""
        return self.get is not None or self.set is not None

    @property
    def is_data(self) -> bool:
        """Return True if this snapshot describes a plain value."""
        return not self.is_accessor


def _present_fields(patch: Any) -> dict[str, Any]:
    """Return the fields ``patch`` explicitly carries."""
    if isinstance(patch, BaseModel):
        return {name: getattr(patch, name) for name in patch.model_fields_set}
    if isinstance(patch, Mapping):
        return dict(patch)
    raise TypeError(f"cannot merge from {type(patch).__name__}; expected a model or mapping")


def merge_descriptor(stored: Any, patch: Any) -> Any:
    """Shallow-merge ``patch`` onto ``stored`` and return the merged snapshot.

    Parameters
    ----------
    stored : BaseModel | Mapping
        The snapshot currently held by the chain.
    patch : BaseModel | Mapping
        Partial snapshot; only its present fields are applied.

    Returns
    -------
    BaseModel | dict
        A new snapshot of the same kind as ``stored`` (mappings become dicts).

    Raises
    ------
    TypeError
        If either side is neither a Pydantic model nor a mapping.
    ValueError
        If ``patch`` names a field the stored model does not declare.
    pydantic.ValidationError
        If the merged fields fail the model's validation (field types, the
        data/accessor rule).
    """
    fields = _present_fields(patch)
    if isinstance(stored, BaseModel):
        unknown = sorted(name for name in fields if name not in type(stored).model_fields)
        if unknown:
            raise ValueError(f"unknown descriptor field(s): {', '.join(unknown)}")
        kept = {name: getattr(stored, name) for name in stored.model_fields_set}
        return type(stored).model_validate({**kept, **fields})
    if isinstance(stored, Mapping):
        return {**stored, **fields}
    raise TypeError(f"cannot merge into {type(stored).__name__}; expected a model or mapping")


__all__ = ["WrappedDescriptor", "merge_descriptor"]
