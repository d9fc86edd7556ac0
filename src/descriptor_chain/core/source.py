"""Default descriptor source: read a live snapshot from an object/key pair.

A descriptor source is any callable ``(obj, key) -> WrappedDescriptor | None``.
Chains call it once per ``load()``; returning ``None`` means "no such property".
The source itself never raises for a missing key.

Lookup order
------------
1. Mappings: ``key in obj`` decides presence; mutability follows
   ``MutableMapping``.
2. Instance attributes found in ``vars(obj)``.
3. Class-level attributes found statically (``inspect.getattr_static``), so
   no getter runs while reading. ``property``, ``functools.cached_property``
   and custom ``__get__`` descriptors become accessor descriptors; anything
   else a non-configurable data descriptor.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
from collections.abc import Callable, Mapping, MutableMapping
from typing import Any

from .contracts.descriptor import WrappedDescriptor

DescriptorSource = Callable[[Any, Any], WrappedDescriptor | None]

_MISSING = object()


def _is_frozen_dataclass(obj: Any) -> bool:
    return dataclasses.is_dataclass(obj) and bool(obj.__dataclass_params__.frozen)


def _instance_dict(obj: Any) -> dict[str, Any]:
    try:
        return vars(obj)
    except TypeError:
        # slotted or builtin objects have no __dict__
        return {}


def _is_custom_descriptor(attr: Any) -> bool:
    # functions, builtin methods and class/static methods bind without user code
    if inspect.isroutine(attr) or isinstance(attr, classmethod | staticmethod):
        return False
    return hasattr(type(attr), "__get__")


def from_property(obj: Any, key: Any) -> WrappedDescriptor | None:
    """Return a snapshot of ``obj[key]`` / ``obj.key``, or ``None`` if absent.

    Parameters
    ----------
    obj : Any
        Target object; mappings are looked up by item, everything else by
        attribute.
    key : Any
        Property name (or mapping key).

    Returns
    -------
    WrappedDescriptor | None
        Data descriptor for plain values, accessor descriptor for properties.
    """
    name = str(key)

    if isinstance(obj, Mapping):
        if key not in obj:
            return None
        mutable = isinstance(obj, MutableMapping)
        return WrappedDescriptor(
            key=name,
            value=obj[key],
            writable=mutable,
            configurable=mutable,
            enumerable=True,
        )

    if not isinstance(key, str):
        return None

    frozen = _is_frozen_dataclass(obj)
    own = _instance_dict(obj)
    if key in own:
        return WrappedDescriptor(
            key=name,
            value=own[key],
            writable=not frozen,
            configurable=not frozen,
            enumerable=not key.startswith("_"),
        )

    attr = inspect.getattr_static(obj, key, _MISSING)
    if attr is _MISSING:
        return None
    if isinstance(attr, property):
        return WrappedDescriptor(
            key=name,
            get=attr.fget,
            set=attr.fset,
            configurable=attr.fdel is not None,
            enumerable=False,
        )
    if isinstance(attr, functools.cached_property):
        return WrappedDescriptor(
            key=name,
            get=attr.func,
            configurable=False,
            enumerable=False,
        )
    # slotted instances keep their values behind member descriptors
    if inspect.ismemberdescriptor(attr):
        value = getattr(obj, key, _MISSING)
        if value is _MISSING:
            return None
        return WrappedDescriptor(
            key=name,
            value=value,
            writable=not frozen,
            configurable=not frozen,
            enumerable=not key.startswith("_"),
        )
    if _is_custom_descriptor(attr):
        return WrappedDescriptor(
            key=name,
            get=attr.__get__,
            set=getattr(attr, "__set__", None),
            configurable=hasattr(attr, "__delete__"),
            enumerable=False,
        )
    return WrappedDescriptor(
        key=name,
        value=getattr(obj, key),
        writable=not frozen,
        configurable=False,
        enumerable=False,
    )


__all__ = ["DescriptorSource", "from_property"]
