"""Unit tests for the default descriptor source ``from_property``."""

from __future__ import annotations

import functools
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from descriptor_chain.core.source import from_property


class _Config:
    limit = 10

    def __init__(self) -> None:
        self.name = "cfg"
        self._secret = "x"
        self._timeout = 5

    @property
    def timeout(self) -> int:
        return self._timeout

    @timeout.setter
    def timeout(self, value: int) -> None:
        self._timeout = value

    @property
    def readonly(self) -> int:
        raise AssertionError("getter must not run while reading the descriptor")


@dataclass(frozen=True)
class _Frozen:
    size: int


class _Slotted:
    __slots__ = ("value", "unset")

    def __init__(self) -> None:
        self.value = 3


class _Lookup(Mapping[str, int]):
    def __getitem__(self, key: str) -> int:
        return {"a": 1}[key]

    def __iter__(self) -> Iterator[str]:
        return iter(["a"])

    def __len__(self) -> int:
        return 1


def test_mutable_mapping_key() -> None:
    """dict entries are writable, configurable and enumerable."""
    snap = from_property({"a": 1}, "a")
    assert snap is not None
    assert (snap.key, snap.value) == ("a", 1)
    assert snap.writable is True and snap.configurable is True and snap.enumerable is True


def test_readonly_mapping_key() -> None:
    """Read-only mappings report non-writable entries."""
    for mapping in (MappingProxyType({"a": 1}), _Lookup()):
        snap = from_property(mapping, "a")
        assert snap is not None and snap.value == 1
        assert snap.writable is False and snap.configurable is False


def test_missing_key_returns_none() -> None:
    """Absence is reported as None, never as an exception."""
    assert from_property({"a": 1}, "b") is None
    assert from_property(_Config(), "missing") is None
    assert from_property(_Slotted(), "unset") is None
    assert from_property(object(), 42) is None


def test_instance_attribute() -> None:
    """Instance attributes are data descriptors; underscore names are hidden."""
    cfg = _Config()
    snap = from_property(cfg, "name")
    assert snap is not None and snap.value == "cfg"
    assert snap.writable is True and snap.enumerable is True

    hidden = from_property(cfg, "_secret")
    assert hidden is not None and hidden.enumerable is False


def test_property_becomes_accessor() -> None:
    """Properties yield get/set callables without invoking the getter."""
    cfg = _Config()
    snap = from_property(cfg, "timeout")
    assert snap is not None and snap.is_accessor
    assert snap.get is not None and snap.get(cfg) == 5
    assert snap.set is not None
    assert snap.enumerable is False and snap.configurable is False

    readonly = from_property(cfg, "readonly")
    assert readonly is not None and readonly.set is None


def test_class_attribute() -> None:
    """Class-level values are data descriptors that are not configurable."""
    snap = from_property(_Config(), "limit")
    assert snap is not None and snap.value == 10
    assert snap.configurable is False and snap.enumerable is False


def test_frozen_dataclass_is_not_writable() -> None:
    """Fields of frozen dataclasses are read-only."""
    snap = from_property(_Frozen(size=2), "size")
    assert snap is not None and snap.value == 2
    assert snap.writable is False


def test_slotted_attribute() -> None:
    """Slot values are read through their member descriptor."""
    snap = from_property(_Slotted(), "value")
    assert snap is not None and snap.value == 3 and snap.writable is True


class _Exploding:
    def __get__(self, instance: object, owner: type | None = None) -> int:
        raise RuntimeError("descriptor __get__ must not run")

    def __set__(self, instance: object, value: int) -> None:
        raise RuntimeError("descriptor __set__ must not run")


class _Lazy:
    calls: list[int] = []

    boom = _Exploding()

    @functools.cached_property
    def total(self) -> int:
        self.calls.append(1)
        return 99

    @property
    def removable(self) -> int:
        return 1

    @removable.deleter
    def removable(self) -> None:
        pass

    @classmethod
    def build(cls) -> _Lazy:
        return cls()


def test_cached_property_getter_is_not_run() -> None:
    """cached_property becomes an accessor without computing or caching a value."""
    obj = _Lazy()
    before = len(_Lazy.calls)
    snap = from_property(obj, "total")
    assert snap is not None and snap.is_accessor
    assert snap.get is not None and snap.set is None
    assert len(_Lazy.calls) == before
    assert "total" not in vars(obj)


def test_cached_property_once_computed_is_data() -> None:
    """After the first access the cached value lives on the instance."""
    obj = _Lazy()
    assert obj.total == 99
    snap = from_property(obj, "total")
    assert snap is not None and snap.is_data and snap.value == 99


def test_custom_descriptor_is_not_invoked() -> None:
    """Objects with __get__ are captured as accessors, never called."""
    snap = from_property(_Lazy(), "boom")
    assert snap is not None and snap.is_accessor
    assert snap.get is not None and snap.set is not None
    assert snap.configurable is False


def test_property_with_deleter_is_configurable() -> None:
    """A property that can be deleted reports configurable=True."""
    snap = from_property(_Lazy(), "removable")
    assert snap is not None and snap.is_accessor
    assert snap.configurable is True


def test_classmethod_stays_a_data_descriptor() -> None:
    """Routines bind without user code and are read as plain values."""
    snap = from_property(_Lazy(), "build")
    assert snap is not None and snap.is_data
    assert callable(snap.value)
