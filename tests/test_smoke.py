"""
Smoke tests for package structure and availability.

Scope
-----
These tests strictly verify that the package is installed correctly in the
environment and that the public names are importable from the top level.
"""

from __future__ import annotations

import importlib

import descriptor_chain
from descriptor_chain import __version__


def test_package_importable() -> None:
    """Ensure the top-level package can be imported."""
    mod = importlib.import_module("descriptor_chain")
    assert mod is not None


def test_version_is_set() -> None:
    """Ensure the package exposes a valid version string."""
    assert isinstance(__version__, str)
    assert len(__version__) > 0


def test_public_api_exports() -> None:
    """Every name in `__all__` resolves on the package."""
    for name in descriptor_chain.__all__:
        assert hasattr(descriptor_chain, name), name
