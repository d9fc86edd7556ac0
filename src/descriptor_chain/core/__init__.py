"""Core building blocks shared by every chain.

Import from the submodules directly:
    from descriptor_chain.core.settings import settings, load_settings, get_logger
    from descriptor_chain.core.errors import DescriptorNotFoundError
"""

from __future__ import annotations

__all__ = ["__doc__"]
