"""
Extension points, the hook registry and per-request screen collections.
"""

from euclid_mam.kernel.hooks.registry import (
    DEFAULT_PRIORITY,
    ExtensionPoint,
    HookRegistration,
    HookRegistry,
)
from euclid_mam.kernel.hooks.screen import MetaBox, MetaBoxRegistry, StyleQueue, Stylesheet

__all__ = [
    "DEFAULT_PRIORITY",
    "ExtensionPoint",
    "HookRegistration",
    "HookRegistry",
    "MetaBox",
    "MetaBoxRegistry",
    "StyleQueue",
    "Stylesheet",
]
