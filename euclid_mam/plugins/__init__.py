"""
Plugin Layer - features built on the host's extension points.

Plugins never touch the database directly; they go through the
HostPlatform passed in each RequestContext.
"""

from euclid_mam.plugins.base import Plugin
from euclid_mam.plugins.manager import PluginManager

__all__ = [
    "Plugin",
    "PluginManager",
]
