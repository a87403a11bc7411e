"""
Plugin loading: builds the admin and public hook registries at startup.
"""

from typing import Dict, Iterable, List, Optional

from euclid_mam.kernel.hooks import HookRegistry
from euclid_mam.logging_config import get_logger
from euclid_mam.plugins.base import Plugin

logger = get_logger(__name__)


class PluginManager:
    """Holds the active plugins and the registries they populated."""

    def __init__(self, plugins: Iterable[Plugin]):
        self.plugins: List[Plugin] = []
        seen: Dict[str, Plugin] = {}
        for plugin in plugins:
            if plugin.slug in seen:
                logger.warning("Duplicate plugin slug ignored", extra={"slug": plugin.slug})
                continue
            seen[plugin.slug] = plugin
            self.plugins.append(plugin)

        self.admin_hooks = self._build(is_admin=True)
        self.site_hooks = self._build(is_admin=False)

    def _build(self, *, is_admin: bool) -> HookRegistry:
        hooks = HookRegistry()
        for plugin in self.plugins:
            plugin.register(hooks, is_admin=is_admin)
        return hooks

    def hooks_for(self, *, is_admin: bool) -> HookRegistry:
        return self.admin_hooks if is_admin else self.site_hooks

    def get(self, slug: str) -> Optional[Plugin]:
        for plugin in self.plugins:
            if plugin.slug == slug:
                return plugin
        return None

    @classmethod
    def default(cls) -> "PluginManager":
        """The plugins bundled with this distribution."""
        from euclid_mam.plugins.multi_author import MultiAuthorMetabox

        manager = cls([MultiAuthorMetabox()])
        logger.info(
            "Plugins loaded",
            extra={"plugins": [p.slug for p in manager.plugins]},
        )
        return manager
