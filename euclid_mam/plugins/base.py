"""
Base Plugin - Abstract interface for all plugins.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from euclid_mam.kernel.hooks import HookRegistry


class Plugin(ABC):
    """
    Abstract base class for host plugins.

    A plugin attaches its handlers to a HookRegistry once at startup. The
    host keeps separate registries for admin and public requests, so
    `register` is told which one it is filling.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable plugin name."""
        pass

    @property
    @abstractmethod
    def slug(self) -> str:
        """URL-safe identifier; static assets are served under /plugins/<slug>/."""
        pass

    @property
    def version(self) -> str:
        return "0.0.0"

    @property
    def assets_dir(self) -> Optional[Path]:
        """Directory of static files shipped with the plugin, if any."""
        return None

    def asset_url(self, relative_path: str) -> str:
        """Public URL of a file inside assets_dir."""
        return f"/plugins/{self.slug}/{relative_path.lstrip('/')}"

    @abstractmethod
    def register(self, hooks: HookRegistry, *, is_admin: bool) -> None:
        """Attach handlers to the registry used for admin or public requests."""
        pass

    def __repr__(self) -> str:
        return f"<Plugin {self.slug} {self.version}>"
