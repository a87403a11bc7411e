"""
Hook registry: named extension points mapped to priority-ordered handlers.

Actions are called for their side effects; filters receive a value, may
return a replacement, and pass it on to the next filter. Handlers can be
plain functions or coroutine functions.

Usage:
    hooks = HookRegistry()
    hooks.add_filter(ExtensionPoint.THE_CONTENT, plugin.display_contributors)
    body = await hooks.apply_filters(ExtensionPoint.THE_CONTENT, post.body, ctx, post)
"""

import inspect
import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from euclid_mam.logging_config import get_logger

logger = get_logger(__name__)

Handler = Callable[..., Union[Any, Awaitable[Any]]]

DEFAULT_PRIORITY = 10


class ExtensionPoint(str, Enum):
    """Extension points fired by the host."""
    ADMIN_INIT = "admin_init"
    SAVE_POST = "save_post"
    THE_CONTENT = "the_content"
    ENQUEUE_SCRIPTS = "wp_enqueue_scripts"


@dataclass(order=True)
class HookRegistration:
    """One handler attached to one extension point."""

    priority: int
    sequence: int
    handler: Handler = field(compare=False)

    @property
    def name(self) -> str:
        return getattr(self.handler, "__qualname__", repr(self.handler))


def _hook_name(hook: Union[ExtensionPoint, str]) -> str:
    return hook.value if isinstance(hook, ExtensionPoint) else hook


class HookRegistry:
    """
    Registry of action and filter handlers.

    Handlers with a lower priority run first; equal priorities run in
    registration order. A handler that raises is logged and skipped so the
    remaining handlers still run.
    """

    def __init__(self) -> None:
        self._hooks: Dict[str, List[HookRegistration]] = {}
        self._sequence = itertools.count()

    def add_action(
        self,
        hook: Union[ExtensionPoint, str],
        handler: Handler,
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """Attach a handler to an action."""
        registrations = self._hooks.setdefault(_hook_name(hook), [])
        registrations.append(HookRegistration(priority, next(self._sequence), handler))
        registrations.sort()

    # Filters and actions share one table
    add_filter = add_action

    def remove(self, hook: Union[ExtensionPoint, str], handler: Handler) -> bool:
        """Detach a handler. Returns False if it was not attached."""
        registrations = self._hooks.get(_hook_name(hook), [])
        for registration in registrations:
            if registration.handler == handler:
                registrations.remove(registration)
                return True
        return False

    def has(self, hook: Union[ExtensionPoint, str], handler: Optional[Handler] = None) -> bool:
        """Whether anything (or a specific handler) is attached to a hook."""
        registrations = self._hooks.get(_hook_name(hook), [])
        if handler is None:
            return bool(registrations)
        return any(r.handler == handler for r in registrations)

    def handlers(self, hook: Union[ExtensionPoint, str]) -> List[Handler]:
        """Handlers attached to a hook, in call order."""
        return [r.handler for r in self._hooks.get(_hook_name(hook), [])]

    async def do_action(self, hook: Union[ExtensionPoint, str], *args: Any) -> None:
        """Call every handler of an action with the given arguments."""
        name = _hook_name(hook)
        for registration in list(self._hooks.get(name, [])):
            try:
                result = registration.handler(*args)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception(
                    "Action handler failed",
                    extra={"hook": name, "handler": registration.name},
                )

    async def apply_filters(self, hook: Union[ExtensionPoint, str], value: Any, *args: Any) -> Any:
        """
        Pass a value through every filter of a hook.

        A failing filter leaves the value as it was before that filter ran.
        """
        name = _hook_name(hook)
        for registration in list(self._hooks.get(name, [])):
            try:
                result = registration.handler(value, *args)
                if inspect.isawaitable(result):
                    result = await result
            except Exception:
                logger.exception(
                    "Filter handler failed",
                    extra={"hook": name, "handler": registration.name},
                )
                continue
            value = result
        return value
