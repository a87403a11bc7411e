"""
Per-request collections that plugins fill from their hook handlers:
editor panels (meta boxes) for the admin edit screen and stylesheets for
public pages.
"""

from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, List, Optional

from markupsafe import Markup

from euclid_mam.logging_config import get_logger

logger = get_logger(__name__)

PanelRenderer = Callable[..., Awaitable[str]]


@dataclass
class MetaBox:
    """An editor panel shown on the edit screen of one post type."""

    id: str
    title: str
    render: PanelRenderer
    screen: str
    context: str = "advanced"  # normal, side or advanced
    priority: str = "default"


class MetaBoxRegistry:
    """Panels registered during one admin request."""

    CONTEXTS = ("normal", "side", "advanced")

    def __init__(self) -> None:
        self._boxes: Dict[str, MetaBox] = {}

    def add(self, box: MetaBox) -> None:
        """Register a panel; re-registering an id on the same screen replaces it."""
        if box.context not in self.CONTEXTS:
            raise ValueError(f"Unknown meta box context: {box.context}")
        self._boxes[f"{box.screen}:{box.id}"] = box
        logger.debug("Meta box registered", extra={"box_id": box.id, "screen": box.screen})

    def remove(self, box_id: str, screen: str) -> bool:
        return self._boxes.pop(f"{screen}:{box_id}", None) is not None

    def for_screen(self, screen: str, context: Optional[str] = None) -> List[MetaBox]:
        """Panels for a post type, ordered by context then registration."""
        boxes = [b for b in self._boxes.values() if b.screen == screen]
        if context is not None:
            boxes = [b for b in boxes if b.context == context]
        return sorted(boxes, key=lambda b: self.CONTEXTS.index(b.context))

    def __contains__(self, box_id: str) -> bool:
        return any(b.id == box_id for b in self._boxes.values())

    def __len__(self) -> int:
        return len(self._boxes)


@dataclass
class Stylesheet:
    handle: str
    src: str
    media: str = "all"


@dataclass
class StyleQueue:
    """Stylesheets enqueued for one public page view."""

    _styles: Dict[str, Stylesheet] = field(default_factory=dict)

    def enqueue(self, handle: str, src: str, media: str = "all") -> None:
        """Enqueue a stylesheet; the first registration of a handle wins."""
        self._styles.setdefault(handle, Stylesheet(handle, src, media))

    def is_enqueued(self, handle: str) -> bool:
        return handle in self._styles

    @property
    def styles(self) -> List[Stylesheet]:
        return list(self._styles.values())

    def render(self) -> Markup:
        """<link> tags for every enqueued stylesheet."""
        tags = [
            Markup('<link rel="stylesheet" id="{}-css" href="{}" media="{}">').format(
                s.handle, s.src, s.media
            )
            for s in self._styles.values()
        ]
        return Markup("\n").join(tags)

