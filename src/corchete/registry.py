"""Shortcode registry for handler lookup and registration.

The registry maps tag names to their handlers. Each Shortcodes engine owns
its own registry, so independent engines never share tags.

Thread Safety:
ShortcodeRegistry guards mutation with a lock. Rendering works from a
RegistrySnapshot, which is immutable, so tags added or removed while a
render is running take effect on the next call.

Example:
    >>> registry = ShortcodeRegistry()
    >>> registry.add("year", lambda attrs, content, tag: "2024")
    >>> snapshot = registry.snapshot()
    >>> snapshot.names
    ('year',)

"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

from corchete.utils.logger import get_logger

if TYPE_CHECKING:
    from corchete.protocol import ShortcodeHandler

logger = get_logger(__name__)


class RegistrySnapshot:
    """Immutable view of the registry at one point in time.

    Use ShortcodeRegistry.snapshot() to create instances.
    """

    __slots__ = ("_by_name",)

    def __init__(self, by_name: dict[str, ShortcodeHandler]) -> None:
        self._by_name = by_name

    def get(self, name: str) -> ShortcodeHandler | None:
        """Get handler for tag name, or None if not registered."""
        return self._by_name.get(name)

    def has(self, name: str) -> bool:
        """Check if tag name is registered."""
        return name in self._by_name

    @property
    def names(self) -> tuple[str, ...]:
        """Registered tag names in registration order."""
        return tuple(self._by_name)

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __len__(self) -> int:
        return len(self._by_name)


class ShortcodeRegistry:
    """Mutable mapping of tag name to handler.

    There is one handler per tag. Adding a tag that already exists
    replaces its handler.
    """

    __slots__ = ("_by_name", "_lock")

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._by_name: dict[str, ShortcodeHandler] = {}
        self._lock = threading.Lock()

    def add(self, tag: str, handler: Any) -> None:
        """Register a handler for a tag.

        Args:
            tag: Tag name, without brackets
            handler: Callable implementing ShortcodeHandler
        """
        # Legacy quirk: non-callable handlers are ignored rather than
        # rejected. Callers rely on add() never raising.
        if not callable(handler):
            logger.debug("Ignoring non-callable handler for shortcode %r", tag)
            return
        with self._lock:
            self._by_name[tag] = handler
        logger.debug("Registered shortcode %r", tag)

    def remove(self, tag: str) -> None:
        """Remove a tag. Removing an unknown tag does nothing."""
        with self._lock:
            self._by_name.pop(tag, None)

    def remove_all(self) -> None:
        """Remove every tag."""
        with self._lock:
            self._by_name = {}

    def get(self, tag: str) -> ShortcodeHandler | None:
        """Get handler for tag name, or None if not registered."""
        return self._by_name.get(tag)

    def has(self, tag: str) -> bool:
        """Check if tag name is registered."""
        return tag in self._by_name

    @property
    def names(self) -> tuple[str, ...]:
        """Registered tag names in registration order."""
        with self._lock:
            return tuple(self._by_name)

    def snapshot(self) -> RegistrySnapshot:
        """Copy the current mapping into an immutable snapshot."""
        with self._lock:
            return RegistrySnapshot(dict(self._by_name))

    def __contains__(self, tag: str) -> bool:
        return self.has(tag)

    def __len__(self) -> int:
        return len(self._by_name)


__all__ = ["RegistrySnapshot", "ShortcodeRegistry"]
