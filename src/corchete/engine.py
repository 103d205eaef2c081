"""Shortcode engine: dispatch tags to handlers or strip them.

Usage:
    >>> engine = Shortcodes()
    >>> engine.add("b", lambda attrs, content, tag: f"<b>{content}</b>")
    >>> engine.do("Hello [b]World[/b]!")
    'Hello <b>World</b>!'

    >>> @engine.shortcode("year")
    ... def year(attrs, content, tag):
    ...     return "2024"
    >>> engine.do("(c) [year] / [[year]]")
    '(c) 2024 / [year]'

Nested shortcodes are not expanded. A handler that wants them calls
``engine.do(content)`` on its own content.

Thread Safety:
    Each call renders from a registry snapshot and sets config via a
    ContextVar (restored on exit). Safe to share one engine across threads
    as long as handlers are.

"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any

from corchete.attributes import merge_attrs, parse_attrs
from corchete.config import ShortcodeConfig, get_shortcode_config, shortcode_config_context
from corchete.errors import RegistryConsistencyError
from corchete.pattern import build_pattern
from corchete.profiling import get_render_accumulator
from corchete.registry import RegistrySnapshot, ShortcodeRegistry
from corchete.scanner import ShortcodeMatch, scan


class Shortcodes:
    """Shortcode processor owning a registry of tag handlers.

    Each instance is independent; there is no process-wide registry.
    """

    __slots__ = ("_config", "_registry")

    def __init__(
        self,
        *,
        config: ShortcodeConfig | None = None,
        registry: ShortcodeRegistry | None = None,
    ) -> None:
        """Initialize engine.

        Args:
            config: Behavior switches (defaults to ShortcodeConfig())
            registry: Registry to render from (a new empty one if None)
        """
        self._config = config or ShortcodeConfig()
        self._registry = registry if registry is not None else ShortcodeRegistry()

    @property
    def registry(self) -> ShortcodeRegistry:
        """The tag to handler mapping this engine renders from."""
        return self._registry

    @property
    def config(self) -> ShortcodeConfig:
        return self._config

    # Registry operations

    def add(self, tag: str, handler: Any) -> None:
        """Register ``handler`` for ``tag``; non-callables are ignored."""
        self._registry.add(tag, handler)

    def remove(self, tag: str) -> None:
        """Remove ``tag``; unknown tags are ignored."""
        self._registry.remove(tag)

    def remove_all(self) -> None:
        """Remove every registered tag."""
        self._registry.remove_all()

    def shortcode(self, *tags: str) -> Callable[[Callable[..., str]], Callable[..., str]]:
        """Decorator registering a function for one or more tags.

        The decorated function is returned unchanged.

        Raises:
            ValueError: If no tag is given
        """
        if not tags:
            msg = "At least one shortcode tag must be provided"
            raise ValueError(msg)

        def decorator(func: Callable[..., str]) -> Callable[..., str]:
            for tag in tags:
                self._registry.add(tag, func)
            return func

        return decorator

    # Rendering

    def do(self, content: str) -> str:
        """Replace every registered shortcode in content with its handler output.

        Args:
            content: Text containing shortcodes

        Returns:
            New string with shortcodes rendered. Content is returned as-is
            when no tags are registered.

        Raises:
            RegistryConsistencyError: If a matched tag has no handler
            Exception: Anything raised by a handler, unchanged
        """
        snapshot = self._registry.snapshot()
        pattern = build_pattern(snapshot.names)
        if pattern is None:
            return content

        acc = get_render_accumulator()
        if acc is not None:
            acc.record_render(len(content))

        with shortcode_config_context(self._config):
            return self._replace(pattern, content, lambda m: self._dispatch(m, snapshot))

    def __call__(self, content: str) -> str:
        """Alias for do()."""
        return self.do(content)

    def strip(self, content: str) -> str:
        """Remove every registered shortcode, keeping only its context characters.

        Escaped tags are removed too. No handler is called.
        """
        snapshot = self._registry.snapshot()
        pattern = build_pattern(snapshot.names)
        if pattern is None:
            return content

        acc = get_render_accumulator()
        if acc is not None:
            acc.record_strip(len(content))

        with shortcode_config_context(self._config):
            return self._replace(pattern, content, self._strip_match)

    @staticmethod
    def attrs(
        defaults: Mapping[Any, Any],
        supplied: Mapping[Any, Any] | str | None,
    ) -> dict[Any, Any]:
        """Fill in defaults for supported attributes. See merge_attrs()."""
        return merge_attrs(defaults, supplied)

    @staticmethod
    def _replace(
        pattern: re.Pattern[str],
        content: str,
        render: Callable[[ShortcodeMatch], str],
    ) -> str:
        parts: list[str] = []
        pos = 0
        for match in scan(pattern, content):
            parts.append(content[pos : match.start])
            parts.append(render(match))
            pos = match.end
        if not parts:
            return content
        parts.append(content[pos:])
        return "".join(parts)

    def _dispatch(self, match: ShortcodeMatch, snapshot: RegistrySnapshot) -> str:
        acc = get_render_accumulator()

        if match.is_escaped and get_shortcode_config().escaping_enabled:
            if acc is not None:
                acc.record_match(escaped=True)
            return match.text[1:-1]

        handler = snapshot.get(match.tag)
        if handler is None:
            raise RegistryConsistencyError(match.tag)

        attrs = parse_attrs(match.raw_attrs)
        if acc is not None:
            acc.record_match(handled=True)

        # content is None for the self-closing form, a string when enclosing
        output = handler(attrs, match.content, match.tag)
        return match.leading + output + match.trailing

    @staticmethod
    def _strip_match(match: ShortcodeMatch) -> str:
        acc = get_render_accumulator()
        if acc is not None:
            acc.record_match(escaped=match.is_escaped)
        return match.leading + match.trailing


__all__ = ["Shortcodes"]
