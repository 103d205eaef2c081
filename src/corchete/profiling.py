"""Corchete RenderAccumulator: opt-in profiling for shortcode rendering.

This module provides accumulated metrics while rendering:
- Total elapsed time
- Content length processed
- Matches found, handler calls, escaped tags

Zero overhead when disabled (get_render_accumulator() returns None).

Example:
    from corchete import Shortcodes
    from corchete.profiling import profiled_render

    engine = Shortcodes()
    engine.add("year", lambda attrs, content, tag: "2024")

    with profiled_render() as metrics:
        engine.do("(c) [year]")

    print(metrics.summary())
    # {"total_ms": 0.1, "content_length": 10, "matches": 1, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class RenderAccumulator:
    """Accumulated metrics during shortcode rendering.

    Attributes:
        start_time: Profiling start timestamp.
        content_length: Total length of content passed to do()/strip().
        render_calls: Number of do() calls recorded.
        strip_calls: Number of strip() calls recorded.
        matches: Shortcode matches found by either call.
        handler_calls: Handlers invoked by do().
        escaped: ``[[tag]]`` matches rendered literally.

    """

    start_time: float = field(default_factory=perf_counter)
    content_length: int = 0
    render_calls: int = 0
    strip_calls: int = 0
    matches: int = 0
    handler_calls: int = 0
    escaped: int = 0

    def record_render(self, content_length: int) -> None:
        """Record a do() call."""
        self.render_calls += 1
        self.content_length += content_length

    def record_strip(self, content_length: int) -> None:
        """Record a strip() call."""
        self.strip_calls += 1
        self.content_length += content_length

    def record_match(self, *, escaped: bool = False, handled: bool = False) -> None:
        """Record one match and what was done with it."""
        self.matches += 1
        if escaped:
            self.escaped += 1
        if handled:
            self.handler_calls += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of render metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "content_length": self.content_length,
            "render_calls": self.render_calls,
            "strip_calls": self.strip_calls,
            "matches": self.matches,
            "handler_calls": self.handler_calls,
            "escaped": self.escaped,
        }


_accumulator: ContextVar[RenderAccumulator | None] = ContextVar(
    "render_accumulator",
    default=None,
)


def get_render_accumulator() -> RenderAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_render() -> Iterator[RenderAccumulator]:
    """Context manager for profiled rendering.

    Creates a RenderAccumulator and makes it available via
    get_render_accumulator() for the duration of the with block.

    Yields:
        RenderAccumulator that will be populated during do()/strip() calls.

    """
    acc = RenderAccumulator()
    token: Token[RenderAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = [
    "RenderAccumulator",
    "get_render_accumulator",
    "profiled_render",
]
