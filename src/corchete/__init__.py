"""
Corchete: bracketed shortcodes for Python text

Scans text for WordPress-style shortcodes and replaces each one with the
output of a registered handler. Zero runtime dependencies.

Quick Start:
    >>> from corchete import Shortcodes
    >>> engine = Shortcodes()
    >>> engine.add("hello", lambda attrs, content, tag: f"Hello {attrs['name']}!")
    >>> engine.do('[hello name="World"]')
    'Hello World!'

Markup:
    [tag]                     self-closing, handler gets content=None
    [tag a="1" b=2 bare /]    self-closing with attributes
    [tag a="1"]body[/tag]     enclosing, handler gets content="body"
    [[tag]]                   escaped, renders as the literal [tag]

Attribute Defaults:
    >>> def button(attrs, content, tag):
    ...     opts = merge_attrs({"color": "blue", "size": "m"}, attrs)
    ...     return f'<button class="{opts["color"]} {opts["size"]}">{content}</button>'
    >>> engine.add("button", button)
    >>> engine.do("[button color=red]Go[/button]")
    '<button class="red m">Go</button>'
"""

from corchete.attributes import Attributes, merge_attrs, parse_attrs, unescape
from corchete.config import (
    ShortcodeConfig,
    get_shortcode_config,
    reset_shortcode_config,
    set_shortcode_config,
    shortcode_config_context,
)
from corchete.engine import Shortcodes
from corchete.errors import CorcheteError, RegistryConsistencyError
from corchete.pattern import build_pattern
from corchete.profiling import RenderAccumulator, get_render_accumulator, profiled_render
from corchete.protocol import ShortcodeHandler
from corchete.registry import RegistrySnapshot, ShortcodeRegistry
from corchete.scanner import ShortcodeMatch, scan

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Engine
    "Shortcodes",
    "ShortcodeHandler",
    # Registry
    "ShortcodeRegistry",
    "RegistrySnapshot",
    # Attributes
    "Attributes",
    "parse_attrs",
    "merge_attrs",
    "unescape",
    # Scanning
    "build_pattern",
    "scan",
    "ShortcodeMatch",
    # Errors
    "CorcheteError",
    "RegistryConsistencyError",
    # Profiling
    "RenderAccumulator",
    "get_render_accumulator",
    "profiled_render",
    # Configuration (ContextVar-based)
    "ShortcodeConfig",
    "get_shortcode_config",
    "set_shortcode_config",
    "reset_shortcode_config",
    "shortcode_config_context",
]
