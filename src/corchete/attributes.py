"""Attribute parsing for shortcode tags.

Turns the raw attribute text of a tag into a single dict holding both
named and positional values:

    >>> parse_attrs('a="1" b=2 c bare')
    {'a': '1', 'b': '2', 0: 'c', 1: 'bare'}

Named keys are lowercased strings; positional values are keyed by
integers starting at 0, in the order they appear.

Token grammar (first alternative wins at each position, every token must
be followed by whitespace or end of text):

    name="value"    double-quoted, value may not contain "
    name='value'    single-quoted, value may not contain '
    name=value      unquoted, no whitespace or quotes
    "value"         positional, quoted
    value           positional, bare

Thread Safety:
    All functions are pure. Configuration is read from the current
    context via get_shortcode_config().

"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from corchete.config import get_shortcode_config

Attributes = dict[str | int, str]
"""Parsed attribute set: lowercase names and integer positions to values."""

_ATTR_RE = re.compile(
    r'(\w+)\s*=\s*"([^"]*)"(?:\s|$)'
    r"|(\w+)\s*=\s*'([^']*)'(?:\s|$)"
    r"|(\w+)\s*=\s*([^\s'\"]+)(?:\s|$)"
    r'|"([^"]*)"(?:\s|$)'
    r"|(\S+)(?:\s|$)"
)

# No-break space and zero-width space count as ordinary separators
_SPECIAL_SPACE_RE = re.compile("[\u00a0\u200b]+")

_BACKSLASH_RE = re.compile(r"\\(x[0-9A-Fa-f]{1,2}|[0-7]{1,3}|.)", re.DOTALL)

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "a": "\a",
    "v": "\v",
    "b": "\b",
    "f": "\f",
}


def _decode_escape(match: re.Match[str]) -> str:
    seq = match.group(1)
    if len(seq) > 1 and seq[0] == "x":
        return chr(int(seq[1:], 16))
    if seq[0] in "01234567":
        # Octal values wrap to a single byte
        return chr(int(seq, 8) & 0xFF)
    return _SIMPLE_ESCAPES.get(seq, seq)


def unescape(value: str) -> str:
    r"""Resolve C-style backslash escapes in an attribute value.

    Recognizes ``\n \t \r \a \v \b \f``, octal ``\NNN`` and hex ``\xHH``.
    Any other escaped character stands for itself (``\"`` -> ``"``,
    ``\\`` -> ``\``). A lone trailing backslash is kept.

    Example:
        >>> unescape(r"line\none")
        'line\none'
        >>> unescape(r"\x41\102")
        'AB'
    """
    if "\\" not in value:
        return value
    return _BACKSLASH_RE.sub(_decode_escape, value)


def parse_attrs(text: str) -> Attributes | str:
    """Parse raw attribute text into an attribute set.

    Args:
        text: Everything between the tag name and the closing bracket
            (excluding a self-closing slash)

    Returns:
        Attribute dict, or the left-trimmed text when no token matches.

    Duplicate named keys keep the last value. An empty quoted positional
    (``""``) is dropped.
    """
    decode = unescape if get_shortcode_config().unescape_values else _identity
    text = _SPECIAL_SPACE_RE.sub(" ", text)

    attrs: Attributes = {}
    position = 0
    matched = False
    for m in _ATTR_RE.finditer(text):
        matched = True
        if m.group(1):
            attrs[m.group(1).lower()] = decode(m.group(2))
        elif m.group(3):
            attrs[m.group(3).lower()] = decode(m.group(4))
        elif m.group(5):
            attrs[m.group(5).lower()] = decode(m.group(6))
        elif m.group(7):
            attrs[position] = decode(m.group(7))
            position += 1
        elif m.group(8) is not None:
            attrs[position] = decode(m.group(8))
            position += 1

    if not matched:
        # Legacy fallback kept for compatibility: callers receive the raw
        # text as an opaque value. Only blank text gets here, so this is "".
        return text.lstrip()
    return attrs


def merge_attrs(
    defaults: Mapping[Any, Any],
    supplied: Mapping[Any, Any] | str | None,
) -> dict[Any, Any]:
    """Combine supplied attributes with known attributes and their defaults.

    The result holds exactly the keys of ``defaults``. Keys the caller
    supplied but ``defaults`` does not list are dropped.

    Args:
        defaults: Every supported attribute and its default value
        supplied: Attributes parsed from the tag

    Returns:
        New dict of supported attributes

    Example:
        >>> merge_attrs({"foo": "default", "baz": 1}, {"foo": "x", "extra": "y"})
        {'foo': 'x', 'baz': 1}
    """
    if supplied is None:
        supplied = {}
    elif isinstance(supplied, str):
        # Fallback attribute text behaves like a single positional value
        supplied = {0: supplied}

    return {
        name: supplied[name] if name in supplied else default
        for name, default in defaults.items()
    }


def _identity(value: str) -> str:
    return value


__all__ = [
    "Attributes",
    "merge_attrs",
    "parse_attrs",
    "unescape",
]
