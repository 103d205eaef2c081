"""Shortcode matching pattern.

Combines every registered tag name into one alternation so a single pass
over the content finds all tags. The pattern has six groups:

    1  leading context character (an extra ``[`` marks an escaped tag)
    2  tag name
    3  raw attribute text
    4  self-closing ``/``
    5  enclosed content, when a matching ``[/tag]`` follows
    6  trailing context character (an extra ``]`` marks an escaped tag)

Group numbering is consumed only by scanner.ShortcodeMatch.from_re(); change
the two together.

Example:
    >>> pattern = build_pattern(["box"])
    >>> pattern.search('[box color="red"]hi[/box]').group(2, 3, 5)
    ('box', ' color="red"', 'hi')

"""

from __future__ import annotations

import re
from collections.abc import Iterable


def build_pattern(names: Iterable[str]) -> re.Pattern[str] | None:
    """Build the matching pattern for a set of tag names.

    Names are escaped so that regex metacharacters match literally, and
    alternated in the order given. Matching is case-sensitive and ``.``
    spans newlines.

    Args:
        names: Registered tag names

    Returns:
        Compiled pattern, or None when there are no names. Callers must
        treat None as "nothing to match" and return content unchanged.
    """
    tags = [re.escape(name) for name in names]
    if not tags:
        return None

    alternation = "|".join(tags)
    return re.compile(
        r"(.?)\[(" + alternation + r")\b(.*?)(?:(/))?\](?:(.+?)\[/\2\])?(.?)",
        re.DOTALL,
    )


__all__ = ["build_pattern"]
