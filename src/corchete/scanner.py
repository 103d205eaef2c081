"""Shortcode scanning.

Converts regex matches into ShortcodeMatch records with named fields so the
dispatcher never indexes regex groups directly.

Thread Safety:
    scan() holds no state beyond the generator it returns. ShortcodeMatch
    is a frozen dataclass.

"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ShortcodeMatch:
    """One shortcode occurrence found in content.

    Attributes:
        leading: Character immediately before the tag ("" at start of text)
        tag: Registered tag name
        raw_attrs: Unparsed attribute text
        self_closing: True when the opening tag ended with ``/]``
        content: Enclosed text for ``[tag]...[/tag]``, None otherwise
        trailing: Character immediately after the tag ("" at end of text)
        text: Full matched text, context characters included
        start: Offset of ``text`` in the scanned content
        end: Offset just past ``text``

    """

    leading: str
    tag: str
    raw_attrs: str
    self_closing: bool
    content: str | None
    trailing: str
    text: str
    start: int
    end: int

    @property
    def is_escaped(self) -> bool:
        """True for the ``[[tag]]`` form, which renders literally."""
        return self.leading == "[" and self.trailing == "]"

    @property
    def is_enclosing(self) -> bool:
        """True when the tag wraps content."""
        return self.content is not None

    @classmethod
    def from_re(cls, m: re.Match[str]) -> ShortcodeMatch:
        """Build a record from a match of pattern.build_pattern()."""
        return cls(
            leading=m.group(1),
            tag=m.group(2),
            raw_attrs=m.group(3),
            self_closing=m.group(4) is not None,
            content=m.group(5),
            trailing=m.group(6),
            text=m.group(0),
            start=m.start(),
            end=m.end(),
        )


def scan(pattern: re.Pattern[str], content: str) -> Iterator[ShortcodeMatch]:
    """Yield every non-overlapping shortcode in content, left to right."""
    for m in pattern.finditer(content):
        yield ShortcodeMatch.from_re(m)


__all__ = ["ShortcodeMatch", "scan"]
