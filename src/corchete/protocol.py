"""ShortcodeHandler protocol for rendering tags.

Any callable taking ``(attrs, content, tag)`` and returning a string is a
handler: plain functions, lambdas, bound methods, or instances with
``__call__``.

Thread Safety:
Handlers may be invoked once per match, in document order. The engine does
not catch handler errors; they propagate to the caller of do().

Example:
    >>> def box(attrs, content, tag):
    ...     if content is None:
    ...         return "<hr>"
    ...     return f"<div>{content}</div>"

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from corchete.attributes import Attributes


@runtime_checkable
class ShortcodeHandler(Protocol):
    """Protocol for shortcode handlers."""

    def __call__(
        self,
        attrs: Attributes | str,
        content: str | None,
        tag: str,
    ) -> str:
        """Render one shortcode.

        Args:
            attrs: Parsed attributes. A plain string for blank attribute
                text (see parse_attrs()).
            content: Enclosed text, or None for the self-closing form.
                An enclosing tag never passes None.
            tag: Tag name that matched, useful when one handler serves
                several tags

        Returns:
            Replacement text
        """
        ...


__all__ = ["ShortcodeHandler"]
