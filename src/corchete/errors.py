"""Exception classes for Corchete.

Provides standardized exceptions for error handling throughout Corchete.

Handler errors are never wrapped: anything a shortcode handler raises
propagates unchanged to the caller of ``Shortcodes.do()``.
"""

from __future__ import annotations


class CorcheteError(Exception):
    """Base exception for all Corchete errors.

    Subclass this for specific error categories.
    """

    pass


class RegistryConsistencyError(CorcheteError):
    """A scanned tag has no handler in the registry snapshot.

    The matching pattern is built only from registered names, so this
    indicates a defect in pattern construction rather than bad input.
    """

    def __init__(self, tag: str, message: str | None = None) -> None:
        """Initialize consistency error.

        Args:
            tag: Tag name that matched but has no handler
            message: Optional override for the error description
        """
        self.tag = tag
        super().__init__(message or f"Shortcode '{tag}' matched but is not registered")
