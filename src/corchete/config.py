"""ContextVar-based shortcode configuration for Corchete.

Config is set by a Shortcodes instance for the duration of each do()/strip()
call and read by the attribute parser and dispatcher in that context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so engines with different configs never see each other's settings.

Usage:
    # In Shortcodes
    engine = Shortcodes(config=ShortcodeConfig(escaping_enabled=False))
    html = engine.do("[[box]]")  # Sets config internally via ContextVar

    # Direct attribute parsing (advanced)
    with shortcode_config_context(ShortcodeConfig(unescape_values=False)):
        attrs = parse_attrs(r'path="C:\\new"')

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class ShortcodeConfig:
    """Immutable shortcode configuration.

    Attributes:
        escaping_enabled: Render ``[[tag]]`` as the literal ``[tag]``.
            When disabled, the doubled brackets are kept as context
            characters around normal handler output.
        unescape_values: Resolve C-style backslash sequences in
            attribute values.

    """

    escaping_enabled: bool = True
    unescape_values: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ShortcodeConfig":
        """Create ShortcodeConfig from dictionary.

        Only includes keys that are valid ShortcodeConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ShortcodeConfig.from_dict({
            ...     "escaping_enabled": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.escaping_enabled
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ShortcodeConfig = ShortcodeConfig()

_shortcode_config: ContextVar[ShortcodeConfig] = ContextVar(
    "shortcode_config",
    default=_DEFAULT_CONFIG,
)


def get_shortcode_config() -> ShortcodeConfig:
    """Get current shortcode configuration (thread-local)."""
    return _shortcode_config.get()


def set_shortcode_config(config: ShortcodeConfig) -> None:
    """Set shortcode configuration for current context.

    Args:
        config: ShortcodeConfig instance to use for this context.

    """
    _shortcode_config.set(config)


def reset_shortcode_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton.
    """
    _shortcode_config.set(_DEFAULT_CONFIG)


@contextmanager
def shortcode_config_context(config: ShortcodeConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, so a handler that re-invokes
    another engine for nested content does not clobber the outer config.

    Example:
        >>> with shortcode_config_context(ShortcodeConfig(unescape_values=False)):
        ...     parse_attrs(r'a="x\\ty"')
        {'a': 'x\\\\ty'}

    """
    token = _shortcode_config.set(config)
    try:
        yield
    finally:
        _shortcode_config.reset(token)


__all__ = [
    "ShortcodeConfig",
    "get_shortcode_config",
    "set_shortcode_config",
    "reset_shortcode_config",
    "shortcode_config_context",
]
