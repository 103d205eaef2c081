"""Tests for ContextVar-based shortcode configuration.

Validates defaults, immutability, context manager behavior, and that an
engine's config is visible to handlers only while it renders.
"""

from threading import Thread

import pytest

from corchete import (
    ShortcodeConfig,
    Shortcodes,
    get_shortcode_config,
    parse_attrs,
    reset_shortcode_config,
    set_shortcode_config,
    shortcode_config_context,
)


class TestShortcodeConfigDataclass:
    """Test ShortcodeConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ShortcodeConfig()
        assert config.escaping_enabled is True
        assert config.unescape_values is True

    def test_immutability(self) -> None:
        config = ShortcodeConfig()
        with pytest.raises(AttributeError):
            config.escaping_enabled = False  # type: ignore[misc]

    def test_from_dict(self) -> None:
        config = ShortcodeConfig.from_dict({"unescape_values": False, "unknown_key": 1})
        assert config.unescape_values is False
        assert config.escaping_enabled is True

    def test_from_empty_dict(self) -> None:
        assert ShortcodeConfig.from_dict({}) == ShortcodeConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_shortcode_config()

    def test_default_config(self) -> None:
        assert get_shortcode_config() == ShortcodeConfig()

    def test_set_and_get(self) -> None:
        custom = ShortcodeConfig(escaping_enabled=False)
        set_shortcode_config(custom)
        assert get_shortcode_config() is custom

    def test_reset(self) -> None:
        set_shortcode_config(ShortcodeConfig(unescape_values=False))
        reset_shortcode_config()
        assert get_shortcode_config().unescape_values is True

    def test_context_manager_restores_previous(self) -> None:
        outer = ShortcodeConfig(escaping_enabled=False)
        inner = ShortcodeConfig(unescape_values=False)
        set_shortcode_config(outer)
        with shortcode_config_context(inner):
            assert get_shortcode_config() is inner
        assert get_shortcode_config() is outer

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with shortcode_config_context(ShortcodeConfig(unescape_values=False)):
                raise RuntimeError("boom")
        assert get_shortcode_config().unescape_values is True

    def test_thread_isolation(self) -> None:
        seen: list[bool] = []

        def worker() -> None:
            seen.append(get_shortcode_config().escaping_enabled)

        set_shortcode_config(ShortcodeConfig(escaping_enabled=False))
        thread = Thread(target=worker)
        thread.start()
        thread.join()
        assert seen == [True]


class TestEngineConfig:
    """Engines apply their config only for the duration of a call."""

    def test_handler_sees_engine_config(self) -> None:
        config = ShortcodeConfig(unescape_values=False)
        seen: list[ShortcodeConfig] = []

        def probe(attrs, content, tag):
            seen.append(get_shortcode_config())
            return ""

        sc = Shortcodes(config=config)
        sc.add("probe", probe)
        sc.do("[probe]")
        assert seen == [config]
        assert get_shortcode_config() == ShortcodeConfig()

    def test_unescape_disabled_for_engine(self) -> None:
        sc = Shortcodes(config=ShortcodeConfig(unescape_values=False))
        sc.add("t", lambda attrs, content, tag: attrs["p"])
        assert sc.do(r'[t p="a\nb"]') == r"a\nb"

    def test_nested_engines_restore_outer_config(self) -> None:
        inner = Shortcodes()
        inner.add("i", lambda attrs, content, tag: attrs["v"])
        seen: list[bool] = []

        def outer_handler(attrs, content, tag):
            rendered = inner.do(content or "")
            seen.append(get_shortcode_config().unescape_values)
            return rendered

        outer = Shortcodes(config=ShortcodeConfig(unescape_values=False))
        outer.add("o", outer_handler)
        assert outer.do(r'[o][i v="x\ty"][/o]') == "x\ty"
        assert seen == [False]

    def test_module_parse_attrs_uses_default(self) -> None:
        assert parse_attrs(r'a="x\ty"') == {"a": "x\ty"}

    def test_config_property(self) -> None:
        config = ShortcodeConfig(escaping_enabled=False)
        assert Shortcodes(config=config).config is config
        assert Shortcodes().config == ShortcodeConfig()
