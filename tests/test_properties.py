"""Property-based tests for Corchete using Hypothesis.

These tests verify invariants that should hold for any content:
1. An empty registry leaves content untouched
2. Content without brackets is never changed
3. Attribute parsing never crashes and keeps positional order
4. strip() is idempotent once tags are gone
"""

import string

from hypothesis import given, settings
from hypothesis import strategies as st

from corchete import Shortcodes, merge_attrs, parse_attrs

plain_text = st.text(alphabet=string.ascii_letters + string.digits + " \n.,", min_size=1)
words = st.text(alphabet=string.ascii_lowercase, min_size=1, max_size=8)
tag_forms = st.sampled_from(["[tag]", "[tag x=1]", '[tag a="b c" /]', "[tag]body[/tag]"])


@st.composite
def documents(draw: st.DrawFn) -> str:
    """Plain text chunks separated by well-formed tags."""
    chunks = draw(st.lists(plain_text, min_size=1, max_size=6))
    parts = [chunks[0]]
    for chunk in chunks[1:]:
        parts.append(draw(tag_forms))
        parts.append(chunk)
    return "".join(parts)


def blank(attrs, content, tag):
    return ""


class TestEngineProperties:
    """Invariants of do() and strip()."""

    @given(content=st.text())
    @settings(max_examples=100)
    def test_empty_registry_is_identity(self, content: str) -> None:
        sc = Shortcodes()
        assert sc.do(content) == content
        assert sc.strip(content) == content

    @given(content=st.text().filter(lambda s: "[" not in s))
    @settings(max_examples=100)
    def test_bracket_free_content_unchanged(self, content: str) -> None:
        sc = Shortcodes()
        sc.add("tag", blank)
        assert sc.do(content) == content
        assert sc.strip(content) == content

    @given(content=documents())
    @settings(max_examples=100)
    def test_strip_idempotent(self, content: str) -> None:
        sc = Shortcodes()
        sc.add("tag", blank)
        once = sc.strip(content)
        assert "[" not in once
        assert sc.strip(once) == once

    @given(content=documents())
    @settings(max_examples=100)
    def test_blank_handler_matches_strip(self, content: str) -> None:
        sc = Shortcodes()
        sc.add("tag", blank)
        assert sc.do(content) == sc.strip(content)

    @given(content=st.text())
    @settings(max_examples=100)
    def test_do_never_crashes(self, content: str) -> None:
        sc = Shortcodes()
        sc.add("tag", lambda attrs, content, tag: "X")
        assert isinstance(sc.do(content), str)
        assert isinstance(sc.strip(content), str)


class TestAttributeProperties:
    """Invariants of parse_attrs() and merge_attrs()."""

    @given(text=st.text())
    @settings(max_examples=200)
    def test_parse_never_crashes(self, text: str) -> None:
        result = parse_attrs(text)
        assert isinstance(result, (dict, str))
        if isinstance(result, str):
            assert result == ""

    @given(values=st.lists(words, min_size=1, max_size=10))
    @settings(max_examples=100)
    def test_positional_order_preserved(self, values: list[str]) -> None:
        assert parse_attrs(" ".join(values)) == dict(enumerate(values))

    @given(pairs=st.dictionaries(words, words, min_size=1, max_size=8))
    @settings(max_examples=100)
    def test_named_round_trip(self, pairs: dict[str, str]) -> None:
        text = " ".join(f'{key}="{value}"' for key, value in pairs.items())
        assert parse_attrs(text) == pairs

    @given(
        defaults=st.dictionaries(words, st.integers(), max_size=6),
        supplied=st.dictionaries(words, st.integers(), max_size=6),
    )
    @settings(max_examples=100)
    def test_merge_keys_match_defaults(self, defaults: dict, supplied: dict) -> None:
        result = merge_attrs(defaults, supplied)
        assert list(result) == list(defaults)
        for key, value in result.items():
            assert value == supplied.get(key, defaults[key])
