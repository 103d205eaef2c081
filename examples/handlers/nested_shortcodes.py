"""Expand shortcodes inside shortcodes by re-invoking the engine."""

from corchete import Shortcodes, merge_attrs

engine = Shortcodes()


@engine.shortcode("card")
def card(attrs, content, tag):
    opts = merge_attrs({"title": "Untitled", "tone": "plain"}, attrs)
    body = engine.do(content) if content is not None else ""
    return f'<section class="card {opts["tone"]}"><h2>{opts["title"]}</h2>{body}</section>'


@engine.shortcode("icon")
def icon(attrs, content, tag):
    name = attrs[0] if isinstance(attrs, dict) and 0 in attrs else "dot"
    return f'<i class="icon-{name}"></i>'


source = """
[card title="Status" tone=good]
 [icon check] All systems go.
[/card]
"""

print(engine.do(source))
print(engine.strip(source))
