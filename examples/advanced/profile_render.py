"""Collect render metrics for a batch of documents."""

from corchete import Shortcodes
from corchete.profiling import profiled_render

engine = Shortcodes()
engine.add("year", lambda attrs, content, tag: "2024")
engine.add("b", lambda attrs, content, tag: f"<b>{content}</b>")

docs = [f"Post {i}: (c) [year], [b]bold[/b], literal [[year]]" for i in range(100)]

with profiled_render() as metrics:
    for doc in docs:
        engine.do(doc)

print(metrics.summary())
