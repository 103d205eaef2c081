"""Render a shortcode in 4 lines with no configuration."""

from corchete import Shortcodes

engine = Shortcodes()
engine.add("hello", lambda attrs, content, tag: f"Hello {attrs.get('name', 'World')}!")
print(engine.do('[hello name="Corchete"] and [[hello]]'))
