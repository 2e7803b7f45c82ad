from __future__ import annotations

import unittest

from intervalgraph.model import PointView, SpanView
from intervalgraph.render.bars import render_bars
from intervalgraph.render.inline import build_html


VIEW = [SpanView(0.0, 50.0, "#ff9431", "0", "1", "25%"), PointView(75.0, "2")]


class TestInlineHtmlContract(unittest.TestCase):
    def test_view_is_injected_once(self) -> None:
        page = build_html(VIEW, title="Load")
        self.assertEqual(page.count('"#ff9431"'), 1)
        self.assertNotIn("__DATA_JSON__", page)
        self.assertNotIn("__TITLE__", page)
        self.assertIn("<title>Load</title>", page)

    def test_title_cannot_spell_the_data_marker(self) -> None:
        page = build_html(VIEW, title="x __DATA_JSON__ y")
        self.assertEqual(page.count('"#ff9431"'), 1)
        self.assertIn("<title>x &#95;&#95;DATA&#95;JSON&#95;&#95; y</title>", page)

    def test_script_closing_tags_are_escaped(self) -> None:
        page = build_html([SpanView(0.0, 0.0, None, "</script>", "b", None)])
        self.assertNotIn('"</script>"', page)
        self.assertIn(r'"<\/script>"', page)

    def test_non_list_view_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            build_html({"rows": []})  # type: ignore[arg-type]

    def test_tuple_view_from_a_graph_is_accepted(self) -> None:
        self.assertIn('"#ff9431"', build_html(tuple(VIEW)))


class TestBarsContract(unittest.TestCase):
    def test_labels_are_escaped(self) -> None:
        out = render_bars([SpanView(10.0, 20.0, None, "<a>", "b&c", None)])
        self.assertIn('data-title="&lt;a&gt; ➔ b&amp;c"', out)
        self.assertIn('style="left:10%;right:20%"', out)

    def test_unknown_entries_are_rejected(self) -> None:
        with self.assertRaises(TypeError):
            render_bars([[0, "x"]])


if __name__ == "__main__":
    unittest.main(verbosity=2)
