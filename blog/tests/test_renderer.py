import unittest

from blog.models import (
    BlockType,
    ContentBlock,
    ExternalLink,
    Heading,
    Image,
    LineBreak,
    MapFrame,
    Paragraph,
)
from blog.renderer import is_map_url, render_blocks


class RenderBlocksTests(unittest.TestCase):
    def test_mixed_sequence_keeps_order_and_skips_unrenderable(self):
        blocks = [
            ContentBlock(id="h", type=BlockType.HEADING_2, text="Day one"),
            ContentBlock(id="p", type=BlockType.PARAGRAPH, text="We landed in Lisbon."),
            ContentBlock(id="todo", type=BlockType.OTHER),
            ContentBlock(id="img-missing", type=BlockType.IMAGE, url=None),
            ContentBlock(id="img", type=BlockType.IMAGE, url="https://www.notion.so/a.png"),
            ContentBlock(id="bm", type=BlockType.BOOKMARK, url="https://example.com/post"),
        ]

        nodes = list(render_blocks(blocks))

        self.assertEqual([node.key for node in nodes], ["h", "p", "img", "bm"])
        self.assertLessEqual(len(nodes), len(blocks))
        self.assertEqual(nodes[0], Heading(key="h", level=2, text="Day one"))
        self.assertEqual(nodes[1], Paragraph(key="p", text="We landed in Lisbon."))
        self.assertEqual(nodes[2], Image(key="img", url="https://www.notion.so/a.png"))
        self.assertEqual(nodes[3], ExternalLink(key="bm", url="https://example.com/post"))

    def test_empty_paragraph_becomes_line_break(self):
        nodes = list(render_blocks([ContentBlock(id="p", type=BlockType.PARAGRAPH, text="")]))
        self.assertEqual(nodes, [LineBreak(key="p")])

    def test_paragraph_without_text_field_becomes_line_break(self):
        nodes = list(render_blocks([ContentBlock(id="p", type=BlockType.PARAGRAPH)]))
        self.assertEqual(nodes, [LineBreak(key="p")])

    def test_headings_always_emit_even_when_empty(self):
        blocks = [
            ContentBlock(id="1", type=BlockType.HEADING_1, text=""),
            ContentBlock(id="2", type=BlockType.HEADING_2),
            ContentBlock(id="3", type=BlockType.HEADING_3, text="Notes"),
        ]
        nodes = list(render_blocks(blocks))
        self.assertEqual(
            nodes,
            [
                Heading(key="1", level=1, text=""),
                Heading(key="2", level=2, text=""),
                Heading(key="3", level=3, text="Notes"),
            ],
        )

    def test_link_blocks_without_url_are_skipped_every_time(self):
        blocks = [
            ContentBlock(id="e", type=BlockType.EMBED),
            ContentBlock(id="b", type=BlockType.BOOKMARK, url=""),
            ContentBlock(id="l", type=BlockType.LINK_PREVIEW, url=None),
        ]
        self.assertEqual(list(render_blocks(blocks)), [])
        self.assertEqual(list(render_blocks(blocks)), [])

    def test_google_map_embed_renders_as_frame(self):
        block = ContentBlock(id="m", type=BlockType.EMBED, url="https://maps.google.com/?q=x")
        self.assertEqual(list(render_blocks([block])), [MapFrame(key="m", url="https://maps.google.com/?q=x")])

    def test_link_preview_without_map_keyword_renders_as_link(self):
        block = ContentBlock(id="l", type=BlockType.LINK_PREVIEW, url="https://example.com/google-guide")
        self.assertEqual(list(render_blocks([block])), [ExternalLink(key="l", url="https://example.com/google-guide")])

    def test_render_is_lazy(self):
        consumed = []

        def source():
            for idx in range(3):
                consumed.append(idx)
                yield ContentBlock(id=str(idx), type=BlockType.PARAGRAPH, text="x")

        nodes = render_blocks(source())
        self.assertEqual(consumed, [])
        next(nodes)
        self.assertEqual(consumed, [0])


class MapUrlTests(unittest.TestCase):
    def test_requires_both_substrings(self):
        self.assertTrue(is_map_url("https://www.google.com/maps/embed?pb=1"))
        self.assertTrue(is_map_url("https://maps.google.com/?q=x"))
        self.assertFalse(is_map_url("https://example.com/google-guide"))
        self.assertFalse(is_map_url("https://openstreetmap.org/#map=5"))

    def test_literal_substring_match_not_semantic(self):
        # "maps" contains "map", so any URL mentioning google maps qualifies
        self.assertTrue(is_map_url("https://example.com/google-maps-guide"))
        self.assertTrue(is_map_url("https://mapsite.example/googled"))

    def test_case_sensitive(self):
        self.assertFalse(is_map_url("https://GOOGLE.com/MAPS"))


if __name__ == "__main__":
    unittest.main()
