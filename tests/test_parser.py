import unittest

from scrubhtml.errors import ParseFailure
from scrubhtml.node import Comment, Element, Text
from scrubhtml.parser import parse_html


def _text(node) -> str:
    return "".join(n.data for n in node.iter_descendants() if isinstance(n, Text))


class TestParseHtml(unittest.TestCase):
    def test_tree_is_rooted_at_body(self) -> None:
        tree = parse_html("<p class='x'>hi</p>")
        assert tree.root.name == "body"
        (p,) = tree.root.children
        assert isinstance(p, Element)
        assert p.name == "p"
        assert p.attrs == {"class": "x"}
        assert p.namespace is None
        assert isinstance(p.children[0], Text)
        assert p.children[0].data == "hi"

    def test_every_node_is_registered(self) -> None:
        tree = parse_html("<div><b>a</b>b<!-- c --></div>")
        nodes = list(tree.walk())
        assert len(nodes) == len(tree.nodes) - 1
        for node in nodes:
            assert tree.node(node.handle) is node

    def test_head_content_is_not_part_of_the_tree(self) -> None:
        tree = parse_html("<title>t</title><script>x</script><p>body</p>")
        assert [n.name for n in tree.root.children] == ["p"]

    def test_comments_are_kept_as_nodes(self) -> None:
        tree = parse_html("<p>a<!-- note -->b</p>")
        comment = tree.root.children[0].children[1]
        assert isinstance(comment, Comment)
        assert comment.data == " note "

    def test_adjacent_text_is_merged(self) -> None:
        tree = parse_html("<p>  a &amp; b  </p>")
        (text,) = tree.root.children[0].children
        assert text.data == "  a & b  "

    def test_attribute_order_and_case(self) -> None:
        tree = parse_html('<a HREF="https://example.com" Title="t" onclick="x">y</a>')
        assert list(tree.root.children[0].attrs) == ["href", "title", "onclick"]

    def test_foreign_elements_keep_namespace(self) -> None:
        tree = parse_html('<svg><a xlink:href="https://example.com">x</a></svg>')
        svg = tree.root.children[0]
        assert svg.name == "svg"
        assert svg.namespace == "http://www.w3.org/2000/svg"
        assert svg.children[0].attrs == {"xlink:href": "https://example.com"}

    def test_misnested_markup_is_repaired(self) -> None:
        tree = parse_html("<b><i>x</b>y</i>")
        assert _text(tree.root) == "xy"

    def test_frameset_document(self) -> None:
        assert parse_html("<frameset><frame></frameset>").root.name == "frameset"

    def test_errors_only_collected_on_request(self) -> None:
        assert parse_html("<p>x</b>").errors == []
        errors = parse_html("<p>x</b>", collect_errors=True).errors
        assert errors
        assert all(e.category == "parse" and e.line is not None for e in errors)
        assert all(e.message for e in errors)

    def test_non_text_input_fails(self) -> None:
        with self.assertRaises(ParseFailure):
            parse_html(b"<p>x</p>")  # type: ignore[arg-type]
