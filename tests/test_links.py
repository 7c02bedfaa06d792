import unittest

from scrubhtml.links import normalize_link
from scrubhtml.node import Element
from scrubhtml.policy import DEFAULT_POLICY


class TestNormalizeLink(unittest.TestCase):
    def test_outgoing_link_is_rewritten(self) -> None:
        a = Element("a", {"rel": "opener", "href": "https://example.com", "target": "_self"})
        assert normalize_link(a, DEFAULT_POLICY)
        assert a.attrs == {
            "href": "https://example.com",
            "target": "_blank",
            "rel": "external noopener noreferrer",
        }
        assert list(a.attrs) == ["href", "target", "rel"]

    def test_mailto_link_is_left_alone(self) -> None:
        a = Element("a", {"href": "mailto:user@example.com", "rel": "me"})
        assert not normalize_link(a, DEFAULT_POLICY)
        assert a.attrs == {"href": "mailto:user@example.com", "rel": "me"}

    def test_link_without_href_is_left_alone(self) -> None:
        a = Element("a", {"rel": "me"})
        assert not normalize_link(a, DEFAULT_POLICY)
        assert a.attrs == {"rel": "me"}

    def test_other_elements_are_left_alone(self) -> None:
        div = Element("div", {"href": "https://example.com"})
        assert not normalize_link(div, DEFAULT_POLICY)
        assert "target" not in div.attrs
