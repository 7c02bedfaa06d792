"""Serialize a `DocumentTree` back to HTML text.

Our nodes are replayed as an html5lib token stream and rendered by
html5lib's `HTMLSerializer`, which handles escaping of text and attribute
values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from html5lib.serializer import HTMLSerializer, SerializeError

from .constants import VOID_ELEMENTS
from .errors import SerializeFailure
from .node import Comment, Element, Text

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .node import Node


def _serializer() -> HTMLSerializer:
    serializer = HTMLSerializer(
        quote_attr_values="always",
        quote_char='"',
        use_best_quote_char=False,
        omit_optional_tags=False,
        minimize_boolean_attributes=False,
        use_trailing_solidus=False,
        escape_lt_in_attrs=True,
        # Never emit raw text, even inside elements html5lib treats as CDATA.
        escape_rcdata=True,
    )
    # Not a constructor option: raise on malformed trees instead of recording.
    serializer.strict = True
    return serializer


def iter_tokens(node: Node) -> Iterator[dict]:
    """Yield html5lib tokens for the children of `node` (not `node` itself)."""

    # (node, entered) pairs; an element is pushed back with entered=True so
    # its end tag is emitted after its children.
    stack: list[tuple[Node, bool]] = [(child, False) for child in reversed(node.children)]
    while stack:
        current, entered = stack.pop()
        if isinstance(current, Text):
            yield {"type": "Characters", "data": current.data}
        elif isinstance(current, Comment):
            yield {"type": "Comment", "data": current.data}
        elif isinstance(current, Element):
            if entered:
                yield {"type": "EndTag", "name": current.name, "namespace": None}
                continue
            data = {(None, name): value for name, value in current.attrs.items()}
            if current.name in VOID_ELEMENTS:
                yield {"type": "EmptyTag", "name": current.name, "namespace": None, "data": data}
                continue
            yield {"type": "StartTag", "name": current.name, "namespace": None, "data": data}
            stack.append((current, True))
            stack.extend((child, False) for child in reversed(current.children))


def to_html(node: Node) -> str:
    """Return the inner HTML of `node`."""

    try:
        return _serializer().render(iter_tokens(node))
    except SerializeError as exc:
        raise SerializeFailure(f"Could not serialize tree: {exc}") from exc
