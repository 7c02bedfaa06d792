"""Parse untrusted HTML into a `DocumentTree`.

Parsing is delegated to html5lib, which implements the WHATWG parsing
algorithm and never rejects input: unbalanced tags, stray end tags and
misnested markup are repaired the same way a browser would repair them.
The html5lib tree is then replayed through its tree walker into our own
arena-backed nodes, rooted at the document's `<body>`.
"""

from __future__ import annotations

from typing import Any

import html5lib
from html5lib.constants import E, prefixes

from .errors import ParseError, ParseFailure
from .node import Comment, DocumentTree, Element, Node, Text


def _qualified_name(namespace: str | None, name: str) -> str:
    if namespace is None:
        return name
    prefix = prefixes.get(namespace)
    if not prefix or prefix == name:
        return name
    return f"{prefix}:{name}"


def _error_message(code: str, datavars: object) -> str:
    template = E.get(code)
    if template is None:
        return code
    try:
        return template % datavars
    except (KeyError, TypeError, ValueError):
        return template


def _content_root(document: Any) -> Any:
    # A frameset document has no <body>; like `document.body` in a browser we
    # fall back to the <frameset> element.
    for tag in ("body", "frameset"):
        found = next(document.iter(tag), None)
        if found is not None:
            return found
    return None


def parse_html(html: str, *, collect_errors: bool = False) -> DocumentTree:
    """Parse `html` and return a tree rooted at the `<body>` element.

    Raises `ParseFailure` if `html` is not a `str` (decoding bytes is the
    caller's job) or if html5lib cannot produce a tree.
    """

    if not isinstance(html, str):
        raise ParseFailure(f"Expected HTML text (str), got {type(html).__name__}")

    parser = html5lib.HTMLParser(tree=html5lib.getTreeBuilder("etree"), namespaceHTMLElements=False)
    try:
        document = parser.parse(html)
    except (ValueError, TypeError, LookupError) as exc:
        raise ParseFailure(f"Could not parse HTML: {exc}") from exc

    tree = DocumentTree()
    if collect_errors:
        for position, code, datavars in parser.errors:
            line, column = position if position else (None, None)
            tree.errors.append(
                ParseError(
                    str(code),
                    line=line,
                    column=column,
                    category="parse",
                    message=_error_message(code, datavars),
                )
            )

    container = _content_root(document)
    if container is None:  # pragma: no cover
        return tree
    tree.root.name = container.tag

    walker = html5lib.getTreeWalker("etree")
    stack: list[Node] = []
    for token in walker(container):
        kind = token["type"]

        if kind == "StartTag":
            if not stack:
                # The container itself.
                stack.append(tree.root)
                continue
            element = _element_from_token(token)
            stack[-1].append_child(tree.add(element))
            stack.append(element)
        elif kind == "EndTag":
            stack.pop()
        elif kind == "EmptyTag":
            stack[-1].append_child(tree.add(_element_from_token(token)))
        elif kind in ("Characters", "SpaceCharacters"):
            parent = stack[-1]
            last = parent.children[-1] if parent.children else None
            if isinstance(last, Text):
                last.data += token["data"]
            else:
                parent.append_child(tree.add(Text(token["data"])))
        elif kind == "Comment":
            stack[-1].append_child(tree.add(Comment(token["data"])))
        # Doctype and SerializeError tokens cannot carry content; skip them.

    return tree


def _element_from_token(token: dict) -> Element:
    attrs: dict[str, str] = {}
    for (namespace, name), value in token["data"].items():
        attrs[_qualified_name(namespace, name).lower()] = value
    return Element(token["name"], attrs, token["namespace"])
