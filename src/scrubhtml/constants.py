"""Default policy tables.

These are process-wide, read-only constants. `SanitizationPolicy` freezes any
custom tables it is given into the same shapes.
"""

from __future__ import annotations

from types import MappingProxyType

FORBIDDEN_TAGS: frozenset[str] = frozenset(
    {
        "head",
        "html",
        "iframe",
        "link",
        "meta",
        "object",
        "script",
        "style",
    }
)

ALLOWED_TAGS: frozenset[str] = frozenset(
    {
        "#text",
        "a",
        "article",
        "b",
        "br",
        "blockquote",
        "cite",
        "code",
        "dd",
        "del",
        "div",
        "dt",
        "em",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "hr",
        "i",
        "img",
        "input",
        "ins",
        "li",
        "ol",
        "p",
        "pre",
        "s",
        "span",
        "strong",
        "sub",
        "sup",
        "table",
        "tbody",
        "td",
        "th",
        "thead",
        "tr",
        "tt",
        "ul",
    }
)

# Before adding attributes here, make sure none of them can carry script
# (`onclick`, `onmouseover`, `style`, ...).
ALLOWED_ATTRIBUTES: MappingProxyType[str, frozenset[str]] = MappingProxyType(
    {
        "a": frozenset({"alt", "href", "rel", "title"}),
        "img": frozenset({"alt", "src", "title"}),
        "input": frozenset({"checked", "type"}),
    }
)

# A tag listed here is only allowed when every attribute matches exactly.
TAG_REQUIREMENTS: MappingProxyType[str, MappingProxyType[str, str]] = MappingProxyType(
    {
        "input": MappingProxyType({"type": "checkbox"}),
    }
)

URL_ATTRIBUTES: frozenset[str] = frozenset({"href", "src"})

URL_SCHEMES: frozenset[str] = frozenset({"http", "https"})

MAILTO_PREFIX = "mailto:"

LINK_TARGET = "_blank"
LINK_REL = "external noopener noreferrer"

VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)
