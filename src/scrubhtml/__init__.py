from .errors import ParseError, ParseFailure, SanitizeError, SerializeFailure
from .links import normalize_link
from .node import Comment, DocumentTree, Element, Node, Text
from .parser import parse_html
from .policy import (
    DEFAULT_POLICY,
    Directive,
    SanitizationPolicy,
    TagClass,
    classify_tag,
    is_attribute_allowed,
)
from .sanitize import Sanitizer, sanitize
from .serialize import to_html
from .validators import is_email, is_mailto_href, is_web_uri

__all__ = [
    "DEFAULT_POLICY",
    "Comment",
    "Directive",
    "DocumentTree",
    "Element",
    "Node",
    "ParseError",
    "ParseFailure",
    "SanitizationPolicy",
    "SanitizeError",
    "Sanitizer",
    "SerializeFailure",
    "TagClass",
    "Text",
    "classify_tag",
    "is_attribute_allowed",
    "is_email",
    "is_mailto_href",
    "is_web_uri",
    "normalize_link",
    "parse_html",
    "sanitize",
    "to_html",
]
