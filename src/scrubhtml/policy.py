"""Tag and attribute policy.

A `SanitizationPolicy` bundles the allow-lists consulted by the sanitizer.
`DEFAULT_POLICY` is the built-in policy; custom policies are normalized and
frozen at construction so they can be shared freely between threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

from .constants import (
    ALLOWED_ATTRIBUTES,
    ALLOWED_TAGS,
    FORBIDDEN_TAGS,
    LINK_REL,
    LINK_TARGET,
    TAG_REQUIREMENTS,
    URL_ATTRIBUTES,
    URL_SCHEMES,
)
from .node import Element
from .validators import is_mailto_href, is_web_uri

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping

    from .node import Node


class _StrEnum(str, Enum):
    """Backport of enum.StrEnum (Python 3.11+).

    We support Python 3.10+, so we use this small mixin instead.
    """


class TagClass(_StrEnum):
    FORBIDDEN = "forbidden"
    ALLOWED = "allowed"
    UNKNOWN = "unknown"


class Directive(_StrEnum):
    KEEP = "keep"
    UNWRAP = "unwrap"
    ELIMINATE = "eliminate"


_DIRECTIVES: dict[TagClass, Directive] = {
    TagClass.FORBIDDEN: Directive.ELIMINATE,
    TagClass.ALLOWED: Directive.KEEP,
    TagClass.UNKNOWN: Directive.UNWRAP,
}


def _lowered(names: Collection[str], what: str) -> frozenset[str]:
    if isinstance(names, str):
        raise TypeError(f"{what} must be a collection of strings, not a string")
    return frozenset(str(n).lower() for n in names)


@dataclass(frozen=True, slots=True)
class SanitizationPolicy:
    """Allow-lists for one sanitizer configuration.

    - `allowed_tags`: tags kept as-is (`#text` keeps text nodes).
    - `forbidden_tags`: tags removed together with everything inside them.
      Takes precedence over `allowed_tags`.
    - `allowed_attributes`: tag -> attribute names kept on that tag.
    - `tag_requirements`: tag -> {attribute: value}; the tag only counts as
      allowed when every listed attribute has exactly that value.
    - `url_attributes`: attributes whose value is validated as a URL on any
      tag. They are kept only if the value is a web URI (or, for `href`, a
      valid `mailto:` address when `allow_mailto` is set).
    - `url_schemes`: schemes accepted by the URL check.
    - `link_target` / `link_rel`: forced onto outgoing links.

    Tags not in either tag set are unwrapped: their markup is removed and
    their children are kept.
    """

    allowed_tags: frozenset[str]
    forbidden_tags: frozenset[str]
    allowed_attributes: Mapping[str, frozenset[str]]
    tag_requirements: Mapping[str, Mapping[str, str]]
    url_attributes: frozenset[str]
    url_schemes: frozenset[str]
    allow_mailto: bool
    link_target: str
    link_rel: str

    def __init__(
        self,
        *,
        allowed_tags: Collection[str] = ALLOWED_TAGS,
        forbidden_tags: Collection[str] = FORBIDDEN_TAGS,
        allowed_attributes: Mapping[str, Collection[str]] = ALLOWED_ATTRIBUTES,
        tag_requirements: Mapping[str, Mapping[str, str]] = TAG_REQUIREMENTS,
        url_attributes: Collection[str] = URL_ATTRIBUTES,
        url_schemes: Collection[str] = URL_SCHEMES,
        allow_mailto: bool = True,
        link_target: str = LINK_TARGET,
        link_rel: str = LINK_REL,
    ) -> None:
        attrs: dict[str, frozenset[str]] = {}
        for tag, names in allowed_attributes.items():
            attrs[str(tag).lower()] = _lowered(names, f"allowed_attributes[{tag!r}]")

        requirements: dict[str, MappingProxyType[str, str]] = {}
        for tag, required in tag_requirements.items():
            requirements[str(tag).lower()] = MappingProxyType({str(k).lower(): str(v) for k, v in required.items()})

        if not link_target or not link_rel:
            raise ValueError("link_target and link_rel must be non-empty")

        object.__setattr__(self, "allowed_tags", _lowered(allowed_tags, "allowed_tags"))
        object.__setattr__(self, "forbidden_tags", _lowered(forbidden_tags, "forbidden_tags"))
        object.__setattr__(self, "allowed_attributes", MappingProxyType(attrs))
        object.__setattr__(self, "tag_requirements", MappingProxyType(requirements))
        object.__setattr__(self, "url_attributes", _lowered(url_attributes, "url_attributes"))
        object.__setattr__(self, "url_schemes", _lowered(url_schemes, "url_schemes"))
        object.__setattr__(self, "allow_mailto", bool(allow_mailto))
        object.__setattr__(self, "link_target", str(link_target))
        object.__setattr__(self, "link_rel", str(link_rel))

    def classify_tag(self, tag_name: str, attrs: Mapping[str, str] | None = None) -> TagClass:
        """Classify a tag (or `#text` / `#comment`) against this policy."""

        name = tag_name.lower()
        if name in self.forbidden_tags:
            return TagClass.FORBIDDEN
        if name not in self.allowed_tags:
            return TagClass.UNKNOWN

        required = self.tag_requirements.get(name)
        if required:
            actual = attrs or {}
            for attr, value in required.items():
                if actual.get(attr) != value:
                    return TagClass.UNKNOWN
        return TagClass.ALLOWED

    def directive_for(self, node: Node) -> Directive:
        attrs = node.attrs if isinstance(node, Element) else None
        return _DIRECTIVES[self.classify_tag(node.name, attrs)]

    def is_attribute_allowed(self, tag_name: str, attribute_name: str, attribute_value: str) -> bool:
        tag = tag_name.lower()
        name = attribute_name.lower()

        # URL-valued attributes are judged by their value, on every tag.
        if name in self.url_attributes:
            if is_web_uri(attribute_value, self.url_schemes):
                return True
            return self.allow_mailto and name == "href" and is_mailto_href(attribute_value)

        allowed = self.allowed_attributes.get(tag)
        return allowed is not None and name in allowed


DEFAULT_POLICY = SanitizationPolicy()


def classify_tag(
    tag_name: str,
    attrs: Mapping[str, str] | None = None,
    policy: SanitizationPolicy = DEFAULT_POLICY,
) -> TagClass:
    return policy.classify_tag(tag_name, attrs)


def is_attribute_allowed(
    tag_name: str,
    attribute_name: str,
    attribute_value: str,
    policy: SanitizationPolicy = DEFAULT_POLICY,
) -> bool:
    return policy.is_attribute_allowed(tag_name, attribute_name, attribute_value)
