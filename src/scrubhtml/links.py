from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import MAILTO_PREFIX

if TYPE_CHECKING:
    from .node import Element
    from .policy import SanitizationPolicy


def normalize_link(element: Element, policy: SanitizationPolicy) -> bool:
    """Force `target` and `rel` onto an outgoing link.

    Only `<a>` elements whose (already filtered) `href` is present and is not
    a `mailto:` link are touched. Any `target`/`rel` from the input is
    replaced, never merged. Both are re-appended in a fixed order so that
    sanitizing the output again yields the same attribute order.

    Returns True if the element was rewritten.
    """

    if element.name != "a":
        return False
    href = element.attrs.get("href")
    if href is None or href.startswith(MAILTO_PREFIX):
        return False

    attrs = element.attrs
    attrs.pop("target", None)
    attrs.pop("rel", None)
    attrs["target"] = policy.link_target
    attrs["rel"] = policy.link_rel
    return True
