"""The sanitizer: one classifying walk, then batched removals.

The tree is never restructured while it is being walked. The walk only
classifies nodes, filters attributes of kept elements and normalizes links;
nodes to eliminate or unwrap are queued by handle and removed afterwards:

1. eliminations first (node and subtree go away),
2. then unwraps (children are spliced into the node's position).

A queued node that sits below an already removed node is skipped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .links import normalize_link
from .node import Element
from .parser import parse_html
from .policy import DEFAULT_POLICY, Directive, SanitizationPolicy
from .serialize import to_html

if TYPE_CHECKING:
    from typing import Any, Protocol

    from .errors import ParseError
    from .node import DocumentTree, Node

    class ReportCallback(Protocol):
        def __call__(self, msg: str, *, node: Any | None = None) -> None: ...


def _describe(node: Node) -> str:
    return node.name if node.name.startswith("#") else f"<{node.name}>"


class Sanitizer:
    """Apply a `SanitizationPolicy` to document trees.

    A `Sanitizer` holds no per-document state and can be reused (and shared
    between threads) as long as each call gets its own tree.
    """

    __slots__ = ("policy", "report")

    def __init__(self, policy: SanitizationPolicy | None = None, *, report: ReportCallback | None = None) -> None:
        self.policy = policy if policy is not None else DEFAULT_POLICY
        self.report = report

    def _report(self, msg: str, node: Node) -> None:
        if self.report is not None:
            self.report(msg, node=node)

    def filter_attributes(self, element: Element) -> list[str]:
        """Drop every attribute the policy does not allow; return their names."""

        dropped: list[str] = []
        # Snapshot first: we delete from the live dict below.
        for name, value in tuple(element.attrs.items()):
            if self.policy.is_attribute_allowed(element.name, name, value):
                continue
            del element.attrs[name]
            dropped.append(name)
            self._report(f"Dropped attribute '{name}' from <{element.name}>", element)
        return dropped

    def collect(self, tree: DocumentTree) -> tuple[list[int], list[int]]:
        """Walk the tree once and return the (eliminate, unwrap) handle queues.

        Kept elements are edited in place (attributes, link normalization);
        the structure of the tree is left untouched.
        """

        policy = self.policy
        eliminate: list[int] = []
        unwrap: list[int] = []

        for node in tree.walk():
            directive = policy.directive_for(node)
            if directive is Directive.ELIMINATE:
                eliminate.append(node.handle)
                continue
            if directive is Directive.UNWRAP:
                unwrap.append(node.handle)
                continue
            if type(node) is not Element:
                continue

            self.filter_attributes(node)
            if normalize_link(node, policy):
                self._report("Normalized link target and rel on <a>", node)

        return eliminate, unwrap

    def apply(self, tree: DocumentTree) -> DocumentTree:
        """Sanitize `tree` in place and return it."""

        eliminate, unwrap = self.collect(tree)

        for handle in eliminate:
            node = tree.node(handle)
            if tree.eliminate(handle):
                self._report(f"Eliminated {_describe(node)}", node)
            else:
                self._report(f"Skipped {_describe(node)}: already removed with an ancestor", node)

        for handle in unwrap:
            node = tree.node(handle)
            if tree.unwrap(handle):
                self._report(f"Unwrapped {_describe(node)}", node)
            else:
                self._report(f"Skipped {_describe(node)}: already removed with an ancestor", node)

        return tree

    def sanitize(self, html: str, *, errors: list[ParseError] | None = None) -> str:
        tree = parse_html(html, collect_errors=errors is not None)
        if errors is not None:
            errors.extend(tree.errors)
        self.apply(tree)
        return to_html(tree.root)


def sanitize(
    html: str,
    *,
    policy: SanitizationPolicy | None = None,
    report: ReportCallback | None = None,
    errors: list[ParseError] | None = None,
) -> str:
    """Return a sanitized copy of the HTML fragment `html`.

    Only the content of the document body is returned. Forbidden elements
    (`<script>`, `<style>`, `<iframe>`, ...) are removed with everything
    inside them, unknown elements are replaced by their content, and only
    allow-listed attributes survive. Outgoing links get `target="_blank"`
    and `rel="external noopener noreferrer"`.

    Pass a list as `errors` to collect the (non-fatal) parse errors, and a
    `report` callback to be told about every change made to the input.

    Raises `ParseFailure` if `html` cannot be parsed.
    """

    return Sanitizer(policy, report=report).sanitize(html, errors=errors)
