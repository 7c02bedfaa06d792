"""Arena-backed document tree.

Every node created for a document is registered in a `DocumentTree` and gets
an integer handle. Removal queues hold handles, never positions, so removing
one node cannot invalidate another queued entry. Removed nodes are
tombstoned (`detached = True`) and anything below a tombstone is considered
detached as well.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .errors import ParseError


class Node:
    __slots__ = ("children", "detached", "handle", "name", "parent")

    name: str
    handle: int
    parent: Node | None
    children: list[Node]
    detached: bool

    def __init__(self, name: str) -> None:
        self.name = name
        self.handle = -1
        self.parent = None
        self.children = []
        self.detached = False

    def append_child(self, node: Node) -> None:
        if node.parent is not None:
            node.parent.remove_child(node)
        self.children.append(node)
        node.parent = self
        node.detached = False

    def insert_before(self, node: Node, reference: Node | None) -> None:
        if reference is None:
            self.append_child(node)
            return
        if node.parent is not None:
            node.parent.remove_child(node)
        idx = self.children.index(reference)
        self.children.insert(idx, node)
        node.parent = self
        node.detached = False

    def remove_child(self, node: Node) -> None:
        self.children.remove(node)
        node.parent = None
        node.detached = True

    def iter_descendants(self) -> Iterator[Node]:
        """Yield every node below this one in document (pre-)order."""
        # Iterative so that deeply nested input cannot hit the recursion limit.
        stack: list[Node] = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            if node.children:
                stack.extend(reversed(node.children))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} #{self.handle}>"


class Element(Node):
    __slots__ = ("attrs", "namespace")

    attrs: dict[str, str]
    namespace: str | None

    def __init__(self, name: str, attrs: dict[str, str] | None = None, namespace: str | None = None) -> None:
        super().__init__(name.lower())
        self.attrs = dict(attrs) if attrs else {}
        self.namespace = namespace


class Text(Node):
    __slots__ = ("data",)

    data: str

    def __init__(self, data: str) -> None:
        super().__init__("#text")
        self.data = data

    def __repr__(self) -> str:
        return f"<Text {self.data!r} #{self.handle}>"


class Comment(Node):
    __slots__ = ("data",)

    data: str

    def __init__(self, data: str) -> None:
        super().__init__("#comment")
        self.data = data


class DocumentTree:
    """Owns the nodes of one parsed document.

    `root` is the content root (the `<body>` element for parsed input) and
    is never classified or removed itself.
    """

    __slots__ = ("errors", "nodes", "root")

    def __init__(self, root: Node | None = None) -> None:
        self.nodes: list[Node] = []
        self.errors: list[ParseError] = []
        self.root = self.add(root if root is not None else Element("body"))

    def add(self, node: Node) -> Node:
        node.handle = len(self.nodes)
        self.nodes.append(node)
        return node

    def node(self, handle: int) -> Node:
        return self.nodes[handle]

    def walk(self) -> Iterator[Node]:
        return self.root.iter_descendants()

    def is_detached(self, handle: int) -> bool:
        """True if the node, or any of its ancestors, has been removed."""
        node: Node | None = self.nodes[handle]
        while node is not None:
            if node is self.root:
                return False
            if node.detached or node.parent is None:
                return True
            node = node.parent
        return True  # pragma: no cover

    def eliminate(self, handle: int) -> bool:
        """Detach a node together with its subtree.

        Returns False (and does nothing) if the node was already detached.
        """
        node = self.nodes[handle]
        parent = node.parent
        if parent is None or self.is_detached(handle):
            return False
        parent.remove_child(node)
        return True

    def unwrap(self, handle: int) -> bool:
        """Replace a node with its children, keeping their order.

        Returns False (and does nothing) if the node was already detached.
        """
        node = self.nodes[handle]
        parent = node.parent
        if parent is None or self.is_detached(handle):
            return False

        moved = node.children
        node.children = []
        for child in moved:
            child.parent = parent
        # Splice in one step; inserting children one at a time is quadratic.
        idx = parent.children.index(node)
        parent.children[idx : idx + 1] = moved
        node.parent = None
        node.detached = True
        return True
