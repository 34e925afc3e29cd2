"""A doubly linked tree of nodes, each carrying a data payload."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class Edge(enum.Enum):
    """Which side of a node a traversal is at."""

    START = "start"
    END = "end"


@dataclass(frozen=True)
class NodeEdge(Generic[T]):
    """One step of a traversal: entering or leaving ``node``."""

    edge: Edge
    node: "Node[T]"


class Node(Generic[T]):
    """A tree node with parent, sibling and child links."""

    __slots__ = (
        "data",
        "_parent",
        "_previous_sibling",
        "_next_sibling",
        "_first_child",
        "_last_child",
    )

    def __init__(self, data: T) -> None:
        self.data = data
        self._parent: Optional[Node[T]] = None
        self._previous_sibling: Optional[Node[T]] = None
        self._next_sibling: Optional[Node[T]] = None
        self._first_child: Optional[Node[T]] = None
        self._last_child: Optional[Node[T]] = None

    def __repr__(self) -> str:
        children = ", ".join(repr(child) for child in self.children())
        return f"Node(data={self.data!r}, children=[{children}])"

    @property
    def parent(self) -> Optional[Node[T]]:
        return self._parent

    @property
    def first_child(self) -> Optional[Node[T]]:
        return self._first_child

    @property
    def last_child(self) -> Optional[Node[T]]:
        return self._last_child

    @property
    def previous_sibling(self) -> Optional[Node[T]]:
        return self._previous_sibling

    @property
    def next_sibling(self) -> Optional[Node[T]]:
        return self._next_sibling

    def _follow(self, step: Callable[[Node[T]], Optional[Node[T]]]) -> Iterator[Node[T]]:
        node: Optional[Node[T]] = self
        while node is not None:
            following = step(node)
            yield node
            node = following

    def ancestors(self) -> Iterator[Node[T]]:
        """This node, then each ancestor up to the root."""
        return self._follow(lambda n: n._parent)

    def preceding_siblings(self) -> Iterator[Node[T]]:
        """This node, then each sibling before it."""
        return self._follow(lambda n: n._previous_sibling)

    def following_siblings(self) -> Iterator[Node[T]]:
        """This node, then each sibling after it."""
        return self._follow(lambda n: n._next_sibling)

    def children(self) -> Iterator[Node[T]]:
        """The children of this node, first to last."""
        if self._first_child is None:
            return iter(())
        return self._first_child.following_siblings()

    def reverse_children(self) -> Iterator[Node[T]]:
        """The children of this node, last to first."""
        if self._last_child is None:
            return iter(())
        return self._last_child.preceding_siblings()

    def descendants(self) -> Iterator[Node[T]]:
        """This node and all its descendants in tree order."""
        return (step.node for step in self.traverse() if step.edge is Edge.START)

    def traverse(self) -> Iterator[NodeEdge[T]]:
        """Start and end edges of this node and its descendants, in tree order."""
        pending: Optional[NodeEdge[T]] = NodeEdge(Edge.START, self)
        while pending is not None:
            current = pending
            node = current.node
            if current.edge is Edge.START:
                child = node._first_child
                pending = NodeEdge(Edge.START, child) if child else NodeEdge(Edge.END, node)
            elif node is self:
                pending = None
            elif node._next_sibling is not None:
                pending = NodeEdge(Edge.START, node._next_sibling)
            elif node._parent is not None:
                pending = NodeEdge(Edge.END, node._parent)
            else:
                pending = None
            yield current

    def reverse_traverse(self) -> Iterator[NodeEdge[T]]:
        """The edges of ``traverse`` in reverse order."""
        pending: Optional[NodeEdge[T]] = NodeEdge(Edge.END, self)
        while pending is not None:
            current = pending
            node = current.node
            if current.edge is Edge.END:
                child = node._last_child
                pending = NodeEdge(Edge.END, child) if child else NodeEdge(Edge.START, node)
            elif node is self:
                pending = None
            elif node._previous_sibling is not None:
                pending = NodeEdge(Edge.END, node._previous_sibling)
            elif node._parent is not None:
                pending = NodeEdge(Edge.START, node._parent)
            else:
                pending = None
            yield current

    def detach(self) -> None:
        """Unlink this node from its parent and siblings; children stay."""
        parent = self._parent
        previous_sibling = self._previous_sibling
        next_sibling = self._next_sibling
        self._parent = self._previous_sibling = self._next_sibling = None

        if next_sibling is not None:
            next_sibling._previous_sibling = previous_sibling
        elif parent is not None:
            parent._last_child = previous_sibling

        if previous_sibling is not None:
            previous_sibling._next_sibling = next_sibling
        elif parent is not None:
            parent._first_child = next_sibling

    def append(self, new_child: Node[T]) -> None:
        """Add ``new_child`` after the existing children."""
        new_child.detach()
        new_child._parent = self
        last_child = self._last_child
        if last_child is not None:
            new_child._previous_sibling = last_child
            last_child._next_sibling = new_child
        else:
            self._first_child = new_child
        self._last_child = new_child

    def prepend(self, new_child: Node[T]) -> None:
        """Add ``new_child`` before the existing children."""
        new_child.detach()
        new_child._parent = self
        first_child = self._first_child
        if first_child is not None:
            first_child._previous_sibling = new_child
            new_child._next_sibling = first_child
        else:
            self._last_child = new_child
        self._first_child = new_child

    def insert_after(self, new_sibling: Node[T]) -> None:
        """Place ``new_sibling`` directly after this node."""
        new_sibling.detach()
        new_sibling._parent = self._parent
        new_sibling._previous_sibling = self
        next_sibling = self._next_sibling
        if next_sibling is not None:
            next_sibling._previous_sibling = new_sibling
            new_sibling._next_sibling = next_sibling
        elif self._parent is not None:
            self._parent._last_child = new_sibling
        self._next_sibling = new_sibling

    def insert_before(self, new_sibling: Node[T]) -> None:
        """Place ``new_sibling`` directly before this node."""
        new_sibling.detach()
        new_sibling._parent = self._parent
        new_sibling._next_sibling = self
        previous_sibling = self._previous_sibling
        if previous_sibling is not None:
            new_sibling._previous_sibling = previous_sibling
            previous_sibling._next_sibling = new_sibling
        elif self._parent is not None:
            self._parent._first_child = new_sibling
        self._previous_sibling = new_sibling