"""Immutable trees, forests, and cursors for ordered traversal.

A forest is flattened once into an :class:`Arena` that records, per node,
the indices of its parent, first and last child, and neighbouring siblings.
All roots of the forest are siblings in the arena, so a :class:`Location`
cursor can walk across tree boundaries without rebuilding any structure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterator, Sequence, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Tree(Generic[T]):
    """A labelled node with an ordered tuple of child trees."""

    label: T
    children: tuple[Tree[T], ...] = ()

    def map(self, fn: Callable[[T], U]) -> Tree[U]:
        """Apply ``fn`` to every label, keeping the shape of the tree."""
        return Tree(fn(self.label), tuple(child.map(fn) for child in self.children))

    def labels(self) -> Iterator[T]:
        """Yield labels in pre-order."""
        stack: list[Tree[T]] = [self]
        while stack:
            tree = stack.pop()
            yield tree.label
            stack.extend(reversed(tree.children))

    def location(self) -> Location[T]:
        """Cursor at the root of this tree alone."""
        return Arena.from_forest([self]).location(0)


Forest = list[Tree[T]]


class Arena(Generic[T]):
    """Flat, index-addressed storage of a forest in pre-order."""

    __slots__ = (
        "_first_children",
        "_last_children",
        "_next_siblings",
        "_parents",
        "_prev_siblings",
        "_trees",
    )

    def __init__(self) -> None:
        self._trees: list[Tree[T]] = []
        self._parents: list[int | None] = []
        self._first_children: list[int | None] = []
        self._last_children: list[int | None] = []
        self._next_siblings: list[int | None] = []
        self._prev_siblings: list[int | None] = []

    @classmethod
    def from_forest(cls, forest: Sequence[Tree[T]]) -> Arena[T]:
        """Flatten a forest, numbering nodes in pre-order."""
        arena: Arena[T] = cls()
        stack: list[tuple[Tree[T], int | None]] = [(tree, None) for tree in reversed(forest)]
        last_child: dict[int | None, int] = {}

        while stack:
            tree, parent = stack.pop()
            index = len(arena._trees)
            previous = last_child.get(parent)

            arena._trees.append(tree)
            arena._parents.append(parent)
            arena._first_children.append(None)
            arena._last_children.append(None)
            arena._next_siblings.append(None)
            arena._prev_siblings.append(previous)

            if previous is not None:
                arena._next_siblings[previous] = index
            elif parent is not None:
                arena._first_children[parent] = index
            if parent is not None:
                arena._last_children[parent] = index
            last_child[parent] = index

            stack.extend((child, index) for child in reversed(tree.children))

        return arena

    def __len__(self) -> int:
        return len(self._trees)

    def __iter__(self) -> Iterator[Location[T]]:
        return (Location(self, index) for index in range(len(self._trees)))

    def location(self, index: int) -> Location[T]:
        """Cursor at ``index``.

        Raises:
            IndexError: If no node has that index.
        """
        if not 0 <= index < len(self._trees):
            raise IndexError(f"No node at index {index} (arena holds {len(self._trees)})")
        return Location(self, index)

    def roots(self) -> list[Location[T]]:
        """Cursors at every root, in forest order."""
        roots: list[Location[T]] = []
        current: int | None = 0 if self._trees else None
        while current is not None:
            roots.append(Location(self, current))
            current = self._next_siblings[current]
        return roots

    def find(self, predicate: Callable[[T], bool]) -> Location[T] | None:
        """First location in pre-order whose label satisfies ``predicate``."""
        for index, tree in enumerate(self._trees):
            if predicate(tree.label):
                return Location(self, index)
        return None

    def _at(self, index: int | None) -> Location[T] | None:
        return None if index is None else Location(self, index)


@dataclass(frozen=True)
class Location(Generic[T]):
    """Cursor into an arena: a node index plus the arena it addresses."""

    arena: Arena[T]
    index: int

    @classmethod
    def forest(cls, forest: Sequence[Tree[T]]) -> Location[T] | None:
        """Cursor at the first root of a forest, or None for an empty forest."""
        if not forest:
            return None
        return Arena.from_forest(forest).location(0)

    @property
    def tree(self) -> Tree[T]:
        return self.arena._trees[self.index]

    @property
    def label(self) -> T:
        return self.tree.label

    @property
    def parent(self) -> Location[T] | None:
        return self.arena._at(self.arena._parents[self.index])

    @property
    def first_child(self) -> Location[T] | None:
        return self.arena._at(self.arena._first_children[self.index])

    @property
    def last_child(self) -> Location[T] | None:
        return self.arena._at(self.arena._last_children[self.index])

    @property
    def next_sibling(self) -> Location[T] | None:
        return self.arena._at(self.arena._next_siblings[self.index])

    @property
    def prev_sibling(self) -> Location[T] | None:
        return self.arena._at(self.arena._prev_siblings[self.index])

    @property
    def children(self) -> list[Location[T]]:
        children: list[Location[T]] = []
        child = self.first_child
        while child is not None:
            children.append(child)
            child = child.next_sibling
        return children

    @property
    def next(self) -> Location[T] | None:
        """Pre-order successor across the whole forest."""
        child = self.arena._first_children[self.index]
        if child is not None:
            return Location(self.arena, child)
        current: int | None = self.index
        while current is not None:
            sibling = self.arena._next_siblings[current]
            if sibling is not None:
                return Location(self.arena, sibling)
            current = self.arena._parents[current]
        return None

    @property
    def prev(self) -> Location[T] | None:
        """Pre-order predecessor across the whole forest."""
        sibling = self.arena._prev_siblings[self.index]
        if sibling is None:
            return self.parent
        current = sibling
        last = self.arena._last_children[current]
        while last is not None:
            current = last
            last = self.arena._last_children[current]
        return Location(self.arena, current)

    @property
    def ancestors(self) -> list[Location[T]]:
        """Ancestors from the root down, excluding this location."""
        ancestors: list[Location[T]] = []
        current = self.parent
        while current is not None:
            ancestors.append(current)
            current = current.parent
        ancestors.reverse()
        return ancestors

    @property
    def root(self) -> Location[T]:
        ancestors = self.ancestors
        return ancestors[0] if ancestors else self

    @property
    def depth(self) -> int:
        return len(self.ancestors)

    @property
    def is_root(self) -> bool:
        return self.arena._parents[self.index] is None

    @property
    def is_leaf(self) -> bool:
        return self.arena._first_children[self.index] is None
