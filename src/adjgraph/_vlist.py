"""Double-ended list of vertex references used as a stack or a queue."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from ._errors import EmptyListError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ._graph import Graph


class VertexList:
    """An ordered list of vertex indices with O(1) access at both ends.

    The list refers to vertices by index and never owns them. It can be
    driven as a stack (``push``/``pop``, both at the head) or as a queue
    (``enqueue`` at the head, ``dequeue`` at the tail).

    Example:
        >>> stack = VertexList()
        >>> stack.push(1)
        >>> stack.push(2)
        >>> stack.pop()
        2

    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[int] = ()) -> None:
        """Create a list holding ``items`` from head to tail."""
        self._items: deque[int] = deque(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from head to tail."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"VertexList({list(self._items)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VertexList):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def clear(self) -> None:
        self._items.clear()

    def insert_head(self, v: int) -> None:
        self._items.appendleft(v)

    def insert_tail(self, v: int) -> None:
        self._items.append(v)

    def remove_head(self) -> int:
        """Remove and return the vertex at the head.

        Raises:
            EmptyListError: If the list is empty.

        """
        if not self._items:
            msg = "Cannot remove from an empty vertex list"
            raise EmptyListError(msg)
        return self._items.popleft()

    def remove_tail(self) -> int:
        """Remove and return the vertex at the tail.

        Raises:
            EmptyListError: If the list is empty.

        """
        if not self._items:
            msg = "Cannot remove from an empty vertex list"
            raise EmptyListError(msg)
        return self._items.pop()

    def peek_head(self) -> int:
        """Return the vertex at the head without removing it."""
        if not self._items:
            msg = "Cannot peek into an empty vertex list"
            raise EmptyListError(msg)
        return self._items[0]

    def peek_tail(self) -> int:
        """Return the vertex at the tail without removing it."""
        if not self._items:
            msg = "Cannot peek into an empty vertex list"
            raise EmptyListError(msg)
        return self._items[-1]

    # Queue discipline: in at the head, out at the tail.
    enqueue = insert_head
    dequeue = remove_tail

    # Stack discipline: in and out at the head.
    push = insert_head
    pop = remove_head

    def format(self, graph: Graph) -> str:
        """Render the labels of the listed vertices from head to tail."""
        if not self._items:
            return "EMPTY LIST"
        names = []
        for i in self._items:
            label = graph.label(i)
            names.append(label if label is not None else "NO LABEL")
        return " ".join(names)
