"""Tests for the double-ended vertex list."""

import pytest

from adjgraph import EmptyListError, ErrorKind, Graph, VertexList


class TestPrimitives:
    """Tests for the head and tail primitives."""

    def test_new_list_is_empty(self) -> None:
        vlist = VertexList()
        assert len(vlist) == 0
        assert list(vlist) == []

    def test_insert_head_and_tail(self) -> None:
        vlist = VertexList()
        vlist.insert_head(1)
        vlist.insert_tail(2)
        vlist.insert_head(0)
        assert list(vlist) == [0, 1, 2]
        assert len(vlist) == 3

    def test_remove_head_and_tail(self) -> None:
        vlist = VertexList([0, 1, 2])
        assert vlist.remove_head() == 0
        assert vlist.remove_tail() == 2
        assert list(vlist) == [1]
        assert vlist.remove_tail() == 1
        assert len(vlist) == 0

    def test_peek_does_not_remove(self) -> None:
        vlist = VertexList([4, 5])
        assert vlist.peek_head() == 4
        assert vlist.peek_tail() == 5
        assert len(vlist) == 2

    @pytest.mark.parametrize("operation", ["remove_head", "remove_tail", "peek_head", "peek_tail", "pop", "dequeue"])
    def test_empty_list_raises(self, operation: str) -> None:
        vlist = VertexList()
        with pytest.raises(EmptyListError) as exc_info:
            getattr(vlist, operation)()
        assert exc_info.value.kind == ErrorKind.EMPTY

    def test_length_tracks_mixed_operations(self) -> None:
        vlist = VertexList()
        for i in range(5):
            vlist.insert_tail(i)
        vlist.remove_head()
        vlist.insert_head(9)
        vlist.remove_tail()
        assert len(vlist) == len(list(vlist)) == 4

    def test_clear(self) -> None:
        vlist = VertexList([1, 2])
        vlist.clear()
        assert len(vlist) == 0

    def test_equality(self) -> None:
        assert VertexList([1, 2]) == VertexList([1, 2])
        assert VertexList([1, 2]) != VertexList([2, 1])


class TestDisciplines:
    """Tests for stack and queue usage."""

    def test_stack_is_lifo(self) -> None:
        stack = VertexList()
        for i in range(5):
            stack.push(i)
        assert [stack.pop() for _ in range(5)] == [4, 3, 2, 1, 0]

    def test_queue_is_fifo(self) -> None:
        queue = VertexList()
        for i in range(5):
            queue.enqueue(i)
        assert [queue.dequeue() for _ in range(5)] == [0, 1, 2, 3, 4]

    def test_queue_interleaved(self) -> None:
        queue = VertexList()
        queue.enqueue(1)
        queue.enqueue(2)
        assert queue.dequeue() == 1
        queue.enqueue(3)
        assert queue.dequeue() == 2
        assert queue.dequeue() == 3


class TestFormat:
    """Tests for rendering a vertex list."""

    def test_empty(self) -> None:
        assert VertexList().format(Graph(1)) == "EMPTY LIST"

    def test_labels_head_to_tail(self) -> None:
        graph = Graph(3)
        graph.set_label(0, "a")
        graph.set_label(2, "c")
        assert VertexList([2, 1, 0]).format(graph) == "c NO LABEL a"
