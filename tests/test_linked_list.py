import pytest

from labstructs.linked_list import LinkedList


def test_source_sequence():
    linked = LinkedList()
    linked.insert(1)
    linked.insert(2)
    linked.insert(3)
    assert linked.first().data == 3

    linked.insert_after(linked.first(), 4)
    assert linked.first().next.data == 4

    linked.erase_first()
    assert linked.first().data == 4
    assert list(linked) == [4, 2, 1]
    assert len(linked) == 3


def test_copy_is_independent():
    linked = LinkedList([4, 2, 1])
    copy = linked.copy()
    copy.erase_first()
    copy.insert(9)
    assert list(linked) == [4, 2, 1]
    assert list(copy) == [9, 2, 1]


def test_prev_links():
    linked = LinkedList([1, 2, 3])
    last = linked.first().next.next
    assert last.data == 3
    assert last.prev.data == 2
    assert last.prev.prev.data == 1
    assert linked.first().prev is None


def test_insert_after_tail_appends():
    linked = LinkedList([1, 2])
    tail = linked.first().next
    linked.insert_after(tail, 3)
    assert list(linked) == [1, 2, 3]
    linked.insert_after(tail.next, 4)
    assert list(linked) == [1, 2, 3, 4]


def test_erase_next_middle_and_tail():
    linked = LinkedList([1, 2, 3])
    head = linked.first()
    following = linked.erase_next(head)
    assert following.data == 3
    assert following.prev is head
    assert list(linked) == [1, 3]
    assert linked.erase_next(head) is None
    assert list(linked) == [1]
    assert linked.erase_next(head) is None
    linked.insert_after(head, 5)
    assert list(linked) == [1, 5]


def test_erase_first_until_empty():
    linked = LinkedList([1, 2])
    assert linked.erase_first().data == 2
    assert linked.erase_first() is None
    assert linked.first() is None
    assert linked.erase_first() is None
    assert len(linked) == 0


def test_foreign_item_rejected():
    one = LinkedList([1])
    other = LinkedList([2])
    with pytest.raises(ValueError):
        one.insert_after(other.first(), 3)
    with pytest.raises(ValueError):
        one.erase_next(other.first())