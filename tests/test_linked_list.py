import pytest

from dsapractice.linked_list import LinkedList


def _example_list():
    ll = LinkedList([10])
    ll.insert_at_tail(12)
    ll.insert_at_head(15)
    ll.insert_at_position(2, 11)
    ll.insert_at_position(4, 22)
    ll.insert_at_position(1, 1)
    return ll


def test_example_sequence_renders():
    assert str(_example_list()) == "1->15->11->10->22->12->NULL"


def test_example_search():
    assert _example_list().search(22) == 5


def test_example_head_and_tail():
    ll = _example_list()
    assert ll.head == 1
    assert ll.tail == 12


def test_delete_last_updates_tail():
    ll = _example_list()
    before = list(ll)
    assert ll.delete(6) == before[-1]
    assert list(ll) == before[:-1]
    assert ll.tail == before[-2]


def test_delete_first_updates_head():
    ll = LinkedList([4, 5, 6])
    assert ll.delete(1) == 4
    assert ll.head == 5
    assert list(ll) == [5, 6]


def test_delete_middle():
    ll = LinkedList([4, 5, 6])
    assert ll.delete(2) == 5
    assert list(ll) == [4, 6]
    assert len(ll) == 2


def test_delete_only_element_empties_list():
    ll = LinkedList([7])
    ll.delete(1)
    assert len(ll) == 0
    assert str(ll) == "NULL"
    with pytest.raises(IndexError):
        ll.tail


def test_constructor_round_trip():
    values = [3, 1, 4, 1, 5]
    ll = LinkedList(values)
    assert list(ll) == values
    assert len(ll) == len(values)


def test_insert_at_end_position_becomes_tail():
    ll = LinkedList([1, 2])
    ll.insert_at_position(3, 9)
    assert ll.tail == 9
    assert list(ll) == [1, 2, 9]


def test_insert_into_empty_list():
    ll = LinkedList()
    ll.insert_at_tail(8)
    assert ll.head == ll.tail == 8


def test_search_missing_returns_none():
    assert LinkedList([1, 2, 3]).search(42) is None


def test_search_returns_first_match():
    assert LinkedList([5, 6, 5]).search(5) == 1


@pytest.mark.parametrize("position", [0, 4, -1])
def test_insert_out_of_range(position):
    ll = LinkedList([1, 2])
    with pytest.raises(IndexError):
        ll.insert_at_position(position, 3)
    assert list(ll) == [1, 2]


@pytest.mark.parametrize("position", [0, 3])
def test_delete_out_of_range(position):
    with pytest.raises(IndexError):
        LinkedList([1, 2]).delete(position)


def test_empty_head_raises():
    with pytest.raises(IndexError):
        LinkedList().head