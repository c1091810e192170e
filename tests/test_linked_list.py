import pytest

from dsakit import linked_list as ll

VALUES = [3, 5, 7]
FIVE = [1, 2, 3, 4, 5]


def test_round_trip():
    assert ll.to_list(ll.from_iterable(VALUES)) == VALUES
    assert ll.from_iterable([]) is None
    assert ll.to_list(None) == []


def test_insert_front():
    head = ll.insert_front(ll.from_iterable(VALUES), 1)
    assert ll.to_list(head) == [1, *VALUES]


def test_delete_front():
    head = ll.delete_front(ll.from_iterable(VALUES))
    assert ll.to_list(head) == VALUES[1:]


def test_delete_front_empty():
    with pytest.raises(IndexError):
        ll.delete_front(None)


def test_append_and_delete_last():
    head = ll.append(ll.from_iterable(VALUES), 1)
    assert ll.to_list(head) == [*VALUES, 1]
    head = ll.delete_last(ll.from_iterable(VALUES))
    assert ll.to_list(head) == VALUES[:-1]
    assert ll.delete_last(ll.from_iterable([9])) is None
    assert ll.to_list(ll.append(None, 4)) == [4]


def test_delete_last_empty():
    with pytest.raises(IndexError):
        ll.delete_last(None)


@pytest.mark.parametrize("pos", [1, 2, 3, 4])
def test_insert_at(pos):
    head = ll.insert_at(ll.from_iterable(VALUES), pos, 1)
    expected = VALUES[: pos - 1] + [1] + VALUES[pos - 1:]
    assert ll.to_list(head) == expected


@pytest.mark.parametrize("pos", [0, 5])
def test_insert_at_out_of_range(pos):
    with pytest.raises(IndexError):
        ll.insert_at(ll.from_iterable(VALUES), pos, 1)


@pytest.mark.parametrize("pos", [1, 2, 3])
def test_delete_at(pos):
    head = ll.delete_at(ll.from_iterable(VALUES), pos)
    assert ll.to_list(head) == VALUES[: pos - 1] + VALUES[pos:]


@pytest.mark.parametrize("pos", [0, 4])
def test_delete_at_out_of_range(pos):
    with pytest.raises(IndexError):
        ll.delete_at(ll.from_iterable(VALUES), pos)


def test_search():
    head = ll.from_iterable([1, 2, 3])
    assert ll.search(head, 2) == [2]
    assert ll.search(head, 42) == []
    assert ll.search(ll.from_iterable([5, 5]), 5) == [1, 2]


@pytest.mark.parametrize("left,right", [(2, 4), (1, 5), (1, 1), (3, 5)])
def test_reverse_between(left, right):
    head = ll.reverse_between(ll.from_iterable(FIVE), left, right)
    expected = FIVE[: left - 1] + FIVE[left - 1: right][::-1] + FIVE[right:]
    assert ll.to_list(head) == expected


def test_reverse_between_bad_range():
    with pytest.raises(ValueError):
        ll.reverse_between(ll.from_iterable(FIVE), 3, 2)
    with pytest.raises(IndexError):
        ll.reverse_between(ll.from_iterable(FIVE), 2, 6)


def test_find_merge_node():
    head1 = ll.from_iterable([1, 3, 5, 7])
    shared = head1.next.next
    head2 = ll.from_iterable([2, 4])
    head2.next.next = shared
    assert ll.find_merge_node(head1, head2) is shared


def test_find_merge_node_disjoint():
    assert ll.find_merge_node(ll.from_iterable([1]), ll.from_iterable([2])) is None


def test_remove_cycle():
    head = ll.from_iterable(FIVE)
    last = head.next.next.next.next
    last.next = head.next.next
    result = ll.remove_cycle(head)
    assert ll.to_list(result) == FIVE
    assert last.next is None


def test_remove_cycle_through_head():
    head = ll.from_iterable(VALUES)
    head.next.next.next = head
    assert ll.to_list(ll.remove_cycle(head)) == VALUES


def test_remove_cycle_without_cycle():
    head = ll.from_iterable(FIVE)
    assert ll.to_list(ll.remove_cycle(head)) == FIVE
    assert ll.remove_cycle(None) is None


@pytest.mark.parametrize("values", [[1], [1, 2], FIVE, [1, 2, 3, 4, 5, 6]])
def test_find_middle(values):
    assert ll.find_middle(ll.from_iterable(values)).data == values[len(values) // 2]


def test_find_middle_empty():
    assert ll.find_middle(None) is None


def test_merge_sorted():
    a, b = [1, 3, 5], [2, 4, 6]
    merged = ll.merge_sorted(ll.from_iterable(a), ll.from_iterable(b))
    assert ll.to_list(merged) == sorted(a + b)
    assert ll.to_list(ll.merge_sorted(None, ll.from_iterable(b))) == b
    assert ll.to_list(ll.merge_sorted(ll.from_iterable(a), None)) == a


def test_merge_sorted_prefers_first_on_ties():
    first = ll.from_iterable([2])
    second = ll.from_iterable([2])
    assert ll.merge_sorted(first, second) is first


def test_reverse():
    assert ll.to_list(ll.reverse(ll.from_iterable(FIVE))) == FIVE[::-1]
    assert ll.reverse(None) is None


@pytest.mark.parametrize(
    "values", [[1, 2, 3, 2, 1], [1, 2, 2, 1], [1, 2, 3], [1], [], [1, 2]]
)
def test_is_palindrome_keeps_list(values):
    head = ll.from_iterable(values)
    assert ll.is_palindrome(head) == (values == values[::-1])
    assert ll.to_list(head) == values


@pytest.mark.parametrize("n", [1, 2, 5])
def test_nth_from_end(n):
    assert ll.nth_from_end(ll.from_iterable(FIVE), n).data == FIVE[-n]


def test_nth_from_end_too_far():
    assert ll.nth_from_end(ll.from_iterable(FIVE), 6) is None
    assert ll.nth_from_end(None, 1) is None