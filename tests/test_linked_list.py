import pytest

from algosuite.linked_list import (
    ListNode,
    build_list,
    delete_duplicates,
    delete_node,
    get_intersection_node,
    list_values,
    merge_two_lists,
    reverse_list,
    sort_list,
    swap_pairs,
)


@pytest.mark.parametrize("values", [[3, 1, 2], [7], [5, 5, -1, 0]])
def test_build_and_read_round_trip(values):
    assert list_values(build_list(values)) == values


def test_empty_list_is_none():
    assert build_list([]) is None
    assert list_values(None) == []


def test_node_iterates_values():
    head = build_list([4, 8, 15])
    assert list(head) == [4, 8, 15]


@pytest.mark.parametrize(
    "a, b",
    [([1, 2, 4], [1, 3, 4]), ([], [0]), ([], []), ([-3, 10], [-5, 2, 2, 11])],
)
def test_merge_two_lists_is_sorted_union(a, b):
    merged = merge_two_lists(build_list(a), build_list(b))
    assert list_values(merged) == sorted(a + b)


def test_merge_with_empty_returns_other_list():
    other = build_list([1, 2])
    assert merge_two_lists(None, other) is other
    assert merge_two_lists(other, None) is other


def test_merge_ties_take_second_list_first():
    first = build_list([1])
    second = build_list([1])
    merged = merge_two_lists(first, second)
    assert merged is second
    assert merged.next is first


def test_swap_pairs_even_length():
    assert list_values(swap_pairs(build_list([1, 2, 3, 4]))) == [2, 1, 4, 3]


def test_swap_pairs_odd_length_keeps_last():
    assert list_values(swap_pairs(build_list([1, 2, 3]))) == [2, 1, 3]


@pytest.mark.parametrize("values", [[], [1], [9, 8, 7, 6, 5], [1, 2, 3, 4, 5, 6]])
def test_swap_pairs_twice_restores(values):
    head = swap_pairs(swap_pairs(build_list(values)))
    assert list_values(head) == values


def test_swap_pairs_single_node_is_same_node():
    node = ListNode(42)
    assert swap_pairs(node) is node


@pytest.mark.parametrize("values", [[1, 1, 2], [1, 1, 2, 3, 3], [], [4], [2, 2, 2, 2]])
def test_delete_duplicates(values):
    result = list_values(delete_duplicates(build_list(values)))
    assert result == sorted(set(values))


@pytest.mark.parametrize(
    "values",
    [[4, 2, 1, 3], [-1, 5, 3, 4, 0], [], [1], [2, 1], [3, 3, 1, 1, 2, 2]],
)
def test_sort_list(values):
    assert list_values(sort_list(build_list(values))) == sorted(values)


def test_sort_list_keeps_nodes():
    head = build_list([3, 1, 2])
    originals = set()
    node = head
    while node is not None:
        originals.add(node)
        node = node.next
    result = sort_list(head)
    seen = set()
    while result is not None:
        seen.add(result)
        result = result.next
    assert seen == originals


def test_intersection_found():
    tail = build_list([8, 4, 5])
    head_a = ListNode(4, ListNode(1, tail))
    head_b = ListNode(5, ListNode(6, ListNode(1, tail)))
    assert get_intersection_node(head_a, head_b) is tail


def test_intersection_by_identity_not_value():
    head_a = build_list([2, 6, 4])
    head_b = build_list([2, 6, 4])
    assert get_intersection_node(head_a, head_b) is None


def test_intersection_with_empty():
    assert get_intersection_node(None, build_list([1])) is None


@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5], [1, 2], [], [7]])
def test_reverse_list(values):
    assert list_values(reverse_list(build_list(values))) == values[::-1]


def test_reverse_twice_restores():
    values = [10, 20, 30]
    assert list_values(reverse_list(reverse_list(build_list(values)))) == values


def test_delete_node_removes_value():
    values = [4, 5, 1, 9]
    head = build_list(values)
    delete_node(head.next)
    assert list_values(head) == [v for i, v in enumerate(values) if i != 1]


def test_delete_tail_node_raises():
    head = build_list([1, 2])
    with pytest.raises(ValueError):
        delete_node(head.next)