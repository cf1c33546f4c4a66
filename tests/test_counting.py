import pytest

from algosuite.counting import (
    climb_stairs,
    construct_distanced_sequence,
    num_trees,
    punishment_number,
)


@pytest.mark.parametrize("n", [0, 1, 2])
def test_climb_stairs_small(n):
    assert climb_stairs(n) == n


@pytest.mark.parametrize("n", range(3, 25))
def test_climb_stairs_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


@pytest.mark.parametrize("n", [0, 1])
def test_num_trees_base(n):
    assert num_trees(n) == 1


def test_num_trees_three():
    assert num_trees(3) == 5


def test_num_trees_negative():
    assert num_trees(-2) == 0


@pytest.mark.parametrize("n", range(2, 12))
def test_num_trees_recurrence(n):
    assert num_trees(n) == sum(num_trees(i) * num_trees(n - 1 - i) for i in range(n))


def test_distanced_sequence_three():
    assert construct_distanced_sequence(3) == [3, 1, 2, 3, 2]


@pytest.mark.parametrize("n", range(1, 9))
def test_distanced_sequence_is_valid(n):
    sequence = construct_distanced_sequence(n)
    assert len(sequence) == 2 * n - 1
    assert sequence[0] == n
    assert sequence.count(1) == 1
    for value in range(2, n + 1):
        positions = [i for i, item in enumerate(sequence) if item == value]
        assert len(positions) == 2
        assert positions[1] - positions[0] == value


def test_distanced_sequence_rejects_zero():
    with pytest.raises(ValueError):
        construct_distanced_sequence(0)


def test_punishment_number_ten():
    assert punishment_number(10) == 182


@pytest.mark.parametrize("n", [1, 9, 10, 36])
def test_punishment_number_includes(n):
    assert punishment_number(n) - punishment_number(n - 1) == n * n


@pytest.mark.parametrize("n", [2, 3, 8, 11, 35])
def test_punishment_number_excludes(n):
    assert punishment_number(n) == punishment_number(n - 1)