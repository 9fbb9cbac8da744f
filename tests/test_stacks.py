import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.stacks import Item, Stacks


def values_of(stack):
    return [item.value for item in stack]


def test_new_stacks_hold_values_in_order():
    stacks = Stacks([3, 1, 2])
    assert values_of(stacks.a) == [3, 1, 2]
    assert list(stacks.b) == []
    assert stacks.moves == []
    assert all(item.index == -1 for item in stacks.a)


def test_item_defaults_to_unassigned_index():
    assert Item(7) == Item(7, -1)


def test_swap_a_exchanges_top_two_with_indices():
    stacks = Stacks([5, 9, 1])
    stacks.assign_indices()
    top_index = stacks.a[0].index
    second_index = stacks.a[1].index
    stacks.swap_a()
    assert values_of(stacks.a) == [9, 5, 1]
    assert stacks.a[0].index == second_index
    assert stacks.a[1].index == top_index
    assert stacks.moves == ["sa"]


def test_swap_a_without_record():
    stacks = Stacks([5, 9])
    stacks.swap_a(False)
    assert values_of(stacks.a) == [9, 5]
    assert stacks.moves == []


@pytest.mark.parametrize("values", [[], [4]])
def test_swap_a_on_short_stack_does_nothing(values):
    stacks = Stacks(values)
    stacks.swap_a()
    assert values_of(stacks.a) == values
    assert stacks.moves == []


def test_push_b_and_push_a():
    stacks = Stacks([1, 2, 3])
    stacks.push_b()
    stacks.push_b()
    assert values_of(stacks.a) == [3]
    assert values_of(stacks.b) == [2, 1]
    stacks.push_a()
    assert values_of(stacks.a) == [2, 3]
    assert values_of(stacks.b) == [1]
    assert stacks.moves == ["pb", "pb", "pa"]


def test_push_from_empty_is_not_recorded():
    stacks = Stacks([1])
    stacks.push_a()
    assert values_of(stacks.a) == [1]
    assert stacks.moves == []


def test_rotate_a_moves_top_to_bottom():
    stacks = Stacks([1, 2, 3])
    stacks.rotate_a()
    assert values_of(stacks.a) == [2, 3, 1]
    assert stacks.moves == ["ra"]


def test_reverse_a_moves_bottom_to_top():
    stacks = Stacks([1, 2, 3])
    stacks.reverse_a()
    assert values_of(stacks.a) == [3, 1, 2]
    assert stacks.moves == ["rra"]


def test_b_operations():
    stacks = Stacks([1, 2, 3])
    for _ in range(3):
        stacks.push_b()
    assert values_of(stacks.b) == [3, 2, 1]
    stacks.rotate_b()
    assert values_of(stacks.b) == [2, 1, 3]
    stacks.reverse_b()
    assert values_of(stacks.b) == [3, 2, 1]
    stacks.swap_b()
    assert values_of(stacks.b) == [2, 3, 1]
    assert stacks.moves[-3:] == ["rb", "rrb", "sb"]


def test_combined_operations_record_once():
    stacks = Stacks([1, 2, 3, 4])
    stacks.push_b()
    stacks.push_b()
    stacks.moves.clear()
    stacks.rotate_both()
    stacks.reverse_both()
    stacks.swap_both()
    assert stacks.moves == ["rr", "rrr", "ss"]
    assert values_of(stacks.a) == [4, 3]
    assert values_of(stacks.b) == [1, 2]


def test_combined_operations_record_even_when_stacks_are_short():
    stacks = Stacks([1])
    stacks.rotate_both()
    stacks.reverse_both()
    stacks.swap_both()
    assert values_of(stacks.a) == [1]
    assert stacks.moves == ["rr", "rrr", "ss"]


def test_assign_indices_gives_ranks():
    stacks = Stacks([42, -7, 0])
    stacks.assign_indices()
    assert [item.index for item in stacks.a] == [2, 0, 1]


def test_assign_indices_single_item():
    stacks = Stacks([100])
    stacks.assign_indices()
    assert stacks.a[0].index == 0


def test_is_sorted():
    ascending = Stacks([1, 2, 3])
    ascending.assign_indices()
    assert ascending.is_sorted()
    mixed = Stacks([2, 1, 3])
    mixed.assign_indices()
    assert not mixed.is_sorted()


def test_empty_stack_is_sorted():
    assert Stacks([]).is_sorted()


@given(st.lists(st.integers(), unique=True, max_size=30))
def test_assign_indices_is_a_permutation_matching_order(values):
    stacks = Stacks(values)
    stacks.assign_indices()
    indices = [item.index for item in stacks.a]
    assert sorted(indices) == list(range(len(values)))
    by_index = sorted(stacks.a, key=lambda item: item.index)
    assert values_of(by_index) == sorted(values)


@given(st.lists(st.integers(), unique=True, min_size=2, max_size=20))
def test_rotate_then_reverse_restores(values):
    stacks = Stacks(values)
    stacks.rotate_a()
    stacks.reverse_a()
    assert values_of(stacks.a) == values


@given(st.lists(st.integers(), unique=True, max_size=20))
def test_rotating_full_length_restores(values):
    stacks = Stacks(values)
    for _ in values:
        stacks.rotate_a(False)
    assert values_of(stacks.a) == values
    assert stacks.moves == []


@given(st.lists(st.integers(), unique=True, max_size=20))
def test_push_all_and_back_restores(values):
    stacks = Stacks(values)
    for _ in values:
        stacks.push_b()
    assert values_of(stacks.b) == values[::-1]
    for _ in values:
        stacks.push_a()
    assert values_of(stacks.a) == values
    assert len(stacks.moves) == 2 * len(values)


@given(st.lists(st.integers(), unique=True, max_size=20))
def test_sorted_input_is_sorted(values):
    stacks = Stacks(sorted(values))
    stacks.assign_indices()
    assert stacks.is_sorted()