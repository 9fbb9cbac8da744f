"""Sorting routines for stacks of two to five numbers."""

from __future__ import annotations

from pushswap.stacks import Stacks


def sort_two(stacks: Stacks) -> None:
    """Put the two items of ``a`` in ascending order."""
    first, second = stacks.a[0], stacks.a[1]
    if first.index > second.index:
        stacks.swap_a()


def sort_three(stacks: Stacks) -> None:
    """Put the top three items of ``a`` in ascending order."""
    top, middle, bottom = (item.index for item in list(stacks.a)[:3])
    if middle > bottom > top:
        stacks.reverse_a()
        stacks.swap_a()
    elif bottom > top > middle:
        stacks.swap_a()
    elif middle > top > bottom:
        stacks.reverse_a()
    elif top > middle > bottom:
        stacks.rotate_a()
        stacks.swap_a()
    elif top > bottom > middle:
        stacks.rotate_a()


def _min_position(stacks: Stacks) -> int:
    position, _ = min(enumerate(stacks.a), key=lambda pair: pair[1].index)
    return position


def move_min_top(stacks: Stacks) -> None:
    """Bring the item with the smallest index to the top of ``a`` by the shorter way."""
    if not stacks.a:
        return
    size = len(stacks.a)
    position = _min_position(stacks)
    if position <= size // 2:
        for _ in range(position):
            stacks.rotate_a()
    else:
        for _ in range(size - position):
            stacks.reverse_a()


def sort_four_five(stacks: Stacks) -> None:
    """Sort four or five items by parking the smallest ones on ``b``."""
    if stacks.is_sorted():
        return
    while len(stacks.a) > 3:
        move_min_top(stacks)
        stacks.push_b()
    sort_three(stacks)
    while stacks.b:
        stacks.push_a()