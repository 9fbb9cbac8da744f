"""Cost-driven sorting for larger stacks: each move takes the cheapest item."""

from __future__ import annotations

from collections import deque
from typing import Callable

from pushswap.small import move_min_top, sort_three
from pushswap.stacks import Item, Stacks

NOT_FOUND = -42


def get_pos(stack: deque[Item], index: int) -> int:
    """Position of the item with ``index`` in ``stack``, or ``NOT_FOUND``."""
    for position, item in enumerate(stack):
        if item.index == index:
            return position
    return NOT_FOUND


def _extreme_position(stack: deque[Item], pick: Callable) -> int:
    if not stack:
        return 0
    position, _ = pick(enumerate(stack), key=lambda pair: pair[1].index)
    return position


def get_target_in_b(stacks: Stacks, index: int) -> int:
    """Position in ``b`` that an item with ``index`` should land on top of.

    That is the largest smaller index, or the largest index when none is smaller.
    """
    smaller = [
        (item.index, position)
        for position, item in enumerate(stacks.b)
        if item.index < index
    ]
    if smaller:
        return max(smaller)[1]
    return _extreme_position(stacks.b, max)


def get_target_in_a(stacks: Stacks, index: int) -> int:
    """Position in ``a`` that an item with ``index`` should be placed above.

    That is the smallest larger index, or the smallest index when none is larger.
    """
    larger = [
        (item.index, position)
        for position, item in enumerate(stacks.a)
        if item.index > index
    ]
    if larger:
        return min(larger)[1]
    return _extreme_position(stacks.a, min)


def _rotation_cost(position: int, size: int) -> int:
    if position <= size // 2:
        return position
    return size - position


def _combined_cost(pos_a: int, size_a: int, pos_b: int, size_b: int) -> int:
    cost_a = _rotation_cost(pos_a, size_a)
    cost_b = _rotation_cost(pos_b, size_b)
    upper_a = pos_a <= size_a // 2
    upper_b = pos_b <= size_b // 2
    if upper_a == upper_b:
        return max(cost_a, cost_b) + 1
    return cost_a + cost_b + 1


def cost_to_b(stacks: Stacks, index: int) -> int:
    """Number of moves needed to push the item with ``index`` from ``a`` to ``b``."""
    pos_a = get_pos(stacks.a, index)
    pos_b = get_target_in_b(stacks, index)
    return _combined_cost(pos_a, len(stacks.a), pos_b, len(stacks.b))


def cost_to_a(stacks: Stacks, index: int) -> int:
    """Number of moves needed to push the item with ``index`` from ``b`` to ``a``."""
    pos_b = get_pos(stacks.b, index)
    pos_a = get_target_in_a(stacks, index)
    return _combined_cost(pos_a, len(stacks.a), pos_b, len(stacks.b))


def _rotate_alone_a(stacks: Stacks, pos_a: int) -> None:
    size = len(stacks.a)
    if pos_a <= size // 2:
        for _ in range(pos_a):
            stacks.rotate_a()
    else:
        for _ in range(size - pos_a):
            stacks.reverse_a()


def _rotate_alone_b(stacks: Stacks, pos_b: int) -> None:
    size = len(stacks.b)
    if pos_b <= size // 2:
        for _ in range(pos_b):
            stacks.rotate_b()
    else:
        for _ in range(size - pos_b):
            stacks.reverse_b()


def _rotate_forward(stacks: Stacks, pos_a: int, pos_b: int) -> None:
    shared = min(pos_a, pos_b)
    for _ in range(shared):
        stacks.rotate_both()
    for _ in range(pos_a - shared):
        stacks.rotate_a()
    for _ in range(pos_b - shared):
        stacks.rotate_b()


def _rotate_backward(stacks: Stacks, pos_a: int, pos_b: int) -> None:
    steps_a = len(stacks.a) - pos_a
    steps_b = len(stacks.b) - pos_b
    shared = min(steps_a, steps_b)
    for _ in range(shared):
        stacks.reverse_both()
    for _ in range(steps_a - shared):
        stacks.reverse_a()
    for _ in range(steps_b - shared):
        stacks.reverse_b()


def rotate_together(stacks: Stacks, pos_a: int, pos_b: int) -> None:
    """Bring positions ``pos_a`` and ``pos_b`` to the tops, sharing moves where possible."""
    upper_a = pos_a <= len(stacks.a) // 2
    upper_b = pos_b <= len(stacks.b) // 2
    if upper_a and upper_b:
        _rotate_forward(stacks, pos_a, pos_b)
    elif not upper_a and not upper_b:
        _rotate_backward(stacks, pos_a, pos_b)
    else:
        _rotate_alone_a(stacks, pos_a)
        _rotate_alone_b(stacks, pos_b)


def move_cheapest_to_b(stacks: Stacks) -> None:
    """Push the item of ``a`` that is cheapest to place onto ``b``."""
    if not stacks.a:
        return
    index = min(stacks.a, key=lambda item: cost_to_b(stacks, item.index)).index
    rotate_together(stacks, get_pos(stacks.a, index), get_target_in_b(stacks, index))
    stacks.push_b()


def move_cheapest_to_a(stacks: Stacks) -> None:
    """Push the item of ``b`` that is cheapest to place back onto ``a``."""
    if not stacks.b:
        return
    index = min(stacks.b, key=lambda item: cost_to_a(stacks, item.index)).index
    rotate_together(stacks, get_target_in_a(stacks, index), get_pos(stacks.b, index))
    stacks.push_a()


def turk_sort(stacks: Stacks) -> None:
    """Sort ``a`` by moving items to ``b`` and back, always taking the cheapest."""
    if stacks.is_sorted():
        return
    stacks.push_b()
    stacks.push_b()
    while len(stacks.a) > 3 and not stacks.is_sorted():
        move_cheapest_to_b(stacks)
    if len(stacks.a) == 3:
        sort_three(stacks)
    while stacks.b:
        move_cheapest_to_a(stacks)
    move_min_top(stacks)