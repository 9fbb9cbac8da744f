"""Choosing a sorting strategy by stack size."""

from __future__ import annotations

from typing import Iterable

from pushswap.parsing import parse_arguments
from pushswap.small import sort_four_five, sort_three, sort_two
from pushswap.stacks import Stacks
from pushswap.turk import turk_sort


def sort_stacks(stacks: Stacks) -> None:
    """Sort ``a`` with the routine suited to its size."""
    size = len(stacks.a)
    if size == 1:
        return
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size in (4, 5):
        sort_four_five(stacks)
    else:
        turk_sort(stacks)


def push_swap(args: Iterable[str]) -> list[str]:
    """Return the moves that sort the numbers given as arguments.

    Raises :class:`pushswap.parsing.ParseError` on invalid input.
    """
    stacks = parse_arguments(args)
    stacks.assign_indices()
    sort_stacks(stacks)
    return stacks.moves