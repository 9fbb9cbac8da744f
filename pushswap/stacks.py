"""The two stacks and the operations allowed on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable


@dataclass
class Item:
    """One number on a stack, with its rank among all numbers (-1 until assigned)."""

    value: int
    index: int = -1


class Stacks:
    """Stacks ``a`` and ``b``; the left end of each deque is the top.

    Every operation that is recorded appends its name to ``moves``.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: deque[Item] = deque(Item(value) for value in values)
        self.b: deque[Item] = deque()
        self.moves: list[str] = []

    def __repr__(self) -> str:
        return (
            f"Stacks(a={[item.value for item in self.a]}, "
            f"b={[item.value for item in self.b]})"
        )

    def _record(self, name: str) -> None:
        self.moves.append(name)

    @staticmethod
    def _swap(stack: deque[Item]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: deque[Item]) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(-1)
        return True

    @staticmethod
    def _reverse(stack: deque[Item]) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(1)
        return True

    def swap_a(self, record: bool = True) -> None:
        """Swap the top two items of ``a``."""
        if self._swap(self.a) and record:
            self._record("sa")

    def swap_b(self, record: bool = True) -> None:
        """Swap the top two items of ``b``."""
        if self._swap(self.b) and record:
            self._record("sb")

    def swap_both(self) -> None:
        """Swap the tops of both stacks at once."""
        self.swap_a(False)
        self.swap_b(False)
        self._record("ss")

    def push_a(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._record("pa")

    def push_b(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._record("pb")

    def rotate_a(self, record: bool = True) -> None:
        """Move the top of ``a`` to its bottom."""
        if self._rotate(self.a) and record:
            self._record("ra")

    def rotate_b(self, record: bool = True) -> None:
        """Move the top of ``b`` to its bottom."""
        if self._rotate(self.b) and record:
            self._record("rb")

    def rotate_both(self) -> None:
        """Rotate both stacks at once."""
        self.rotate_a(False)
        self.rotate_b(False)
        self._record("rr")

    def reverse_a(self, record: bool = True) -> None:
        """Move the bottom of ``a`` to its top."""
        if self._reverse(self.a) and record:
            self._record("rra")

    def reverse_b(self, record: bool = True) -> None:
        """Move the bottom of ``b`` to its top."""
        if self._reverse(self.b) and record:
            self._record("rrb")

    def reverse_both(self) -> None:
        """Reverse-rotate both stacks at once."""
        self.reverse_a(False)
        self.reverse_b(False)
        self._record("rrr")

    def assign_indices(self) -> None:
        """Give each item in ``a`` its rank in ascending order of value."""
        ranks: dict[int, int] = {}
        for rank, value in enumerate(sorted(item.value for item in self.a)):
            ranks.setdefault(value, rank)
        for item in self.a:
            item.index = ranks[item.value]

    def is_sorted(self) -> bool:
        """Whether the indices in ``a`` never decrease from top to bottom."""
        return all(
            upper.index <= lower.index
            for upper, lower in zip(self.a, list(self.a)[1:])
        )