"""The two push_swap stacks, their eleven operations and the log of moves made."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass
class Element:
    """One number on a stack, with its rank once ranks are assigned (-1 before)."""

    value: int
    index: int = -1


class Stacks:
    """Stacks ``a`` and ``b``, the top of each at position 0.

    Every operation that changes something is appended by name to ``actions``.
    A single-stack operation that has nothing to act on does nothing and is not
    recorded. The combined operations ``ss``, ``rr`` and ``rrr`` are always
    recorded.
    """

    def __init__(self, values=()):
        self.a: deque[Element] = deque(Element(value) for value in values)
        self.b: deque[Element] = deque()
        self.actions: list[str] = []

    def _stack(self, stack: str) -> deque[Element]:
        if stack == "a":
            return self.a
        if stack == "b":
            return self.b
        raise ValueError(f"unknown stack {stack!r}; expected 'a' or 'b'")

    def _record(self, name: str | None) -> None:
        if name:
            self.actions.append(name)

    def _swap(self, stack: deque[Element], name: str | None) -> None:
        if len(stack) < 2:
            return
        self._record(name)
        stack[0], stack[1] = stack[1], stack[0]

    def _push(self, source: deque[Element], target: deque[Element], name: str) -> None:
        if not source:
            return
        self._record(name)
        target.appendleft(source.popleft())

    def _rotate(self, stack: deque[Element], name: str | None) -> None:
        if len(stack) < 2:
            return
        self._record(name)
        stack.rotate(-1)

    def _rev_rotate(self, stack: deque[Element], name: str | None) -> None:
        if len(stack) < 2:
            return
        self._record(name)
        stack.rotate(1)

    def sa(self) -> None:
        """Swap the two top elements of a."""
        self._swap(self.a, "sa")

    def sb(self) -> None:
        """Swap the two top elements of b."""
        self._swap(self.b, "sb")

    def ss(self) -> None:
        """Swap the tops of a and b at once."""
        self._record("ss")
        self._swap(self.a, None)
        self._swap(self.b, None)

    def pa(self) -> None:
        """Move the top of b onto a."""
        self._push(self.b, self.a, "pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        self._push(self.a, self.b, "pb")

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        self._rotate(self.a, "ra")

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        self._rotate(self.b, "rb")

    def rr(self) -> None:
        """Rotate a and b at once."""
        self._record("rr")
        self._rotate(self.a, None)
        self._rotate(self.b, None)

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        self._rev_rotate(self.a, "rra")

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        self._rev_rotate(self.b, "rrb")

    def rrr(self) -> None:
        """Reverse-rotate a and b at once."""
        self._record("rrr")
        self._rev_rotate(self.a, None)
        self._rev_rotate(self.b, None)

    def rotate_up(self, stack: str, count: int) -> None:
        """Rotate ``stack`` ('a' or 'b') upward ``count`` times."""
        target = self._stack(stack)
        name = "r" + stack
        for _ in range(count):
            self._rotate(target, name)

    def rotate_down(self, stack: str, count: int) -> None:
        """Reverse-rotate ``stack`` ('a' or 'b') ``count`` times."""
        target = self._stack(stack)
        name = "rr" + stack
        for _ in range(count):
            self._rev_rotate(target, name)

    def values(self, stack: str) -> list[int]:
        """The values of ``stack`` ('a' or 'b'), top first."""
        return [element.value for element in self._stack(stack)]