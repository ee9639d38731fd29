"""The two push_swap stacks and the operations that move values between them."""

from __future__ import annotations

from collections.abc import Iterable


class PushSwapError(Exception):
    """Raised when the stacks cannot be built from the given input."""


def _as_values(values: Iterable[int] | None, name: str) -> list[int]:
    if values is None:
        return []
    result = list(values)
    for value in result:
        if isinstance(value, bool) or not isinstance(value, int):
            raise PushSwapError(f"stack {name} holds a non-integer value: {value!r}")
    return result


class StackPair:
    """Stacks ``a`` and ``b``, each a list whose first item is the top.

    Every operation that lacks the elements it needs does nothing.
    """

    def __init__(self, a: Iterable[int] | None = None, b: Iterable[int] | None = None) -> None:
        self.a = _as_values(a, "a")
        self.b = _as_values(b, "b")

    def __repr__(self) -> str:
        return f"StackPair(a={self.a!r}, b={self.b!r})"

    @staticmethod
    def _swap(stack: list[int]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _rotate(stack: list[int]) -> None:
        if len(stack) >= 2:
            stack.append(stack.pop(0))

    @staticmethod
    def _reverse_rotate(stack: list[int]) -> None:
        if len(stack) >= 2:
            stack.insert(0, stack.pop())

    def swap_a(self) -> None:
        """Swap the two top values of ``a``."""
        self._swap(self.a)

    def swap_b(self) -> None:
        """Swap the two top values of ``b``."""
        self._swap(self.b)

    def swap_both(self) -> None:
        """Swap the two top values of both stacks."""
        self._swap(self.a)
        self._swap(self.b)

    def push_a(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if self.b:
            self.a.insert(0, self.b.pop(0))

    def push_b(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if self.a:
            self.b.insert(0, self.a.pop(0))

    def rotate_a(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self._rotate(self.a)

    def rotate_b(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self._rotate(self.b)

    def rotate_both(self) -> None:
        """Rotate both stacks."""
        self._rotate(self.a)
        self._rotate(self.b)

    def reverse_rotate_a(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self._reverse_rotate(self.a)

    def reverse_rotate_b(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self._reverse_rotate(self.b)

    def reverse_rotate_both(self) -> None:
        """Reverse-rotate both stacks."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)