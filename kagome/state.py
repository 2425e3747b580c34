"""Column states of arrows in a lattice row and their enumeration."""

from __future__ import annotations

from typing import Iterator


class State:
    """A column of arrows: 1 points left, 0 points right."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("state size cannot be negative")
        self._values = [0] * size

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._values):
            raise IndexError("state index out of range")

    def __getitem__(self, index: int) -> int:
        self._check(index)
        return self._values[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._check(index)
        self._values[index] = value

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self._values) + "]"

    def begin(self, n: int) -> None:
        """Reset to the first arrangement with ``n`` left arrows."""
        if not 0 <= n <= len(self._values):
            raise ValueError("State.begin argument cannot exceed state dimension")
        self._values = [1] * n + [0] * (len(self._values) - n)

    def next(self) -> bool:
        """Advance to the next arrangement with the same number of left arrows.

        Returns False once the arrangements are exhausted.
        """
        values = self._values
        size = len(values)
        if size == 0:
            return False
        i = size - 2
        last = values[-1]
        while i >= 0 and values[i] == last:
            i -= 1
        if i < 0:
            return False
        if last == 0:
            values[i], values[i + 1] = 0, 1
            return True

        trailing = size - i - 1
        values[size - trailing:] = [0] * trailing
        while i >= 0 and values[i] == 0:
            i -= 1
        if i < 0:
            return False
        values[i] = 0
        values[i + 1:i + 2 + trailing] = [1] * (trailing + 1)
        return True


def arrangements(size: int, ones: int) -> Iterator[tuple[int, ...]]:
    """Yield every column of ``size`` arrows with ``ones`` left arrows, in order."""
    state = State(size)
    state.begin(ones)
    yield tuple(state)
    while state.next():
        yield tuple(state)