"""Real-valued transfer matrices with power iteration for the leading eigenpair."""

from __future__ import annotations

import numpy as np


class TransferMatrix:
    """Square transfer matrix, initially zero."""

    def __init__(self, size: int) -> None:
        self._elements = np.zeros((size, size))
        self._max_eigenvalue: float | None = None
        self._max_eigenvector: np.ndarray | None = None

    def _check(self, index) -> tuple[int, int]:
        i, j = index
        rows, cols = self._elements.shape
        if not (0 <= i < rows and 0 <= j < cols):
            raise ValueError("Accessing out of range element")
        return i, j

    def __getitem__(self, index) -> float:
        return float(self._elements[self._check(index)])

    def __setitem__(self, index, value: float) -> None:
        self._elements[self._check(index)] = value

    @property
    def elements(self) -> np.ndarray:
        """Read-only view of the matrix entries."""
        view = self._elements.view()
        view.flags.writeable = False
        return view

    @property
    def max_eigenvalue(self) -> float:
        if self._max_eigenvalue is None:
            raise RuntimeError("the leading eigenpair has not been calculated")
        return self._max_eigenvalue

    @property
    def max_eigenvector(self) -> np.ndarray:
        if self._max_eigenvector is None:
            raise RuntimeError("the leading eigenpair has not been calculated")
        return self._max_eigenvector.copy()

    @property
    def size(self) -> int:
        return self._elements.shape[0]

    def power(self, n: int) -> None:
        """Raise the matrix to the ``n``-th power in place; 0 and 1 leave it unchanged."""
        if n < 0:
            raise ValueError("exponent cannot be negative")
        if n > 1:
            self._elements = np.linalg.matrix_power(self._elements, n)

    def trace(self) -> float:
        """Sum of the diagonal entries."""
        return float(self._elements.diagonal().sum())

    def calc_max_eigen(self, rng: np.random.Generator | None = None) -> None:
        """Find the dominant eigenvalue and eigenvector by power iteration."""
        if self.size == 0:
            raise ValueError("cannot iterate on an empty matrix")
        rng = np.random.default_rng() if rng is None else rng

        vector = rng.integers(0, 2, self.size).astype(float)
        while not vector.any():
            vector = rng.integers(0, 2, self.size).astype(float)
        vector /= np.linalg.norm(vector)

        eigenvalue = 0.0
        while True:
            total = 0.0
            for _ in range(3):
                previous = vector
                vector = self._elements @ vector
                eigenvalue = float(np.linalg.norm(vector))
                if eigenvalue == 0.0:
                    raise ValueError("power iteration collapsed to the zero vector")
                vector = vector / eigenvalue
                total += float(np.linalg.norm(previous - vector))
            if not total > 0.01:
                break

        self._max_eigenvalue = eigenvalue
        self._max_eigenvector = vector

    def __matmul__(self, other: "TransferMatrix") -> "TransferMatrix":
        if not isinstance(other, TransferMatrix):
            return NotImplemented
        result = TransferMatrix(self.size)
        result._elements = self._elements @ other._elements
        return result

    def __str__(self) -> str:
        cells = [[f"{value:g}" for value in row] for row in self._elements]
        width = max((len(cell) for row in cells for cell in row), default=0)
        return "\n".join(" ".join(cell.rjust(width) for cell in row) for row in cells)