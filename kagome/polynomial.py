"""Homogeneous polynomials in x, y and z stored as coefficient matrices."""

from __future__ import annotations

from numbers import Real

import numpy as np


def _monomial(x_power: int, y_power: int, z_power: int) -> str:
    parts = []
    for variable, power in zip("xyz", (x_power, y_power, z_power)):
        if power > 1:
            parts.append(f"{variable}^{power}")
        elif power == 1:
            parts.append(variable)
    return "".join(parts)


class Polynomial:
    """Homogeneous polynomial of degree ``n`` in x, y and z.

    ``coefficients[i, j]`` is the coefficient of x^i y^j z^(n - i - j);
    only entries with ``i + j <= n`` carry meaning.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, coefficients) -> None:
        matrix = np.array(coefficients, dtype=float)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1] or matrix.shape[0] == 0:
            raise ValueError("coefficients must form a non-empty square matrix")
        self.coefficients = matrix

    @classmethod
    def zero(cls, degree: int) -> "Polynomial":
        """Return the zero polynomial of the given degree."""
        if degree < 0:
            raise ValueError("degree cannot be negative")
        return cls(np.zeros((degree + 1, degree + 1)))

    @property
    def degree(self) -> int:
        return self.coefficients.shape[0] - 1

    def _is_zero(self) -> bool:
        return not self.coefficients.any()

    def _copy(self) -> "Polynomial":
        return Polynomial(self.coefficients)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        if self.degree != other.degree:
            return self._is_zero() and other._is_zero()
        return bool(np.array_equal(self.coefficients, other.coefficients))

    def __iadd__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        if self.degree != other.degree:
            if self._is_zero():
                self.coefficients = other.coefficients.copy()
            elif not other._is_zero():
                raise ValueError("Cannot add two polynomials of different degrees")
        else:
            self.coefficients = self.coefficients + other.coefficients
        return self

    def __add__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = self._copy()
        result += other
        return result

    def __isub__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        if self.coefficients.shape != other.coefficients.shape:
            raise ValueError("Cannot subtract two polynomials of different degrees")
        self.coefficients = self.coefficients - other.coefficients
        return self

    def __sub__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        result = self._copy()
        result -= other
        return result

    def _product(self, other: "Polynomial") -> "Polynomial":
        degree = self.degree + other.degree
        result = np.zeros((degree + 1, degree + 1))
        span = other.degree + 1
        for (k, l), value in np.ndenumerate(self.coefficients):
            if value:
                result[k:k + span, l:l + span] += value * other.coefficients
        index = np.arange(degree + 1)
        result[np.add.outer(index, index) > degree] = 0.0
        return Polynomial(result)

    def __mul__(self, other):
        if isinstance(other, Polynomial):
            return self._product(other)
        if isinstance(other, Real):
            return Polynomial(self.coefficients * float(other))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Polynomial(float(other) * self.coefficients)
        return NotImplemented

    def __imul__(self, other):
        if isinstance(other, Polynomial):
            self.coefficients = self._product(other).coefficients
            return self
        if isinstance(other, Real):
            self.coefficients = self.coefficients * float(other)
            return self
        return NotImplemented

    def __str__(self) -> str:
        n = self.degree
        terms = []
        for i in range(n + 1):
            for j in range(n + 1 - i):
                value = self.coefficients[i, j]
                if value != 0.0:
                    prefix = "" if value == 1 else f"{value:f}"
                    terms.append(prefix + _monomial(i, j, n - i - j))
        return " + ".join(terms) if terms else "0"

    def __repr__(self) -> str:
        return f"Polynomial({self.coefficients.tolist()!r})"