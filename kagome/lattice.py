"""Transfer matrices for arrow configurations on the square and kagome lattices."""

from __future__ import annotations

import argparse
import math
import operator
from functools import reduce
from typing import Callable, Iterator, Sequence

import numpy as np

from .polynomial import Polynomial
from .state import arrangements
from .timer import Timer, Unit
from .transfer import TransferMatrix

Column = Sequence[int]

_ODD_DIMENSION = (
    "the dimension must be positive and even to build the matrix "
    "for non-interacting atoms"
)


def _paired(in_state: Column, out_state: Column) -> tuple[tuple[int, ...], tuple[int, ...]]:
    incoming, outgoing = tuple(in_state), tuple(out_state)
    if len(incoming) != len(outgoing):
        raise ValueError("states must have the same size")
    return incoming, outgoing


def _dc_nodes(in_state: Column, out_state: Column) -> Iterator[tuple[int, int, int, int]]:
    """Yield each decoupled node as (in_k, in_k+1, out_k-1, out_k), wrapping at the edge."""
    incoming, outgoing = _paired(in_state, out_state)
    if not incoming or len(incoming) % 2:
        raise ValueError(_ODD_DIMENSION)
    before = outgoing[-1:] + outgoing[1:-1:2]
    return zip(incoming[0::2], incoming[1::2], before, outgoing[0::2])


def count_sq_states(in_state: Column, out_state: Column) -> float:
    """Number of square-lattice vertex fillings joining two columns."""
    incoming, outgoing = _paired(in_state, out_state)
    first_exchange = None
    exchange_type = None
    for before, after in zip(incoming, outgoing):
        if before != after:
            if exchange_type is None:
                first_exchange = before
            elif exchange_type == before:
                return 0.0
            exchange_type = before

    if first_exchange is None:
        return 2.0
    if first_exchange == exchange_type:
        return 0.0
    return 1.0


def count_dc_states(in_state: Column, out_state: Column) -> float:
    """1 if the decoupled layer can join the two columns, 0 otherwise."""
    allowed = all(
        (a == p and b == q) or (a == q and b == p)
        for a, b, p, q in _dc_nodes(in_state, out_state)
    )
    return 1.0 if allowed else 0.0


def count_sq_poly(in_state: Column, out_state: Column) -> Polynomial:
    """Generating polynomial of the square-lattice vertices joining two columns."""
    incoming, outgoing = _paired(in_state, out_state)
    size = len(incoming)
    changes = [index for index, (a, b) in enumerate(zip(incoming, outgoing)) if a != b]

    if not changes:
        result = Polynomial.zero(size)
        result.coefficients[size, 0] = 1
        result.coefficients[0, size] = 1
        return result

    first = changes[0]
    states_in = incoming[first]
    x_count = sum(1 for value in incoming[:first] if value == states_in)
    y_count = first - x_count

    current = states_in
    for before, after in zip(incoming[first + 1:], outgoing[first + 1:]):
        if before == after:
            if before == current:
                y_count += 1
            else:
                x_count += 1
        elif before == current:
            return Polynomial.zero(0)
        else:
            current = before

    if current == states_in:
        return Polynomial.zero(0)

    result = Polynomial.zero(size)
    result.coefficients[x_count, y_count] = 1
    return result


def count_dc_poly(in_state: Column, out_state: Column) -> Polynomial:
    """Generating polynomial of the decoupled-layer nodes joining two columns."""
    x_count = y_count = 0
    nodes = list(_dc_nodes(in_state, out_state))
    for a, b, p, q in nodes:
        if a == p:
            if b != q:
                return Polynomial.zero(0)
            if a == b:
                x_count += 1
            # otherwise the node is of z type
        elif a == q and b == p:
            y_count += 1
        else:
            return Polynomial.zero(0)

    result = Polynomial.zero(len(nodes))
    result.coefficients[x_count, y_count] = 1
    return result


def _blocks(dim: int) -> Iterator[tuple[int, int, tuple[int, ...], tuple[int, ...]]]:
    """Yield (row, column, in_state, out_state) for every pair with equal left-arrow counts."""
    offset = 0
    for ones in range(dim + 1):
        block = list(arrangements(dim, ones))
        for row, incoming in enumerate(block, offset):
            for column, outgoing in enumerate(block, offset):
                yield row, column, incoming, outgoing
        offset += len(block)


def gen_transfer(count_func: Callable[[Column, Column], float], dim: int) -> TransferMatrix:
    """Build the 2**dim transfer matrix from a per-pair counting function."""
    result = TransferMatrix(2 ** dim)
    for row, column, incoming, outgoing in _blocks(dim):
        result[row, column] = count_func(incoming, outgoing)
    return result


def gen_poly_matrix(count_func: Callable[[Column, Column], Polynomial], dim: int) -> np.ndarray:
    """Build the 2**dim matrix of polynomials from a per-pair counting function."""
    size = 2 ** dim
    result = np.empty((size, size), dtype=object)
    for index in np.ndindex(result.shape):
        result[index] = Polynomial.zero(0)
    for row, column, incoming, outgoing in _blocks(dim):
        result[row, column] = count_func(incoming, outgoing)
    return result


def poly_matmul(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Matrix product of two matrices of polynomials."""
    if a.ndim != 2 or b.ndim != 2 or a.shape[1] != b.shape[0]:
        raise ValueError("matrix dimensions do not match for multiplication")
    result = np.empty((a.shape[0], b.shape[1]), dtype=object)
    for i, j in np.ndindex(result.shape):
        products = (p * q for p, q in zip(a[i, :], b[:, j]))
        result[i, j] = reduce(operator.add, products, Polynomial.zero(0))
    return result


def poly_trace(matrix: np.ndarray) -> Polynomial:
    """Sum of the diagonal of a matrix of polynomials."""
    return reduce(operator.add, np.diagonal(matrix), Polynomial.zero(0))


def transfer_report(dim: int) -> str:
    """Compute the numeric kagome transfer matrix and describe the results."""
    timer = Timer()
    lines = []

    with timer:
        square = gen_transfer(count_sq_states, dim)
    lines.append(f"Square calculation time: {timer.read(Unit.MILLISECONDS)} ms")

    with timer:
        decoupled = gen_transfer(count_dc_states, dim)
    lines.append(f"Decoupled calculation time: {timer.read(Unit.MILLISECONDS)} ms")

    with timer:
        kagome = square @ decoupled
    lines.append(f"Matrix multiplication time: {timer.read(Unit.MILLISECONDS)} ms")

    with timer:
        kagome.power(dim)
    lines.append(f"Matrix exponentiation time: {timer.read(Unit.MILLISECONDS)} ms")

    kagome.calc_max_eigen()
    trace = kagome.trace()
    lines.append(f"Number of states: {trace:g}")
    lines.append(f"Entropy: {math.log(trace) * 2 / 3 / dim / dim}")
    lines.append(f"Max eigenvalue: {kagome.max_eigenvalue}")
    vector = ", ".join(f"{value:g}" for value in kagome.max_eigenvector)
    lines.append(f"Corresponding eigenvector: {vector};")
    return "\n".join(lines)


def polynomial_report(dim: int) -> str:
    """Trace of the kagome polynomial transfer matrix, as text."""
    square = gen_poly_matrix(count_sq_poly, dim)
    decoupled = gen_poly_matrix(count_dc_poly, dim)
    return str(poly_trace(poly_matmul(square, decoupled)))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="kagome",
        description="Count arrow configurations on a kagome lattice strip.",
    )
    parser.add_argument("dim", type=int, nargs="?", help="vertical dimension of the lattice")
    parser.add_argument(
        "--transfer",
        action="store_true",
        help="compute the numeric transfer matrix instead of the polynomial trace",
    )
    args = parser.parse_args(argv)

    dim = args.dim
    if dim is None:
        try:
            dim = int(input("Vertical dimension: "))
        except ValueError:
            parser.error("the vertical dimension must be an integer")
    if dim < 1:
        parser.error("the vertical dimension must be positive")

    try:
        report = transfer_report(dim) if args.transfer else polynomial_report(dim)
    except ValueError as exc:
        parser.error(str(exc))
    print(report)
    return 0