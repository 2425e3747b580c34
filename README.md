# kagome

Counts arrow configurations obeying the ice rule on a kagome lattice using
transfer matrices. A kagome strip is built as the product of a "square"
transfer matrix and a "decoupled" one, each indexed by the arrow states of
one column of `dim` arrows (1 = left, 0 = right). The matrices have size
`2**dim`, and the decoupled layer needs an even, positive `dim`.

Two kinds of result are available:

- **Polynomial** (the default): each transfer-matrix entry is a homogeneous
  polynomial in `x`, `y`, `z` that records how many vertices of each type a
  transition uses, and the trace of the product matrix is printed as a
  polynomial.
- **Numeric**: the kagome transfer matrix is raised to the power `dim` and
  its trace is reported as the number of states, together with the entropy
  `log(trace) * 2 / 3 / dim²`, the largest eigenvalue and its eigenvector
  (found by power iteration), and the time each step took in milliseconds.

## Installation

```
pip install .
```

## Command line

```
kagome 4
kagome 4 --transfer
kagome
```

`kagome DIM` prints the trace of the polynomial kagome transfer matrix for a
column of `DIM` arrows. With `--transfer` it prints the numeric report
instead. If `DIM` is left out, the program asks for it on standard input.
A dimension that is not a positive integer, or an odd one, is reported as
a usage error.

## Library use

```python
from kagome.lattice import (
    count_sq_states, count_dc_states, gen_transfer,
    count_sq_poly, count_dc_poly, gen_poly_matrix,
    poly_matmul, poly_trace,
)

dim = 4
square = gen_transfer(count_sq_states, dim)
decoupled = gen_transfer(count_dc_states, dim)
kagome = square @ decoupled
kagome.power(dim)
print(kagome.trace())

sq = gen_poly_matrix(count_sq_poly, dim)
dc = gen_poly_matrix(count_dc_poly, dim)
print(poly_trace(poly_matmul(sq, dc)))
```

`transfer_report(dim)` and `polynomial_report(dim)` return the text that
each kind of calculation prints. `gen_poly_matrix` returns a NumPy object
array of `Polynomial` values; `poly_matmul` and `poly_trace` work on such
arrays.

The building blocks live in their own modules:

- `kagome.state.State`: a column of arrows, stepped through every
  arrangement with a fixed number of left arrows by `begin(n)` and `next()`
  (which returns `False` once they are exhausted). It supports indexing,
  `len` and iteration. `kagome.state.arrangements(size, ones)` yields the
  arrangements as tuples in the same order.
- `kagome.polynomial.Polynomial`: a homogeneous polynomial in `x`, `y`, `z`
  held as a square coefficient matrix, where `coefficients[i, j]` belongs to
  `x^i y^j z^(n-i-j)`. `Polynomial.zero(degree)` makes a zero polynomial;
  `degree` is a property. It supports `==`, `+`, `-` and `*` (by another
  polynomial or a number). Adding polynomials of different degrees works
  only when one of them is zero; otherwise `ValueError` is raised, as it is
  for subtracting polynomials of different degrees.
- `kagome.transfer.TransferMatrix`: a square matrix indexed as `m[i, j]`,
  with a read-only `elements` view, `size`, in-place `power(n)`, `trace()`,
  matrix product `@`, and `calc_max_eigen(rng=None)`, after which
  `max_eigenvalue` and `max_eigenvector` are available.
- `kagome.timer.Timer`: a monotonic-clock stopwatch with `start()`, `end()`
  and `read(unit)`, usable as a context manager, read in whole
  `Unit.SECONDS`, `Unit.MILLISECONDS` or `Unit.MICROSECONDS`.

## Limits

The matrices are built densely, so time and memory grow as `4**dim`; the
polynomial product in particular is practical only for small dimensions.
The eigenvector from power iteration starts from a random vector, so its
value can differ between runs.

## Tests

```
pip install .[test]
pytest
```