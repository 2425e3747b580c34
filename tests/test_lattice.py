import itertools
import math
from collections import Counter

import numpy as np
import pytest

from kagome.lattice import (
    count_dc_poly,
    count_dc_states,
    count_sq_poly,
    count_sq_states,
    gen_poly_matrix,
    gen_transfer,
    main,
    poly_matmul,
    poly_trace,
    polynomial_report,
    transfer_report,
)
from kagome.polynomial import Polynomial
from kagome.state import arrangements


def _all_states(dim):
    for ones in range(dim + 1):
        yield from arrangements(dim, ones)


def _poly_matrix(values):
    matrix = np.empty((len(values), len(values[0])), dtype=object)
    for (i, j), value in np.ndenumerate(np.array(values, dtype=float)):
        matrix[i, j] = Polynomial([[value]])
    return matrix


def test_sq_identical_columns_give_two():
    assert count_sq_states((1, 0, 1), (1, 0, 1)) == 2


def test_sq_single_swap_gives_one():
    assert count_sq_states((1, 0), (0, 1)) == 1


def test_sq_repeated_exchange_type_is_forbidden():
    assert count_sq_states((1, 1, 0, 0), (0, 0, 1, 1)) == 0


def test_sq_first_equal_to_last_exchange_is_forbidden():
    assert count_sq_states((1, 0, 1), (0, 1, 0)) == 0


def test_sq_rejects_mismatched_sizes():
    with pytest.raises(ValueError):
        count_sq_states((1, 0), (1, 0, 0))


@pytest.mark.parametrize("dim", [1, 2, 3, 4])
def test_sq_transfer_is_symmetric(dim):
    elements = gen_transfer(count_sq_states, dim).elements
    assert np.array_equal(elements, elements.T)


def test_dc_rejects_odd_dimension():
    with pytest.raises(ValueError):
        count_dc_states((1, 0, 1), (1, 0, 1))
    with pytest.raises(ValueError):
        count_dc_poly((1, 0, 1), (1, 0, 1))


def test_dc_rejects_empty_columns():
    with pytest.raises(ValueError):
        count_dc_states((), ())


def test_dc_uniform_column_is_allowed():
    assert count_dc_states((0, 0, 0, 0), (0, 0, 0, 0)) == 1


@pytest.mark.parametrize("dim", [1, 2, 3, 4])
def test_sq_poly_evaluates_to_count(dim):
    states = list(_all_states(dim))
    for a, b in itertools.product(states, repeat=2):
        assert count_sq_poly(a, b).coefficients.sum() == count_sq_states(a, b)


@pytest.mark.parametrize("dim", [2, 4])
def test_dc_poly_evaluates_to_count(dim):
    states = list(_all_states(dim))
    for a, b in itertools.product(states, repeat=2):
        poly = count_dc_poly(a, b)
        assert poly.coefficients.sum() == count_dc_states(a, b)
        if poly.coefficients.any():
            assert poly.degree == dim // 2


def test_sq_poly_identity_is_sum_of_powers():
    poly = count_sq_poly((1, 0, 1), (1, 0, 1))
    assert poly.degree == 3
    assert poly.coefficients[3, 0] == 1
    assert poly.coefficients[0, 3] == 1
    assert poly.coefficients.sum() == 2


@pytest.mark.parametrize("dim", [1, 2, 3, 4])
def test_gen_transfer_fills_equal_count_blocks(dim):
    ones = gen_transfer(lambda a, b: 1.0, dim)
    assert ones.size == 2 ** dim
    assert ones.elements.sum() == math.comb(2 * dim, dim)


def test_gen_transfer_orders_rows_by_left_arrows():
    diag = np.diag(gen_transfer(lambda a, b: float(sum(a)), 4).elements)
    assert list(diag) == sorted(diag)
    counts = Counter(int(value) for value in diag)
    assert counts == {ones: math.comb(4, ones) for ones in range(5)}


@pytest.mark.parametrize("dim", [2, 4])
def test_gen_poly_matrix_matches_transfer(dim):
    poly = gen_poly_matrix(count_dc_poly, dim)
    numeric = gen_transfer(count_dc_states, dim).elements
    evaluated = np.array([[p.coefficients.sum() for p in row] for row in poly])
    assert evaluated.shape == (2 ** dim, 2 ** dim)
    assert np.array_equal(evaluated, numeric)


def test_poly_matmul_of_constants_matches_numpy():
    a_values = [[1, 2], [3, 4]]
    b_values = [[5, 6], [7, 8]]
    product = poly_matmul(_poly_matrix(a_values), _poly_matrix(b_values))
    expected = np.array(a_values) @ np.array(b_values)
    got = np.array([[p.coefficients[0, 0] for p in row] for row in product])
    assert np.array_equal(got, expected)


def test_poly_matmul_rejects_mismatched_shapes():
    with pytest.raises(ValueError):
        poly_matmul(_poly_matrix([[1, 2]]), _poly_matrix([[1, 2]]))


def test_poly_trace_of_constants_sums_diagonal():
    values = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    result = poly_trace(_poly_matrix(values))
    assert result.coefficients[0, 0] == 15


def test_poly_trace_evaluates_to_numeric_trace():
    square = gen_poly_matrix(count_sq_poly, 2)
    decoupled = gen_poly_matrix(count_dc_poly, 2)
    numeric = (gen_transfer(count_sq_states, 2) @ gen_transfer(count_dc_states, 2)).trace()
    assert poly_trace(poly_matmul(square, decoupled)).coefficients.sum() == numeric


def test_polynomial_report_dim_two():
    assert polynomial_report(2) == (
        "2.000000z^3 + 2.000000y^3 + 2.000000xy^2 + 2.000000x^2y + 2.000000x^3"
    )


def test_transfer_report_dim_two():
    lines = transfer_report(2).splitlines()
    assert len(lines) == 8
    assert lines[0].startswith("Square calculation time: ")
    assert lines[4] == "Number of states: 44"
    assert lines[-1].startswith("Corresponding eigenvector: ")
    assert lines[-1].endswith(";")


def test_main_prints_polynomial_report(capsys):
    assert main(["2"]) == 0
    assert capsys.readouterr().out.strip() == polynomial_report(2)


def test_main_transfer_mode(capsys):
    assert main(["--transfer", "2"]) == 0
    assert "Number of states: 44" in capsys.readouterr().out


def test_main_reads_dimension_from_prompt(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "2")
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == polynomial_report(2)


def test_main_rejects_odd_dimension():
    with pytest.raises(SystemExit) as info:
        main(["3"])
    assert info.value.code == 2


def test_main_rejects_non_positive_dimension():
    with pytest.raises(SystemExit) as info:
        main(["0"])
    assert info.value.code == 2