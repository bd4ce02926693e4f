import pytest

from cptoolkit.matrix import Matrix
from cptoolkit.modmath import MOD


def _make(rows, mod=MOD):
    m = Matrix(len(rows), len(rows[0]), mod)
    for i, row in enumerate(rows):
        m[i][:] = row
    return m


A = [[2, 1, 3], [0, 4, 5], [1, 7, 6]]
B = [[1, 0, 2], [3, 1, 1], [4, 2, 0]]


def test_new_matrix_is_zero():
    m = Matrix(2, 3)
    assert m.data == [[0, 0, 0], [0, 0, 0]]
    assert (m.rows, m.cols) == (2, 3)


def test_identity_is_neutral():
    a = _make(A)
    ident = Matrix.identity(3)
    assert (a * ident).data == A
    assert (ident * a).data == A


def test_rectangular_product_shape():
    left = _make([[1, 2, 3]])
    right = _make([[1], [2], [3]])
    product = left * right
    assert (product.rows, product.cols) == (1, 1)
    assert product[0][0] == sum(x * x for x in [1, 2, 3])


def test_mismatched_multiplication_raises():
    with pytest.raises(ValueError):
        _make([[1, 2]]) * _make([[1, 2]])


def test_power_matches_repeated_product():
    a = _make(A)
    assert a.power(3).data == (a * a * a).data
    assert a.power(0).data == Matrix.identity(3).data
    assert a.power(1).data == A


def test_fibonacci_power():
    fib = _make([[1, 1], [1, 0]])
    assert fib.power(10)[0][1] == 55


def test_power_of_non_square_raises():
    with pytest.raises(ValueError):
        Matrix(2, 3).power(2)


def test_negative_power_raises():
    with pytest.raises(ValueError):
        Matrix(2).power(-1)


def test_determinant_of_identity():
    assert Matrix.identity(4).determinant() == 1


def test_determinant_of_singular_matrix():
    assert _make([[1, 2], [2, 4]]).determinant() == 0


def test_determinant_is_multiplicative():
    a, b = _make(A), _make(B)
    assert (a * b).determinant() == a.determinant() * b.determinant() % MOD


def test_row_swap_negates_determinant():
    a = _make(A)
    swapped = _make([A[1], A[0], A[2]])
    assert (a.determinant() + swapped.determinant()) % MOD == 0


def test_permutation_determinant():
    assert _make([[0, 1], [1, 0]]).determinant() == MOD - 1


def test_determinant_needs_square():
    with pytest.raises(ValueError):
        Matrix(2, 3).determinant()