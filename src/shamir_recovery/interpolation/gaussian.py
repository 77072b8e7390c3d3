"""Coefficient recovery by solving the Vandermonde system over the rationals."""

from fractions import Fraction
from typing import Iterable, List, Sequence, Tuple

from shamir_recovery.errors import SingularSystem
from shamir_recovery.interpolation.exact import as_pairs, require_integer


def vandermonde_system(points: Iterable) -> Tuple[List[List[Fraction]], List[Fraction]]:
    """Build A[row][p] = x_row**p for p = 0..k-1 and b[row] = y_row."""
    pairs = as_pairs(points)
    size = len(pairs)
    matrix = [[Fraction(x) ** power for power in range(size)] for x, _ in pairs]
    rhs = [Fraction(y) for _, y in pairs]
    return matrix, rhs


def gauss_jordan(matrix: Sequence[Sequence[Fraction]], rhs: Sequence[Fraction]) -> List[Fraction]:
    """
    Solve A·c = b with Gauss-Jordan elimination and partial pivoting.

    Inputs are copied; the caller's rows are left untouched.
    """
    size = len(matrix)
    if len(rhs) != size or any(len(row) != size for row in matrix):
        raise ValueError("Matrix must be square and match the right-hand side")
    a = [list(row) for row in matrix]
    b = list(rhs)
    for col in range(size):
        pivot_row = max(range(col, size), key=lambda r: abs(a[r][col]))
        if a[pivot_row][col] == 0:
            raise SingularSystem(col)
        a[col], a[pivot_row] = a[pivot_row], a[col]
        b[col], b[pivot_row] = b[pivot_row], b[col]

        pivot = a[col][col]
        for j in range(col, size):
            a[col][j] /= pivot
        b[col] /= pivot

        for r in range(size):
            if r == col:
                continue
            factor = a[r][col]
            if factor == 0:
                continue
            for j in range(col, size):
                a[r][j] -= factor * a[col][j]
            b[r] -= factor * b[col]
    return b


def solve_coefficients(points: Iterable) -> List[Fraction]:
    """Polynomial coefficients in ascending power order through the given points."""
    matrix, rhs = vandermonde_system(points)
    if not matrix:
        raise ValueError("At least one point is required to interpolate")
    return gauss_jordan(matrix, rhs)


def interpolate_at_zero(points: Iterable) -> int:
    """Recover f(0) as the constant coefficient of the solved system."""
    return require_integer(solve_coefficients(points)[0])
