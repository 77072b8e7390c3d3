from fractions import Fraction
from typing import Iterable, List, Sequence

from shamir_recovery.errors import DuplicateAbscissa
from shamir_recovery.interpolation.exact import as_pairs, require_distinct_abscissae, require_integer


def lagrange_weights_at_zero(x_values: Sequence[int]) -> List[Fraction]:
    """
    Basis weights L_i(0) = prod_{j != i} (-x_j) / (x_i - x_j) for each x_i.
    """
    weights: List[Fraction] = []
    for i, xi in enumerate(x_values):
        numerator = 1
        denominator = 1
        for j, xj in enumerate(x_values):
            if i == j:
                continue
            if xi == xj:
                raise DuplicateAbscissa(xi)
            numerator *= -xj
            denominator *= xi - xj
        weights.append(Fraction(numerator, denominator))
    return weights


def interpolate_at_zero(points: Iterable) -> int:
    """
    Recover f(0) from k points with Lagrange interpolation.

    Numerators and denominators stay exact integers; the sum is reduced once
    and must come out integral.
    """
    pairs = as_pairs(points)
    if not pairs:
        raise ValueError("At least one point is required to interpolate")
    require_distinct_abscissae(pairs)
    weights = lagrange_weights_at_zero([x for x, _ in pairs])
    secret = sum((y * w for (_, y), w in zip(pairs, weights)), Fraction(0))
    return require_integer(secret)
