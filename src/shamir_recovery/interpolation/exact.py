"""Exact-arithmetic helpers shared by the interpolation strategies."""

from fractions import Fraction
from typing import Iterable, List, Sequence, Tuple, Union

from shamir_recovery.errors import DuplicateAbscissa, NonIntegralSecret

Number = Union[int, Fraction]
Pair = Tuple[int, int]


def as_pairs(points: Iterable) -> List[Pair]:
    """Normalize CoordinatePoints or plain (x, y) tuples to int pairs."""
    pairs = []
    for x, y in points:
        pairs.append((int(x), int(y)))
    return pairs


def require_distinct_abscissae(pairs: Sequence[Pair]) -> None:
    seen = set()
    for x, _ in pairs:
        if x in seen:
            raise DuplicateAbscissa(x)
        seen.add(x)


def require_integer(value: Fraction) -> int:
    if value.denominator != 1:
        raise NonIntegralSecret(value)
    return value.numerator


def evaluate(coefficients: Sequence[Number], x: Number) -> Number:
    """Evaluate ascending-order coefficients at x with Horner's method."""
    result: Number = 0
    for coeff in reversed(coefficients):
        result = result * x + coeff
    return result
