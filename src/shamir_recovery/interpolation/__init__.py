from typing import Callable, Dict, Iterable

from . import gaussian, lagrange
from .exact import evaluate
from .gaussian import solve_coefficients

Strategy = Callable[[Iterable], int]

METHODS: Dict[str, Strategy] = {
    "lagrange": lagrange.interpolate_at_zero,
    "gaussian": gaussian.interpolate_at_zero,
}


def get_method(name: str) -> Strategy:
    try:
        return METHODS[name]
    except KeyError:
        raise ValueError(
            f"Unknown interpolation method '{name}' (expected one of {sorted(METHODS)})"
        ) from None


__all__ = ["METHODS", "Strategy", "evaluate", "gaussian", "get_method", "lagrange", "solve_coefficients"]
