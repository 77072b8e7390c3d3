"""
Secret recovery toolkit: base-encoded share decoding and exact interpolation.

Pieces:
- Base conversion of share values (bases 2-36)
- Share selection (first k keys in ascending order)
- Lagrange and Vandermonde/Gauss-Jordan interpolation at x = 0
- Case loading, configuration and a command-line entry point
"""

from shamir_recovery.encoding import convert
from shamir_recovery.shares import ShareCase, SolveResult, extract
from shamir_recovery.solver import solve_case

__version__ = "0.1.0"
__all__ = [
    "convert",
    "extract",
    "ShareCase",
    "SolveResult",
    "solve_case",
]
