"""Recovery pipeline: select shares, decode them, interpolate f(0)."""

from __future__ import annotations

from shamir_recovery.errors import InconsistentSolution
from shamir_recovery.interpolation import METHODS, get_method
from shamir_recovery.shares import ShareCase, SolveResult, available_points, extract
from shamir_recovery.utils.logging import get_logger

logger = get_logger(__name__)


def solve_case(case: ShareCase, method: str = "lagrange", cross_check: bool = False) -> SolveResult:
    """
    Recover the secret of a share case.

    Args:
        case: Parsed input document.
        method: Interpolation strategy name, see ``interpolation.METHODS``.
        cross_check: Also solve with every other strategy and require agreement.

    Raises:
        RecoveryError: any decoding, selection or interpolation failure.
    """
    strategy = get_method(method)
    total = available_points(case.points, case.n)
    logger.debug("Expected points: %d, found: %d, needed: %d", case.n, total, case.k)

    points = extract(case.points, case.n, case.k)
    for idx, point in enumerate(points, start=1):
        logger.debug("Point %d: (%d, %d)", idx, point.x, point.y)

    secret = strategy(points)
    if cross_check:
        for other_name, other in METHODS.items():
            if other_name == method:
                continue
            other_secret = other(points)
            if other_secret != secret:
                raise InconsistentSolution(secret, other_secret)
            logger.debug("Cross-check with %s agrees", other_name)

    logger.info("Recovered secret with %s from %d/%d points (degree %d)", method, case.k, total, case.k - 1)
    return SolveResult(
        secret=secret,
        degree=case.k - 1,
        points_used=len(points),
        total_points=total,
        method=method,
        points=points,
    )
