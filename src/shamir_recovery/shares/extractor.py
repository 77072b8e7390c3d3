from typing import Any, List, Mapping

from shamir_recovery.errors import InsufficientPoints, InvalidCase
from shamir_recovery.shares.models import CoordinatePoint, EncodedPoint, PointSet


def _as_encoded(key: int, entry: Any) -> EncodedPoint:
    if isinstance(entry, EncodedPoint):
        return entry
    if not isinstance(entry, Mapping):
        raise InvalidCase(f"share {key} must be a mapping")
    return EncodedPoint.from_mapping(entry)


def extract(points: Mapping[int, Any], n: int, k: int) -> PointSet:
    """
    Select the first k shares by ascending key among keys 1..n and decode them.

    The key is the x-coordinate; the decoded value is y. Entries may be
    EncodedPoints or raw {"base", "value"} mappings; only selected entries
    are validated.
    """
    selected: List[CoordinatePoint] = []
    for key in range(1, n + 1):
        if len(selected) >= k:
            break
        entry = points.get(key)
        if entry is None:
            continue
        selected.append(CoordinatePoint(x=key, y=_as_encoded(key, entry).decode()))
    if len(selected) < k:
        raise InsufficientPoints(needed=k, found=len(selected))
    return tuple(selected)


def available_points(points: Mapping[int, Any], n: int) -> int:
    """Count shares present under keys 1..n."""
    return sum(1 for key in points if 1 <= key <= n)
