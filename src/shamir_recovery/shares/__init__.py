from .extractor import available_points, extract
from .models import CoordinatePoint, EncodedPoint, PointSet, ShareCase, SolveResult

__all__ = [
    "available_points",
    "extract",
    "CoordinatePoint",
    "EncodedPoint",
    "PointSet",
    "ShareCase",
    "SolveResult",
]
