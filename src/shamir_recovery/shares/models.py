from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from shamir_recovery.encoding import MAX_BASE, MIN_BASE, convert
from shamir_recovery.errors import InvalidBase, InvalidCase


def _parse_base(raw: Any) -> int:
    # Bases arrive as numerals ("16") in case files and as ints from code.
    if isinstance(raw, bool):
        raise InvalidBase(raw)
    if isinstance(raw, int):
        base = raw
    elif isinstance(raw, str) and _is_numeral(raw.strip()):
        base = int(raw.strip())
    else:
        raise InvalidBase(raw)
    if not (MIN_BASE <= base <= MAX_BASE):
        raise InvalidBase(raw)
    return base


@dataclass(frozen=True)
class EncodedPoint:
    """A share value as supplied: a digit string plus the base it is written in."""

    base: int
    value: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EncodedPoint":
        try:
            raw_base = data["base"]
            raw_value = data["value"]
        except KeyError as exc:
            raise InvalidCase(f"share entry missing field {exc}") from exc
        if not isinstance(raw_value, str):
            raise InvalidCase(f"share value must be a string, got {type(raw_value).__name__}")
        return cls(base=_parse_base(raw_base), value=raw_value)

    def decode(self) -> int:
        return convert(self.value, self.base)


@dataclass(frozen=True)
class CoordinatePoint:
    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y


PointSet = Tuple[CoordinatePoint, ...]


@dataclass
class ShareCase:
    """
    A parsed input document.

    Attributes:
        n: Number of candidate keys (1..n) to examine.
        k: Threshold; the polynomial has degree k - 1.
        points: Raw share entries keyed by their (1-based) index. An entry
            is only validated once it is selected for interpolation.
    """

    n: int
    k: int
    points: Dict[int, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ShareCase":
        if not isinstance(data, Mapping):
            raise InvalidCase("document must be a mapping")
        try:
            keys = data["keys"]
            n = _parse_count(keys["n"], "n")
            k = _parse_count(keys["k"], "k")
        except KeyError as exc:
            raise InvalidCase(f"missing required field {exc}") from exc
        except TypeError as exc:
            raise InvalidCase(f"keys must be a mapping ({exc})") from exc
        points: Dict[int, Any] = {}
        names: Dict[int, Any] = {}
        for key, entry in data.items():
            index = _parse_index(key)
            if index is None:
                continue
            if index in names:
                raise InvalidCase(f"keys {names[index]!r} and {key!r} both name share {index}")
            names[index] = key
            points[index] = entry
        return cls(n=n, k=k, points=points)


def _is_numeral(text: str) -> bool:
    return text.isascii() and text.isdecimal()


def _parse_count(raw: Any, name: str) -> int:
    if isinstance(raw, bool):
        raise InvalidCase(f"keys.{name} must be an integer, got {raw!r}")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str) and _is_numeral(raw.strip()):
        value = int(raw.strip())
    else:
        raise InvalidCase(f"keys.{name} must be an integer, got {raw!r}")
    if value < 1:
        raise InvalidCase(f"keys.{name} must be at least 1")
    return value


def _parse_index(key: Any) -> Optional[int]:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key if key >= 1 else None
    text = str(key)
    if not _is_numeral(text):
        return None
    index = int(text)
    return index if index >= 1 else None


@dataclass
class SolveResult:
    """The recovered secret together with how it was obtained."""

    secret: int
    degree: int
    points_used: int
    total_points: int
    method: str
    points: PointSet = ()

    def to_dict(self) -> Dict[str, Any]:
        # Secrets can exceed the integer range of most JSON consumers.
        return {
            "secret": str(self.secret),
            "degree": self.degree,
            "pointsUsed": self.points_used,
            "totalPoints": self.total_points,
            "method": self.method,
            "points": [[p.x, str(p.y)] for p in self.points],
        }
