"""Error taxonomy for secret recovery.

Every error derives from ``RecoveryError`` (itself a ``ValueError``) so callers
can catch the whole family at once.
"""

from __future__ import annotations

from fractions import Fraction


class RecoveryError(ValueError):
    """Base class for all failures raised while recovering a secret."""


class EncodingError(RecoveryError):
    """A share value could not be decoded from its stated base."""


class InvalidBase(EncodingError):
    def __init__(self, base: object) -> None:
        self.base = base
        super().__init__(f"Base must be an integer in 2..36, got {base!r}")


class InvalidDigit(EncodingError):
    def __init__(self, char: str, base: int) -> None:
        self.char = char
        self.base = base
        super().__init__(f"Invalid digit '{char}' for base {base}")


class EmptyValue(EncodingError):
    def __init__(self, base: int) -> None:
        self.base = base
        super().__init__(f"Empty value cannot be decoded in base {base}")


class InvalidCase(RecoveryError):
    """The input document is malformed (missing keys, bad n/k)."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid share case: {reason}")


class InsufficientPoints(RecoveryError):
    def __init__(self, needed: int, found: int) -> None:
        self.needed = needed
        self.found = found
        super().__init__(f"Insufficient points: need {needed}, found {found}")


class DegenerateSystem(RecoveryError):
    """The selected points do not determine a unique polynomial."""


class DuplicateAbscissa(DegenerateSystem):
    def __init__(self, x: int) -> None:
        self.x = x
        super().__init__(f"Duplicate x-coordinate {x} among selected points")


class SingularSystem(DegenerateSystem):
    def __init__(self, column: int) -> None:
        self.column = column
        super().__init__(f"Singular system: no non-zero pivot in column {column}")


class NonIntegralSecret(RecoveryError):
    def __init__(self, value: Fraction) -> None:
        self.value = value
        super().__init__(f"Interpolated secret {value} is not an integer")


class InconsistentSolution(RecoveryError):
    def __init__(self, primary: int, secondary: int) -> None:
        self.primary = primary
        self.secondary = secondary
        super().__init__(
            f"Interpolation strategies disagree: {primary} != {secondary}"
        )
