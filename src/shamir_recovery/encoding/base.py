"""Positional base conversion for share values (bases 2 through 36)."""

from shamir_recovery.errors import EmptyValue, InvalidBase, InvalidDigit

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2
MAX_BASE = 36

_DIGIT_VALUES = {char: idx for idx, char in enumerate(DIGITS)}


def _check_base(base: int) -> None:
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(base)
    if not (MIN_BASE <= base <= MAX_BASE):
        raise InvalidBase(base)


def convert(value: str, base: int) -> int:
    """
    Decode a digit string written in ``base`` into an exact integer.

    Digits are 0-9 then a-z (case-insensitive). Python integers are unbounded,
    so values far beyond 64 bits decode without loss.
    """
    _check_base(base)
    if not value:
        raise EmptyValue(base)
    result = 0
    for char in value:
        digit = _DIGIT_VALUES.get(char.lower())
        if digit is None or digit >= base:
            raise InvalidDigit(char, base)
        result = result * base + digit
    return result


def encode(number: int, base: int) -> str:
    """Render a non-negative integer as a lower-case digit string in ``base``."""
    _check_base(base)
    if number < 0:
        raise ValueError("Only non-negative integers can be encoded")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, base)
        digits.append(DIGITS[rem])
    return "".join(reversed(digits))
