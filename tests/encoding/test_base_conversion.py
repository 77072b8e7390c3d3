import pytest

from shamir_recovery.encoding import convert, encode
from shamir_recovery.errors import EmptyValue, EncodingError, InvalidBase, InvalidDigit


def test_known_conversions() -> None:
    assert convert("111", 2) == 7
    assert convert("213", 4) == 2 * 16 + 1 * 4 + 3
    assert convert("4", 10) == 4
    assert convert("zz", 36) == 35 * 36 + 35


def test_conversion_is_case_insensitive() -> None:
    assert convert("FF", 16) == convert("ff", 16) == 255


def test_values_beyond_64_bits_are_exact() -> None:
    assert convert("2122212201122002221120200210011020220200", 3) == 10788619898233492461
    assert convert("f" * 40, 16) == 16**40 - 1


@pytest.mark.parametrize("base", [2, 3, 7, 10, 16, 36])
@pytest.mark.parametrize("number", [0, 1, 35, 2**64 + 1, 10**40 + 12345])
def test_round_trip_through_encode(number: int, base: int) -> None:
    assert convert(encode(number, base), base) == number


def test_digit_equal_to_base_is_rejected() -> None:
    with pytest.raises(InvalidDigit) as excinfo:
        convert("102", 2)
    assert excinfo.value.char == "2"
    assert excinfo.value.base == 2


def test_symbol_outside_alphabet_is_rejected() -> None:
    with pytest.raises(InvalidDigit) as excinfo:
        convert("12-3", 10)
    assert excinfo.value.char == "-"


def test_empty_value_has_its_own_error() -> None:
    with pytest.raises(EmptyValue):
        convert("", 10)
    assert issubclass(EmptyValue, EncodingError)


@pytest.mark.parametrize("base", [0, 1, 37, True, "10"])
def test_invalid_base(base) -> None:
    with pytest.raises(InvalidBase):
        convert("1", base)


def test_encode_rejects_negative_numbers() -> None:
    with pytest.raises(ValueError):
        encode(-1, 10)
