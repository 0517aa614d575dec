import random

import pytest

from game.errors import (
    DuplicateDigitError,
    GameInputError,
    InvalidFormatError,
    NonDigitError,
)
from game.secret_code import Code, validate


def test_validate_accepts_leading_zero():
    code = validate("0123")
    assert code.digits == (0, 1, 2, 3)
    assert code.as_string() == "0123"
    assert code.as_int() == 123


@pytest.mark.parametrize("text", ["", "123", "12345", "0123 "])
def test_validate_rejects_wrong_length(text):
    with pytest.raises(InvalidFormatError):
        validate(text)


@pytest.mark.parametrize("text", ["12a3", "-123", "1.23", "12³4"])
def test_validate_rejects_non_digits(text):
    with pytest.raises(NonDigitError):
        validate(text)


def test_validate_rejects_duplicate_digits():
    with pytest.raises(DuplicateDigitError):
        validate("1123")


def test_length_is_checked_before_characters_and_characters_before_duplicates():
    with pytest.raises(InvalidFormatError):
        validate("aa1")
    with pytest.raises(NonDigitError):
        validate("1a1b")


def test_input_errors_are_value_errors():
    with pytest.raises(ValueError):
        validate("x")
    assert issubclass(DuplicateDigitError, GameInputError)


def test_formatting_and_validating_again_gives_the_same_number():
    rng = random.Random(11)
    for _ in range(200):
        code = Code.generate_random(rng=rng)
        assert validate(str(code)) == code


def test_generate_random_is_reproducible_with_seeded_rng():
    first = [Code.generate_random(rng=random.Random(5)) for _ in range(3)]
    assert first[0] == first[1] == first[2]


def test_generate_random_produces_valid_numbers_with_any_first_digit():
    rng = random.Random(42)
    first_digits = set()
    for _ in range(2000):
        code = Code.generate_random(rng=rng)
        assert len(code) == 4
        assert len(code.digit_set) == 4
        first_digits.add(code[0])
    assert first_digits == set(range(10))


def test_code_equality_hash_and_order():
    a = Code.from_string("0123")
    assert a == Code((0, 1, 2, 3))
    assert a != "0123"
    assert len({a, Code((0, 1, 2, 3))}) == 1
    assert Code.from_string("0987") < Code.from_string("1234")
    assert repr(a) == "Code('0123')"


def test_equal_codes_hash_equal_and_strings_are_not_codes():
    code = validate("6437")
    same = Code((6, 4, 3, 7))
    assert code == same and hash(code) == hash(same)
    assert code != "6437"
    assert "6437" not in {code}
    assert code in {same}
