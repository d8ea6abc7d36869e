import random

import pytest

from guessapp import (
    NO_MORE_HINTS,
    NonNumericInput,
    OutOfRange,
    Outcome,
    evaluate,
    generate_target,
    hint,
    validate,
)


@pytest.mark.parametrize(
    "guess,target,expected",
    [
        (42, 42, Outcome.CORRECT),
        (41, 42, Outcome.LOW),
        (43, 42, Outcome.HIGH),
        (1, 1, Outcome.CORRECT),
        (1, 100, Outcome.LOW),
        (100, 1, Outcome.HIGH),
        (100, 100, Outcome.CORRECT),
        (-5, 0, Outcome.LOW),
        (10 ** 20, 3, Outcome.HIGH),
    ],
)
def test_evaluate(guess, target, expected):
    assert evaluate(guess, target) is expected


def test_outcome_labels():
    assert [o.value for o in Outcome] == ["CORRECT", "LOW", "HIGH"]


def test_validate_accepts_range():
    for i in range(1, 101):
        assert validate(str(i)) == i


def test_validate_whitespace():
    assert validate("  42\n") == 42
    assert validate("+7") == 7


def test_validate_non_numeric():
    for text in ["abc", "", "   ", "4 2", "42abc", "3.5", "1_0", "0x10"]:
        result = validate(text)
        assert isinstance(result, NonNumericInput)
        assert result.message


def test_validate_out_of_range():
    assert validate("0") == OutOfRange("0")
    assert validate("101") == OutOfRange("101")
    assert validate("-3") == OutOfRange("-3")
    assert "between 1 and 100" in validate("200").message


def test_validate_custom_range():
    assert validate("5", 1, 10) == 5
    assert isinstance(validate("11", 1, 10), OutOfRange)
    assert "between 1 and 10" in validate("11", 1, 10).message


def test_invalid_guess_equality():
    assert NonNumericInput("abc") == NonNumericInput("abc")
    assert NonNumericInput("abc") != OutOfRange("abc")


def test_hint_parity():
    for target in range(1, 101):
        text = hint(target, 1)
        if target % 2 == 0:
            assert "EVEN" in text
        else:
            assert "ODD" in text


def test_hint_threshold():
    for target in range(1, 101):
        text = hint(target, 2)
        if target > 50:
            assert "greater than 50" in text
        else:
            assert "50 or less" in text


def test_hint_custom_threshold():
    assert "greater than 5" in hint(6, 2, threshold=5)
    assert "5 or less" in hint(5, 2, threshold=5)


def test_no_more_hints():
    for target in (1, 42, 100):
        assert hint(target, 3) == NO_MORE_HINTS
        assert hint(target, 10) == NO_MORE_HINTS


def test_generate_target_in_range():
    rng = random.Random(1234)
    values = {generate_target(1, 100, rng) for _ in range(2000)}
    assert min(values) >= 1
    assert max(values) <= 100
    assert 1 in values and 100 in values


def test_generate_target_single_value():
    assert generate_target(7, 7) == 7


def test_generate_target_seeded():
    a = [generate_target(1, 100, random.Random(5)) for _ in range(3)]
    b = [generate_target(1, 100, random.Random(5)) for _ in range(3)]
    assert a == b


def test_validate_huge_number():
    text = "9" * 5000
    assert validate(text) == OutOfRange(text)
    assert validate("-" + text) == OutOfRange("-" + text)
