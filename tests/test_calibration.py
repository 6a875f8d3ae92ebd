import pytest

from aocsolutions.y2023.calibration import (
    digit_calibration_sum,
    spelled_calibration_sum,
)

DIGITS = "1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet"
WORDS = """two1nine
eightwothree
abcone2threexyz
xtwone3four
4nineeightseven2
zoneight234
7pqrstsixteen"""


def test_digit_example():
    assert digit_calibration_sum(DIGITS) == 142


def test_spelled_example():
    assert spelled_calibration_sum(WORDS) == 281


def test_empty_text():
    assert digit_calibration_sum("") == 0


def test_spelled_agrees_on_digit_only_lines():
    text = "12\n9x8\n5"
    assert spelled_calibration_sum(text) == digit_calibration_sum(text)


def test_sum_is_additive_over_lines():
    first, second = "1abc2\npqr3stu8vwx", "a1b2c3d4e5f\ntreb7uchet"
    assert digit_calibration_sum(first + "\n" + second) == (
        digit_calibration_sum(first) + digit_calibration_sum(second)
    )


def test_crlf_lines_match_lf_lines():
    assert digit_calibration_sum(DIGITS.replace("\n", "\r\n")) == (
        digit_calibration_sum(DIGITS)
    )


def test_line_without_digit_is_rejected():
    with pytest.raises(ValueError):
        digit_calibration_sum("1abc2\nnodigits")


def test_line_without_number_is_rejected():
    with pytest.raises(ValueError):
        spelled_calibration_sum("xyz")