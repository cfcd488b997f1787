import math

from verify import (
    INTEGER,
    MAX_ANSWER_LENGTH,
    SCALAR,
    VECTOR,
    fixed,
    parse_number,
    parse_vector,
    verify,
)


def test_fixed_rounding_and_signs():
    assert fixed(5, 3) == "5.000"
    assert fixed(90, 1) == "90.0"
    assert fixed(-0.0, 3) == "0.000"
    assert fixed(-0.0001, 3) == "0.000"
    assert fixed(-0.6, 3) == "-0.600"
    assert fixed(math.nan, 1) == "NaN"


def test_parse_number():
    assert parse_number(" 5.25 ") == 5.25
    assert parse_number("-.5") == -0.5
    assert parse_number("1e2") == 100
    assert parse_number("") is None
    assert parse_number("5 apples") is None
    assert parse_number("1_000") is None


def test_parse_vector_formats():
    assert parse_vector("(0.6, 0.8)") == [0.6, 0.8]
    assert parse_vector("[0.6,0.8]") == [0.6, 0.8]
    assert parse_vector(" 0.6 , 0.8 ") == [0.6, 0.8]
    assert parse_vector("(a, 1)") is None


def test_scalar_compares_after_rounding():
    assert verify(SCALAR, "5.000", "5")
    assert verify(SCALAR, "5.000", "5.000")
    assert verify(SCALAR, "5.000", "5.0004")
    assert not verify(SCALAR, "5.000", "5.01")
    assert not verify(SCALAR, "5.000", "five")
    assert not verify(SCALAR, "5.000", "")


def test_scalar_one_decimal():
    assert verify(SCALAR, "53.1", "53.13", decimals=1)
    assert not verify(SCALAR, "53.1", "53.2", decimals=1)


def test_integer_exact():
    assert verify(INTEGER, "11", "11")
    assert verify(INTEGER, "11", " 11.0 ")
    assert verify(INTEGER, "-7", "-7")
    assert not verify(INTEGER, "11", "11.5")
    assert not verify(INTEGER, "11", "eleven")


def test_vector_answers():
    assert verify(VECTOR, "(0.600, 0.800)", "(0.6, 0.8)")
    assert verify(VECTOR, "(0.600, 0.800)", "[0.6,0.8]")
    assert verify(VECTOR, "(0.600, 0.800)", "0.6,0.8")
    assert verify(VECTOR, "(3.000, 0.000)", "(3, -0)")
    assert not verify(VECTOR, "(0.600, 0.800)", "(0.8, 0.6)")
    assert not verify(VECTOR, "(0.600, 0.800)", "(0.6)")
    assert not verify(VECTOR, "(0.600, 0.800)", "(0.6, 0.8, 1)")
    assert not verify(VECTOR, "(0.600, 0.800)", "(0.6, x)")


def test_zero_bypass_only_with_debug_flag():
    assert not verify(SCALAR, "5.000", "0")
    assert verify(SCALAR, "5.000", "0", debug_zero=True)
    assert verify(VECTOR, "(0.600, 0.800)", "0", debug_zero=True)
    # exact string only
    assert not verify(SCALAR, "5.000", " 0", debug_zero=True)


def test_overlong_answer_is_incorrect():
    padded = "5" + " " * MAX_ANSWER_LENGTH
    assert verify(SCALAR, "5.000", "5") is True
    assert verify(SCALAR, "5.000", padded) is False
    assert verify(VECTOR, "(1.000, 2.000)", "(1, 2)" + " " * MAX_ANSWER_LENGTH) is False
    assert verify(INTEGER, "11", "0" * MAX_ANSWER_LENGTH + "11") is False
    assert verify(INTEGER, "11", "0" * (MAX_ANSWER_LENGTH - 2) + "11") is True
