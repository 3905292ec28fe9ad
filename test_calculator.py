"""
Tests for the key-press state machine
"""
import pytest
from hypothesis import given, strategies as st

import config
from calculator import Calculator, classify_label, DIGIT, OPERATOR, EQUALS

KEYPAD = list("0123456789") + [".", "AC", "+/-", "%", "÷", "×", "-", "+", "="]
ERROR = config.ERROR_SENTINEL


@pytest.fixture
def calc():
    return Calculator()


def press_all(calc, *labels):
    for label in labels:
        calc.press(label)
    return calc.get_display()


# --- dispatching ---

def test_initial_state(calc):
    assert calc.get_display() == "0"
    assert calc.get_last_expression() == ""
    assert not calc.just_calculated


def test_classify_label():
    assert classify_label("7") == DIGIT
    assert classify_label("×") == OPERATOR
    assert classify_label("=") == EQUALS
    for label in ["", "12", "*", "/", "C", "CE", "0span", None, 5]:
        assert classify_label(label) is None


def test_unknown_labels_change_nothing(calc):
    press_all(calc, "2", "+", "3", "=")
    before = calc.snapshot()
    press_all(calc, "x", "", "*", "MC")
    assert calc.snapshot() == before


# --- digits ---

def test_digits_concatenate(calc):
    assert press_all(calc, "1", "2", "3") == "123"


def test_leading_zero_collapses(calc):
    assert press_all(calc, "0", "5") == "5"
    assert press_all(Calculator(), "0", "0", "0") == "0"


@given(st.text(alphabet="0123456789", min_size=1, max_size=20))
def test_typed_digits_show_up_verbatim(digits):
    calc = Calculator()
    assert press_all(calc, *digits) == (digits.lstrip("0") or "0")


def test_digit_after_operator_starts_next_operand(calc):
    assert press_all(calc, "7", "+", "8") == "7 + 8"


# --- decimal point ---

def test_decimal_on_zero(calc):
    assert press_all(calc, ".") == "0."
    assert press_all(calc, "5") == "0.5"


def test_second_decimal_point_is_ignored(calc):
    assert press_all(calc, "1", ".", ".") == "1."
    assert press_all(calc, "2", ".") == "1.2"


def test_decimal_point_belongs_to_the_trailing_operand(calc):
    assert press_all(calc, "1", ".", "5", "+", "2", ".") == "1.5 + 2."


def test_decimal_right_after_operator(calc):
    assert press_all(calc, "3", "+", ".") == "3 + ."
    assert press_all(calc, ".") == "3 + ."
    assert press_all(calc, "5", "=") == "3.5"


def test_decimal_on_error_starts_fresh(calc):
    calc.display = ERROR
    assert calc.add_decimal() == "0."


# --- operators ---

def test_operator_on_zero(calc):
    assert press_all(calc, "+") == "0 + "


def test_operator_appends_with_spaces(calc):
    assert press_all(calc, "1", "2", "×") == "12 × "


def test_operator_stacking_keeps_the_last_choice(calc):
    stacked = press_all(calc, "5", "+", "-", "×")
    assert stacked == press_all(Calculator(), "5", "×")
    assert stacked == "5 × "


def test_operator_replacement_after_several_operands(calc):
    assert press_all(calc, "1", "+", "2", "-", "÷") == "1 + 2 ÷ "


def test_operator_on_error_treats_display_as_zero(calc):
    calc.display = ERROR
    assert calc.add_operator("-") == "0 - "


# --- sign toggle and percent ---

def test_toggle_sign(calc):
    assert press_all(calc, "5", "+/-") == "-5"
    assert press_all(calc, "+/-") == "5"


def test_toggle_sign_on_trailing_operand_only(calc):
    assert press_all(calc, "2", "+", "3", "+/-") == "2 + -3"
    assert press_all(calc, "=") == "-1"


def test_toggle_sign_with_dangling_operator_is_a_no_op(calc):
    assert press_all(calc, "5", "+", "+/-") == "5 + "


def test_toggle_sign_of_zero_stays_zero(calc):
    assert press_all(calc, "+/-") == "0"


def test_toggle_sign_on_error_is_a_no_op(calc):
    calc.display = ERROR
    assert calc.toggle_sign() == ERROR


@given(
    st.integers(min_value=0, max_value=999999999),
    st.integers(min_value=0, max_value=999999),
)
def test_toggle_sign_twice_restores_the_operand(whole, fraction):
    calc = Calculator()
    typed = f"{whole}.{fraction:06d}"
    press_all(calc, *typed)
    original = float(calc.get_display())
    press_all(calc, "+/-", "+/-")
    assert float(calc.get_display()) == pytest.approx(original)


def test_percent(calc):
    assert press_all(calc, "5", "0", "%") == "0.5"


def test_percent_on_trailing_operand_only(calc):
    assert press_all(calc, "2", "0", "0", "+", "5", "%") == "200 + 0.05"


@given(st.integers(min_value=0, max_value=10**9))
def test_percent_divides_by_one_hundred(n):
    calc = Calculator()
    press_all(calc, *str(n), "%")
    assert float(calc.get_display()) == round(n / 100, 6)


def test_percent_with_dangling_operator_is_a_no_op(calc):
    assert press_all(calc, "9", "×", "%") == "9 × "


def test_non_finite_operand_becomes_error(calc):
    press_all(calc, *("9" * 400))
    assert press_all(calc, "+/-") == ERROR
    assert press_all(calc, "4") == "4"


# --- equals ---

def test_addition(calc):
    assert press_all(calc, "2", "+", "3", "=") == "5"
    assert calc.get_last_expression() == "2 + 3"
    assert calc.just_calculated


def test_no_operator_precedence(calc):
    assert press_all(calc, "2", "+", "3", "×", "4", "=") == "20"


def test_fractional_result(calc):
    assert press_all(calc, "1", "0", "÷", "3", "=") == "3.333333"


def test_equals_ignores_dangling_operator(calc):
    assert press_all(calc, "2", "+", "3", "×", "=") == "5"
    assert calc.get_last_expression() == "2 + 3 × "


def test_division_by_zero_shows_error(calc):
    assert press_all(calc, "8", "÷", "0", "=") == ERROR
    assert calc.get_last_expression() == "8 ÷ 0"
    assert press_all(calc, "5") == "5"


def test_malformed_buffer_still_counts_as_calculated(calc):
    assert press_all(calc, "3", "+", ".", "=") == ERROR
    assert calc.get_last_expression() == "3 + ."
    assert calc.just_calculated


def test_overflow_shows_error(calc):
    big = "9" * 200
    press_all(calc, *big, "×", *big)
    assert press_all(calc, "=") == ERROR


def test_digit_after_result_starts_fresh(calc):
    press_all(calc, "2", "+", "3", "=")
    assert press_all(calc, "7") == "7"
    assert calc.get_last_expression() == ""
    assert not calc.just_calculated


def test_operator_after_result_starts_from_zero(calc):
    press_all(calc, "2", "+", "3", "=")
    assert press_all(calc, "+") == "0 + "


def test_operator_after_result_continues_when_configured(calc, monkeypatch):
    monkeypatch.setattr(config, "CONTINUE_FROM_RESULT", True)
    press_all(calc, "2", "+", "3", "=")
    assert press_all(calc, "×", "4", "=") == "20"
    assert calc.get_last_expression() == "5 × 4"


def test_operator_after_error_never_continues(calc, monkeypatch):
    monkeypatch.setattr(config, "CONTINUE_FROM_RESULT", True)
    press_all(calc, "8", "÷", "0", "=")
    assert press_all(calc, "+") == "0 + "


def test_repeated_equals_reevaluates_the_result(calc):
    press_all(calc, "2", "+", "3", "=")
    assert press_all(calc, "=") == "5"
    assert calc.get_last_expression() == "5"


# --- clear ---

def test_clear(calc):
    press_all(calc, "2", "+", "3", "=")
    press_all(calc, "AC")
    assert calc.get_display() == "0"
    assert calc.get_last_expression() == ""
    assert press_all(calc, "AC") == "0"


@given(st.lists(st.sampled_from(KEYPAD), max_size=30))
def test_any_key_sequence_keeps_the_display_well_formed(labels):
    calc = Calculator()
    for label in labels:
        display = calc.press(label)
        assert display
        assert "  " not in display
        assert not display.startswith(" ")

    calc.press("AC")
    assert calc.get_display() == "0"
    assert calc.get_last_expression() == ""
