"""
Calculator Engine for ChainCalc
Handles key presses and keeps the expression buffer well formed
"""
import config
from evaluator import evaluate, MalformedExpressionError
from formatting import format_value, is_number, parse_number

DIGIT = "digit"
DECIMAL = "decimal"
CLEAR = "clear"
SIGN = "sign"
PERCENT = "percent"
OPERATOR = "operator"
EQUALS = "equals"

DIGITS = frozenset("0123456789")


def classify_label(label):
    """Map a key label to its category, or None for labels the keypad doesn't have"""
    if not isinstance(label, str):
        return None
    if label in DIGITS:
        return DIGIT
    if label == ".":
        return DECIMAL
    if label == "AC":
        return CLEAR
    if label == "+/-":
        return SIGN
    if label == "%":
        return PERCENT
    if label in config.OPERATORS:
        return OPERATOR
    if label == "=":
        return EQUALS
    return None


class Calculator:
    def __init__(self):
        self.display = "0"
        self.last_expression = ""
        self.just_calculated = False

    def press(self, label):
        """Handle one key press. Unknown labels leave the state untouched."""
        category = classify_label(label)
        if category is None:
            return self.display

        if self.just_calculated and category != EQUALS:
            if not (category == OPERATOR and self._continues_from_result()):
                self.clear()
        self.just_calculated = False

        if category == DIGIT:
            self.add_digit(label)
        elif category == DECIMAL:
            self.add_decimal()
        elif category == CLEAR:
            self.clear()
        elif category == SIGN:
            self.toggle_sign()
        elif category == PERCENT:
            self.apply_percent()
        elif category == OPERATOR:
            self.add_operator(label)
        elif category == EQUALS:
            self.calculate()
        return self.display

    def _continues_from_result(self):
        return config.CONTINUE_FROM_RESULT and self.display != config.ERROR_SENTINEL

    def add_digit(self, digit):
        """Add a digit, replacing a lone zero or the error sentinel"""
        if self.display in ("0", config.ERROR_SENTINEL):
            self.display = digit
        else:
            self.display += digit
        return self.display

    def add_decimal(self):
        """Add a decimal point unless the operand being typed already has one"""
        if self.display == config.ERROR_SENTINEL:
            self.display = "0."
        elif "." not in self.display.split(" ")[-1]:
            self.display += "."
        return self.display

    def clear(self):
        """Clear display and last expression (AC)"""
        self.display = "0"
        self.last_expression = ""
        return self.display

    def toggle_sign(self):
        """Negate the trailing operand (+/-)"""
        return self._transform_last_number(lambda value: -value)

    def apply_percent(self):
        """Divide the trailing operand by 100 (%)"""
        return self._transform_last_number(lambda value: value / 100)

    def _transform_last_number(self, func):
        # Buffer parts are separated by exactly one space, so splitting and
        # joining on " " round-trips; a dangling operator leaves "" last.
        parts = self.display.split(" ")
        if not is_number(parts[-1]):
            return self.display

        text = format_value(func(parse_number(parts[-1])))
        if text == config.ERROR_SENTINEL:
            self.display = text
        else:
            parts[-1] = text
            self.display = " ".join(parts)
        return self.display

    def add_operator(self, operator):
        """Add an operator, or replace the one just pressed"""
        if self.display == config.ERROR_SENTINEL:
            self.display = "0"

        tokens = self.display.split()
        if tokens and tokens[-1] in config.OPERATORS:
            tokens[-1] = operator
            self.display = " ".join(tokens) + " "
        elif self.display == "0":
            self.display = f"0 {operator} "
        else:
            self.display += f" {operator} "
        return self.display

    def calculate(self):
        """Evaluate the buffer (=).

        The last expression and the just-calculated flag are set even when
        evaluation fails, so the next key after an error starts afresh.
        """
        self.last_expression = self.display
        try:
            self.display = format_value(evaluate(self.display))
        except MalformedExpressionError:
            self.display = config.ERROR_SENTINEL
        self.just_calculated = True
        return self.display

    def get_display(self):
        """Get current display"""
        return self.display

    def get_last_expression(self):
        """Get the expression evaluated by the last ="""
        return self.last_expression

    def is_error(self):
        return self.display == config.ERROR_SENTINEL

    def snapshot(self):
        """Current state as a plain dict (used by the API)"""
        return {
            'display': self.display,
            'last_expression': self.last_expression,
            'just_calculated': self.just_calculated,
        }
