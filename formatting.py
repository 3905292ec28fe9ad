"""
Number Formatter for ChainCalc
Converts results to display strings and recognises numeric literals
"""
import math
import re
import config

# Optional minus, then digits with an optional point, or a point and digits.
# "5." is valid because the user can type it before the next digit.
NUMBER_PATTERN = re.compile(r'-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)')


def is_number(text):
    """Check whether a token is a numeric literal"""
    return isinstance(text, str) and NUMBER_PATTERN.fullmatch(text) is not None


def parse_number(text):
    """Parse a numeric literal token into a float.

    Raises ValueError for anything outside the literal grammar, including
    forms float() would happily accept such as "1e5", "1_000", "+3" or "nan".
    """
    if not is_number(text):
        raise ValueError(f"not a numeric literal: {text!r}")
    return float(text)


def format_value(value):
    """Format a result for the display.

    NaN and infinities become the error sentinel. Everything else is shown in
    fixed notation with up to MAX_FRACTION_DIGITS decimals and no trailing
    zeros: 42.0 -> "42", 3.14159265 -> "3.141593", 0.1 + 0.2 -> "0.3".
    """
    if not math.isfinite(value):
        return config.ERROR_SENTINEL

    text = f"{value:.{config.MAX_FRACTION_DIGITS}f}"
    if "." in text:
        text = text.rstrip('0').rstrip('.')

    # -0.0 and tiny negatives rounded away
    if text == "-0":
        text = "0"
    return text


def _group_token(token, separator):
    sign = ""
    if token.startswith("-"):
        sign, token = "-", token[1:]
    whole, point, fraction = token.partition(".")
    groups = []
    while len(whole) > 3:
        groups.insert(0, whole[-3:])
        whole = whole[:-3]
    groups.insert(0, whole)
    return sign + separator.join(groups) + point + fraction


def group_digits(text, separator=config.GROUP_SEPARATOR):
    """Insert thousands separators into every numeric token of a display string"""
    return " ".join(
        _group_token(part, separator) if is_number(part) else part
        for part in text.split(" ")
    )
