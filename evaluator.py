"""
Expression Evaluator for ChainCalc
Tokenizes the display buffer and reduces it strictly left to right
"""
from collections import namedtuple
import config
from formatting import is_number, parse_number

NUMBER = "number"
OPERATOR = "operator"
OTHER = "other"

Token = namedtuple("Token", ["kind", "text"])


class MalformedExpressionError(ValueError):
    """The buffer is not an alternating number/operator sequence"""


def classify_token(text):
    """Return the token kind for a single whitespace-delimited chunk"""
    if is_number(text):
        return NUMBER
    if text in config.OPERATORS:
        return OPERATOR
    return OTHER


def tokenize(buffer):
    """Split a buffer on whitespace into (kind, text) tokens"""
    return [Token(classify_token(text), text) for text in buffer.split()]


def apply_operator(op, left, right):
    """Apply one binary operator.

    Division by exactly zero gives NaN rather than raising, and overflow gives
    an infinity; the formatter turns both into the error sentinel.
    """
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "×":
        return left * right
    if op == "÷":
        if right == 0:
            return float("nan")
        return left / right
    raise MalformedExpressionError(f"unknown operator: {op!r}")


def evaluate(buffer):
    """Evaluate a buffer such as "2 + 3 × 4" with no precedence (gives 20).

    A single dangling operator at the end ("2 + 3 × ") is ignored.
    """
    tokens = tokenize(buffer)
    if not tokens:
        raise MalformedExpressionError("empty expression")
    if tokens[0].kind != NUMBER:
        raise MalformedExpressionError(f"expected a number, got {tokens[0].text!r}")

    result = parse_number(tokens[0].text)
    i = 1
    while i < len(tokens) - 1:
        op, operand = tokens[i], tokens[i + 1]
        if op.kind != OPERATOR:
            raise MalformedExpressionError(f"expected an operator, got {op.text!r}")
        if operand.kind != NUMBER:
            raise MalformedExpressionError(f"expected a number, got {operand.text!r}")
        result = apply_operator(op.text, result, parse_number(operand.text))
        i += 2

    # Unpaired leftover token must be the dangling operator
    if i < len(tokens) and tokens[i].kind != OPERATOR:
        raise MalformedExpressionError(f"unexpected trailing token: {tokens[i].text!r}")

    return result
