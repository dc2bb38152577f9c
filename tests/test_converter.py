import pytest

from core import (
    infix_to_postfix, infix_to_prefix, evaluate_infix, evaluate_prefix,
    UnbalancedParenthesesError, InvalidExpressionError
)


@pytest.mark.parametrize("infix, postfix", [
    ("3 + 4 * 2", "3 4 2 * +"),
    ("( 1 + 2 ) * 3", "1 2 + 3 *"),
    ("2 ^ 3 ^ 2", "2 3 2 ^ ^"),
    ("8-2-1", "8 2 - 1 -"),
    ("12.5*(3+40)", "12.5 3 40 + *"),
    ("a+b*c", "a b c * +"),
    ("(8-3)%3+2*5", "8 3 - 3 % 2 5 * +"),
    ("", ""),
])
def test_infix_to_postfix(infix, postfix):
    assert infix_to_postfix(infix) == postfix


@pytest.mark.parametrize("infix, prefix", [
    ("3 + 4 * 2", "+ 3 * 4 2"),
    ("(1+2)*3", "* + 1 2 3"),
    ("2^3^2", "^ 2 ^ 3 2"),
    ("8-2-1", "- - 8 2 1"),
    ("12+3", "+ 12 3"),
    ("12.5 * 4", "* 12.5 4"),
    ("a*b+c", "+ * a b c"),
])
def test_infix_to_prefix(infix, prefix):
    assert infix_to_prefix(infix) == prefix


@pytest.mark.parametrize("expression", [
    "3 + 4 * 2",
    "(1+2)*3",
    "2^3^2",
    "8-2-1",
    "100/10/5",
    "12.5*(3+40)-7",
    "2^(1+1)^3",
    "(8-3)%3+2*5",
    "((2+3)*(4-1))^2/5",
])
def test_prefix_round_trip(expression):
    assert evaluate_prefix(infix_to_prefix(expression)) == pytest.approx(evaluate_infix(expression))


def test_permissive_unmatched_closing_paren_is_ignored():
    assert infix_to_postfix("1+2)") == "1 2 +"
    assert infix_to_postfix("1+2)*3") == "1 2 + 3 *"


def test_permissive_unmatched_opening_paren_is_drained():
    assert infix_to_postfix("(1+2") == "1 2 + ("


@pytest.mark.parametrize("expression", ["1+2)", "(1+2", "((1)", ")("])
def test_strict_mode_rejects_unbalanced_parentheses(expression):
    with pytest.raises(UnbalancedParenthesesError):
        infix_to_postfix(expression, strict=True)
    with pytest.raises(InvalidExpressionError):
        infix_to_prefix(expression, strict=True)


def test_strict_mode_accepts_balanced_input():
    assert infix_to_postfix("((1+2))*3", strict=True) == "1 2 + 3 *"
    assert infix_to_prefix("((1+2))*3", strict=True) == "* + 1 2 3"


def test_conversion_is_idempotent():
    expression = "(4 + 5) * 2 ^ 3 - 1"
    assert infix_to_postfix(expression) == infix_to_postfix(expression)
    assert infix_to_prefix(expression) == infix_to_prefix(expression)
