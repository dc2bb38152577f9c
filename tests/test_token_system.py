import pytest

from core.token_system import (
    TokenType, Token, Associativity, OPERATOR_DEFINITIONS,
    is_operator, get_precedence, has_higher_or_equal_precedence, tokenize_infix
)


def _texts(tokens):
    return [t.text for t in tokens]


def test_tokenize_multi_digit_and_decimal():
    tokens = tokenize_infix("12.5+x*(3)")
    assert tokens == [
        Token(TokenType.OPERAND, '12.5'),
        Token(TokenType.OPERATOR, '+'),
        Token(TokenType.OPERAND, 'x'),
        Token(TokenType.OPERATOR, '*'),
        Token(TokenType.LEFT_PAREN, '('),
        Token(TokenType.OPERAND, '3'),
        Token(TokenType.RIGHT_PAREN, ')'),
    ]


def test_letters_are_single_character_operands():
    assert _texts(tokenize_infix("ab")) == ['a', 'b']
    assert _texts(tokenize_infix("x12")) == ['x', '12']


def test_whitespace_and_unknown_characters_skipped():
    assert _texts(tokenize_infix("  3 $ 4 \t")) == ['3', '4']
    assert tokenize_infix("") == []


def test_operator_table():
    assert set(OPERATOR_DEFINITIONS) == {'+', '-', '*', '/', '%', '^'}
    assert [get_precedence(op) for op in '+-*/%^'] == [1, 1, 2, 2, 2, 3]
    assert get_precedence('(') == 0
    assert OPERATOR_DEFINITIONS['^'].associativity == Associativity.RIGHT
    assert all(spec.associativity == Associativity.LEFT
               for symbol, spec in OPERATOR_DEFINITIONS.items() if symbol != '^')


def test_is_operator_compares_whole_token():
    assert is_operator('+')
    assert not is_operator('-7')
    assert not is_operator('(')
    assert not is_operator('')


@pytest.mark.parametrize("top, incoming, expected", [
    ('*', '+', True),
    ('+', '*', False),
    ('-', '+', True),    # 左结合：同级弹出
    ('/', '%', True),
    ('^', '^', False),   # 右结合：同级不弹出
    ('^', '*', True),
    ('*', '^', False),
])
def test_has_higher_or_equal_precedence(top, incoming, expected):
    assert has_higher_or_equal_precedence(top, incoming) is expected


def test_only_decimal_digits_start_an_operand():
    assert _texts(tokenize_infix("2²+1")) == ['2', '+', '1']
    assert _texts(tokenize_infix("1½")) == ['1']
