"""core/token_system.py"""
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class TokenType(Enum):
    OPERAND = "operand"  # 操作数（数字字面量或单字母符号）
    OPERATOR = "operator"  # + - * / % ^
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class Token:
    """逻辑单元；操作数保持字符串形式，直到求值时才解析为数字"""

    __slots__ = ('type', 'text')

    def __init__(self, token_type, text):
        self.type = token_type
        self.text = text

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.text == other.text

    def __hash__(self):
        return hash((self.type, self.text))

    def __repr__(self):
        return f"Token({self.type.name}, {self.text!r})"


class OperatorSpec:
    def __init__(self, symbol, precedence, associativity, method):
        self.symbol = symbol
        self.precedence = precedence
        self.associativity = associativity
        self.method = method  # Operators 中对应的方法名


# 操作符定义字典（只读）
OPERATOR_DEFINITIONS = {
    '+': OperatorSpec('+', 1, Associativity.LEFT, 'add'),
    '-': OperatorSpec('-', 1, Associativity.LEFT, 'sub'),
    '*': OperatorSpec('*', 2, Associativity.LEFT, 'mul'),
    '/': OperatorSpec('/', 2, Associativity.LEFT, 'div'),
    '%': OperatorSpec('%', 2, Associativity.LEFT, 'mod'),
    '^': OperatorSpec('^', 3, Associativity.RIGHT, 'pow'),
}

LEFT_PAREN = '('
RIGHT_PAREN = ')'


def is_operator(token):
    """token 是否为六个二元操作符之一（按完整字符串比较）"""
    return token in OPERATOR_DEFINITIONS


def get_precedence(symbol):
    """操作符优先级；括号及未知符号为0"""
    spec = OPERATOR_DEFINITIONS.get(symbol)
    return spec.precedence if spec else 0


def has_higher_or_equal_precedence(top, incoming):
    """
    栈顶操作符是否应在 incoming 入栈前弹出。
    ^ 为右结合：同级不弹出；其余左结合：同级弹出。
    """
    if incoming == '^':
        return get_precedence(top) > get_precedence(incoming)
    return get_precedence(top) >= get_precedence(incoming)


def tokenize_infix(expression):
    """
    逐字符扫描中缀表达式。
    - 数字开头：贪婪吸收后续数字和 '.'
    - 字母：单字符操作数
    - 括号与操作符：单字符Token
    - 空白跳过；其他字符忽略
    """
    tokens = []
    i = 0
    n = len(expression)
    while i < n:
        c = expression[i]

        if c.isspace():
            i += 1
            continue

        if c.isdecimal():
            j = i + 1
            while j < n and (expression[j].isdecimal() or expression[j] == '.'):
                j += 1
            tokens.append(Token(TokenType.OPERAND, expression[i:j]))
            i = j
            continue

        if c.isalpha():
            tokens.append(Token(TokenType.OPERAND, c))
        elif c == LEFT_PAREN:
            tokens.append(Token(TokenType.LEFT_PAREN, c))
        elif c == RIGHT_PAREN:
            tokens.append(Token(TokenType.RIGHT_PAREN, c))
        elif is_operator(c):
            tokens.append(Token(TokenType.OPERATOR, c))
        else:
            logger.debug(f"Skipping unrecognised character {c!r} at position {i}")
        i += 1

    return tokens
