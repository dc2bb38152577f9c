"""core/errors.py - 表达式求值/转换的异常层次"""


class ExpressionError(ValueError):
    """所有表达式错误的基类"""


class InvalidNumberError(ExpressionError):
    """非操作符Token无法解析为数字"""

    def __init__(self, token):
        self.token = token
        super().__init__(f"Invalid number: {token}")


class InvalidExpressionError(ExpressionError):
    """操作数不足，或求值结束时栈中元素个数不为1"""


class UnbalancedParenthesesError(InvalidExpressionError):
    """括号不匹配（仅严格模式下抛出）"""


class EmptyExpressionError(InvalidExpressionError):
    """空表达式"""


class DivisionByZeroError(ExpressionError, ZeroDivisionError):
    """/ 或 % 的右操作数为0"""

    def __init__(self, message="Division by zero"):
        super().__init__(message)


class UnknownOperatorError(ExpressionError):
    """操作符没有对应的运算"""

    def __init__(self, operator):
        self.operator = operator
        super().__init__(f"Unknown operator: {operator}")
