"""RPN表达式求值器 - 后缀/前缀栈机，调用统一的Operators类"""
import logging

from core.converter import ExpressionConverter
from core.errors import InvalidExpressionError, InvalidNumberError
from core.operators import Operators
from core.stack_operation import OperationType, StackOperation
from core.token_system import is_operator

logger = logging.getLogger(__name__)


def run_to_completion(generator):
    """消费生成器并返回其 return 值"""
    while True:
        try:
            next(generator)
        except StopIteration as stop:
            return stop.value


class RPNEvaluator:
    """评估后缀/前缀表达式的值"""

    @staticmethod
    def _parse_number(token):
        try:
            return float(token)
        except ValueError:
            logger.debug(f"Token is not a number: {token!r}")
            raise InvalidNumberError(token) from None

    @staticmethod
    def iter_stack_machine(expression, reverse=False):
        """
        栈机主体，按执行顺序产出 StackOperation，最终 return 栈中唯一的值。
        Args:
            expression: 以空白分隔的Token串
            reverse: False 为后缀（从左到右，先弹b后弹a）；
                     True 为前缀（从右到左，先弹a后弹b）
        """
        label = 'prefix' if reverse else 'postfix'
        tokens = expression.split()
        stack = []

        for token in (reversed(tokens) if reverse else tokens):
            if is_operator(token):
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token}")
                    raise InvalidExpressionError(f"Invalid {label} expression")

                if reverse:
                    a = stack.pop()
                    yield StackOperation(OperationType.POP, str(a), f"Pop operand: {a}")
                    b = stack.pop()
                    yield StackOperation(OperationType.POP, str(b), f"Pop operand: {b}")
                else:
                    b = stack.pop()
                    yield StackOperation(OperationType.POP, str(b), f"Pop operand: {b}")
                    a = stack.pop()
                    yield StackOperation(OperationType.POP, str(a), f"Pop operand: {a}")

                result = Operators.perform_operation(token, a, b)
                stack.append(result)
                yield StackOperation(OperationType.PUSH, str(result),
                                     f"Push result: {a} {token} {b} = {result}")
            else:
                stack.append(RPNEvaluator._parse_number(token))
                yield StackOperation(OperationType.PUSH, token, f"Push operand: {token}")

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise InvalidExpressionError(f"Invalid {label} expression")

        return stack[0]

    @staticmethod
    def evaluate_postfix(expression):
        """后缀表达式求值"""
        return run_to_completion(RPNEvaluator.iter_stack_machine(expression))

    @staticmethod
    def evaluate_prefix(expression):
        """前缀表达式求值（从右到左扫描）"""
        return run_to_completion(RPNEvaluator.iter_stack_machine(expression, reverse=True))

    @staticmethod
    def evaluate_infix(expression, strict=False):
        """中缀求值 = 先转后缀再按后缀求值"""
        postfix = ExpressionConverter.infix_to_postfix(expression, strict=strict)
        return RPNEvaluator.evaluate_postfix(postfix)
