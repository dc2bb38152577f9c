"""中缀表达式转换器 - 调车场算法（shunting-yard）及前缀反转技巧"""
import logging

from core.errors import UnbalancedParenthesesError
from core.stack_operation import OperationType, StackOperation
from core.token_system import (
    TokenType, Token, LEFT_PAREN, RIGHT_PAREN,
    get_precedence, has_higher_or_equal_precedence, tokenize_infix
)

logger = logging.getLogger(__name__)

# 与左括号匹配而被丢弃的弹出；其余 POP 的值都会写入输出序列
MATCHED_PAREN_DESCRIPTION = "Pop left parenthesis"


def _mirrored_should_pop(top, incoming):
    """
    反转后的表达式中结合性对调：
    左结合操作符只在栈顶优先级严格更高时弹出，^ 在同级时也弹出。
    """
    if incoming == '^':
        return get_precedence(top) >= get_precedence(incoming)
    return get_precedence(top) > get_precedence(incoming)


def mirror_tokens(tokens):
    """反转Token序列并交换左右括号；操作数内部字符顺序保持不变"""
    mirrored = []
    for token in reversed(tokens):
        if token.type == TokenType.LEFT_PAREN:
            mirrored.append(Token(TokenType.RIGHT_PAREN, RIGHT_PAREN))
        elif token.type == TokenType.RIGHT_PAREN:
            mirrored.append(Token(TokenType.LEFT_PAREN, LEFT_PAREN))
        else:
            mirrored.append(token)
    return mirrored


class ExpressionConverter:
    """中缀 → 后缀 / 前缀"""

    @staticmethod
    def iter_shunting_yard(tokens, strict=False, mirrored=False):
        """
        调车场算法主体，按执行顺序产出 (StackOperation, emitted)。
        Args:
            tokens: 中缀Token序列
            strict: True 时括号不匹配抛出 UnbalancedParenthesesError
            mirrored: True 时对调结合性（用于前缀转换）
        Yields:
            (record, emitted)：emitted 表示 record.value 是否写入输出序列
        """
        should_pop = _mirrored_should_pop if mirrored else has_higher_or_equal_precedence
        stack = []

        for token in tokens:
            if token.type == TokenType.OPERAND:
                yield StackOperation(OperationType.OUTPUT, token.text,
                                     f"Output operand: {token.text}"), True

            elif token.type == TokenType.LEFT_PAREN:
                stack.append(token.text)
                yield StackOperation(OperationType.PUSH, token.text,
                                     "Push left parenthesis"), False

            elif token.type == TokenType.RIGHT_PAREN:
                while stack and stack[-1] != LEFT_PAREN:
                    op = stack.pop()
                    yield StackOperation(OperationType.POP, op, f"Pop operator: {op}"), True
                if stack:
                    stack.pop()
                    yield StackOperation(OperationType.POP, LEFT_PAREN,
                                         MATCHED_PAREN_DESCRIPTION), False
                elif strict:
                    raise UnbalancedParenthesesError("Unbalanced parentheses in expression")
                else:
                    logger.debug("Ignoring unmatched ')'")

            else:
                c = token.text
                while stack and stack[-1] != LEFT_PAREN and should_pop(stack[-1], c):
                    op = stack.pop()
                    yield StackOperation(OperationType.POP, op,
                                         f"Pop higher precedence operator: {op}"), True
                stack.append(c)
                yield StackOperation(OperationType.PUSH, c, f"Push operator: {c}"), False

        while stack:
            op = stack.pop()
            if op == LEFT_PAREN and strict:
                raise UnbalancedParenthesesError("Unbalanced parentheses in expression")
            yield StackOperation(OperationType.POP, op, f"Pop remaining operator: {op}"), True

    @staticmethod
    def _collect_output(steps):
        return ' '.join(record.value for record, emitted in steps if emitted)

    @staticmethod
    def infix_to_postfix(expression, strict=False):
        """
        中缀 → 后缀
        Args:
            expression: 中缀表达式字符串（Token之间可以没有空格）
            strict: 是否严格校验括号
        Returns:
            以单个空格分隔的后缀表达式
        """
        tokens = tokenize_infix(expression)
        return ExpressionConverter._collect_output(
            ExpressionConverter.iter_shunting_yard(tokens, strict=strict)
        )

    @staticmethod
    def infix_to_prefix(expression, strict=False):
        """
        中缀 → 前缀：反转Token序列并交换括号，对其做后缀转换，再反转结果Token序列
        """
        tokens = mirror_tokens(tokenize_infix(expression))
        postfix = ExpressionConverter._collect_output(
            ExpressionConverter.iter_shunting_yard(tokens, strict=strict, mirrored=True)
        )
        return ' '.join(reversed(postfix.split()))
