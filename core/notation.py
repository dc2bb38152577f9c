"""core/notation.py - 按表达式类型分派的统一入口"""
from enum import Enum
import logging

from core.converter import ExpressionConverter
from core.errors import EmptyExpressionError
from core.rpn_evaluator import RPNEvaluator
from core.stack_recorder import StepRecorder

logger = logging.getLogger(__name__)


class Notation(Enum):
    INFIX = "infix"
    POSTFIX = "postfix"
    PREFIX = "prefix"

    @classmethod
    def parse(cls, name):
        """'Infix' / 'postfix' / Notation.PREFIX → Notation"""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown notation: {name!r}") from None


def _require_text(text):
    expression = text.strip()
    if not expression:
        raise EmptyExpressionError("Please enter an expression")
    return expression


def evaluate(text, notation, strict=False):
    """按类型求值"""
    notation = Notation.parse(notation)
    expression = _require_text(text)
    if notation == Notation.INFIX:
        return RPNEvaluator.evaluate_infix(expression, strict=strict)
    if notation == Notation.POSTFIX:
        return RPNEvaluator.evaluate_postfix(expression)
    return RPNEvaluator.evaluate_prefix(expression)


def trace(text, notation, strict=False):
    """
    按类型生成操作序列：
    中缀记录转后缀的过程，后缀/前缀记录求值过程
    """
    notation = Notation.parse(notation)
    expression = _require_text(text)
    if notation == Notation.INFIX:
        return StepRecorder.trace_infix_to_postfix(expression, strict=strict)
    if notation == Notation.POSTFIX:
        return StepRecorder.trace_postfix_evaluation(expression)
    return StepRecorder.trace_prefix_evaluation(expression)


def describe(text, notation, strict=False):
    """
    求值并汇总结果；中缀额外给出后缀和前缀形式。
    Returns:
        {'notation', 'expression', 'result'[, 'postfix', 'prefix']}
    """
    notation = Notation.parse(notation)
    expression = _require_text(text)
    summary = {
        'notation': notation.value,
        'expression': expression,
        'result': evaluate(expression, notation, strict=strict),
    }
    if notation == Notation.INFIX:
        summary['postfix'] = ExpressionConverter.infix_to_postfix(expression, strict=strict)
        summary['prefix'] = ExpressionConverter.infix_to_prefix(expression, strict=strict)
    logger.debug(f"Described {notation.value} expression: {summary}")
    return summary
