"""
core/stack_recorder.py
记录转换/求值过程中的每一次栈操作，供外部按顺序回放。
记录直接来自算法本身的生成器，因此与直接求值的执行顺序完全一致。
"""
import logging

from core.converter import ExpressionConverter, mirror_tokens
from core.rpn_evaluator import RPNEvaluator
from core.token_system import tokenize_infix

logger = logging.getLogger(__name__)


class StepRecorder:
    """
    iter_* 为惰性版本：逐条产出，出错前已产出的记录保留在调用方手中；
    trace_* 为物化版本：出错时直接抛出，不返回部分记录。
    """

    @staticmethod
    def iter_infix_to_postfix(expression, strict=False):
        tokens = tokenize_infix(expression)
        for record, _ in ExpressionConverter.iter_shunting_yard(tokens, strict=strict):
            yield record

    @staticmethod
    def iter_infix_to_prefix(expression, strict=False):
        """前缀转换过程：记录的是对反转后表达式执行的调车场算法"""
        tokens = mirror_tokens(tokenize_infix(expression))
        for record, _ in ExpressionConverter.iter_shunting_yard(tokens, strict=strict, mirrored=True):
            yield record

    @staticmethod
    def iter_postfix_evaluation(expression):
        yield from RPNEvaluator.iter_stack_machine(expression)

    @staticmethod
    def iter_prefix_evaluation(expression):
        yield from RPNEvaluator.iter_stack_machine(expression, reverse=True)

    @staticmethod
    def trace_infix_to_postfix(expression, strict=False):
        """中缀转后缀的完整操作序列：OUTPUT / PUSH / POP"""
        operations = list(StepRecorder.iter_infix_to_postfix(expression, strict=strict))
        logger.debug(f"Recorded {len(operations)} conversion steps")
        return operations

    @staticmethod
    def trace_infix_to_prefix(expression, strict=False):
        return list(StepRecorder.iter_infix_to_prefix(expression, strict=strict))

    @staticmethod
    def trace_postfix_evaluation(expression):
        """后缀求值的完整操作序列：操作符对应 POP b、POP a、PUSH 结果"""
        operations = list(StepRecorder.iter_postfix_evaluation(expression))
        logger.debug(f"Recorded {len(operations)} postfix evaluation steps")
        return operations

    @staticmethod
    def trace_prefix_evaluation(expression):
        """前缀求值的完整操作序列：操作符对应 POP a、POP b、PUSH 结果"""
        operations = list(StepRecorder.iter_prefix_evaluation(expression))
        logger.debug(f"Recorded {len(operations)} prefix evaluation steps")
        return operations
