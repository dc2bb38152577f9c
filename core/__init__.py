"""核心模块 - Token系统、转换器、RPN评估器、操作符和栈操作记录"""
from .token_system import (
    TokenType, Token, Associativity, OperatorSpec, OPERATOR_DEFINITIONS,
    is_operator, get_precedence, has_higher_or_equal_precedence, tokenize_infix
)
from .errors import (
    ExpressionError, InvalidNumberError, InvalidExpressionError,
    UnbalancedParenthesesError, EmptyExpressionError,
    DivisionByZeroError, UnknownOperatorError
)
from .operators import Operators
from .stack_operation import OperationType, StackOperation
from .converter import ExpressionConverter
from .rpn_evaluator import RPNEvaluator
from .stack_recorder import StepRecorder
from .notation import Notation, evaluate, trace, describe

# 函数式调用接口
infix_to_postfix = ExpressionConverter.infix_to_postfix
infix_to_prefix = ExpressionConverter.infix_to_prefix
evaluate_postfix = RPNEvaluator.evaluate_postfix
evaluate_prefix = RPNEvaluator.evaluate_prefix
evaluate_infix = RPNEvaluator.evaluate_infix
perform_operation = Operators.perform_operation
trace_infix_to_postfix = StepRecorder.trace_infix_to_postfix
trace_postfix_evaluation = StepRecorder.trace_postfix_evaluation
trace_prefix_evaluation = StepRecorder.trace_prefix_evaluation

__all__ = [
    'TokenType', 'Token', 'Associativity', 'OperatorSpec', 'OPERATOR_DEFINITIONS',
    'is_operator', 'get_precedence', 'has_higher_or_equal_precedence', 'tokenize_infix',
    'ExpressionError', 'InvalidNumberError', 'InvalidExpressionError',
    'UnbalancedParenthesesError', 'EmptyExpressionError',
    'DivisionByZeroError', 'UnknownOperatorError',
    'Operators', 'OperationType', 'StackOperation',
    'ExpressionConverter', 'RPNEvaluator', 'StepRecorder',
    'Notation', 'evaluate', 'trace', 'describe',
    'infix_to_postfix', 'infix_to_prefix',
    'evaluate_postfix', 'evaluate_prefix', 'evaluate_infix', 'perform_operation',
    'trace_infix_to_postfix', 'trace_postfix_evaluation', 'trace_prefix_evaluation',
]
