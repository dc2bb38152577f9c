"""core/operators.py"""
import numpy as np
import logging

from core.errors import DivisionByZeroError, UnknownOperatorError
from core.token_system import OPERATOR_DEFINITIONS

logger = logging.getLogger(__name__)


class Operators:
    """所有二元操作符的静态方法集合，均按双精度浮点计算"""

    @staticmethod
    def _as_float(result):
        # 统一返回内置float，保证 str() 与原生数值格式一致
        return float(result)

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators._as_float(np.float64(operand1) + np.float64(operand2))

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators._as_float(np.float64(operand1) - np.float64(operand2))

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符（溢出得到inf，不抛异常）"""
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators._as_float(np.float64(operand1) * np.float64(operand2))

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：除数为0时报错"""
        if operand2 == 0:
            raise DivisionByZeroError()
        with np.errstate(over='ignore', invalid='ignore'):
            return Operators._as_float(np.divide(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def mod(operand1, operand2):
        """取余：截断余数，符号跟随被除数（与C的fmod一致）"""
        if operand2 == 0:
            raise DivisionByZeroError()
        with np.errstate(invalid='ignore'):
            return Operators._as_float(np.fmod(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def pow(operand1, operand2):
        """
        实数幂运算。
        定义域外（如负数的分数次幂）返回nan，溢出返回inf，均不抛异常。
        """
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return Operators._as_float(np.power(np.float64(operand1), np.float64(operand2)))

    @staticmethod
    def perform_operation(op, a, b):
        """按操作符符号分派到对应方法，计算 a op b"""
        spec = OPERATOR_DEFINITIONS.get(op)
        op_method = getattr(Operators, spec.method, None) if spec else None
        if op_method is None:
            logger.debug(f"Unknown operator: {op}")
            raise UnknownOperatorError(op)
        return op_method(a, b)
