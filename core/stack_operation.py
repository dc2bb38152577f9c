"""core/stack_operation.py - 栈操作记录"""
from enum import Enum
from typing import NamedTuple


class OperationType(Enum):
    PUSH = "push"
    POP = "pop"
    OUTPUT = "output"  # 仅转换过程使用：操作数直接写入输出


class StackOperation(NamedTuple):
    """一次栈操作（不可变）：类型、受影响的值（字符串形式）、文字说明"""
    type: OperationType
    value: str
    description: str

    def __str__(self):
        return self.description
