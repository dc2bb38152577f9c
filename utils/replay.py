"""utils/replay.py - 按顺序回放栈操作记录"""
import logging
import time

from core.converter import MATCHED_PAREN_DESCRIPTION
from core.errors import InvalidExpressionError
from core.stack_operation import OperationType
from core.token_system import LEFT_PAREN, is_operator

logger = logging.getLogger(__name__)


class StackReplayer:
    """
    在模拟栈上逐条执行预先生成的操作序列。
    PUSH 压入 value，POP 弹出栈顶，OUTPUT 写入输出序列；
    被弹出的操作符，以及扫描结束时清空出来的未匹配 '('，也写入输出序列，
    因此回放转换过程会复原后缀表达式（包括宽松模式下的括号不匹配情形）。
    """

    def __init__(self, operations):
        self.operations = list(operations)
        self.reset()

    def reset(self):
        """回到第一条记录之前"""
        self.position = 0
        self.stack = []
        self.output = []

    @property
    def finished(self):
        return self.position >= len(self.operations)

    def step(self):
        """执行下一条记录并返回它；已结束时返回None"""
        if self.finished:
            return None

        operation = self.operations[self.position]
        if operation.type == OperationType.PUSH:
            self.stack.append(operation.value)
        elif operation.type == OperationType.POP:
            if not self.stack:
                raise InvalidExpressionError(
                    f"Step {self.position + 1}: cannot pop from an empty stack")
            popped = self.stack.pop()
            drained_paren = (popped == LEFT_PAREN
                             and operation.description != MATCHED_PAREN_DESCRIPTION)
            if is_operator(popped) or drained_paren:
                self.output.append(popped)
        else:
            self.output.append(operation.value)

        self.position += 1
        return operation

    def run(self):
        """执行全部剩余记录，返回最终栈"""
        while not self.finished:
            self.step()
        return self.stack

    def play(self, interval_ms=1000, callback=None):
        """
        按固定间隔回放（文本版的动画计时器）
        Args:
            interval_ms: 每步间隔毫秒数
            callback: callback(step_number, operation, stack)，每步之后调用
        """
        while not self.finished:
            operation = self.step()
            if callback is not None:
                callback(self.position, operation, list(self.stack))
            else:
                logger.info(f"Step {self.position}: {operation.description}")
            if interval_ms > 0 and not self.finished:
                time.sleep(interval_ms / 1000.0)
        return self.stack
