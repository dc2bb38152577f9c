"""utils/trace_table.py"""
import pandas as pd

from utils.replay import StackReplayer


def trace_to_dataframe(operations, with_stack=False):
    """
    操作序列 → DataFrame
    列：step（从1开始）, type, value, description；
    with_stack=True 时额外给出每步之后的栈内容（自底向顶，空格分隔）
    """
    rows = []
    replayer = StackReplayer(operations) if with_stack else None
    for i, operation in enumerate(operations, 1):
        row = {
            'step': i,
            'type': operation.type.name,
            'value': operation.value,
            'description': operation.description,
        }
        if replayer is not None:
            replayer.step()
            row['stack'] = ' '.join(replayer.stack)
        rows.append(row)

    columns = ['step', 'type', 'value', 'description'] + (['stack'] if with_stack else [])
    return pd.DataFrame(rows, columns=columns)


def summarize_trace(operations):
    """各类型操作的计数"""
    frame = trace_to_dataframe(operations)
    counts = frame['type'].value_counts()
    return {name: int(counts.get(name, 0)) for name in ('PUSH', 'POP', 'OUTPUT')}
