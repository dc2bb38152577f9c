"""工具模块"""
from .replay import StackReplayer
from .trace_table import trace_to_dataframe, summarize_trace

__all__ = ['StackReplayer', 'trace_to_dataframe', 'summarize_trace']
