"""工具模块"""
from .formatting import format_result, format_stack, format_help

__all__ = ['format_result', 'format_stack', 'format_help']
