"""utils/formatting.py"""
import numpy as np

from core import OPERATOR_DEFINITIONS, CONSTANT_ALIASES


def format_result(value, precision=None):
    """普通十进制表示（不使用科学计数法），去掉多余的0"""
    if precision is None:
        return np.format_float_positional(value, trim='-')
    return np.format_float_positional(value, precision=precision, unique=True,
                                      fractional=True, trim='-')


def format_stack(stack, precision=2):
    """栈显示，例如 [1.00, 2.50]"""
    trim = 'k' if precision > 0 else '-'
    items = [
        np.format_float_positional(v, precision=precision, unique=False,
                                   fractional=True, trim=trim)
        for v in stack
    ]
    return '[' + ', '.join(items) + ']'


def format_help():
    """根据操作符定义表生成帮助文本"""
    lines = [
        "List of available commands: ",
        "help, ? -- print this help",
        "quit, q, end -- leave the calculator",
        "<number> -- Pushes a number to the stack",
    ]

    constant_names = {}
    for alias, name in CONSTANT_ALIASES.items():
        constant_names.setdefault(name, []).append(alias)
    for name, aliases in constant_names.items():
        lines.append(f"{', '.join(aliases)} -- Pushes {name} onto the stack")

    for symbol, definition in OPERATOR_DEFINITIONS.items():
        names = ', '.join((symbol,) + definition.aliases)
        lines.append(f"{names} -- {definition.description}")
    return '\n'.join(lines)
