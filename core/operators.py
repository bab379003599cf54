"""core/operators.py"""
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class OperatorDefinition:
    """
    操作符定义
    arity: 消耗的操作数个数；None 表示消耗整个栈（sum/prod/clear/rotate）
    func: 按从左到右的顺序接收操作数（栈底在前），
          返回一个数（压栈）或一个元组（依次压栈，空元组不压栈）
    """
    symbol: str
    arity: Optional[int]
    func: Callable
    aliases: Tuple[str, ...] = field(default=())
    description: str = ''

    @property
    def consumes_stack(self):
        return self.arity is None


class Operators:
    """所有操作符的静态方法集合"""

    # 二元操作符====================

    @staticmethod
    def add(x, y):
        return np.add(x, y)

    @staticmethod
    def sub(x, y):
        return np.subtract(x, y)

    @staticmethod
    def mul(x, y):
        return np.multiply(x, y)

    @staticmethod
    def div(x, y):
        """除法；除零由求值器的 errstate 捕获为 DomainError"""
        return np.divide(x, y)

    @staticmethod
    def pow(x, y):
        return np.power(x, y)

    # 一元操作符====================

    @staticmethod
    def neg(x):
        return np.negative(x)

    @staticmethod
    def abs(x):
        return np.abs(x)

    @staticmethod
    def sqrt(x):
        return np.sqrt(x)

    @staticmethod
    def ln(x):
        return np.log(x)

    @staticmethod
    def log(x):
        return np.log10(x)

    @staticmethod
    def lg(x):
        return np.log2(x)

    # 三角函数（弧度）
    @staticmethod
    def sin(x):
        return np.sin(x)

    @staticmethod
    def asin(x):
        return np.arcsin(x)

    @staticmethod
    def cos(x):
        return np.cos(x)

    @staticmethod
    def acos(x):
        return np.arccos(x)

    @staticmethod
    def tan(x):
        return np.tan(x)

    @staticmethod
    def atan(x):
        return np.arctan(x)

    @staticmethod
    def deg(x):
        """弧度 -> 角度"""
        return np.degrees(x)

    @staticmethod
    def rad(x):
        """角度 -> 弧度"""
        return np.radians(x)

    # 栈操作符====================

    @staticmethod
    def sum(*values):
        return np.sum(values)

    @staticmethod
    def prod(*values):
        return np.prod(values)

    @staticmethod
    def pop(x):
        return ()

    @staticmethod
    def clear(*values):
        return ()

    @staticmethod
    def swap(x, y):
        return y, x

    @staticmethod
    def rotate(*values):
        """把栈顶元素移到栈底"""
        if not values:
            return ()
        return (values[-1],) + values[:-1]

    @staticmethod
    def dup(x):
        return x, x


# 操作符定义字典：新增操作符只需在这里加一项
OPERATOR_DEFINITIONS = {
    # 二元操作符
    '+': OperatorDefinition('+', 2, Operators.add, ('add',),
                            'Applies addition to the two topmost numbers'),
    '-': OperatorDefinition('-', 2, Operators.sub, ('sub', 'subtract'),
                            'Applies subtraction to the two topmost numbers'),
    '*': OperatorDefinition('*', 2, Operators.mul, ('mul', 'multiply'),
                            'Applies multiplication to the two topmost numbers'),
    '/': OperatorDefinition('/', 2, Operators.div, ('div', 'divide'),
                            'Applies division to the two topmost numbers'),
    '^': OperatorDefinition('^', 2, Operators.pow, ('pow', 'power'),
                            'Raises the second number to the power of the topmost'),

    # 一元操作符
    'neg': OperatorDefinition('neg', 1, Operators.neg, ('negate', '~'),
                              'Negates the last number'),
    'abs': OperatorDefinition('abs', 1, Operators.abs, ('absolute',),
                              'Makes the last number positive'),
    'sqrt': OperatorDefinition('sqrt', 1, Operators.sqrt, ('root',),
                               'Takes the square root of the last number'),
    'ln': OperatorDefinition('ln', 1, Operators.ln, ('loge',),
                             'Applies the natural log to the last number'),
    'log': OperatorDefinition('log', 1, Operators.log, ('log10',),
                              'Applies the base-10 log to the last number'),
    'lg': OperatorDefinition('lg', 1, Operators.lg, ('log2',),
                             'Applies the base-2 log to the last number'),
    'sin': OperatorDefinition('sin', 1, Operators.sin, (),
                              'Sine of the last number (in radians)'),
    'asin': OperatorDefinition('asin', 1, Operators.asin, ('sin^-1',),
                               'Inverse sine of the last number'),
    'cos': OperatorDefinition('cos', 1, Operators.cos, (),
                              'Cosine of the last number (in radians)'),
    'acos': OperatorDefinition('acos', 1, Operators.acos, ('cos^-1',),
                               'Inverse cosine of the last number'),
    'tan': OperatorDefinition('tan', 1, Operators.tan, (),
                              'Tangent of the last number (in radians)'),
    'atan': OperatorDefinition('atan', 1, Operators.atan, ('tan^-1',),
                               'Inverse tangent of the last number'),
    'deg': OperatorDefinition('deg', 1, Operators.deg, ('todeg',),
                              'Converts a number (in radians) to degrees'),
    'rad': OperatorDefinition('rad', 1, Operators.rad, ('torad',),
                              'Converts a number (in degrees) to radians'),

    # 栈操作符
    'sum': OperatorDefinition('sum', None, Operators.sum, (),
                              'Adds the entire stack together'),
    'prod': OperatorDefinition('prod', None, Operators.prod, (),
                               'Multiplies the entire stack together'),
    'pop': OperatorDefinition('pop', 1, Operators.pop, (),
                              'Removes the topmost number'),
    'clear': OperatorDefinition('clear', None, Operators.clear, ('cls',),
                                'Clears the stack'),
    'swap': OperatorDefinition('swap', 2, Operators.swap, (),
                               'Swaps the two topmost numbers'),
    'rotate': OperatorDefinition('rotate', None, Operators.rotate, ('rot',),
                                 'Moves the topmost number to the bottom of the stack'),
    'dup': OperatorDefinition('dup', 1, Operators.dup, ('copy', 'clone', 'duplicate'),
                              'Duplicates the topmost number'),
}

# 别名 -> 规范符号
OPERATOR_ALIASES = {
    alias: symbol
    for symbol, definition in OPERATOR_DEFINITIONS.items()
    for alias in (symbol,) + definition.aliases
}
