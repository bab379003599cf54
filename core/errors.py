"""core/errors.py - 计算器错误类型"""


class CalculatorError(Exception):
    """所有计算器错误的基类"""


class TokenError(CalculatorError):
    """分词阶段的错误"""


class EvalError(CalculatorError):
    """求值阶段的错误"""


class UnknownToken(TokenError):
    """既不是数字、常数，也不是操作符的单词"""

    def __init__(self, word):
        self.word = word
        super().__init__(f"Couldn't parse {word!r}")


class UnknownOperator(EvalError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"Unknown operator {symbol!r}")


class StackUnderflow(EvalError):
    """栈中操作数不足"""

    def __init__(self, operator, needed, available):
        self.operator = operator
        self.needed = needed
        self.available = available
        super().__init__(
            f"Insufficient operands for {operator!r}: "
            f"needs {needed}, stack has {available}"
        )


class DomainError(EvalError):
    """操作数超出操作符的数学定义域（除零、负数开方等）"""

    def __init__(self, operator, operands):
        self.operator = operator
        self.operands = tuple(operands)
        shown = ', '.join(repr(float(x)) for x in self.operands)
        super().__init__(f"{operator!r} is undefined for operands ({shown})")


class MalformedExpression(EvalError):
    """求值结束后栈中不是恰好一个元素"""

    def __init__(self, remaining):
        self.remaining = remaining
        super().__init__(
            f"Stack has {remaining} elements after evaluation, expected 1"
        )


class InvalidNumber(EvalError):
    """NaN/inf 不能作为操作数入栈"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"{value!r} is not a finite number")
