"""RPN表达式求值器 - 调用统一的操作符定义表"""
import logging

import numpy as np

from core.errors import (
    DomainError, InvalidNumber, MalformedExpression, StackUnderflow, UnknownOperator
)
from core.operators import OPERATOR_DEFINITIONS
from core.token_system import TokenType, tokenize

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def apply(stack, token):
        """
        把单个Token作用到栈上（原地修改）
        Args:
            stack: 浮点数列表，末尾为栈顶
            token: Token
        """
        if token.type == TokenType.NUMBER:
            if token.value is None or not np.isfinite(token.value):
                raise InvalidNumber(token.value)
            stack.append(token.value)
            return

        definition = OPERATOR_DEFINITIONS.get(token.name)
        if token.type != TokenType.OPERATOR or definition is None:
            raise UnknownOperator(token.name)

        if definition.consumes_stack:
            operands = tuple(stack)
        else:
            if len(stack) < definition.arity:
                raise StackUnderflow(definition.symbol, definition.arity, len(stack))
            # 先弹出的是右操作数：保持栈内顺序即为 (左, ..., 右)
            operands = tuple(stack[len(stack) - definition.arity:])

        results = RPNEvaluator._compute(definition, operands)

        del stack[len(stack) - len(operands):]
        stack.extend(results)
        logger.debug(f"{definition.symbol} {operands} -> {results}")

    @staticmethod
    def _compute(definition, operands):
        """调用操作符函数，把浮点异常和非有限结果转换为DomainError"""
        with np.errstate(divide='raise', over='raise', invalid='raise', under='ignore'):
            try:
                result = definition.func(*operands)
            except (FloatingPointError, ZeroDivisionError, OverflowError, ValueError) as e:
                raise DomainError(definition.symbol, operands) from e

        if not isinstance(result, tuple):
            result = (result,)
        values = [float(x) for x in result]
        if not all(np.isfinite(values)):
            raise DomainError(definition.symbol, operands)
        return values

    @staticmethod
    def evaluate(token_sequence):
        """
        评估RPN表达式
        Args:
            token_sequence: Token序列
        Returns:
            float
        Raises:
            EvalError 的各个子类
        """
        stack = []
        for token in token_sequence:
            RPNEvaluator.apply(stack, token)
        return RPNEvaluator.result(stack)

    @staticmethod
    def result(stack):
        """栈中必须恰好剩一个元素"""
        if len(stack) != 1:
            raise MalformedExpression(len(stack))
        return float(stack[0])


def evaluate(token_sequence):
    return RPNEvaluator.evaluate(token_sequence)


def calculate(expression):
    """分词并求值一行后缀表达式"""
    return RPNEvaluator.evaluate(tokenize(expression))
