"""交互式会话 - 栈在多行输入之间保持"""
import logging

from core.rpn_evaluator import RPNEvaluator
from core.token_system import tokenize

logger = logging.getLogger(__name__)


class StackSession:
    """持久栈；每行输入要么整体生效，要么不改变栈"""

    def __init__(self):
        self._stack = []

    @property
    def stack(self):
        return list(self._stack)

    @property
    def top(self):
        return self._stack[-1] if self._stack else None

    def __len__(self):
        return len(self._stack)

    def feed(self, line):
        """
        把一行输入作用到栈上
        Returns:
            作用后的栈（副本）
        Raises:
            CalculatorError: 出错时栈保持原样
        """
        tokens = tokenize(line)
        working = list(self._stack)
        for token in tokens:
            RPNEvaluator.apply(working, token)
        self._stack = working
        logger.debug(f"Stack after {line!r}: {self._stack}")
        return self.stack

    def result(self):
        return RPNEvaluator.result(self._stack)

    def reset(self):
        self._stack = []
