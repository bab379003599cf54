"""core/token_system.py"""
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np
from scipy import constants

from config.config import CALCULATOR_CONFIG
from core.errors import UnknownToken
from core.operators import OPERATOR_ALIASES


class TokenType(Enum):
    NUMBER = "number"      # 数字（常数在分词时已解析为数字）
    OPERATOR = "operator"  # 操作符


@dataclass(frozen=True)
class Token:
    type: TokenType
    name: str
    value: Optional[float] = None

    @classmethod
    def number(cls, value, name=None):
        value = float(value)
        return cls(TokenType.NUMBER, name if name is not None else repr(value), value)

    @classmethod
    def operator(cls, symbol):
        return cls(TokenType.OPERATOR, symbol)


# 常数定义：名称 -> 数值
CONSTANT_DEFINITIONS = {
    'pi': constants.pi,
    'e': np.e,
    'phi': constants.golden,  # 黄金分割比
}

# 别名 -> 常数名称
CONSTANT_ALIASES = {
    'pi': 'pi',
    'π': 'pi',
    'e': 'e',
    'phi': 'phi',
    'φ': 'phi',
    'ϕ': 'phi',
}


# 十进制浮点字面量（仅ASCII数字，不含下划线）
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_NON_FINITE_PATTERN = re.compile(r"[+-]?(?:nan|inf|infinity)", re.IGNORECASE)


def _parse_number(word):
    """解析浮点数字面量；失败返回None"""
    if _NUMBER_PATTERN.fullmatch(word):
        value = float(word)
    elif _NON_FINITE_PATTERN.fullmatch(word):
        value = float(word)
    else:
        return None
    # nan/inf 不作为数字接受
    if CALCULATOR_CONFIG['reject_non_finite_literals'] and not math.isfinite(value):
        return None
    return value


def classify_word(word):
    """
    按顺序分类单词：数字 -> 常数 -> 操作符
    Returns:
        Token
    Raises:
        UnknownToken: 无法识别
    """
    value = _parse_number(word)
    if value is not None:
        return Token.number(value, name=word)

    key = word.lower() if CALCULATOR_CONFIG['case_insensitive'] else word

    if key in CONSTANT_ALIASES:
        name = CONSTANT_ALIASES[key]
        return Token.number(CONSTANT_DEFINITIONS[name], name=name)

    if key in OPERATOR_ALIASES:
        return Token.operator(OPERATOR_ALIASES[key])

    raise UnknownToken(word)


def tokenize(expression):
    """
    把一行后缀表达式切分为Token序列
    Args:
        expression: 以空白分隔的输入行
    Returns:
        Token列表（保持输入顺序）
    """
    return [classify_word(word) for word in expression.split()]
