"""核心模块 - Token系统、RPN评估器和操作符"""
from .errors import (
    CalculatorError, TokenError, EvalError, UnknownToken, UnknownOperator,
    StackUnderflow, DomainError, MalformedExpression, InvalidNumber
)
from .operators import Operators, OperatorDefinition, OPERATOR_DEFINITIONS, OPERATOR_ALIASES
from .token_system import (
    TokenType, Token, CONSTANT_DEFINITIONS, CONSTANT_ALIASES, tokenize
)
from .rpn_evaluator import RPNEvaluator, evaluate, calculate
from .session import StackSession

__all__ = [
    'CalculatorError', 'TokenError', 'EvalError', 'UnknownToken', 'UnknownOperator',
    'StackUnderflow', 'DomainError', 'MalformedExpression', 'InvalidNumber',
    'Operators', 'OperatorDefinition', 'OPERATOR_DEFINITIONS', 'OPERATOR_ALIASES',
    'TokenType', 'Token', 'CONSTANT_DEFINITIONS', 'CONSTANT_ALIASES', 'tokenize',
    'RPNEvaluator', 'evaluate', 'calculate', 'StackSession'
]
