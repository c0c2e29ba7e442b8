"""核心模块 - Token系统、调度场转换器、RPN求值器和运算符"""
from .token_system import (
    TokenType, Token, Associativity, OperatorInfo, OPERATOR_DEFINITIONS,
    UNARY_MINUS, tokenize
)
from .errors import ErrorKind, ErrorCategory, EvaluationError
from .shunting_yard import ShuntingYardConverter, to_rpn
from .operators import Operators, AngleMode, SUPPORTED_FUNCTIONS, SUPPORTED_CONSTANTS
from .rpn_evaluator import RPNEvaluator

__all__ = [
    'TokenType', 'Token', 'Associativity', 'OperatorInfo', 'OPERATOR_DEFINITIONS',
    'UNARY_MINUS', 'tokenize',
    'ErrorKind', 'ErrorCategory', 'EvaluationError',
    'ShuntingYardConverter', 'to_rpn',
    'Operators', 'AngleMode', 'SUPPORTED_FUNCTIONS', 'SUPPORTED_CONSTANTS',
    'RPNEvaluator'
]
