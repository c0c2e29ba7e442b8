"""core/errors.py - 求值错误的封闭枚举"""
from enum import Enum


class ErrorCategory(Enum):
    LEXICAL = "lexical"          # 词法错误
    SYNTAX = "syntax"            # 语法错误
    SEMANTIC = "semantic"        # 语义错误（未知名称、参数个数）
    ARITHMETIC = "arithmetic"    # 数值错误
    STRUCTURAL = "structural"    # 栈结构错误


class ErrorKind(Enum):
    """
    所有错误类型。值即为本地化消息表中的key，
    调用方按成员（而不是消息文本）区分错误。
    """
    # 词法
    UNKNOWN_TOKEN = "error_unknown_token"

    # 语法
    MISPLACED_COMMA = "error_misplaced_comma"
    MISMATCHED_PARENTHESES = "error_mismatched_parentheses"
    ZERO_ARGUMENT_FUNCTION_CALL = "error_zero_argument_function_call"
    UNCLOSED_FUNCTION_CALL = "error_unclosed_function_call"
    UNEXPECTED_TOKEN = "error_unexpected_token"

    # 语义
    UNKNOWN_IDENTIFIER = "error_unknown_identifier"
    ARITY_MISMATCH = "error_arity_mismatch"
    UNSUPPORTED_FUNCTION = "error_unsupported_function"
    UNSUPPORTED_OPERATOR = "error_unsupported_operator"

    # 数值
    INVALID_FACTORIAL = "error_invalid_factorial"
    NEGATIVE_FACTORIAL = "error_negative_factorial"
    NON_INTEGER_FACTORIAL = "error_non_integer_factorial"
    FACTORIAL_OVERFLOW = "error_factorial_overflow"
    INVALID_NUMBER = "error_invalid_number"
    NON_FINITE_RESULT = "error_non_finite_result"

    # 结构
    STACK_UNDERFLOW = "error_stack_underflow"
    INVALID_EXPRESSION = "error_invalid_expression"

    @property
    def category(self):
        return _CATEGORIES[self]


_CATEGORIES = {
    ErrorKind.UNKNOWN_TOKEN: ErrorCategory.LEXICAL,

    ErrorKind.MISPLACED_COMMA: ErrorCategory.SYNTAX,
    ErrorKind.MISMATCHED_PARENTHESES: ErrorCategory.SYNTAX,
    ErrorKind.ZERO_ARGUMENT_FUNCTION_CALL: ErrorCategory.SYNTAX,
    ErrorKind.UNCLOSED_FUNCTION_CALL: ErrorCategory.SYNTAX,
    ErrorKind.UNEXPECTED_TOKEN: ErrorCategory.SYNTAX,

    ErrorKind.UNKNOWN_IDENTIFIER: ErrorCategory.SEMANTIC,
    ErrorKind.ARITY_MISMATCH: ErrorCategory.SEMANTIC,
    ErrorKind.UNSUPPORTED_FUNCTION: ErrorCategory.SEMANTIC,
    ErrorKind.UNSUPPORTED_OPERATOR: ErrorCategory.SEMANTIC,

    ErrorKind.INVALID_FACTORIAL: ErrorCategory.ARITHMETIC,
    ErrorKind.NEGATIVE_FACTORIAL: ErrorCategory.ARITHMETIC,
    ErrorKind.NON_INTEGER_FACTORIAL: ErrorCategory.ARITHMETIC,
    ErrorKind.FACTORIAL_OVERFLOW: ErrorCategory.ARITHMETIC,
    ErrorKind.INVALID_NUMBER: ErrorCategory.ARITHMETIC,
    ErrorKind.NON_FINITE_RESULT: ErrorCategory.ARITHMETIC,

    ErrorKind.STACK_UNDERFLOW: ErrorCategory.STRUCTURAL,
    ErrorKind.INVALID_EXPRESSION: ErrorCategory.STRUCTURAL,
}


class EvaluationError(Exception):
    """求值失败，携带唯一的ErrorKind"""

    def __init__(self, kind, detail=None):
        self.kind = kind
        self.detail = detail
        message = kind.value if detail is None else f"{kind.value}: {detail}"
        super().__init__(message)
