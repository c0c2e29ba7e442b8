"""core/token_system.py"""
from enum import Enum
from dataclasses import dataclass
from typing import List, Optional


class TokenType(Enum):
    NUMBER = "number"          # 数字（原始文本）
    IDENTIFIER = "identifier"  # 常数或函数名
    OPERATOR = "operator"      # 运算符与标点
    UNKNOWN = "unknown"        # 无法识别的字符
    FUNCTION = "function"      # 仅出现在RPN中，带参数个数


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    argc: Optional[int] = None  # 仅FUNCTION使用

    def is_operator(self, *symbols):
        """是否为运算符（可选：是否为指定符号之一）"""
        if self.type != TokenType.OPERATOR:
            return False
        return not symbols or self.value in symbols

    def __str__(self):
        if self.type == TokenType.FUNCTION:
            return f"{self.value}/{self.argc}"
        return self.value


@dataclass(frozen=True)
class OperatorInfo:
    precedence: float
    associativity: Associativity = Associativity.LEFT


UNARY_MINUS = 'u-'

# 运算符表：优先级 + 结合性
OPERATOR_DEFINITIONS = {
    '!': OperatorInfo(5),
    UNARY_MINUS: OperatorInfo(4.5),
    '^': OperatorInfo(4, Associativity.RIGHT),
    '*': OperatorInfo(3),
    '/': OperatorInfo(3),
    '%': OperatorInfo(3),
    '+': OperatorInfo(2),
    '-': OperatorInfo(2),
}

BINARY_OPERATORS = ('+', '-', '*', '/', '%', '^')

# 单字符运算符/标点
OPERATOR_CHARS = "+-*/^(),!%"

WHITESPACE = " \t\n"


def _is_digit(c):
    return "0" <= c <= "9"


def _is_alpha(c):
    return ("a" <= c <= "z") or ("A" <= c <= "Z") or c == "_"


def tokenize(text: str) -> List[Token]:
    """
    把输入文本切分为Token序列，从不失败。
    无法识别的字符生成UNKNOWN Token，由转换器统一报错。
    """
    tokens = []
    i = 0
    n = len(text)

    while i < n:
        c = text[i]

        if c in WHITESPACE:
            i += 1
            continue

        # 数字：数字开头，或 '.' 后跟数字；多个 '.' 留给求值器判断
        if _is_digit(c) or (c == "." and i + 1 < n and _is_digit(text[i + 1])):
            start = i
            i += 1
            while i < n and (_is_digit(text[i]) or text[i] == "."):
                i += 1
            tokens.append(Token(TokenType.NUMBER, text[start:i]))
            continue

        # 标识符：函数名或常数
        if _is_alpha(c):
            start = i
            i += 1
            while i < n and (_is_alpha(text[i]) or _is_digit(text[i])):
                i += 1
            tokens.append(Token(TokenType.IDENTIFIER, text[start:i]))
            continue

        if c in OPERATOR_CHARS:
            tokens.append(Token(TokenType.OPERATOR, c))
            i += 1
            continue

        tokens.append(Token(TokenType.UNKNOWN, c))
        i += 1

    return tokens
