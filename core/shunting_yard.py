"""中缀Token序列 -> RPN（调度场算法，支持函数调用与参数计数）"""
import logging

from core.token_system import (
    Token, TokenType, Associativity, OPERATOR_DEFINITIONS, UNARY_MINUS
)
from core.errors import ErrorKind, EvaluationError

logger = logging.getLogger(__name__)

# 其后出现的 '-' 为一元负号
UNARY_PREFIX_SYMBOLS = ('+', '-', '*', '/', '^', '(', ',', '%')


class FunctionFrame:
    """操作符栈上的函数调用记录，参数个数直接挂在记录上"""

    def __init__(self, name):
        self.name = name
        self.argc = 0

    def __repr__(self):
        return f"FunctionFrame({self.name!r}, argc={self.argc})"


class ShuntingYardConverter:

    @staticmethod
    def _is_left_paren(entry):
        return isinstance(entry, Token) and entry.is_operator('(')

    @staticmethod
    def _is_barrier(entry):
        """'(' 与函数记录会阻止运算符出栈"""
        return isinstance(entry, FunctionFrame) or ShuntingYardConverter._is_left_paren(entry)

    @staticmethod
    def _opens_call(stack):
        """栈顶 '(' 是否属于一个函数调用（函数记录总是紧挨在它下面）"""
        return len(stack) >= 2 and isinstance(stack[-2], FunctionFrame)

    @staticmethod
    def _innermost_frame(stack):
        for entry in reversed(stack):
            if isinstance(entry, FunctionFrame):
                return entry
        return None

    @staticmethod
    def _is_unary_minus(tokens, i):
        if i == 0:
            return True
        prev = tokens[i - 1]
        return prev.is_operator(*UNARY_PREFIX_SYMBOLS)

    @staticmethod
    def _push_operator(token, stack, output):
        """按优先级/结合性弹出栈顶运算符后入栈"""
        info = OPERATOR_DEFINITIONS[token.value]
        while stack:
            top = stack[-1]
            if ShuntingYardConverter._is_barrier(top):
                break
            top_prec = OPERATOR_DEFINITIONS[top.value].precedence
            if info.associativity == Associativity.RIGHT:
                should_pop = info.precedence < top_prec
            else:
                should_pop = info.precedence <= top_prec
            if not should_pop:
                break
            output.append(stack.pop())
        stack.append(token)

    @staticmethod
    def to_rpn(tokens):
        """
        把Token序列转换为RPN
        Args:
            tokens: tokenize() 的输出
        Returns:
            RPN Token列表，函数调用为带argc的FUNCTION Token
        Raises:
            EvaluationError: 未知字符、逗号位置错误、括号不匹配、空参数调用、未闭合调用
        """
        output = []
        stack = []

        for i, token in enumerate(tokens):
            nxt = tokens[i + 1] if i + 1 < len(tokens) else None

            if token.type == TokenType.UNKNOWN:
                raise EvaluationError(ErrorKind.UNKNOWN_TOKEN, token.value)

            if token.type == TokenType.NUMBER:
                output.append(token)
                continue

            if token.type == TokenType.IDENTIFIER:
                # 后面紧跟 '(' 的是函数名
                if nxt is not None and nxt.is_operator('('):
                    stack.append(FunctionFrame(token.value))
                else:
                    output.append(token)
                continue

            if token.type != TokenType.OPERATOR:
                raise EvaluationError(ErrorKind.UNEXPECTED_TOKEN, str(token))

            symbol = token.value

            if symbol == ',':
                while stack and not ShuntingYardConverter._is_left_paren(stack[-1]):
                    output.append(stack.pop())
                if not stack:
                    raise EvaluationError(ErrorKind.MISPLACED_COMMA)
                # 计入最内层尚未闭合的函数调用
                frame = ShuntingYardConverter._innermost_frame(stack)
                if frame is not None:
                    frame.argc += 1
                continue

            if symbol == '(':
                stack.append(token)
                if ShuntingYardConverter._opens_call(stack):
                    frame = stack[-2]
                    # 紧跟 ')' 的是零参数调用，留到 ')' 时报错
                    if not (nxt is not None and nxt.is_operator(')')) and frame.argc == 0:
                        frame.argc = 1
                continue

            if symbol == ')':
                while stack and not ShuntingYardConverter._is_left_paren(stack[-1]):
                    output.append(stack.pop())
                if not stack:
                    raise EvaluationError(ErrorKind.MISMATCHED_PARENTHESES)
                stack.pop()

                if stack and isinstance(stack[-1], FunctionFrame):
                    frame = stack.pop()
                    if frame.argc < 1:
                        raise EvaluationError(ErrorKind.ZERO_ARGUMENT_FUNCTION_CALL, frame.name)
                    output.append(Token(TokenType.FUNCTION, frame.name, frame.argc))
                continue

            if symbol == '-' and ShuntingYardConverter._is_unary_minus(tokens, i):
                ShuntingYardConverter._push_operator(
                    Token(TokenType.OPERATOR, UNARY_MINUS), stack, output)
                continue

            if symbol == '!':
                # 后缀阶乘作用于前一个输出值；先结算挂起的负号，-1! 即 (-1)!
                while stack and stack[-1] == Token(TokenType.OPERATOR, UNARY_MINUS):
                    output.append(stack.pop())
                output.append(token)
                continue

            ShuntingYardConverter._push_operator(token, stack, output)

        while stack:
            entry = stack.pop()
            if isinstance(entry, FunctionFrame):
                raise EvaluationError(ErrorKind.UNCLOSED_FUNCTION_CALL, entry.name)
            if ShuntingYardConverter._is_left_paren(entry):
                raise EvaluationError(ErrorKind.MISMATCHED_PARENTHESES)
            output.append(entry)

        logger.debug(f"RPN: {' '.join(str(t) for t in output)}")
        return output


def to_rpn(tokens):
    return ShuntingYardConverter.to_rpn(tokens)
