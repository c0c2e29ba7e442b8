"""RPN表达式求值器 - 调用统一的Operators类"""
import re
import numpy as np
import logging
from core.token_system import TokenType, BINARY_OPERATORS
from core.operators import Operators, AngleMode, UNARY_SYMBOLS
from core.errors import ErrorKind, EvaluationError

logger = logging.getLogger(__name__)

NUMBER_PREFIX = re.compile(r"\d*(?:\.\d*)?")


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def _parse_number(text):
        """只取最长的合法前缀：1.2.3 -> 1.2"""
        prefix = NUMBER_PREFIX.match(text).group(0)
        try:
            return np.float64(float(prefix))
        except ValueError:
            raise EvaluationError(ErrorKind.INVALID_NUMBER, text)

    @staticmethod
    def _pop(stack):
        """出栈，并拒绝非有限值"""
        if not stack:
            raise EvaluationError(ErrorKind.STACK_UNDERFLOW)
        value = stack.pop()
        if not np.isfinite(value):
            raise EvaluationError(ErrorKind.INVALID_NUMBER, str(value))
        return value

    @staticmethod
    def evaluate(token_sequence, angle_mode=AngleMode.DEGREES):
        """
        评估RPN表达式
        Args:
            token_sequence: to_rpn() 输出的Token序列
            angle_mode: 三角函数的角度模式，按值传入，求值期间不变
        Returns:
            float结果
        Raises:
            EvaluationError: 栈不足、非法数值、未知名称、结果非有限等
        """
        angle_mode = AngleMode.parse(angle_mode)
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(RPNEvaluator._parse_number(token.value))

            elif token.type == TokenType.IDENTIFIER:
                # 单独出现的标识符只能是常数
                stack.append(Operators.constant(token.value))

            elif token.type == TokenType.FUNCTION:
                argc = token.argc if token.argc is not None else 1
                if len(stack) < argc:
                    raise EvaluationError(ErrorKind.STACK_UNDERFLOW, f"{token.value} needs {argc} arguments")
                args = [RPNEvaluator._pop(stack) for _ in range(argc)][::-1]
                stack.append(Operators.call_function(token.value, args, angle_mode))

            elif token.type == TokenType.OPERATOR:
                if token.value in UNARY_SYMBOLS:
                    operand = RPNEvaluator._pop(stack)
                    stack.append(Operators.apply_unary(token.value, operand))
                elif token.value in BINARY_OPERATORS:
                    operand2 = RPNEvaluator._pop(stack)
                    operand1 = RPNEvaluator._pop(stack)
                    stack.append(Operators.apply_binary(token.value, operand1, operand2))
                else:
                    raise EvaluationError(ErrorKind.UNSUPPORTED_OPERATOR, token.value)

            else:
                raise EvaluationError(ErrorKind.UNEXPECTED_TOKEN, str(token))

        if len(stack) != 1:
            # 例如 "2 3"：两个相邻数字，语法阶段不拦截，这里统一报错
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise EvaluationError(ErrorKind.INVALID_EXPRESSION, f"{len(stack)} values left on stack")

        result = stack[0]
        if not np.isfinite(result):
            raise EvaluationError(ErrorKind.NON_FINITE_RESULT, str(result))
        return float(result)
