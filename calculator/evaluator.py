import logging
from dataclasses import dataclass
from typing import Optional, List

from core import tokenize, to_rpn, RPNEvaluator, AngleMode, ErrorKind, EvaluationError, Token
from config.config import CALCULATOR_CONFIG
from utils.formatting import format_number
from calculator.messages import get_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    """一次求值的结果：value 与 error 恰好有一个非空"""
    expression: str
    value: Optional[float] = None
    error: Optional[ErrorKind] = None
    angle_mode: AngleMode = AngleMode.DEGREES

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def formatted(self) -> Optional[str]:
        return format_number(self.value) if self.ok else None

    def message(self, lang=None) -> Optional[str]:
        return None if self.ok else get_message(self.error, lang)


class ExpressionEvaluator:

    def __init__(self, angle_mode=None):
        self.angle_mode = AngleMode.parse(angle_mode or CALCULATOR_CONFIG["default_angle_mode"])

    @staticmethod
    def compile(expression: str) -> List[Token]:
        """文本 -> RPN，不求值"""
        return to_rpn(tokenize(expression))

    def _resolve_mode(self, angle_mode):
        return self.angle_mode if angle_mode is None else AngleMode.parse(angle_mode)

    def evaluate_or_raise(self, expression: str, angle_mode=None) -> float:
        """
        求值，失败时抛出EvaluationError
        Args:
            expression: 用户输入的表达式
            angle_mode: 本次调用的角度模式，None 使用实例默认值
        """
        mode = self._resolve_mode(angle_mode)
        rpn = self.compile(expression)
        return RPNEvaluator.evaluate(rpn, mode)

    def evaluate(self, expression: str, angle_mode=None) -> EvaluationResult:
        """求值并把EvaluationError转换为结果对象；其它异常照常抛出"""
        # 调用开始时固定角度模式
        mode = self._resolve_mode(angle_mode)
        try:
            value = self.evaluate_or_raise(expression, mode)
        except EvaluationError as e:
            logger.debug(f"Evaluation failed for {expression!r}: {e}")
            return EvaluationResult(expression, error=e.kind, angle_mode=mode)
        return EvaluationResult(expression, value=value, angle_mode=mode)


def evaluate(expression: str, angle_mode=None) -> EvaluationResult:
    return ExpressionEvaluator(angle_mode).evaluate(expression)


def evaluate_or_raise(expression: str, angle_mode=None) -> float:
    return ExpressionEvaluator(angle_mode).evaluate_or_raise(expression)


def format_result(value) -> str:
    return format_number(value)
