"""计算器模块 - 表达式求值入口、消息表、历史记录和批量求值"""
from .evaluator import (
    ExpressionEvaluator, EvaluationResult, evaluate, evaluate_or_raise, format_result
)
from .messages import MESSAGES, get_message
from .history import CalculationHistory, HistoryEntry
from .batch import evaluate_batch, load_expressions

__all__ = [
    'ExpressionEvaluator', 'EvaluationResult', 'evaluate', 'evaluate_or_raise', 'format_result',
    'MESSAGES', 'get_message',
    'CalculationHistory', 'HistoryEntry',
    'evaluate_batch', 'load_expressions'
]
