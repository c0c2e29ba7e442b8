"""批量求值：一组表达式 -> DataFrame"""
import logging
import numpy as np
import pandas as pd

from calculator.evaluator import ExpressionEvaluator

logger = logging.getLogger(__name__)

BATCH_COLUMNS = ["expression", "result", "formatted", "error"]


def load_expressions(path):
    """读取表达式文件：每行一个，跳过空行和 # 注释"""
    expressions = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            expressions.append(line)
    logger.info(f"Loaded {len(expressions)} expressions from {path}")
    return expressions


def evaluate_batch(expressions, angle_mode=None):
    """
    逐个求值，失败的行 result 为 NaN、error 为消息key
    Args:
        expressions: 可迭代的表达式，或 pandas Series
        angle_mode: 所有表达式共用的角度模式
    Returns:
        DataFrame，列为 expression / result / formatted / error
    """
    if isinstance(expressions, pd.Series):
        expressions = expressions.astype(str).tolist()

    evaluator = ExpressionEvaluator(angle_mode)
    rows = []
    for expression in expressions:
        outcome = evaluator.evaluate(expression)
        rows.append({
            "expression": expression,
            "result": outcome.value if outcome.ok else np.nan,
            "formatted": outcome.formatted,
            "error": None if outcome.ok else outcome.error.value,
        })

    df = pd.DataFrame(rows, columns=BATCH_COLUMNS)
    failed = df["error"].notna().sum()
    if failed:
        logger.info(f"{failed}/{len(df)} expressions failed to evaluate")
    return df
