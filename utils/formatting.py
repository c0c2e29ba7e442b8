"""utils/formatting.py"""
import numpy as np

from config.config import DISPLAY_CONFIG


def format_number(value):
    """
    结果显示文本：
    - 整数不带小数部分：14
    - 最短可还原的位数：0.30000000000000004
    - |x| >= 1e21 或 |x| < 1e-6 用科学计数法：1e+21、1.5e-7
    """
    x = float(value)
    if np.isnan(x):
        return "NaN"
    if np.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x == 0:
        return "0"  # -0 也显示为 0

    magnitude = abs(x)
    if magnitude >= DISPLAY_CONFIG["exponent_upper"] or magnitude < DISPLAY_CONFIG["exponent_lower"]:
        return np.format_float_scientific(x, trim='-', exp_digits=1)
    return np.format_float_positional(x, trim='-')
