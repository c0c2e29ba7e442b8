"""core/operators.py"""
import numpy as np
import logging
from enum import Enum

from core.errors import ErrorKind, EvaluationError
from core.token_system import UNARY_MINUS

logger = logging.getLogger(__name__)


class AngleMode(Enum):
    DEGREES = "DEGREES"
    RADIANS = "RADIANS"

    @staticmethod
    def parse(value):
        """AngleMode 或 'deg' / 'RADIANS' 等写法 -> AngleMode；未知写法抛ValueError"""
        if isinstance(value, AngleMode):
            return value
        key = str(value).strip().upper()
        if key not in _ANGLE_ALIASES:
            raise ValueError(f"Unknown angle mode: {value!r}")
        return _ANGLE_ALIASES[key]


_ANGLE_ALIASES = {
    "DEGREES": AngleMode.DEGREES, "DEG": AngleMode.DEGREES,
    "RADIANS": AngleMode.RADIANS, "RAD": AngleMode.RADIANS,
}


CONSTANTS = {
    "pi": np.pi,
    "e": np.e,
}


def _f64(x):
    return np.float64(x)


class Operators:
    """所有运算符与函数的静态方法集合（float64，IEEE语义：除零得inf而不是异常）"""

    # 常数====================
    @staticmethod
    def constant(name):
        """按名称（不区分大小写）取常数"""
        value = CONSTANTS.get(name.lower())
        if value is None:
            raise EvaluationError(ErrorKind.UNKNOWN_IDENTIFIER, name)
        return _f64(value)

    # 一元运算符====================
    @staticmethod
    def negate(operand):
        return -_f64(operand)

    @staticmethod
    def factorial(operand):
        """迭代计算阶乘，只接受有限的非负整数"""
        n = _f64(operand)
        if not np.isfinite(n):
            raise EvaluationError(ErrorKind.INVALID_FACTORIAL)
        if n < 0:
            raise EvaluationError(ErrorKind.NEGATIVE_FACTORIAL)
        if n != np.floor(n):
            raise EvaluationError(ErrorKind.NON_INTEGER_FACTORIAL)

        result = _f64(1.0)
        with np.errstate(over='ignore'):
            for i in range(2, int(n) + 1):
                result = result * i
                if not np.isfinite(result):
                    raise EvaluationError(ErrorKind.FACTORIAL_OVERFLOW, f"{int(n)}!")
        return result

    # 二元运算符====================
    @staticmethod
    def add(operand1, operand2):
        with np.errstate(over='ignore'):
            return _f64(operand1) + _f64(operand2)

    @staticmethod
    def sub(operand1, operand2):
        with np.errstate(over='ignore'):
            return _f64(operand1) - _f64(operand2)

    @staticmethod
    def mul(operand1, operand2):
        with np.errstate(over='ignore', invalid='ignore'):
            return _f64(operand1) * _f64(operand2)

    @staticmethod
    def div(operand1, operand2):
        """不做保护，1/0 -> inf，由调用方检查有限性"""
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            return np.divide(_f64(operand1), _f64(operand2))

    @staticmethod
    def mod(operand1, operand2):
        """截断取余，符号跟随被除数"""
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.fmod(_f64(operand1), _f64(operand2))

    @staticmethod
    def power(operand1, operand2):
        with np.errstate(all='ignore'):
            return np.power(_f64(operand1), _f64(operand2))

    # 函数====================
    @staticmethod
    def _trig(fn, x, angle_mode):
        if angle_mode == AngleMode.DEGREES:
            x = np.radians(x)
        with np.errstate(invalid='ignore'):
            return fn(_f64(x))

    @staticmethod
    def _inverse_trig(fn, x, angle_mode):
        with np.errstate(invalid='ignore'):
            result = fn(_f64(x))
        if angle_mode == AngleMode.DEGREES:
            result = np.degrees(result)
        return result

    @staticmethod
    def round_half_up(x):
        """0.5 向正无穷方向舍入：round(2.5)=3, round(-2.5)=-2"""
        x = _f64(x)
        floor = np.floor(x)
        return floor + 1 if x - floor >= 0.5 else floor

    @staticmethod
    def _unary(fn):
        def call(args, angle_mode):
            if len(args) != 1:
                raise EvaluationError(ErrorKind.ARITY_MISMATCH, f"expected 1 argument, got {len(args)}")
            with np.errstate(all='ignore'):
                return _f64(fn(args[0], angle_mode))
        return call

    @staticmethod
    def _pow(args, angle_mode):
        if len(args) != 2:
            raise EvaluationError(ErrorKind.ARITY_MISMATCH, f"expected 2 arguments, got {len(args)}")
        return Operators.power(args[0], args[1])

    @staticmethod
    def _variadic(fn):
        def call(args, angle_mode):
            if len(args) < 1:
                raise EvaluationError(ErrorKind.ARITY_MISMATCH, "expected at least 1 argument")
            return _f64(fn(np.asarray(args, dtype=np.float64)))
        return call

    @staticmethod
    def call_function(name, args, angle_mode):
        """
        按小写函数名分派
        Args:
            name: 函数名（不区分大小写）
            args: 从左到右的参数列表
            angle_mode: 三角函数使用的角度模式
        """
        fn = FUNCTION_DEFINITIONS.get(name.lower())
        if fn is None:
            raise EvaluationError(ErrorKind.UNSUPPORTED_FUNCTION, name)
        return fn(args, angle_mode)

    @staticmethod
    def apply_binary(symbol, operand1, operand2):
        method = BINARY_DEFINITIONS.get(symbol)
        if method is None:
            raise EvaluationError(ErrorKind.UNSUPPORTED_OPERATOR, symbol)
        return method(operand1, operand2)

    @staticmethod
    def apply_unary(symbol, operand):
        if symbol == UNARY_MINUS:
            return Operators.negate(operand)
        if symbol == '!':
            return Operators.factorial(operand)
        raise EvaluationError(ErrorKind.UNSUPPORTED_OPERATOR, symbol)


BINARY_DEFINITIONS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
    '%': Operators.mod,
    '^': Operators.power,
}

UNARY_SYMBOLS = (UNARY_MINUS, '!')

FUNCTION_DEFINITIONS = {
    # 三角函数：角度模式下输入先转弧度
    'sin': Operators._unary(lambda x, m: Operators._trig(np.sin, x, m)),
    'cos': Operators._unary(lambda x, m: Operators._trig(np.cos, x, m)),
    'tan': Operators._unary(lambda x, m: Operators._trig(np.tan, x, m)),

    # 反三角函数：角度模式下结果转角度
    'asin': Operators._unary(lambda x, m: Operators._inverse_trig(np.arcsin, x, m)),
    'acos': Operators._unary(lambda x, m: Operators._inverse_trig(np.arccos, x, m)),
    'atan': Operators._unary(lambda x, m: Operators._inverse_trig(np.arctan, x, m)),

    'sqrt': Operators._unary(lambda x, m: np.sqrt(x)),
    'abs': Operators._unary(lambda x, m: np.abs(x)),
    'exp': Operators._unary(lambda x, m: np.exp(x)),
    'ln': Operators._unary(lambda x, m: np.log(x)),
    'log': Operators._unary(lambda x, m: np.log10(x)),
    'floor': Operators._unary(lambda x, m: np.floor(x)),
    'ceil': Operators._unary(lambda x, m: np.ceil(x)),
    'round': Operators._unary(lambda x, m: Operators.round_half_up(x)),

    'pow': Operators._pow,
    'min': Operators._variadic(np.min),
    'max': Operators._variadic(np.max),
}

SUPPORTED_FUNCTIONS = tuple(FUNCTION_DEFINITIONS.keys())
SUPPORTED_CONSTANTS = tuple(CONSTANTS.keys())
