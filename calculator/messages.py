"""错误消息本地化表：每个ErrorKind一条"""
from core.errors import ErrorKind
from config.config import DISPLAY_CONFIG

GENERIC_KEY = "error_generic"

MESSAGES = {
    "en": {
        ErrorKind.ARITY_MISMATCH: "Invalid number of arguments.",
        ErrorKind.FACTORIAL_OVERFLOW: "Factorial exceeded the numeric limit.",
        ErrorKind.INVALID_EXPRESSION: (
            "I couldn't calculate it because the expression is written in a format the calculator "
            "doesn't recognize (check parentheses, signs, and names like sin/sqrt)."
        ),
        ErrorKind.INVALID_FACTORIAL: "Invalid factorial.",
        ErrorKind.INVALID_NUMBER: "Invalid number.",
        ErrorKind.MISMATCHED_PARENTHESES: "Mismatched parentheses.",
        ErrorKind.MISPLACED_COMMA: "Comma in an invalid position.",
        ErrorKind.NEGATIVE_FACTORIAL: "Can't compute the factorial of a negative number.",
        ErrorKind.NON_FINITE_RESULT: (
            "The result of this calculation was infinite or not a number (NaN). Check that you are "
            "not dividing by zero or using something like the square root of a negative number."
        ),
        ErrorKind.NON_INTEGER_FACTORIAL: "Factorial is only defined for integers.",
        ErrorKind.STACK_UNDERFLOW: (
            "A number or argument is missing. E.g.: +2, 2*, 2 + ( ), 2 +, "
            "sin() with no value, pow(2) missing the 2nd argument."
        ),
        ErrorKind.UNCLOSED_FUNCTION_CALL: "Unclosed function call.",
        ErrorKind.UNEXPECTED_TOKEN: "Unexpected token.",
        ErrorKind.UNKNOWN_IDENTIFIER: "Unknown identifier.",
        ErrorKind.UNKNOWN_TOKEN: "Unknown token.",
        ErrorKind.UNSUPPORTED_FUNCTION: "Unsupported function.",
        ErrorKind.UNSUPPORTED_OPERATOR: "Unsupported operator.",
        ErrorKind.ZERO_ARGUMENT_FUNCTION_CALL: "Function call with no arguments.",
        GENERIC_KEY: "Error evaluating the expression.",
    },
    "pt_br": {
        ErrorKind.ARITY_MISMATCH: "Quantidade de argumentos inválida.",
        ErrorKind.FACTORIAL_OVERFLOW: "Fatorial excedeu o limite numérico.",
        ErrorKind.INVALID_EXPRESSION: (
            "Não consegui calcular porque a conta está escrita em um formato que a calculadora não "
            "reconhece (verifique parênteses, sinais e nomes como sin/sqrt)."
        ),
        ErrorKind.INVALID_FACTORIAL: "Fatorial inválido.",
        ErrorKind.INVALID_NUMBER: "Número inválido.",
        ErrorKind.MISMATCHED_PARENTHESES: "Parênteses não correspondentes.",
        ErrorKind.MISPLACED_COMMA: "Vírgula em posição inválida.",
        ErrorKind.NEGATIVE_FACTORIAL: "Não é possível calcular fatorial de número negativo.",
        ErrorKind.NON_FINITE_RESULT: (
            "O resultado dessa conta deu infinito ou não é um número (NaN). Verifique se você não "
            "está dividindo por zero ou usando algo como raiz de número negativo."
        ),
        ErrorKind.NON_INTEGER_FACTORIAL: "O fatorial só é definido para inteiros.",
        ErrorKind.STACK_UNDERFLOW: (
            "Faltou um número ou um argumento. Ex: +2, 2*, 2 + ( ), 2 +, "
            "sin() sem valor, pow(2) sem o argumento 2."
        ),
        ErrorKind.UNCLOSED_FUNCTION_CALL: "Chamada de função não finalizada.",
        ErrorKind.UNEXPECTED_TOKEN: "Token inesperado.",
        ErrorKind.UNKNOWN_IDENTIFIER: "Identificador desconhecido.",
        ErrorKind.UNKNOWN_TOKEN: "Token desconhecido.",
        ErrorKind.UNSUPPORTED_FUNCTION: "Função não suportada.",
        ErrorKind.UNSUPPORTED_OPERATOR: "Operador não suportado.",
        ErrorKind.ZERO_ARGUMENT_FUNCTION_CALL: "Chamada de função sem argumentos.",
        GENERIC_KEY: "Erro ao avaliar a expressão.",
    },
}


def get_message(kind, lang=None):
    """取本地化消息；未知语言回退到英文，未知kind回退到通用消息"""
    table = MESSAGES.get(lang or DISPLAY_CONFIG["default_lang"], MESSAGES["en"])
    return table.get(kind, table[GENERIC_KEY])
