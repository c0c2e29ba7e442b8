"""主程序入口 - 科学计算器命令行"""
import argparse
import logging
import sys

import pandas as pd

from config.config import CALCULATOR_CONFIG, DISPLAY_CONFIG, LOGGING_CONFIG, validate_config
from core import AngleMode, SUPPORTED_FUNCTIONS, SUPPORTED_CONSTANTS
from calculator import ExpressionEvaluator, CalculationHistory, evaluate_batch, load_expressions

logger = logging.getLogger(__name__)

PROMPT = "> "


def _print_history(history, out):
    if not len(history):
        print("(empty)", file=out)
        return
    for entry in history:
        print(f"{entry.expression} = {entry.result}", file=out)


def run_interactive(evaluator, lang, stdin=None, out=None):
    """
    交互模式：逐行求值，成功的结果进入历史
    命令：:history :clear :deg :rad :help :quit
    """
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    history = CalculationHistory()
    mode = evaluator.angle_mode

    print(f"Angle mode: {mode.value}. Type :help for commands.", file=out)
    while True:
        print(PROMPT, end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            break
        line = line.strip()
        if not line:
            continue

        if line in (":quit", ":q", ":exit"):
            break
        if line == ":history":
            _print_history(history, out)
            continue
        if line == ":clear":
            history.clear()
            continue
        if line in (":deg", ":rad"):
            mode = AngleMode.parse(line[1:])
            print(f"Angle mode: {mode.value}", file=out)
            continue
        if line == ":help":
            print(f"Functions: {', '.join(SUPPORTED_FUNCTIONS)}", file=out)
            print(f"Constants: {', '.join(SUPPORTED_CONSTANTS)}", file=out)
            print("Operators: + - * / % ^ ! ( ) ,", file=out)
            continue

        result = evaluator.evaluate(line, mode)
        if result.ok:
            history.add_result(result)
            print(result.formatted, file=out)
        else:
            print(f"Error: {result.message(lang)}", file=out)

    return history


def run_batch(path, evaluator, out=None):
    out = out or sys.stdout
    df = evaluate_batch(load_expressions(path), evaluator.angle_mode)
    with pd.option_context("display.max_rows", None, "display.width", 120):
        print(df[["expression", "formatted", "error"]].to_string(index=False), file=out)
    return int(df["error"].notna().sum())


def main(args, out=None):
    out = out or sys.stdout
    validate_config()
    evaluator = ExpressionEvaluator(args.angle_mode)
    logger.debug(f"Angle mode: {evaluator.angle_mode.value}, lang: {args.lang}")

    if args.interactive:
        run_interactive(evaluator, args.lang, out=out)
        return 0

    if args.file:
        failed = run_batch(args.file, evaluator, out=out)
        return 1 if failed else 0

    if not args.expressions:
        logger.error("No expression given")
        return 2

    failed = 0
    for expression in args.expressions:
        result = evaluator.evaluate(expression)
        if result.ok:
            print(result.formatted, file=out)
        else:
            failed += 1
            print(f"Error: {result.message(args.lang)}", file=out)
    return 1 if failed else 0


def build_parser():
    parser = argparse.ArgumentParser(description='Scientific calculator expression evaluator')
    parser.add_argument('expressions', nargs='*',
                        help='Expressions to evaluate, e.g. "2+3*4" "sin(90)"')
    parser.add_argument('--angle-mode', type=str,
                        default=CALCULATOR_CONFIG["default_angle_mode"],
                        choices=['deg', 'rad', 'DEGREES', 'RADIANS'],
                        help='Angle mode for trigonometric functions')
    parser.add_argument('--lang', type=str, default=DISPLAY_CONFIG["default_lang"],
                        choices=DISPLAY_CONFIG["languages"],
                        help='Language of error messages')
    parser.add_argument('--file', type=str, default=None,
                        help='Evaluate every line of a file and print a table')
    parser.add_argument('--interactive', action='store_true',
                        help='Interactive session with history')
    parser.add_argument('--log-level', type=str, default=LOGGING_CONFIG["level"],
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG["format"]
    )
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
