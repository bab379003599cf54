"""主程序入口 - 单次求值或交互式栈计算器"""
import argparse
import logging
import sys

from config.config import *
from core import CalculatorError, StackSession, calculate
from utils import format_help, format_result, format_stack

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ('quit', 'q', 'end')
HELP_COMMANDS = ('help', '?')


def run_once(expression, precision=None):
    """求值一行表达式并打印结果；返回退出码"""
    logger.info(f"Evaluating expression: {expression!r}")
    try:
        result = calculate(expression)
    except CalculatorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(format_result(result, precision))
    return 0


def _feed_and_show(session, line, stack_precision):
    try:
        session.feed(line)
    except CalculatorError as e:
        print(f"Error: {e}")
        return

    if DISPLAY_CONFIG['show_stack'] and len(session) >= 1:
        print(f"Stack: {format_stack(session.stack, stack_precision)}")


def run_interactive(input_func=None, precision=None, initial=None):
    """
    交互式循环：栈在各行之间保持
    initial: 进入循环前先求值的表达式
    """
    input_func = input_func or input
    session = StackSession()
    stack_precision = DISPLAY_CONFIG['stack_precision'] if precision is None else precision

    print("Welcome to the stack calculator!")
    print("Type \"help\" and hit return to view available commands.")

    if initial:
        _feed_and_show(session, initial.strip().lower(), stack_precision)

    while True:
        try:
            line = input_func(DISPLAY_CONFIG['prompt'])
        except EOFError:
            print()
            break

        line = line.strip().lower()
        if not line:
            continue
        if line in QUIT_COMMANDS:
            break
        if line in HELP_COMMANDS:
            print(format_help())
            continue

        _feed_and_show(session, line, stack_precision)

    logger.info(f"Session ended with {len(session)} values on the stack")
    return 0


def main(args):
    logging.basicConfig(
        level=args.log_level,
        format=LOGGING_CONFIG['format']
    )
    validate_config()

    if args.list_operators:
        print(format_help())
        return 0

    expression = args.expression
    if expression is None and args.words:
        expression = ' '.join(args.words)

    if expression is None or args.interactive:
        return run_interactive(precision=args.precision, initial=expression)
    return run_once(expression, args.precision)


def non_negative_int(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(description="Stack-based (RPN) calculator")

    parser.add_argument(
        "words",
        nargs="*",
        help="Postfix expression, e.g. 3 4 +"
    )
    parser.add_argument(
        "-e", "--expression",
        type=str,
        default=None,
        help="Postfix expression as a single string"
    )
    parser.add_argument(
        "-i", "--interactive",
        action="store_true",
        help="Start the interactive calculator; a given expression seeds the stack"
    )
    parser.add_argument(
        "--precision",
        type=non_negative_int,
        default=DISPLAY_CONFIG['result_precision'],
        help="Number of decimal places to display"
    )
    parser.add_argument(
        "--list_operators",
        action="store_true",
        help="Print the available commands and exit"
    )
    parser.add_argument(
        "--log_level",
        type=str.upper,
        default=LOGGING_CONFIG['level'],
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)"
    )
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
