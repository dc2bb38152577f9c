"""主程序入口 - 表达式求值、转换与逐步回放（文本版）"""
import argparse
import logging
import sys

from config.config import ENGINE_CONFIG, REPLAY_CONFIG, LOGGING_CONFIG, validate_config
from core import ExpressionError, Notation, describe, infix_to_postfix, infix_to_prefix, trace
from utils import StackReplayer, trace_to_dataframe

logger = logging.getLogger(__name__)


def run_evaluate(expression, notation, strict):
    summary = describe(expression, notation, strict=strict)
    lines = [f"Result: {summary['result']}"]
    if notation == Notation.INFIX:
        lines.append(f"Postfix: {summary['postfix']}")
        lines.append(f"Prefix: {summary['prefix']}")
    return '\n'.join(lines)


def run_convert(expression, notation, strict):
    if notation != Notation.INFIX:
        return "Conversion only available for Infix expressions"
    return '\n'.join([
        f"Original Infix: {expression}",
        f"Postfix: {infix_to_postfix(expression, strict=strict)}",
        f"Prefix: {infix_to_prefix(expression, strict=strict)}",
    ])


def run_step(expression, notation, strict, interval_ms, show_stack, table=False):
    operations = trace(expression, notation, strict=strict)
    logger.info(f"Recorded {len(operations)} stack operations")

    if table:
        return trace_to_dataframe(operations, with_stack=show_stack).to_string(index=False)

    def _print_step(step_number, operation, stack):
        line = f"Step {step_number}: {operation.description}"
        if show_stack:
            line += f"    stack: [{', '.join(stack)}]"
        print(line, flush=True)

    print("Step-by-step execution:")
    StackReplayer(operations).play(interval_ms=interval_ms, callback=_print_step)
    return "\nExecution completed!"


def non_negative_int(value):
    """argparse 类型：非负整数"""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(description="Expression Evaluator with Stack Replay")

    parser.add_argument(
        "expression",
        type=str,
        help="Expression to evaluate, e.g. \"(3 + 4) * 2\" or \"3 4 + 2 *\""
    )
    parser.add_argument(
        "--notation",
        type=str,
        choices=[n.value for n in Notation],
        default="infix",
        help="Notation of the input expression"
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=["evaluate", "convert", "step"],
        default="evaluate",
        help="evaluate: compute the result; convert: infix to postfix/prefix; "
             "step: replay every stack operation"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject unbalanced parentheses instead of ignoring them"
    )
    parser.add_argument(
        "--interval_ms",
        type=non_negative_int,
        default=REPLAY_CONFIG["interval_ms"],
        help="Delay between replayed steps in milliseconds (>= 0)"
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Print the recorded steps as a table instead of replaying them"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level (default: INFO)"
    )
    return parser


def main(args):
    validate_config()
    notation = Notation.parse(args.notation)
    strict = args.strict or ENGINE_CONFIG["strict_parentheses"]
    expression = args.expression.strip()

    try:
        if args.mode == "evaluate":
            output = run_evaluate(expression, notation, strict)
        elif args.mode == "convert":
            output = run_convert(expression, notation, strict)
        else:
            output = run_step(expression, notation, strict, args.interval_ms,
                              REPLAY_CONFIG["show_stack"], table=args.table)
    except ExpressionError as e:
        logger.error(f"Error: {e}")
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    args = build_parser().parse_args()

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format=LOGGING_CONFIG["format"]
    )
    sys.exit(main(args))
