import argparse
import sys
from typing import List, Optional

from .errors import ExpressionSearchError
from .logging_system import LogLevel, configure_logging
from .search import STRATEGIES, ExpressionSearch, SearchConfig
from .expression_tree import DivisionPolicy
from .expression_tree.utils import latex_representation

# Used when no numbers are given on the command line
DEMO_NUMBERS = [2, 3, 4]
DEMO_TARGET = 20


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="expression-target",
        description="Print every fully parenthesized +-*/ expression over NUMBERS, "
                    "in order, that evaluates to TARGET.")
    parser.add_argument("numbers", nargs="*", type=int,
                        help=f"Input integers (default: {' '.join(map(str, DEMO_NUMBERS))})")
    parser.add_argument("-t", "--target", type=int, default=None,
                        help=f"Target value (default: {DEMO_TARGET} when no numbers are given)")
    parser.add_argument("--division-policy", choices=[p.value for p in DivisionPolicy],
                        default=DivisionPolicy.EXCLUDE.value,
                        help="How to treat division by zero (default: %(default)s)")
    parser.add_argument("--strategy", choices=STRATEGIES, default="eager",
                        help="Materialize all candidates or filter while building (default: %(default)s)")
    parser.add_argument("--max-nodes", type=int, default=None,
                        help="Abort once this many nodes have been built")
    parser.add_argument("--latex", action="store_true",
                        help="Print the LaTeX form after each expression, tab separated")
    parser.add_argument("--log-level", choices=[level.name.lower() for level in LogLevel],
                        default="minimal", help="Logging verbosity (default: %(default)s)")
    parser.add_argument("--log-file", default=None,
                        help="Also write log records to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    numbers = args.numbers
    target = args.target
    if not numbers:
        numbers = DEMO_NUMBERS
        if target is None:
            target = DEMO_TARGET
    elif target is None:
        parser.error("--target is required when numbers are given")

    if args.max_nodes is not None and args.max_nodes < 1:
        parser.error("--max-nodes must be positive")

    logger = configure_logging(LogLevel[args.log_level.upper()],
                               log_to_file=args.log_file is not None,
                               log_file_path=args.log_file)

    config = SearchConfig(division_policy=args.division_policy,
                          strategy=args.strategy,
                          max_nodes=args.max_nodes)
    try:
        result = ExpressionSearch(numbers, target, config).search()
    except ExpressionSearchError as e:
        logger.critical(f"Search failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    for expr, tree in zip(result.expressions, result.matches):
        if args.latex:
            print(f"{expr}\t{latex_representation(tree)}")
        else:
            print(expr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
