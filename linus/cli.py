"""
Linus command-line driver: run one source file through the interpreter.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from linus import config
from linus.debug_utils.pprint import DEFAULT_OPTIONS, format_token, pprint_expr
from linus.errors import LinusLexError, LinusParseError, LinusRuntimeError
from linus.interpreter import Interpreter
from linus.reader.lexer import tokenize
from linus.reader.parser import parse

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
# status of a panicking process in the original driver
EXIT_RUNTIME_ERROR = 101


def create_arg_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        prog='linus',
        description='Linus - run an indentation-sensitive expression script',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s script.ls               # Run a script, printing each top-level value
  %(prog)s --tokens script.ls      # Show the token stream
  %(prog)s --ast script.ls         # Show the parsed trees
        """
    )
    parser.add_argument('script', help='Linus source file to execute')
    parser.add_argument('--tokens', action='store_true', help='Print tokens and exit')
    parser.add_argument('--ast', action='store_true', help='Print parsed trees and exit')
    parser.add_argument(
        '--log-level',
        default=None,
        help='Logging level for diagnostics on stderr (default: $LINUS_LOG_LEVEL or WARNING)'
    )
    return parser


def configure_logging(level_name: Optional[str]) -> None:
    level = config.get_log_level()
    if level_name:
        named = logging.getLevelName(level_name.upper())
        if isinstance(named, int):
            level = named
    logging.basicConfig(level=level, stream=sys.stderr, format='%(levelname)s %(name)s: %(message)s')


def load_source(path: Path) -> str:
    return path.read_text(encoding=config.get_source_encoding())


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = create_arg_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        source = load_source(Path(args.script))
    except (OSError, UnicodeDecodeError) as e:
        print(f"Problem reading source file {args.script}: {e}", file=sys.stderr)
        return EXIT_FAILURE

    try:
        tokens = tokenize(source)
    except LinusLexError as e:
        print(f"Could not complete lexing\n{e}.", file=sys.stderr)
        return EXIT_FAILURE

    if args.tokens:
        for token in tokens:
            print(format_token(token))
        return EXIT_OK

    try:
        exprs = parse(tokens)
    except LinusParseError as e:
        print(f"Could not complete parsing\n{e}", file=sys.stderr)
        return EXIT_FAILURE

    if args.ast:
        options = {
            **DEFAULT_OPTIONS,
            'max_line_length': config.get_pprint_width(),
            'color': sys.stdout.isatty(),
        }
        for expr in exprs:
            text = pprint_expr(expr, options=options)
            if text:
                print(text)
        return EXIT_OK

    try:
        Interpreter(sys.stdout).interpret(exprs)
    except LinusRuntimeError as e:
        logger.debug("runtime failure", exc_info=True)
        print(f"Runtime error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except RecursionError:
        print("Runtime error: expression nested too deeply", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
