"""
HnyFuck command line entry point
"""

import sys
import logging
import argparse
from typing import List, Optional

from . import __version__
from .interpreter import Executor, LoopSemantics
from .lexer import Dialect, HnyFuckError, lex

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='hnyfuck', description='HnyFuck Interpreter')
    parser.add_argument('source', help='Source file to execute, or program text with --code')
    parser.add_argument('-c', '--code', action='store_true', help='Treat source as program text')
    parser.add_argument('-b', '--brainfuck', action='store_true',
                        help='Source uses brainfuck characters instead of word pairs')
    parser.add_argument('--translate', action='store_true',
                        help='Print the program in the other dialect instead of running it')
    parser.add_argument('--standard-loops', action='store_true',
                        help='Check the loop guard before the first pass')
    parser.add_argument('--strict-loops', action='store_true',
                        help='Treat an unterminated loop as an error')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f'HnyFuck {__version__}')
    return parser


def read_source(args) -> str:
    if args.code:
        return args.source
    try:
        with open(args.source, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='[%(levelname)s] %(message)s',
        stream=sys.stderr,
    )

    source = read_source(args)
    dialect = Dialect.WORDS
    if args.brainfuck:
        dialect = Dialect.BRAINFUCK
        source = source.strip()

    try:
        program = lex(source, dialect)

        if args.translate:
            if dialect is Dialect.BRAINFUCK:
                print(program.to_words())
            else:
                print(program.to_brainfuck())
            return

        loop_semantics = LoopSemantics.DO_WHILE
        if args.standard_loops:
            loop_semantics = LoopSemantics.PRE_CHECKED

        executor = Executor(program, output=sys.stdout.buffer,
                            loop_semantics=loop_semantics,
                            strict_loops=args.strict_loops)
        try:
            executor.run()
        finally:
            sys.stdout.buffer.flush()

        logger.debug("final %r", executor.tape)

    except HnyFuckError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)
    except RecursionError:
        print("Error: loops nested too deeply", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
