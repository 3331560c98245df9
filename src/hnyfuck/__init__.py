"""
HnyFuck: a tape-machine interpreter for brainfuck and its Happy/New/Year word-pair dialect
"""

__version__ = '1.0.0'

from .program import Opcode, Program, DIALECT_TABLE
from .lexer import (Dialect, Token, Lexer, HnyFuckError, InvalidCharacter,
                    InvalidToken, tokenize, lex, translate)
from .tape import Tape
from .input_source import InputSource
from .interpreter import Executor, LoopSemantics, run_source, from_brainfuck

__all__ = [
    'Opcode', 'Program', 'DIALECT_TABLE',
    'Dialect', 'Token', 'Lexer', 'HnyFuckError', 'InvalidCharacter', 'InvalidToken',
    'tokenize', 'lex', 'translate',
    'Tape', 'InputSource',
    'Executor', 'LoopSemantics', 'run_source', 'from_brainfuck',
]
