"""
HnyFuck Lexer
Splits source text into tokens and maps them onto the opcode alphabet
"""

import logging
from enum import Enum
from dataclasses import dataclass
from typing import List, Optional

from .program import CHARACTERS, WORD_PAIRS, Opcode, Program

logger = logging.getLogger(__name__)


class HnyFuckError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidCharacter(HnyFuckError):
    def __init__(self, char: str, line: int, column: int):
        self.char = char
        self.line = line
        self.column = column
        super().__init__(f"Invalid character {char!r} at line {line}, column {column}")


class InvalidToken(HnyFuckError):
    def __init__(self, message: str, token: Optional['Token'] = None):
        self.token = token
        if token is not None:
            message = f"{message} at line {token.line}, column {token.column}"
        super().__init__(message)


class Dialect(Enum):
    BRAINFUCK = 'brainfuck'
    WORDS = 'words'


@dataclass(frozen=True)
class Token:
    value: str
    line: int
    column: int


class Lexer:
    def __init__(self, source: str, dialect: Dialect = Dialect.WORDS):
        self.source = source
        self.dialect = dialect
        self.position = 0
        self.line = 1
        self.column = 1

    def current_char(self) -> Optional[str]:
        if self.position >= len(self.source):
            return None
        return self.source[self.position]

    def advance(self) -> Optional[str]:
        char = self.current_char()
        self.position += 1
        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def skip_whitespace(self):
        while self.current_char() is not None and self.current_char().isspace():
            self.advance()

    def read_word(self) -> str:
        value = ''
        while self.current_char() is not None and not self.current_char().isspace():
            value += self.advance()
        return value

    def tokenize(self) -> List[Token]:
        self.position = 0
        self.line = 1
        self.column = 1
        tokens = []

        if self.dialect is Dialect.BRAINFUCK:
            # Every character is a token, whitespace included
            while self.current_char() is not None:
                tokens.append(Token(self.current_char(), self.line, self.column))
                self.advance()
            return tokens

        while True:
            self.skip_whitespace()
            if self.current_char() is None:
                break
            start_line = self.line
            start_column = self.column
            tokens.append(Token(self.read_word(), start_line, start_column))
        return tokens

    def lex(self) -> Program:
        tokens = self.tokenize()
        if self.dialect is Dialect.BRAINFUCK:
            opcodes = [self.map_character(token) for token in tokens]
        else:
            opcodes = [self.map_pair(tokens, i) for i in range(0, len(tokens), 2)]
        logger.debug("lexed %d %s tokens into %d opcodes",
                     len(tokens), self.dialect.value, len(opcodes))
        return Program(opcodes)

    @staticmethod
    def map_character(token: Token) -> Opcode:
        try:
            return CHARACTERS[token.value]
        except KeyError:
            raise InvalidCharacter(token.value, token.line, token.column) from None

    @staticmethod
    def map_pair(tokens: List[Token], index: int) -> Opcode:
        first = tokens[index]
        if index + 1 >= len(tokens):
            raise InvalidToken(f"Unpaired token {first.value!r}", first)
        second = tokens[index + 1]
        opcode = WORD_PAIRS.get((first.value, second.value))
        if opcode is None:
            raise InvalidToken(f"Invalid token pair '{first.value} {second.value}'", first)
        return opcode


def tokenize(source: str, dialect: Dialect = Dialect.WORDS) -> List[Token]:
    return Lexer(source, dialect).tokenize()


def lex(source: str, dialect: Dialect = Dialect.WORDS) -> Program:
    """Turn source text of either dialect into a Program.

    Raises InvalidCharacter or InvalidToken on the first symbol that does
    not belong to the dialect; nothing is executed before lexing succeeds.
    """
    return Lexer(source, dialect).lex()


def translate(source: str, source_dialect: Dialect, target_dialect: Dialect) -> str:
    program = lex(source, source_dialect)
    if target_dialect is Dialect.BRAINFUCK:
        return program.to_brainfuck()
    return program.to_words()
