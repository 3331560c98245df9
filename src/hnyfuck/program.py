"""
HnyFuck Program Representation
Opcode alphabet, the dialect table and the immutable opcode sequence
"""

from enum import Enum, auto
from typing import Dict, Iterable, Iterator, Tuple, Union


class Opcode(Enum):
    SHIFT_LEFT = auto()
    SHIFT_RIGHT = auto()
    INCREMENT = auto()
    DECREMENT = auto()
    OUTPUT = auto()
    INPUT = auto()
    LOOP_START = auto()
    LOOP_END = auto()


# Opcode -> (word pair, brainfuck character)
DIALECT_TABLE: Dict[Opcode, Tuple[Tuple[str, str], str]] = {
    Opcode.SHIFT_LEFT: (('Happy', 'New'), '<'),
    Opcode.SHIFT_RIGHT: (('New', 'Year'), '>'),
    Opcode.INCREMENT: (('Year', 'Happy'), '+'),
    Opcode.DECREMENT: (('Happy', 'Year'), '-'),
    Opcode.OUTPUT: (('Year', 'New'), '.'),
    Opcode.INPUT: (('New', 'Happy'), ','),
    Opcode.LOOP_START: (('Happy', 'Happy'), '['),
    Opcode.LOOP_END: (('New', 'New'), ']'),
}

WORD_PAIRS: Dict[Tuple[str, str], Opcode] = {
    pair: opcode for opcode, (pair, _) in DIALECT_TABLE.items()
}

CHARACTERS: Dict[str, Opcode] = {
    char: opcode for opcode, (_, char) in DIALECT_TABLE.items()
}


class Program:
    """An ordered, read-only sequence of opcodes.

    Slicing returns a new Program, so extracting a loop body never touches
    the program it was carved from.
    """

    __slots__ = ('_opcodes',)

    def __init__(self, opcodes: Iterable[Opcode] = ()):
        self._opcodes = tuple(opcodes)

    def nesting_depth(self) -> int:
        """Deepest level of loop nesting, unterminated loops included"""
        depth = deepest = 0
        for opcode in self._opcodes:
            if opcode is Opcode.LOOP_START:
                depth += 1
                deepest = max(deepest, depth)
            elif opcode is Opcode.LOOP_END and depth > 0:
                depth -= 1
        return deepest

    def __len__(self) -> int:
        return len(self._opcodes)

    def __iter__(self) -> Iterator[Opcode]:
        return iter(self._opcodes)

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return Program(self._opcodes[index])
        return self._opcodes[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Program):
            return NotImplemented
        return self._opcodes == other._opcodes

    def __hash__(self) -> int:
        return hash(self._opcodes)

    def __repr__(self) -> str:
        return f"Program({self.to_brainfuck()!r})"

    def to_words(self) -> str:
        """Render in the word-pair dialect, every word separated by one space"""
        return ' '.join(
            ' '.join(DIALECT_TABLE[opcode][0]) for opcode in self._opcodes
        )

    def to_brainfuck(self) -> str:
        """Render in the one-character dialect"""
        return ''.join(DIALECT_TABLE[opcode][1] for opcode in self._opcodes)
