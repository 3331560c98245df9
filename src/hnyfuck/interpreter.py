"""
HnyFuck Interpreter
Executes a Program against a tape, an input source and an output sink
"""

import logging
import sys
from enum import Enum
from typing import BinaryIO, Optional, Tuple

from .input_source import InputSource
from .lexer import Dialect, InvalidToken, lex
from .program import Opcode, Program
from .tape import Tape

logger = logging.getLogger(__name__)

STACK_FRAMES_PER_LOOP = 3
STACK_HEADROOM = 1000


class LoopSemantics(Enum):
    # Body runs once before the guard cell is first checked
    DO_WHILE = 'do-while'
    # Conventional brainfuck: guard checked before every pass
    PRE_CHECKED = 'pre-checked'


class Executor:
    """Runs one Program.

    The executor owns its tape and input source outright. A loop hands
    both to a nested executor for the duration of the loop and takes them
    back afterwards; the enclosing executor holds placeholders meanwhile.
    The output sink is shared by every level.
    """

    def __init__(self, program: Program, tape: Optional[Tape] = None,
                 input_source: Optional[InputSource] = None,
                 output: Optional[BinaryIO] = None,
                 loop_semantics: LoopSemantics = LoopSemantics.DO_WHILE,
                 strict_loops: bool = False, depth: int = 0):
        self.program = program
        self.tape = tape if tape is not None else Tape()
        self.input_source = input_source if input_source is not None else InputSource()
        self.output = output
        self.loop_semantics = loop_semantics
        self.strict_loops = strict_loops
        self.depth = depth
        self.pc = 0

    def run(self):
        """Execute the program from its first opcode to its last"""
        if self.depth == 0:
            self.reserve_stack()
        self.pc = 0
        while self.pc < len(self.program):
            opcode = self.program[self.pc]
            self.pc += 1
            # Two frames per loop level: run and op_loop_start
            getattr(self, f'op_{opcode.name.lower()}')()

    def reserve_stack(self):
        """Raise the recursion limit to fit the deepest loop nesting"""
        needed = self.program.nesting_depth() * STACK_FRAMES_PER_LOOP + STACK_HEADROOM
        if sys.getrecursionlimit() < needed:
            logger.debug("raising recursion limit to %d", needed)
            sys.setrecursionlimit(needed)

    def release(self) -> Tuple[Tape, InputSource]:
        """Give up the tape and input source, keeping placeholders"""
        owned = self.tape, self.input_source
        self.tape = Tape()
        self.input_source = InputSource.empty()
        return owned

    def emit(self, byte: int):
        if self.output is None:
            self.output = sys.stdout.buffer
        self.output.write(bytes((byte,)))

    # Opcode handlers
    def op_shift_left(self):
        self.tape.shift_left()

    def op_shift_right(self):
        self.tape.shift_right()

    def op_increment(self):
        self.tape.increment()

    def op_decrement(self):
        self.tape.decrement()

    def op_output(self):
        self.emit(self.tape.read())

    def op_input(self):
        byte = self.input_source.pull()
        if byte is not None:
            self.tape.write(byte)

    def op_loop_start(self):
        body = self.scan_loop_body()
        tape, input_source = self.release()
        nested = Executor(body, tape, input_source, self.output,
                          loop_semantics=self.loop_semantics,
                          strict_loops=self.strict_loops,
                          depth=self.depth + 1)
        logger.debug("entering loop at depth %d with %d opcodes", nested.depth, len(body))

        passes = 0
        try:
            if self.loop_semantics is LoopSemantics.DO_WHILE:
                nested.run()
                passes += 1
            while nested.tape.condition_holds():
                nested.run()
                passes += 1
        finally:
            self.tape, self.input_source = nested.release()
            # The nested executor may have bound the default sink
            self.output = nested.output

        logger.debug("left loop at depth %d after %d passes", nested.depth, passes)

    def op_loop_end(self):
        raise InvalidToken("Unmatched loop end")

    def scan_loop_body(self) -> Program:
        """Consume opcodes up to the matching loop end and return the body"""
        start = self.pc
        depth = 1
        while self.pc < len(self.program):
            opcode = self.program[self.pc]
            self.pc += 1
            if opcode is Opcode.LOOP_START:
                depth += 1
            elif opcode is Opcode.LOOP_END:
                depth -= 1
                if depth == 0:
                    return self.program[start:self.pc - 1]

        if self.strict_loops:
            raise InvalidToken("Unterminated loop")
        logger.warning("unterminated loop, running the %d opcodes that follow it as its body",
                       len(self.program) - start)
        return self.program[start:]


def run_source(source: str, dialect: Dialect = Dialect.WORDS,
               input_source: Optional[InputSource] = None,
               output: Optional[BinaryIO] = None, **options) -> Executor:
    """Lex and run source text, returning the finished executor"""
    executor = Executor(lex(source, dialect), input_source=input_source,
                        output=output, **options)
    executor.run()
    return executor


def from_brainfuck(source: str, **options) -> Executor:
    """Build an executor for brainfuck text by way of the word-pair dialect"""
    words = lex(source, Dialect.BRAINFUCK).to_words()
    return Executor(lex(words, Dialect.WORDS), **options)
