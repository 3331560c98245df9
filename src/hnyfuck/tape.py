"""
HnyFuck Tape
Byte cells that grow in both directions, addressed by a single cursor
"""

from typing import List


class Tape:
    """Growable byte memory.

    Cells at and right of the starting cell live in ``_right``; cells grown
    to the left live in ``_left`` in reverse order, so growing at either end
    is an append. The public cursor is a physical index into ``cells``.
    """

    def __init__(self):
        self._left = bytearray()
        self._right = bytearray(1)
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def cells(self) -> List[int]:
        return list(reversed(self._left)) + list(self._right)

    def __len__(self) -> int:
        return len(self._left) + len(self._right)

    def __getitem__(self, index: int) -> int:
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError(f"Tape index out of range: {index}")
        offset = index - len(self._left)
        if offset >= 0:
            return self._right[offset]
        return self._left[-offset - 1]

    def __repr__(self) -> str:
        return f"Tape(cells={self.cells}, cursor={self._cursor})"

    def _locate(self):
        offset = self._cursor - len(self._left)
        if offset >= 0:
            return self._right, offset
        return self._left, -offset - 1

    def shift_left(self):
        if self._cursor == 0:
            # New cell becomes index 0, the cursor stays on it
            self._left.append(0)
        else:
            self._cursor -= 1

    def shift_right(self):
        if self._cursor == len(self) - 1:
            self._right.append(0)
        self._cursor += 1

    def increment(self):
        cells, i = self._locate()
        cells[i] = (cells[i] + 1) % 256

    def decrement(self):
        cells, i = self._locate()
        cells[i] = (cells[i] - 1) % 256

    def read(self) -> int:
        cells, i = self._locate()
        return cells[i]

    def write(self, byte: int):
        if not 0 <= byte <= 255:
            raise ValueError(f"Cell value out of range: {byte}")
        cells, i = self._locate()
        cells[i] = byte

    def condition_holds(self) -> bool:
        return self.read() != 0
