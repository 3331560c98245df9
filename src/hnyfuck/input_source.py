"""
HnyFuck Input Source
Lazy byte-at-a-time reader behind the input opcode
"""

import io
import sys
from typing import BinaryIO, Optional


class InputSource:
    """Pulls single bytes from a binary stream.

    With no stream given, standard input is bound on the first pull. Once
    the stream runs dry the source stays exhausted.
    """

    def __init__(self, stream: Optional[BinaryIO] = None):
        self._stream = stream
        self.exhausted = False

    @classmethod
    def from_bytes(cls, data: bytes) -> 'InputSource':
        return cls(io.BytesIO(data))

    @classmethod
    def empty(cls) -> 'InputSource':
        source = cls(io.BytesIO())
        source.exhausted = True
        return source

    def pull(self) -> Optional[int]:
        """Return the next byte, or None when nothing is left"""
        if self.exhausted:
            return None
        if self._stream is None:
            self._stream = sys.stdin.buffer
        chunk = self._stream.read(1)
        if not chunk:
            self.exhausted = True
            return None
        return chunk[0]
