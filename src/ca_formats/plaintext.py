"""
Decoder for the Plaintext format.

A Plaintext file is a grid of characters, one row per line:

    !Name: Glider
    .O.
    ..O
    OOO

Lines starting with "!" are comments. "O" (or "*") is a living cell and
"." is a dead cell. The decoder yields the coordinates of living cells in
row-major order, with (0, 0) at the top-left of the first non-comment line.
"""

import copy
from typing import Any, Optional

from .cells import Coordinates
from .config import Config
from .errors import InputReadError, UnexpectedCharError
from .input import ASCII_WHITESPACE, InputLike, StreamInput, as_input, copy_lines


class Plaintext:
    """
    Iterator over living cells in a Plaintext file.

    Attributes:
        config: Decoder options (alphabets and comment marker)
    """

    def __init__(self, source: InputLike, config: Optional[Config] = None):
        """
        Create a decoder and skip the leading comment lines.

        Args:
            source: Pattern text, an Input, or a readable stream
            config: Decoder options; defaults to Config()
        """
        self.config = config if config is not None else Config()
        self._alive = self.config.alive_bytes
        self._dead = self.config.dead_bytes
        self._comment = self.config.plaintext_comment

        source = as_input(source)
        self._to_bytes = source.to_bytes
        self._lines = source.lines()
        self._line = b""
        self._index = 0
        self._x = 0
        self._y = 0
        self._done = False

        for line in self._lines:
            if not line.startswith(self._comment):
                self._line = self._to_bytes(line)
                break

    @classmethod
    def from_file(cls, stream: Any, config: Optional[Config] = None) -> "Plaintext":
        """Create a decoder reading from an open (buffered) stream."""
        return cls(StreamInput(stream), config)

    def clone(self) -> "Plaintext":
        """Independent copy of the decoder at its current position."""
        other = copy.copy(self)
        other._lines = copy_lines(self._lines)
        return other

    def __iter__(self) -> "Plaintext":
        return self

    def __next__(self) -> Coordinates:
        if self._done:
            raise StopIteration
        while True:
            if self._index < len(self._line):
                c = self._line[self._index]
                self._index += 1
                if c in self._alive:
                    cell = (self._x, self._y)
                    self._x += 1
                    return cell
                elif c in self._dead:
                    self._x += 1
                elif c in ASCII_WHITESPACE:
                    continue
                else:
                    self._done = True
                    raise UnexpectedCharError(chr(c))
            else:
                line = self._next_line()
                if line is None:
                    self._done = True
                    raise StopIteration
                if line.startswith(self._comment):
                    continue
                self._x = 0
                self._y += 1
                self._line = self._to_bytes(line)
                self._index = 0

    def _next_line(self) -> Optional[str]:
        try:
            return next(self._lines, None)
        except InputReadError:
            self._done = True
            raise
