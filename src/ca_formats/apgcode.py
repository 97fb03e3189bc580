"""
Decoders for apgcodes and the Extended Wechsler format.

An apgcode such as "xq4_153" names the kind of object ("xs" still life,
"xp" oscillator, "xq" spaceship), its period, and after the underscore its
cells in Extended Wechsler format.

Extended Wechsler encodes the pattern in horizontal bands 5 cells tall.
Within a band each character is one column, read as a 5-bit mask where
bit i is row i of the band:

    0-9, a-v   column mask (0 is an empty column)
    w, x       2 or 3 empty columns
    y<c>       4 + value(c) empty columns, c in 0-9 or a-z
    z          start the next band
"""

import copy
from enum import Enum
from typing import Optional

from .cells import Coordinates
from .errors import UnencodableError, UnexpectedCharError

# Height of a Wechsler band.
STRIP_HEIGHT = 5

MAX_PERIOD = 2**64 - 1


def _digit_value(c: int) -> Optional[int]:
    """Value of 0-9 / a-z as a base-36 digit, or None."""
    if 0x30 <= c <= 0x39:
        return c - 0x30
    if 0x61 <= c <= 0x7A:
        return c - 0x61 + 10
    return None


class Wechsler:
    """
    Iterator over living cells of a string in Extended Wechsler format.

    Cells come out column by column within a band, top to bottom within
    a column, e.g. "153" yields (0, 0), (1, 0), (1, 2), (2, 0), (2, 1).
    """

    def __init__(self, body: str):
        self._bytes = body.encode("utf-8")
        self._index = 0
        self._x = 0
        self._y = 0
        # Mask of the current column and the next row of it to look at;
        # row == STRIP_HEIGHT means a new character is needed.
        self._strip = 0
        self._row = STRIP_HEIGHT
        self._done = False

    def clone(self) -> "Wechsler":
        """Independent copy of the decoder at its current position."""
        return copy.copy(self)

    def __iter__(self) -> "Wechsler":
        return self

    def __next__(self) -> Coordinates:
        if self._done:
            raise StopIteration
        while True:
            x = self._x
            while self._row < STRIP_HEIGHT:
                row = self._row
                self._row += 1
                if self._row == STRIP_HEIGHT:
                    self._x += 1
                if self._strip & (1 << row):
                    return (x, self._y + row)

            if self._index >= len(self._bytes):
                self._done = True
                raise StopIteration
            c = self._read()
            if c == 0x30:  # 0
                self._x += 1
            elif 0x31 <= c <= 0x39 or 0x61 <= c <= 0x76:  # 1-9, a-v
                self._strip = _digit_value(c)
                self._row = 0
            elif c == 0x77:  # w
                self._x += 2
            elif c == 0x78:  # x
                self._x += 3
            elif c == 0x79:  # y
                if self._index >= len(self._bytes):
                    self._fail("y")
                n = _digit_value(self._read())
                if n is None:
                    self._fail(chr(self._bytes[self._index - 1]))
                self._x += 4 + n
            elif c == 0x7A:  # z
                self._x = 0
                self._y += STRIP_HEIGHT
            else:
                self._fail(chr(c))

    def _read(self) -> int:
        c = self._bytes[self._index]
        self._index += 1
        return c

    def _fail(self, char: str) -> None:
        self._done = True
        raise UnexpectedCharError(char)


class PatternType(Enum):
    """Kind of object named by an apgcode prefix."""

    STILL_LIFE = "xs"
    OSCILLATOR = "xp"
    SPACESHIP = "xq"


class ApgCode:
    """
    An apgcode: pattern type, period, and an iterator over its living cells.

    Only still lifes, oscillators and spaceships are supported, i.e. the
    apgcodes whose body is in Extended Wechsler format. Other apgcodes
    (linear growth, oversized patterns, ...) raise UnencodableError.

    Attributes:
        pattern_type: Still life, oscillator or spaceship
        period: Period of the pattern; always 1 for still lifes
        wechsler: Decoder for the cell body
    """

    def __init__(self, code: str):
        """
        Parse the prefix of an apgcode.

        Args:
            code: An apgcode, e.g. "xq4_153"

        Raises:
            UnencodableError: If the code is not "xs", "xp" or "xq" followed
                by a period and an underscore-separated body
        """
        parts = code.split("_")
        if len(parts) < 2:
            raise UnencodableError(code)
        prefix, body = parts[0], parts[1]

        try:
            self.pattern_type = PatternType(prefix[:2])
        except ValueError:
            raise UnencodableError(code) from None

        digits = prefix[2:]
        if not digits or not (digits.isascii() and digits.isdigit()):
            raise UnencodableError(code)
        period = int(digits)
        if period > MAX_PERIOD:
            raise UnencodableError(code)
        if self.pattern_type is PatternType.STILL_LIFE:
            period = 1

        self.code = code
        self.period = period
        self.wechsler = Wechsler(body)

    def clone(self) -> "ApgCode":
        """Independent copy of the decoder at its current position."""
        other = copy.copy(self)
        other.wechsler = self.wechsler.clone()
        return other

    def __iter__(self) -> "ApgCode":
        return self

    def __next__(self) -> Coordinates:
        return next(self.wechsler)

    def __repr__(self) -> str:
        return f"ApgCode(pattern_type={self.pattern_type.name}, period={self.period})"
