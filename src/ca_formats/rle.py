"""
Decoder for Golly's Extended RLE format.

Extended RLE is the usual run-length encoded format,

    #N Glider
    x = 3, y = 3, rule = B3/S23
    bob$2bo$3o!

plus up to 256 states and an optional "#CXRLE" line giving the position
of the pattern and the current generation:

    #CXRLE Pos=0,-1377 Gen=3480106827776

Body tags, each optionally preceded by a run count:

    b, .        dead cells
    o           living cells (state 1)
    A-X         state 1-24
    pA-yO       state 25-255, the prefix p-y selecting a block of 24 states
    $           end of row(s)
    !           end of pattern

Several patterns may follow each other in one input; after the "!" of the
first one, Rle.remains() decodes the next.
"""

import copy
import re
from dataclasses import dataclass
from typing import Any, Optional

from .cells import CellData, Coordinates
from .config import Config
from .errors import (
    InputReadError,
    InvalidCxrleLineError,
    InvalidHeaderLineError,
    InvalidStateError,
)
from .input import ASCII_WHITESPACE, InputLike, StreamInput, as_input, copy_lines

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U64_MAX = 2**64 - 1

# Number of states addressed by one state-family prefix.
STATES_PER_PREFIX = 24
MAX_STATE = 255

CXRLE_RE = re.compile(
    r"(?:Pos\s*=\s*(?P<x>-?\d+),\s*(?P<y>-?\d+))|(?:Gen\s*=\s*(?P<gen>\d+))",
    re.ASCII,
)
HEADER_RE = re.compile(
    r"x\s*=\s*(?P<x>\d+),\s*y\s*=\s*(?P<y>\d+)(?:,\s*rule\s*=\s*(?P<rule>.*\S)\s*)?",
    re.ASCII,
)

# Lines skipped once the body has started.
METADATA_PREFIXES = ("#", "x ", "x=")

_b, _dot, _o, _q = ord("b"), ord("."), ord("o"), ord("?")
_A, _X = ord("A"), ord("X")
_p, _y = ord("p"), ord("y")
_ROW, _END = ord("$"), ord("!")


@dataclass(frozen=True)
class CxrleData:
    """
    Data from the "#CXRLE" line.

    Attributes:
        pos: Coordinates of the upper left corner of the pattern
        gen: Current generation
    """

    pos: Optional[Coordinates] = None
    gen: Optional[int] = None


@dataclass(frozen=True)
class HeaderData:
    """
    Data from the header line, e.g. "x = 3, y = 3, rule = B3/S23".

    Attributes:
        x: Width of the pattern
        y: Height of the pattern
        rule: Rulestring, if given
    """

    x: int
    y: int
    rule: Optional[str] = None


def parse_cxrle(line: str) -> Optional[CxrleData]:
    """
    Parse a "#CXRLE" line.

    "Pos" and "Gen" may appear in any order, anywhere in the line; the last
    occurrence of each wins. Returns None if a value is out of range.
    """
    pos = None
    gen = None
    for match in CXRLE_RE.finditer(line):
        if match.group("gen") is not None:
            gen = int(match.group("gen"))
            if gen > U64_MAX:
                return None
        else:
            x, y = int(match.group("x")), int(match.group("y"))
            if not (I64_MIN <= x <= I64_MAX and I64_MIN <= y <= I64_MAX):
                return None
            pos = (x, y)
    return CxrleData(pos=pos, gen=gen)


def parse_header(line: str) -> Optional[HeaderData]:
    """Parse a header line, or return None if it is malformed."""
    match = HEADER_RE.fullmatch(line)
    if match is None:
        return None
    x, y = int(match.group("x")), int(match.group("y"))
    if x > U64_MAX or y > U64_MAX:
        return None
    return HeaderData(x=x, y=y, rule=match.group("rule"))


class Rle:
    """
    Iterator over living cells in an Extended RLE file.

    The header line and the "#CXRLE" line are read when the decoder is
    created; if either appears several times only the last one is kept.
    Cells are yielded as CellData in the order they appear in the body.

    Attributes:
        config: Decoder options
        header_data: Data from the header line, if any
        cxrle_data: Data from the "#CXRLE" line, if any
    """

    def __init__(self, source: InputLike, config: Optional[Config] = None):
        """
        Create a decoder and read the metadata lines.

        Args:
            source: Pattern text, an Input, or a readable stream
            config: Decoder options; defaults to Config()

        Raises:
            InvalidHeaderLineError: If the header line is malformed
            InvalidCxrleLineError: If the "#CXRLE" line is malformed
            InputReadError: If reading from a stream fails
        """
        self.config = config if config is not None else Config()
        self.header_data: Optional[HeaderData] = None
        self.cxrle_data: Optional[CxrleData] = None

        source = as_input(source)
        self._to_bytes = source.to_bytes
        self._lines = source.lines()
        self._line: Optional[bytes] = None
        self._index = 0

        for line in self._lines:
            if line.startswith("#CXRLE"):
                self.cxrle_data = parse_cxrle(line)
                if self.cxrle_data is None:
                    raise InvalidCxrleLineError(line)
            elif line.startswith("x ") or line.startswith("x="):
                self.header_data = parse_header(line)
                if self.header_data is None:
                    raise InvalidHeaderLineError(line)
            elif not line.startswith("#"):
                self._line = self._to_bytes(line)
                break

        x, y = 0, 0
        if self.cxrle_data is not None and self.cxrle_data.pos is not None:
            x, y = self.cxrle_data.pos
        self._x = x
        self._y = y
        self._x_start = x

        # Run count of the tag being read; 0 until a digit is seen.
        self._run_count = 0
        # Cells of the current run still to be yielded.
        self._alive_count = 0
        self._state = 1
        self._state_prefix: Optional[int] = None
        self._unknown = self.config.rle_unknown
        self._done = False

    @classmethod
    def from_file(cls, stream: Any, config: Optional[Config] = None) -> "Rle":
        """Create a decoder reading from an open (buffered) stream."""
        return cls(StreamInput(stream), config)

    def with_unknown(self) -> "Rle":
        """
        Allow unknown cells.

        In this variant "?" marks unknown cells, which are the background.
        Dead cells can no longer be omitted, so they are yielded explicitly
        with state 0.
        """
        self._unknown = True
        return self

    def remains(self) -> "Rle":
        """
        Decode the unread lines as a new RLE.

        The new decoder takes over the input; this one yields nothing more.
        """
        rle = Rle(self._lines, self.config)
        if self._unknown:
            rle.with_unknown()
        self._line = None
        self._done = True
        return rle

    def try_remains(self) -> Optional["Rle"]:
        """
        Like remains(), but None if the unread lines hold no pattern body.

        That is the case when they are empty, or contain only comments
        and metadata lines.
        """
        rle = self.remains()
        if rle._line is None:
            return None
        return rle

    def clone(self) -> "Rle":
        """Independent copy of the decoder at its current position."""
        other = copy.copy(self)
        other._lines = copy_lines(self._lines)
        return other

    def __iter__(self) -> "Rle":
        return self

    def __next__(self) -> CellData:
        if self._done:
            raise StopIteration
        if self._alive_count > 0:
            self._alive_count -= 1
            return self._emit()

        while True:
            if self._line is None or self._index >= len(self._line):
                line = self._next_line()
                if line is None:
                    self._done = True
                    raise StopIteration
                if not line.startswith(METADATA_PREFIXES):
                    self._line = self._to_bytes(line)
                    self._index = 0
                continue

            c = self._line[self._index]
            self._index += 1

            if 0x30 <= c <= 0x39:
                self._run_count = 10 * self._run_count + (c - 0x30)
                continue
            if c in ASCII_WHITESPACE:
                continue
            if self._run_count == 0:
                self._run_count = 1

            if self._state_prefix is not None and not _A <= c <= _X:
                self._fail(chr(self._state_prefix) + chr(c))

            if c == _q and self._unknown:
                self._x += self._run_count
                self._run_count = 0
            elif c == _b or c == _dot:
                if self._unknown:
                    return self._start_run(0)
                self._x += self._run_count
                self._run_count = 0
            elif c == _o:
                return self._start_run(1)
            elif _A <= c <= _X:
                return self._start_run(self._letter_state(c))
            elif _p <= c <= _y:
                self._state_prefix = c
            elif c == _ROW:
                self._x = self._x_start
                self._y += self._run_count
                self._run_count = 0
            elif c == _END:
                self._line = None
                self._done = True
                raise StopIteration
            else:
                self._fail(chr(c))

    def _letter_state(self, c: int) -> int:
        prefix = self._state_prefix
        self._state_prefix = None
        if prefix is None:
            return c - _A + 1
        state = STATES_PER_PREFIX * (prefix - _o) + c - _A + 1
        if state > MAX_STATE:
            self._fail(chr(prefix) + chr(c))
        return state

    def _start_run(self, state: int) -> CellData:
        self._state = state
        self._alive_count = self._run_count - 1
        self._run_count = 0
        return self._emit()

    def _emit(self) -> CellData:
        cell = CellData(position=(self._x, self._y), state=self._state)
        self._x += 1
        return cell

    def _fail(self, token: str) -> None:
        self._done = True
        raise InvalidStateError(token)

    def _next_line(self) -> Optional[str]:
        try:
            return next(self._lines, None)
        except InputReadError:
            self._done = True
            raise
