"""
Decoder for Golly's Macrocell format.

Macrocell stores a pattern as the quadtree used by HashLife:

    [M2] (golly 3.4)
    #R B3/S23
    $$$$$$*$.*$
    .......*$
    **$
    4 0 1 2 3

Each line after the header is one node, numbered from 1. Two-state rules
use 8x8 leaves written as rows of "." and "*" separated by "$";
multi-state rules use 2x2 leaves "1 nw ne sw se". Every other node is
"level nw ne sw se", the four children given by node number (0 is the
empty node).

The decoder yields nodes, not cells.
"""

import copy
import re
from dataclasses import dataclass
from typing import Any, Optional, Union

from .errors import InputReadError, InvalidHeaderLineError, InvalidNodeLineError
from .input import ASCII_WHITESPACE, InputLike, StreamInput, as_input, copy_lines

U64_MAX = 2**64 - 1
U8_MAX = 255

# Side of a level-3 leaf.
LEAF_SIZE = 8

LEVEL1_RE = re.compile(r"1\s+(\d+)\s+(\d+)\s+(\d+)\s+(\d+)", re.ASCII)
NODE_RE = re.compile(r"(\d+)\s+(\d+)\s+(\d+)\s+(\d+)\s+(\d+)", re.ASCII)
RULE_RE = re.compile(r"#R\s*(?P<rule>.*\S)\s*", re.ASCII)
GEN_RE = re.compile(r"#G\s*(?P<gen>\d+)\s*", re.ASCII)

_dot, _star, _row = ord("."), ord("*"), ord("$")


@dataclass(frozen=True, order=True)
class Level1Leaf:
    """A 2x2 leaf holding the states of its four cells (multi-state rules)."""

    nw: int
    ne: int
    sw: int
    se: int

    @property
    def level(self) -> int:
        return 1


@dataclass(frozen=True, order=True)
class Level3Leaf:
    """
    An 8x8 leaf for 2-state rules.

    Bit (7 - row) * 8 + (7 - column) is the cell at (column, row), so bit 63
    is the north-west corner.
    """

    bits: int

    @property
    def level(self) -> int:
        return 3


@dataclass(frozen=True, order=True)
class Branch:
    """A node of the given level with four children, by node id."""

    level: int
    nw: int
    ne: int
    sw: int
    se: int


NodeData = Union[Level1Leaf, Level3Leaf, Branch]


@dataclass(frozen=True)
class Node:
    """A numbered node of the quadtree."""

    id: int
    data: NodeData


def parse_level3(line: str) -> Optional[Level3Leaf]:
    """Parse an 8x8 leaf line, or return None if it is malformed."""
    bits = 0
    x = y = 0
    for c in line.encode("utf-8"):
        if c == _dot:
            x += 1
        elif c == _star:
            if x >= LEAF_SIZE or y >= LEAF_SIZE:
                return None
            bits |= 1 << ((7 - y) * 8 + (7 - x))
            x += 1
        elif c == _row:
            x = 0
            y += 1
        elif c in ASCII_WHITESPACE:
            continue
        else:
            return None
    return Level3Leaf(bits)


def parse_level1(line: str) -> Optional[Level1Leaf]:
    """Parse a 2x2 leaf line "1 nw ne sw se", or return None."""
    match = LEVEL1_RE.match(line)
    if match is None:
        return None
    states = [int(g) for g in match.groups()]
    if any(s > U8_MAX for s in states):
        return None
    return Level1Leaf(*states)


def parse_branch(line: str) -> Optional[Branch]:
    """Parse a "level nw ne sw se" line, or return None."""
    match = NODE_RE.match(line)
    if match is None:
        return None
    level, nw, ne, sw, se = (int(g) for g in match.groups())
    if level > U8_MAX or max(nw, ne, sw, se) > U64_MAX:
        return None
    return Branch(level=level, nw=nw, ne=ne, sw=sw, se=se)


def parse_rule(line: str) -> Optional[str]:
    """Rulestring from a "#R" line."""
    match = RULE_RE.fullmatch(line)
    return match.group("rule") if match else None


def parse_gen(line: str) -> Optional[int]:
    """Generation from a "#G" line."""
    match = GEN_RE.fullmatch(line)
    if match is None:
        return None
    gen = int(match.group("gen"))
    return gen if gen <= U64_MAX else None


class Macrocell:
    """
    Iterator over the quadtree nodes of a Macrocell file.

    Child ids of a Branch are passed through as written; they are not
    checked against the nodes declared before it.

    Attributes:
        rule: Rulestring from the "#R" line, if any
        gen: Generation from the "#G" line, if any
    """

    def __init__(self, source: InputLike):
        """
        Create a decoder and read the header lines.

        Args:
            source: Pattern text, an Input, or a readable stream

        Raises:
            InvalidHeaderLineError: If a "#R" or "#G" line is malformed
            InputReadError: If reading from a stream fails
        """
        self.rule: Optional[str] = None
        self.gen: Optional[int] = None

        self._lines = as_input(source).lines()
        self._line: Optional[str] = None
        self._id = 1
        self._done = False

        for line in self._lines:
            if line.startswith("[M2]"):
                continue
            elif line.startswith("#R"):
                self.rule = parse_rule(line)
                if self.rule is None:
                    raise InvalidHeaderLineError(line)
            elif line.startswith("#G"):
                self.gen = parse_gen(line)
                if self.gen is None:
                    raise InvalidHeaderLineError(line)
            elif not line.startswith("#"):
                self._line = line
                break

    @classmethod
    def from_file(cls, stream: Any) -> "Macrocell":
        """Create a decoder reading from an open (buffered) stream."""
        return cls(StreamInput(stream))

    def clone(self) -> "Macrocell":
        """Independent copy of the decoder at its current position."""
        other = copy.copy(self)
        other._lines = copy_lines(self._lines)
        return other

    def __iter__(self) -> "Macrocell":
        return self

    def __next__(self) -> Node:
        if self._done:
            raise StopIteration
        while True:
            line = self._line
            self._line = None
            if line is None:
                try:
                    line = next(self._lines, None)
                except InputReadError:
                    self._done = True
                    raise
                if line is None:
                    self._done = True
                    raise StopIteration
            if line.startswith("#"):
                continue

            if line.startswith((".", "*", "$")):
                data = parse_level3(line)
            elif line.startswith("1 "):
                data = parse_level1(line)
            else:
                data = parse_branch(line)
            if data is None:
                self._done = True
                raise InvalidNodeLineError(line)

            node = Node(id=self._id, data=data)
            self._id += 1
            return node
