"""
Input sources for the decoders.

Every decoder reads its input as a sequence of lines, and each line as a
sequence of bytes. Input captures those two operations so that the same
decoder works on an in-memory string and on a buffered byte stream.

The line iterators are Inputs themselves: whatever a decoder has not read
yet can be handed over to a new decoder (see Rle.remains).
"""

import copy
from abc import ABC, abstractmethod
from typing import Any, Iterator, Union

from .errors import InputReadError


class Input(ABC):
    """
    A source of lines.

    Lines are returned without their terminator ("\\n" or "\\r\\n"),
    and a final newline does not produce an extra empty line.
    """

    @abstractmethod
    def lines(self) -> Iterator[str]:
        """Iterator over the lines of the input."""

    @staticmethod
    def to_bytes(line: str) -> bytes:
        """Raw bytes of a line."""
        return line.encode("utf-8")


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


class TextLines(Input):
    """
    Lines of an in-memory string.

    Only an offset into the string is kept, so copying the iterator
    gives an independent cursor over the same text.
    """

    def __init__(self, text: str, pos: int = 0):
        self._text = text
        self._pos = pos

    def lines(self) -> "TextLines":
        return self

    def __iter__(self) -> "TextLines":
        return self

    def __next__(self) -> str:
        if self._pos >= len(self._text):
            raise StopIteration
        end = self._text.find("\n", self._pos)
        if end == -1:
            line = self._text[self._pos:]
            self._pos = len(self._text)
        else:
            line = self._text[self._pos:end]
            self._pos = end + 1
        if line.endswith("\r"):
            line = line[:-1]
        return line

    def __copy__(self) -> "TextLines":
        return TextLines(self._text, self._pos)


class TextInput(Input):
    """An in-memory string."""

    def __init__(self, text: str):
        self.text = text

    def lines(self) -> TextLines:
        return TextLines(self.text)


class StreamLines(Input):
    """
    Lines read from a buffered stream, one readline() at a time.

    Both text and binary streams are accepted; bytes are decoded as UTF-8.
    Read and decode failures are raised as InputReadError.
    """

    def __init__(self, stream: Any):
        self._stream = stream

    def lines(self) -> "StreamLines":
        return self

    def __iter__(self) -> "StreamLines":
        return self

    def __next__(self) -> str:
        try:
            raw = self._stream.readline()
            if isinstance(raw, bytes):
                raw = raw.decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(str(e)) from e
        if not raw:
            raise StopIteration
        return _strip_terminator(raw)

    def __copy__(self) -> "StreamLines":
        raise TypeError("a stream-backed input cannot be cloned")


class StreamInput(Input):
    """A buffered stream, e.g. an open file or io.BytesIO."""

    def __init__(self, stream: Any):
        self.stream = stream

    def lines(self) -> StreamLines:
        return StreamLines(self.stream)


InputLike = Union[str, Input, Any]


def as_input(source: InputLike) -> Input:
    """
    Coerce a string, an Input, or a stream into an Input.

    Args:
        source: Pattern text, an existing Input, or an object with readline()

    Returns:
        An Input over the source

    Raises:
        TypeError: If the source is none of the above
    """
    if isinstance(source, Input):
        return source
    if isinstance(source, str):
        return TextInput(source)
    if hasattr(source, "readline"):
        return StreamInput(source)
    raise TypeError(f"cannot read a pattern from {type(source).__name__}")


def copy_lines(lines: Iterator[str]) -> Iterator[str]:
    """Independent copy of a line cursor; TypeError if it cannot be copied."""
    return copy.copy(lines)


# Bytes skipped as whitespace inside pattern bodies.
ASCII_WHITESPACE = frozenset(b" \t\n\r\x0c")
