"""
Tests for input sources.
"""

import copy
import io

import pytest

from ca_formats.errors import InputReadError
from ca_formats.input import (
    Input,
    StreamInput,
    StreamLines,
    TextInput,
    TextLines,
    as_input,
)


class FailingStream:
    """Stream whose second readline() fails."""

    def __init__(self):
        self.calls = 0

    def readline(self):
        self.calls += 1
        if self.calls > 1:
            raise OSError("disk on fire")
        return b"first\n"


class TestTextInput:
    """Tests for in-memory text."""

    def test_lines(self):
        """Lines are split on newlines without terminators."""
        assert list(TextInput("a\nb\r\nc").lines()) == ["a", "b", "c"]

    def test_trailing_newline(self):
        """A final newline does not produce an empty line."""
        assert list(TextInput("a\nb\n").lines()) == ["a", "b"]

    def test_empty_lines_kept(self):
        """Empty lines in the middle are kept."""
        assert list(TextInput("a\n\n\nb").lines()) == ["a", "", "", "b"]

    def test_empty_text(self):
        """Empty text has no lines."""
        assert list(TextInput("").lines()) == []

    def test_restartable(self):
        """Each call to lines() starts from the beginning."""
        text = TextInput("a\nb")
        assert list(text.lines()) == list(text.lines()) == ["a", "b"]

    def test_copy_is_independent(self):
        """Copying a line cursor gives an independent cursor."""
        lines = TextInput("a\nb\nc").lines()
        next(lines)
        other = copy.copy(lines)

        assert list(lines) == ["b", "c"]
        assert list(other) == ["b", "c"]

    def test_lines_are_inputs(self):
        """The unread part of a line cursor is itself an Input."""
        lines = TextInput("a\nb\nc").lines()
        next(lines)

        assert isinstance(lines, Input)
        assert list(lines.lines()) == ["b", "c"]

    def test_to_bytes(self):
        """Lines are projected to UTF-8 bytes."""
        assert TextInput.to_bytes("bo$") == b"bo$"


class TestStreamInput:
    """Tests for buffered streams."""

    def test_binary_stream(self):
        """Binary streams are decoded and split like text."""
        stream = io.BytesIO(b"a\r\nb\nc\n")
        assert list(StreamInput(stream).lines()) == ["a", "b", "c"]

    def test_text_stream(self):
        """Text streams are accepted too."""
        assert list(StreamInput(io.StringIO("a\nb")).lines()) == ["a", "b"]

    def test_read_error(self):
        """OSError while reading is raised as InputReadError."""
        lines = StreamInput(FailingStream()).lines()

        assert next(lines) == "first"
        with pytest.raises(InputReadError, match="disk on fire") as info:
            next(lines)
        assert isinstance(info.value.__cause__, OSError)

    def test_decode_error(self):
        """Invalid UTF-8 is raised as InputReadError."""
        lines = StreamInput(io.BytesIO(b"\xff\xfe\n")).lines()

        with pytest.raises(InputReadError):
            next(lines)

    def test_not_cloneable(self):
        """Stream cursors cannot be copied."""
        with pytest.raises(TypeError):
            copy.copy(StreamInput(io.BytesIO(b"a")).lines())


class TestAsInput:
    """Tests for input coercion."""

    def test_string(self):
        assert isinstance(as_input("bo!"), TextInput)

    def test_stream(self):
        assert isinstance(as_input(io.BytesIO(b"bo!")), StreamInput)

    def test_input_passthrough(self):
        lines = TextLines("bo!")
        assert as_input(lines) is lines

    def test_stream_lines_passthrough(self):
        lines = StreamLines(io.BytesIO(b"bo!"))
        assert as_input(lines) is lines

    def test_unsupported(self):
        """Other objects are rejected."""
        with pytest.raises(TypeError, match="int"):
            as_input(42)
