"""
Errors raised while decoding pattern files.

Every decode failure is a subclass of FormatError, so callers can catch
one type for "this input is not a valid pattern".
"""


class FormatError(Exception):
    """Base class for all pattern decoding errors."""


class UnexpectedCharError(FormatError):
    """A character outside the grammar of the format."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Unexpected character: {char!r}.")


class InvalidMetadataLineError(FormatError):
    """A malformed metadata line in the leading part of a file."""

    kind = "metadata"

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Invalid {self.kind} line: {line}.")


class InvalidHeaderLineError(InvalidMetadataLineError):
    kind = "header"


class InvalidCxrleLineError(InvalidMetadataLineError):
    kind = '"#CXRLE"'


class InvalidStateError(FormatError):
    """An RLE token that does not resolve to a cell state."""

    def __init__(self, state: str):
        self.state = state
        super().__init__(f"Invalid state: {state}.")


class InvalidNodeLineError(FormatError):
    """A Macrocell line that is not a valid quadtree node."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Invalid node line: {line}.")


class UnencodableError(FormatError):
    """An apgcode that is not encoded in extended Wechsler format."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Pattern not encoded in extended Wechsler format: {code}.")


class InputReadError(FormatError):
    """
    Reading from the underlying input failed.

    The original exception is available as __cause__.
    """

    def __init__(self, message: str):
        super().__init__(f"Error when reading from input: {message}.")
