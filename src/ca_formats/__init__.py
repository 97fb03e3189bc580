"""
ca_formats - Cellular automaton pattern file decoders

Lazily decodes Extended RLE, Plaintext, apgcode and Macrocell patterns
into living cells (or quadtree nodes, for Macrocell).
"""

__version__ = "0.1.0"

from .apgcode import ApgCode, PatternType, Wechsler
from .cells import CellData, Coordinates
from .config import Config
from .errors import (
    FormatError,
    InputReadError,
    InvalidCxrleLineError,
    InvalidHeaderLineError,
    InvalidMetadataLineError,
    InvalidNodeLineError,
    InvalidStateError,
    UnencodableError,
    UnexpectedCharError,
)
from .input import Input, StreamInput, TextInput
from .macrocell import Branch, Level1Leaf, Level3Leaf, Macrocell, Node
from .plaintext import Plaintext
from .rle import CxrleData, HeaderData, Rle

__all__ = [
    "ApgCode",
    "Branch",
    "CellData",
    "Config",
    "Coordinates",
    "CxrleData",
    "FormatError",
    "HeaderData",
    "Input",
    "InputReadError",
    "InvalidCxrleLineError",
    "InvalidHeaderLineError",
    "InvalidMetadataLineError",
    "InvalidNodeLineError",
    "InvalidStateError",
    "Level1Leaf",
    "Level3Leaf",
    "Macrocell",
    "Node",
    "PatternType",
    "Plaintext",
    "Rle",
    "StreamInput",
    "TextInput",
    "UnencodableError",
    "UnexpectedCharError",
    "Wechsler",
    "__version__",
]
