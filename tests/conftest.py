"""
Pytest configuration and fixtures for ca_formats tests.
"""

import pytest

from ca_formats.config import Config


GLIDER_CELLS = [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)]

# Sorted (x, y) of the twin bees shuttle, shared by Plaintext and apgcode.
TWIN_BEES_SHUTTLE_CELLS = sorted([
    (17, 0), (18, 0), (0, 1), (1, 1), (17, 1), (19, 1), (27, 1), (28, 1),
    (0, 2), (1, 2), (19, 2), (27, 2), (28, 2), (17, 3), (18, 3), (19, 3),
    (17, 7), (18, 7), (19, 7), (0, 8), (1, 8), (19, 8), (0, 9), (1, 9),
    (17, 9), (19, 9), (17, 10), (18, 10),
])


@pytest.fixture
def default_config() -> Config:
    """Default decoder options."""
    return Config()


@pytest.fixture
def glider_rle() -> str:
    """Glider in RLE with comments and a header line."""
    return (
        "#N Glider\n"
        "#O Richard K. Guy\n"
        "#C The smallest, most common, and first discovered spaceship.\n"
        "#C www.conwaylife.com/wiki/index.php?title=Glider\n"
        "x = 3, y = 3, rule = B3/S23\n"
        "bob$2bo$3o!"
    )


@pytest.fixture
def glider_plaintext() -> str:
    """Glider in Plaintext."""
    return "!Name: Glider\n!\n.O.\n..O\nOOO"


@pytest.fixture
def glider_macrocell() -> str:
    """Glider in Macrocell."""
    return (
        "[M2] (golly 3.4)\n"
        "#R B3/S23\n"
        "$$$$$$*$.*$\n"
        ".......*$\n"
        "**$\n"
        "4 0 1 2 3"
    )


@pytest.fixture
def twin_bees_shuttle_plaintext() -> str:
    """Twin bees shuttle in Plaintext."""
    return "\n".join([
        "!Name: Twin bees shuttle",
        "!Author: Bill Gosper",
        ".................OO",
        "OO...............O.O.......OO",
        "OO.................O.......OO",
        ".................OOO",
        "",
        "",
        "",
        ".................OOO",
        "OO.................O",
        "OO...............O.O",
        ".................OO",
    ])
