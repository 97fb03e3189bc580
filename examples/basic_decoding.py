#!/usr/bin/env python3
"""
Basic ca_formats example.

This script demonstrates:
1. Decoding the same glider from four formats
2. Reading several RLE patterns from one input
3. Turning decoded cells into an mlx grid
"""

import mlx.core as mx

from ca_formats import ApgCode, Macrocell, Plaintext, Rle
from ca_formats.grid import cells_to_grid, node_to_array
from ca_formats.summary import pattern_statistics, print_summary


GLIDER_RLE = """#N Glider
#O Richard K. Guy
x = 3, y = 3, rule = B3/S23
bob$2bo$3o!"""

GLIDER_PLAINTEXT = """!Name: Glider
.O.
..O
OOO"""

GLIDER_MACROCELL = """[M2] (golly 3.4)
#R B3/S23
$$$$$$*$.*$
.......*$
**$
4 0 1 2 3"""

BLOCK_AND_BLINKER = """#C two patterns in one input
x = 2, y = 2, rule = B3/S23
2o$2o!
#CXRLE Pos=10,0
x = 3, y = 1, rule = B3/S23
3o!"""


def main():
    print("=" * 60)
    print("ca_formats - Cellular automaton pattern decoders")
    print("Basic Decoding Example")
    print("=" * 60)
    print()

    # Same object, four encodings
    rle = Rle(GLIDER_RLE)
    print(f"RLE header: {rle.header_data}")
    print(f"  cells: {[cell.position for cell in rle]}")

    print(f"Plaintext cells: {list(Plaintext(GLIDER_PLAINTEXT))}")

    apgcode = ApgCode("xq4_153")
    print(f"apgcode: {apgcode.pattern_type.name}, period {apgcode.period}")
    print(f"  cells: {list(apgcode)}")

    macrocell = Macrocell(GLIDER_MACROCELL)
    print(f"Macrocell rule: {macrocell.rule}")
    for node in macrocell:
        print(f"  node {node.id}: {node.data}")
    print()

    # Several documents in one input
    print("Concatenated RLE documents:")
    document = Rle(BLOCK_AND_BLINKER)
    index = 1
    while document is not None:
        cells = list(document)
        print(f"  document {index}: origin={document.cxrle_data}, {len(cells)} cells")
        document = document.try_remains()
        index += 1
    print()

    # Grids
    grid = cells_to_grid(Rle(GLIDER_RLE))
    mx.eval(grid.states)
    print(f"Glider grid {grid.shape} at {grid.origin}:")
    for row in grid.states.tolist():
        print("  " + "".join("O" if state else "." for state in row))
    print()

    leaf = node_to_array(next(Macrocell(GLIDER_MACROCELL)))
    print(f"First Macrocell leaf has {int(mx.sum(leaf))} living cells")

    print_summary(pattern_statistics(Rle(GLIDER_RLE)), title="Glider")


if __name__ == "__main__":
    main()
