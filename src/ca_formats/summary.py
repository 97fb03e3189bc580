"""
Statistics over decoded cells.

Header data is advisory: these numbers are what the cells actually say,
for callers that want to compare them with the declared size.
"""

from typing import Iterable, Union

import numpy as np

from .cells import CellData, Coordinates


def pattern_statistics(cells: Iterable[Union[CellData, Coordinates]]) -> dict:
    """
    Compute population, bounding box and state counts.

    Args:
        cells: CellData values, or coordinates of living cells

    Returns:
        Dictionary with population, bounding_box (x0, y0, x1, y1 or None),
        width, height, and state_counts {state: count}
    """
    positions = []
    states = []
    for cell in cells:
        if isinstance(cell, CellData):
            positions.append(cell.position)
            states.append(cell.state)
        else:
            positions.append(tuple(cell))
            states.append(1)

    if not positions:
        return {
            "population": 0,
            "bounding_box": None,
            "width": 0,
            "height": 0,
            "state_counts": {},
        }

    xy = np.array(positions, dtype=np.int64)
    x0, y0 = xy.min(axis=0)
    x1, y1 = xy.max(axis=0)

    counts = np.bincount(np.array(states, dtype=np.int64), minlength=1)
    state_counts = {int(s): int(n) for s, n in enumerate(counts) if n > 0}

    return {
        "population": int(sum(n for s, n in state_counts.items() if s > 0)),
        "bounding_box": (int(x0), int(y0), int(x1), int(y1)),
        "width": int(x1 - x0 + 1),
        "height": int(y1 - y0 + 1),
        "state_counts": state_counts,
    }


def print_summary(stats: dict, title: str = "Pattern") -> None:
    """
    Print formatted statistics.

    Args:
        stats: Output from pattern_statistics
        title: Heading for the summary
    """
    print(f"\n=== {title} Summary ===\n")

    print(f"Population: {stats['population']}")
    if stats["bounding_box"] is None:
        print("Bounding box: (empty)")
    else:
        x0, y0, x1, y1 = stats["bounding_box"]
        print(f"Bounding box: ({x0}, {y0}) - ({x1}, {y1})")
        print(f"  Size: {stats['width']}x{stats['height']}")

    if len(stats["state_counts"]) > 1 or 1 not in stats["state_counts"]:
        print("\nStates:")
        for state, count in sorted(stats["state_counts"].items()):
            print(f"  {state}: {count}")

    print()
