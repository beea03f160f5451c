"""Mirrored cell grid.

Only the left half of each row (center column included when the size is
odd) is drawn from the generator; the right half is its mirror image.

Cell values:
  0 -> background
  1 -> foreground color
  2 -> spot color
"""

from __future__ import annotations

import math

from blockies.prng.xorshift import SeededPRNG

BACKGROUND = 0
FOREGROUND = 1
SPOT = 2

# floor(u * 2.3) for u in [0, 1): 0 and 1 each ~43%, 2 ~13%
_CELL_SPREAD = 2.3


def check_size(size) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise ValueError(f"size must be an integer, got {size!r}")
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")
    return size


def mirror_row(half: list[int], size: int) -> list[int]:
    """Append the reversed first (size - len(half)) values of half."""
    mirror_width = size - len(half)
    return half + half[:mirror_width][::-1]


def create_grid(rng: SeededPRNG, size: int) -> list[int]:
    """Build a flat row-major list of size * size cell values.

    Consumes size * ceil(size / 2) draws, row by row, left to right.
    """
    check_size(size)
    data_width = math.ceil(size / 2)

    cells: list[int] = []
    for _ in range(size):
        half = [math.floor(rng.next() * _CELL_SPREAD) for _ in range(data_width)]
        cells.extend(mirror_row(half, size))
    return cells
