"""Icon generation: seed -> colors + mirrored grid.

Draw order is fixed and shared by every blockies implementation:

    color, bgcolor, spotcolor   (6 draws each, skipped when supplied)
    grid rows                   (ceil(size / 2) draws per row)

Each call to ``generate`` owns a fresh generator, so calls never share
draw state.
"""

from __future__ import annotations

import math
import random
from dataclasses import asdict, dataclass, fields

import numpy as np

from blockies.icon.colors import create_color
from blockies.icon.grid import check_size, create_grid
from blockies.prng.xorshift import SeededPRNG

DEFAULT_SIZE = 8
DEFAULT_SCALE = 4


@dataclass(frozen=True)
class IconSpec:
    size: int = DEFAULT_SIZE
    scale: int = DEFAULT_SCALE
    seed: str | None = None
    color: str | None = None
    bgcolor: str | None = None
    spotcolor: str | None = None

    @classmethod
    def from_dict(cls, d: dict) -> IconSpec:
        """Build a spec from an options mapping.

        Unknown keys are ignored and ``None`` values fall back to defaults.
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in d.items() if k in known and v is not None})


@dataclass(frozen=True)
class IconData:
    color: str
    bgcolor: str
    spotcolor: str
    cells: tuple[int, ...]
    size: int
    scale: int = DEFAULT_SCALE

    @property
    def pixel_size(self) -> int:
        """Side length of the rendered image in pixels."""
        return self.size * self.scale

    def grid(self) -> np.ndarray:
        return np.array(self.cells, dtype=np.uint8).reshape(self.size, self.size)

    def rows(self) -> list[tuple[int, ...]]:
        n = self.size
        return [self.cells[y * n : (y + 1) * n] for y in range(n)]

    def to_dict(self) -> dict:
        d = asdict(self)
        d["cells"] = list(self.cells)
        return d


def check_scale(scale) -> int:
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise ValueError(f"scale must be an integer, got {scale!r}")
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")
    return scale


def random_seed() -> str:
    """A fresh random seed for callers that do not have one."""
    return format(math.floor(random.random() * 10**16), "x")


def generate(spec: IconSpec, rng: SeededPRNG | None = None) -> IconData:
    """Generate the icon described by spec.

    rng, when given, is re-seeded from spec.seed before any draw; pass one
    in to inspect the state or draw count afterwards.

    Raises:
        ValueError: size or scale is not an integer >= 1, or no seed given.
    """
    size = check_size(spec.size)
    scale = check_scale(spec.scale)
    if spec.seed is None:
        raise ValueError("seed is required; use random_seed() to make one")

    if rng is None:
        rng = SeededPRNG()
    rng.seed(spec.seed)

    color = spec.color or create_color(rng)
    bgcolor = spec.bgcolor or create_color(rng)
    spotcolor = spec.spotcolor or create_color(rng)
    cells = create_grid(rng, size)

    return IconData(
        color=color,
        bgcolor=bgcolor,
        spotcolor=spotcolor,
        cells=tuple(cells),
        size=size,
        scale=scale,
    )
