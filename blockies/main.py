#!/usr/bin/env python3
"""blockies -- CLI Interface.

Generates identicons from seeds and writes them as PNG, JSON or text.

Usage:
    python -m blockies.main [SEED ...] [--size 8] [--scale 4] [--output icon.png]
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from blockies.icon.generator import (
    DEFAULT_SCALE,
    DEFAULT_SIZE,
    IconSpec,
    generate,
    random_seed,
)
from blockies.icon.renderer import render_icon, render_icon_sheet
from blockies.prng.xorshift import SeededPRNG

GRID_COLS = 5
ASCII_CELLS = " #@"


def parse_args(argv: list[str] | None = None):
    p = argparse.ArgumentParser(description="Deterministic pixel identicons")
    p.add_argument("seeds", nargs="*", metavar="SEED", help="Seed strings (default: one random seed)")
    p.add_argument("--size", type=int, default=DEFAULT_SIZE, help=f"Cells per side (default: {DEFAULT_SIZE})")
    p.add_argument("--scale", type=int, default=DEFAULT_SCALE, help=f"Pixels per cell (default: {DEFAULT_SCALE})")
    p.add_argument("--color", default=None, help="Foreground color (default: derived from seed)")
    p.add_argument("--bgcolor", default=None, help="Background color (default: derived from seed)")
    p.add_argument("--spotcolor", default=None, help="Spot color (default: derived from seed)")
    p.add_argument("-o", "--output", type=Path, default=None, help="PNG path; several seeds make a sheet")
    p.add_argument("--cols", type=int, default=GRID_COLS, help=f"Sheet columns (default: {GRID_COLS})")
    p.add_argument("--json", action="store_true", help="Print icon data as JSON")
    p.add_argument("--ascii", action="store_true", help="Print each grid as text")
    p.add_argument("-v", "--verbose", action="store_true", help="Print colors and draw counts")
    args = p.parse_args(argv)

    if args.size < 1:
        p.error(f"--size must be >= 1, got {args.size}")
    if args.scale < 1:
        p.error(f"--scale must be >= 1, got {args.scale}")
    if args.cols < 1:
        p.error(f"--cols must be >= 1, got {args.cols}")
    return args


def format_ascii(icon) -> str:
    return "\n".join("".join(ASCII_CELLS[v] for v in row) for row in icon.rows())


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    seeds = args.seeds
    if not seeds:
        seeds = [random_seed()]
        print(f"Seed: {seeds[0]}")

    rng = SeededPRNG()
    icons = []
    for seed in seeds:
        spec = IconSpec(
            size=args.size,
            scale=args.scale,
            seed=seed,
            color=args.color,
            bgcolor=args.bgcolor,
            spotcolor=args.spotcolor,
        )
        icon = generate(spec, rng)
        icons.append(icon)

        if args.verbose:
            print(f"[{seed}] color={icon.color} bgcolor={icon.bgcolor} "
                  f"spotcolor={icon.spotcolor} draws={rng.draws}")
        if args.ascii:
            print(format_ascii(icon))
            print()

    if args.json:
        payload = [dict(icon.to_dict(), seed=seed) for seed, icon in zip(seeds, icons)]
        print(json.dumps(payload if len(payload) > 1 else payload[0], indent=2))

    if args.output is not None:
        try:
            if len(icons) == 1:
                img = render_icon(icons[0])
            else:
                img = render_icon_sheet(icons, cols=args.cols)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        args.output.parent.mkdir(parents=True, exist_ok=True)
        img.save(args.output)
        print(f"Saved {args.output} ({img.width}x{img.height})")

    return 0


if __name__ == "__main__":
    sys.exit(main())
