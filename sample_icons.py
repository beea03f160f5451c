#!/usr/bin/env python3
"""Generate a set of sample identicons.

Writes one PNG per seed plus a contact sheet of all of them.

Usage:
    python sample_icons.py
"""

from pathlib import Path

from blockies.icon.generator import IconSpec, generate
from blockies.icon.renderer import render_icon, render_icon_sheet

OUTPUT = Path("output")


def main():
    OUTPUT.mkdir(exist_ok=True)

    seeds = ["test", "alice", "bob", "0x1234567890abcdef", "hello", "blockies", "é", ""]
    icons = []

    for i, seed in enumerate(seeds):
        icon = generate(IconSpec(seed=seed, size=8, scale=16))
        icons.append(icon)
        path = OUTPUT / f"sample_{i}.png"
        render_icon(icon).save(path)
        print(f"[{i+1}/{len(seeds)}] Saved {path}  "
              f"(seed={seed!r}, color={icon.color}, spot={icon.spotcolor})")

    sheet_path = OUTPUT / "samples_sheet.png"
    render_icon_sheet(icons, cols=4, padding=8).save(sheet_path)
    print(f"\nDone — {len(seeds)} images and {sheet_path} in {OUTPUT}/")


if __name__ == "__main__":
    main()
