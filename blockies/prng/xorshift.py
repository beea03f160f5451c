"""Seeded xorshift generator.

Four 32-bit words [x, y, z, w] are seeded from a string with a rolling
hash (Java's String.hashCode() spread over four lanes) and advanced with
the xorshift128 recurrence. All arithmetic wraps to signed 32 bits after
every operation, so Python's unbounded ints are masked explicitly.

Output is reproducible across platforms: the same seed always yields the
same stream.
"""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF
_DIVISOR = float(1 << 31)


def int32(v: int) -> int:
    """Wrap an int to the signed 32-bit range (two's complement)."""
    v &= _MASK
    return v - 0x100000000 if v & 0x80000000 else v


def uint32(v: int) -> int:
    """Reinterpret an int as unsigned 32-bit."""
    return v & _MASK


def code_units(text: str) -> list[int]:
    """UTF-16 code units of text, astral characters as surrogate pairs."""
    data = text.encode("utf-16-le", "surrogatepass")
    return list(struct.unpack(f"<{len(data) // 2}H", data))


class SeededPRNG:
    """Deterministic stream of floats driven by a string seed."""

    def __init__(self, seed: str | None = None):
        self._state = [0, 0, 0, 0]
        self.draws = 0
        if seed is not None:
            self.seed(seed)

    @property
    def state(self) -> list[int]:
        return list(self._state)

    def seed(self, text: str) -> None:
        """Reset the state and hash text into it.

        An empty string leaves the state all-zero, which makes every
        subsequent draw 0.0.
        """
        state = [0, 0, 0, 0]
        for i, c in enumerate(code_units(text)):
            lane = i % 4
            v = state[lane]
            state[lane] = int32(int32(int32(v << 5) - v) + c)
        self._state = state
        self.draws = 0

    def next(self) -> float:
        """Advance one step and return uint32(w) / 2**31."""
        x, y, z, w = self._state
        t = int32(x ^ int32(x << 11))
        # >> on negative Python ints is arithmetic, matching int32 semantics
        nw = int32(w ^ (w >> 19) ^ t ^ (t >> 8))
        self._state = [y, z, w, nw]
        self.draws += 1
        return uint32(nw) / _DIVISOR

    def __call__(self) -> float:
        return self.next()
