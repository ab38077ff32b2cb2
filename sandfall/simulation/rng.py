"""Deterministic linear-congruential random source.

The rules depend on the exact sequence this generator produces, so it is
implemented here rather than delegated to NumPy: two engines built with
the same seed and driven through the same operations must stay
bit-identical forever.
"""

from __future__ import annotations

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1
_MULTIPLIER = 1664525
_INCREMENT = 1013904223

# Substituted for a zero seed.
ZERO_SEED_REPLACEMENT = 0xDEADBEEFCAFEBABE


class LcgRandom:
    """64-bit LCG returning the bits above the low 16 of each state."""

    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        seed &= _MASK64
        self._state = seed if seed != 0 else ZERO_SEED_REPLACEMENT

    @property
    def state(self) -> int:
        """Current internal state (read-only)."""
        return self._state

    def next_u32(self) -> int:
        """Advance once and return an unsigned 32-bit value."""
        self._state = (self._state * _MULTIPLIER + _INCREMENT) & _MASK64
        return (self._state >> 16) & _MASK32

    def range_inclusive(self, lo: int, hi: int) -> int:
        """Return an integer in ``[lo, hi]``.  Advances exactly once."""
        span = max(1, hi - lo + 1)
        return lo + self.next_u32() % span

    def chance(self, pct: int) -> bool:
        """Return True with probability ``pct`` percent.

        ``pct <= 0`` and ``pct >= 100`` are decided without advancing.
        """
        if pct <= 0:
            return False
        if pct >= 100:
            return True
        return self.next_u32() % 100 < pct
