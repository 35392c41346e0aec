

from __future__ import annotations

# LCG using GCC's constants
M = 0x80000000  # 2**31
A = 1103515245
C = 12345


def lcg_hash(seed: int) -> int:
    """One linear-congruential step. Call repeatedly to walk the sequence."""
    return (A * int(seed) + C) % M


def scale(value: int, variants: int = 7) -> int:
    """Map a hash value in [0, M) onto [0, variants - 1], rounding half up."""
    return int((value / (M - 1)) * (variants - 1) + 0.5)
