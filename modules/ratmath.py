# modules/ratmath.py
from __future__ import annotations
from typing import Tuple

def floor_mod(a: int, b: int) -> int:
    """Floored modulo: always in [0, b) for b > 0, negative a included."""
    if b <= 0:
        raise ValueError(f"floor_mod divisor must be positive, got {b}")
    return a - b * (a // b)

def gcd(a: int, b: int) -> int:
    if a < 0 or b < 0:
        raise ValueError(f"gcd is defined for non-negative integers, got ({a}, {b})")
    if a == 0 and b == 0:
        raise ValueError("gcd(0, 0) is undefined")
    while b != 0:
        a, b = b, floor_mod(a, b)
    return a

def normalize_ratio(num: int, den: int) -> Tuple[int, int, float]:
    """
    Fold num/den into [1, 2] by doubling the denominator (ratio too high)
    or the numerator (ratio too low), then reduce to lowest terms.
    The fold is exact: comparisons are done on integers, not on the float ratio.
    """
    if num <= 0 or den <= 0:
        raise ValueError(f"Ratio must be positive, got {num}/{den}")
    while num > 2 * den:
        den *= 2
    while num < den:
        num *= 2
    g = gcd(num, den)
    num //= g; den //= g
    return num, den, num / den
