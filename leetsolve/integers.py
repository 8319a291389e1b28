"""Problems over single integers: bit flips, digit mirrors, XOR sequences."""

from __future__ import annotations

from functools import reduce
from operator import xor

_MASK32 = 0xFFFFFFFF


def min_bit_flips(start: int, goal: int) -> int:
    """Number of bits to flip in the 32-bit form of ``start`` to obtain ``goal``."""
    return ((start ^ goal) & _MASK32).bit_count()


def _reverse_digits(n: int) -> int:
    reversed_value = 0
    while n > 0:
        n, digit = divmod(n, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value


def mirror_distance(n: int) -> int:
    """Absolute difference between ``n`` and its decimal digits reversed."""
    return abs(_reverse_digits(n) - n)


def xor_operation(n: int, start: int) -> int:
    """XOR of ``start + 2 * i`` for ``i`` in ``0 .. n - 1``."""
    return reduce(xor, (start + 2 * i for i in range(n)), 0)