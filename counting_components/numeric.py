"""
Number-theoretic helpers for the complexity enumeration.
"""

from math import gcd
from typing import Iterator, Tuple


def coprime_pairs(complexity: int) -> Iterator[Tuple[int, int]]:
    """
    Yield every (m, n) with m, n >= 1, gcd(m, n) = 1 and m + n <= complexity.

    Pairs come ordered by m + n, then by n. For complexity 4 this gives
    (1, 1), (2, 1), (1, 2), (3, 1), (1, 3).
    """
    for total in range(2, complexity + 1):
        for n in range(1, total):
            # gcd(m, n) == gcd(m + n, n)
            if gcd(total, n) == 1:
                yield total - n, n
