"""Optimal Bloom filter dimensions.

See https://en.wikipedia.org/wiki/Bloom_filter#Optimal_number_of_hash_functions
"""

import math

_LN2 = math.log(2)
_LN2_SQUARED = _LN2 * _LN2


def optimal_num_of_bits(n: int, p: float) -> int:
    """Bits needed to hold ``n`` insertions at false positive rate ``p``.

    ``n`` must be positive and ``0 <= p < 1``. ``p == 0`` is treated as the
    smallest positive double, which yields a very large but finite size.
    """
    if p == 0.0:
        p = math.ulp(0.0)
    return math.ceil(-n * math.log(p) / _LN2_SQUARED)


def optimal_num_of_hash_functions(n: int, m: int) -> int:
    """Hash functions per element for ``n`` insertions into ``m`` bits; never below 1."""
    return max(1, round(m / n * _LN2))
