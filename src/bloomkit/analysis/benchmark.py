"""Empirical false positive measurement."""

import logging
from dataclasses import dataclass

import numpy as np

from bloomkit.filter.bloom_filter import BloomFilter
from bloomkit.hashing.funnels import long_funnel

logger = logging.getLogger(__name__)


@dataclass
class FppReport:
    expected_insertions: int
    target_fpp: float
    bit_size: int
    num_hash_functions: int
    probes: int
    false_positives: int
    expected_fpp: float
    approximate_element_count: int

    @property
    def observed_fpp(self) -> float:
        return self.false_positives / self.probes if self.probes else 0.0


def measure_fpp(expected_insertions: int, fpp: float, seed: int = 0) -> FppReport:
    """
    Fill a filter with ``expected_insertions`` distinct keys, then probe as
    many keys that were never added and count the positives.
    """
    bf = BloomFilter.create(long_funnel, expected_insertions, fpp)
    n = max(1, expected_insertions)
    keys = np.random.default_rng(seed).permutation(2 * n)
    inserted, probed = keys[:n].tolist(), keys[n:].tolist()

    for key in inserted:
        bf.add(key)
    missing = sum(1 for key in inserted if not bf.might_contain(key))
    if missing:
        raise RuntimeError(f"{missing} inserted keys were reported absent")

    false_positives = sum(1 for key in probed if bf.might_contain(key))
    logger.debug(
        "Probed %d absent keys, %d false positives", len(probed), false_positives
    )
    return FppReport(
        expected_insertions=expected_insertions,
        target_fpp=fpp,
        bit_size=bf.bit_size,
        num_hash_functions=bf.num_hash_functions,
        probes=len(probed),
        false_positives=false_positives,
        expected_fpp=bf.expected_fpp,
        approximate_element_count=bf.approximate_element_count(),
    )
