"""End-to-end behaviour through the public package surface."""

from dataclasses import dataclass

import numpy as np
import pytest

import bloomkit
from bloomkit import BloomFilter, InvalidConfigurationError, sequential_funnel, string_funnel


@dataclass(frozen=True)
class Person:
    first: str
    last: str
    age: int


def person_funnel(person, into):
    into.put_string(person.first).put_byte(0).put_string(person.last).put_byte(0).put_int(person.age)


class TestEndToEnd:
    def test_custom_funnel(self) -> None:
        bf = BloomFilter.create(person_funnel, 1000, 0.01)
        alice = Person("Alice", "Smith", 30)

        assert bf.add(alice) is True
        assert Person("Alice", "Smith", 30) in bf
        assert Person("Alice", "Smith", 31) not in bf

    def test_random_keys_fpp_within_factor(self) -> None:
        rng = np.random.default_rng(2024)
        keys = rng.permutation(40000).tolist()
        inserted, probes = keys[:20000], keys[20000:]

        bf = BloomFilter.create(bloomkit.long_funnel, 20000, 0.02)
        for key in inserted:
            bf.add(key)

        assert all(bf.might_contain(key) for key in inserted)
        observed = sum(1 for key in probes if bf.might_contain(key)) / len(probes)
        assert observed < 0.02 * 3

    def test_overfilled_filter_degrades(self) -> None:
        bf = BloomFilter.create(string_funnel(), 100, 0.01)
        for i in range(2000):
            bf.add(f"word-{i}")
        assert bf.expected_fpp > 0.5
        assert all(f"word-{i}" in bf for i in range(2000))

    def test_copy_then_union(self) -> None:
        base = BloomFilter.create(sequential_funnel(string_funnel()), 500, 0.01)
        base.add(["shared"])
        branch = base.copy()
        base.add(["left"])
        branch.add(["right"])

        assert branch.bits != base.bits
        base.put_all(branch)
        assert base.might_contain(["left"])
        assert base.might_contain(["right"])
        assert base.might_contain(["shared"])

    def test_errors_surface_at_create(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="must be >= 0"):
            BloomFilter.create(string_funnel(), -1, 0.01)

    def test_version(self) -> None:
        assert bloomkit.__version__ == "0.1.0"
