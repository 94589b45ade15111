"""Mapping one element to ``k`` bit positions.

Each element is hashed once into a 128-bit digest. The two 64-bit halves
``h1`` and ``h2`` then generate ``k`` positions by double hashing
(Kirsch and Mitzenmacher, "Less Hashing, Same Performance"):
``combined = h1 + i * h2``, accumulated with 64-bit two's-complement
wraparound. The sign bit of ``combined`` is cleared before the modulo so
every position lands in ``[0, m)``. Changing either rule changes which bits
a digest maps to.
"""

from typing import Any, Iterator, Protocol

from bloomkit.filter.bit_array import BitArray
from bloomkit.hashing.funnels import Funnel
from bloomkit.hashing.hash_function import MURMUR3_128, Murmur3_128

_MASK64 = 0xFFFFFFFFFFFFFFFF
_LONG_MAX = 0x7FFFFFFFFFFFFFFF


def bit_indexes(h1: int, h2: int, num_hash_functions: int, bit_size: int) -> Iterator[int]:
    combined = h1 & _MASK64
    step = h2 & _MASK64
    for _ in range(num_hash_functions):
        yield (combined & _LONG_MAX) % bit_size
        combined = (combined + step) & _MASK64


class BloomFilterStrategy(Protocol):
    def put(self, obj: Any, funnel: Funnel, num_hash_functions: int, bits: BitArray) -> bool:
        ...

    def might_contain(self, obj: Any, funnel: Funnel, num_hash_functions: int, bits: BitArray) -> bool:
        ...


class Murmur128Mitz64Strategy:
    def __init__(self, hash_function: Murmur3_128 = MURMUR3_128) -> None:
        self.hash_function = hash_function

    def _digest(self, obj: Any, funnel: Funnel):
        code = self.hash_function.hash_object(obj, funnel)
        return code.lower_eight(), code.upper_eight()

    def put(self, obj: Any, funnel: Funnel, num_hash_functions: int, bits: BitArray) -> bool:
        h1, h2 = self._digest(obj, funnel)
        changed = False
        for index in bit_indexes(h1, h2, num_hash_functions, bits.bit_size):
            changed |= bits.set(index)
        return changed

    def might_contain(self, obj: Any, funnel: Funnel, num_hash_functions: int, bits: BitArray) -> bool:
        h1, h2 = self._digest(obj, funnel)
        # Short-circuit on first miss
        return all(
            bits.get(index)
            for index in bit_indexes(h1, h2, num_hash_functions, bits.bit_size)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Murmur128Mitz64Strategy):
            return NotImplemented
        return self.hash_function == other.hash_function

    def __hash__(self) -> int:
        return hash((Murmur128Mitz64Strategy, self.hash_function))

    def __repr__(self) -> str:
        return "Murmur128Mitz64Strategy()"


MURMUR128_MITZ_64 = Murmur128Mitz64Strategy()
