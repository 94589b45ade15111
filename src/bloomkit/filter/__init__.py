from bloomkit.filter.bit_array import BitArray
from bloomkit.filter.bloom_filter import BloomFilter
from bloomkit.filter.sizing import optimal_num_of_bits, optimal_num_of_hash_functions
from bloomkit.filter.strategy import (
    MURMUR128_MITZ_64,
    BloomFilterStrategy,
    Murmur128Mitz64Strategy,
    bit_indexes,
)

__all__ = [
    "MURMUR128_MITZ_64",
    "BitArray",
    "BloomFilter",
    "BloomFilterStrategy",
    "Murmur128Mitz64Strategy",
    "bit_indexes",
    "optimal_num_of_bits",
    "optimal_num_of_hash_functions",
]
