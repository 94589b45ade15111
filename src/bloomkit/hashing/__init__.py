from bloomkit.hashing.funnels import (
    Funnel,
    bytes_funnel,
    integer_funnel,
    long_funnel,
    sequential_funnel,
    string_funnel,
    unencoded_chars_funnel,
)
from bloomkit.hashing.hash_function import MURMUR3_128, HashCode, Murmur3_128
from bloomkit.hashing.sink import Murmur3Hasher, PrimitiveSink

__all__ = [
    "MURMUR3_128",
    "Funnel",
    "HashCode",
    "Murmur3Hasher",
    "Murmur3_128",
    "PrimitiveSink",
    "bytes_funnel",
    "integer_funnel",
    "long_funnel",
    "sequential_funnel",
    "string_funnel",
    "unencoded_chars_funnel",
]
