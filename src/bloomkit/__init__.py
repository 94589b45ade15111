from bloomkit.exceptions import (
    BloomFilterError,
    IncompatibleFiltersError,
    InvalidConfigurationError,
)
from bloomkit.hashing import (
    MURMUR3_128,
    Funnel,
    HashCode,
    Murmur3_128,
    PrimitiveSink,
    bytes_funnel,
    integer_funnel,
    long_funnel,
    sequential_funnel,
    string_funnel,
    unencoded_chars_funnel,
)
from bloomkit.filter import (
    MURMUR128_MITZ_64,
    BitArray,
    BloomFilter,
    BloomFilterStrategy,
    Murmur128Mitz64Strategy,
    optimal_num_of_bits,
    optimal_num_of_hash_functions,
)
from bloomkit.config import CONFIG, BloomConfig, load_config, setup_logging
from bloomkit.analysis import FppReport, measure_fpp

__version__ = "0.1.0"

__all__ = [
    'BloomFilterError',
    'IncompatibleFiltersError',
    'InvalidConfigurationError',
    'MURMUR3_128',
    'Funnel',
    'HashCode',
    'Murmur3_128',
    'PrimitiveSink',
    'bytes_funnel',
    'integer_funnel',
    'long_funnel',
    'sequential_funnel',
    'string_funnel',
    'unencoded_chars_funnel',
    'MURMUR128_MITZ_64',
    'BitArray',
    'BloomFilter',
    'BloomFilterStrategy',
    'Murmur128Mitz64Strategy',
    'optimal_num_of_bits',
    'optimal_num_of_hash_functions',
    'CONFIG',
    'BloomConfig',
    'load_config',
    'setup_logging',
    'FppReport',
    'measure_fpp',
]
