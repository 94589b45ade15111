"""Probabilistic membership testing with Bloom filters."""

import logging
import math
from typing import Any, Generic, Optional, Tuple, TypeVar

from bloomkit.exceptions import IncompatibleFiltersError, InvalidConfigurationError
from bloomkit.filter.bit_array import BitArray, check_bit_size
from bloomkit.filter.sizing import optimal_num_of_bits, optimal_num_of_hash_functions
from bloomkit.filter.strategy import MURMUR128_MITZ_64, BloomFilterStrategy
from bloomkit.hashing.funnels import Funnel

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_FPP = 0.03
MAX_HASH_FUNCTIONS = 255


class BloomFilter(Generic[T]):
    """
    Approximate set with one-sided error.

    ``might_contain`` returning False is always correct; returning True may
    be a false positive. Elements are turned into bytes by ``funnel``, which
    must write equal byte streams for equal elements.

    Not thread-safe: concurrent ``add`` calls need external locking.
    Overfilling a filter well past its expected insertions saturates it and
    its false positive probability climbs sharply.
    """

    def __init__(
        self,
        bits: BitArray,
        num_hash_functions: int,
        funnel: Funnel,
        strategy: BloomFilterStrategy,
    ) -> None:
        if not 0 < num_hash_functions <= MAX_HASH_FUNCTIONS:
            raise InvalidConfigurationError(
                f"num_hash_functions ({num_hash_functions}) must be between 1 and {MAX_HASH_FUNCTIONS}"
            )
        if bits is None:
            raise TypeError("bits must not be None")
        if funnel is None:
            raise TypeError("funnel must not be None")
        if strategy is None:
            raise TypeError("strategy must not be None")
        self.bits = bits
        self.num_hash_functions = num_hash_functions
        self.funnel = funnel
        self.strategy = strategy

    @classmethod
    def dimensions(cls, expected_insertions: int, fpp: float) -> Tuple[int, int]:
        """
        Validate the arguments of ``create`` and return the ``(bits, hash
        functions)`` it would use, without allocating anything.
        """
        if expected_insertions < 0:
            raise InvalidConfigurationError(
                f"Expected insertions ({expected_insertions}) must be >= 0"
            )
        if not fpp > 0.0:
            raise InvalidConfigurationError(
                f"False positive probability ({fpp}) must be > 0.0"
            )
        if not fpp < 1.0:
            raise InvalidConfigurationError(
                f"False positive probability ({fpp}) must be < 1.0"
            )

        n = expected_insertions or 1
        try:
            num_bits = optimal_num_of_bits(n, fpp)
            num_hash_functions = optimal_num_of_hash_functions(n, num_bits)
        except OverflowError as e:
            raise InvalidConfigurationError(
                f"Could not create BloomFilter for {n} insertions at fpp={fpp}"
            ) from e
        try:
            check_bit_size(num_bits)
        except ValueError as e:
            raise InvalidConfigurationError(
                f"Could not create BloomFilter of {num_bits} bits"
            ) from e
        if not 0 < num_hash_functions <= MAX_HASH_FUNCTIONS:
            raise InvalidConfigurationError(
                f"num_hash_functions ({num_hash_functions}) must be between 1 and {MAX_HASH_FUNCTIONS}"
            )
        return num_bits, num_hash_functions

    @classmethod
    def create(
        cls,
        funnel: Funnel,
        expected_insertions: int,
        fpp: float = DEFAULT_FPP,
        strategy: Optional[BloomFilterStrategy] = None,
    ) -> "BloomFilter[Any]":
        """
        Build a filter sized for ``expected_insertions`` elements at false
        positive probability ``fpp`` (0 < fpp < 1).
        """
        if funnel is None:
            raise TypeError("funnel must not be None")
        if strategy is None:
            strategy = MURMUR128_MITZ_64

        num_bits, num_hash_functions = cls.dimensions(expected_insertions, fpp)
        logger.debug(
            "Creating BloomFilter for %d insertions at fpp=%g: %d bits, %d hash functions",
            expected_insertions or 1,
            fpp,
            num_bits,
            num_hash_functions,
        )
        try:
            bits = BitArray(num_bits)
        except (ValueError, MemoryError) as e:
            raise InvalidConfigurationError(
                f"Could not create BloomFilter of {num_bits} bits"
            ) from e
        return cls(bits, num_hash_functions, funnel, strategy)

    @property
    def bit_size(self) -> int:
        return self.bits.bit_size

    @property
    def expected_fpp(self) -> float:
        """Chance that ``might_contain`` is wrongly True, given the current fill."""
        return (self.bits.bit_count / self.bits.bit_size) ** self.num_hash_functions

    def add(self, item: T) -> bool:
        """
        Put ``item`` into the filter.

        Returns True if any bit changed, in which case this is definitely
        the first time ``item`` was added. Always the opposite of what
        ``might_contain(item)`` would have returned just before the call.
        """
        return self.strategy.put(item, self.funnel, self.num_hash_functions, self.bits)

    def might_contain(self, item: T) -> bool:
        return self.strategy.might_contain(
            item, self.funnel, self.num_hash_functions, self.bits
        )

    def __contains__(self, item: T) -> bool:
        return self.might_contain(item)

    def copy(self) -> "BloomFilter[T]":
        """Independent filter with the same contents; funnel and strategy are shared."""
        return BloomFilter(
            self.bits.copy(), self.num_hash_functions, self.funnel, self.strategy
        )

    def approximate_element_count(self) -> int:
        """Estimate of distinct elements added so far."""
        bit_size = self.bits.bit_size
        fraction_set = self.bits.bit_count / bit_size
        if fraction_set >= 1.0:
            return bit_size
        estimate = -math.log1p(-fraction_set) * bit_size / self.num_hash_functions
        return math.floor(estimate + 0.5)

    def is_compatible(self, other: "BloomFilter[Any]") -> bool:
        return (
            other is not self
            and self.num_hash_functions == other.num_hash_functions
            and self.bit_size == other.bit_size
            and self.strategy == other.strategy
            and self.funnel == other.funnel
        )

    def put_all(self, other: "BloomFilter[T]") -> None:
        """Merge ``other`` into this filter (set union)."""
        if other is self:
            raise IncompatibleFiltersError("Cannot combine a BloomFilter with itself.")
        if self.num_hash_functions != other.num_hash_functions:
            raise IncompatibleFiltersError(
                f"BloomFilters must have the same number of hash functions "
                f"({self.num_hash_functions} != {other.num_hash_functions})"
            )
        if self.bit_size != other.bit_size:
            raise IncompatibleFiltersError(
                f"BloomFilters must have the same size underlying bit arrays "
                f"({self.bit_size} != {other.bit_size})"
            )
        if self.strategy != other.strategy:
            raise IncompatibleFiltersError(
                f"BloomFilters must have equal strategies ({self.strategy!r} != {other.strategy!r})"
            )
        if self.funnel != other.funnel:
            raise IncompatibleFiltersError(
                f"BloomFilters must have equal funnels ({self.funnel!r} != {other.funnel!r})"
            )
        self.bits.put_all(other.bits)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, BloomFilter):
            return NotImplemented
        return (
            self.num_hash_functions == other.num_hash_functions
            and self.funnel == other.funnel
            and self.bits == other.bits
            and self.strategy == other.strategy
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"BloomFilter(bit_size={self.bit_size}, "
            f"num_hash_functions={self.num_hash_functions}, "
            f"bit_count={self.bits.bit_count})"
        )
