"""Fixed-length bit array backed by 64-bit numpy words."""

from typing import Optional

import numpy as np

# largest array a signed 32-bit word count can address
MAX_BIT_SIZE = (2**31 - 1) * 64


def _popcount(data: np.ndarray) -> int:
    return int(np.unpackbits(data.view(np.uint8)).sum())


def check_bit_size(num_bits: int) -> None:
    """Raise ValueError unless a BitArray of ``num_bits`` bits can be built."""
    if num_bits <= 0:
        raise ValueError(f"num_bits ({num_bits}) must be > 0")
    if num_bits > MAX_BIT_SIZE:
        raise ValueError(
            f"num_bits ({num_bits}) exceeds the maximum of {MAX_BIT_SIZE}"
        )


class BitArray:
    def __init__(self, num_bits: int, data: Optional[np.ndarray] = None) -> None:
        check_bit_size(num_bits)
        num_words = (num_bits + 63) // 64
        if data is None:
            self.data = np.zeros(num_words, dtype=np.uint64)
            self._bit_count = 0
        else:
            if len(data) != num_words:
                raise ValueError(
                    f"expected {num_words} words for {num_bits} bits, got {len(data)}"
                )
            self.data = np.asarray(data, dtype=np.uint64).copy()
            self._bit_count = _popcount(self.data)
        self._num_bits = num_bits

    @property
    def bit_size(self) -> int:
        return self._num_bits

    @property
    def bit_count(self) -> int:
        """Number of set bits."""
        return self._bit_count

    def set(self, index: int) -> bool:
        """Set the bit at ``index``; return True if it was previously clear."""
        word = index >> 6
        mask = np.uint64(1 << (index & 63))
        if self.data[word] & mask:
            return False
        self.data[word] |= mask
        self._bit_count += 1
        return True

    def get(self, index: int) -> bool:
        return bool(self.data[index >> 6] & np.uint64(1 << (index & 63)))

    def copy(self) -> "BitArray":
        clone = BitArray.__new__(BitArray)
        clone.data = self.data.copy()
        clone._bit_count = self._bit_count
        clone._num_bits = self._num_bits
        return clone

    def put_all(self, other: "BitArray") -> None:
        if self._num_bits != other._num_bits:
            raise ValueError(
                f"BitArrays must be of equal length ({self._num_bits} != {other._num_bits})"
            )
        np.bitwise_or(self.data, other.data, out=self.data)
        self._bit_count = _popcount(self.data)

    def __len__(self) -> int:
        return self._num_bits

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitArray):
            return NotImplemented
        return self._num_bits == other._num_bits and bool(
            np.array_equal(self.data, other.data)
        )

    def __repr__(self) -> str:
        return f"BitArray(bit_size={self._num_bits}, bit_count={self._bit_count})"
