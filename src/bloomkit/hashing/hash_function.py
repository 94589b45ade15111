"""128-bit MurmurHash3 digests used to derive bit positions."""

from typing import Any, Callable

import mmh3

from bloomkit.hashing.sink import Murmur3Hasher


class HashCode:
    __slots__ = ("_digest",)

    def __init__(self, digest: bytes) -> None:
        if len(digest) < 16:
            raise ValueError(
                f"HashCode needs at least 16 bytes, got {len(digest)}"
            )
        self._digest = bytes(digest)

    @property
    def bits(self) -> int:
        return len(self._digest) * 8

    def as_bytes(self) -> bytes:
        return self._digest

    def lower_eight(self) -> int:
        """First eight bytes as a little-endian signed 64-bit int (h1)."""
        return int.from_bytes(self._digest[:8], "little", signed=True)

    def upper_eight(self) -> int:
        """Bytes 8..15 as a little-endian signed 64-bit int (h2)."""
        return int.from_bytes(self._digest[8:16], "little", signed=True)

    def hex(self) -> str:
        return self._digest.hex()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashCode):
            return NotImplemented
        return self._digest == other._digest

    def __hash__(self) -> int:
        return hash(self._digest)

    def __repr__(self) -> str:
        return f"HashCode({self.hex()})"


class Murmur3_128:
    """MurmurHash3 x64 128-bit. Not cryptographic."""

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed

    def new_hasher(self) -> Murmur3Hasher:
        return Murmur3Hasher(self._digest)

    def hash_bytes(self, data: bytes) -> HashCode:
        return self._digest(bytes(data))

    def hash_object(self, obj: Any, funnel: Callable[[Any, Any], None]) -> HashCode:
        return self.new_hasher().put_object(obj, funnel).hash()

    def _digest(self, data: bytes) -> HashCode:
        return HashCode(mmh3.hash_bytes(data, seed=self.seed, x64arch=True))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Murmur3_128):
            return NotImplemented
        return self.seed == other.seed

    def __hash__(self) -> int:
        return hash((Murmur3_128, self.seed))

    def __repr__(self) -> str:
        return f"Murmur3_128(seed={self.seed})"


MURMUR3_128 = Murmur3_128()
