"""Byte sinks that funnels write primitive values into.

Every multi-byte value is written little-endian at a fixed width, so the
bytes reaching the digest depend only on the sequence of ``put_*`` calls.
"""

import struct
from typing import Any, Callable, Optional

_SHORT = struct.Struct("<h")
_INT = struct.Struct("<i")
_LONG = struct.Struct("<q")
_FLOAT = struct.Struct("<f")
_DOUBLE = struct.Struct("<d")


class PrimitiveSink:
    """Write-only, left-to-right accumulator of primitive values."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def _update(self, data: bytes) -> None:
        self._buffer += data

    def put_byte(self, value: int) -> "PrimitiveSink":
        self._update(bytes((value & 0xFF,)))
        return self

    def put_bytes(
        self,
        values: bytes,
        offset: Optional[int] = None,
        length: Optional[int] = None,
    ) -> "PrimitiveSink":
        start = 0 if offset is None else offset
        count = len(values) - start if length is None else length
        if start < 0 or count < 0 or start + count > len(values):
            raise IndexError(
                f"offset {start} and length {count} out of range for {len(values)} bytes"
            )
        self._update(bytes(values[start:start + count]))
        return self

    def put_short(self, value: int) -> "PrimitiveSink":
        self._update(_SHORT.pack(value))
        return self

    def put_int(self, value: int) -> "PrimitiveSink":
        self._update(_INT.pack(value))
        return self

    def put_long(self, value: int) -> "PrimitiveSink":
        self._update(_LONG.pack(value))
        return self

    def put_float(self, value: float) -> "PrimitiveSink":
        self._update(_FLOAT.pack(value))
        return self

    def put_double(self, value: float) -> "PrimitiveSink":
        self._update(_DOUBLE.pack(value))
        return self

    def put_boolean(self, value: bool) -> "PrimitiveSink":
        return self.put_byte(1 if value else 0)

    def put_char(self, value: str) -> "PrimitiveSink":
        if len(value) != 1:
            raise ValueError(f"put_char expects one character, got {value!r}")
        # astral characters are written as a surrogate pair
        self._update(value.encode("utf-16-le", "surrogatepass"))
        return self

    def put_string(self, value: str, encoding: str = "utf-8") -> "PrimitiveSink":
        self._update(value.encode(encoding))
        return self

    def put_object(self, obj: Any, funnel: Callable[[Any, "PrimitiveSink"], None]) -> "PrimitiveSink":
        funnel(obj, self)
        return self

    def getvalue(self) -> bytes:
        return bytes(self._buffer)


class Murmur3Hasher(PrimitiveSink):
    """A sink that produces one digest of everything written into it."""

    def __init__(self, digest: Callable[[bytes], Any]) -> None:
        super().__init__()
        self._digest = digest
        self._done = False

    def _update(self, data: bytes) -> None:
        if self._done:
            raise RuntimeError("Cannot write to a hasher after hash() was called")
        super()._update(data)

    def hash(self):
        if self._done:
            raise RuntimeError("hash() may only be called once per hasher")
        self._done = True
        return self._digest(bytes(self._buffer))
