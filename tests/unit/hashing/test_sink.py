import struct

import pytest

from bloomkit.hashing.hash_function import MURMUR3_128
from bloomkit.hashing.sink import PrimitiveSink


class TestPrimitiveSink:
    def test_little_endian_widths(self) -> None:
        sink = PrimitiveSink()
        sink.put_byte(0x1FF).put_short(-2).put_int(1).put_long(-1)
        assert sink.getvalue() == (
            b"\xff" + b"\xfe\xff" + b"\x01\x00\x00\x00" + b"\xff" * 8
        )

    def test_floats(self) -> None:
        sink = PrimitiveSink().put_float(1.5).put_double(-0.25)
        assert sink.getvalue() == struct.pack("<f", 1.5) + struct.pack("<d", -0.25)

    def test_boolean(self) -> None:
        assert PrimitiveSink().put_boolean(True).put_boolean(False).getvalue() == b"\x01\x00"

    def test_char(self) -> None:
        assert PrimitiveSink().put_char("A").getvalue() == b"A\x00"
        # astral characters take a surrogate pair
        assert len(PrimitiveSink().put_char("\U0001F600").getvalue()) == 4

    def test_char_rejects_strings(self) -> None:
        with pytest.raises(ValueError):
            PrimitiveSink().put_char("ab")

    def test_string_encodings(self) -> None:
        assert PrimitiveSink().put_string("héllo").getvalue() == "héllo".encode("utf-8")
        assert PrimitiveSink().put_string("hi", "utf-16-le").getvalue() == b"h\x00i\x00"

    def test_bytes_offset_and_length(self) -> None:
        sink = PrimitiveSink()
        sink.put_bytes(b"abcdef", 1, 3)
        sink.put_bytes(b"xyz", offset=2)
        sink.put_bytes(b"123", length=1)
        assert sink.getvalue() == b"bcdz1"

    @pytest.mark.parametrize("offset, length", [(-1, 1), (0, 7), (4, 3), (0, -1)])
    def test_bytes_out_of_range(self, offset, length) -> None:
        with pytest.raises(IndexError):
            PrimitiveSink().put_bytes(b"abcdef", offset, length)

    def test_long_out_of_range(self) -> None:
        with pytest.raises(struct.error):
            PrimitiveSink().put_long(2**63)

    def test_put_object_uses_funnel(self) -> None:
        calls = []

        def funnel(obj, into):
            calls.append(obj)
            into.put_int(obj)

        sink = PrimitiveSink().put_object(7, funnel)
        assert calls == [7]
        assert sink.getvalue() == b"\x07\x00\x00\x00"


class TestMurmur3Hasher:
    def test_hash_matches_hash_bytes(self) -> None:
        hasher = MURMUR3_128.new_hasher()
        hasher.put_int(42).put_string("abc")
        expected = MURMUR3_128.hash_bytes(struct.pack("<i", 42) + b"abc")
        assert hasher.hash() == expected

    def test_hash_only_once(self) -> None:
        hasher = MURMUR3_128.new_hasher()
        hasher.hash()
        with pytest.raises(RuntimeError):
            hasher.hash()

    def test_no_writes_after_hash(self) -> None:
        hasher = MURMUR3_128.new_hasher()
        hasher.hash()
        with pytest.raises(RuntimeError):
            hasher.put_byte(1)
