"""Funnels for common element types.

A funnel is any callable ``funnel(element, sink)`` that writes a
deterministic sequence of primitives for ``element``. Equal elements must
funnel to equal byte streams, otherwise ``might_contain`` can miss elements
that were added. Nothing checks this.
"""

import functools
from typing import Any, Callable, Iterable

from bloomkit.hashing.sink import PrimitiveSink

Funnel = Callable[[Any, PrimitiveSink], None]


def bytes_funnel(element: bytes, into: PrimitiveSink) -> None:
    into.put_bytes(element)


def unencoded_chars_funnel(element: str, into: PrimitiveSink) -> None:
    for char in element:
        into.put_char(char)


def integer_funnel(element: int, into: PrimitiveSink) -> None:
    into.put_int(element)


def long_funnel(element: int, into: PrimitiveSink) -> None:
    into.put_long(element)


class StringFunnel:
    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def __call__(self, element: str, into: PrimitiveSink) -> None:
        into.put_string(element, self.encoding)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringFunnel):
            return NotImplemented
        return self.encoding == other.encoding

    def __hash__(self) -> int:
        return hash((StringFunnel, self.encoding))

    def __repr__(self) -> str:
        return f"string_funnel({self.encoding!r})"


class SequentialFunnel:
    """Funnels every item of an iterable, in iteration order."""

    def __init__(self, element_funnel: Funnel) -> None:
        if element_funnel is None:
            raise TypeError("element_funnel must not be None")
        self.element_funnel = element_funnel

    def __call__(self, elements: Iterable[Any], into: PrimitiveSink) -> None:
        for element in elements:
            self.element_funnel(element, into)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SequentialFunnel):
            return NotImplemented
        return self.element_funnel == other.element_funnel

    def __hash__(self) -> int:
        return hash((SequentialFunnel, self.element_funnel))

    def __repr__(self) -> str:
        return f"sequential_funnel({self.element_funnel!r})"


@functools.lru_cache(maxsize=None)
def _cached_string_funnel(encoding: str) -> StringFunnel:
    return StringFunnel(encoding)


def string_funnel(encoding: str = "utf-8") -> StringFunnel:
    """One shared funnel per encoding."""
    return _cached_string_funnel(encoding)


def sequential_funnel(element_funnel: Funnel) -> SequentialFunnel:
    return SequentialFunnel(element_funnel)
