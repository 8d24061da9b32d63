"""Bit-level framing for messages carried one signal per bit.

A message is sent byte by byte, each byte as eight bits with the most
significant bit first, and is closed by a NUL byte. The receiving side
assembles bits back into bytes; a completed NUL byte marks the end of
the message.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional, Union

BITS_PER_BYTE = 8
END_OF_MESSAGE = 0

MessageLike = Union[str, bytes, bytearray]


def byte_bits(byte: int) -> tuple[int, ...]:
    """Return the eight bits of *byte*, most significant first.

    Integers outside 0..255 are reduced to their low eight bits.
    """
    if isinstance(byte, bool) or not isinstance(byte, int):
        raise TypeError("byte_bits expects an int")
    value = byte & 0xFF
    return tuple((value >> shift) & 1 for shift in reversed(range(BITS_PER_BYTE)))


def _as_bytes(message: MessageLike) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    if isinstance(message, (bytes, bytearray, memoryview)):
        return bytes(message)
    raise TypeError("a message must be str or bytes")


def _bits_of(data: bytes) -> Iterator[int]:
    for byte in data:
        yield from byte_bits(byte)
    yield from byte_bits(END_OF_MESSAGE)


def message_bits(message: MessageLike) -> Iterator[int]:
    """Return an iterator over the bits of *message* and its closing NUL byte.

    A ``str`` is encoded as UTF-8. A message that holds a NUL byte of its
    own cannot be framed and raises ``ValueError``.
    """
    data = _as_bytes(message)
    if END_OF_MESSAGE in data:
        raise ValueError("a message must not contain a NUL byte")
    return _bits_of(data)


class MessageDecoder:
    """Assembles received bits, most significant first, into bytes."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @property
    def pending_bits(self) -> int:
        """Number of bits received towards the byte not yet complete."""
        return self._count

    def feed(self, bit: Union[int, bool]) -> Optional[int]:
        """Take one bit; return the byte it completes, else ``None``.

        A returned 0 is the end-of-message marker.
        """
        if isinstance(bit, str) or bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._value = (self._value << 1) | int(bit)
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte