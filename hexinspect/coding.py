"""Binary decoding helpers for fixed-size byte windows."""

import struct
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

UINT24_MASK = 0xFFFFFF
UINT24_SIGN_BIT = 0x800000


class BufferTooShort(Exception):
    """Raised when attempting to read past the end of the window."""

    def __init__(self, needed: int, available: int) -> None:
        super().__init__(f"Insufficient bytes: need {needed}, have {available}")
        self.needed = needed
        self.available = available


def require(buf: BytesLike, count: int) -> None:
    if len(buf) < count:
        raise BufferTooShort(count, len(buf))


class Decoder:
    """Reads values from the start of a window in a fixed byte order."""

    def __init__(self, buf: BytesLike, little_endian: bool = False) -> None:
        self.buf = bytes(buf)
        self.little_endian = little_endian

    def _unpack(self, fmt: str, offset: int = 0) -> Union[int, float]:
        require(self.buf, offset + struct.calcsize(fmt))
        fmt = ("<" if self.little_endian else ">") + fmt
        items = struct.unpack_from(fmt, self.buf, offset)
        if len(items) == 1:
            return items[0]
        raise ValueError("Unpacking more than one item is not supported")

    def unsigned_byte(self, offset: int = 0) -> int:
        return self._unpack("B", offset)  # type: ignore[return-value]

    def signed_byte(self, offset: int = 0) -> int:
        return self._unpack("b", offset)  # type: ignore[return-value]

    def unsigned_word(self, offset: int = 0) -> int:
        return self._unpack("H", offset)  # type: ignore[return-value]

    def signed_word(self, offset: int = 0) -> int:
        return self._unpack("h", offset)  # type: ignore[return-value]

    def unsigned_triple(self, offset: int = 0) -> int:
        return read_uint24(self.buf[offset:], self.little_endian)

    def signed_triple(self, offset: int = 0) -> int:
        return sign_extend_24(self.unsigned_triple(offset))

    def unsigned_dword(self, offset: int = 0) -> int:
        return self._unpack("I", offset)  # type: ignore[return-value]

    def signed_dword(self, offset: int = 0) -> int:
        return self._unpack("i", offset)  # type: ignore[return-value]

    def unsigned_qword(self, offset: int = 0) -> int:
        return self._unpack("Q", offset)  # type: ignore[return-value]

    def signed_qword(self, offset: int = 0) -> int:
        return self._unpack("q", offset)  # type: ignore[return-value]

    def float32(self, offset: int = 0) -> float:
        return self._unpack("f", offset)  # type: ignore[return-value]

    def float64(self, offset: int = 0) -> float:
        return self._unpack("d", offset)  # type: ignore[return-value]


def read_uint24(buf: BytesLike, little_endian: bool) -> int:
    """Read a 24-bit unsigned integer from the first three bytes."""
    require(buf, 3)
    b0, b1, b2 = buf[0], buf[1], buf[2]
    if little_endian:
        return b0 | b1 << 8 | b2 << 16
    return b0 << 16 | b1 << 8 | b2


def sign_extend_24(raw: int) -> int:
    raw &= UINT24_MASK
    if raw & UINT24_SIGN_BIT:
        return -(UINT24_MASK - raw + 1)
    return raw
