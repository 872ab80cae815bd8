"""Catalogue of byte interpretations shown by the data inspector."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from .charmaps import pokemon_char
from .coding import BufferTooShort, BytesLike, Decoder
from .floats import bfloat16, float16, format_number

BOM = "\ufeff"


@dataclass(frozen=True)
class InspectableType:
    """One way of reading the bytes at the inspector cursor."""

    label: str
    # Minimum window length ``convert`` accepts.
    min_bytes: int
    decode: Callable[[bytes, bool], str]

    def convert(self, window: BytesLike, little_endian: bool = False) -> str:
        if len(window) < self.min_bytes:
            raise BufferTooShort(self.min_bytes, len(window))
        return self.decode(bytes(window), little_endian)


def _first_char(text: str) -> str:
    # TextDecoder semantics: a leading byte order mark is consumed.
    if text.startswith(BOM):
        text = text[1:]
    return text[:1]


def _utf8(buf: bytes, le: bool) -> str:
    return _first_char(buf.decode("utf-8", errors="replace"))


def _utf16(buf: bytes, le: bool) -> str:
    codec = "utf-16-le" if le else "utf-16-be"
    return _first_char(buf.decode(codec, errors="replace"))


INSPECTABLE_TYPES: Tuple[InspectableType, ...] = (
    InspectableType("binary", 1, lambda buf, le: f"{buf[0]:08b}"),
    InspectableType("octal", 1, lambda buf, le: f"{buf[0]:03o}"),
    InspectableType("uint8", 1, lambda buf, le: str(Decoder(buf).unsigned_byte())),
    InspectableType("int8", 1, lambda buf, le: str(Decoder(buf).signed_byte())),
    InspectableType("uint16", 2, lambda buf, le: str(Decoder(buf, le).unsigned_word())),
    InspectableType("int16", 2, lambda buf, le: str(Decoder(buf, le).signed_word())),
    InspectableType("uint24", 3, lambda buf, le: str(Decoder(buf, le).unsigned_triple())),
    InspectableType("int24", 3, lambda buf, le: str(Decoder(buf, le).signed_triple())),
    InspectableType("uint32", 4, lambda buf, le: str(Decoder(buf, le).unsigned_dword())),
    InspectableType("int32", 4, lambda buf, le: str(Decoder(buf, le).signed_dword())),
    InspectableType("int64", 8, lambda buf, le: str(Decoder(buf, le).signed_qword())),
    InspectableType("uint64", 8, lambda buf, le: str(Decoder(buf, le).unsigned_qword())),
    InspectableType("float16", 2, lambda buf, le: format_number(float16(buf, le))),
    InspectableType("bfloat16", 2, lambda buf, le: format_number(bfloat16(buf, le))),
    InspectableType("float32", 4, lambda buf, le: format_number(Decoder(buf, le).float32())),
    InspectableType("float64", 8, lambda buf, le: format_number(Decoder(buf, le).float64())),
    InspectableType("UTF-8", 1, _utf8),
    InspectableType("UTF-16", 2, _utf16),
    InspectableType("Pokemon Char", 1, lambda buf, le: pokemon_char(buf[0])),
)

_BY_LABEL: Dict[str, InspectableType] = {t.label: t for t in INSPECTABLE_TYPES}

LABELS: Tuple[str, ...] = tuple(_BY_LABEL)

MAX_MIN_BYTES = max(t.min_bytes for t in INSPECTABLE_TYPES)


def get_inspectable_type(label: str) -> InspectableType:
    try:
        return _BY_LABEL[label]
    except KeyError:
        raise KeyError(f"Unknown inspectable type '{label}'") from None


__all__ = [
    "InspectableType",
    "INSPECTABLE_TYPES",
    "LABELS",
    "MAX_MIN_BYTES",
    "get_inspectable_type",
]
