"""Tests for the inspectable type catalogue."""

from __future__ import annotations

import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hexinspect.coding import BufferTooShort, Decoder, read_uint24
from hexinspect.inspectable import (
    INSPECTABLE_TYPES,
    LABELS,
    MAX_MIN_BYTES,
    get_inspectable_type,
)

EXPECTED_LAYOUT = [
    ("binary", 1),
    ("octal", 1),
    ("uint8", 1),
    ("int8", 1),
    ("uint16", 2),
    ("int16", 2),
    ("uint24", 3),
    ("int24", 3),
    ("uint32", 4),
    ("int32", 4),
    ("int64", 8),
    ("uint64", 8),
    ("float16", 2),
    ("bfloat16", 2),
    ("float32", 4),
    ("float64", 8),
    ("UTF-8", 1),
    ("UTF-16", 2),
    ("Pokemon Char", 1),
]

INT_FORMATS = {
    "uint8": ("B", 1, False),
    "int8": ("b", 1, True),
    "uint16": ("H", 2, False),
    "int16": ("h", 2, True),
    "uint24": (None, 3, False),
    "int24": (None, 3, True),
    "uint32": ("I", 4, False),
    "int32": ("i", 4, True),
    "int64": ("q", 8, True),
    "uint64": ("Q", 8, False),
}


def convert(label: str, data, le: bool = False) -> str:
    return get_inspectable_type(label).convert(bytes(data), le)


def test_catalogue_layout() -> None:
    assert [(t.label, t.min_bytes) for t in INSPECTABLE_TYPES] == EXPECTED_LAYOUT
    assert len(set(LABELS)) == len(INSPECTABLE_TYPES) == 19
    assert MAX_MIN_BYTES == 8


@pytest.mark.parametrize("inspectable", INSPECTABLE_TYPES, ids=lambda t: t.label)
@pytest.mark.parametrize("le", [True, False])
def test_zero_window_of_min_bytes(inspectable, le) -> None:
    result = inspectable.convert(bytes(inspectable.min_bytes), le)
    assert isinstance(result, str)


@pytest.mark.parametrize("inspectable", INSPECTABLE_TYPES, ids=lambda t: t.label)
def test_short_window_raises(inspectable) -> None:
    with pytest.raises(BufferTooShort):
        inspectable.convert(bytes(inspectable.min_bytes - 1), True)


def test_unknown_label() -> None:
    with pytest.raises(KeyError):
        get_inspectable_type("int128")


def test_binary_and_octal() -> None:
    assert convert("binary", [0x05]) == "00000101"
    assert convert("binary", [0xFF]) == "11111111"
    assert convert("octal", [0x09]) == "011"
    assert convert("octal", [0xFF]) == "377"


def test_small_integers() -> None:
    assert convert("uint8", [0xFF]) == "255"
    assert convert("int8", [0xFF]) == "-1"
    assert convert("uint16", [0x34, 0x12], le=True) == "4660"
    assert convert("uint16", [0x34, 0x12], le=False) == "13330"
    assert convert("int16", [0x00, 0x80], le=True) == "-32768"


def test_int24() -> None:
    assert convert("uint24", [0x01, 0x02, 0x03], le=True) == str(0x030201)
    assert convert("uint24", [0x01, 0x02, 0x03], le=False) == str(0x010203)
    assert convert("int24", [0xFF, 0xFF, 0xFF]) == "-1"
    assert convert("int24", [0x80, 0x00, 0x00]) == "-8388608"
    assert convert("int24", [0x00, 0x00, 0x80], le=True) == "-8388608"
    assert convert("int24", [0x7F, 0xFF, 0xFF]) == "8388607"


def test_64bit_integers_are_exact() -> None:
    assert convert("uint64", [0xFF] * 8) == "18446744073709551615"
    assert convert("int64", [0xFF] * 8) == "-1"
    assert convert("int64", [0x7F] + [0xFF] * 7) == "9223372036854775807"


def test_floats() -> None:
    assert convert("float16", [0x7C, 0x00]) == "Infinity"
    assert convert("float16", [0xFC, 0x00]) == "-Infinity"
    assert convert("float16", [0x7C, 0x01]) == "NaN"
    assert convert("float16", [0x00, 0x00]) == "0"
    assert convert("float16", [0x00, 0x3C], le=True) == "1"
    assert convert("bfloat16", [0x3F, 0x80]) == "1"
    assert convert("float32", struct.pack("<f", 0.1), le=True) == "0.10000000149011612"
    assert convert("float32", struct.pack(">f", -2.5)) == "-2.5"
    assert convert("float64", struct.pack(">d", 1e21)) == "1e+21"
    assert convert("float64", struct.pack("<d", 3.25), le=True) == "3.25"


def test_utf8_returns_first_character() -> None:
    assert convert("UTF-8", [0x41, 0x42]) == "A"
    assert convert("UTF-8", "€x".encode("utf-8")) == "€"
    assert convert("UTF-8", "😀".encode("utf-8")) == "😀"
    assert convert("UTF-8", [0xFF, 0x41]) == "\ufffd"
    assert convert("UTF-8", [0xEF, 0xBB, 0xBF]) == ""
    assert convert("UTF-8", [0xEF, 0xBB, 0xBF, 0x41]) == "A"


def test_utf16_returns_first_character() -> None:
    assert convert("UTF-16", [0x41, 0x00, 0x42, 0x00], le=True) == "A"
    assert convert("UTF-16", [0x00, 0x41, 0x00, 0x42], le=False) == "A"
    # Surrogate pair decodes to one code point.
    assert convert("UTF-16", "😀".encode("utf-16-le"), le=True) == "😀"
    assert convert("UTF-16", "😀".encode("utf-16-be"), le=False) == "😀"
    # Lone high surrogate is replaced rather than raising.
    assert convert("UTF-16", [0x3D, 0xD8], le=True) == "\ufffd"
    assert convert("UTF-16", [0xFF, 0xFE], le=True) == ""


def test_pokemon_char() -> None:
    assert convert("Pokemon Char", [0x7F]) == " "
    assert convert("Pokemon Char", [0x00]) == "\0"
    assert convert("Pokemon Char", [0xC0]) == ""
    assert convert("Pokemon Char", [0xF8]) == "2"


def test_endian_insensitive_types_ignore_flag() -> None:
    data = bytes([0xE8, 0x41])
    for label in ("binary", "octal", "uint8", "int8", "UTF-8", "Pokemon Char"):
        assert convert(label, data, le=True) == convert(label, data, le=False)


def test_accepts_bytearray_and_memoryview() -> None:
    uint32 = get_inspectable_type("uint32")
    raw = bytearray([0x01, 0x00, 0x00, 0x00])
    assert uint32.convert(raw, True) == "1"
    assert uint32.convert(memoryview(raw), True) == "1"


@pytest.mark.parametrize("label", sorted(INT_FORMATS))
@given(data=st.data(), le=st.booleans())
def test_integer_round_trip(label: str, data, le: bool) -> None:
    fmt, size, signed = INT_FORMATS[label]
    bits = size * 8
    if signed:
        value = data.draw(st.integers(-(2 ** (bits - 1)), 2 ** (bits - 1) - 1))
    else:
        value = data.draw(st.integers(0, 2**bits - 1))

    if fmt is None:
        raw = value.to_bytes(size, "little" if le else "big", signed=signed)
    else:
        raw = struct.pack(("<" if le else ">") + fmt, value)

    assert convert(label, raw, le) == str(value)


@given(st.binary(min_size=8, max_size=16), st.booleans())
def test_total_on_any_window(raw: bytes, le: bool) -> None:
    for inspectable in INSPECTABLE_TYPES:
        assert isinstance(inspectable.convert(raw, le), str)


@given(st.binary(min_size=3, max_size=8), st.booleans())
def test_24bit_entries_read_through_decoder(raw: bytes, le: bool) -> None:
    decoder = Decoder(raw, le)
    assert convert("uint24", raw, le) == str(decoder.unsigned_triple())
    assert convert("int24", raw, le) == str(decoder.signed_triple())
    assert decoder.unsigned_triple() == read_uint24(raw, le)
