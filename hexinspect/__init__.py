"""Byte window data inspector."""

from .coding import BufferTooShort, Decoder, read_uint24, sign_extend_24
from .config import InspectorConfig
from .floats import MinifloatFormat, bfloat16, float16, format_number, make_float_decoder
from .inspectable import (
    INSPECTABLE_TYPES,
    MAX_MIN_BYTES,
    InspectableType,
    get_inspectable_type,
)
from .inspector import ByteInspector, InspectionRow

__all__ = [
    "BufferTooShort",
    "ByteInspector",
    "Decoder",
    "INSPECTABLE_TYPES",
    "InspectableType",
    "InspectionRow",
    "InspectorConfig",
    "MAX_MIN_BYTES",
    "MinifloatFormat",
    "bfloat16",
    "float16",
    "format_number",
    "get_inspectable_type",
    "make_float_decoder",
    "read_uint24",
    "sign_extend_24",
]
