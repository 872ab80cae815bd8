"""Reduced-precision float decoding and number formatting."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Union

from .coding import BytesLike, require

# Largest total of exponent and significand bits that still leaves room for
# the sign bit in a 16-bit word.
MAX_FIELD_BITS = 15


@dataclass(frozen=True)
class MinifloatFormat:
    """
    A 16-bit binary float with arbitrary exponent/significand split.

    Instances are callable: ``fmt(buf, little_endian)`` decodes the first two
    bytes of ``buf`` using IEEE-754 rules generalised to the configured field
    widths (subnormals, signed infinities and NaN included).
    """

    exponent_width: int
    significand_width: int
    exponent_mask: int = field(init=False)
    fraction_mask: int = field(init=False)
    exponent_bias: int = field(init=False)
    exponent_min: int = field(init=False)

    def __post_init__(self) -> None:
        ew, sw = self.exponent_width, self.significand_width
        if ew < 1 or sw < 1:
            raise ValueError(f"Field widths must be positive, got ({ew}, {sw})")
        if ew + sw > MAX_FIELD_BITS:
            raise ValueError(
                f"Exponent and significand widths ({ew}, {sw}) do not fit in 16 bits"
            )
        bias = 2 ** (ew - 1) - 1
        object.__setattr__(self, "exponent_mask", (2**ew - 1) << sw)
        object.__setattr__(self, "fraction_mask", 2**sw - 1)
        object.__setattr__(self, "exponent_bias", bias)
        object.__setattr__(self, "exponent_min", 1 - bias)

    @property
    def exponent_max(self) -> int:
        return 2**self.exponent_width - 1

    def __call__(self, buf: BytesLike, little_endian: bool) -> float:
        require(buf, 2)
        if little_endian:
            word = buf[0] | buf[1] << 8
        else:
            word = buf[0] << 8 | buf[1]

        e = (word & self.exponent_mask) >> self.significand_width
        f = word & self.fraction_mask
        sign = -1.0 if word >> 15 else 1.0
        scale = 2**self.significand_width

        if e == 0:
            return sign * 2.0**self.exponent_min * (f / scale)
        if e == self.exponent_max:
            return math.nan if f else sign * math.inf
        return sign * 2.0 ** (e - self.exponent_bias) * (1 + f / scale)


def make_float_decoder(exponent_width: int, significand_width: int) -> MinifloatFormat:
    return MinifloatFormat(exponent_width, significand_width)


float16 = make_float_decoder(5, 10)
bfloat16 = make_float_decoder(8, 7)


def format_number(value: Union[int, float]) -> str:
    """
    Render a number the way JavaScript's ``Number.prototype.toString`` does.

    Shortest round-trip digits, no trailing ``.0`` on integral values,
    positional notation for decimal exponents from -6 up to 20 and
    ``1.5e+21`` style otherwise.
    """
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = int(exponent) + k  # position of the decimal point

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        exp = n - 1
        mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
        text = f"{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp)}"
    return sign + text
