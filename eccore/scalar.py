"""Generic scalar type with core modular arithmetic."""

from __future__ import annotations

import functools
import secrets
from dataclasses import dataclass
from typing import Any

from .curve import Curve
from .errors import CryptoError
from .hexenc import decode as hex_decode
from .hexenc import encode_lower, encode_upper

_U64_LIMIT = 1 << 64


@functools.total_ordering
@dataclass(frozen=True)
class ScalarCore:
    """An integer scalar for a particular curve, normally in ``[0, order)``.

    Addition, subtraction and negation are performed modulo the curve order.
    """

    curve: Curve
    value: int

    def __post_init__(self) -> None:
        if self.value < 0 or self.value.bit_length() > self.curve.field_size * 8:
            raise CryptoError()

    @classmethod
    def new(cls, curve: Curve, value: int) -> ScalarCore:
        """Create a scalar, raising :class:`CryptoError` unless ``value`` < order."""
        if not 0 <= value < curve.order:
            raise CryptoError()
        return cls(curve, value)

    @classmethod
    def zero(cls, curve: Curve) -> ScalarCore:
        """The additive identity."""
        return cls(curve, 0)

    @classmethod
    def one(cls, curve: Curve) -> ScalarCore:
        """The multiplicative identity."""
        return cls(curve, 1)

    @classmethod
    def from_u64(cls, curve: Curve, n: int) -> ScalarCore:
        """Create a scalar from an unsigned 64-bit integer, without reduction."""
        if not 0 <= n < _U64_LIMIT:
            raise ValueError("value does not fit in 64 unsigned bits")
        return cls(curve, n)

    @classmethod
    def random(cls, curve: Curve, rng: Any = None) -> ScalarCore:
        """Draw a uniformly random scalar in ``[0, order)``.

        ``rng`` must provide ``randrange``; a system CSPRNG is used by default.
        """
        if rng is None:
            rng = secrets.SystemRandom()
        return cls(curve, rng.randrange(curve.order))

    @classmethod
    def from_be_bytes(cls, curve: Curve, data: bytes) -> ScalarCore:
        """Decode a scalar from big endian bytes of exactly the field size."""
        return cls.new(curve, curve.decode_be(data))

    @classmethod
    def from_le_bytes(cls, curve: Curve, data: bytes) -> ScalarCore:
        """Decode a scalar from little endian bytes of exactly the field size."""
        return cls.new(curve, curve.decode_le(data))

    @classmethod
    def from_hex(cls, curve: Curve, text: str) -> ScalarCore:
        """Parse big endian hexadecimal (lower or upper case, not mixed)."""
        return cls.from_be_bytes(curve, hex_decode(text, curve.field_size))

    def to_be_bytes(self) -> bytes:
        """Encode as big endian bytes."""
        return self.curve.encode_be(self.value)

    def to_le_bytes(self) -> bytes:
        """Encode as little endian bytes."""
        return self.curve.encode_le(self.value)

    def is_zero(self) -> bool:
        """Is this scalar zero?"""
        return self.value == 0

    def is_even(self) -> bool:
        """Is this scalar even?"""
        return self.value & 1 == 0

    def is_odd(self) -> bool:
        """Is this scalar odd?"""
        return self.value & 1 == 1

    def is_high(self) -> bool:
        """Is this scalar greater than ``order // 2``?"""
        return self.value > self.curve.order >> 1

    def __int__(self) -> int:
        return self.value

    def _same_curve(self, other: ScalarCore) -> None:
        if self.curve != other.curve:
            raise ValueError("scalars belong to different curves")

    def __add__(self, other: object) -> ScalarCore:
        if not isinstance(other, ScalarCore):
            return NotImplemented
        self._same_curve(other)
        return ScalarCore(self.curve, (self.value + other.value) % self.curve.order)

    def __sub__(self, other: object) -> ScalarCore:
        if not isinstance(other, ScalarCore):
            return NotImplemented
        self._same_curve(other)
        return ScalarCore(self.curve, (self.value - other.value) % self.curve.order)

    def __neg__(self) -> ScalarCore:
        return ScalarCore(self.curve, (-self.value) % self.curve.order)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ScalarCore):
            return NotImplemented
        self._same_curve(other)
        return self.value < other.value

    def __str__(self) -> str:
        return encode_upper(self.to_be_bytes())

    def __format__(self, spec: str) -> str:
        if spec == "x":
            return encode_lower(self.to_be_bytes())
        if spec == "X":
            return encode_upper(self.to_be_bytes())
        return format(str(self), spec)