"""Scalar type that is guaranteed never to be zero."""

from __future__ import annotations

from typing import Any

from .curve import Curve
from .errors import CryptoError
from .hexenc import decode as hex_decode
from .hexenc import encode_lower, encode_upper
from .scalar import ScalarCore


class NonZeroScalar:
    """A scalar in ``[1, order)``.

    Scalar multiplication by such a value can never yield the point at
    infinity (for a generator of prime order).
    """

    __slots__ = ("_scalar",)

    def __init__(self, scalar: ScalarCore) -> None:
        if scalar.is_zero() or scalar.value >= scalar.curve.order:
            raise CryptoError()
        self._scalar = scalar

    @classmethod
    def new(cls, scalar: ScalarCore) -> NonZeroScalar:
        """Wrap ``scalar``, raising :class:`CryptoError` if it is zero."""
        return cls(scalar)

    @classmethod
    def random(cls, curve: Curve, rng: Any = None) -> NonZeroScalar:
        """Draw a random non-zero scalar by rejection sampling."""
        while True:
            candidate = ScalarCore.random(curve, rng)
            if not candidate.is_zero():
                return cls(candidate)

    @classmethod
    def from_repr(cls, curve: Curve, data: bytes) -> NonZeroScalar:
        """Decode from a big endian serialized field element."""
        return cls(ScalarCore.from_be_bytes(curve, data))

    @classmethod
    def from_uint(cls, curve: Curve, value: int) -> NonZeroScalar:
        """Create from an integer in ``[1, order)``."""
        return cls(ScalarCore.new(curve, value))

    @classmethod
    def from_hex(cls, curve: Curve, text: str) -> NonZeroScalar:
        """Parse big endian hexadecimal (lower or upper case, not mixed)."""
        return cls.from_repr(curve, hex_decode(text, curve.field_size))

    @property
    def curve(self) -> Curve:
        """The curve this scalar belongs to."""
        return self._scalar.curve

    @property
    def scalar(self) -> ScalarCore:
        """The wrapped scalar."""
        return self._scalar

    def to_repr(self) -> bytes:
        """Big endian serialized field element."""
        return self._scalar.to_be_bytes()

    def to_scalar_core(self) -> ScalarCore:
        """The wrapped value as a :class:`ScalarCore`."""
        return self._scalar

    def invert(self) -> ScalarCore:
        """Multiplicative inverse modulo the curve order."""
        try:
            inverse = pow(self._scalar.value, -1, self.curve.order)
        except ValueError:
            raise CryptoError() from None
        return ScalarCore(self.curve, inverse)

    def is_high(self) -> bool:
        """Is this scalar greater than ``order // 2``?"""
        return self._scalar.is_high()

    def zeroize(self) -> None:
        """Clear the value, leaving one so the non-zero invariant holds."""
        self._scalar = ScalarCore.one(self.curve)

    def __neg__(self) -> NonZeroScalar:
        return NonZeroScalar(-self._scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NonZeroScalar):
            return NotImplemented
        return self._scalar == other._scalar

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"NonZeroScalar(curve={self.curve.name!r})"

    def __str__(self) -> str:
        return encode_upper(self.to_repr())

    def __format__(self, spec: str) -> str:
        if spec == "x":
            return encode_lower(self.to_repr())
        if spec == "X":
            return encode_upper(self.to_repr())
        return format(str(self), spec)