"""Elliptic curve descriptions, field element encoding and affine points."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import CryptoError

ALGORITHM_OID = "1.2.840.10045.2.1"
"""Object identifier for elliptic curve public key cryptography (id-ecPublicKey)."""


@dataclass(frozen=True)
class Curve:
    """Parameters of a concrete elliptic curve.

    ``order`` is the order of the scalar field. ``field_size`` is the number
    of bytes in a serialized field element; it defaults to the smallest size
    that holds the order.
    """

    name: str
    order: int
    field_size: int = 0
    crv: str | None = None
    oid: str | None = None
    compress_points: bool = False
    compact_points: bool = False
    _modulus_bits: int = field(init=False, repr=False, compare=False, default=0)

    def __post_init__(self) -> None:
        if self.order <= 1:
            raise ValueError("curve order must be greater than one")
        minimum = (self.order.bit_length() + 7) // 8
        size = self.field_size or minimum
        if size < minimum:
            raise ValueError("field size too small for curve order")
        object.__setattr__(self, "field_size", size)
        object.__setattr__(self, "_modulus_bits", self.order.bit_length())

    def _check_fits(self, value: int) -> None:
        if value < 0 or value.bit_length() > self.field_size * 8:
            raise CryptoError()

    def _check_length(self, data: bytes) -> bytes:
        data = bytes(data)
        if len(data) != self.field_size:
            raise CryptoError()
        return data

    def encode_be(self, value: int) -> bytes:
        """Serialize an integer as a big endian field element."""
        self._check_fits(value)
        return value.to_bytes(self.field_size, "big")

    def encode_le(self, value: int) -> bytes:
        """Serialize an integer as a little endian field element."""
        self._check_fits(value)
        return value.to_bytes(self.field_size, "little")

    def decode_be(self, data: bytes) -> int:
        """Interpret a serialized field element as a big endian integer."""
        return int.from_bytes(self._check_length(data), "big")

    def decode_le(self, data: bytes) -> int:
        """Interpret a serialized field element as a little endian integer."""
        return int.from_bytes(self._check_length(data), "little")

    def reduce(self, value: int) -> int:
        """Reduce an integer modulo the curve order."""
        self._check_fits(value)
        return value % self.order

    def reduce_be_bytes(self, data: bytes) -> int:
        """Decode big endian bytes and reduce modulo the curve order."""
        return self.decode_be(data) % self.order

    def reduce_le_bytes(self, data: bytes) -> int:
        """Decode little endian bytes and reduce modulo the curve order."""
        return self.decode_le(data) % self.order


@dataclass(frozen=True)
class CurvePoint:
    """An elliptic curve point in affine coordinates.

    A point with neither coordinate set is the identity (point at infinity).
    """

    curve: Curve
    x: int | None = None
    y: int | None = None

    def __post_init__(self) -> None:
        if (self.x is None) != (self.y is None):
            raise ValueError("both coordinates must be given, or neither")
        if self.x is not None:
            self.curve.encode_be(self.x)
            self.curve.encode_be(self.y)

    @classmethod
    def identity(cls, curve: Curve) -> CurvePoint:
        """The point at infinity on ``curve``."""
        return cls(curve)

    def is_identity(self) -> bool:
        """Is this the point at infinity?"""
        return self.x is None

    def x_bytes(self) -> bytes:
        """The affine x-coordinate as a serialized field element."""
        return self.curve.encode_be(self.x or 0)

    def to_encoded_point(self, compress: bool | None = None) -> bytes:
        """SEC1 encoding of this point, optionally compressed.

        When ``compress`` is None the curve's default is used.
        """
        if self.is_identity():
            return b"\x00"
        if compress is None:
            compress = self.curve.compress_points
        x = self.curve.encode_be(self.x)
        if compress:
            tag = b"\x03" if self.y & 1 else b"\x02"
            return tag + x
        return b"\x04" + x + self.curve.encode_be(self.y)