"""Elliptic curve public keys."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any

from .curve import Curve, CurvePoint
from .errors import CryptoError
from .jwk import JwkEcKey
from .nonzero import NonZeroScalar


@functools.total_ordering
@dataclass(frozen=True)
class PublicKey:
    """An elliptic curve public key: an affine point that is never the identity.

    Keys are ordered by their uncompressed SEC1 encoding.
    """

    point: CurvePoint

    def __post_init__(self) -> None:
        if not isinstance(self.point, CurvePoint):
            raise TypeError("public key point must be a CurvePoint")
        if self.point.is_identity():
            raise CryptoError()

    @property
    def curve(self) -> Curve:
        """The curve this key belongs to."""
        return self.point.curve

    @classmethod
    def from_affine(cls, point: CurvePoint) -> PublicKey:
        """Wrap an affine point, raising :class:`CryptoError` for the identity."""
        return cls(point)

    @classmethod
    def from_secret_scalar(cls, generator: Any, scalar: NonZeroScalar) -> PublicKey:
        """Compute the public key ``generator * scalar`` for a secret scalar.

        ``generator`` must support multiplication by an integer, returning
        either a :class:`CurvePoint` or an object with a ``to_affine()``
        method that returns one.
        """
        product = generator * scalar.to_scalar_core().value
        to_affine = getattr(product, "to_affine", None)
        if callable(to_affine):
            product = to_affine()
        if not isinstance(product, CurvePoint):
            raise TypeError("generator multiplication must yield a CurvePoint")
        return cls(product)

    def as_affine(self) -> CurvePoint:
        """The affine point of this key."""
        return self.point

    def to_encoded_point(self, compress: bool | None = None) -> bytes:
        """SEC1 encoding of this key; ``None`` uses the curve's default."""
        return self.point.to_encoded_point(compress)

    def to_jwk(self) -> JwkEcKey:
        """This key as a public JSON Web Key."""
        return JwkEcKey.from_coordinates(self.curve, self.point.x, self.point.y)

    def to_jwk_string(self) -> str:
        """This key as JSON Web Key text."""
        return str(self.to_jwk())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self.to_encoded_point(False) < other.to_encoded_point(False)