"""JSON Web Key (JWK) support for elliptic curve keys (RFC 7518 section 6)."""

from __future__ import annotations

import base64
import binascii
import hmac
import json
import re
from collections.abc import Mapping
from typing import Any

from .curve import Curve
from .errors import CryptoError
from .nonzero import NonZeroScalar

EC_KTY = "EC"
"""Key type (``kty``) for elliptic curve keys."""

FIELDS = ("kty", "crv", "x", "y", "d")

_B64URL = re.compile(r"[A-Za-z0-9_-]*")


def _encode_b64url(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _decode_field_element(curve: Curve, text: str) -> bytes:
    """Decode unpadded, canonical base64url into exactly one field element."""
    if not isinstance(text, str) or not _B64URL.fullmatch(text):
        raise CryptoError()
    if len(text) % 4 == 1:
        raise CryptoError()
    try:
        raw = base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))
    except (binascii.Error, ValueError):
        raise CryptoError() from None
    if _encode_b64url(raw) != text or len(raw) != curve.field_size:
        raise CryptoError()
    return raw


def _field_bytes(curve: Curve, value: bytes | int) -> bytes:
    if isinstance(value, int):
        return curve.encode_be(value)
    data = bytes(value)
    if len(data) != curve.field_size:
        raise CryptoError()
    return data


def _curve_crv(curve: Curve) -> str:
    if curve.crv is None:
        raise CryptoError()
    return curve.crv


def _reject_duplicates(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise CryptoError()
        result[key] = value
    return result


class JwkEcKey:
    """A JSON Web Key with a ``kty`` of ``"EC"``.

    Holds either a whole keypair or only a public key, depending on whether
    the private ``d`` parameter is present.
    """

    __slots__ = ("crv", "x", "y", "d")

    def __init__(self, crv: str, x: str, y: str, d: str | None = None) -> None:
        for value in (crv, x, y):
            if not isinstance(value, str):
                raise CryptoError()
        if d is not None and not isinstance(d, str):
            raise CryptoError()
        self.crv = crv
        self.x = x
        self.y = y
        self.d = d

    @classmethod
    def parse(cls, text: str) -> JwkEcKey:
        """Parse a JWK from its JSON text.

        Both the object form and the five-element array form are accepted.
        """
        try:
            data = json.loads(text, object_pairs_hook=_reject_duplicates)
        except (ValueError, TypeError):
            raise CryptoError() from None
        if isinstance(data, list):
            return cls._from_sequence(data)
        if isinstance(data, Mapping):
            return cls.from_dict(data)
        raise CryptoError()

    @classmethod
    def _from_sequence(cls, items: list[Any]) -> JwkEcKey:
        if len(items) != len(FIELDS):
            raise CryptoError()
        kty, crv, x, y, d = items
        if kty != EC_KTY:
            raise CryptoError()
        return cls(crv, x, y, d)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> JwkEcKey:
        """Build a JWK from a mapping of its parameters.

        Unknown parameters, a missing required parameter or a ``kty`` other
        than ``"EC"`` raise :class:`CryptoError`.
        """
        if not isinstance(data, Mapping):
            raise CryptoError()
        for key in data:
            if key not in FIELDS:
                raise CryptoError()
        for key in ("kty", "crv", "x", "y"):
            if key in data and not isinstance(data[key], str):
                raise CryptoError()
        if "kty" not in data or data["kty"] != EC_KTY:
            raise CryptoError()
        try:
            crv, x, y = data["crv"], data["x"], data["y"]
        except KeyError:
            raise CryptoError() from None
        return cls(crv, x, y, data.get("d"))

    def to_dict(self) -> dict[str, str]:
        """The JWK parameters in their canonical order; ``d`` only if present."""
        result = {"kty": EC_KTY, "crv": self.crv, "x": self.x, "y": self.y}
        if self.d is not None:
            result["d"] = self.d
        return result

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    def __repr__(self) -> str:
        d = "..." if self.d is not None else "None"
        return f"JwkEcKey(crv={self.crv!r}, x={self.x!r}, y={self.y!r}, d={d})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JwkEcKey):
            return NotImplemented
        if self.d is None or other.d is None:
            d_eq = self.d is None and other.d is None
        else:
            d_eq = hmac.compare_digest(self.d.encode("utf-8"), other.d.encode("utf-8"))
        return self.crv == other.crv and self.x == other.x and self.y == other.y and d_eq

    __hash__ = None  # type: ignore[assignment]

    def is_keypair(self) -> bool:
        """Does this JWK include a private key?"""
        return self.d is not None

    def is_public_key(self) -> bool:
        """Does this JWK hold only a public key?"""
        return self.d is None

    @classmethod
    def from_coordinates(cls, curve: Curve, x: bytes | int, y: bytes | int) -> JwkEcKey:
        """Create a public JWK from the affine coordinates of a point on ``curve``."""
        crv = _curve_crv(curve)
        return cls(
            crv,
            _encode_b64url(_field_bytes(curve, x)),
            _encode_b64url(_field_bytes(curve, y)),
        )

    def to_coordinates(self, curve: Curve) -> tuple[bytes, bytes]:
        """Decode the public point as serialized ``(x, y)`` field elements."""
        if self.crv != _curve_crv(curve):
            raise CryptoError()
        return (
            _decode_field_element(curve, self.x),
            _decode_field_element(curve, self.y),
        )

    def secret_bytes(self, curve: Curve) -> bytes:
        """Decode the private scalar ``d`` as big endian bytes.

        Raises :class:`CryptoError` if there is no private key, the curve does
        not match, or ``d`` is not a valid non-zero scalar.
        """
        if self.d is None:
            raise CryptoError()
        self.to_coordinates(curve)
        raw = _decode_field_element(curve, self.d)
        NonZeroScalar.from_repr(curve, raw)
        return raw

    def zeroize(self) -> None:
        """Clear the private key parameter, if any."""
        if self.d is not None:
            self.d = ""