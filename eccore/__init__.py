"""Curve-agnostic elliptic curve scalars, public keys and JSON Web Keys."""

__version__ = "0.11.1"

__all__ = ["curve", "errors", "hexenc", "jwk", "nonzero", "public_key", "scalar"]