"""Hexadecimal encoding helpers."""

from __future__ import annotations

from .errors import CryptoError


def encode_lower(data: bytes) -> str:
    """Encode bytes as lower case hexadecimal."""
    return bytes(data).hex()


def encode_upper(data: bytes) -> str:
    """Encode bytes as upper case hexadecimal."""
    return bytes(data).hex().upper()


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def decode(text: str, length: int) -> bytes:
    """Decode hexadecimal text into exactly ``length`` bytes.

    Either lower case or upper case digits are accepted, but not a mix of
    both. Raises :class:`CryptoError` on any malformed input.
    """
    if len(text.encode("utf-8")) != length * 2:
        raise CryptoError()

    upper_case: bool | None = None
    for ch in text:
        if _is_digit(ch):
            continue
        if _is_lower(ch):
            if upper_case is True:
                raise CryptoError()
            upper_case = False
        elif _is_upper(ch):
            if upper_case is False:
                raise CryptoError()
            upper_case = True
        else:
            raise CryptoError()

    try:
        return bytes.fromhex(text)
    except ValueError:
        raise CryptoError() from None