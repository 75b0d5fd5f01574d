import pytest

from eccore.errors import CryptoError
from eccore.hexenc import decode, encode_lower, encode_upper

EXAMPLE_DATA = bytes.fromhex("0123456789ABCDEF")
EXAMPLE_HEX_LOWER = "0123456789abcdef"
EXAMPLE_HEX_UPPER = "0123456789ABCDEF"


def test_decode_lower():
    assert decode(EXAMPLE_HEX_LOWER, 8) == EXAMPLE_DATA


def test_decode_upper():
    assert decode(EXAMPLE_HEX_UPPER, 8) == EXAMPLE_DATA


def test_decode_rejects_mixed_case():
    with pytest.raises(CryptoError):
        decode("0123456789abcDEF", 8)


def test_decode_rejects_too_short():
    with pytest.raises(CryptoError):
        decode(EXAMPLE_HEX_LOWER, 9)


def test_decode_rejects_too_long():
    with pytest.raises(CryptoError):
        decode(EXAMPLE_HEX_LOWER, 7)


def test_encode_lower():
    assert encode_lower(EXAMPLE_DATA) == EXAMPLE_HEX_LOWER


def test_encode_upper():
    assert encode_upper(EXAMPLE_DATA) == EXAMPLE_HEX_UPPER


@pytest.mark.parametrize("text", ["0123456789abcdeg", "0123456789ABCDEZ", "0123456789abcde ", "0123456789abcd-f"])
def test_decode_rejects_invalid_characters(text):
    with pytest.raises(CryptoError):
        decode(text, 8)


def test_decode_rejects_non_ascii():
    with pytest.raises(CryptoError):
        decode("0123456789abcdé", 8)


def test_round_trip_all_byte_values():
    data = bytes(range(256))
    assert decode(encode_lower(data), 256) == data
    assert decode(encode_upper(data), 256) == data


def test_empty_input():
    assert decode("", 0) == b""
    assert encode_lower(b"") == ""