import pytest

from eccore.curve import Curve, CurvePoint
from eccore.errors import CryptoError

ORDER = 0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551


@pytest.fixture
def curve():
    return Curve(name="test", order=ORDER, crv="P-256")


def test_field_size_derived_from_order(curve):
    assert curve.field_size == 32


def test_explicit_field_size_kept():
    assert Curve(name="small", order=251, field_size=4).field_size == 4


def test_field_size_too_small_rejected():
    with pytest.raises(ValueError):
        Curve(name="bad", order=ORDER, field_size=16)


def test_order_must_exceed_one():
    with pytest.raises(ValueError):
        Curve(name="bad", order=1)


def test_encode_be_le_round_trip(curve):
    value = ORDER - 12345
    be = curve.encode_be(value)
    le = curve.encode_le(value)
    assert len(be) == curve.field_size
    assert be == le[::-1]
    assert curve.decode_be(be) == value
    assert curve.decode_le(le) == value


def test_encode_one_big_endian(curve):
    assert curve.encode_be(1) == bytes(31) + b"\x01"
    assert curve.encode_le(1) == b"\x01" + bytes(31)


def test_encode_rejects_oversized_and_negative(curve):
    with pytest.raises(CryptoError):
        curve.encode_be(1 << 256)
    with pytest.raises(CryptoError):
        curve.encode_le(-1)


def test_decode_rejects_wrong_length(curve):
    with pytest.raises(CryptoError):
        curve.decode_be(bytes(31))
    with pytest.raises(CryptoError):
        curve.decode_le(bytes(33))


def test_reduce(curve):
    assert curve.reduce(ORDER) == 0
    assert curve.reduce(ORDER + 5) == 5
    assert curve.reduce(7) == 7


def test_reduce_bytes_matches_decode(curve):
    data = b"\xff" * 32
    reduced_be = curve.reduce_be_bytes(data)
    assert reduced_be < ORDER
    assert reduced_be == curve.reduce(curve.decode_be(data))
    le_data = curve.encode_le(ORDER + 3)
    assert curve.reduce_le_bytes(le_data) == 3
    with pytest.raises(CryptoError):
        curve.reduce_be_bytes(b"\x01")


def test_identity_point(curve):
    point = CurvePoint.identity(curve)
    assert point.is_identity()
    assert point.to_encoded_point(False) == b"\x00"
    assert point.to_encoded_point(True) == b"\x00"


def test_uncompressed_encoding(curve):
    point = CurvePoint(curve, 10, 20)
    encoded = point.to_encoded_point(False)
    assert not point.is_identity()
    assert encoded[0] == 0x04
    assert len(encoded) == 1 + 2 * curve.field_size
    assert curve.decode_be(encoded[1:33]) == 10
    assert curve.decode_be(encoded[33:]) == 20


def test_compressed_encoding_tag_follows_y_parity(curve):
    even = CurvePoint(curve, 10, 20).to_encoded_point(True)
    odd = CurvePoint(curve, 10, 21).to_encoded_point(True)
    assert even[0] == 0x02
    assert odd[0] == 0x03
    assert even[1:] == odd[1:] == curve.encode_be(10)


def test_default_compression_from_curve():
    compressing = Curve(name="c", order=ORDER, compress_points=True)
    point = CurvePoint(compressing, 1, 2)
    assert point.to_encoded_point() == point.to_encoded_point(True)


def test_x_bytes(curve):
    assert CurvePoint(curve, 9, 4).x_bytes() == curve.encode_be(9)


def test_half_specified_point_rejected(curve):
    with pytest.raises(ValueError):
        CurvePoint(curve, 1, None)


def test_oversized_coordinate_rejected(curve):
    with pytest.raises(CryptoError):
        CurvePoint(curve, 1 << 256, 1)