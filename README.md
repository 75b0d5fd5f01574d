# eccore

Curve-agnostic building blocks for elliptic curve cryptography.

`eccore` does not hold any particular curve and does no point arithmetic.
What it does provide are the types that code written for any curve needs:

- `eccore.curve.Curve` is a frozen dataclass. It describes a curve by `name`
  and by `order`, the order of the scalar field. It can also carry
  `field_size`, `crv` (the JWK curve name), `oid`, `compress_points` and
  `compact_points`. `field_size` defaults to the smallest byte length that
  holds the order. The class provides `encode_be`, `encode_le`, `decode_be`,
  `decode_le`, `reduce`, `reduce_be_bytes` and `reduce_le_bytes`.
  `eccore.curve.ALGORITHM_OID` holds the id-ecPublicKey object identifier as a
  dotted string.
- `eccore.curve.CurvePoint` is an affine point `(curve, x, y)`. When neither
  coordinate is given, the point is the identity. Its `to_encoded_point()`
  method returns the SEC1 bytes: `0x00` for the identity, `0x04 || x || y`
  when uncompressed, and `0x02`/`0x03 || x` when compressed. The class checks
  only that each coordinate fits in a field element. It does not check that
  the point lies on the curve.
- `eccore.scalar.ScalarCore` is an integer scalar for a curve. It supports
  addition, subtraction and negation modulo the order, comparison,
  `is_zero`, `is_even`, `is_odd` and `is_high`, along with big- and
  little-endian encoding and hex parsing and formatting. `str()` and `{:X}`
  give upper-case hex; `{:x}` gives lower-case hex.
- `eccore.nonzero.NonZeroScalar` is a scalar in `[1, order)`. It provides
  `invert()`, negation and `zeroize()`. After `zeroize()` the value is one, so
  the scalar stays non-zero.
- `eccore.public_key.PublicKey` wraps a `CurvePoint` that is not the identity.
  Keys are ordered by their uncompressed SEC1 encoding. A key can be turned
  into a JWK with `to_jwk()` or `to_jwk_string()`.
- `eccore.jwk.JwkEcKey` parses and serializes JSON Web Keys with `kty` set to
  `"EC"`, as set out in RFC 7518 section 6.
- `eccore.hexenc` holds `encode_lower`, `encode_upper` and `decode`. The
  `decode` function accepts lower-case or upper-case hex, but not a mix of the
  two.
- `eccore.errors.CryptoError` is the error that every failed decode or key
  check raises. Its message is always `crypto error`.

## Installation

```
pip install eccore
```

## Scalars

```python
from eccore.curve import Curve
from eccore.scalar import ScalarCore

curve = Curve(
    name="P-256",
    crv="P-256",
    order=0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
    field_size=32,
)

a = ScalarCore.from_u64(curve, 5)
b = ScalarCore.from_hex(curve, "00" * 31 + "07")
print(f"{a + b:x}")        # lower-case hex of the big-endian encoding
print(str(-a))             # upper-case hex of order - 5
print(a.is_high())         # False
```

`ScalarCore.from_hex`, `from_be_bytes` and `from_le_bytes` raise
`CryptoError` in three cases:

- the input has the wrong length;
- the hex mixes upper and lower case;
- the value is not below the curve order.

## Non-zero scalars

```python
from eccore.nonzero import NonZeroScalar

k = NonZeroScalar.from_uint(curve, 42)
k_inv = k.invert()         # a ScalarCore holding 42^-1 mod order
NonZeroScalar.random(curve)  # rejection-sampled from a system CSPRNG by default
```

A zero value, or a value at or above the order, raises `CryptoError`.

## JSON Web Keys

```python
from eccore.jwk import JwkEcKey

jwk = JwkEcKey.parse(
    '{"kty":"EC","crv":"P-256",'
    '"x":"gI0GAILBdu7T53akrFmMyGcsF3n5dO7MmwNBHKW5SV0",'
    '"y":"SLW_xSffzlPWrHEVI30DHM_4egVwt3NQqeUD7nMFpps"}'
)
print(jwk.is_public_key())         # True
print(str(jwk))                    # compact JSON: kty, crv, x, y, then d if present
x, y = jwk.to_coordinates(curve)   # 32-byte field elements
```

`parse` accepts the object form and the five-element array form. It raises
`CryptoError` for any of the following:

- invalid JSON;
- duplicate or unknown parameters;
- a missing `crv`, `x` or `y`;
- a `kty` other than `"EC"`.

`to_coordinates` and `secret_bytes` decode unpadded base64url. They check
that `crv` matches the curve and that each value is exactly one field
element. `secret_bytes` also requires `d` to be a valid non-zero scalar.
`repr()` never shows `d`, and equality compares `d` in constant time.

## Public keys

```python
from eccore.curve import CurvePoint
from eccore.public_key import PublicKey

point = CurvePoint(curve, int.from_bytes(x, "big"), int.from_bytes(y, "big"))
key = PublicKey.from_affine(point)
key.to_encoded_point(True)   # compressed SEC1 bytes
key.to_jwk_string()
```

`PublicKey.from_secret_scalar(generator, scalar)` multiplies a
caller-supplied generator by the scalar's integer value. The result must be a
`CurvePoint`, or an object whose `to_affine()` method returns one.

## What this package does not do

- It contains no concrete curve arithmetic: no point addition, no scalar
  multiplication and no on-curve validation. Those must come from the code
  that supplies the points and generators.
- It does not parse SEC1 point encodings back into points.
- It does not read or write PEM, DER, PKCS#8 or SubjectPublicKeyInfo keys.
- It does not check that a JWK's private key matches its public point.
  Without curve arithmetic, that check cannot be made.

## Running the tests

```
pip install -e .[test]
pytest
```