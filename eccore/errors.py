"""Error type shared by the elliptic curve helpers."""


class CryptoError(Exception):
    """Raised whenever an encoding, decoding or key operation fails.

    Details are deliberately kept out of the message so that failures
    involving secret material do not leak information.
    """

    def __str__(self) -> str:
        return "crypto error"