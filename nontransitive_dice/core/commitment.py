"""
commitment.py
Keyed commitments for the house's secret numbers.
The house draws a uniformly distributed integer together with a fresh secret key and publishes
HMAC-SHA256(key, value) before the counterpart answers. Revealing the key and value later lets
anyone recompute the digest and check that the value was not changed in between.
Related modules:
- protocol.py: Runs one commit-reveal exchange on top of KeyedCommitment.
"""

import hashlib
import hmac
import secrets
from dataclasses import dataclass

KEY_SIZE = 32
VALUE_SIZE = 4
# largest value a VALUE_SIZE-byte draw can take
MAX_DRAW = (1 << (8 * VALUE_SIZE)) - 1


class SecureRandomSource:
    """
    Cryptographically secure byte source backed by the `secrets` module.
    Tests substitute an object with the same token_bytes(n) method to force values.
    """

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


@dataclass(frozen=True)
class Commitment:
    """
    A secret value bound to a digest by a secret key.
    Fields:
        secret_value (int): The committed number in [0, range).
        key (bytes): KEY_SIZE random bytes, kept secret until the reveal.
        digest (bytes): HMAC-SHA256(key, encode_value(secret_value)), published first.
    """
    secret_value: int
    key: bytes
    digest: bytes

    @property
    def key_hex(self) -> str:
        return self.key.hex().upper()

    @property
    def digest_hex(self) -> str:
        return self.digest.hex().upper()


def encode_value(value: int) -> bytes:
    """Fixed-width little-endian encoding shared by generate() and verify()."""
    return value.to_bytes(VALUE_SIZE, "little")


def compute_digest(key: bytes, value: int) -> bytes:
    return hmac.new(key, encode_value(value), hashlib.sha256).digest()


def verify(key: bytes, secret_value: int, digest: bytes) -> bool:
    """
    Recompute the digest for (key, secret_value) and compare it with the published one.
    Values that cannot be encoded never match.
    """
    if not 0 <= secret_value <= MAX_DRAW:
        return False
    return hmac.compare_digest(compute_digest(key, secret_value), digest)


class KeyedCommitment:
    """
    Generates commitments from a secure random source.
    Args:
        source: Object with token_bytes(n); defaults to SecureRandomSource().
    """

    def __init__(self, source=None):
        self.source = source or SecureRandomSource()

    def draw(self, range_: int) -> int:
        """
        Draw a uniformly distributed integer in [0, range_).
        Raw draws at or above the largest multiple of range_ that fits under MAX_DRAW are
        rejected and redrawn so that the final modulo carries no bias.
        Raises:
            ValueError: If range_ is not in [1, MAX_DRAW].
        """
        if range_ <= 0:
            raise ValueError(f"range must be positive, got {range_}")
        if range_ > MAX_DRAW:
            raise ValueError(f"range must not exceed {MAX_DRAW}, got {range_}")
        limit = (MAX_DRAW // range_) * range_
        while True:
            raw = int.from_bytes(self.source.token_bytes(VALUE_SIZE), "little")
            if raw < limit:
                return raw % range_

    def generate(self, range_: int) -> Commitment:
        """
        Draw a secret value in [0, range_) and commit to it under a freshly drawn key.
        Returns:
            Commitment: The value, its key and the digest binding them.
        """
        value = self.draw(range_)
        key = self.source.token_bytes(KEY_SIZE)
        return Commitment(secret_value=value, key=key, digest=compute_digest(key, value))
