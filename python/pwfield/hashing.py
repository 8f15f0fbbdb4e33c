"""
Default one-way hash applied to submitted passwords.

Stored values look like ``pbkdf2_sha256$<iterations>$<salt>$<hash>`` with the
salt and hash base64-encoded, so they can be checked later without knowing
the settings they were made with.
"""

import base64
import binascii
import hashlib
import logging
import secrets
from typing import Optional

from .exceptions import HashingError

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Salted PBKDF2-SHA256 hasher for field values."""

    ALGORITHM = "pbkdf2_sha256"
    DEFAULT_ITERATIONS = 100000
    KEY_LENGTH = 32  # 256 bits
    MAX_ITERATIONS = 2 ** 31 - 1

    def __init__(self, iterations: Optional[int] = None, salt_bytes: int = 16):
        """
        Initialize hasher.

        Args:
            iterations: PBKDF2 iteration count (default 100000)
            salt_bytes: Length of the random salt

        Raises:
            HashingError: If the iteration count is out of range
        """
        if iterations is None:
            iterations = self.DEFAULT_ITERATIONS
        if not 1 <= iterations <= self.MAX_ITERATIONS:
            raise HashingError(f"Iteration count out of range: {iterations}")
        self.iterations = iterations
        self.salt_bytes = salt_bytes

    def _derive(self, value: str, salt: bytes, iterations: int) -> bytes:
        return hashlib.pbkdf2_hmac(
            'sha256',
            value.encode('utf-8'),
            salt,
            iterations,
            self.KEY_LENGTH
        )

    def make(self, value: Optional[str]) -> str:
        """
        Hash a plain value with a fresh salt.

        None is hashed as an empty string, the same as a blank form input.

        Args:
            value: Plain text password

        Returns:
            Encoded hash suitable for storage

        Raises:
            HashingError: If value is not a string
        """
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise HashingError(f"Cannot hash value of type {type(value).__name__}")

        salt = secrets.token_bytes(self.salt_bytes)
        derived = self._derive(value, salt, self.iterations)

        return "$".join([
            self.ALGORITHM,
            str(self.iterations),
            base64.b64encode(salt).decode('ascii'),
            base64.b64encode(derived).decode('ascii'),
        ])

    def check(self, value: str, encoded: str) -> bool:
        """
        Verify a plain value against a stored hash.

        Args:
            value: Plain text password
            encoded: Value previously returned by make()

        Returns:
            True if the value matches
        """
        try:
            algorithm, iterations, salt_b64, hash_b64 = encoded.split("$")
            if algorithm != self.ALGORITHM:
                logger.warning(f"Unsupported hash algorithm: {algorithm}")
                return False
            salt = base64.b64decode(salt_b64, validate=True)
            expected = base64.b64decode(hash_b64, validate=True)
            rounds = int(iterations)
            if not 1 <= rounds <= self.MAX_ITERATIONS:
                raise ValueError(f"iteration count out of range: {rounds}")
        except (ValueError, binascii.Error, AttributeError) as e:
            logger.warning(f"Malformed password hash: {e}")
            return False

        if not isinstance(value, str):
            return False

        try:
            actual = self._derive(value, salt, rounds)
        except (ValueError, OverflowError) as e:
            logger.warning(f"Could not check password hash: {e}")
            return False
        return secrets.compare_digest(actual, expected)


_default_hasher = PasswordHasher()


def make_hash(value: Optional[str]) -> str:
    """Hash a value with the default hasher."""
    return _default_hasher.make(value)


def get_password_hasher(iterations: Optional[int] = None) -> PasswordHasher:
    """
    Get a configured hasher instance.

    Args:
        iterations: PBKDF2 iteration count, or None for the default

    Returns:
        PasswordHasher instance
    """
    return PasswordHasher(iterations=iterations)
