"""
Unit tests for the default password hasher.
"""

import logging

import pytest

from pwfield.exceptions import HashingError
from pwfield.hashing import PasswordHasher, get_password_hasher, make_hash


class TestPasswordHasher:
    """Test PBKDF2 hashing and verification."""

    @pytest.fixture
    def hasher(self):
        """Low iteration count keeps the tests fast."""
        return PasswordHasher(iterations=1000)

    def test_hash_format(self, hasher):
        encoded = hasher.make("secret123")
        algorithm, iterations, salt, digest = encoded.split("$")

        assert algorithm == "pbkdf2_sha256"
        assert iterations == "1000"
        assert salt
        assert digest

    def test_hash_and_check(self, hasher):
        encoded = hasher.make("secret123")

        assert encoded != "secret123"
        assert hasher.check("secret123", encoded)
        assert not hasher.check("secret124", encoded)

    def test_salted_hashes_differ(self, hasher):
        assert hasher.make("secret123") != hasher.make("secret123")

    def test_check_uses_stored_iterations(self, hasher):
        """Test that a hash made with other settings still verifies."""
        encoded = PasswordHasher(iterations=1500).make("abc")
        assert hasher.check("abc", encoded)

    def test_empty_string(self, hasher):
        encoded = hasher.make("")
        assert hasher.check("", encoded)

    def test_non_string_rejected(self, hasher):
        with pytest.raises(HashingError):
            hasher.make(12345)

    def test_none_hashed_as_empty_string(self, hasher):
        """Test that a blank submission hashes like an empty string."""
        encoded = hasher.make(None)

        assert hasher.check("", encoded)
        assert not hasher.check("secret", encoded)

    @pytest.mark.parametrize("iterations", [0, -5, PasswordHasher.MAX_ITERATIONS + 1])
    def test_iterations_out_of_range(self, iterations):
        with pytest.raises(HashingError):
            PasswordHasher(iterations=iterations)

    @pytest.mark.parametrize("encoded", [
        "",
        "plaintext",
        "md5$1000$c2FsdA==$aGFzaA==",
        "pbkdf2_sha256$many$c2FsdA==$aGFzaA==",
        "pbkdf2_sha256$1000$!!!$aGFzaA==",
        "pbkdf2_sha256$1000$c2FsdA==$aGF@@zaA==",
        "pbkdf2_sha256$0$c2FsdA==$aGFzaA==",
        "pbkdf2_sha256$-5$c2FsdA==$aGFzaA==",
        "pbkdf2_sha256$99999999999$c2FsdA==$aGFzaA==",
    ])
    def test_malformed_hash(self, hasher, encoded):
        assert not hasher.check("secret", encoded)

    @pytest.mark.parametrize("encoded", [
        "pbkdf2_sha256$1000$!!!$aGFzaA==",
        "pbkdf2_sha256$0$c2FsdA==$aGFzaA==",
    ])
    def test_malformed_hash_logged(self, hasher, encoded, caplog):
        """Test that bad encodings are rejected before any digest is compared."""
        with caplog.at_level(logging.WARNING, logger="pwfield.hashing"):
            assert not hasher.check("secret", encoded)

        assert "Malformed password hash" in caplog.text

    def test_default_iterations(self):
        assert PasswordHasher().iterations == PasswordHasher.DEFAULT_ITERATIONS
        assert get_password_hasher().iterations == PasswordHasher.DEFAULT_ITERATIONS
        assert get_password_hasher(5).iterations == 5

    def test_make_hash(self):
        encoded = make_hash("secret123")
        assert PasswordHasher().check("secret123", encoded)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
