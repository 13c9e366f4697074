"""
Todo API - Password Hashing Tests
"""

import pytest

from todo_api.auth.passwords import DEFAULT_ROUNDS, PasswordHasher


@pytest.fixture
def hasher():
    # Low cost keeps the suite fast
    return PasswordHasher(rounds=4)


class TestPasswordHasher:

    def test_default_cost_factor(self):
        assert DEFAULT_ROUNDS == 10
        assert PasswordHasher().rounds == 10

    def test_hash_uses_configured_cost(self, hasher):
        assert hasher.hash("secret1").startswith("$2b$04$")

    def test_hash_is_salted(self, hasher):
        assert hasher.hash("secret1") != hasher.hash("secret1")

    @pytest.mark.parametrize("password", ["secret1", "p" * 30, "pässwörd✓", " spaced "])
    def test_verify_matching_password(self, hasher, password):
        assert hasher.verify(password, hasher.hash(password)) is True

    @pytest.mark.parametrize("other", ["secret2", "Secret1", "secret1 ", ""])
    def test_verify_other_password(self, hasher, other):
        assert hasher.verify(other, hasher.hash("secret1")) is False

    @pytest.mark.parametrize("bad_hash", ["", "not-a-hash", "$2b$10$short"])
    def test_verify_malformed_hash_returns_false(self, hasher, bad_hash):
        assert hasher.verify("secret1", bad_hash) is False

    def test_long_multibyte_password(self, hasher):
        """Passwords beyond bcrypt's 72-byte window still hash and verify."""
        password = "✓" * 30
        assert hasher.verify(password, hasher.hash(password)) is True
