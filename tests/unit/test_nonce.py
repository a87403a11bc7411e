"""Unit tests for form nonces."""

from datetime import timedelta

import pytest

from euclid_mam.kernel.identity import JWTManager, NonceManager

SECRET = "test-secret-key-for-testing-only-0123456789"


@pytest.fixture
def nonces() -> NonceManager:
    return NonceManager(secret_key=SECRET, algorithm="HS256", lifetime=timedelta(hours=1))


class TestNonceManager:
    """Tests for NonceManager."""

    def test_valid_nonce(self, nonces: NonceManager):
        nonce = nonces.create("euclid-mam.php", 3)

        assert nonces.verify(nonce, "euclid-mam.php", 3) is True

    def test_nonces_are_unique(self, nonces: NonceManager):
        assert nonces.create("euclid-mam.php", 3) != nonces.create("euclid-mam.php", 3)

    def test_wrong_action_rejected(self, nonces: NonceManager):
        nonce = nonces.create("euclid-mam.php", 3)

        assert nonces.verify(nonce, "other-action", 3) is False

    def test_wrong_user_rejected(self, nonces: NonceManager):
        nonce = nonces.create("euclid-mam.php", 3)

        assert nonces.verify(nonce, "euclid-mam.php", 4) is False
        assert nonces.verify(nonce, "euclid-mam.php", None) is False

    def test_anonymous_nonce(self, nonces: NonceManager):
        nonce = nonces.create("euclid-mam.php", None)

        assert nonces.verify(nonce, "euclid-mam.php", None) is True
        assert nonces.verify(nonce, "euclid-mam.php", 1) is False

    def test_expired_nonce_rejected(self):
        expired = NonceManager(secret_key=SECRET, algorithm="HS256", lifetime=timedelta(seconds=-1))
        nonce = expired.create("euclid-mam.php", 3)

        assert expired.verify(nonce, "euclid-mam.php", 3) is False

    def test_other_secret_rejected(self, nonces: NonceManager):
        forged = NonceManager(secret_key="another-secret-key", algorithm="HS256").create("euclid-mam.php", 3)

        assert nonces.verify(forged, "euclid-mam.php", 3) is False

    @pytest.mark.parametrize("value", [None, "", "garbage", "a.b.c"])
    def test_missing_or_garbage_rejected(self, nonces: NonceManager, value):
        assert nonces.verify(value, "euclid-mam.php", 3) is False

    def test_access_token_is_not_a_nonce(self, nonces: NonceManager):
        token, _ = JWTManager(secret_key=SECRET, algorithm="HS256").create_access_token(3, "eddie")

        assert nonces.verify(token, "euclid-mam.php", 3) is False
