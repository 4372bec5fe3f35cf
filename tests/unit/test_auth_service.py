import pytest

from storefront.domain.errors import AuthenticationError, ConflictError, ValidationError
from storefront.services.auth_service import AuthService, normalize_email
from storefront.utils.security import hash_password, verify_password


class TestPasswordHashing:
    def test_roundtrip(self):
        encoded = hash_password("correct horse", iterations=1000)
        assert verify_password("correct horse", encoded)
        assert not verify_password("wrong horse", encoded)

    def test_salt_differs_per_hash(self):
        assert hash_password("same", iterations=1000) != hash_password("same", iterations=1000)

    def test_iterations_are_read_from_the_hash(self):
        encoded = hash_password("pw", iterations=1234)
        assert encoded.split("$")[1] == "1234"
        assert verify_password("pw", encoded)

    @pytest.mark.parametrize("encoded", ["", "garbage", "md5$1$salt$abc", "pbkdf2_sha256$x$salt$abc"])
    def test_malformed_hash_never_verifies(self, encoded):
        assert verify_password("pw", encoded) is False


class TestAuthService:
    def test_normalize_email(self):
        assert normalize_email("  Mixed@Case.ORG ") == "mixed@case.org"
        assert normalize_email(None) == ""

    def test_register_then_login(self, db_session):
        service = AuthService(db_session)
        user = service.register("Buyer@Example.com", "pw")

        logged_in, token, expires_at = service.login("buyer@example.com", "pw")

        assert logged_in.id == user.id
        assert token
        assert service.current_user(token).id == user.id

    def test_register_duplicate(self, db_session):
        service = AuthService(db_session)
        service.register("buyer@example.com", "pw")

        with pytest.raises(ConflictError):
            service.register("BUYER@example.com", "pw2")

        # session is still usable after the failed insert
        assert service.login("buyer@example.com", "pw")[0].email == "buyer@example.com"

    @pytest.mark.parametrize("email,password", [("", "pw"), ("a@b.c", ""), (None, None)])
    def test_register_requires_fields(self, db_session, email, password):
        with pytest.raises(ValidationError):
            AuthService(db_session).register(email, password)

    def test_login_failures_share_one_message(self, db_session):
        service = AuthService(db_session)
        service.register("buyer@example.com", "pw")

        with pytest.raises(AuthenticationError) as wrong_password:
            service.login("buyer@example.com", "nope")
        with pytest.raises(AuthenticationError) as unknown_user:
            service.login("nobody@example.com", "nope")

        assert str(wrong_password.value) == str(unknown_user.value) == "Invalid credentials"

    def test_logout_revokes(self, db_session):
        service = AuthService(db_session)
        service.register("buyer@example.com", "pw")
        _, token, _ = service.login("buyer@example.com", "pw")

        assert service.logout(token) is True
        assert service.logout(token) is False
        assert service.logout(None) is False
        with pytest.raises(AuthenticationError):
            service.current_user(token)

    def test_zero_ttl_session_is_expired(self, db_session):
        service = AuthService(db_session, session_ttl_seconds=0)
        service.register("buyer@example.com", "pw")
        _, token, _ = service.login("buyer@example.com", "pw")

        with pytest.raises(AuthenticationError, match="Session expired"):
            service.current_user(token)
