# storefront/services/auth_service.py
from datetime import datetime
from functools import lru_cache

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.auth_session import AuthSessionModel
from storefront.data.models.user import UserModel
from storefront.domain.errors import AuthenticationError, ConflictError, ValidationError
from storefront.repos.auth_session_repo import AuthSessionRepo
from storefront.repos.user_repo import UserRepo
from storefront.utils.logging import get_logger
from storefront.utils.security import hash_password, new_auth_token, verify_password
from storefront.utils.settings import SESSION_TTL_SECONDS
from storefront.utils.time import utc_after, utc_now

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password("not-a-real-password")


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


class AuthService:
    """
    anonymous -> registered -> authenticated (valid token) -> logged out (token revoked)
    """

    def __init__(self, db: Session, session_ttl_seconds: int = SESSION_TTL_SECONDS):
        self.users = UserRepo(db)
        self.sessions = AuthSessionRepo(db)
        self.session_ttl_seconds = session_ttl_seconds

    def register(self, email: str | None, password: str | None) -> UserModel:
        email = normalize_email(email)
        if not email or not password:
            raise ValidationError("Email and password required")

        user = UserModel(email=email, password_hash=hash_password(password))
        try:
            created = self.users.create_user(user)
        except IntegrityError as e:
            self.users.rollback()
            if "unique" in str(e.orig).lower():
                raise ConflictError("Email already registered") from e
            raise

        logger.info(f"Registered user {created.id}")
        return created

    def login(self, email: str | None, password: str | None) -> tuple[UserModel, str, datetime]:
        """
        Returns (user, token, expires_at). Unknown email and wrong password
        fail the same way and take roughly the same time.
        """
        email = normalize_email(email)
        if not email or not password:
            raise ValidationError("Email and password required")

        user = self.users.get_user_by_email(email)
        if user is None:
            verify_password(password, _dummy_hash())
            logger.warning("Login failed")
            raise AuthenticationError()

        if not verify_password(password, user.password_hash):
            logger.warning(f"Login failed for user {user.id}")
            raise AuthenticationError()

        expires_at = utc_after(self.session_ttl_seconds)
        auth_session = self.sessions.create_session(
            AuthSessionModel(
                user_id=user.id,
                token=new_auth_token(),
                expires_at=expires_at,
            )
        )

        logger.info(f"User {user.id} logged in")
        return user, auth_session.token, expires_at

    def logout(self, token: str | None) -> bool:
        """Revokes the token if there is one. Safe to call repeatedly."""
        if not token:
            return False

        revoked = self.sessions.delete_by_token(token) > 0
        if revoked:
            logger.info("Auth session revoked")
        return revoked

    def current_user(self, token: str | None) -> UserModel:
        if not token:
            raise AuthenticationError("Not authenticated")

        auth_session = self.sessions.get_by_token(token)
        if auth_session is None:
            raise AuthenticationError("Not authenticated")

        if auth_session.expires_at <= utc_now():
            self.sessions.delete_by_token(token)
            logger.info(f"Expired auth session of user {auth_session.user_id} removed")
            raise AuthenticationError("Session expired")

        return auth_session.user
