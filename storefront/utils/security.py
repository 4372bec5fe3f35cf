# storefront/utils/security.py
import hashlib
import hmac
import secrets
import uuid

from storefront.utils.settings import PASSWORD_HASH_ITERATIONS

_ALGORITHM = "pbkdf2_sha256"


def hash_password(password: str, iterations: int | None = None, salt: str | None = None) -> str:
    """
    Salted PBKDF2-HMAC-SHA256. The iteration count is stored with the hash
    so it can be raised later without invalidating existing users.

    Format: ``pbkdf2_sha256$<iterations>$<salt>$<hex digest>``
    """
    iterations = iterations or PASSWORD_HASH_ITERATIONS
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations
    ).hex()
    return f"{_ALGORITHM}${iterations}${salt}${digest}"


def verify_password(password: str, encoded: str) -> bool:
    try:
        algorithm, iterations, salt, digest = encoded.split("$", 3)
        iterations = int(iterations)
    except ValueError:
        return False

    if algorithm != _ALGORITHM:
        return False

    candidate = hash_password(password, iterations=iterations, salt=salt)
    return hmac.compare_digest(candidate.rsplit("$", 1)[1], digest)


def new_auth_token() -> str:
    return secrets.token_urlsafe(32)


def new_session_id() -> str:
    return uuid.uuid4().hex
