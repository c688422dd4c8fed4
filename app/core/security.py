"""Security and password helper functions."""

import hashlib
import hmac
import secrets

import bcrypt

from app.core.constants import BCRYPT_ROUNDS


def hash_password(password: str) -> str:
    """Hash password using bcrypt."""

    hashed_password = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    return hashed_password.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Verify plain password against stored hash."""

    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


# Checked against when the email is unknown so both paths pay the bcrypt cost.
DUMMY_PASSWORD_HASH = hash_password(secrets.token_hex(16))


def generate_token() -> str:
    """Return a new 256-bit opaque bearer token."""

    return secrets.token_hex(32)


def hash_token(secret_key: str, token: str) -> str:
    """Return the keyed digest stored in place of a raw token."""

    digest = hmac.new(secret_key.encode("utf-8"), token.encode("utf-8"), hashlib.sha256)
    return digest.hexdigest()
