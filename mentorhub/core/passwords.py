"""Password hashing for user credentials (passlib pbkdf2_sha256)."""

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """Constant-time check of ``plain`` against a stored hash."""
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        # Malformed or unrecognized hash in the store
        return False
