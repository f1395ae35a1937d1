import hashlib
import secrets

from passlib.context import CryptContext

BCRYPT_ROUNDS: int = 12

pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS
)


def _prepare(password: str) -> str:
    # bcrypt only looks at the first 72 bytes
    if len(password.encode("utf-8")) > 72:
        return hashlib.sha256(password.encode("utf-8")).hexdigest()
    return password


class HashingService:
    """Password hashing for staff and donor accounts."""

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash a password using bcrypt with salt.

        Args:
            password: The plain text password to hash

        Returns:
            The hashed password as a string
        """
        return pwd_context.hash(_prepare(password))

    @staticmethod
    def verify_password(password: str, hashed_password: str | None) -> bool:
        """
        Verify a plain password against its hash.

        Guest donor accounts have no hash and never verify.
        """
        if not hashed_password:
            return False
        try:
            return pwd_context.verify(_prepare(password), hashed_password)
        except (ValueError, TypeError):
            return False

    @staticmethod
    def generate_temporary_password(num_bytes: int = 12) -> str:
        """Random URL-safe password for invited staff accounts."""
        return secrets.token_urlsafe(num_bytes)
