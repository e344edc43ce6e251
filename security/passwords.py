"""
Password Hashing
bcrypt hashing with a configurable cost factor
"""

from passlib.context import CryptContext
from loguru import logger

# bcrypt ignores everything past this many bytes
MAX_PASSWORD_BYTES = 72


def password_too_long(password: str) -> bool:
    """True if bcrypt would truncate the UTF-8 encoded password"""
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


class PasswordHasher:
    """
    Adaptive salted hashing for one-way password storage
    """

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        self.context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """
        Hash password using bcrypt, fresh salt per call

        Args:
            password: Plain password, at most 72 bytes as UTF-8

        Returns:
            Encoded hash ($2b$<rounds>$...)

        Raises:
            ValueError: password is longer than 72 bytes
        """
        if password_too_long(password):
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

        return self.context.hash(password)

    def verify(self, password: str, encoded_password: str) -> bool:
        """
        Verify password against hash

        Args:
            password: Plain password
            encoded_password: Hash produced by hash()

        Returns:
            True if the password matches
        """
        # Longer passwords can never have been hashed
        if password is None or not encoded_password or password_too_long(password):
            return False

        try:
            return self.context.verify(password, encoded_password)
        except (ValueError, TypeError) as e:
            # Unknown or malformed hash
            logger.warning(f"Password hash could not be checked: {e}")
            return False
