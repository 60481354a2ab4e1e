"""
Password hashing and verification.

Uses bcrypt with automatic salting and a configurable work factor
(12 rounds in production).
"""

import bcrypt

DEFAULT_ROUNDS = 12

# bcrypt ignores everything past 72 bytes and newer releases refuse longer input
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


class PasswordHasher:
    """One-way hashing of plaintext passwords."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Hash a password with a fresh salt."""
        return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self._rounds)).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        """Constant-time comparison against a bcrypt hash. Never raises on mismatch."""
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode())
        except (ValueError, TypeError):
            return False
