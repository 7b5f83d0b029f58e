"""
Password hashing.

bcrypt output is self-describing (``$2b$<rounds>$<salt><digest>``), so
verify() needs nothing but the stored hash.
"""

import bcrypt

# bcrypt only reads the first 72 bytes of its input; newer releases of the
# library raise instead of truncating silently.
_BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """Salted one-way hashing with a configurable work factor."""

    def __init__(self, rounds: int = 10):
        if not 4 <= rounds <= 31:
            raise ValueError("bcrypt rounds must be between 4 and 31")
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, plaintext: str) -> str:
        """Hash a password with a fresh salt."""
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(plaintext), salt).decode("utf-8")

    def verify(self, plaintext: str, password_hash: str) -> bool:
        """Check a password against a stored hash. Malformed hashes never match."""
        try:
            return bcrypt.checkpw(_encode(plaintext), password_hash.encode("utf-8"))
        except ValueError:
            return False


def _encode(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:_BCRYPT_MAX_BYTES]
