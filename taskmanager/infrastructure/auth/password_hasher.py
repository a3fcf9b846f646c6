"""
Password hashing with bcrypt.
"""

import bcrypt

# bcrypt only looks at the first 72 bytes of a secret
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """Hashes and verifies user passwords."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Return a salted bcrypt hash of ``password``."""
        secret = password.encode("utf-8")[:MAX_PASSWORD_BYTES]
        return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against a stored hash. Malformed hashes never match."""
        secret = password.encode("utf-8")[:MAX_PASSWORD_BYTES]
        try:
            return bcrypt.checkpw(secret, password_hash.encode("utf-8"))
        except ValueError:
            return False
