"""
Password hashing.

Passwords are hashed with bcrypt; the cost factor comes from settings and
defaults to 12, which is deliberately slow. Cleartext passwords are never
stored or logged.
"""

import bcrypt


class CredentialStore:
    """Hashes and verifies passwords."""

    def __init__(self, rounds: int = 12):
        self._rounds = rounds
        # Used to burn comparable time when the account does not exist
        self._dummy_hash = self.hash_password("not-a-real-password")

    def hash_password(self, password: str) -> str:
        """Return a salted bcrypt hash of ``password``."""
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against a stored hash. Malformed hashes never match."""
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            return False

    def verify_dummy(self, password: str) -> bool:
        """Run a full verify against a throwaway hash. Always False."""
        self.verify_password(password, self._dummy_hash)
        return False
