# app/services/password_service.py
import bcrypt

from app.models.auth import BCRYPT_MAX_BYTES


class PasswordHasher:
    """Salted one-way password hashing using bcrypt."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        # Same cost as real hashes, so a check against it takes as long
        self._dummy_hash = self.hash("no-such-account")

    def hash(self, password: str) -> str:
        """Hash a password using bcrypt. A fresh salt is drawn on every call."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
        return hashed.decode('utf-8')

    def verify(self, password: str, hashed_password: str) -> bool:
        """Verify a password against its hash.

        Returns False on mismatch. A malformed stored hash raises
        ValueError from bcrypt and is left to propagate.
        """
        encoded = password.encode('utf-8')
        if len(encoded) > BCRYPT_MAX_BYTES:
            return False
        return bcrypt.checkpw(encoded, hashed_password.encode('utf-8'))

    def verify_dummy(self, password: str) -> bool:
        """Run a full check against a throwaway hash for a login with an unknown email."""
        self.verify(password, self._dummy_hash)
        return False
