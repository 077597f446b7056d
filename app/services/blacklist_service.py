# app/services/blacklist_service.py
from datetime import datetime, timezone
import logging

from app.db.database import Database

logger = logging.getLogger("rides.auth")


class TokenBlacklist:
    """Append-only ledger of revoked session tokens.

    Shared by both roles; a token string appears at most once.
    """

    def __init__(self, db: Database):
        self.db = db

    def revoke(self, token: str) -> None:
        """Add a token to the blacklist. Revoking twice is a no-op."""
        inserted = self.db.execute_insert(
            "INSERT OR IGNORE INTO BlacklistTokens (Token, BlacklistedAt) VALUES (?, ?)",
            (token, datetime.now(timezone.utc).isoformat()),
        )
        if not inserted:
            logger.debug("Token was already blacklisted")

    def is_revoked(self, token: str) -> bool:
        rows = self.db.execute_query(
            "SELECT 1 FROM BlacklistTokens WHERE Token = ?",
            (token,),
        )
        return bool(rows)
