"""
Shared persistence for actor tables (Users, Captains).

Default reads project away the password hash column; only
get_credentials() selects it, for the login path.
"""
import logging
import sqlite3
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from app.db.database import Database
from app.services.exceptions import EmailAlreadyInUseError

logger = logging.getLogger("rides.db")


class ActorStore:
    """Base class for a per-role actor table.

    Subclasses set ``table``/``prefix``/``columns`` and implement the row
    mapping in both directions.
    """

    table: str = ""
    prefix: str = ""
    columns: List[str] = []

    def __init__(self, db: Database):
        self.db = db

    # -- Mapping hooks ------------------------------------------------------

    def to_actor(self, row: Dict[str, Any]):
        raise NotImplementedError

    def to_row(self, actor_id: str, payload, password_hash: str, created: str) -> Dict[str, Any]:
        raise NotImplementedError

    # -- Helpers ------------------------------------------------------------

    def _column(self, name: str) -> str:
        return f"{self.prefix}{name}"

    def _select(self, include_password: bool = False) -> str:
        names = [self._column(c) for c in self.columns]
        if include_password:
            names.append(self._column("PasswordHash"))
        return f"SELECT {', '.join(names)} FROM {self.table}"

    # -- Queries ------------------------------------------------------------

    def email_exists(self, email: str) -> bool:
        rows = self.db.execute_query(
            f"SELECT 1 FROM {self.table} WHERE {self._column('Email')} = ?",
            (email.lower(),)
        )
        return bool(rows)

    def get_by_id(self, actor_id: str):
        """Fetch an actor by id without its password hash. None if missing."""
        rows = self.db.execute_query(
            f"{self._select()} WHERE {self._column('Id')} = ?",
            (actor_id,)
        )
        if not rows:
            return None
        return self.to_actor(rows[0])

    def get_credentials(self, email: str) -> Optional[Tuple[Any, str]]:
        """Fetch (actor, password_hash) by email for login. None if missing."""
        rows = self.db.execute_query(
            f"{self._select(include_password=True)} WHERE {self._column('Email')} = ?",
            (email.lower(),)
        )
        if not rows:
            return None
        row = rows[0]
        return self.to_actor(row), row[self._column("PasswordHash")]

    def create(self, payload, password_hash: str):
        """Insert a new actor and return it.

        Raises:
            EmailAlreadyInUseError: if the email UNIQUE constraint fires
        """
        actor_id = uuid.uuid4().hex
        created = datetime.now(timezone.utc).isoformat()
        row = self.to_row(actor_id, payload, password_hash, created)

        names = ", ".join(row.keys())
        placeholders = ", ".join("?" for _ in row)
        try:
            self.db.execute_insert(
                f"INSERT INTO {self.table} ({names}) VALUES ({placeholders})",
                tuple(row.values())
            )
        except sqlite3.IntegrityError as e:
            logger.warning(f"⚠️ Duplicate email rejected by {self.table} constraint: {str(e)}")
            raise EmailAlreadyInUseError()

        logger.info(f"✅ {self.table} row created: {row[self._column('Email')]}")
        return self.get_by_id(actor_id)
