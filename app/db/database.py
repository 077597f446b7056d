"""
Core database functionality for the rides backend.
This module provides the basic sqlite operations used by the actor stores
and the token blacklist.
"""
import logging
import sqlite3
from contextlib import contextmanager

logger = logging.getLogger("rides.db")

SCHEMA = """
CREATE TABLE IF NOT EXISTS Users (
    UserId TEXT PRIMARY KEY,
    UserEmail TEXT NOT NULL UNIQUE,
    UserFirstName TEXT NOT NULL,
    UserLastName TEXT,
    UserPasswordHash TEXT NOT NULL,
    UserCreated TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS Captains (
    CaptainId TEXT PRIMARY KEY,
    CaptainEmail TEXT NOT NULL UNIQUE,
    CaptainFirstName TEXT NOT NULL,
    CaptainLastName TEXT,
    CaptainPasswordHash TEXT NOT NULL,
    CaptainVehicleColor TEXT NOT NULL,
    CaptainVehiclePlate TEXT NOT NULL,
    CaptainVehicleCapacity INTEGER NOT NULL,
    CaptainVehicleType TEXT NOT NULL,
    CaptainCreated TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS BlacklistTokens (
    Token TEXT PRIMARY KEY,
    BlacklistedAt TEXT NOT NULL
);
"""


class Database:
    """Thin wrapper around a sqlite database file.

    Every call opens its own connection so concurrent requests running in
    the threadpool never share one.
    """

    def __init__(self, path: str, timeout: float = 5.0):
        self.path = path
        self.timeout = timeout

    @contextmanager
    def get_db_connection(self):
        """
        Context manager for database connections.

        Yields:
            sqlite3.Connection: An open database connection
        """
        connection = None
        try:
            connection = sqlite3.connect(self.path, timeout=self.timeout)
            # Enable dictionary access to rows
            connection.row_factory = sqlite3.Row
            yield connection
        except sqlite3.Error as e:
            if connection:
                connection.rollback()
            if isinstance(e, sqlite3.IntegrityError):
                logger.debug(f"Constraint violation: {str(e)}")
            else:
                logger.error(f"❌ DATABASE ERROR: {str(e)}")
            raise
        finally:
            if connection:
                connection.close()

    def execute_query(self, query, params=()):
        """
        Execute a SELECT query and return the results.

        Args:
            query (str): SQL query to execute
            params (tuple): Parameters for the query

        Returns:
            list: List of rows as dictionaries
        """
        with self.get_db_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(query, params)
            return [dict(row) for row in cursor.fetchall()]

    def execute_insert(self, query, params=()):
        """
        Execute an INSERT query.

        Raises sqlite3.IntegrityError unchanged so callers can map
        constraint violations to domain errors.

        Returns:
            int: Number of rows inserted
        """
        with self.get_db_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(query, params)
            conn.commit()
            return cursor.rowcount

    def ping(self) -> bool:
        """Return True if the database answers a trivial query."""
        try:
            self.execute_query("SELECT 1")
            return True
        except sqlite3.Error:
            return False

    def init_db(self):
        """
        Create the schema if needed.

        Email uniqueness per role is enforced by the UNIQUE constraints
        on UserEmail and CaptainEmail.
        """
        with self.get_db_connection() as conn:
            conn.executescript(SCHEMA)
        logger.info(f"✅ Database schema ready at {self.path}")
