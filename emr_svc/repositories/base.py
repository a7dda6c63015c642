"""
Database connection provider and the generic CRUD repository.

This module handles the single SQLite connection, schema initialization, and
the create/read/update/delete contract shared by every entity repository.

IMPORTANT: Database instantiation should be done through the DI layer.
Use core.dependencies.get_database() instead of instantiating directly.
Repositories receive the Database through their constructor; nothing in this
module holds a global connection.
"""
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar

from core.config import DATABASE_PATH, DATABASE_USER, DATABASE_PASSWORD, MEMORY_DATABASE
from core.exceptions import (
    ConstraintViolationError,
    DatabaseConnectionError,
    DatabaseError,
)

logger = logging.getLogger(__name__)


SCHEMA = """
CREATE TABLE IF NOT EXISTS patients (
    mrn INTEGER PRIMARY KEY,
    fname TEXT NOT NULL,
    lname TEXT NOT NULL,
    dob TEXT NOT NULL,
    address TEXT NOT NULL,
    state TEXT NOT NULL,
    city TEXT NOT NULL,
    zip INTEGER NOT NULL,
    insurance TEXT NOT NULL,
    email TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS doctors (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS procedures (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT '',
    duration INTEGER NOT NULL,
    doctorId TEXT NOT NULL,
    FOREIGN KEY (doctorId) REFERENCES doctors(id)
);

CREATE TABLE IF NOT EXISTS patient_history (
    id TEXT PRIMARY KEY,
    patientId INTEGER NOT NULL,
    procedureId TEXT NOT NULL,
    date TEXT NOT NULL,
    billing REAL NOT NULL,
    doctorId TEXT NOT NULL,
    FOREIGN KEY (patientId) REFERENCES patients(mrn),
    FOREIGN KEY (procedureId) REFERENCES procedures(id),
    FOREIGN KEY (doctorId) REFERENCES doctors(id)
);
"""


class Database:
    """
    SQLite connection provider owning one live connection.

    Features:
    - One connection shared sequentially by all repositories
    - Foreign key constraints enabled as a backstop to service checks
    - Schema created on first open
    - close() is idempotent and safe before open()

    Usage:
        # Via dependency injection (recommended):
        from core.dependencies import get_database
        db = get_database()

        # Direct instantiation (for testing):
        with Database(db_path="/tmp/test.db") as db:
            ...
    """

    def __init__(
        self,
        db_path: Optional[str] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
    ):
        """
        Initialize the provider. No connection is opened until open().

        Args:
            db_path: Path to SQLite database file. Defaults to config DATABASE_PATH.
            user: Database username. SQLite does not authenticate; kept for logging.
            password: Database password. Ignored by SQLite.
        """
        self.db_path = db_path or DATABASE_PATH
        self.user = user if user is not None else DATABASE_USER
        self._password = password if password is not None else DATABASE_PASSWORD
        self._conn: Optional[sqlite3.Connection] = None

    def __enter__(self) -> "Database":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> sqlite3.Connection:
        """
        Open the connection and make sure the schema exists.

        Calling open() on an already open provider returns the live connection.

        Returns:
            sqlite3.Connection: The live connection.

        Raises:
            DatabaseConnectionError: If the database cannot be opened or initialized.
        """
        if self._conn is not None:
            return self._conn

        conn = None
        try:
            if self.db_path != MEMORY_DATABASE:
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            # Endpoints run on the event loop thread, not the thread that opened us
            conn = sqlite3.connect(self.db_path, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA foreign_keys = ON")
            conn.executescript(SCHEMA)
            conn.commit()
        except (sqlite3.Error, OSError) as e:
            if conn is not None:
                conn.close()
            logger.error(f"Connection to {self.db_path} failed: {e}")
            raise DatabaseConnectionError(operation="open", message=str(e)) from e

        self._conn = conn
        logger.info(f"Connected to database {self.db_path} as {self.user}")
        return conn

    def close(self) -> None:
        """Close the connection. Safe to call repeatedly or before open()."""
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        try:
            conn.close()
        except sqlite3.Error as e:
            logger.error(f"Error closing connection to {self.db_path}: {e}")
            return
        logger.info(f"Database connection closed: {self.db_path}")

    @property
    def connection(self) -> sqlite3.Connection:
        """
        The live connection.

        Raises:
            DatabaseConnectionError: If open() has not been called or close() has.
        """
        if self._conn is None:
            raise DatabaseConnectionError(message="connection is not open")
        return self._conn

    @contextmanager
    def cursor(self, operation: str) -> Iterator[sqlite3.Cursor]:
        """
        Yield a cursor for one statement.

        Commits when the block finishes, rolls back on failure, and closes the
        cursor on every exit path. sqlite3 errors, and integers too large for a
        64-bit column, are raised as DatabaseError (ConstraintViolationError for
        integrity failures).

        Args:
            operation: Short description used in errors and logs.
        """
        conn = self.connection
        try:
            cur = conn.cursor()
        except sqlite3.Error as e:
            raise self._translate(e, operation) from e

        try:
            yield cur
            conn.commit()
        except (sqlite3.Error, OverflowError) as e:
            self._rollback(conn)
            logger.error(f"Database error during {operation}: {e}")
            raise self._translate(e, operation) from e
        finally:
            cur.close()

    def ping(self) -> bool:
        """Check the connection answers a trivial query."""
        try:
            with self.cursor("ping") as cur:
                cur.execute("SELECT 1")
                return cur.fetchone() is not None
        except DatabaseError:
            return False

    @staticmethod
    def _translate(error: Exception, operation: str) -> DatabaseError:
        message = str(error)
        if isinstance(error, sqlite3.IntegrityError):
            return ConstraintViolationError(operation=operation, message=message)
        if isinstance(error, sqlite3.ProgrammingError) and "closed" in message.lower():
            return DatabaseConnectionError(operation=operation, message=message)
        return DatabaseError(operation=operation, message=message)

    def _rollback(self, conn: sqlite3.Connection) -> None:
        try:
            conn.rollback()
        except sqlite3.Error as e:
            logger.error(f"Rollback failed on {self.db_path}: {e}")


E = TypeVar("E")
K = TypeVar("K")


class CrudRepository(Generic[E, K]):
    """
    Generic create/read/update/delete repository for one table.

    Subclasses supply the table layout and the row mapping:
        entity_name: Name used in logs and errors ("Patient").
        table: Table name.
        key_column: Primary key column.
        columns: Non-key columns, in the order _to_params() returns values.

    All statements bind values as parameters. Methods return False/None when
    no row matched and raise DatabaseError when the statement could not run.
    """

    entity_name: str = ""
    table: str = ""
    key_column: str = ""
    columns: Tuple[str, ...] = ()

    def __init__(self, db: Database):
        """
        Initialize the repository.

        Args:
            db: Database instance for data access.
        """
        self._db = db

    # -------------------------------------------------------------------------
    # Row mapping (per entity)
    # -------------------------------------------------------------------------

    def _key_of(self, entity: E) -> K:
        return entity.key

    def _to_params(self, entity: E) -> Tuple[Any, ...]:
        raise NotImplementedError

    def _from_row(self, row: sqlite3.Row) -> E:
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # CRUD
    # -------------------------------------------------------------------------

    def create(self, entity: E) -> bool:
        """
        Insert a new row.

        Returns:
            bool: True if exactly one row was inserted.

        Raises:
            ConstraintViolationError: Duplicate key or foreign key violation.
            DatabaseError: Any other storage failure.
        """
        all_columns = (self.key_column,) + self.columns
        placeholders = ", ".join("?" for _ in all_columns)
        sql = f"INSERT INTO {self.table} ({', '.join(all_columns)}) VALUES ({placeholders})"

        with self._db.cursor(f"create {self.entity_name}") as cur:
            cur.execute(sql, (self._key_of(entity),) + self._to_params(entity))
            return cur.rowcount == 1

    def get_by_key(self, key: K) -> Optional[E]:
        """
        Fetch one entity by key.

        Returns:
            The entity, or None if no row has this key.
        """
        with self._db.cursor(f"read {self.entity_name}") as cur:
            cur.execute(f"{self._select()} WHERE {self.key_column} = ?", (key,))
            row = cur.fetchone()

        return self._map_row(row) if row is not None else None

    def get_all(self) -> List[E]:
        """
        Fetch every entity in the table. Order is not significant.

        Returns:
            List of entities; empty if the table is empty.
        """
        with self._db.cursor(f"list {self.entity_name}") as cur:
            cur.execute(self._select())
            rows = cur.fetchall()

        return [self._map_row(row) for row in rows]

    def update(self, entity: E) -> bool:
        """
        Overwrite every non-key column of the row with the entity's key.

        Returns:
            bool: True if exactly one row changed, False if the key is unknown.
        """
        assignments = ", ".join(f"{column} = ?" for column in self.columns)
        sql = f"UPDATE {self.table} SET {assignments} WHERE {self.key_column} = ?"

        with self._db.cursor(f"update {self.entity_name}") as cur:
            cur.execute(sql, self._to_params(entity) + (self._key_of(entity),))
            return cur.rowcount == 1

    def delete(self, key: K) -> bool:
        """
        Remove the row with this key.

        Returns:
            bool: True if one row was removed, False if none matched.
        """
        with self._db.cursor(f"delete {self.entity_name}") as cur:
            cur.execute(f"DELETE FROM {self.table} WHERE {self.key_column} = ?", (key,))
            return cur.rowcount == 1

    def exists(self, key: K) -> bool:
        """Check whether a row with this key exists."""
        with self._db.cursor(f"check {self.entity_name}") as cur:
            cur.execute(f"SELECT 1 FROM {self.table} WHERE {self.key_column} = ? LIMIT 1", (key,))
            return cur.fetchone() is not None

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _select(self) -> str:
        all_columns: Sequence[str] = (self.key_column,) + self.columns
        return f"SELECT {', '.join(all_columns)} FROM {self.table}"

    def _map_row(self, row: sqlite3.Row) -> E:
        """Map a row, reporting malformed stored data as a storage failure."""
        try:
            return self._from_row(row)
        except (ValueError, TypeError) as e:
            key = row[self.key_column]
            logger.error(f"Malformed {self.entity_name} row {key!r}: {e}")
            raise DatabaseError(
                operation=f"read {self.entity_name}",
                message=f"malformed row {key!r}: {e}",
            ) from e
