"""
CustomerStore — SQLite-backed persistence layer for customer records.

Usage::

    store = CustomerStore(db_path="~/.customer-manager/smtbiz.db")

    # Add a customer; the outcome is falsy when the id already exists
    outcome = store.insert(Customer("100006", "Eve Park", "eve@smt.com", "0467890123"))

    # Overwrite name/email/mobile of an existing id
    rows = store.update(Customer("100006", "Eve Park", "eve@park.com", "0467890123"))

    # Partial-name lookup
    for customer in store.search_by_name("Park"):
        print(customer)

    # Back to the five sample records
    store.reset()

Every public method opens its own connection and closes it before
returning.  Storage errors are logged and reported through the return
value (row count, bool, InsertOutcome); they never propagate to the caller.
"""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, TypeVar

from customer_manager.exceptions import StoreError
from customer_manager.store.models import SEED_CUSTOMERS, Customer, InsertOutcome

__all__ = ["CustomerStore", "SCHEMA_VERSION", "TABLE_NAME"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Bumping this drops the table and reseeds it on next open (no migration path)
SCHEMA_VERSION = 1

TABLE_NAME = "customer"

# Path to the SQL schema file bundled with this package
_SCHEMA_PATH = Path(__file__).parent / "migrations" / "schema.sql"


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class CustomerStore:
    """
    CRUD interface for the local SQLite customer table.

    The database file, table and sample records are created automatically
    on first open.  No persistent connection is kept between calls.
    """

    def __init__(self, db_path: str, schema_version: int = SCHEMA_VERSION) -> None:
        self._db_path = Path(db_path).expanduser()
        self._schema_version = schema_version
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            with self._connection() as conn:
                self._ensure_schema(conn)
        except (OSError, sqlite3.Error) as exc:
            raise StoreError(f"Cannot open customer store at {self._db_path}: {exc}") from exc

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ── Internal helpers ──────────────────────────────────────────────────

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        """Yield a fresh connection and close it on every exit path."""
        # isolation_level=None: no implicit BEGIN, transactions are explicit
        conn = sqlite3.connect(str(self._db_path), isolation_level=None)
        try:
            conn.row_factory = sqlite3.Row
            yield conn
        finally:
            conn.close()

    @staticmethod
    def run_atomic(
        conn: sqlite3.Connection,
        work: Callable[[sqlite3.Connection], T],
        commit_if: Callable[[T], bool] = bool,
    ) -> T:
        """
        Run *work* inside a single transaction on *conn*.

        The transaction commits only when ``commit_if(result)`` is true and is
        rolled back otherwise.  An exception raised by *work* rolls back and
        propagates unchanged.
        """
        conn.execute("BEGIN")
        try:
            result = work(conn)
        except BaseException:
            # SQLite may already have rolled back on some errors (e.g. SQLITE_FULL)
            if conn.in_transaction:
                conn.execute("ROLLBACK")
            raise
        if commit_if(result):
            conn.execute("COMMIT")
        else:
            conn.execute("ROLLBACK")
        return result

    def _ensure_schema(self, conn: sqlite3.Connection) -> None:
        def _work(c: sqlite3.Connection) -> bool:
            exists = c.execute(
                "SELECT 1 FROM sqlite_master WHERE type='table' AND name=?",
                (TABLE_NAME,),
            ).fetchone() is not None
            current = c.execute("PRAGMA user_version").fetchone()[0]

            if not exists:
                self._create_table(c)
            elif current != self._schema_version:
                # Destructive upgrade: existing rows are discarded on purpose
                logger.warning(
                    "Schema version %d != %d: dropping and reseeding table '%s'",
                    current, self._schema_version, TABLE_NAME,
                )
                c.execute(f"DROP TABLE IF EXISTS {TABLE_NAME}")
                self._create_table(c)
            return True

        self.run_atomic(conn, _work)

    def _create_table(self, conn: sqlite3.Connection) -> None:
        conn.execute(_SCHEMA_PATH.read_text(encoding="utf-8"))
        logger.info("Table '%s' created.", TABLE_NAME)
        conn.executemany(
            f"INSERT INTO {TABLE_NAME} (Id, Name, Email, Mobile) VALUES (?, ?, ?, ?)",
            [(c.id, c.name, c.email, c.mobile) for c in SEED_CUSTOMERS],
        )
        # PRAGMA does not accept bound parameters
        conn.execute(f"PRAGMA user_version = {int(self._schema_version)}")
        logger.info("%d sample records inserted.", len(SEED_CUSTOMERS))

    @staticmethod
    def _row_to_customer(row: sqlite3.Row) -> Customer:
        return Customer(
            id=row["Id"],
            name=row["Name"],
            email=row["Email"],
            mobile=row["Mobile"],
        )

    # ── Public API ────────────────────────────────────────────────────────

    def insert(self, customer: Customer) -> InsertOutcome:
        """
        Add *customer* as a new row.

        A duplicate id is rejected by the primary-key constraint; the existing
        row is left untouched.

        Returns:
            InsertOutcome with the SQLite rowid on success, or a failed
            outcome (row_id None) if the row was not written.
        """
        try:
            with self._connection() as conn:
                cur = conn.execute(
                    f"INSERT INTO {TABLE_NAME} (Id, Name, Email, Mobile) VALUES (?, ?, ?, ?)",
                    (customer.id, customer.name, customer.email, customer.mobile),
                )
                return InsertOutcome(success=True, row_id=cur.lastrowid)
        except sqlite3.IntegrityError as exc:
            logger.warning("Insert rejected for ID %s: %s", customer.id, exc)
        except sqlite3.Error as exc:
            logger.error("Error inserting customer ID %s: %s", customer.id, exc)
        return InsertOutcome(success=False)

    def update(self, customer: Customer) -> int:
        """
        Overwrite name, email and mobile of the row whose id is *customer.id*.

        Runs as one transaction that commits only if exactly one row matched.

        Returns:
            Rows affected: 1 on success, 0 if the id was not found or the
            transaction failed.
        """
        def _work(conn: sqlite3.Connection) -> int:
            cur = conn.execute(
                f"UPDATE {TABLE_NAME} SET Name=?, Email=?, Mobile=? WHERE Id=?",
                (customer.name, customer.email, customer.mobile, customer.id),
            )
            return cur.rowcount

        try:
            with self._connection() as conn:
                rows = self.run_atomic(conn, _work, commit_if=lambda n: n == 1)
        except sqlite3.Error as exc:
            logger.error("Transaction failed during update of ID %s: %s", customer.id, exc)
            return 0

        if rows == 1:
            logger.info("Customer ID %s updated successfully.", customer.id)
            return 1
        logger.warning("Update attempted but no rows affected for ID %s.", customer.id)
        return 0

    def delete(self, customer_id: str) -> int:
        """
        Delete the row with id *customer_id*.

        Returns:
            Number of rows deleted (0 or 1).
        """
        try:
            with self._connection() as conn:
                cur = conn.execute(f"DELETE FROM {TABLE_NAME} WHERE Id=?", (customer_id,))
                return cur.rowcount
        except sqlite3.Error as exc:
            logger.error("Error deleting customer ID %s: %s", customer_id, exc)
            return 0

    def search_by_name(self, fragment: str) -> list[Customer]:
        """
        Return customers whose name contains *fragment*, in storage order.

        Matching follows SQL LIKE, so ASCII letters compare case-insensitively.
        Wildcard characters in *fragment* are matched literally.
        """
        pattern = f"%{_escape_like(fragment)}%"
        try:
            with self._connection() as conn:
                rows = conn.execute(
                    f"SELECT * FROM {TABLE_NAME} WHERE Name LIKE ? ESCAPE '\\' ORDER BY rowid",
                    (pattern,),
                ).fetchall()
        except sqlite3.Error as exc:
            logger.error("Error searching customers for %r: %s", fragment, exc)
            return []
        return [self._row_to_customer(r) for r in rows]

    def list_all(self) -> list[Customer]:
        """Return every customer in storage order."""
        try:
            with self._connection() as conn:
                rows = conn.execute(f"SELECT * FROM {TABLE_NAME} ORDER BY rowid").fetchall()
        except sqlite3.Error as exc:
            logger.error("Error listing customers: %s", exc)
            return []
        return [self._row_to_customer(r) for r in rows]

    def reset(self) -> bool:
        """
        Drop the customer table and recreate it with the five sample records.

        DANGER: destroys all existing data.  Runs as one transaction.

        Returns:
            True on success, False if the reset was rolled back.
        """
        def _work(conn: sqlite3.Connection) -> bool:
            conn.execute(f"DROP TABLE IF EXISTS {TABLE_NAME}")
            self._create_table(conn)
            return True

        try:
            with self._connection() as conn:
                self.run_atomic(conn, _work)
        except sqlite3.Error as exc:
            logger.error("Error resetting database: %s", exc)
            return False
        logger.info("Database reset and populated with %d records.", len(SEED_CUSTOMERS))
        return True
