##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
SQLite connection handle for the Schoolbook application.

This module defines the `SQLiteConnection` class, a long-lived handle around a single
`sqlite3.Connection`. One handle is created per backend and passed to every store,
so all statements of a process share one connection. The handle applies the configured
pragmas when it opens, and serializes statements with a re-entrant lock so that an insert
and the identity it produces can never be split by another writer.
"""

import logging
import sqlite3
import sys
import threading
from pathlib import Path
from types import TracebackType
from typing import Any, List, Optional, Sequence, Type

from schoolbook.config.database import MEMORY_DATABASE


LOG = logging.getLogger(__name__)


class SQLiteConnection:
    """
    Handle for a SQLite database connection shared by every store of a backend.

    Connections are created with:
    - the configured journal mode (WAL by default)
    - name- and index-based row access via `sqlite3.Row`
    - autocommit, with compatibility for Python versions < 3.12 and >= 3.12

    Attributes:
        db_path (str): The path to the database file, or `:memory:`.
        journal_mode (str): The value for `PRAGMA journal_mode`.
        conn (sqlite3.Connection): The open SQLite connection, None until `open` is called.
        lock (threading.RLock): Serializes statements issued through this handle.

    Methods:
        open: Open and configure the connection (no-op if already open).
        close: Close the connection.
        execute: Execute a statement and return its cursor.
        execute_insert: Execute an insert and return the id it assigned.
        fetch_all: Execute a query and return all of its rows.
        fetch_one: Execute a query and return its first row.
    """

    def __init__(self, db_path: str = None, journal_mode: str = None):
        """
        Initialize the handle. Any argument left as None is read from the configuration.

        Args:
            db_path: The path to the database file, or `:memory:`.
            journal_mode: The value for `PRAGMA journal_mode`.
        """
        self.db_path: str = db_path
        self.journal_mode: str = journal_mode
        self.conn: Optional[sqlite3.Connection] = None
        self.lock = threading.RLock()

    def __enter__(self) -> "SQLiteConnection":
        """
        Enters the runtime context related to this object and opens the connection.

        Returns:
            This handle, opened.
        """
        self.open()
        return self

    def __exit__(self, exc_type: Type[Exception], exc_value: Exception, traceback: TracebackType):
        """
        Exits the runtime context and closes the connection.

        Args:
            exc_type: The exception type raised, if any.
            exc_value: The exception instance raised, if any.
            traceback: The traceback object, if an exception was raised.
        """
        self.close()

    def _resolve_settings(self):
        """Fill in any setting that wasn't given to the constructor from the configuration."""
        from schoolbook.config.database import (  # pylint: disable=import-outside-toplevel
            get_connection_settings,
            get_connection_string,
        )

        if self.db_path is None:
            self.db_path = get_connection_string()
        if self.journal_mode is None:
            self.journal_mode = get_connection_settings()["journal_mode"]

    def open(self) -> sqlite3.Connection:
        """
        Open and configure the SQLite connection. Calling this on an open handle does nothing.

        Returns:
            The underlying sqlite connection.
        """
        with self.lock:
            if self.conn is not None:
                return self.conn

            self._resolve_settings()
            if self.db_path != MEMORY_DATABASE:
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

            connection_kwargs = {"check_same_thread": False}
            if sys.version_info < (3, 12):  # Autocommit wasn't added until python 3.12
                connection_kwargs["isolation_level"] = None
            else:
                connection_kwargs["autocommit"] = True

            LOG.debug(f"Opening SQLite connection to '{self.db_path}'.")
            self.conn = sqlite3.connect(self.db_path, **connection_kwargs)

            self.conn.execute(f"PRAGMA journal_mode={self.journal_mode}")

            # This enables name-based access to columns while keeping positional access
            self.conn.row_factory = sqlite3.Row

            return self.conn

    def close(self):
        """Close the connection if it's open."""
        with self.lock:
            if self.conn is not None:
                LOG.debug(f"Closing SQLite connection to '{self.db_path}'.")
                self.conn.close()
                self.conn = None

    def execute(self, query: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        """
        Execute a single statement.

        Args:
            query: The SQL statement, using `?` placeholders.
            params: The values bound to the placeholders.

        Returns:
            The cursor that executed the statement.
        """
        with self.lock:
            LOG.debug(f"SQLite query: {query}")
            LOG.debug(f"SQLite params: {list(params)}")
            return self.open().execute(query, params)

    def execute_insert(self, query: str, params: Sequence[Any] = ()) -> int:
        """
        Execute an insert and return the identity it assigned.

        The identity is read from the cursor of the insert itself while the lock is
        still held, so concurrent writers sharing this handle each get their own id.

        Args:
            query: The INSERT statement, using `?` placeholders.
            params: The values bound to the placeholders.

        Returns:
            The rowid of the inserted row.
        """
        with self.lock:
            cursor = self.execute(query, params)
            return cursor.lastrowid

    def fetch_all(self, query: str, params: Sequence[Any] = ()) -> List[sqlite3.Row]:
        """
        Execute a query and return every row it produces.

        Args:
            query: The SELECT statement, using `?` placeholders.
            params: The values bound to the placeholders.

        Returns:
            A list of rows.
        """
        with self.lock:
            return self.execute(query, params).fetchall()

    def fetch_one(self, query: str, params: Sequence[Any] = ()) -> Optional[sqlite3.Row]:
        """
        Execute a query and return the first row it produces.

        Args:
            query: The SELECT statement, using `?` placeholders.
            params: The values bound to the placeholders.

        Returns:
            The first row, or None if the query produced no rows.
        """
        with self.lock:
            return self.execute(query, params).fetchone()
