"""
Tests for the `sqlite_connection.py` module.
"""

import os
import sqlite3
import threading

import pytest
from pytest_mock import MockerFixture

from schoolbook.backends.sqlite.sqlite_connection import SQLiteConnection
from tests.fixture_types import FixtureSQLiteConnection


class TestSQLiteConnection:
    """Tests for the `SQLiteConnection` handle."""

    def test_settings_default_to_the_configuration(self, mocker: MockerFixture):
        """
        Test that settings left out of the constructor are read from the configuration on open.

        Args:
            mocker: PyTest mocker fixture.
        """
        mocker.patch("schoolbook.config.database.get_connection_string", return_value=":memory:")
        mocker.patch(
            "schoolbook.config.database.get_connection_settings",
            return_value={"journal_mode": "MEMORY"},
        )

        connection = SQLiteConnection()
        assert connection.conn is None

        connection.open()
        try:
            assert connection.db_path == ":memory:"
            assert connection.journal_mode == "MEMORY"
            assert connection.fetch_one("PRAGMA journal_mode")[0].lower() == "memory"
        finally:
            connection.close()

    def test_open_applies_pragmas(self, sqlite_connection: FixtureSQLiteConnection):
        """
        Test that opening the connection turns on name-based row access.

        Args:
            sqlite_connection: A connection handle to an in-memory database.
        """
        sqlite_connection.open()

        row = sqlite_connection.fetch_one("SELECT 1 AS answer")
        assert isinstance(row, sqlite3.Row)
        assert row["answer"] == 1

    def test_open_is_idempotent(self, sqlite_connection: FixtureSQLiteConnection):
        """
        Test that opening an open handle reuses its connection.

        Args:
            sqlite_connection: A connection handle to an in-memory database.
        """
        first = sqlite_connection.open()
        assert sqlite_connection.open() is first

    def test_context_manager_closes(self):
        """Test that leaving the `with` block closes the connection."""
        with SQLiteConnection(db_path=":memory:", journal_mode="MEMORY") as connection:
            assert connection.conn is not None
        assert connection.conn is None

    def test_file_database_creates_parent_directory(self, tmp_path):
        """
        Test that a database file can be created in a directory that doesn't exist yet.

        Args:
            tmp_path: A built-in fixture from pytest providing a temporary directory.
        """
        db_path = os.path.join(str(tmp_path), "nested", "school.db")
        with SQLiteConnection(db_path=db_path, journal_mode="WAL") as connection:
            assert connection.fetch_one("PRAGMA journal_mode")[0].lower() == "wal"
        assert os.path.isfile(db_path)

    def test_execute_insert_returns_identity(self, sqlite_connection: FixtureSQLiteConnection):
        """
        Test that every insert reports the id that was assigned to its own row.

        Args:
            sqlite_connection: A connection handle to an in-memory database.
        """
        sqlite_connection.execute("CREATE TABLE things (id INTEGER PRIMARY KEY, name TEXT)")

        first_id = sqlite_connection.execute_insert("INSERT INTO things (name) VALUES (?)", ["a"])
        second_id = sqlite_connection.execute_insert("INSERT INTO things (name) VALUES (?)", ["b"])

        assert first_id == 1
        assert second_id == 2
        assert sqlite_connection.fetch_one("SELECT name FROM things WHERE id = ?", [second_id])[0] == "b"

    def test_fetch_one_no_rows(self, sqlite_connection: FixtureSQLiteConnection):
        """
        Test that a query producing no rows returns None.

        Args:
            sqlite_connection: A connection handle to an in-memory database.
        """
        sqlite_connection.execute("CREATE TABLE things (id INTEGER PRIMARY KEY)")
        assert sqlite_connection.fetch_one("SELECT * FROM things") is None
        assert sqlite_connection.fetch_all("SELECT * FROM things") == []

    def test_driver_errors_propagate(self, sqlite_connection: FixtureSQLiteConnection):
        """
        Test that errors raised by SQLite reach the caller unmodified.

        Args:
            sqlite_connection: A connection handle to an in-memory database.
        """
        with pytest.raises(sqlite3.OperationalError, match="no such table"):
            sqlite_connection.execute("SELECT * FROM missing")

    def test_concurrent_inserts_get_distinct_ids(self, sqlite_connection: FixtureSQLiteConnection):
        """
        Test that inserts issued from several threads each get their own id.

        Args:
            sqlite_connection: A connection handle to an in-memory database.
        """
        sqlite_connection.execute("CREATE TABLE things (id INTEGER PRIMARY KEY, name TEXT)")
        ids = []
        ids_lock = threading.Lock()

        def insert_many(prefix: str):
            for i in range(20):
                new_id = sqlite_connection.execute_insert("INSERT INTO things (name) VALUES (?)", [f"{prefix}{i}"])
                with ids_lock:
                    ids.append(new_id)

        threads = [threading.Thread(target=insert_many, args=(f"t{n}-",)) for n in range(5)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(ids) == 100
        assert len(set(ids)) == 100
        assert sqlite_connection.fetch_one("SELECT COUNT(*) FROM things")[0] == 100
