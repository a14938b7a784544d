##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
SQLite backend implementation for the Schoolbook application.

This module defines the `SQLiteBackend` class, which provides a concrete
implementation of the `DatabaseBackend` interface using SQLite as the underlying
storage system. Every store of the backend shares one `SQLiteConnection`.
"""

import logging

from schoolbook.backends.database_backend import DatabaseBackend
from schoolbook.backends.sqlite.sqlite_connection import SQLiteConnection
from schoolbook.backends.sqlite.sqlite_stores import (
    SQLiteCourseStore,
    SQLiteDepartmentStore,
    SQLiteRegistrationStore,
    SQLiteStudentStore,
)


LOG = logging.getLogger(__name__)


class SQLiteBackend(DatabaseBackend):
    """
    A SQLite-based implementation of the `DatabaseBackend` interface.

    Attributes:
        backend_name (str): The name of the backend ("sqlite").
        connection (SQLiteConnection): The connection handle shared by every store.

    Methods:
        get_version:
            Query SQLite for the current version.

        get_connection_string:
            Retrieve the file path of the SQLite database.

        close:
            Close the shared connection.
    """

    def __init__(self, connection: SQLiteConnection = None, initialize_schema: bool = True):
        """
        Initialize the `SQLiteBackend` instance, setting up the store mappings and tables.

        Args:
            connection: The connection handle to use. A handle built from the
                configuration is created if none is given.
            initialize_schema: If True, create any missing table right away.
        """
        self.connection: SQLiteConnection = connection if connection is not None else SQLiteConnection()
        stores = {
            "student": SQLiteStudentStore(self.connection),
            "course": SQLiteCourseStore(self.connection),
            "department": SQLiteDepartmentStore(self.connection),
            "registration": SQLiteRegistrationStore(self.connection),
        }

        super().__init__("sqlite", stores)

        if initialize_schema:
            self.create_tables()

    def get_version(self) -> str:
        """
        Query SQLite for the current version.

        Returns:
            The SQLite version string.
        """
        return self.connection.fetch_one("SELECT sqlite_version()")[0]

    def get_connection_string(self) -> str:
        """
        Get the path of the SQLite database this backend is connected to.

        Returns:
            The database path, or `:memory:`.
        """
        self.connection.open()
        return self.connection.db_path

    def close(self):
        """
        Close the connection shared by the stores of this backend.
        """
        self.connection.close()
