##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
SQLite store implementations for Schoolbook entity models.

This module defines concrete `SQLiteStoreBase` subclasses, each bound to one
model and, through it, to one table.

See also:
    - schoolbook.backends.sqlite.sqlite_store_base: Base class
    - schoolbook.db_scripts.data_models: Data model definitions
"""

from schoolbook.backends.sqlite.sqlite_connection import SQLiteConnection
from schoolbook.backends.sqlite.sqlite_store_base import SQLiteStoreBase
from schoolbook.db_scripts.data_models import CourseModel, DepartmentModel, RegistrationModel, StudentModel


class SQLiteStudentStore(SQLiteStoreBase[StudentModel]):
    """
    A SQLite-based store for managing [`StudentModel`][db_scripts.data_models.StudentModel]
    objects.
    """

    def __init__(self, connection: SQLiteConnection):
        """Initialize the `SQLiteStudentStore`."""
        super().__init__(connection, StudentModel)


class SQLiteCourseStore(SQLiteStoreBase[CourseModel]):
    """
    A SQLite-based store for managing [`CourseModel`][db_scripts.data_models.CourseModel]
    objects.
    """

    def __init__(self, connection: SQLiteConnection):
        """Initialize the `SQLiteCourseStore`."""
        super().__init__(connection, CourseModel)


class SQLiteDepartmentStore(SQLiteStoreBase[DepartmentModel]):
    """
    A SQLite-based store for managing [`DepartmentModel`][db_scripts.data_models.DepartmentModel]
    objects.
    """

    def __init__(self, connection: SQLiteConnection):
        """Initialize the `SQLiteDepartmentStore`."""
        super().__init__(connection, DepartmentModel)


class SQLiteRegistrationStore(SQLiteStoreBase[RegistrationModel]):
    """
    A SQLite-based store for managing [`RegistrationModel`][db_scripts.data_models.RegistrationModel]
    objects.
    """

    def __init__(self, connection: SQLiteConnection):
        """Initialize the `SQLiteRegistrationStore`."""
        super().__init__(connection, RegistrationModel)
