##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
This module contains the functionality necessary to interact with everything
stored in Schoolbook's database.
"""

import logging
from typing import Any, Dict, List, Optional, Type

from tabulate import tabulate

from schoolbook.backends.database_backend import DatabaseBackend
from schoolbook.backends.sqlite.sqlite_backend import SQLiteBackend
from schoolbook.db_scripts.entities import CourseEntity, DepartmentEntity, RegistrationEntity, StudentEntity
from schoolbook.db_scripts.entities.db_entity import DatabaseEntity


LOG = logging.getLogger(__name__)


class SchoolDatabase:
    """
    High-level interface for accessing Schoolbook database entities.

    Attributes:
        backend (backends.database_backend.DatabaseBackend): The backend every entity
            is persisted through.

    Methods:
        get_db_type: Retrieve the type of the backend being used (e.g. sqlite).
        get_db_version: Retrieve the version of the backend.
        get_connection_string: Retrieve the backend connection string.
        create_tables: Create the table of every entity type.
        drop_tables: Drop the table of every entity type.
        flush: Drop and recreate every table.
        create: Create and save a new entity of the specified type.
        get: Get an entity by type and id.
        get_all: Get all entities of a specific type.
        find_by: Find the first entity of a type with a matching column.
        delete: Delete an entity by type and id.
        get_counts: Count the entities of every type.
        info: Print information about the database.
        close: Close the backend's connection.
    """

    _entity_classes: Dict[str, Type[DatabaseEntity]] = {
        "student": StudentEntity,
        "course": CourseEntity,
        "department": DepartmentEntity,
        "registration": RegistrationEntity,
    }

    def __init__(self, backend: DatabaseBackend = None):
        """
        Initialize a new SchoolDatabase instance.

        Args:
            backend: The backend to use. A `SQLiteBackend` built from the configuration
                is created if none is given.
        """
        self.backend: DatabaseBackend = backend if backend is not None else SQLiteBackend()

    @property
    def students(self) -> Type[StudentEntity]:
        """The entity class for students."""
        return StudentEntity

    @property
    def courses(self) -> Type[CourseEntity]:
        """The entity class for courses."""
        return CourseEntity

    @property
    def departments(self) -> Type[DepartmentEntity]:
        """The entity class for departments."""
        return DepartmentEntity

    @property
    def registrations(self) -> Type[RegistrationEntity]:
        """The entity class for registrations."""
        return RegistrationEntity

    def get_db_type(self) -> str:
        """
        Retrieve the type of backend.

        Returns:
            The type of backend (e.g. sqlite).
        """
        return self.backend.get_name()

    def get_db_version(self) -> str:
        """
        Get the version of the backend.

        Returns:
            The version number of the backend.
        """
        return self.backend.get_version()

    def get_connection_string(self) -> str:
        """
        Get the connection string to the backend.

        Returns:
            The connection string to the backend.
        """
        return self.backend.get_connection_string()

    def create_tables(self):
        """Create the table of every entity type that doesn't have one yet."""
        self.backend.create_tables()

    def drop_tables(self):
        """Drop the table of every entity type that has one."""
        LOG.info("Dropping every Schoolbook table...")
        self.backend.drop_tables()

    def flush(self):
        """Remove every entity by dropping and recreating every table."""
        self.backend.flush_database()

    def _get_entity_class(self, entity_type: str) -> Type[DatabaseEntity]:
        """
        Get the entity class for a type, checking that the type is supported.

        Args:
            entity_type: The type of entity (student, course, department, registration).

        Returns:
            The entity class.

        Raises:
            ValueError: If the entity type is not supported.
        """
        if entity_type not in self._entity_classes:
            raise ValueError(f"Entity type not supported: {entity_type}")
        return self._entity_classes[entity_type]

    def create(self, entity_type: str, **fields: Any) -> DatabaseEntity:
        """
        Create and save a new entity of the specified type.

        Args:
            entity_type: The type of entity to create.
            **fields: Column values for the new entity.

        Returns:
            The created entity.
        """
        return self._get_entity_class(entity_type).create(self.backend, **fields)

    def get(self, entity_type: str, entity_id: int) -> DatabaseEntity:
        """
        Get an entity by type and id.

        Args:
            entity_type: The type of entity to get.
            entity_id: The id of the entity.

        Returns:
            The requested entity.

        Raises:
            (exceptions.EntityNotFoundError): If no entity of this type has this id.
        """
        return self._get_entity_class(entity_type).load(entity_id, self.backend)

    def get_all(self, entity_type: str) -> List[DatabaseEntity]:
        """
        Get all entities of a specific type.

        Args:
            entity_type: The type of entities to get.

        Returns:
            A list of all entities of the specified type.
        """
        return self._get_entity_class(entity_type).all(self.backend)

    def find_by(self, entity_type: str, attribute: str, value: Any) -> Optional[DatabaseEntity]:
        """
        Find the first entity of a type whose `attribute` equals `value`.

        Args:
            entity_type: The type of entity to find.
            attribute: The column to match on.
            value: The value to match.

        Returns:
            The entity, or None if none matches.
        """
        return self._get_entity_class(entity_type).find_by(attribute, value, self.backend)

    def delete(self, entity_type: str, entity_id: int):
        """
        Delete an entity by type and id.

        Args:
            entity_type: The type of entity to delete.
            entity_id: The id of the entity.
        """
        self.get(entity_type, entity_id).delete()

    def get_counts(self) -> Dict[str, int]:
        """
        Count the entities of every type.

        Returns:
            A dictionary of entity type to number of entities.
        """
        return {entity_type: self.backend.count(entity_type) for entity_type in self._entity_classes}

    def info(self):
        """
        Print the backend type, version, and location along with the number of entities of each type.
        """
        print("Schoolbook Database Information")
        print("-------------------------------")
        print(f"Backend Type: {self.get_db_type()}")
        print(f"Backend Version: {self.get_db_version()}")
        print(f"Connection String: {self.get_connection_string()}")
        print()
        rows = [
            [entity_type, self.backend.get_table_name(entity_type), count]
            for entity_type, count in self.get_counts().items()
        ]
        print(tabulate(rows, headers=["Entity Type", "Table", "Count"]))

    def close(self):
        """Close the backend's connection."""
        self.backend.close()
