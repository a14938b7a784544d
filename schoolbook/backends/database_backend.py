##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Abstract base class for database backends in the Schoolbook application.

This module defines `DatabaseBackend`, an abstract base class that specifies
the interface for backend implementations responsible for persisting
and retrieving Schoolbook entities.

The `DatabaseBackend` class encapsulates:
- A unified interface for the schema lifecycle and CRUD operations on Schoolbook data models
- Store type routing, by store name or by data model class
- Backend-specific details such as version reporting and database flushing

Usage:
    This base class is not meant to be instantiated directly. Instead, it should be subclassed
    by backend-specific implementations such as `SQLiteBackend`.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from schoolbook.backends.store_base import StoreBase
from schoolbook.db_scripts.data_models import BaseDataModel
from schoolbook.exceptions import UnsupportedDataModelError


LOG = logging.getLogger(__name__)


class DatabaseBackend(ABC):
    """
    Abstract base class for a database backend, which owns one store per entity type.

    Attributes:
        backend_name (str): The name of the backend (e.g., "sqlite").
        stores (Dict[str, backends.store_base.StoreBase]): The stores of this backend keyed
            by store type (`student`, `course`, `department`, `registration`).

    Methods:
        get_name:
            Retrieve the name of the backend.

        get_version:
            Query the backend for the current version.

        get_connection_string:
            Retrieve the connection string used to connect to the backend.

        create_table / drop_table:
            Create or drop the table of one store.

        create_tables / drop_tables:
            Create or drop the table of every store.

        flush_database:
            Remove every entry in the database.

        insert / update / save:
            Write a data model through the store that handles its type.

        find_by / find_all_by:
            Find data models in a store by the value of one column.

        find_all_through:
            Find data models linked to an owner through a join store.

        retrieve / retrieve_all:
            Retrieve data models from a store by id, or all of them.

        count:
            Count the entries in a store.

        delete:
            Delete an entity from a store by id.
    """

    def __init__(self, backend_name: str, stores: Dict[str, StoreBase]):
        """
        Initialize the `DatabaseBackend` instance.

        Args:
            backend_name: The name of the backend (e.g., "sqlite").
            stores: The stores of this backend keyed by store type.
        """
        self.backend_name: str = backend_name
        self.stores: Dict[str, StoreBase] = stores

    def get_name(self) -> str:
        """
        Get the name of the backend.

        Returns:
            The name of the backend (e.g. sqlite).
        """
        return self.backend_name

    @abstractmethod
    def get_version(self) -> str:
        """
        Query the backend for the current version.

        Returns:
            A string representing the current version of the backend.
        """
        raise NotImplementedError("Subclasses of `DatabaseBackend` must implement a `get_version` method.")

    @abstractmethod
    def get_connection_string(self) -> str:
        """
        Query the backend for the connection string.

        Returns:
            A string representing the connection to the backend.
        """
        raise NotImplementedError("Subclasses of `DatabaseBackend` must implement a `get_connection_string` method.")

    def create_table(self, store_type: str):
        """
        Create the table of one store if it doesn't exist.

        Args:
            store_type: The type of store whose table to create.
        """
        self._get_store_by_type(store_type).create_table_if_not_exists()

    def drop_table(self, store_type: str):
        """
        Drop the table of one store if it exists.

        Args:
            store_type: The type of store whose table to drop.
        """
        self._get_store_by_type(store_type).drop_table_if_exists()

    def create_tables(self):
        """
        Create the table of every store. Tables that already exist are left alone.
        """
        for store in self.stores.values():
            store.create_table_if_not_exists()

    def drop_tables(self):
        """
        Drop the table of every store. Tables that don't exist are skipped.
        """
        for store in self.stores.values():
            store.drop_table_if_exists()

    def close(self):
        """
        Release any resources held by the backend. Backends without any do nothing.
        """

    def flush_database(self):
        """
        Remove everything stored in the database by dropping and recreating every table.
        """
        LOG.info(f"Flushing every table in the {self.backend_name} database...")
        self.drop_tables()
        self.create_tables()

    def _get_store_by_type(self, store_type: str) -> StoreBase:
        """
        Get the appropriate store based on the store type.

        Args:
            store_type: The type of store.

        Returns:
            The corresponding store.

        Raises:
            ValueError: If the `store_type` is invalid.
        """
        if store_type not in self.stores:
            raise ValueError(f"Invalid store type '{store_type}'.")
        return self.stores[store_type]

    def _get_store_by_entity(self, entity: BaseDataModel) -> StoreBase:
        """
        Get the appropriate store based on the entity type.

        Args:
            entity: The data model to route.

        Returns:
            The corresponding store.

        Raises:
            (exceptions.UnsupportedDataModelError): If the entity type is unsupported.
        """
        for store in self.stores.values():
            if type(entity) is store.model_class:  # pylint: disable=unidiomatic-typecheck
                return store
        raise UnsupportedDataModelError(f"Unsupported data model of type {type(entity)}.")

    def get_table_name(self, store_type: str) -> str:
        """
        Get the name of the table behind a store.

        Args:
            store_type: The type of store.

        Returns:
            The table name.
        """
        return self._get_store_by_type(store_type).table_name

    def insert(self, entity: BaseDataModel):
        """
        Insert a transient data model and assign its id.

        Args:
            entity: An instance of one of `BaseDataModel`'s inherited classes.
        """
        self._get_store_by_entity(entity).insert(entity)

    def update(self, entity: BaseDataModel):
        """
        Update the row of a persisted data model.

        Args:
            entity: An instance of one of `BaseDataModel`'s inherited classes.
        """
        self._get_store_by_entity(entity).update(entity)

    def save(self, entity: BaseDataModel):
        """
        Save a `BaseDataModel` object to the database, inserting or updating as needed.

        Args:
            entity: An instance of one of `BaseDataModel`'s inherited classes.
        """
        self._get_store_by_entity(entity).save(entity)

    def find_by(self, store_type: str, attribute: str, value: Any) -> Optional[BaseDataModel]:
        """
        Find the first data model in a store whose `attribute` column equals `value`.

        Args:
            store_type: The type of store to query.
            attribute: The column to match on.
            value: The value to match.

        Returns:
            The data model if found, None otherwise.
        """
        LOG.debug(f"Finding a {store_type} by {attribute}={value!r}.")
        return self._get_store_by_type(store_type).find_by(attribute, value)

    def find_all_by(self, store_type: str, attribute: str, value: Any) -> List[BaseDataModel]:
        """
        Find every data model in a store whose `attribute` column equals `value`.

        Args:
            store_type: The type of store to query.
            attribute: The column to match on.
            value: The value to match.

        Returns:
            A list of data models, possibly empty.
        """
        LOG.debug(f"Finding all {store_type} entries by {attribute}={value!r}.")
        return self._get_store_by_type(store_type).find_all_by(attribute, value)

    def find_all_through(  # pylint: disable=too-many-arguments
        self,
        store_type: str,
        through_type: str,
        target_key: str,
        owner_key: str,
        owner_type: str,
        owner_id: int,
    ) -> List[BaseDataModel]:
        """
        Find every data model of `store_type` linked to one owner through a join store.

        Args:
            store_type: The type of store holding the entities to return.
            through_type: The type of the join store.
            target_key: The join column referencing the returned entities.
            owner_key: The join column referencing the owner.
            owner_type: The type of store holding the owner.
            owner_id: The id of the owner.

        Returns:
            A list of data models, possibly empty.
        """
        return self._get_store_by_type(store_type).find_all_through(
            self.get_table_name(through_type), target_key, owner_key, self.get_table_name(owner_type), owner_id
        )

    def retrieve(self, entity_identifier: int, store_type: str) -> Optional[BaseDataModel]:
        """
        Retrieve a data model from a store by its id.

        Args:
            entity_identifier: The id of the entity.
            store_type: The type of store to query.

        Returns:
            The data model if found, None otherwise.
        """
        LOG.debug(f"Retrieving '{entity_identifier}' from store '{store_type}'.")
        return self._get_store_by_type(store_type).retrieve(entity_identifier)

    def retrieve_all(self, store_type: str) -> List[BaseDataModel]:
        """
        Retrieve all data models from the specified store.

        Args:
            store_type: The type of store to query.

        Returns:
            A list of data models retrieved from the specified store.
        """
        return self._get_store_by_type(store_type).retrieve_all()

    def count(self, store_type: str) -> int:
        """
        Count the entries in the specified store.

        Args:
            store_type: The type of store to query.

        Returns:
            The number of entries.
        """
        return self._get_store_by_type(store_type).count()

    def delete(self, entity_identifier: int, store_type: str):
        """
        Delete an entity from the specified store.

        Args:
            entity_identifier: The id of the entity to delete.
            store_type: The type of store to delete from.
        """
        self._get_store_by_type(store_type).delete(entity_identifier)
