##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
This module defines the abstract base class for all data store implementations in Schoolbook.

This module provides the `StoreBase` class, which outlines the required interface for
managing a table and inserting, updating, finding, and deleting the rows of one entity type.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar

from schoolbook.db_scripts.data_models import BaseDataModel


T = TypeVar("T", bound=BaseDataModel)


class StoreBase(ABC, Generic[T]):
    """
    Base class for all stores supported in Schoolbook.

    Methods:
        create_table_if_not_exists: Create the backing table for this store.
        drop_table_if_exists: Drop the backing table for this store.
        insert: Insert a transient entity and assign its id.
        update: Update the row of a persisted entity.
        save: Insert or update an entity depending on whether it has an id.
        find_by: Find the first entity whose column matches a value.
        find_all_by: Find every entity whose column matches a value.
        find_all_through: Find every entity linked to an owner through a join table.
        retrieve: Retrieve an entity from the database by ID.
        retrieve_all: Query the database for all entities of this type.
        count: Count the entities of this type.
        delete: Delete an entity from the database by ID.
    """

    @abstractmethod
    def create_table_if_not_exists(self):
        """Create the table for this store if it doesn't already exist."""
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `create_table_if_not_exists` method.")

    @abstractmethod
    def drop_table_if_exists(self):
        """Drop the table for this store if it exists."""
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `drop_table_if_exists` method.")

    @abstractmethod
    def insert(self, entity: T):
        """
        Insert a transient entity into the database and assign its id.

        Args:
            entity: The entity to insert.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement an `insert` method.")

    @abstractmethod
    def update(self, entity: T):
        """
        Write the attributes of a persisted entity to its row.

        Args:
            entity: The entity to update.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement an `update` method.")

    def save(self, entity: T):
        """
        Save or update an object in the database.

        Args:
            entity: The object to save.
        """
        if entity.is_persisted():
            self.update(entity)
        else:
            self.insert(entity)

    @abstractmethod
    def find_by(self, attribute: str, value: Any) -> Optional[T]:
        """
        Find the first entity whose `attribute` column equals `value`.

        Args:
            attribute: The column to match on.
            value: The value to match.

        Returns:
            The entity if found, None otherwise.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `find_by` method.")

    @abstractmethod
    def find_all_by(self, attribute: str, value: Any) -> List[T]:
        """
        Find every entity whose `attribute` column equals `value`.

        Args:
            attribute: The column to match on.
            value: The value to match.

        Returns:
            A list of entities, possibly empty.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `find_all_by` method.")

    @abstractmethod
    def find_all_through(
        self, join_table: str, target_key: str, owner_key: str, owner_table: str, owner_id: int
    ) -> List[T]:
        """
        Find every entity linked to one owner row through a join table.

        Args:
            join_table: The table holding the pairs of ids.
            target_key: The join table column referencing this store's ids.
            owner_key: The join table column referencing the owner table's ids.
            owner_table: The table of the owning entity.
            owner_id: The id of the owning entity.

        Returns:
            A list of linked entities, possibly empty.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `find_all_through` method.")

    def retrieve(self, identifier: int) -> Optional[T]:
        """
        Retrieve an entity from the database by its id.

        Args:
            identifier: The id of the entity to retrieve.

        Returns:
            The entity if found, None otherwise.
        """
        return self.find_by("id", identifier)

    @abstractmethod
    def retrieve_all(self) -> List[T]:
        """
        Query the database for all entities of this type.

        Returns:
            A list of entities.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `retrieve_all` method.")

    @abstractmethod
    def count(self) -> int:
        """
        Count the entities of this type.

        Returns:
            The number of entities.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `count` method.")

    @abstractmethod
    def delete(self, identifier: int):
        """
        Delete an entity from the database by its id.

        Args:
            identifier: The id of the entity to delete.
        """
        raise NotImplementedError("Subclasses of `StoreBase` must implement a `delete` method.")
