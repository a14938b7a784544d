##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
SQLite-based generic store implementation for Schoolbook entities.

This module defines `SQLiteStoreBase`, a generic base class for managing
entity persistence using SQLite as the underlying storage. It provides
the schema lifecycle (create/drop table), the CRUD operations (insert, update,
save, find, delete), and the three-table join used by many-to-many
relationships. Every statement is rendered from the model class's field
declarations.

This module is intended to be subclassed by entity-specific store classes.

See also:
    - schoolbook.backends.store_base: Base class
    - schoolbook.backends.sqlite.sqlite_stores: Concrete store implementations
    - schoolbook.db_scripts.data_models: Data model definitions
"""

import logging
from typing import Any, Generic, List, Optional, Tuple, Type, Union, get_args, get_origin

from schoolbook.backends.sqlite.sqlite_connection import SQLiteConnection
from schoolbook.backends.store_base import StoreBase, T
from schoolbook.backends.utils import deserialize_entity, get_not_found_error_class, serialize_entity
from schoolbook.exceptions import InvalidStateError, UnknownAttributeError


LOG = logging.getLogger(__name__)


class SQLiteStoreBase(StoreBase[T], Generic[T]):
    """
    Base class for SQLite-based stores.

    Attributes:
        connection (SQLiteConnection): The connection handle shared with the rest of the backend.
        model_class (Type[T]): The model class used for serialization and deserialization.
        table_name (str): The table name used for SQLite entries, taken from the model class.

    Methods:
        create_table_if_not_exists: Create the table if it doesn't exist.
        drop_table_if_exists: Drop the table if it exists.
        insert: Insert a transient entity and assign its id.
        update: Update the row of a persisted entity.
        save: Insert or update an entity depending on whether it has an id.
        find_by: Find the first entity whose column matches a value.
        find_all_by: Find every entity whose column matches a value.
        find_all_through: Find every entity linked to an owner row through a join table.
        retrieve: Retrieve an entity from the database by ID.
        retrieve_all: Query the database for all entities of this type.
        count: Count the rows of the table.
        delete: Delete an entity from the database by ID.
    """

    def __init__(self, connection: SQLiteConnection, model_class: Type[T]):
        """
        Initialize the SQLite store.

        Args:
            connection: The connection handle every statement is executed through.
            model_class: The model class used for serialization and deserialization.
        """
        self.connection: SQLiteConnection = connection
        self.model_class: Type[T] = model_class
        self.table_name: str = model_class.table_name

    def _get_sqlite_type(self, py_type: Any) -> str:
        """
        Map Python types to SQLite types.

        Args:
            py_type: A Python type hint (e.g., str, int, Optional[int], etc.)

        Returns:
            A string representing the corresponding SQLite column type.
        """
        # Optional[X] is Union[X, None]; the column type is that of X
        if get_origin(py_type) is Union:
            non_null_args = [arg for arg in get_args(py_type) if arg is not type(None)]
            if len(non_null_args) == 1:
                py_type = non_null_args[0]

        result = "TEXT"  # Default fallback
        if py_type in (int, bool):
            result = "INTEGER"  # SQLite uses 0 and 1 for booleans
        elif py_type == float:
            result = "REAL"

        return result

    def _check_column(self, attribute: str):
        """
        Make sure `attribute` is a column of this store's table.

        Column names are interpolated into SQL, so only declared names are accepted.

        Args:
            attribute: The column name to check.

        Raises:
            (exceptions.UnknownAttributeError): If the model doesn't declare this column.
        """
        if attribute not in self.model_class.get_column_names():
            raise UnknownAttributeError(f"Table '{self.table_name}' has no column named '{attribute}'.")

    def _build_where_clause(self, attribute: str, value: Any) -> Tuple[str, List[Any]]:
        """
        Build the WHERE clause and parameters for an equality match on one column.

        Args:
            attribute: The column to match on.
            value: The value to match. None matches NULL.

        Returns:
            A tuple of (where_clause, params).
        """
        self._check_column(attribute)
        if value is None:
            return f"WHERE {attribute} IS NULL", []
        return f"WHERE {attribute} = ?", [value]

    def _deserialize_rows(self, rows: List[Any]) -> List[T]:
        return [deserialize_entity(row, self.model_class) for row in rows]

    def create_table_if_not_exists(self):
        """
        Create the table if it doesn't exist.
        """
        field_defs = []

        for field_obj in self.model_class.get_class_fields():
            if field_obj.name == "id":
                field_defs.append("id INTEGER PRIMARY KEY")
            else:
                field_defs.append(f"{field_obj.name} {self._get_sqlite_type(field_obj.type)}")

        field_defs_str = ", ".join(field_defs)
        self.connection.execute(f"CREATE TABLE IF NOT EXISTS {self.table_name} ({field_defs_str})")
        LOG.debug(f"Ensured table '{self.table_name}' exists.")

    def drop_table_if_exists(self):
        """
        Drop the table if it exists.
        """
        self.connection.execute(f"DROP TABLE IF EXISTS {self.table_name}")
        LOG.debug(f"Ensured table '{self.table_name}' is dropped.")

    def insert(self, entity: T):
        """
        Insert a transient entity and assign it the id chosen by SQLite.

        Args:
            entity: The entity to insert. Its id must be None.

        Raises:
            (exceptions.InvalidStateError): If the entity already has an id.
        """
        if entity.id is not None:
            raise InvalidStateError(
                f"Cannot insert {self.table_name} with id '{entity.id}'; it already exists in the database."
            )

        LOG.debug(f"Creating a {self.table_name} entry in SQLite...")
        columns = self.model_class.get_attribute_names()
        columns_str = ", ".join(columns)
        placeholders_str = ", ".join("?" for _ in columns)
        entity.id = self.connection.execute_insert(
            f"INSERT INTO {self.table_name} ({columns_str}) VALUES ({placeholders_str})",
            serialize_entity(entity),
        )
        LOG.debug(f"Successfully created a {self.table_name} entry with id '{entity.id}' in SQLite.")

    def update(self, entity: T):
        """
        Write every attribute of a persisted entity to its row.

        If the row no longer exists nothing is written; that is not an error.

        Args:
            entity: The entity to update. Its id must not be None.

        Raises:
            (exceptions.InvalidStateError): If the entity has no id.
        """
        if entity.id is None:
            raise InvalidStateError(f"Cannot update a {self.table_name} entry that was never inserted.")

        LOG.debug(f"Attempting to update {self.table_name} with id '{entity.id}'...")
        set_str = ", ".join(f"{name} = ?" for name in self.model_class.get_attribute_names())
        cursor = self.connection.execute(
            f"UPDATE {self.table_name} SET {set_str} WHERE id = ?",
            serialize_entity(entity) + [entity.id],
        )
        if cursor.rowcount == 0:
            LOG.debug(f"No {self.table_name} row with id '{entity.id}' exists; nothing was updated.")
        else:
            LOG.debug(f"Successfully updated {self.table_name} with id '{entity.id}'.")

    def find_by(self, attribute: str, value: Any) -> Optional[T]:
        """
        Find the first entity whose `attribute` column equals `value`.

        No ordering is applied, so with several matches which one comes back is up to SQLite.

        Args:
            attribute: The column to match on.
            value: The value to match.

        Returns:
            The entity if found, None otherwise.
        """
        where_clause, params = self._build_where_clause(attribute, value)
        row = self.connection.fetch_one(f"SELECT * FROM {self.table_name} {where_clause} LIMIT 1", params)
        if row is None:
            return None
        return deserialize_entity(row, self.model_class)

    def find_all_by(self, attribute: str, value: Any) -> List[T]:
        """
        Find every entity whose `attribute` column equals `value`.

        Args:
            attribute: The column to match on.
            value: The value to match.

        Returns:
            A list of matching entities, possibly empty.
        """
        where_clause, params = self._build_where_clause(attribute, value)
        rows = self.connection.fetch_all(f"SELECT * FROM {self.table_name} {where_clause}", params)
        return self._deserialize_rows(rows)

    def find_all_through(
        self, join_table: str, target_key: str, owner_key: str, owner_table: str, owner_id: int
    ) -> List[T]:
        """
        Find every entity of this table linked to one owner row through a join table.

        Only this table's columns are selected. An entity linked by several join rows is
        returned once per join row.

        Args:
            join_table: The table holding the pairs of ids.
            target_key: The join table column referencing this table's ids.
            owner_key: The join table column referencing the owner table's ids.
            owner_table: The table of the owning entity.
            owner_id: The id of the owning entity.

        Returns:
            A list of linked entities, possibly empty.
        """
        query = (
            f"SELECT {self.table_name}.* FROM {self.table_name} "
            f"INNER JOIN {join_table} ON {self.table_name}.id = {join_table}.{target_key} "
            f"INNER JOIN {owner_table} ON {join_table}.{owner_key} = {owner_table}.id "
            f"WHERE {owner_table}.id = ?"
        )
        rows = self.connection.fetch_all(query, [owner_id])
        return self._deserialize_rows(rows)

    def retrieve_all(self) -> List[T]:
        """
        Query the SQLite database for all entities of this type.

        Returns:
            A list of entities.
        """
        LOG.info(f"Fetching all {self.table_name} from SQLite...")
        rows = self.connection.fetch_all(f"SELECT * FROM {self.table_name}")
        entities = self._deserialize_rows(rows)
        LOG.info(f"Successfully retrieved {len(entities)} {self.table_name} from SQLite.")
        return entities

    def count(self) -> int:
        """
        Count the rows of this store's table.

        Returns:
            The number of rows.
        """
        return self.connection.fetch_one(f"SELECT COUNT(*) FROM {self.table_name}")[0]

    def delete(self, identifier: int):
        """
        Delete an entity from the SQLite database by id.

        Args:
            identifier: The id of the entity to delete.

        Raises:
            (exceptions.EntityNotFoundError): The subclass matching this store's model
                if no row has this id.
        """
        LOG.info(f"Attempting to delete {self.table_name} with id '{identifier}' from SQLite...")

        cursor = self.connection.execute(f"DELETE FROM {self.table_name} WHERE id = ?", [identifier])
        if cursor.rowcount == 0:
            error_class = get_not_found_error_class(self.model_class)
            raise error_class(f"{self.table_name.capitalize()} with id '{identifier}' does not exist in the database.")

        LOG.info(f"Successfully deleted {self.table_name} '{identifier}' from SQLite.")
