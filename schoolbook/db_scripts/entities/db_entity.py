##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
This module defines the `DatabaseEntity` abstract base class, the active-record
interface shared by students, courses, departments, and registrations.

A `DatabaseEntity` wraps a data model together with the backend it is persisted
through. It tracks the entity's lifecycle:

- transient: constructed in memory, no id yet
- persisted: inserted once, bound to exactly one row; any number of updates
- deleted: its row was removed; the id is kept for reference but the entity can't be saved again

Relationship descriptors (see `schoolbook.db_scripts.entities.relationships`) look entity
classes up by entity type through the registry kept here.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from schoolbook.backends.database_backend import DatabaseBackend
from schoolbook.backends.utils import get_not_found_error_class
from schoolbook.db_scripts.data_models import BaseDataModel
from schoolbook.exceptions import InvalidStateError


# Type variable for entity models
T = TypeVar("T", bound=BaseDataModel)
# Type variable for entity classes
E = TypeVar("E", bound="DatabaseEntity")

LOG = logging.getLogger(__name__)


class DatabaseEntity(Generic[T], ABC):
    """
    Abstract base class for database entities such as students, courses, and departments.

    Attributes:
        model_class (Type[T]): The data model class wrapped by this entity class.
        entity_info (T): The data model containing information about the entity.
        backend (backends.database_backend.DatabaseBackend): The backend instance used
            to interact with the database.

    Methods:
        entity_type:
            Get the type of this entity for database operations.

        get_entity_class:
            (classmethod) Look up a registered entity class by its entity type.

        get_id / is_persisted / is_deleted:
            Inspect the lifecycle state of this entity.

        update_fields:
            Change attributes in memory without saving.

        save / insert / update:
            Write the current state of this entity to the database.

        reload_data:
            Reload the latest data for this entity from the database.

        delete:
            Delete this entity's row and retire the entity.

        build / create:
            (classmethod) Construct a transient entity, optionally saving it right away.

        load / find_by / find_all_by / all:
            (classmethod) Read entities from the database.

        create_table / drop_table:
            (classmethod) Manage the table behind this entity class.
    """

    model_class: Type[T] = None

    _registry: Dict[str, Type["DatabaseEntity"]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.model_class is not None:
            DatabaseEntity._registry[cls._get_entity_type()] = cls

    def __init__(self, entity_info: T, backend: DatabaseBackend):
        """
        Initialize a `DatabaseEntity` instance.

        Args:
            entity_info (T): The data model containing information about the entity.
            backend (backends.database_backend.DatabaseBackend): The backend instance used to
                interact with the database.
        """
        self.entity_info: T = entity_info
        self.backend: DatabaseBackend = backend
        self._deleted: bool = False
        # Memoized belongs-to targets keyed by relationship name
        self._relation_cache: Dict[str, "DatabaseEntity"] = {}
        self._cache_lock = threading.Lock()

    def __repr__(self) -> str:
        """
        Provide a string representation of the entity.

        Returns:
            The class name followed by every column value.
        """
        fields_str = ", ".join(f"{name}={value!r}" for name, value in self.entity_info.to_dict().items())
        return f"{self.__class__.__name__}({fields_str})"

    @abstractmethod
    def __str__(self) -> str:
        """
        Provide a human-readable string representation of the entity.
        """
        raise NotImplementedError("Subclasses of `DatabaseEntity` must implement a `__str__` method.")

    def __eq__(self, other: Any) -> bool:
        """
        Two entities are equal when they're of the same class and hold equal data.

        Args:
            other: The object to compare against.

        Returns:
            True if the entities are equal, False otherwise.
        """
        if not isinstance(other, DatabaseEntity):
            return NotImplemented
        return type(self) is type(other) and self.entity_info == other.entity_info

    def __hash__(self) -> int:
        """
        Hash on the entity's class and id, so saved entities can be gathered into sets.

        An unsaved entity has no id yet; its hash changes when `save` assigns one.

        Returns:
            The hash of this entity.
        """
        return hash((type(self), self.get_id()))

    @property
    def entity_type(self) -> str:
        """
        Get the type of this entity for database operations.

        Returns:
            The type name as a string.
        """
        return self._get_entity_type()

    @classmethod
    def _get_entity_type(cls) -> str:
        """
        Get the entity type for database operations.

        Returns:
            The type name as a string.
        """
        # Default implementation based on class name
        # Can be overridden by subclasses if needed
        return cls.__name__.lower().replace("entity", "")

    @classmethod
    def get_entity_class(cls, entity_type: str) -> Type["DatabaseEntity"]:
        """
        Look up a registered entity class by its entity type.

        Args:
            entity_type: The entity type (e.g. "course").

        Returns:
            The entity class registered for that type.

        Raises:
            ValueError: If no entity class is registered for `entity_type`.
        """
        try:
            return DatabaseEntity._registry[entity_type]
        except KeyError as exc:
            raise ValueError(f"No entity class is registered for entity type '{entity_type}'.") from exc

    def get_id(self) -> Optional[int]:
        """
        Get the unique ID for this entity.

        Returns:
            The unique ID for this entity, or None if it was never saved.
        """
        return self.entity_info.id

    def is_persisted(self) -> bool:
        """
        Check whether this entity corresponds to a row in the database.

        Returns:
            True if this entity has an id and hasn't been deleted, False otherwise.
        """
        return self.entity_info.is_persisted() and not self._deleted

    def is_deleted(self) -> bool:
        """
        Check whether this entity's row was deleted.

        Returns:
            True if `delete` was called on this entity, False otherwise.
        """
        return self._deleted

    def to_dict(self) -> Dict:
        """
        Get the column values of this entity.

        Returns:
            A dictionary of column names to values.
        """
        return self.entity_info.to_dict()

    def update_fields(self, **updates: Any):
        """
        Change attributes of this entity in memory. Call `save` to write them.

        Args:
            **updates: Column names mapped to their new values.
        """
        self.entity_info.update_fields(updates)

    def _check_not_deleted(self, action: str):
        if self._deleted:
            raise InvalidStateError(
                f"Cannot {action} {self.entity_type} with id '{self.get_id()}'; it has been deleted."
            )

    def save(self):
        """
        Save the current state of this entity to the database.

        Inserts the entity if it has no id yet, otherwise updates its row.

        Raises:
            (exceptions.InvalidStateError): If this entity has been deleted.
        """
        self._check_not_deleted("save")
        self.backend.save(self.entity_info)
        self._post_save_hook()

    def insert(self):
        """
        Insert this entity into the database and assign its id.

        Raises:
            (exceptions.InvalidStateError): If this entity already has an id.
        """
        self._check_not_deleted("insert")
        self.backend.insert(self.entity_info)
        self._post_save_hook()

    def update(self):
        """
        Write this entity's attributes to its row.

        Raises:
            (exceptions.InvalidStateError): If this entity has no id.
        """
        self._check_not_deleted("update")
        self.backend.update(self.entity_info)
        self._post_save_hook()

    def _post_save_hook(self):
        """
        Hook called after saving the entity to the database.
        Subclasses can override to add additional behavior.
        """

    def reload_data(self):
        """
        Reload the latest data for this entity from the database.

        Memoized relationships are dropped since the foreign keys may have changed.

        Raises:
            (exceptions.InvalidStateError): If this entity was never saved or was deleted.
            (exceptions.EntityNotFoundError): If an entry for this entity was not found in the database.
        """
        if not self.is_persisted():
            raise InvalidStateError(f"Cannot reload a {self.entity_type} that isn't stored in the database.")

        entity_id = self.get_id()
        updated_entity_info = self.backend.retrieve(entity_id, self.entity_type)
        if updated_entity_info is None:
            error_class = get_not_found_error_class(self.model_class)
            raise error_class(f"{self.entity_type.capitalize()} with ID {entity_id} not found in the database.")

        with self._cache_lock:
            self.entity_info = updated_entity_info
            self._relation_cache.clear()

    def delete(self):
        """
        Delete this entity's row from the database.

        The entity keeps its id but can no longer be saved. Rows of other tables
        that reference it are left untouched.

        Raises:
            (exceptions.InvalidStateError): If this entity was never saved or was already deleted.
            (exceptions.EntityNotFoundError): If the row no longer exists.
        """
        self._check_not_deleted("delete")
        if not self.is_persisted():
            raise InvalidStateError(f"Cannot delete a {self.entity_type} that was never saved.")

        entity_id = self.get_id()
        LOG.debug(f"Deleting {self.entity_type} with ID '{entity_id}' from the database...")
        self.backend.delete(entity_id, self.entity_type)
        self._deleted = True
        LOG.info(f"{self.entity_type.capitalize()} with ID '{entity_id}' has been successfully deleted.")

    @classmethod
    def build(cls: Type[E], backend: DatabaseBackend, **fields: Any) -> E:
        """
        Construct a transient entity. Nothing is written to the database.

        Args:
            backend: The backend the entity will be saved through.
            **fields: Column values for the new entity.

        Returns:
            A new, unsaved entity.
        """
        return cls(cls.model_class(**fields), backend)

    @classmethod
    def create(cls: Type[E], backend: DatabaseBackend, **fields: Any) -> E:
        """
        Construct an entity and insert it right away.

        Args:
            backend: The backend to save the entity through.
            **fields: Column values for the new entity.

        Returns:
            The new, persisted entity.
        """
        entity = cls.build(backend, **fields)
        entity.save()
        return entity

    @classmethod
    def load(cls: Type[E], entity_identifier: int, backend: DatabaseBackend) -> E:
        """
        Load an entity from the database by its ID.

        Args:
            entity_identifier: The ID of the entity to load.
            backend: A `DatabaseBackend` instance.

        Returns:
            An instance of the entity.

        Raises:
            (exceptions.EntityNotFoundError): If an entry for the entity was not found in the database.
        """
        entity_info = backend.retrieve(entity_identifier, cls._get_entity_type())
        if entity_info is None:
            error_class = get_not_found_error_class(cls.model_class)
            raise error_class(f"{cls._get_entity_type().capitalize()} with ID {entity_identifier} not found in the database.")

        return cls(entity_info, backend)

    @classmethod
    def find_by(cls: Type[E], attribute: str, value: Any, backend: DatabaseBackend) -> Optional[E]:
        """
        Find the first entity whose `attribute` equals `value`.

        Args:
            attribute: The column to match on.
            value: The value to match.
            backend: A `DatabaseBackend` instance.

        Returns:
            The entity, or None if no row matches.
        """
        entity_info = backend.find_by(cls._get_entity_type(), attribute, value)
        if entity_info is None:
            return None
        return cls(entity_info, backend)

    @classmethod
    def find_all_by(cls: Type[E], attribute: str, value: Any, backend: DatabaseBackend) -> List[E]:
        """
        Find every entity whose `attribute` equals `value`.

        Args:
            attribute: The column to match on.
            value: The value to match.
            backend: A `DatabaseBackend` instance.

        Returns:
            A list of entities, possibly empty.
        """
        return [cls(entity_info, backend) for entity_info in backend.find_all_by(cls._get_entity_type(), attribute, value)]

    @classmethod
    def all(cls: Type[E], backend: DatabaseBackend) -> List[E]:
        """
        Get every entity of this type.

        Args:
            backend: A `DatabaseBackend` instance.

        Returns:
            A list of entities.
        """
        return [cls(entity_info, backend) for entity_info in backend.retrieve_all(cls._get_entity_type())]

    @classmethod
    def create_table(cls, backend: DatabaseBackend):
        """
        Create the table for this entity type if it doesn't exist.

        Args:
            backend: A `DatabaseBackend` instance.
        """
        backend.create_table(cls._get_entity_type())

    @classmethod
    def drop_table(cls, backend: DatabaseBackend):
        """
        Drop the table for this entity type if it exists.

        Args:
            backend: A `DatabaseBackend` instance.
        """
        backend.drop_table(cls._get_entity_type())
