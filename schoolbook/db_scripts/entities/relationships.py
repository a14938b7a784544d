##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Declarative relationships between database entities.

Each relationship is a descriptor placed on a `DatabaseEntity` subclass. Reading the
attribute from an instance resolves the relationship against the instance's backend;
reading it from the class returns the descriptor itself, whose `add` method performs
the write side of the relationship.

Relationships refer to their target by entity type (e.g. "department") so that entity
classes can point at each other without import cycles.

Example:
    ```python
    class CourseEntity(DatabaseEntity[CourseModel]):
        department = BelongsTo("department", foreign_key="department_id")
        students = HasManyThrough("student", through="registration", owner_key="course_id", target_key="student_id")
    ```
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Type

from schoolbook.db_scripts.entities.db_entity import DatabaseEntity
from schoolbook.exceptions import InvalidStateError, SchemaError


LOG = logging.getLogger(__name__)


class Relationship(ABC):
    """
    Base descriptor for a relationship from an owning entity to entities of `target_type`.

    Attributes:
        target_type (str): The entity type on the other side of the relationship.
        name (str): The attribute name the descriptor was assigned to.
        owner_class (Type[DatabaseEntity]): The entity class the descriptor was assigned on.

    Methods:
        get_target_class: Look up the entity class of the target type.
        resolve: Read the relationship for one owning entity.
    """

    def __init__(self, target_type: str):
        """
        Args:
            target_type: The entity type on the other side of the relationship.
        """
        self.target_type: str = target_type
        self.name: str = None
        self.owner_class: Type[DatabaseEntity] = None

    def __set_name__(self, owner: Type[DatabaseEntity], name: str):
        self.name = name
        self.owner_class = owner

    def __get__(self, instance: Optional[DatabaseEntity], owner: Type[DatabaseEntity]) -> Any:
        if instance is None:
            return self
        return self.resolve(instance)

    def __set__(self, instance: DatabaseEntity, value: Any):
        raise AttributeError(f"'{self.name}' can't be assigned directly; use the add method for this relationship.")

    def get_target_class(self) -> Type[DatabaseEntity]:
        """
        Look up the entity class of the target type.

        Returns:
            The registered entity class for `target_type`.
        """
        return DatabaseEntity.get_entity_class(self.target_type)

    def _check_owner(self, owner: Any):
        if not isinstance(owner, self.owner_class):
            raise TypeError(
                f"'{self.name}' belongs to {self.owner_class.__name__}, got an owner of type {type(owner).__name__}."
            )

    def _check_target(self, target: Any):
        target_class = self.get_target_class()
        if not isinstance(target, target_class):
            raise TypeError(f"'{self.name}' expects a {target_class.__name__}, got {type(target).__name__}.")

    @abstractmethod
    def resolve(self, instance: DatabaseEntity) -> Any:
        """
        Read the relationship for one owning entity.

        Args:
            instance: The owning entity.
        """
        raise NotImplementedError("Subclasses of `Relationship` must implement a `resolve` method.")


class BelongsTo(Relationship):
    """
    The owning entity holds a foreign key referencing one target entity.

    The target is memoized on the owning entity the first time it's read. Assigning a
    target sets the foreign key and the memoized target together, under the owner's lock.
    A memoized target is only returned while its id still equals the foreign key, so
    changing the foreign key by other means can't serve a stale target.

    Attributes:
        foreign_key (str): The column of the owning entity holding the target's id.
    """

    def __init__(self, target_type: str, foreign_key: str):
        """
        Args:
            target_type: The entity type referenced by the foreign key.
            foreign_key: The column of the owning entity holding the target's id.
        """
        super().__init__(target_type)
        self.foreign_key: str = foreign_key

    def resolve(self, instance: DatabaseEntity) -> Optional[DatabaseEntity]:
        """
        Get the target referenced by the owning entity's foreign key.

        Args:
            instance: The owning entity.

        Returns:
            The target entity, or None if the foreign key is unset or no row has that id.
        """
        with instance._cache_lock:  # pylint: disable=protected-access
            foreign_id = getattr(instance.entity_info, self.foreign_key)
            if foreign_id is None:
                return None
            cached = instance._relation_cache.get(self.name)  # pylint: disable=protected-access
            if cached is not None and cached.get_id() == foreign_id:
                return cached

        target_class = self.get_target_class()
        LOG.debug(f"Resolving {self.name} of {instance.entity_type} '{instance.get_id()}' (id {foreign_id}).")
        target_info = instance.backend.find_by(target_class._get_entity_type(), "id", foreign_id)  # pylint: disable=protected-access
        if target_info is None:
            return None

        target = target_class(target_info, instance.backend)
        with instance._cache_lock:  # pylint: disable=protected-access
            instance._relation_cache[self.name] = target  # pylint: disable=protected-access
        return target

    def __set__(self, instance: DatabaseEntity, target: Optional[DatabaseEntity]):
        """
        Point the owning entity at `target`, or at nothing if `target` is None.

        Only the in-memory entity changes; call `save` on it to write the foreign key.

        Args:
            instance: The owning entity.
            target: The entity to reference, or None.

        Raises:
            TypeError: If `target` isn't an entity of the target type.
            (exceptions.InvalidStateError): If `target` hasn't been saved and so has no id.
        """
        if target is not None:
            self._check_target(target)
            if not target.is_persisted():
                raise InvalidStateError(
                    f"Cannot assign {self.name} of {instance.entity_type}: the {target.entity_type} isn't saved."
                )

        with instance._cache_lock:  # pylint: disable=protected-access
            if target is None:
                setattr(instance.entity_info, self.foreign_key, None)
                instance._relation_cache.pop(self.name, None)  # pylint: disable=protected-access
            else:
                setattr(instance.entity_info, self.foreign_key, target.get_id())
                instance._relation_cache[self.name] = target  # pylint: disable=protected-access


class HasMany(Relationship):
    """
    Every target entity whose foreign key holds the owning entity's id.

    Attributes:
        foreign_key (str): The column of the target entities holding the owner's id.
    """

    def __init__(self, target_type: str, foreign_key: str):
        """
        Args:
            target_type: The entity type holding the foreign key.
            foreign_key: The column of the target entities holding the owner's id.
        """
        super().__init__(target_type)
        self.foreign_key: str = foreign_key

    def resolve(self, instance: DatabaseEntity) -> List[DatabaseEntity]:
        """
        Query the targets currently pointing at the owning entity.

        Args:
            instance: The owning entity.

        Returns:
            A list of target entities. Empty if the owner isn't saved.
        """
        if not instance.is_persisted():
            return []

        target_class = self.get_target_class()
        target_infos = instance.backend.find_all_by(self.target_type, self.foreign_key, instance.get_id())
        return [target_class(target_info, instance.backend) for target_info in target_infos]

    def add(self, owner: DatabaseEntity, child: DatabaseEntity) -> DatabaseEntity:
        """
        Point `child` at `owner` and save both.

        An unsaved owner is inserted first so its id exists when the child's foreign
        key is set. The child is saved once, with the foreign key already in place.
        If that save fails the child's foreign key is put back to its previous value.

        Args:
            owner: The owning entity.
            child: The entity to link to `owner`.

        Returns:
            The child entity.

        Raises:
            TypeError: If `owner` or `child` isn't an entity of the expected type.
            (exceptions.InvalidStateError): If `owner` or `child` has been deleted.
        """
        self._check_owner(owner)
        self._check_target(child)
        for participant in (owner, child):
            if participant.is_deleted():
                raise InvalidStateError(
                    f"Cannot link {child.entity_type} to {owner.entity_type}: "
                    f"the {participant.entity_type} with id '{participant.get_id()}' has been deleted."
                )

        owner_was_persisted = owner.is_persisted()
        if not owner_was_persisted:
            owner.save()

        previous_id = getattr(child.entity_info, self.foreign_key)
        child.update_fields(**{self.foreign_key: owner.get_id()})
        try:
            child.save()
        except Exception:
            child.update_fields(**{self.foreign_key: previous_id})
            raise

        if owner_was_persisted:
            owner.save()

        LOG.debug(f"Linked {child.entity_type} '{child.get_id()}' to {owner.entity_type} '{owner.get_id()}'.")
        return child


class HasManyThrough(Relationship):
    """
    Every target entity linked to the owning entity by rows of a join table.

    Attributes:
        through (str): The entity type of the join table.
        owner_key (str): The join column holding the owner's id.
        target_key (str): The join column holding the target's id.
    """

    def __init__(self, target_type: str, through: str, owner_key: str, target_key: str):
        """
        Args:
            target_type: The entity type on the far side of the join table.
            through: The entity type of the join table.
            owner_key: The join column holding the owner's id.
            target_key: The join column holding the target's id.
        """
        super().__init__(target_type)
        self.through: str = through
        self.owner_key: str = owner_key
        self.target_key: str = target_key

    def get_through_class(self) -> Type[DatabaseEntity]:
        """
        Look up the entity class of the join table, checking that it has both join columns.

        Returns:
            The registered entity class for `through`.

        Raises:
            (exceptions.SchemaError): If the join model lacks `owner_key` or `target_key`.
        """
        through_class = DatabaseEntity.get_entity_class(self.through)
        columns = through_class.model_class.get_column_names()
        for key in (self.owner_key, self.target_key):
            if key not in columns:
                raise SchemaError(f"Join table '{through_class.model_class.table_name}' has no column named '{key}'.")
        return through_class

    def resolve(self, instance: DatabaseEntity) -> List[DatabaseEntity]:
        """
        Query the targets linked to the owning entity. A target linked by several join
        rows appears once per row.

        Args:
            instance: The owning entity.

        Returns:
            A list of target entities. Empty if the owner isn't saved.
        """
        if not instance.is_persisted():
            return []

        self.get_through_class()
        target_class = self.get_target_class()
        target_infos = instance.backend.find_all_through(
            self.target_type,
            self.through,
            self.target_key,
            self.owner_key,
            instance.entity_type,
            instance.get_id(),
        )
        return [target_class(target_info, instance.backend) for target_info in target_infos]

    def add(self, owner: DatabaseEntity, target: DatabaseEntity) -> DatabaseEntity:
        """
        Insert a join row linking `owner` and `target`.

        Args:
            owner: The owning entity.
            target: The entity to link to `owner`.

        Returns:
            The new join entity.

        Raises:
            TypeError: If `owner` or `target` isn't an entity of the expected type.
            (exceptions.InvalidStateError): If either entity hasn't been saved.
        """
        self._check_owner(owner)
        self._check_target(target)
        for participant in (owner, target):
            if not participant.is_persisted():
                raise InvalidStateError(
                    f"Cannot link {owner.entity_type} and {target.entity_type}: "
                    f"the {participant.entity_type} isn't saved."
                )

        through_class = self.get_through_class()
        link = through_class.create(owner.backend, **{self.owner_key: owner.get_id(), self.target_key: target.get_id()})
        LOG.debug(
            f"Linked {owner.entity_type} '{owner.get_id()}' to {target.entity_type} '{target.get_id()}' "
            f"with {link.entity_type} '{link.get_id()}'."
        )
        return link
