##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Module for managing entities with names.

This module provides a mixin class, `NameMixin`, for entities whose data model has
a `name` column.
"""

from typing import Optional, Type, TypeVar


E = TypeVar("E")


class NameMixin:
    """
    Mixin for entities that have a name.

    It assumes that the class using this mixin is a `DatabaseEntity` whose
    `entity_info` object contains a `name` attribute.

    Methods:
        get_name:
            Retrieve the name associated with the entity.

        set_name:
            Change the name associated with the entity (in memory).

        find_by_name:
            (classmethod) Find the first entity with a given name.
    """

    def get_name(self) -> str:
        """
        Get the name of this entity.

        Returns:
            The name of this entity.
        """
        return self.entity_info.name

    def set_name(self, name: str):
        """
        Set the name of this entity. Call `save` to write it.

        Args:
            name: The new name.
        """
        self.entity_info.name = name

    @classmethod
    def find_by_name(cls: Type[E], name: str, backend) -> Optional[E]:
        """
        Find the first entity with this name.

        Args:
            name: The name to look for.
            backend (backends.database_backend.DatabaseBackend): A `DatabaseBackend` instance.

        Returns:
            The entity, or None if none has this name.
        """
        return cls.find_by("name", name, backend)
