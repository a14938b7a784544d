##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Module of all Schoolbook-specific exception types.

Errors raised by the SQLite driver itself (`sqlite3.Error` and its subclasses)
are never wrapped; they reach the caller unmodified.
"""

# Pylint complains that these exceptions are no different from Exception
# but we don't care, we just need new names for exceptions here
# pylint: disable=W0235

__all__ = (
    "SchemaError",
    "InvalidStateError",
    "UnknownAttributeError",
    "UnsupportedDataModelError",
    "EntityNotFoundError",
    "StudentNotFoundError",
    "CourseNotFoundError",
    "DepartmentNotFoundError",
    "RegistrationNotFoundError",
)


class SchemaError(Exception):
    """
    Exception to signal that a model's declared columns can't be mapped onto
    a table, or that a row doesn't match the columns it is decoded against.
    """


class InvalidStateError(Exception):
    """
    Exception to signal that an operation was attempted on an entity whose
    lifecycle state doesn't allow it (e.g. updating an entity that was never
    inserted).
    """


class UnknownAttributeError(Exception):
    """
    Exception to signal that a column name was given that the model doesn't declare.
    """


class UnsupportedDataModelError(Exception):
    """
    Exception to signal that the provided data model is not supported by a backend.
    """


class EntityNotFoundError(Exception):
    """
    Exception to signal that the entity requested by id does not exist in the database.
    """


class StudentNotFoundError(EntityNotFoundError):
    """
    Exception to signal that the student you were looking for cannot be found.
    """


class CourseNotFoundError(EntityNotFoundError):
    """
    Exception to signal that the course you were looking for cannot be found.
    """


class DepartmentNotFoundError(EntityNotFoundError):
    """
    Exception to signal that the department you were looking for cannot be found.
    """


class RegistrationNotFoundError(EntityNotFoundError):
    """
    Exception to signal that the registration you were looking for cannot be found.
    """
