##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Utility functions for backends in the Schoolbook application.

These utilities convert in-memory data models into bind parameters for writes,
rebuild data models from the rows the database returns, and pick the error class
to raise when an entity lookup by id fails.
"""

import logging
from typing import Any, List, Sequence, Type, TypeVar

from schoolbook.db_scripts.data_models import CourseModel, DepartmentModel, RegistrationModel, StudentModel
from schoolbook.exceptions import (
    CourseNotFoundError,
    DepartmentNotFoundError,
    EntityNotFoundError,
    RegistrationNotFoundError,
    SchemaError,
    StudentNotFoundError,
)


T = TypeVar("T")

LOG = logging.getLogger(__name__)


def get_not_found_error_class(model_class: Type[T]) -> Type[EntityNotFoundError]:
    """
    Get the appropriate not found error class based on the model type.

    Args:
        model_class: A [`BaseDataModel`][db_scripts.data_models.BaseDataModel] subclass.

    Returns:
        The error class to use.
    """
    error_map = {
        CourseModel: CourseNotFoundError,
        DepartmentModel: DepartmentNotFoundError,
        RegistrationModel: RegistrationNotFoundError,
        StudentModel: StudentNotFoundError,
    }
    return error_map.get(model_class, EntityNotFoundError)


def serialize_entity(entity: T) -> List[Any]:
    """
    Given a [`BaseDataModel`][db_scripts.data_models.BaseDataModel] instance,
    get the values bound to an insert or update statement.

    Args:
        entity: A [`BaseDataModel`][db_scripts.data_models.BaseDataModel] instance.

    Returns:
        The non-id attribute values in column order.
    """
    return [getattr(entity, name) for name in entity.get_attribute_names()]


def deserialize_entity(row: Sequence[Any], model_class: Type[T]) -> T:
    """
    Given a row that was retrieved, convert it into a data_class instance.

    Values are mapped positionally onto the model's columns, `id` included.

    Args:
        row: A tuple or `sqlite3.Row` whose values are in the table's column order.
        model_class: A [`BaseDataModel`][db_scripts.data_models.BaseDataModel] subclass.

    Returns:
        A [`BaseDataModel`][db_scripts.data_models.BaseDataModel] instance.

    Raises:
        (exceptions.SchemaError): If the row doesn't have exactly one value per column.
    """
    columns = model_class.get_column_names()
    values = tuple(row)
    if len(values) != len(columns):
        raise SchemaError(
            f"Row with {len(values)} values can't be decoded into {model_class.__name__} "
            f"which has {len(columns)} columns {columns}."
        )
    return model_class.from_dict(dict(zip(columns, values)))
