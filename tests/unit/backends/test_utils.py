"""
Tests for the `backends/utils.py` module.
"""

import sqlite3

import pytest

from schoolbook.backends.utils import deserialize_entity, get_not_found_error_class, serialize_entity
from schoolbook.db_scripts.data_models import CourseModel, DepartmentModel, RegistrationModel, StudentModel
from schoolbook.exceptions import (
    CourseNotFoundError,
    DepartmentNotFoundError,
    EntityNotFoundError,
    RegistrationNotFoundError,
    SchemaError,
    StudentNotFoundError,
)


@pytest.mark.parametrize(
    "model_class, error_class",
    [
        (StudentModel, StudentNotFoundError),
        (CourseModel, CourseNotFoundError),
        (DepartmentModel, DepartmentNotFoundError),
        (RegistrationModel, RegistrationNotFoundError),
        (object, EntityNotFoundError),
    ],
)
def test_get_not_found_error_class(model_class: type, error_class: type):
    """
    Test that every model maps to its own not-found error and anything else to the generic one.

    Args:
        model_class: The model class to look up.
        error_class: The error class that should be returned.
    """
    assert get_not_found_error_class(model_class) is error_class


def test_serialize_entity_skips_id():
    """Test that the values bound to writes are the non-id columns in declaration order."""
    assert serialize_entity(StudentModel(id=5, name="Ada", grade=9)) == ["Ada", 9]
    assert serialize_entity(CourseModel(name="Algebra")) == ["Algebra", None]


def test_deserialize_entity_from_tuple():
    """Test that row values are assigned to columns by position."""
    course = deserialize_entity((4, "Algebra", 2), CourseModel)
    assert course == CourseModel(id=4, name="Algebra", department_id=2)


def test_deserialize_entity_from_sqlite_row():
    """Test that rows produced by `sqlite3.Row` decode the same way as tuples."""
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    row = conn.execute("SELECT 1 AS id, 'Ada' AS name, 9 AS grade").fetchone()
    conn.close()

    assert deserialize_entity(row, StudentModel) == StudentModel(id=1, name="Ada", grade=9)


def test_deserialize_entity_wrong_width():
    """Test that a row that doesn't have one value per column is rejected."""
    with pytest.raises(SchemaError, match="can't be decoded into StudentModel"):
        deserialize_entity((1, "Ada"), StudentModel)
