"""
Tests for the `db_entity.py` module.
"""

from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from schoolbook.backends.database_backend import DatabaseBackend
from schoolbook.db_scripts.data_models import StudentModel
from schoolbook.db_scripts.entities import CourseEntity, DatabaseEntity, StudentEntity
from schoolbook.exceptions import InvalidStateError, StudentNotFoundError, UnknownAttributeError


def assign_id(model: StudentModel):
    """Stand in for an insert by giving the model an id."""
    if model.id is None:
        model.id = 1


class TestDatabaseEntity:
    """Tests for the `DatabaseEntity` class, exercised through `StudentEntity`."""

    @pytest.fixture
    def mock_backend(self, mocker: MockerFixture) -> MagicMock:
        """
        Create a mocked backend whose `save` behaves like an insert for transient models.

        Args:
            mocker: PyTest mocker fixture.

        Returns:
            The mocked backend.
        """
        backend = mocker.MagicMock(spec=DatabaseBackend)
        backend.save.side_effect = assign_id
        return backend

    def test_registry(self):
        """Test that every entity class is registered under its entity type."""
        assert DatabaseEntity.get_entity_class("student") is StudentEntity
        assert DatabaseEntity.get_entity_class("course") is CourseEntity
        with pytest.raises(ValueError, match="No entity class is registered"):
            DatabaseEntity.get_entity_class("janitor")

    def test_build_is_transient(self, mock_backend: MagicMock):
        """
        Test that building an entity doesn't write anything.

        Args:
            mock_backend: A mocked backend.
        """
        student = StudentEntity.build(mock_backend, name="Ada", grade=9)

        assert student.entity_type == "student"
        assert student.get_id() is None
        assert not student.is_persisted()
        mock_backend.save.assert_not_called()

    def test_create_saves(self, mock_backend: MagicMock):
        """
        Test that creating an entity saves it right away.

        Args:
            mock_backend: A mocked backend.
        """
        student = StudentEntity.create(mock_backend, name="Ada", grade=9)

        mock_backend.save.assert_called_once_with(student.entity_info)
        assert student.get_id() == 1
        assert student.is_persisted()

    def test_insert_and_update_delegate(self, mock_backend: MagicMock):
        """
        Test that explicit inserts and updates go to the matching backend method.

        Args:
            mock_backend: A mocked backend.
        """
        student = StudentEntity.build(mock_backend, name="Ada")
        student.insert()
        student.update()

        mock_backend.insert.assert_called_once_with(student.entity_info)
        mock_backend.update.assert_called_once_with(student.entity_info)

    def test_update_fields(self, mock_backend: MagicMock):
        """
        Test that attributes change in memory only until the entity is saved.

        Args:
            mock_backend: A mocked backend.
        """
        student = StudentEntity.build(mock_backend, name="Ada", grade=9)
        student.update_fields(grade=10)

        assert student.get_grade() == 10
        mock_backend.save.assert_not_called()
        with pytest.raises(UnknownAttributeError):
            student.update_fields(age=14)

    def test_load(self, mock_backend: MagicMock):
        """
        Test that loading wraps the model the backend returns.

        Args:
            mock_backend: A mocked backend.
        """
        mock_backend.retrieve.return_value = StudentModel(id=3, name="Ada", grade=9)

        student = StudentEntity.load(3, mock_backend)

        assert isinstance(student, StudentEntity)
        assert student.get_name() == "Ada"
        mock_backend.retrieve.assert_called_once_with(3, "student")

    def test_load_not_found(self, mock_backend: MagicMock):
        """
        Test that loading an id with no row raises the entity's not-found error.

        Args:
            mock_backend: A mocked backend.
        """
        mock_backend.retrieve.return_value = None
        with pytest.raises(StudentNotFoundError, match="Student with ID 3 not found"):
            StudentEntity.load(3, mock_backend)

    def test_finders(self, mock_backend: MagicMock):
        """
        Test that finders wrap the models the backend returns, and return None or [] when nothing matches.

        Args:
            mock_backend: A mocked backend.
        """
        ada = StudentModel(id=3, name="Ada", grade=9)
        mock_backend.find_by.return_value = ada
        mock_backend.find_all_by.return_value = [ada]
        mock_backend.retrieve_all.return_value = [ada]

        assert StudentEntity.find_by("name", "Ada", mock_backend).entity_info is ada
        assert [s.entity_info for s in StudentEntity.find_all_by("grade", 9, mock_backend)] == [ada]
        assert [s.entity_info for s in StudentEntity.all(mock_backend)] == [ada]
        mock_backend.find_by.assert_called_once_with("student", "name", "Ada")

        mock_backend.find_by.return_value = None
        mock_backend.find_all_by.return_value = []
        assert StudentEntity.find_by("name", "Nobody", mock_backend) is None
        assert StudentEntity.find_all_by("grade", 12, mock_backend) == []

    def test_reload_data(self, mock_backend: MagicMock):
        """
        Test that reloading replaces the in-memory data with the stored row.

        Args:
            mock_backend: A mocked backend.
        """
        student = StudentEntity(StudentModel(id=3, name="Ada", grade=9), mock_backend)
        mock_backend.retrieve.return_value = StudentModel(id=3, name="Ada", grade=10)

        student.reload_data()

        assert student.get_grade() == 10

    def test_reload_data_errors(self, mock_backend: MagicMock):
        """
        Test that reloading needs a stored row to reload from.

        Args:
            mock_backend: A mocked backend.
        """
        with pytest.raises(InvalidStateError):
            StudentEntity.build(mock_backend, name="Ada").reload_data()

        mock_backend.retrieve.return_value = None
        with pytest.raises(StudentNotFoundError):
            StudentEntity(StudentModel(id=3, name="Ada"), mock_backend).reload_data()

    def test_delete(self, mock_backend: MagicMock):
        """
        Test that a deleted entity keeps its id but can't be written again.

        Args:
            mock_backend: A mocked backend.
        """
        student = StudentEntity(StudentModel(id=3, name="Ada", grade=9), mock_backend)

        student.delete()

        mock_backend.delete.assert_called_once_with(3, "student")
        assert student.is_deleted()
        assert not student.is_persisted()
        assert student.get_id() == 3
        with pytest.raises(InvalidStateError, match="has been deleted"):
            student.save()
        with pytest.raises(InvalidStateError, match="has been deleted"):
            student.delete()

    def test_delete_transient(self, mock_backend: MagicMock):
        """
        Test that an entity that was never saved can't be deleted.

        Args:
            mock_backend: A mocked backend.
        """
        with pytest.raises(InvalidStateError, match="never saved"):
            StudentEntity.build(mock_backend, name="Ada").delete()
        mock_backend.delete.assert_not_called()

    def test_equality(self, mock_backend: MagicMock):
        """
        Test that entities compare by class and data, and hash on class and id.

        Args:
            mock_backend: A mocked backend.
        """
        first = StudentEntity(StudentModel(id=3, name="Ada", grade=9), mock_backend)
        second = StudentEntity(StudentModel(id=3, name="Ada", grade=9), mock_backend)
        course = CourseEntity.build(mock_backend, id=3, name="Ada")

        assert first == second
        assert first != course
        assert hash(first) == hash(second)
        assert {first, second, course} == {first, course}

    def test_repr_and_str(self, mock_backend: MagicMock):
        """
        Test the string representations of an entity.

        Args:
            mock_backend: A mocked backend.
        """
        student = StudentEntity(StudentModel(id=3, name="Ada", grade=9), mock_backend)

        assert repr(student) == "StudentEntity(id=3, name='Ada', grade=9)"
        assert str(student) == "Student 'Ada' (ID: 3, Grade: 9)"

    def test_table_management(self, mock_backend: MagicMock):
        """
        Test that table management is sent to the backend under the entity type.

        Args:
            mock_backend: A mocked backend.
        """
        StudentEntity.create_table(mock_backend)
        StudentEntity.drop_table(mock_backend)

        mock_backend.create_table.assert_called_once_with("student")
        mock_backend.drop_table.assert_called_once_with("student")
