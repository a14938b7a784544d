##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
This module houses dataclasses that define the format of the data
that's stored in Schoolbook's database.

The order in which a dataclass declares its fields is the column order of its
table. Table creation, insert/update parameter binding, and row decoding all
read that same declaration, so they can't drift apart.
"""

import logging
from abc import ABC
from dataclasses import Field, asdict, dataclass
from dataclasses import fields as dataclass_fields
from typing import ClassVar, Dict, List, Optional, Tuple, Type, TypeVar

from schoolbook.exceptions import SchemaError, UnknownAttributeError


LOG = logging.getLogger(__name__)
T = TypeVar("T", bound="BaseDataModel")


@dataclass
class BaseDataModel(ABC):
    """
    A base class for dataclasses that are stored as rows of a table.

    Subclasses set `table_name` and declare their columns, in order, as dataclass
    fields. The `id` field inherited from this class is always the first column.

    Attributes:
        id: The identity assigned by the database. None until the model is inserted.
        table_name: The name of the table that stores this model.

    Methods:
        to_dict:
            Convert the dataclass instance to a dictionary.

        from_dict (classmethod):
            Create an instance of the dataclass from a dictionary.

        get_class_fields (classmethod):
            Retrieve the fields associated with the dataclass class itself.

        get_column_names (classmethod):
            Retrieve every column name, `id` included, in declaration order.

        get_attribute_names (classmethod):
            Retrieve the non-id column names in declaration order.

        is_persisted:
            Whether this model has been assigned an id by the database.

        update_fields:
            Update the fields of the dataclass based on a given dictionary of updates.
    """

    id: Optional[int] = None  # pylint: disable=invalid-name

    table_name: ClassVar[str] = None

    def to_dict(self) -> Dict:
        """
        Convert the dataclass to a dictionary.

        Returns:
            The dataclass as a dictionary.
        """
        return asdict(self)

    @classmethod
    def from_dict(cls: Type[T], data: Dict) -> T:
        """
        Create an instance of the dataclass from a dictionary.

        Args:
            data: A dictionary to turn into an instance of this dataclass.

        Returns:
            An instance of the dataclass that called this.
        """
        return cls(**data)

    @classmethod
    def get_class_fields(cls) -> Tuple[Field]:
        """
        Get the fields associated with this object, which are the table's columns in order.

        Returns:
            A tuple of dataclass.Field objects representing the fields in this data class.

        Raises:
            (exceptions.SchemaError): If `id` is not the first declared field.
        """
        class_fields = dataclass_fields(cls)
        if not class_fields or class_fields[0].name != "id":
            raise SchemaError(f"{cls.__name__} must declare 'id' as its first column.")
        return class_fields

    @classmethod
    def get_column_names(cls) -> List[str]:
        """
        Get every column name for this model, `id` first.

        Returns:
            A list of column names in declaration order.
        """
        return [class_field.name for class_field in cls.get_class_fields()]

    @classmethod
    def get_attribute_names(cls) -> List[str]:
        """
        Get the column names written by inserts and updates.

        Returns:
            A list of every column name except `id`, in declaration order.
        """
        return cls.get_column_names()[1:]

    def is_persisted(self) -> bool:
        """
        Check whether this model corresponds to a row in the database.

        Returns:
            True if an id has been assigned, False otherwise.
        """
        return self.id is not None

    @property
    def fields_allowed_to_be_updated(self) -> List[str]:
        """
        The fields that `update_fields` may change. Every non-id column by default.

        Returns:
            A list of fields that are allowed to be updated in this class.
        """
        return self.get_attribute_names()

    def update_fields(self, updates: Dict):
        """
        Given a dictionary of updates to be made to this data class, loop through the updates
        applying them when valid.

        Args:
            updates: A dictionary of updates to be made to this data class.

        Raises:
            (exceptions.UnknownAttributeError): If a key in `updates` isn't a column of this model.
        """
        for field_name, new_value in updates.items():
            if field_name == "id":
                LOG.warning(f"The id of a {self.__class__.__name__} is assigned by the database. Ignoring the change.")
                continue

            if field_name not in self.get_column_names():
                raise UnknownAttributeError(f"{self.__class__.__name__} has no column named '{field_name}'.")

            if field_name in self.fields_allowed_to_be_updated:
                setattr(self, field_name, new_value)
            else:
                LOG.warning(f"Field '{field_name}' is not allowed to be updated. Ignoring the change.")


@dataclass
class StudentModel(BaseDataModel):
    """
    A dataclass to store all of the information for a student.

    Attributes:
        id (Optional[int]): The unique ID for the student.
        name (str): The name of the student.
        grade (int): The grade level the student is in.
    """

    name: Optional[str] = None
    grade: Optional[int] = None

    table_name: ClassVar[str] = "students"


@dataclass
class DepartmentModel(BaseDataModel):
    """
    A dataclass to store all of the information for a department.

    Attributes:
        id (Optional[int]): The unique ID for the department.
        name (str): The name of the department.
    """

    name: Optional[str] = None

    table_name: ClassVar[str] = "departments"


@dataclass
class CourseModel(BaseDataModel):
    """
    A dataclass to store all of the information for a course.

    Attributes:
        id (Optional[int]): The unique ID for the course.
        name (str): The name of the course.
        department_id (Optional[int]): The ID of the department offering this course.
            Corresponds with a `DepartmentModel` entry; None while unassigned.
    """

    name: Optional[str] = None
    department_id: Optional[int] = None

    table_name: ClassVar[str] = "courses"


@dataclass
class RegistrationModel(BaseDataModel):
    """
    A dataclass linking a student to a course. It carries no data of its own.

    Attributes:
        id (Optional[int]): The unique ID for the registration.
        course_id (int): The ID of the course. Corresponds with a `CourseModel` entry.
        student_id (int): The ID of the student. Corresponds with a `StudentModel` entry.
    """

    course_id: Optional[int] = None
    student_id: Optional[int] = None

    table_name: ClassVar[str] = "registrations"
