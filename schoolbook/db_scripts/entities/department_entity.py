##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Module for managing database entities related to departments.
"""

from typing import TYPE_CHECKING

from schoolbook.db_scripts.data_models import DepartmentModel
from schoolbook.db_scripts.entities.db_entity import DatabaseEntity
from schoolbook.db_scripts.entities.mixins.name import NameMixin
from schoolbook.db_scripts.entities.relationships import HasMany


if TYPE_CHECKING:
    from schoolbook.db_scripts.entities.course_entity import CourseEntity


class DepartmentEntity(DatabaseEntity[DepartmentModel], NameMixin):
    """
    A class representing a department in the database.

    Attributes:
        entity_info (db_scripts.data_models.DepartmentModel): An instance of the `DepartmentModel`
            class containing the department's data.
        backend (backends.database_backend.DatabaseBackend): An instance of the `DatabaseBackend`
            class used to interact with the database.
        courses (List[CourseEntity]): The courses offered by this department, queried on every access.

    Methods:
        add_course:
            Make this department the one offering a course.
    """

    model_class = DepartmentModel

    courses = HasMany("course", foreign_key="department_id")

    def __str__(self) -> str:
        """
        Provide a string representation of the `DepartmentEntity` instance.

        Returns:
            A human-readable string representation of the `DepartmentEntity` instance.
        """
        return f"Department '{self.get_name()}' (ID: {self.get_id()})"

    def add_course(self, course: "CourseEntity") -> "CourseEntity":
        """
        Make this department the one offering `course`, saving both.

        Args:
            course: The course to add.

        Returns:
            The course, now pointing at this department.
        """
        return DepartmentEntity.courses.add(self, course)
