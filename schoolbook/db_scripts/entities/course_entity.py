##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Module for managing database entities related to courses.

This module defines the `CourseEntity` class, which represents a course offered by a
department and taken by students through registrations.
"""

from typing import TYPE_CHECKING, Optional

from schoolbook.db_scripts.data_models import CourseModel
from schoolbook.db_scripts.entities.db_entity import DatabaseEntity
from schoolbook.db_scripts.entities.mixins.name import NameMixin
from schoolbook.db_scripts.entities.relationships import BelongsTo, HasMany, HasManyThrough


if TYPE_CHECKING:
    from schoolbook.db_scripts.entities.registration_entity import RegistrationEntity
    from schoolbook.db_scripts.entities.student_entity import StudentEntity


class CourseEntity(DatabaseEntity[CourseModel], NameMixin):
    """
    A class representing a course in the database.

    Attributes:
        entity_info (db_scripts.data_models.CourseModel): An instance of the `CourseModel`
            class containing the course's data.
        backend (backends.database_backend.DatabaseBackend): An instance of the `DatabaseBackend`
            class used to interact with the database.
        department (Optional[DepartmentEntity]): The department offering this course. Memoized;
            assigning a saved department sets `department_id` as well.
        registrations (List[RegistrationEntity]): The registrations for this course.
        students (List[StudentEntity]): The students registered for this course.

    Methods:
        get_department_id:
            Retrieve the ID of the department offering this course.

        add_student:
            Register a student for this course.
    """

    model_class = CourseModel

    department = BelongsTo("department", foreign_key="department_id")
    registrations = HasMany("registration", foreign_key="course_id")
    students = HasManyThrough("student", through="registration", owner_key="course_id", target_key="student_id")

    def __str__(self) -> str:
        """
        Provide a string representation of the `CourseEntity` instance.

        Returns:
            A human-readable string representation of the `CourseEntity` instance.
        """
        return f"Course '{self.get_name()}' (ID: {self.get_id()}, Department ID: {self.get_department_id()})"

    def get_department_id(self) -> Optional[int]:
        """
        Get the ID of the department offering this course.

        Returns:
            The department's ID, or None if the course has no department.
        """
        return self.entity_info.department_id

    def add_student(self, student: "StudentEntity") -> "RegistrationEntity":
        """
        Register a student for this course. Both must already be saved.

        Args:
            student: The student to register.

        Returns:
            The registration linking the two.
        """
        return CourseEntity.students.add(self, student)
