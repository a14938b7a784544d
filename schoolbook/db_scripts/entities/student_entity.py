##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Module for managing database entities related to students.
"""

from typing import TYPE_CHECKING, Optional

from schoolbook.db_scripts.data_models import StudentModel
from schoolbook.db_scripts.entities.db_entity import DatabaseEntity
from schoolbook.db_scripts.entities.mixins.name import NameMixin
from schoolbook.db_scripts.entities.relationships import HasMany, HasManyThrough


if TYPE_CHECKING:
    from schoolbook.db_scripts.entities.course_entity import CourseEntity
    from schoolbook.db_scripts.entities.registration_entity import RegistrationEntity


class StudentEntity(DatabaseEntity[StudentModel], NameMixin):
    """
    A class representing a student in the database.

    Attributes:
        entity_info (db_scripts.data_models.StudentModel): An instance of the `StudentModel`
            class containing the student's data.
        backend (backends.database_backend.DatabaseBackend): An instance of the `DatabaseBackend`
            class used to interact with the database.
        registrations (List[RegistrationEntity]): The registrations of this student.
        courses (List[CourseEntity]): The courses this student is registered for.

    Methods:
        get_grade:
            Retrieve the grade level of the student.

        set_grade:
            Change the grade level of the student (in memory).

        add_course:
            Register this student for a course.
    """

    model_class = StudentModel

    registrations = HasMany("registration", foreign_key="student_id")
    courses = HasManyThrough("course", through="registration", owner_key="student_id", target_key="course_id")

    def __str__(self) -> str:
        """
        Provide a string representation of the `StudentEntity` instance.

        Returns:
            A human-readable string representation of the `StudentEntity` instance.
        """
        return f"Student '{self.get_name()}' (ID: {self.get_id()}, Grade: {self.get_grade()})"

    def get_grade(self) -> Optional[int]:
        """
        Get the grade level of this student.

        Returns:
            The grade level, or None if it was never set.
        """
        return self.entity_info.grade

    def set_grade(self, grade: int):
        """
        Set the grade level of this student. Call `save` to write it.

        Args:
            grade: The new grade level.
        """
        self.entity_info.grade = grade

    def add_course(self, course: "CourseEntity") -> "RegistrationEntity":
        """
        Register this student for a course. Both must already be saved.

        Args:
            course: The course to register for.

        Returns:
            The registration linking the two.
        """
        return StudentEntity.courses.add(self, course)
