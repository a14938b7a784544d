##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Module for managing database entities related to registrations.

A registration is a row of the `registrations` join table. Its only purpose is to
link one course and one student.
"""

from typing import Optional

from schoolbook.db_scripts.data_models import RegistrationModel
from schoolbook.db_scripts.entities.db_entity import DatabaseEntity
from schoolbook.db_scripts.entities.relationships import BelongsTo


class RegistrationEntity(DatabaseEntity[RegistrationModel]):
    """
    A class representing the registration of a student for a course.

    Attributes:
        entity_info (db_scripts.data_models.RegistrationModel): An instance of the
            `RegistrationModel` class containing the registration's data.
        backend (backends.database_backend.DatabaseBackend): An instance of the `DatabaseBackend`
            class used to interact with the database.
        course (Optional[CourseEntity]): The registered course.
        student (Optional[StudentEntity]): The registered student.
    """

    model_class = RegistrationModel

    course = BelongsTo("course", foreign_key="course_id")
    student = BelongsTo("student", foreign_key="student_id")

    def __str__(self) -> str:
        """
        Provide a string representation of the `RegistrationEntity` instance.

        Returns:
            A human-readable string representation of the `RegistrationEntity` instance.
        """
        return (
            f"Registration (ID: {self.get_id()}) of student {self.get_student_id()} "
            f"for course {self.get_course_id()}"
        )

    def get_course_id(self) -> Optional[int]:
        """
        Get the ID of the registered course.

        Returns:
            The course's ID.
        """
        return self.entity_info.course_id

    def get_student_id(self) -> Optional[int]:
        """
        Get the ID of the registered student.

        Returns:
            The student's ID.
        """
        return self.entity_info.student_id
