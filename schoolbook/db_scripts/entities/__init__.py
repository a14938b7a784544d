##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Active-record entity classes for Schoolbook.

Importing this package registers every entity class, which relationships need
in order to look their targets up by entity type.

Subpackages:
    mixins: Mixin classes shared by several entity classes.

Modules:
    db_entity: The `DatabaseEntity` base class.
    relationships: Descriptors resolving belongs-to, has-many, and has-many-through links.
    course_entity: `CourseEntity`.
    department_entity: `DepartmentEntity`.
    registration_entity: `RegistrationEntity`.
    student_entity: `StudentEntity`.
"""

from schoolbook.db_scripts.entities.course_entity import CourseEntity
from schoolbook.db_scripts.entities.db_entity import DatabaseEntity
from schoolbook.db_scripts.entities.department_entity import DepartmentEntity
from schoolbook.db_scripts.entities.registration_entity import RegistrationEntity
from schoolbook.db_scripts.entities.student_entity import StudentEntity


__all__ = ["CourseEntity", "DatabaseEntity", "DepartmentEntity", "RegistrationEntity", "StudentEntity"]
