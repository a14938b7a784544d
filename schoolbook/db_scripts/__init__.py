##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Everything needed to model and interact with the entities stored in Schoolbook's database.

Modules:
    data_models: Dataclasses declaring the columns of every table.
    entities: Active-record classes wrapping the data models.
    school_db: The `SchoolDatabase` facade.
"""
