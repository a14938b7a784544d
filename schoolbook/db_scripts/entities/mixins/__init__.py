##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Mixins shared by Schoolbook entity classes.

Modules:
    name: Provides `NameMixin` for entities with a `name` column.
"""
