##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Backends for persisting Schoolbook entities.

Modules:
    database_backend: The abstract interface every backend implements.
    store_base: The abstract interface every per-table store implements.
    utils: Row encoding/decoding and not-found error lookup.
    sqlite: The SQLite implementation of the above.
"""
