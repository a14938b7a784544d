##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
SQLite-based backend infrastructure for the Schoolbook application.

This package provides all components necessary to persist and manage Schoolbook's
entities (students, courses, departments, and registrations) using SQLite as the
storage backend.

Modules:
    sqlite_backend: Implements the `DatabaseBackend` interface using SQLite.
    sqlite_connection: Provides the shared SQLite connection handle.
    sqlite_store_base: Defines a generic base class for entity stores.
    sqlite_stores: Contains concrete SQLite store classes for Schoolbook models.
"""
