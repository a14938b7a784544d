##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Schoolbook CLI Commands Package.

Each module encapsulates the logic and argument parsing for a distinct Schoolbook
command, following a consistent structure built around the `CommandEntryPoint` interface.

Modules:
    command_entry_point: Defines the abstract base class `CommandEntryPoint` for all CLI commands.
    database: Implements the `database` command for managing the tables of the database.
"""

from schoolbook.cli.commands.database import DatabaseCommand


# Keep these in alphabetical order
ALL_COMMANDS = [
    DatabaseCommand(),
]
