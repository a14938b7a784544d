##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
The `database` command group and its subcommands.
"""

from schoolbook.cli.commands.database.database import DatabaseCommand


__all__ = ["DatabaseCommand"]
