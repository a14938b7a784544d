##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
This module defines the `DatabaseCommand` class, which provides CLI subcommands
for managing the Schoolbook database: creating, dropping, and flushing its tables,
and printing information about it.

The commands are registered under the `database` top-level command.
"""

import logging
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace

from schoolbook.backends.sqlite.sqlite_backend import SQLiteBackend
from schoolbook.cli.commands.command_entry_point import CommandEntryPoint
from schoolbook.db_scripts.school_db import SchoolDatabase


LOG = logging.getLogger("schoolbook")


class DatabaseCommand(CommandEntryPoint):
    """
    Handles `database` CLI commands for managing Schoolbook's database.

    Methods:
        add_parser: Adds the `database` command and its subcommands to the CLI parser.
        process_command: Processes the CLI input and dispatches the appropriate action.
    """

    subcommands = {
        "create": "Create every table that doesn't exist yet.",
        "drop": "Drop every table that exists.",
        "flush": "Remove every entity by dropping and recreating every table.",
        "info": "Print information about the database.",
    }

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `database` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `database`
                command parser will be added.
        """
        database: ArgumentParser = subparsers.add_parser(
            "database",
            help="Manage Schoolbook's database.",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        database.set_defaults(func=self.process_command)

        database_commands: ArgumentParser = database.add_subparsers(dest="commands", required=True)
        for name, help_text in self.subcommands.items():
            database_commands.add_parser(name, help=help_text, formatter_class=ArgumentDefaultsHelpFormatter)

    def process_command(self, args: Namespace):
        """
        Run the requested `database` subcommand.

        Args:
            args: An argparse Namespace containing user arguments.
        """
        # Dropping shouldn't create the tables it is about to drop
        school_db = SchoolDatabase(SQLiteBackend(initialize_schema=args.commands != "drop"))
        try:
            if args.commands == "create":
                school_db.create_tables()
                LOG.info(f"Created Schoolbook tables in '{school_db.get_connection_string()}'.")
            elif args.commands == "drop":
                school_db.drop_tables()
                LOG.info(f"Dropped Schoolbook tables from '{school_db.get_connection_string()}'.")
            elif args.commands == "flush":
                school_db.flush()
                LOG.info(f"Flushed every Schoolbook table in '{school_db.get_connection_string()}'.")
            elif args.commands == "info":
                school_db.info()
        finally:
            school_db.close()
