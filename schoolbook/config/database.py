##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
This module resolves the settings used to open the SQLite database from the
application's configuration (`app.yaml`).
"""

import logging
import os
from typing import Dict, Optional

from schoolbook.config import Config


LOG = logging.getLogger(__name__)

MEMORY_DATABASE = ":memory:"


def _get_database_section(config: Optional[Config]):
    if config is None:
        from schoolbook.config.configfile import CONFIG  # pylint: disable=import-outside-toplevel

        config = CONFIG
    return config.database


def get_connection_string(config: Optional[Config] = None) -> str:
    """
    Get the path to the SQLite database file.

    Args:
        config: The configuration to read from. Defaults to the process-wide `CONFIG`.

    Returns:
        The database path with `~` expanded, or `:memory:` for an in-memory database.
    """
    db_path = str(_get_database_section(config).path)
    if db_path == MEMORY_DATABASE:
        return db_path
    return os.path.expanduser(db_path)


def get_connection_settings(config: Optional[Config] = None) -> Dict:
    """
    Get the pragmas applied to every new SQLite connection.

    Args:
        config: The configuration to read from. Defaults to the process-wide `CONFIG`.

    Returns:
        A dictionary with the `journal_mode` setting.
    """
    section = _get_database_section(config)
    return {
        "journal_mode": getattr(section, "journal_mode", "WAL"),
    }
