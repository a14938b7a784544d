##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
This module provides functionality for locating and loading the application
configuration file (`app.yaml`) and filling in default settings.

It houses the `CONFIG` object that's used throughout Schoolbook's codebase.
"""
import logging
import os
from typing import Dict, Optional

from schoolbook.config import Config
from schoolbook.config.config_filepaths import APP_FILENAME, DEFAULT_DB_FILENAME, SCHOOLBOOK_HOME
from schoolbook.utils import load_yaml, merge_dicts


LOG: logging.Logger = logging.getLogger(__name__)

CONFIG: Optional[Config] = None


def get_default_config() -> Dict:
    """
    Creates the default configuration used when no file is found or a file omits settings.

    Returns:
        A configuration dictionary with every setting Schoolbook reads.
    """
    return {
        "database": {
            "path": os.path.join(SCHOOLBOOK_HOME, DEFAULT_DB_FILENAME),
            "journal_mode": "WAL",
        },
        "logging": {
            "level": "INFO",
            "colors": True,
        },
    }


def load_config(filepath: str) -> Optional[Dict]:
    """
    Reads a Schoolbook YAML configuration file and returns its contents as a dictionary.

    Args:
        filepath: The path to the YAML configuration file.

    Returns:
        A dictionary containing the contents of the YAML file or None if file doesn't exist.
    """
    if not os.path.isfile(filepath):
        LOG.info(f"No app config file at {filepath}")
        return None
    LOG.info(f"Reading app config from file {filepath}")
    return load_yaml(filepath) or {}


def find_config_file(path: Optional[str] = None) -> Optional[str]:
    """
    Locate the Schoolbook application configuration file (`app.yaml`).

    If `path` is given it may be either the file itself or the directory holding it.
    Otherwise the current working directory is checked first and `SCHOOLBOOK_HOME` second.

    Args:
        path: A file or directory to look in.

    Returns:
        The path to the configuration file, or None if no file was found.
    """
    if path is not None:
        candidate = path if path.endswith((".yaml", ".yml")) else os.path.join(path, APP_FILENAME)
        return candidate if os.path.isfile(candidate) else None

    for directory in (os.getcwd(), SCHOOLBOOK_HOME):
        candidate = os.path.join(directory, APP_FILENAME)
        if os.path.isfile(candidate):
            return candidate

    return None


def get_config(path: Optional[str] = None) -> Dict:
    """
    Loads a Schoolbook configuration file and merges it over the default settings.

    Args:
        path: The file or directory to search for the configuration file.
            If `None`, default search paths are used.

    Returns:
        A dictionary containing all the configuration data.

    Raises:
        ValueError: If an explicit `path` was given but no configuration file exists there.
    """
    filepath = find_config_file(path)
    if filepath is None:
        if path is not None:
            raise ValueError(f"Cannot find a schoolbook config file at '{path}'.")
        LOG.debug("No app.yaml found, using the default configuration.")
        return get_default_config()

    return merge_dicts(get_default_config(), load_config(filepath))


def initialize_config(path: Optional[str] = None) -> Config:
    """
    Initializes and returns the Schoolbook configuration, replacing the module-level `CONFIG`.

    Args:
        path: Path to look for a configuration file.

    Returns:
        The initialized configuration object.
    """
    global CONFIG  # pylint: disable=global-statement
    CONFIG = Config(get_config(path))
    return CONFIG


initialize_config()
