##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
Used to store the application configuration.

The `config` package loads the settings defined in the `app.yaml` file and exposes
them to the rest of Schoolbook.

Modules:
    config_filepaths.py: Constants for the locations of configuration files.
    configfile.py: Handles locating and loading the application configuration file.
    database.py: Resolves the SQLite connection string and connection settings.
"""
from types import SimpleNamespace
from typing import Dict, List, Optional

from schoolbook.utils import nested_dict_to_namespaces


# Pylint complains that there's too few methods here but this class might
# be useful if we ever need to do extra stuff with the configuration so we'll
# ignore it for now
class Config:  # pylint: disable=R0903
    """
    The Config class, meant to store all Schoolbook config settings in one place.

    Attributes:
        database (Optional[SimpleNamespace]): A namespace containing database settings.
        logging (Optional[SimpleNamespace]): A namespace containing logging settings.

    Methods:
        load_app_into_namespaces: Converts the provided configuration dictionary into namespaces
            and assigns them to the Config instance's attributes.
    """

    sections: List[str] = ["database", "logging"]

    def __init__(self, app_dict: Dict):
        """
        Initializes the Config instance with configuration data from a dictionary.

        Args:
            app_dict: A dictionary containing configuration data for the application.
                Each of the "database" and "logging" keys is converted into a
                `SimpleNamespace` and assigned to the attribute of the same name.
        """
        self.database: Optional[SimpleNamespace] = None
        self.logging: Optional[SimpleNamespace] = None
        self.load_app_into_namespaces(app_dict)

    def load_app_into_namespaces(self, app_dict: Dict):
        """
        Converts the provided application dictionary into namespaces and assigns them
        to the Config instance's attributes.

        Args:
            app_dict: A dictionary containing configuration data for the application.
        """
        for section in self.sections:
            try:
                setattr(self, section, nested_dict_to_namespaces(app_dict[section]))
            except KeyError:
                # The keywords are optional
                pass
