##############################################################################
# Copyright (c) Lawrence Livermore National Security, LLC and other Merlin
# Project developers. See top-level LICENSE and COPYRIGHT files for dates and
# other details. No copyright assignment is required to contribute to Merlin.
##############################################################################

"""
It's hard to type hint pytest fixtures in a way that makes it clear
that the variable being used is a fixture. This module will created
aliases for these fixtures in order to make it easier to track what's
happening.

The types here will be defined as such:
- `FixtureCallable`: A fixture that returns a function
- `FixtureDict`: A fixture that returns a dictionary
- `FixtureModification`: A fixture that modifies something but never actually
                         returns/yields a value to be used in the test.
- `FixtureNamespace`: A fixture that returns an argparse Namespace
- `FixtureSchoolDatabase`: A fixture that returns a SchoolDatabase on an in-memory backend
- `FixtureSQLiteBackend`: A fixture that returns a SQLiteBackend on an in-memory connection
- `FixtureSQLiteConnection`: A fixture that returns an in-memory SQLiteConnection
- `FixtureStr`: A fixture that returns a string
- `FixtureTuple`: A fixture that returns a tuple
"""

from argparse import Namespace
from collections.abc import Callable
from typing import Annotated, Any, Dict, List, Tuple, TypeVar

import pytest

from schoolbook.backends.sqlite.sqlite_backend import SQLiteBackend
from schoolbook.backends.sqlite.sqlite_connection import SQLiteConnection
from schoolbook.db_scripts.school_db import SchoolDatabase


K = TypeVar("K")
V = TypeVar("V")

FixtureCallable = Annotated[Callable, pytest.fixture]
FixtureDict = Annotated[Dict[K, V], pytest.fixture]
FixtureList = Annotated[List[K], pytest.fixture]
FixtureModification = Annotated[Any, pytest.fixture]
FixtureNamespace = Annotated[Namespace, pytest.fixture]
FixtureSchoolDatabase = Annotated[SchoolDatabase, pytest.fixture]
FixtureSQLiteBackend = Annotated[SQLiteBackend, pytest.fixture]
FixtureSQLiteConnection = Annotated[SQLiteConnection, pytest.fixture]
FixtureStr = Annotated[str, pytest.fixture]
FixtureTuple = Annotated[Tuple[K, V], pytest.fixture]
