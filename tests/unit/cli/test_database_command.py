"""
Tests for the `database.py` file of the `cli/` folder.
"""

from argparse import ArgumentParser, Namespace

import pytest
from pytest_mock import MockerFixture

from schoolbook.cli.commands.database import DatabaseCommand
from tests.fixture_types import FixtureCallable


@pytest.fixture
def parser(create_parser: FixtureCallable) -> ArgumentParser:
    """
    Returns an `ArgumentParser` configured with the `database` command and its subcommands.

    Args:
        create_parser: A fixture to help create a parser.

    Returns:
        Parser with the `database` command and its subcommands registered.
    """
    return create_parser(DatabaseCommand())


@pytest.mark.parametrize("subcommand", ["create", "drop", "flush", "info"])
def test_parser_accepts_subcommands(parser: ArgumentParser, subcommand: str):
    """
    Ensure every subcommand parses and routes back to the command.

    Args:
        parser: Parser with the `database` command registered.
        subcommand: The subcommand to parse.
    """
    args = parser.parse_args(["database", subcommand])
    assert args.commands == subcommand
    assert args.func.__self__.__class__ is DatabaseCommand


def test_parser_requires_subcommand(parser: ArgumentParser):
    """
    Ensure the `database` command needs a subcommand.

    Args:
        parser: Parser with the `database` command registered.
    """
    with pytest.raises(SystemExit):
        parser.parse_args(["database"])


@pytest.mark.parametrize(
    "subcommand, method",
    [("create", "create_tables"), ("drop", "drop_tables"), ("flush", "flush"), ("info", "info")],
)
def test_process_command_dispatch(mocker: MockerFixture, subcommand: str, method: str):
    """
    Ensure every subcommand calls the matching database method and closes the database.

    Args:
        mocker: PyTest mocker fixture.
        subcommand: The subcommand to run.
        method: The `SchoolDatabase` method it should call.
    """
    mocker.patch("schoolbook.cli.commands.database.database.SQLiteBackend")
    mock_db_class = mocker.patch("schoolbook.cli.commands.database.database.SchoolDatabase")
    mock_db = mock_db_class.return_value

    DatabaseCommand().process_command(Namespace(commands=subcommand))

    getattr(mock_db, method).assert_called_once()
    mock_db.close.assert_called_once()


def test_process_command_drop_skips_schema_creation(mocker: MockerFixture):
    """
    Ensure dropping doesn't create the tables it's about to drop.

    Args:
        mocker: PyTest mocker fixture.
    """
    mock_backend_class = mocker.patch("schoolbook.cli.commands.database.database.SQLiteBackend")
    mocker.patch("schoolbook.cli.commands.database.database.SchoolDatabase")

    DatabaseCommand().process_command(Namespace(commands="drop"))
    mock_backend_class.assert_called_once_with(initialize_schema=False)

    mock_backend_class.reset_mock()
    DatabaseCommand().process_command(Namespace(commands="create"))
    mock_backend_class.assert_called_once_with(initialize_schema=True)


def test_process_command_closes_on_error(mocker: MockerFixture):
    """
    Ensure the database is closed even when the subcommand fails.

    Args:
        mocker: PyTest mocker fixture.
    """
    mocker.patch("schoolbook.cli.commands.database.database.SQLiteBackend")
    mock_db = mocker.patch("schoolbook.cli.commands.database.database.SchoolDatabase").return_value
    mock_db.flush.side_effect = RuntimeError("disk full")

    with pytest.raises(RuntimeError, match="disk full"):
        DatabaseCommand().process_command(Namespace(commands="flush"))
    mock_db.close.assert_called_once()
