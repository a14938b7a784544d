"""
Tests for the `main.py` module, running the CLI end to end against a database file.
"""

import os
import sqlite3
import sys

import pytest
from _pytest.capture import CaptureFixture
from pytest_mock import MockerFixture

from schoolbook.main import main
from tests.fixture_types import FixtureCallable, FixtureModification


@pytest.fixture
def run_cli(mocker: MockerFixture, restore_config: FixtureModification) -> FixtureCallable:
    """
    A fixture to run the `schoolbook` command with a given list of arguments.

    Args:
        mocker: PyTest mocker fixture.
        restore_config: A fixture that restores `CONFIG` once the test is done.

    Returns:
        A function that runs the CLI and returns its exit code.
    """
    mocker.patch("schoolbook.main.setup_logging")

    def _run_cli(*cli_args: str) -> int:
        mocker.patch.object(sys, "argv", ["schoolbook", *cli_args])
        with pytest.raises(SystemExit) as excinfo:
            main()
        return excinfo.value.code

    return _run_cli


def test_main_without_arguments(mocker: MockerFixture, capsys: CaptureFixture):
    """
    Test that running without arguments prints the help.

    Args:
        mocker: PyTest mocker fixture.
        capsys: PyTest capsys fixture.
    """
    mocker.patch.object(sys, "argv", ["schoolbook"])
    assert main() == 1
    assert "usage: schoolbook" in capsys.readouterr().out


def test_database_lifecycle(run_cli: FixtureCallable, tmp_path, capsys: CaptureFixture):
    """
    Test creating, inspecting, and dropping the tables of a database named in an app.yaml file.

    Args:
        run_cli: A fixture to run the `schoolbook` command.
        tmp_path: A built-in fixture from pytest providing a temporary directory.
        capsys: PyTest capsys fixture.
    """
    db_path = os.path.join(str(tmp_path), "school.db")
    (tmp_path / "app.yaml").write_text(f"database:\n  path: {db_path}\nlogging:\n  colors: false\n")

    assert run_cli("-c", str(tmp_path), "database", "create") in (None, 0)
    conn = sqlite3.connect(db_path)
    tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}
    conn.execute("INSERT INTO students (name, grade) VALUES ('Ada', 9)")
    conn.commit()
    conn.close()
    assert tables == {"students", "courses", "departments", "registrations"}

    capsys.readouterr()
    assert run_cli("-c", str(tmp_path), "database", "info") in (None, 0)
    output = capsys.readouterr().out
    assert f"Connection String: {db_path}" in output
    student_line = next(line for line in output.splitlines() if line.startswith("student"))
    assert student_line.split() == ["student", "students", "1"]

    assert run_cli("-c", str(tmp_path), "database", "drop") in (None, 0)
    conn = sqlite3.connect(db_path)
    assert conn.execute("SELECT COUNT(*) FROM sqlite_master WHERE type = 'table'").fetchone()[0] == 0
    conn.close()


def test_main_reports_errors(run_cli: FixtureCallable, mocker: MockerFixture):
    """
    Test that an error raised by a command is logged and turned into exit code 1.

    Args:
        run_cli: A fixture to run the `schoolbook` command.
        mocker: PyTest mocker fixture.
    """
    mocker.patch(
        "schoolbook.cli.commands.database.database.SQLiteBackend", side_effect=sqlite3.OperationalError("locked")
    )
    mock_log = mocker.patch("schoolbook.main.LOG")

    assert run_cli("database", "create") == 1
    mock_log.error.assert_called_once_with("locked")


def test_main_missing_config(run_cli: FixtureCallable, tmp_path):
    """
    Test that naming a configuration that doesn't exist fails before any command runs.

    Args:
        run_cli: A fixture to run the `schoolbook` command.
        tmp_path: A built-in fixture from pytest providing a temporary directory.
    """
    with pytest.raises(ValueError, match="Cannot find a schoolbook config file"):
        run_cli("-c", str(tmp_path / "missing"), "database", "info")
