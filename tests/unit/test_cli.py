"""Tests for the Tareas command-line interface."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from tareas.cli import cli
from tareas.infrastructure.auth import TokenService


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def cli_settings(settings):
    with patch("tareas.cli.get_settings", return_value=settings):
        yield settings


def test_init_data_creates_both_files(runner, cli_settings):
    result = runner.invoke(cli, ["init-data"])

    assert result.exit_code == 0
    assert json.loads(cli_settings.users_path.read_text(encoding="utf-8")) == []
    assert json.loads(cli_settings.tasks_path.read_text(encoding="utf-8")) == []

    again = runner.invoke(cli, ["init-data"])
    assert again.exit_code == 0
    assert "Exists" in again.output


def test_create_user(runner, cli_settings):
    result = runner.invoke(cli, ["create-user", "cli@example.com", "--password", "Secret1!"])

    assert result.exit_code == 0
    assert "Created user 1 <cli@example.com>" in result.output
    stored = json.loads(cli_settings.users_path.read_text(encoding="utf-8"))
    assert stored[0]["email"] == "cli@example.com"
    assert stored[0]["password"].startswith("$argon2id$")


def test_create_user_duplicate_fails(runner, cli_settings):
    runner.invoke(cli, ["create-user", "cli@example.com", "--password", "Secret1!"])

    result = runner.invoke(cli, ["create-user", "cli@example.com", "--password", "Other1!"])

    assert result.exit_code == 1
    assert len(json.loads(cli_settings.users_path.read_text(encoding="utf-8"))) == 1


def test_issue_token(runner, cli_settings):
    runner.invoke(cli, ["create-user", "cli@example.com", "--password", "Secret1!"])

    result = runner.invoke(cli, ["issue-token", "cli@example.com", "--password", "Secret1!"])

    assert result.exit_code == 0
    claims = TokenService.from_settings(cli_settings).verify(result.output.strip())
    assert claims.subject_email == "cli@example.com"


def test_issue_token_bad_password(runner, cli_settings):
    runner.invoke(cli, ["create-user", "cli@example.com", "--password", "Secret1!"])

    result = runner.invoke(cli, ["issue-token", "cli@example.com", "--password", "nope"])

    assert result.exit_code == 1


def test_serve_runs_single_worker(runner, cli_settings):
    with patch("uvicorn.run") as mock_run:
        result = runner.invoke(cli, ["serve", "--port", "9000"])

    assert result.exit_code == 0
    mock_run.assert_called_once()
    kwargs = mock_run.call_args.kwargs
    assert kwargs["port"] == 9000
    assert kwargs["workers"] == 1
