"""Command-line processing of privacy requests."""

import json
import sys

import pytest

import subject_rights.infrastructure.persistence.database as database
from scripts import process_privacy_request as cli


@pytest.mark.parametrize(
    "argv",
    [
        ["prog"],
        ["prog", "purge", "1"],
        ["prog", "export", "one"],
        ["prog", "export", "1", "extra"],
    ],
)
def test_bad_arguments_print_usage(monkeypatch, capsys, argv) -> None:
    monkeypatch.setattr(sys, "argv", argv)

    with pytest.raises(SystemExit) as exc:
        cli.main()

    assert exc.value.code == 1
    assert "Usage:" in capsys.readouterr().err


@pytest.fixture
def cli_database(monkeypatch, seeded_db):
    monkeypatch.setattr(database, "AsyncSessionLocal", seeded_db)
    return seeded_db


async def test_status_prints_json(cli_database, capsys) -> None:
    assert await cli.run("status", 3) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["can_remove"] is False


async def test_export_prints_domains(cli_database, capsys) -> None:
    assert await cli.run("export", 1) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["subject_id"] == 42
    assert data["domains"][0]["name"] == "users"


async def test_domain_error_exits_2(cli_database, capsys) -> None:
    assert await cli.run("erase", 3) == 2
    assert json.loads(capsys.readouterr().err)["error"] == "ERASURE_NOT_PERMITTED"
