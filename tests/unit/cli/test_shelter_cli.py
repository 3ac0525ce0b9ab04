from __future__ import annotations

import json

from typer.testing import CliRunner

from shelter_functions.auth import decode_id_token
from shelter_functions.cli import app as cli_app

runner = CliRunner()


def test_root_help_lists_commands():
    result = runner.invoke(cli_app, ["--help"])
    assert result.exit_code == 0
    for command in ("serve", "catalog", "mint-token", "create-user"):
        assert command in result.stdout


def test_catalog_json():
    result = runner.invoke(cli_app, ["catalog", "--json"])
    assert result.exit_code == 0

    rows = {row["name"]: row for row in json.loads(result.stdout)}
    assert len(rows) == 9
    assert rows["create-pet"]["tier"] == "institution"
    assert rows["create-pet"]["notify_build"] is True
    assert rows["create-pet"]["schema"]["filters"] == "object"
    assert rows["check-handle-availability"]["tier"] == "public"


def test_catalog_table():
    result = runner.invoke(cli_app, ["catalog"])
    assert result.exit_code == 0
    assert "grant-institution-role" in result.stdout
    assert "[notifies build]" in result.stdout


def test_mint_token_roundtrip(auth_settings):
    result = runner.invoke(cli_app, ["mint-token", "inst-uid", "-c", "institution", "--email", "shelter@example.com"])
    assert result.exit_code == 0

    caller = decode_id_token(result.stdout.strip(), settings=auth_settings)
    assert caller.uid == "inst-uid"
    assert caller.is_institution
    assert not caller.is_admin
    assert caller.email == "shelter@example.com"


def test_create_user_writes_record(monkeypatch):
    monkeypatch.delenv("DB_BACKEND", raising=False)
    result = runner.invoke(cli_app, ["create-user", "paws-uid", "--email", "paws@example.com", "-c", "institution"])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "paws-uid paws@example.com institution"
