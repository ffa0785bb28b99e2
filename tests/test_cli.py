"""Tests for the command-line interface."""

import json
import logging

import pytest

from schema2class import cli
from schema2class.cli import build_parser, main
from schema2class.database import DBConnectionError
from schema2class.logging_config import LOGGER_ROOT


@pytest.fixture(autouse=True)
def restore_logging():
    """main() installs a RichHandler; put the package logger back afterwards."""
    logger = logging.getLogger(LOGGER_ROOT)
    handlers = list(logger.handlers)
    level, propagate = logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.language == "java"
    assert args.fetch is None
    assert args.tables is None
    assert not args.dry_run


def test_generates_files(sqlite_db, tmp_path):
    out = tmp_path / "model"
    code = main(
        [
            "--url",
            f"sqlite:///{sqlite_db}",
            "--output-dir",
            str(out),
            "--package",
            "app.model",
            "--fetch",
        ]
    )

    assert code == 0
    assert sorted(p.name for p in out.iterdir()) == ["NdbFood.java", "UserAccounts.java"]
    text = (out / "UserAccounts.java").read_text(encoding="utf-8")
    assert "package app.model;" in text
    assert "implements FetchDatabaseRecords" in text


def test_single_table(sqlite_db, tmp_path):
    out = tmp_path / "model"
    code = main(
        ["--url", f"sqlite:///{sqlite_db}", "-o", str(out), "--table", "user_accounts"]
    )

    assert code == 0
    assert [p.name for p in out.iterdir()] == ["UserAccounts.java"]


def test_config_file(sqlite_db, tmp_path):
    out = tmp_path / "from_config"
    config = tmp_path / "schema2class.json"
    config.write_text(
        json.dumps(
            {
                "package_name": "cfg",
                "output_dir": str(out),
                "database": {"db_type": "sqlite", "database": str(sqlite_db)},
            }
        ),
        encoding="utf-8",
    )

    assert main(["--config", str(config)]) == 0
    assert "package cfg;" in (out / "NdbFood.java").read_text(encoding="utf-8")


def test_dry_run_writes_nothing(sqlite_db, tmp_path, capsys):
    out = tmp_path / "model"
    code = main(["--url", f"sqlite:///{sqlite_db}", "-o", str(out), "--dry-run"])

    assert code == 0
    assert not out.exists()
    assert "UserAccounts.java" in capsys.readouterr().out


def test_missing_database(capsys):
    assert main([]) == 1
    assert "no database given" in capsys.readouterr().out


def test_bad_config_file(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "missing.json")]) == 1
    assert "not found" in capsys.readouterr().out


def test_unknown_language(sqlite_db, tmp_path):
    code = main(
        ["--url", f"sqlite:///{sqlite_db}", "-o", str(tmp_path), "-l", "cobol"]
    )
    assert code == 1


def test_unreachable_database(tmp_path):
    assert main(["--url", f"sqlite:///{tmp_path}", "-o", str(tmp_path / "out")]) == 1


def test_missing_table_fails_run(sqlite_db, tmp_path):
    code = main(
        ["--url", f"sqlite:///{sqlite_db}", "-o", str(tmp_path), "-t", "nope"]
    )
    assert code == 1


def test_list_languages(capsys):
    assert main(["--list-languages"]) == 0
    assert "java" in capsys.readouterr().out


def test_url_keeps_other_database_settings(sqlite_db, tmp_path, monkeypatch):
    """--url replaces only the URL of the configured database."""
    seen = {}

    def fake_run_generation(config, **kwargs):
        seen.update(config.database)
        raise DBConnectionError("stop here")

    monkeypatch.setattr(cli, "run_generation", fake_run_generation)
    config = tmp_path / "schema2class.json"
    config.write_text(
        json.dumps(
            {
                "database": {
                    "url": "sqlite:///elsewhere.db",
                    "schema_name": "main",
                    "connect_retries": 3,
                }
            }
        ),
        encoding="utf-8",
    )

    code = main(["--config", str(config), "--url", f"sqlite:///{sqlite_db}"])

    assert code == 1
    assert seen == {
        "url": f"sqlite:///{sqlite_db}",
        "schema_name": "main",
        "connect_retries": 3,
    }
