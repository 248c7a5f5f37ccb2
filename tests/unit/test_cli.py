"""
Unit tests for the management CLI.

Commands run against the test database by swapping the CLI's session factory.
"""

import pytest
from sqlalchemy.orm import sessionmaker

from altare import cli
from altare.models import TableTemplate, VendorAccess
from altare.services.table_layout import PREDEFINED_TEMPLATES


@pytest.fixture
def cli_db(monkeypatch, test_engine, test_db):
    """Point the CLI at the per-test database"""
    monkeypatch.setattr(cli, "SessionLocal", sessionmaker(bind=test_engine))
    monkeypatch.setattr(cli, "init_db", lambda: None)
    return test_db


class TestParser:
    """Test argument parsing."""

    def test_serve_defaults(self):
        args = cli.build_parser().parse_args(["serve"])
        assert args.func is cli.cmd_serve
        assert args.host is None
        assert args.port is None
        assert args.reload is False

    def test_issue_access_requires_vendor(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["issue-access"])

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])


class TestCommands:
    """Test command handlers."""

    def test_seed_templates(self, cli_db, capsys):
        assert cli.main(["seed-templates"]) == 0
        assert cli_db.query(TableTemplate).count() == len(PREDEFINED_TEMPLATES)
        assert f"{len(PREDEFINED_TEMPLATES)} template(s) added" in capsys.readouterr().out

        assert cli.main(["seed-templates"]) == 0
        assert "0 template(s) added" in capsys.readouterr().out

    def test_issue_access_prints_password_once(self, cli_db, test_vendor, capsys):
        assert cli.main(["issue-access", test_vendor.id]) == 0

        out = capsys.readouterr().out
        credential = cli_db.query(VendorAccess).one()
        assert credential.access_token in out
        assert out.count("Password:") == 1

    def test_issue_access_unknown_vendor(self, cli_db, capsys):
        assert cli.main(["issue-access", "no-such-vendor"]) == 1
        assert "not found" in capsys.readouterr().err
        assert cli_db.query(VendorAccess).count() == 0
