"""
Tests for the `admachin combos` CLI commands.

The library service is patched, so no Supabase connection is needed.
"""

import json
import logging

import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from click.testing import CliRunner

from admachin.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def mock_service():
    svc = MagicMock()
    svc.create_ads = AsyncMock(return_value=[])
    with patch("admachin.services.AdLibraryService", return_value=svc):
        yield svc


POOLS = ["-c", "c1", "-c", "c2", "-h", "h1", "-p", "p1", "-d", "d1", "-d", "d2"]


class TestPreview:
    def test_lists_combinations_in_order(self, runner):
        result = runner.invoke(cli, ["combos", "preview", *POOLS])

        assert result.exit_code == 0, result.output
        assert "2 × 1 × 1 × 2 = 4 combinations" in result.output
        lines = [line for line in result.output.splitlines() if line.strip()[:2] in ("1.", "2.", "3.", "4.")]
        assert lines[0].strip() == "1. c1 | h1 | p1 | d1"
        assert lines[3].strip() == "4. c2 | h1 | p1 | d2"

    def test_large_selection_shows_first_page(self, runner):
        creatives = []
        for i in range(101):
            creatives += ["-c", f"c{i}"]
        result = runner.invoke(cli, ["combos", "preview", *creatives, "-h", "h1", "-p", "p1", "-d", "d1"])

        assert result.exit_code == 0, result.output
        assert "More than 100 combinations" in result.output
        assert "81 more" in result.output

    def test_exports_json(self, runner, tmp_path):
        out = tmp_path / "combos.json"
        result = runner.invoke(cli, ["combos", "preview", *POOLS, "--output-json", str(out)])

        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text())
        assert len(data) == 4
        assert data[0]["id"] == "c1_h1_p1_d1"

    def test_missing_pool_is_usage_error(self, runner):
        result = runner.invoke(cli, ["combos", "preview", "-c", "c1", "-h", "h1", "-p", "p1"])
        assert result.exit_code != 0


class TestCreate:
    def test_creates_all_but_excluded(self, runner, mock_service):
        result = runner.invoke(cli, [
            "combos", "create", *POOLS,
            "--user-id", "user-1", "--project-id", "proj-1",
            "-x", "c1_h1_p1_d2",
        ])

        assert result.exit_code == 0, result.output
        assert "Created 3 ads" in result.output
        mock_service.create_ads.assert_awaited_once()
        rows = mock_service.create_ads.call_args[0][0]
        assert len(rows) == 3
        assert all(r["user_id"] == "user-1" and r["project_id"] == "proj-1" for r in rows)

    def test_scope_reaches_every_row(self, runner, mock_service):
        result = runner.invoke(cli, [
            "combos", "create", "-c", "c1", "-h", "h1", "-p", "p1", "-d", "d1",
            "--user-id", "u1", "--project-id", "proj-1", "--subproject-id", "sub-1",
        ])

        assert result.exit_code == 0, result.output
        rows = mock_service.create_ads.call_args[0][0]
        assert rows == [{
            "creative_id": "c1",
            "headline_id": "h1",
            "primary_id": "p1",
            "description_id": "d1",
            "user_id": "u1",
            "project_id": "proj-1",
            "subproject_id": "sub-1",
        }]

    def test_everything_excluded_makes_no_call(self, runner, mock_service):
        result = runner.invoke(cli, [
            "combos", "create", "-c", "c1", "-h", "h1", "-p", "p1", "-d", "d1",
            "--user-id", "user-1", "-x", "c1_h1_p1_d1",
        ])

        assert result.exit_code == 0, result.output
        assert "Nothing to create" in result.output
        mock_service.create_ads.assert_not_called()

    def test_failure_exits_nonzero(self, runner, mock_service):
        mock_service.create_ads.side_effect = RuntimeError("db down")

        result = runner.invoke(cli, ["combos", "create", *POOLS, "--user-id", "user-1"])

        assert result.exit_code == 1
        assert "Failed to create 4 ads" in result.output


class TestLogging:
    def test_verbose_level_reaches_logfire_setup(self, runner):
        with patch("admachin.cli.main.setup_logfire") as setup:
            result = runner.invoke(cli, ["--verbose", "combos", "preview", *POOLS])

        assert result.exit_code == 0, result.output
        setup.assert_called_once_with(level=logging.DEBUG)

    def test_default_level_is_warning(self, runner):
        with patch("admachin.cli.main.setup_logfire") as setup:
            runner.invoke(cli, ["combos", "preview", *POOLS])

        setup.assert_called_once_with(level=logging.WARNING)
