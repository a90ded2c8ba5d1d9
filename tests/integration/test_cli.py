"""Integration tests for the shelfgrid CLI.

These tests verify the commands work end-to-end, including:
- validate exit codes for valid, warning and invalid designs
- analyze text and JSON output, with and without sheets
- init writing a loadable design file
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from shelfgrid.application.config import load_config
from shelfgrid.cli.main import app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "designs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_minimal(self, runner: CliRunner) -> None:
        """A clean design passes with exit code 0."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_minimal.json")])
        assert result.exit_code == 0
        assert "Validation passed. Design is valid." in result.output

    def test_valid_full(self, runner: CliRunner) -> None:
        """The full-featured design passes without warnings."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "full_featured.json")])
        assert result.exit_code == 0

    def test_metric(self, runner: CliRunner) -> None:
        """Metric designs validate."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "metric.json")])
        assert result.exit_code == 0

    def test_warnings_exit_2(self, runner: CliRunner) -> None:
        """Long spans are warnings with exit code 2."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "with_warnings.json")])
        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "design.merges[0]" in result.output
        assert "Suggestion:" in result.output
        assert "Validation passed with 1 warning(s)" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        """A missing file fails with exit code 1."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json(self, runner: CliRunner) -> None:
        """Invalid JSON fails with a line number."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])
        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Validation failed." in result.output

    def test_unknown_field(self, runner: CliRunner) -> None:
        """Unknown fields are errors."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "unknown_field.json")])
        assert result.exit_code == 1
        assert "design.shelfColor" in result.output

    def test_overlapping_merges(self, runner: CliRunner) -> None:
        """Overlapping merges are errors, not silently dropped."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "overlapping_merges.json")]
        )
        assert result.exit_code == 1
        assert "overlaps" in result.output


class TestAnalyzeCommand:
    """Tests for the analyze command."""

    def test_text_output(self, runner: CliRunner) -> None:
        """Text output has the summary, parts list and sheets."""
        result = runner.invoke(app, ["analyze", str(FIXTURES_PATH / "valid_minimal.json")])
        assert result.exit_code == 0
        assert "DESIGN SUMMARY" in result.output
        assert 'Exterior width:  28 21/32"' in result.output
        assert "PARTS LIST" in result.output
        assert "Bay-1-Col0to1" in result.output
        assert "SHEET LAYOUTS" in result.output
        assert "Total sheets: 1, parts placed: 7" in result.output

    def test_no_sheets(self, runner: CliRunner) -> None:
        """Sheets can be skipped."""
        result = runner.invoke(
            app, ["analyze", str(FIXTURES_PATH / "valid_minimal.json"), "--no-sheets"]
        )
        assert result.exit_code == 0
        assert "SHEET LAYOUTS" not in result.output

    def test_hardware_listed(self, runner: CliRunner) -> None:
        """Door hardware locations are listed when configured."""
        result = runner.invoke(app, ["analyze", str(FIXTURES_PATH / "full_featured.json")])
        assert result.exit_code == 0
        assert "DOOR HARDWARE" in result.output
        assert "drill-guide" in result.output

    def test_json_output(self, runner: CliRunner) -> None:
        """JSON output parses and includes sheets."""
        result = runner.invoke(
            app, ["analyze", str(FIXTURES_PATH / "valid_minimal.json"), "--format", "json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["dimensions"]["ext_width"] == pytest.approx(28.65625)
        assert len(data["parts"]) == 7
        assert data["sheets"][0]["sheet_id"] == '23/32" Sheet 1'

    def test_json_without_sheets(self, runner: CliRunner) -> None:
        """JSON output omits sheets when skipped."""
        result = runner.invoke(
            app,
            [
                "analyze",
                str(FIXTURES_PATH / "valid_minimal.json"),
                "-f",
                "json",
                "--no-sheets",
            ],
        )
        assert result.exit_code == 0
        assert "sheets" not in json.loads(result.stdout)

    def test_unknown_format(self, runner: CliRunner) -> None:
        """An unknown format fails with exit code 1."""
        result = runner.invoke(
            app, ["analyze", str(FIXTURES_PATH / "valid_minimal.json"), "-f", "xml"]
        )
        assert result.exit_code == 1
        assert "Unknown format 'xml'" in result.output

    def test_missing_file(self, runner: CliRunner) -> None:
        """A missing file fails with exit code 1."""
        result = runner.invoke(app, ["analyze", str(FIXTURES_PATH / "nonexistent.json")])
        assert result.exit_code == 1
        assert "Config file not found" in result.output


class TestInitCommand:
    """Tests for the init command."""

    def test_writes_loadable_design(self, runner: CliRunner, tmp_path: Path) -> None:
        """The written design loads back with the requested grid."""
        output = tmp_path / "shelves.json"
        result = runner.invoke(app, ["init", str(output), "--rows", "3", "--cols", "4"])
        assert result.exit_code == 0
        assert "Wrote 3x4 design" in result.output

        config = load_config(output)
        assert (config.design.rows, config.design.cols) == (3, 4)

    def test_refuses_to_overwrite(self, runner: CliRunner, tmp_path: Path) -> None:
        """An existing file is kept unless --force is given."""
        output = tmp_path / "shelves.json"
        output.write_text("{}", encoding="utf-8")

        result = runner.invoke(app, ["init", str(output)])
        assert result.exit_code == 1
        assert output.read_text(encoding="utf-8") == "{}"

        result = runner.invoke(app, ["init", str(output), "--force"])
        assert result.exit_code == 0
        assert load_config(output).design.rows == 2

    def test_rejects_large_grid(self, runner: CliRunner, tmp_path: Path) -> None:
        """Grid options are limited to 1..10."""
        result = runner.invoke(app, ["init", str(tmp_path / "x.json"), "--rows", "11"])
        assert result.exit_code != 0
