"""Tests for the diskring command line."""

# pylint: disable=redefined-outer-name

from pathlib import Path

import pytest
from click.testing import CliRunner

from diskring.cli import cli
from diskring.errors import ScanError
from scan_helpers import make_file


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def segment_rows(output: str) -> list[list[str]]:
    """Split the segment table rows, which start with a ring index."""
    rows = [line.split() for line in output.splitlines()]
    return [row for row in rows if row and row[0].isdigit()]


class TestScanCommand:
    """Tests for `diskring scan`."""

    def test_prints_largest_entries(self, runner: CliRunner, sample_tree: Path):
        result = runner.invoke(cli, ["scan", str(sample_tree)])

        assert result.exit_code == 0, result.output
        assert f"{sample_tree}  3.81 MB" in result.output
        assert "2.86 MB  A" in result.output
        assert "B/" in result.output
        assert "    C" in result.output
        assert "Scan complete: 2 files in 1 directories" in result.output

    def test_show_depth_limits_tree(self, runner: CliRunner, sample_tree: Path):
        result = runner.invoke(cli, ["scan", "--show-depth", "1", str(sample_tree)])

        assert result.exit_code == 0, result.output
        assert "B/" in result.output
        assert "    C" not in result.output

    def test_max_children_option(self, runner: CliRunner, sample_tree: Path):
        result = runner.invoke(cli, ["scan", "--max-children", "1", str(sample_tree)])

        assert result.exit_code == 0, result.output
        assert "  A" in result.output
        assert "B/" not in result.output

    def test_missing_path_rejected(self, runner: CliRunner, tmp_path: Path):
        result = runner.invoke(cli, ["scan", str(tmp_path / "missing")])

        assert result.exit_code == 2

    def test_scan_error_exits_nonzero(self, runner: CliRunner, sample_tree: Path, monkeypatch):
        def failing_scan(root, on_entry, cancel):
            raise ScanError(root, PermissionError(13, "Permission denied"))

        monkeypatch.setattr("diskring.worker.worker.scan_directory", failing_scan)
        result = runner.invoke(cli, ["scan", str(sample_tree)])

        assert result.exit_code == 1
        assert f"Error: Permission denied: {sample_tree}" in result.output

    def test_progress_line_per_snapshot(self, runner: CliRunner, tmp_path: Path):
        for index in range(40):
            make_file(tmp_path / f"d{index:02d}" / "f", 1)

        result = runner.invoke(cli, ["scan", "--notify-interval", "1", str(tmp_path)])

        assert result.exit_code == 0, result.output
        scanning = [line for line in result.output.splitlines() if "Scanning: " in line]
        assert scanning
        assert scanning[0].startswith("[1 dirs, 1 files, 1 B] Scanning: ")

    def test_no_progress_silences_status(self, runner: CliRunner, tmp_path: Path):
        for index in range(5):
            make_file(tmp_path / f"d{index}" / "f", 1)

        result = runner.invoke(cli, ["scan", "--notify-interval", "1", "--no-progress", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert "Scanning" not in result.output
        assert "Scan complete: 5 files in 5 directories" in result.output


class TestRingsCommand:
    """Tests for `diskring rings`."""

    def test_lists_segments(self, runner: CliRunner, sample_tree: Path):
        result = runner.invoke(cli, ["rings", str(sample_tree)])

        assert result.exit_code == 0, result.output
        rows = segment_rows(result.output)
        assert [(row[0], row[-1]) for row in rows] == [("0", "A"), ("0", "B"), ("1", "B/C")]
        assert rows[0][1:3] == ["0.00", "270.00"]
        assert rows[1][1:3] == ["270.00", "90.00"]

    def test_expand_directory(self, runner: CliRunner, sample_tree: Path):
        result = runner.invoke(cli, ["rings", "--expand", "B", str(sample_tree)])

        assert result.exit_code == 0, result.output
        assert f"{sample_tree / 'B'}  976.56 KB" in result.output
        rows = segment_rows(result.output)
        assert rows == [["0", "0.00", "360.00", "976.56", "KB", "C"]]

    def test_expand_file_rejected(self, runner: CliRunner, sample_tree: Path):
        result = runner.invoke(cli, ["rings", "--expand", "A", str(sample_tree)])

        assert result.exit_code == 1
        assert "is not a directory shown under" in result.output

    def test_cursor_on_segment(self, runner: CliRunner, sample_tree: Path):
        result = runner.invoke(cli, ["rings", "--cursor", "50", "1", str(sample_tree)])

        assert result.exit_code == 0, result.output
        assert "Hover: A" in result.output

    def test_cursor_on_center(self, runner: CliRunner, sample_tree: Path):
        result = runner.invoke(cli, ["rings", "--cursor", "0", "0", str(sample_tree)])

        assert result.exit_code == 0, result.output
        assert f"Hover: center ({sample_tree})" in result.output

    def test_cursor_outside_chart(self, runner: CliRunner, sample_tree: Path):
        result = runner.invoke(cli, ["rings", "--cursor", "500", "1", str(sample_tree)])

        assert result.exit_code == 0, result.output
        assert "Hover: nothing" in result.output
