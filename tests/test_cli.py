"""Tests for the ossready command-line interface."""

import json
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from ossready import __version__
from ossready.cli.main import cli


class TestMainGroup:
    """Tests for the top-level command group."""

    def test_help(self) -> None:
        """Test that the group lists its commands."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "status" in result.output
        assert "ready" in result.output

    def test_version(self) -> None:
        """Test the version option."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_debug_configures_logging(self, full_project: Path) -> None:
        """Test that --debug switches logging to DEBUG."""
        runner = CliRunner()
        with patch("ossready.cli.main.logging.basicConfig") as basic_config:
            result = runner.invoke(
                cli, ["--debug", "status", "--path", str(full_project), "--format", "json"]
            )

        assert result.exit_code == 0
        assert basic_config.call_args.kwargs["level"] == 10


class TestStatusCommand:
    """Tests for the status command."""

    def test_help(self) -> None:
        """Test status help output."""
        runner = CliRunner()
        result = runner.invoke(cli, ["status", "--help"])
        assert result.exit_code == 0
        assert "--format" in result.output

    def test_human_output(self, full_project: Path) -> None:
        """Test the terminal report for a complete project."""
        runner = CliRunner()
        result = runner.invoke(cli, ["status", "--path", str(full_project)])

        assert result.exit_code == 0
        assert "100/100" in result.output
        assert "Category Results" in result.output
        assert "Recommendations (" not in result.output

    def test_human_output_lists_gaps(self, minimal_project: Path) -> None:
        """Test that missing items and recommendations are shown."""
        runner = CliRunner()
        result = runner.invoke(cli, ["status", "--path", str(minimal_project)])

        assert result.exit_code == 0
        assert "Missing Items" in result.output
        assert "Improve GitHub integration" in result.output
        assert "copier update" in result.output

    def test_json_output(self, minimal_project: Path) -> None:
        """Test that --format json prints only the report."""
        runner = CliRunner()
        result = runner.invoke(cli, ["status", "--path", str(minimal_project), "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["overall_score"] == 58
        assert data["project_type"] == "library"
        assert [c["name"] for c in data["categories"]][0] == "Basic Structure"

    def test_output_file(self, minimal_project: Path, tmp_path: Path) -> None:
        """Test saving the report next to the terminal output."""
        output = tmp_path / "readiness.json"
        runner = CliRunner()
        result = runner.invoke(
            cli, ["status", "-p", str(minimal_project), "-f", "json", "-o", str(output)]
        )

        assert result.exit_code == 0
        assert json.loads(output.read_text()) == json.loads(result.output)

    def test_layout_override(self, minimal_project: Path) -> None:
        """Test auditing a Python project as a Go module."""
        runner = CliRunner()
        result = runner.invoke(
            cli, ["status", "-p", str(minimal_project), "-f", "json", "--layout", "go"]
        )

        assert result.exit_code == 0
        names = [item["name"] for item in json.loads(result.output)["categories"][0]["items"]]
        assert names[0] == "go.mod"

    def test_missing_path(self, tmp_path: Path) -> None:
        """Test that a missing project path is rejected."""
        runner = CliRunner()
        result = runner.invoke(cli, ["status", "--path", str(tmp_path / "nope")])
        assert result.exit_code != 0

    def test_bad_layout_in_config(self, make_project) -> None:
        """Test that an unknown configured layout exits with an error."""
        project = make_project(["README.md"])
        (project / "pyproject.toml").write_text('[tool.ossready]\nlayout = "cobol"\n')

        runner = CliRunner()
        result = runner.invoke(cli, ["status", "--path", str(project)])

        assert result.exit_code == 1
        assert "Unknown layout" in result.output


    def test_non_table_tool_key(self, minimal_project: Path) -> None:
        """Test that a scalar tool key falls back to the default config."""
        (minimal_project / "pyproject.toml").write_text("tool = 1\n")

        runner = CliRunner()
        result = runner.invoke(cli, ["status", "-p", str(minimal_project), "-f", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["overall_score"] == 58


class TestReadyCommand:
    """Tests for the ready command."""

    def test_ready_project(self, full_project: Path) -> None:
        """Test that a complete project passes the gate."""
        runner = CliRunner()
        result = runner.invoke(cli, ["ready", "--path", str(full_project)])

        assert result.exit_code == 0
        assert "ready for public release" in result.output
        assert "Pre-publication Checklist" in result.output

    def test_blocked_project(self, empty_project: Path) -> None:
        """Test that an empty project is blocked."""
        runner = CliRunner()
        result = runner.invoke(cli, ["ready", "--path", str(empty_project)])

        assert result.exit_code == 1
        assert "Release blocked" in result.output
        assert "License file not found" in result.output

    def test_min_score_option(self, minimal_project: Path) -> None:
        """Test relaxing the minimum score from the command line."""
        runner = CliRunner()
        blocked = runner.invoke(cli, ["ready", "-p", str(minimal_project)])
        relaxed = runner.invoke(cli, ["ready", "-p", str(minimal_project), "--min-score", "50"])

        assert blocked.exit_code == 1
        assert relaxed.exit_code == 0

    def test_min_score_from_config(self, make_project) -> None:
        """Test the release minimum from [tool.ossready]."""
        project = make_project(["uv.lock", "README.md", ".gitignore", "LICENSE", "test_x.py"])
        (project / "pyproject.toml").write_text("[tool.ossready]\nrelease_minimum = 50\n")

        runner = CliRunner()
        result = runner.invoke(cli, ["ready", "-p", str(project), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["minimum_score"] == 50

    def test_json_verdict(self, full_project: Path) -> None:
        """Test the machine-readable verdict."""
        (full_project / "deploy.key").write_text("secret")

        runner = CliRunner()
        result = runner.invoke(cli, ["ready", "--path", str(full_project), "--json"])

        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["passed"] is False
        assert data["sensitive_files"] == ["deploy.key"]
        assert len(data["checklist"]) == 10

    def test_invalid_min_score(self, full_project: Path) -> None:
        """Test that the minimum score must be 0-100."""
        runner = CliRunner()
        result = runner.invoke(cli, ["ready", "-p", str(full_project), "--min-score", "120"])
        assert result.exit_code == 2
