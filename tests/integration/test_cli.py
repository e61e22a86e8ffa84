"""
End-to-end tests for the `adr` command line.

Each test runs the typer application in an empty temporary working directory.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List

import yaml
from typer.testing import CliRunner

from adr.main import app
from adr.utils.logging import configure_logging

runner = CliRunner()

ADR_DIR = Path("docs") / "adr"


def _names(directory: Path) -> List[str]:
    return sorted(path.name for path in directory.iterdir())


def _snapshot(root: Path) -> dict:
    return {
        str(path.relative_to(root)): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


class TestInit:
    def test_creates_config_directory_and_first_record(self, workdir: Path):
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0, result.output
        assert "creating config at .adr.yaml" in result.output
        assert (workdir / ".adr.yaml").is_file()
        assert _names(workdir / ADR_DIR) == [
            "0001-record-architecture-decisions.md",
            "0001-record-architecture-decisions.yaml",
        ]
        sidecar = yaml.safe_load((workdir / ADR_DIR / "0001-record-architecture-decisions.yaml").read_text())
        assert sidecar["number"] == 1
        assert sidecar["name"] == "Record architecture decisions"
        assert sidecar["status"] == "Accepted"

    def test_second_init_is_refused_without_changes(self, workdir: Path):
        runner.invoke(app, ["init"])
        before = _snapshot(workdir)

        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "config already exists" in result.output
        assert _snapshot(workdir) == before

    def test_custom_config_path(self, workdir: Path):
        result = runner.invoke(app, ["--config", "custom.yaml", "init"])

        assert result.exit_code == 0, result.output
        assert (workdir / "custom.yaml").is_file()
        assert not (workdir / ".adr.yaml").exists()

class TestNew:
    def test_requires_config(self, workdir: Path):
        result = runner.invoke(app, ["new"], input="Pick a database\n1\n")

        assert result.exit_code == 1
        assert ".adr.yaml missing, run init first" in result.output
        assert not (workdir / ADR_DIR).exists()

    def test_missing_configured_directory_is_fatal(self, workdir: Path):
        (workdir / "other.yaml").write_text("adr_directory: decisions\n")

        result = runner.invoke(app, ["-c", "other.yaml", "new"], input="Adopt typer\n1\n")

        assert result.exit_code == 1
        assert "cannot read directory" in result.output
        assert "decisions" in result.output
        assert not (workdir / ADR_DIR).exists()

    def test_reprompts_on_invalid_answers(self, workdir: Path):
        runner.invoke(app, ["init"])

        result = runner.invoke(app, ["new"], input="abc\nPick a database\nmaybe\n2\n")

        assert result.exit_code == 0, result.output
        assert "Title must be longer than 3 characters" in result.output
        assert "Choose one of" in result.output
        sidecar = yaml.safe_load((workdir / ADR_DIR / "0002-pick-a-database.yaml").read_text())
        assert sidecar["status"] == "Proposed"

    def test_override_template(self, workdir: Path):
        runner.invoke(app, ["init"])
        (workdir / "adr-template.md").write_text("# {{ name }} ({{ status }})\n")
        with (workdir / ".adr.yaml").open("a") as f:
            f.write("adr_template: adr-template.md\n")

        result = runner.invoke(app, ["n"], input="Pick a database\nRejected\n")

        assert result.exit_code == 0, result.output
        assert (workdir / ADR_DIR / "0002-pick-a-database.md").read_text() == "# Pick a database (Rejected)\n"

    def test_broken_override_template_is_fatal(self, workdir: Path):
        runner.invoke(app, ["init"])
        (workdir / "adr-template.md").write_text("{% if %}")
        with (workdir / ".adr.yaml").open("a") as f:
            f.write("adr_template: adr-template.md\n")

        result = runner.invoke(app, ["new"], input="Pick a database\n1\n")

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert not (workdir / ADR_DIR / "0002-pick-a-database.md").exists()


class TestToc:
    def test_end_to_end(self, workdir: Path):
        assert runner.invoke(app, ["init"]).exit_code == 0
        assert runner.invoke(app, ["new"], input="Pick a database\n2\n").exit_code == 0
        assert runner.invoke(app, ["new"], input="Use Postgres, not MySQL!\n1\n").exit_code == 0

        names = _names(workdir / ADR_DIR)
        assert [name for name in names if name.endswith(".yaml")] == [
            "0001-record-architecture-decisions.yaml",
            "0002-pick-a-database.yaml",
            "0003-use-postgres-not-mysql.yaml",
        ]

        result = runner.invoke(app, ["toc"])

        assert result.exit_code == 0, result.output
        readme = (workdir / ADR_DIR / "README.md").read_text()
        links = [line for line in readme.splitlines() if line.startswith("* ")]
        assert links == [
            "* [1. Record architecture decisions](0001-record-architecture-decisions.md)",
            "* [2. Pick a database](0002-pick-a-database.md)",
            "* [3. Use Postgres, not MySQL!](0003-use-postgres-not-mysql.md)",
        ]

    def test_readme_does_not_affect_numbering(self, workdir: Path):
        runner.invoke(app, ["init"])
        runner.invoke(app, ["toc"])

        runner.invoke(app, ["new"], input="Second decision\n1\n")

        assert (workdir / ADR_DIR / "0002-second-decision.md").is_file()

    def test_without_config_or_directory(self, workdir: Path):
        result = runner.invoke(app, ["toc"])

        assert result.exit_code == 1
        assert "no config found, using defaults" in result.output
        assert "Error:" in result.output

    def test_json_diagnostics_on_request(self, workdir: Path):
        runner.invoke(app, ["init"])

        try:
            result = runner.invoke(app, ["toc"], env={"ADR_LOG_LEVEL": "DEBUG", "ADR_LOG_JSON": "1"})
        finally:
            configure_logging(level="WARNING")

        assert result.exit_code == 0, result.output
        payloads = [json.loads(line) for line in result.output.splitlines() if line.startswith("{")]
        written = [p for p in payloads if p["message"] == "TOC written"]
        assert len(written) == 1
        assert written[0]["level"] == "DEBUG"
        assert written[0]["entries"] == 1

    def test_corrupt_sidecar_is_fatal(self, workdir: Path):
        runner.invoke(app, ["init"])
        (workdir / ADR_DIR / "0002-broken.yaml").write_text("number: [")

        result = runner.invoke(app, ["toc"])

        assert result.exit_code == 1
        assert "0002-broken.yaml" in result.output
        assert not (workdir / ADR_DIR / "README.md").exists()


class TestListAndVersion:
    def test_list_shows_records(self, workdir: Path, monkeypatch):
        monkeypatch.setenv("COLUMNS", "200")
        runner.invoke(app, ["init"])
        runner.invoke(app, ["new"], input="Pick a database\n2\n")

        result = runner.invoke(app, ["list"])

        assert result.exit_code == 0, result.output
        assert "0001" in result.output
        assert "0002" in result.output
        assert "2 record(s)" in result.output

    def test_list_empty_directory(self, workdir: Path):
        (workdir / ADR_DIR).mkdir(parents=True)
        (workdir / ".adr.yaml").write_text("adr_directory: ./docs/adr\n")

        result = runner.invoke(app, ["ls"])

        assert result.exit_code == 0, result.output
        assert "No records found." in result.output

    def test_version(self, workdir: Path):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "Version: 0.1.0",
            "Commit: none",
            "Built At: unknown",
            "Built By: unknown",
        ]
