"""Integration tests for CLI commands.

These drive the command line end to end against a small dictionary
exported as one CSV file per page.
"""

import json

from click.testing import CliRunner
import pytest

from acceleratorkit.cli import app


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture
def dictionary_dir(tmp_path, monkeypatch, write_csv_page, body_row):
    """A two page dictionary; the working directory holds no config file."""
    monkeypatch.chdir(tmp_path)
    directory = tmp_path / "dictionary"
    write_csv_page(
        directory,
        "Registration",
        [
            body_row(
                label="Danger signs",
                name="Danger_Signs",
                type="MC (select multiple)",
                resource="Observation",
            ),
            body_row(choices="Bleeding", openmrs_id="D1"),
            body_row(choices="Fever", openmrs_id="D2"),
        ],
    )
    write_csv_page(
        directory,
        "Vitals",
        [body_row(label="Pulse", name="Pulse_Rate", type="Integer", resource="Observation")],
    )
    return directory


@pytest.mark.integration
class TestProcessCommand:
    """Integration tests for the process command."""

    def test_process_help(self, runner):
        result = runner.invoke(app, ["process", "--help"])

        assert result.exit_code == 0
        assert "SPREADSHEET" in result.output
        assert "--encoding" in result.output
        assert "--canonical-base" in result.output

    def test_process_json(self, runner, dictionary_dir, tmp_path):
        output_dir = tmp_path / "output"

        result = runner.invoke(
            app,
            [
                "process",
                str(dictionary_dir),
                "-p",
                "Registration,Vitals",
                "--output-dir",
                str(output_dir),
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Artifact Summary" in result.output
        profile = json.loads(
            (output_dir / "structuredefinition/structuredefinition-pulse-rate.json").read_text(
                encoding="utf-8"
            )
        )
        assert profile["type"] == "Observation"
        code_system = json.loads(
            (output_dir / "codesystem/codesystem-danger-signs-codes.json").read_text(
                encoding="utf-8"
            )
        )
        assert [c["code"] for c in code_system["concept"]] == ["D1", "D2"]
        assert (output_dir / "valueset/valueset-danger-signs-values.json").exists()
        assert (output_dir / "ig.json").exists()
        assert (output_dir / "ig.xml").exists()

    def test_process_xml(self, runner, dictionary_dir, tmp_path):
        output_dir = tmp_path / "output"

        result = runner.invoke(
            app,
            [
                "process",
                str(dictionary_dir),
                "-p",
                "Vitals",
                "--encoding",
                "xml",
                "--output-dir",
                str(output_dir),
                "--canonical-base",
                "http://example.org/fhir",
            ],
        )

        assert result.exit_code == 0, result.output
        text = (
            output_dir / "structuredefinition/structuredefinition-pulse-rate.xml"
        ).read_text(encoding="utf-8")
        assert 'value="http://example.org/fhir/StructureDefinition/pulse-rate"' in text

    def test_missing_page_fails(self, runner, dictionary_dir, tmp_path):
        result = runner.invoke(
            app,
            [
                "process",
                str(dictionary_dir),
                "-p",
                "Labs",
                "--output-dir",
                str(tmp_path / "output"),
            ],
        )

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_no_pages_fails(self, runner, dictionary_dir):
        result = runner.invoke(app, ["process", str(dictionary_dir)])

        assert result.exit_code == 1
        assert "at least one page is required" in result.output


@pytest.mark.integration
class TestElementsCommand:
    """Integration tests for the elements command."""

    def test_lists_elements(self, runner, dictionary_dir):
        result = runner.invoke(
            app,
            ["elements", str(dictionary_dir), "-p", "Registration", "-p", "Vitals"],
            env={"COLUMNS": "200"},
        )

        assert result.exit_code == 0, result.output
        assert "Danger_Signs" in result.output
        assert "Pulse_Rate" in result.output
        assert not (dictionary_dir.parent / "output").exists()
