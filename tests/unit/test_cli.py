"""
Unit tests for the CLI.
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from picoschema import __version__
from picoschema.cli import app

DOCUMENTS_DIR = Path(__file__).parent.parent / "fixtures" / "documents"

runner = CliRunner()


@pytest.fixture
def person_file(tmp_path):
    path = tmp_path / "person.yaml"
    path.write_text("name: string\nage?: integer\nemail: string\n", encoding="utf-8")
    return path


def test_version():
    """Test --version prints the package version."""
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_convert_prints_schema(person_file):
    """Test convert writes the JSON Schema to stdout."""
    result = runner.invoke(app, ["convert", str(person_file)])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "age": {"type": "integer"},
            "email": {"type": "string"},
        },
        "required": ["name", "email"],
        "additionalProperties": False,
    }


def test_convert_canonical(person_file):
    """Test --canonical sorts required."""
    result = runner.invoke(app, ["convert", str(person_file), "--canonical"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["required"] == ["email", "name"]


def test_convert_to_file(person_file, tmp_path):
    """Test --output writes the schema to disk."""
    output = tmp_path / "out" / "person.schema.json"

    result = runner.invoke(app, ["convert", str(person_file), "--output", str(output), "--check"])

    assert result.exit_code == 0
    written = json.loads(output.read_text(encoding="utf-8"))
    assert written["required"] == ["name", "email"]


def test_convert_translation_error():
    """Test translation errors exit with status 1 and a message."""
    result = runner.invoke(app, ["convert", str(DOCUMENTS_DIR / "bad_modifier.yaml")])

    assert result.exit_code == 1
    assert "record" in result.output


def test_convert_unencodable_value(tmp_path):
    """Test a value JSON cannot encode exits with status 1 and a message."""
    path = tmp_path / "dated.yaml"
    path.write_text("type: string\ndefault: !!timestamp 2024-01-01\n", encoding="utf-8")

    result = runner.invoke(app, ["convert", str(path)])

    assert result.exit_code == 1
    assert "serializable" in result.output


def test_convert_empty_document(tmp_path):
    """Test an empty document is reported."""
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    result = runner.invoke(app, ["convert", str(path)])

    assert result.exit_code == 1
    assert "No schema" in result.output


def test_convert_missing_file(tmp_path):
    """Test Typer rejects a missing source file."""
    result = runner.invoke(app, ["convert", str(tmp_path / "nope.yaml")])

    assert result.exit_code != 0


def test_check_valid(person_file):
    """Test check succeeds on a good document."""
    result = runner.invoke(app, ["check", str(person_file)])

    assert result.exit_code == 0
    assert "valid" in result.output


def test_check_invalid_passthrough(tmp_path):
    """Test check fails when a passthrough value breaks the meta-schema."""
    path = tmp_path / "bad.yaml"
    path.write_text("type: integer\nminimum: low\n", encoding="utf-8")

    result = runner.invoke(app, ["check", str(path)])

    assert result.exit_code == 1
    assert "minimum" in result.output
