"""Contract tests for generated JSON Schemas."""

from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

import pytest
from builders import blocks, chapter, document_164746_page
from jsonschema import Draft202012Validator, ValidationError

from retsinfo_parser.api import parse_blocks, parse_document_html
from retsinfo_parser.models import Document, ParseReport, to_dict

REPO_ROOT = Path(__file__).resolve().parents[1]
GENERATOR = REPO_ROOT / "scripts" / "generate_json_schemas.py"


@pytest.fixture(scope="module")
def schemas_dir(tmp_path_factory) -> Path:
    out_dir = tmp_path_factory.mktemp("schemas")
    result = subprocess.run(
        [sys.executable, str(GENERATOR), "--out-dir", str(out_dir)],
        cwd=REPO_ROOT,
        capture_output=True,
        text=True,
        check=False,
    )
    assert result.returncode == 0, result.stdout + result.stderr
    return out_dir


def _load_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def test_document_schema_is_valid_and_accepts_parsed_document(schemas_dir: Path) -> None:
    schema = _load_json(schemas_dir / "retsinfo-document.schema.json")
    payload = to_dict(parse_document_html(document_164746_page()).document)

    Draft202012Validator.check_schema(schema)
    Draft202012Validator(schema).validate(payload)


def test_document_schema_accepts_empty_document(schemas_dir: Path) -> None:
    schema = _load_json(schemas_dir / "retsinfo-document.schema.json")

    Draft202012Validator(schema).validate(to_dict(Document()))


def test_document_schema_rejects_unknown_fields(schemas_dir: Path) -> None:
    schema = _load_json(schemas_dir / "retsinfo-document.schema.json")
    payload = {**to_dict(Document()), "units": []}

    with pytest.raises(ValidationError):
        Draft202012Validator(schema).validate(payload)


def test_report_schema_is_valid_and_accepts_report_payloads(schemas_dir: Path) -> None:
    schema = _load_json(schemas_dir / "retsinfo-report.schema.json")
    report = parse_blocks(blocks(chapter(1), '<p class="Tabel">Celle</p>')).report
    assert report.diagnostics

    Draft202012Validator.check_schema(schema)
    Draft202012Validator(schema).validate(to_dict(report))
    Draft202012Validator(schema).validate(to_dict(parse_document_html(document_164746_page()).report))
    Draft202012Validator(schema).validate(to_dict(ParseReport(source="inline.html")))


def test_report_schema_restricts_diagnostic_kinds(schemas_dir: Path) -> None:
    schema = _load_json(schemas_dir / "retsinfo-report.schema.json")
    payload = to_dict(ParseReport(source="inline.html"))
    payload["diagnostics"] = [{"kind": "bogus", "message": "x", "block_index": 0, "block": None}]

    with pytest.raises(ValidationError):
        Draft202012Validator(schema).validate(payload)


def test_document_schema_field_types(schemas_dir: Path) -> None:
    schema = _load_json(schemas_dir / "retsinfo-document.schema.json")
    properties = schema["properties"]
    chapter = schema["$defs"]["Chapter"]["properties"]

    assert properties["date"]["type"] == ["null", "string"]
    assert properties["date"]["format"] == "date-time"
    assert properties["chapters"]["items"] == {"$ref": "#/$defs/Chapter"}
    assert chapter["synthetic"]["type"] == "boolean"
    assert chapter["number"]["type"] == ["null", "string"]
    assert set(schema["required"]) == set(properties)
