#!/usr/bin/env python3
"""Generate JSON Schema artifacts for parsed documents and parse reports."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import fields, is_dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Union, get_args, get_origin, get_type_hints

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from retsinfo_parser.models import Document, ParseReport  # noqa: E402

DOCUMENT_SCHEMA_NAME = "retsinfo-document.schema.json"
REPORT_SCHEMA_NAME = "retsinfo-report.schema.json"
SCHEMA_DRAFT = "https://json-schema.org/draft/2020-12/schema"


PRIMITIVE_SCHEMAS = {
    str: {"type": "string"},
    int: {"type": "integer"},
    bool: {"type": "boolean"},
    datetime: {"type": "string", "format": "date-time"},
}


def _schema_for_type(annotation: Any, defs: dict[str, dict[str, Any]]) -> dict[str, Any]:
    # Optional[...] fields only wrap scalars: str, int and datetime
    if get_origin(annotation) is Union:
        (value_type,) = [arg for arg in get_args(annotation) if arg is not type(None)]
        schema = _schema_for_type(value_type, defs)
        schema["type"] = sorted({schema["type"], "null"})
        return schema

    if get_origin(annotation) is list:
        return {"type": "array", "items": _schema_for_type(get_args(annotation)[0], defs)}

    if get_origin(annotation) is dict:
        return {"type": "object", "additionalProperties": _schema_for_type(get_args(annotation)[1], defs)}

    if annotation in PRIMITIVE_SCHEMAS:
        return dict(PRIMITIVE_SCHEMAS[annotation])

    if is_dataclass(annotation):
        _ensure_dataclass_schema(annotation, defs)
        return {"$ref": f"#/$defs/{annotation.__name__}"}

    # object: free-form values of ParseReport.mismatched_counts
    return {}


def _ensure_dataclass_schema(dataclass_type: type[Any], defs: dict[str, dict[str, Any]]) -> dict[str, Any]:
    class_name = dataclass_type.__name__
    if class_name in defs:
        return defs[class_name]

    schema: dict[str, Any] = {
        "title": class_name,
        "description": dataclass_type.__doc__.strip().splitlines()[0],
        "type": "object",
        "additionalProperties": False,
        "properties": {},
        "required": [],
    }
    defs[class_name] = schema
    hints = get_type_hints(dataclass_type)

    for model_field in fields(dataclass_type):
        field_schema = _schema_for_type(hints[model_field.name], defs)
        field_schema["description"] = model_field.metadata["description"]
        field_schema.update(model_field.metadata.get("json_schema", {}))

        schema["properties"][model_field.name] = field_schema
        schema["required"].append(model_field.name)

    return schema


def _root_schema(model: type[Any], title: str, description: str) -> dict[str, Any]:
    defs: dict[str, dict[str, Any]] = {}
    root = _ensure_dataclass_schema(model, defs)

    schema: dict[str, Any] = {
        "$schema": SCHEMA_DRAFT,
        "title": title,
        "description": description,
    }
    schema.update({key: value for key, value in root.items() if key not in ("title", "description")})
    schema["$defs"] = {name: value for name, value in defs.items() if name != model.__name__}
    return schema


def build_document_schema() -> dict[str, Any]:
    return _root_schema(
        Document,
        title="Retsinformation Document",
        description="JSON contract emitted by `retsinfo-parse` for one parsed document.",
    )


def build_report_schema() -> dict[str, Any]:
    return _root_schema(
        ParseReport,
        title="Retsinformation Parse Report",
        description="JSON contract emitted for parser diagnostics and integrity counts.",
    )


def render_schemas() -> dict[str, str]:
    schemas = {
        DOCUMENT_SCHEMA_NAME: build_document_schema(),
        REPORT_SCHEMA_NAME: build_report_schema(),
    }
    return {
        file_name: json.dumps(schema, ensure_ascii=False, indent=2, sort_keys=True) + "\n"
        for file_name, schema in schemas.items()
    }


def write_schemas(out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    for file_name, content in render_schemas().items():
        (out_dir / file_name).write_text(content, encoding="utf-8")


def check_schemas(out_dir: Path) -> bool:
    mismatched: list[str] = []

    for file_name, expected in render_schemas().items():
        output_path = out_dir / file_name
        if not output_path.exists() or output_path.read_text(encoding="utf-8") != expected:
            mismatched.append(file_name)

    if mismatched:
        print(f"Schema artifacts out of date: {', '.join(sorted(mismatched))}")
        print("Regenerate with: python3 scripts/generate_json_schemas.py")
        return False

    print(f"Schema artifacts are up to date in {out_dir}.")
    return True


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate JSON Schema artifacts for parser models.")
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=REPO_ROOT / "schemas",
        help="Output directory for schema artifacts (default: schemas/).",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Check that existing schema artifacts match generated output.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    out_dir = args.out_dir.resolve()

    if args.check:
        raise SystemExit(0 if check_schemas(out_dir) else 1)

    write_schemas(out_dir)
    print(f"Generated schema artifacts in {out_dir}.")


if __name__ == "__main__":
    main()
