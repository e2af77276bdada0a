"""Tests that the schema generator output is stable and its --check mode works."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
GENERATOR = REPO_ROOT / "scripts" / "generate_json_schemas.py"
SCHEMA_FILES = ("retsinfo-document.schema.json", "retsinfo-report.schema.json")


def _run_generator(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, str(GENERATOR), *args],
        cwd=REPO_ROOT,
        capture_output=True,
        text=True,
        check=False,
    )


def test_generator_output_is_deterministic(tmp_path: Path) -> None:
    first_dir = tmp_path / "first"
    second_dir = tmp_path / "second"

    for out_dir in (first_dir, second_dir):
        result = _run_generator("--out-dir", str(out_dir))
        assert result.returncode == 0, result.stdout + result.stderr

    for file_name in SCHEMA_FILES:
        assert (first_dir / file_name).read_bytes() == (second_dir / file_name).read_bytes()


def test_check_mode_fails_when_artifacts_are_missing(tmp_path: Path) -> None:
    result = _run_generator("--check", "--out-dir", str(tmp_path / "missing"))

    assert result.returncode == 1
    assert "Schema artifacts out of date" in result.stdout


def test_check_mode_passes_for_generated_artifacts(tmp_path: Path) -> None:
    generated_dir = tmp_path / "schemas"

    generate_result = _run_generator("--out-dir", str(generated_dir))
    assert generate_result.returncode == 0, generate_result.stdout + generate_result.stderr

    check_result = _run_generator("--check", "--out-dir", str(generated_dir))
    assert check_result.returncode == 0, check_result.stdout + check_result.stderr
