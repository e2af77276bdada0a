"""Compatibility tests for package public API and CLI module entrypoints."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def test_package_public_imports() -> None:
    import retsinfo_parser

    for name in retsinfo_parser.__all__:
        assert hasattr(retsinfo_parser, name), name

    assert hasattr(retsinfo_parser, "DocumentParser")
    assert hasattr(retsinfo_parser, "PortalClient")
    assert hasattr(retsinfo_parser, "parse_document_html")
    assert hasattr(retsinfo_parser, "fetch_and_parse")
    assert hasattr(retsinfo_parser, "ParseResult")
    assert hasattr(retsinfo_parser, "JobResult")


def test_cli_exports() -> None:
    from retsinfo_parser.cli import batch_main, fetch_main, parse_main

    assert callable(batch_main)
    assert callable(fetch_main)
    assert callable(parse_main)


def test_module_cli_help_commands() -> None:
    modules = [
        "retsinfo_parser.cli.parse",
        "retsinfo_parser.cli.fetch",
        "retsinfo_parser.cli.batch",
    ]

    for module in modules:
        result = subprocess.run(
            [sys.executable, "-m", module, "--help"],
            capture_output=True,
            text=True,
            cwd=str(ROOT),
            timeout=30,
            env={"PYTHONPATH": str(ROOT / "src")},
        )
        assert result.returncode == 0, f"{module} failed: {result.stderr}"
        assert "usage:" in result.stdout.lower()
