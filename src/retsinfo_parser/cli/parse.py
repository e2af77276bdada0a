"""CLI entrypoint for parsing saved retsinformation.dk document pages."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from retsinfo_parser.errors import RetsinfoError
from retsinfo_parser.models import to_dict
from retsinfo_parser.parser.engine import DocumentParser


def main() -> None:
    parser = argparse.ArgumentParser(description="Parse a retsinformation.dk document page (R0710) to JSON")
    parser.add_argument("--input", "-i", required=True, help="Path to input HTML file")
    parser.add_argument("--out", "-o", help="Path to output JSON file (default: out/json/<name>.json)")
    parser.add_argument(
        "--report",
        "-r",
        nargs="?",
        const=True,
        default=True,
        help="Path to parse report JSON file (default: out/reports/<name>_report.json)",
    )
    parser.add_argument("--no-report", action="store_true", help="Disable parse report generation")
    parser.add_argument("--out-dir", default="out", help="Base output directory (default: out)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log diagnostics while parsing")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    input_path = Path(args.input)
    base_name = input_path.stem
    out_dir = Path(args.out_dir)

    if args.out:
        output_path = Path(args.out)
    else:
        output_path = out_dir / "json" / f"{base_name}.json"

    if args.no_report:
        report_path = None
    elif args.report is True:
        report_path = out_dir / "reports" / f"{base_name}_report.json"
    elif args.report:
        report_path = Path(args.report)
    else:
        report_path = None

    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        raise SystemExit(1)

    with open(input_path, "r", encoding="utf-8") as f:
        html_content = f.read()

    document_parser = DocumentParser(source=str(input_path))
    try:
        document = document_parser.parse_html(html_content)
    except RetsinfoError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(to_dict(document), f, ensure_ascii=False, indent=2)

    print(f"Parsed {len(document.chapters)} chapters, {len(document.commencements)} commencements -> {output_path}")

    if report_path:
        report_path.parent.mkdir(parents=True, exist_ok=True)
        with open(report_path, "w", encoding="utf-8") as f:
            json.dump(to_dict(document_parser.report), f, ensure_ascii=False, indent=2)

        status = "PASS" if document_parser.report.is_valid() else "ISSUES FOUND"
        print(f"Report: {status} -> {report_path}")

    print("\nSummary:")
    for key, count in sorted(document_parser.report.counts_parsed.items()):
        print(f"  {key}: {count}")


if __name__ == "__main__":
    main()
