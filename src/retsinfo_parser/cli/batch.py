"""CLI entrypoint for fetching and parsing many documents."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from retsinfo_parser.batch.runner import fetch_documents, write_job_report
from retsinfo_parser.config import PortalConfig
from retsinfo_parser.portal.client import PortalClient


def main() -> None:
    parser = argparse.ArgumentParser(description="Fetch and parse retsinformation.dk documents in batch")
    parser.add_argument("--ids", nargs="+", type=int, required=True, help="Document ids to fetch")
    parser.add_argument("--out-dir", default="out", help="Base output directory (default: out)")
    parser.add_argument("--delay", type=float, default=1.0, help="Seconds to wait between requests")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable info logging")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    out_dir = Path(args.out_dir)
    jobs = fetch_documents(args.ids, client=PortalClient(PortalConfig.from_env()), out_dir=out_dir, delay=args.delay)
    report_path = out_dir / "reports" / "batch.jsonl"
    write_job_report(jobs, report_path)

    failed = [job for job in jobs if not job.ok]
    print(f"Parsed {len(jobs) - len(failed)}/{len(jobs)} documents -> {out_dir / 'json'}")
    print(f"Report -> {report_path}")
    raise SystemExit(1 if failed else 0)


if __name__ == "__main__":
    main()
