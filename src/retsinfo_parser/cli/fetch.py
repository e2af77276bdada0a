"""CLI entrypoint for fetching ministries, listings and documents from the portal."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from retsinfo_parser.api import fetch_and_parse
from retsinfo_parser.config import PortalConfig
from retsinfo_parser.constants import DOCUMENT_FILTERS
from retsinfo_parser.errors import RetsinfoError
from retsinfo_parser.models import to_dict
from retsinfo_parser.portal.client import PortalClient


def _emit(data: object, out: str | None) -> None:
    text = json.dumps(data, ensure_ascii=False, indent=2)
    if out:
        path = Path(out)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text + "\n", encoding="utf-8")
        print(f"Wrote {path}")
    else:
        print(text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fetch data from retsinformation.dk")
    parser.add_argument("--base-url", help="Portal base URL (default: $RETSINFO_BASE_URL or retsinformation.dk)")
    parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds")
    parser.add_argument("--out", "-o", help="Write JSON to this file instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("ministries", help="List ministries")

    ministry = commands.add_parser("ministry", help="Show document-type counts for a ministry")
    ministry.add_argument("ministry_id", type=int)

    documents = commands.add_parser("documents", help="List documents of one type from a ministry")
    documents.add_argument("ministry_id", type=int)
    documents.add_argument("document_type", type=int, choices=DOCUMENT_FILTERS, help="Document type (1-6)")
    documents.add_argument("--limit", type=int, default=0, help="Maximum number of documents (default: all)")
    documents.add_argument("--offset", type=int, default=0, help="Number of leading documents to skip")

    document = commands.add_parser("document", help="Fetch and parse one document")
    document.add_argument("document_id", type=int)
    return parser


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = PortalConfig.from_env()
    if args.base_url:
        config.base_url = args.base_url
    if args.timeout:
        config.timeout = args.timeout
    client = PortalClient(config)

    try:
        if args.command == "ministries":
            _emit([to_dict(m) for m in client.list_ministries()], args.out)
        elif args.command == "ministry":
            _emit(to_dict(client.get_ministry_info(args.ministry_id)), args.out)
        elif args.command == "documents":
            listings = client.list_ministry_documents(
                args.ministry_id, args.document_type, limit=args.limit, offset=args.offset
            )
            _emit([to_dict(d) for d in listings], args.out)
        else:
            job = fetch_and_parse(args.document_id, client=client)
            if not job.ok:
                print(f"Error: {job.error}", file=sys.stderr)
                raise SystemExit(1)
            _emit(to_dict(job.parse.document), args.out)
    except RetsinfoError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
