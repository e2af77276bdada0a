"""CLI module exports."""

from retsinfo_parser.cli.batch import main as batch_main
from retsinfo_parser.cli.fetch import main as fetch_main
from retsinfo_parser.cli.parse import main as parse_main

__all__ = ["parse_main", "fetch_main", "batch_main"]
