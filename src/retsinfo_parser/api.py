"""High-level library API for single-document fetch and parse workflows."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from bs4 import Tag

from retsinfo_parser.errors import RetsinfoError
from retsinfo_parser.models import Document, ParseReport
from retsinfo_parser.parser.engine import DocumentParser
from retsinfo_parser.portal.client import PortalClient


@dataclass
class ParseResult:
    """Structured parser result for one source document."""

    document: Document
    report: ParseReport
    source: str


@dataclass
class JobResult:
    """Outcome of a single fetch + parse job."""

    document_id: int
    parse: ParseResult | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.parse is not None


def parse_blocks(blocks: Iterable[Tag], source: str = "<memory>") -> ParseResult:
    """Parse an already extracted list of document body blocks."""
    parser = DocumentParser(source=source)
    document = parser.parse(blocks)
    return ParseResult(document=document, report=parser.report, source=source)


def parse_document_html(html_content: str | bytes, source: str = "<memory>") -> ParseResult:
    """Parse a full document page (form R0710) and return structured results."""
    parser = DocumentParser(source=source)
    document = parser.parse_html(html_content)
    return ParseResult(document=document, report=parser.report, source=source)


def parse_document_file(input_path: str | Path) -> ParseResult:
    """Parse a saved document page from disk."""
    path = Path(input_path)
    html_content = path.read_text(encoding="utf-8")
    return parse_document_html(html_content, source=str(path))


def fetch_and_parse(document_id: int, client: Optional[PortalClient] = None) -> JobResult:
    """Fetch and parse one document; fetch and parse errors are returned, not raised."""
    client = client or PortalClient()
    try:
        html_content = client.get_document_html(document_id)
        parse_result = parse_document_html(html_content, source=f"document:{document_id}")
    except RetsinfoError as e:
        return JobResult(document_id=document_id, parse=None, error=str(e))
    return JobResult(document_id=document_id, parse=parse_result)
