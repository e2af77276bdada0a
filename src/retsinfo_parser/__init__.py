"""Public package API for retsinfo-parser."""

from retsinfo_parser.api import (
    JobResult,
    ParseResult,
    fetch_and_parse,
    parse_blocks,
    parse_document_file,
    parse_document_html,
)
from retsinfo_parser.config import PortalConfig
from retsinfo_parser.errors import (
    DocumentParseError,
    ExtractionError,
    FetchError,
    PageStructureError,
    PatternMismatchError,
    RetsinfoError,
    UnknownMonthError,
)
from retsinfo_parser.labels import parse_ministry_and_date
from retsinfo_parser.models import (
    Chapter,
    Commencement,
    Diagnostic,
    Document,
    DocumentListing,
    DocumentType,
    ListItem,
    Ministry,
    MinistryInfo,
    Paragraph,
    ParseReport,
    Section,
    to_dict,
)
from retsinfo_parser.parser.classifier import BlockKind, classify
from retsinfo_parser.parser.engine import DocumentParser
from retsinfo_parser.portal.client import PortalClient

__all__ = [
    "DocumentParser",
    "BlockKind",
    "classify",
    "parse_blocks",
    "parse_document_html",
    "parse_document_file",
    "fetch_and_parse",
    "parse_ministry_and_date",
    "ParseResult",
    "JobResult",
    "PortalClient",
    "PortalConfig",
    "Document",
    "Chapter",
    "Section",
    "Paragraph",
    "ListItem",
    "Commencement",
    "Diagnostic",
    "ParseReport",
    "Ministry",
    "MinistryInfo",
    "DocumentType",
    "DocumentListing",
    "to_dict",
    "RetsinfoError",
    "ExtractionError",
    "PatternMismatchError",
    "UnknownMonthError",
    "DocumentParseError",
    "PageStructureError",
    "FetchError",
]
