"""Portal retrieval exports."""

from retsinfo_parser.portal.client import PortalClient
from retsinfo_parser.portal.listings import (
    parse_document_listing,
    parse_listing_date,
    parse_ministry_info,
    parse_ministry_list,
)

__all__ = [
    "PortalClient",
    "parse_document_listing",
    "parse_listing_date",
    "parse_ministry_info",
    "parse_ministry_list",
]
