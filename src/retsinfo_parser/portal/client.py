"""HTTP client for the retsinformation.dk form pages."""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests
from bs4 import Tag

from retsinfo_parser.config import PortalConfig
from retsinfo_parser.constants import FORM_DOCUMENT, FORM_MINISTRIES, FORM_MINISTRY
from retsinfo_parser.errors import FetchError
from retsinfo_parser.models import DocumentListing, Ministry, MinistryInfo
from retsinfo_parser.page import extract_body_box
from retsinfo_parser.portal.listings import (
    listing_rows,
    parse_listing_row,
    parse_ministry_info,
    parse_ministry_list,
)

logger = logging.getLogger(__name__)


class PortalClient:
    """Fetches portal forms and hands their body boxes to the extractors."""

    def __init__(self, config: Optional[PortalConfig] = None):
        self.config = config or PortalConfig()

    def fetch_page(self, form: str, query: Optional[dict[str, Any]] = None) -> str:
        """GET one form page and return its HTML."""
        url = self.config.form_url(form)
        logger.debug("GET %s %s", url, query or {})
        try:
            response = requests.get(
                url,
                params=query or None,
                timeout=self.config.timeout,
                headers={"User-Agent": self.config.user_agent},
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"Failed to fetch {url} {query or {}}: {e}") from e
        return response.text

    def fetch_body_box(self, form: str, query: Optional[dict[str, Any]] = None) -> Tag:
        return extract_body_box(self.fetch_page(form, query))

    def list_ministries(self) -> list[Ministry]:
        return parse_ministry_list(self.fetch_body_box(FORM_MINISTRIES))

    def get_ministry_info(self, ministry_id: int) -> MinistryInfo:
        body_box = self.fetch_body_box(FORM_MINISTRY, {"res": ministry_id})
        return parse_ministry_info(body_box, ministry_id)

    def list_ministry_documents(
        self,
        ministry_id: int,
        document_type: int,
        limit: int = 0,
        offset: int = 0,
    ) -> list[DocumentListing]:
        """
        List documents of one type from one ministry, following pagination.

        A limit of zero or less fetches all documents. Pages are requested
        until one returns fewer rows than the page size or the limit is reached.
        """
        if offset < 0:
            raise ValueError("offset must be >= 0")

        documents: list[DocumentListing] = []
        skipped = 0
        page = 1
        while True:
            body_box = self.fetch_body_box(
                FORM_MINISTRY, {"res": ministry_id, "nres": document_type, "page": page}
            )
            rows = listing_rows(body_box)
            for row in rows:
                if limit > 0 and len(documents) >= limit:
                    return documents
                if skipped < offset:
                    skipped += 1
                    continue
                documents.append(parse_listing_row(row))

            if len(rows) < self.config.page_size or (limit > 0 and len(documents) >= limit):
                return documents
            page += 1

    def get_document_html(self, document_id: int) -> str:
        return self.fetch_page(FORM_DOCUMENT, {"id": document_id})
