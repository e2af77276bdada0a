"""Extract ministries, document-type counts and document listings from form body boxes."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from bs4 import Tag

from retsinfo_parser.errors import PageStructureError
from retsinfo_parser.models import DocumentListing, DocumentType, Ministry, MinistryInfo
from retsinfo_parser.text_utils import class_tokens, joined_text

_RES_HREF_RE = re.compile(r"res=(\d+)")
_NRES_HREF_RE = re.compile(r"nres=(\d+)")
_ID_HREF_RE = re.compile(r"[?&]id=(\d+)")
_NAME_COUNT_RE = re.compile(r"^(.*)\((\d+)\)\s*$", re.DOTALL)
_LISTING_DATE_RE = re.compile(r"^(\d{2})-(\d{2})-(\d{4})$")

LISTING_ROW_CLASSES = ("row", "altRow")


def _href_match(pattern: re.Pattern[str], link: Tag, what: str) -> str:
    m = pattern.search(str(link.get("href") or ""))
    if not m:
        raise PageStructureError(f"Link without {what}: {link.get('href')!r}")
    return m.group(1)


def parse_ministry_list(body_box: Tag) -> list[Ministry]:
    """
    Extract ministries from the R0300 body box.

    The list sits at "div.wrapper1 div.wrapper2 div.listFilter ul"; each link
    carries the ministry id as `res=<id>`.
    """
    ministries = []
    for link in body_box.select("div.listFilter ul li a"):
        ministries.append(
            Ministry(id=_href_match(_RES_HREF_RE, link, "res"), name=link.get_text().strip())
        )
    return ministries


def parse_ministry_info(body_box: Tag, ministry_id: int) -> MinistryInfo:
    """
    Extract the ministry name and document-type counts from the R0310 body box.

    Each `li` of "div.topText div.listFilter ul" holds a link with the text
    "<document type> (<count>)", optionally followed by an image.
    """
    top_text = body_box.select_one("div.topText")
    name_items = top_text.select("div.hdr h2") if top_text else []
    list_items = top_text.select("div.listFilter ul li") if top_text else []

    if not name_items or not name_items[0].get_text(strip=True) or not list_items:
        raise PageStructureError(f"Invalid ministry ID {ministry_id}")

    info = MinistryInfo(id=ministry_id, name=name_items[0].get_text().strip())
    for li in list_items:
        link = li.find("a")
        if link is None:
            raise PageStructureError(f"Document type entry without link in ministry {ministry_id}")
        type_id = int(_href_match(_NRES_HREF_RE, link, "nres"))
        m = _NAME_COUNT_RE.match(joined_text(link))
        if not m:
            raise PageStructureError(f"Unexpected document type entry {link.get_text()!r}")
        info.document_types[type_id] = DocumentType(
            id=type_id,
            name=m.group(1).strip(),
            count=int(m.group(2)),
        )
    return info


def parse_listing_date(text: str) -> datetime:
    """Convert a listing date such as "24-04-1996" to UTC midnight."""
    m = _LISTING_DATE_RE.match(text.strip())
    if not m:
        raise PageStructureError(f"Unexpected listing date {text!r}")
    return datetime(int(m.group(3)), int(m.group(2)), int(m.group(1)), tzinfo=timezone.utc)


def listing_rows(body_box: Tag) -> list[Tag]:
    """Document rows of a listing table, without the header row."""
    return [
        row
        for row in body_box.select("table.tbl tr")
        if any(c in LISTING_ROW_CLASSES for c in class_tokens(row))
    ]


def parse_listing_row(row: Tag) -> DocumentListing:
    # Columns: document link, name, date
    links = row.select("td a")
    if len(links) < 3:
        raise PageStructureError(f"Expected 3 links in listing row, found {len(links)}")
    return DocumentListing(
        id=int(_href_match(_ID_HREF_RE, links[0], "id")),
        name=links[1].get_text().strip(),
        date=parse_listing_date(links[2].get_text()),
    )


def parse_document_listing(body_box: Tag) -> list[DocumentListing]:
    """Extract every document row of one R0310 listing page."""
    return [parse_listing_row(row) for row in listing_rows(body_box)]
