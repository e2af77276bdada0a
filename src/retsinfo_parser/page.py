"""Locating the content boxes of a portal page."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from retsinfo_parser.constants import BODY_BOX_SELECTOR, DOCUMENT_BODY_SELECTOR
from retsinfo_parser.errors import PageStructureError
from retsinfo_parser.text_utils import child_tags


def extract_body_box(html_content: str | bytes) -> Tag:
    """
    Return the body box of a form page, without header, footer and side boxes.

    The box sits at "form#aspnetForm div.divCon1 ... div.divCon4 div.bodyBox";
    only its class is relied on.
    """
    soup = BeautifulSoup(html_content, "lxml")
    body_boxes = soup.select(BODY_BOX_SELECTOR)
    if len(body_boxes) != 1:
        raise PageStructureError(f"Expected 1 body box. Found {len(body_boxes)} body boxes")
    return body_boxes[0]


def extract_document_blocks(body_box: Tag) -> list[Tag]:
    """Return the child elements of the document body inside a document page body box."""
    main_divs = body_box.select(DOCUMENT_BODY_SELECTOR)
    if len(main_divs) != 1:
        raise PageStructureError(
            f"Expected 1 {DOCUMENT_BODY_SELECTOR}, found {len(main_divs)}"
        )
    return child_tags(main_divs[0])
