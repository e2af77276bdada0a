"""Label and signature-line parsing utilities used by the document parser."""

import re
from datetime import datetime, timezone

from retsinfo_parser.constants import DANISH_MONTH_ABBREVIATIONS
from retsinfo_parser.errors import PatternMismatchError, UnknownMonthError

CENTERED_SECTION_RE = re.compile(r"^§\s*(\d+)$")
SECTION_MARKER_RE = re.compile(r"^§\s*(\d+(?:\s+[a-z])?)\.$")
PARAGRAPH_MARKER_RE = re.compile(r"^Stk\.\s*(\d+)\.$")
LIST_ITEM_MARKER_RE = re.compile(r"^(\w+)\)$")
CHAPTER_ANCHOR_RE = re.compile(r"^K(\d+\s*[a-zA-Z]?)$")
MINISTRY_AND_DATE_RE = re.compile(r"^([^,]+),\s*den\s*(\d+)\.\s*(\w+)\s*(\d+)$")


def _match(pattern: re.Pattern[str], pattern_name: str, text: str) -> str:
    m = pattern.match(text.strip())
    if not m:
        raise PatternMismatchError(pattern_name, text)
    return m.group(1)


def parse_centered_section_number(text: str) -> str:
    """Parse a centered section marker such as `§ 167` into `167`."""
    return _match(CENTERED_SECTION_RE, "centered section number", text)


def parse_section_number(text: str) -> str:
    """Parse a section marker such as `§ 4.` or `§ 2 a.` into `4` or `2 a`."""
    return _match(SECTION_MARKER_RE, "section marker", text)


def parse_paragraph_number(text: str) -> str:
    """Parse a paragraph marker such as `Stk. 2.` into `2`."""
    return _match(PARAGRAPH_MARKER_RE, "paragraph marker", text)


def parse_list_item_number(text: str) -> str:
    """Parse a list-item marker such as `1)` into `1`."""
    return _match(LIST_ITEM_MARKER_RE, "list item marker", text)


def parse_chapter_anchor(anchor_id: str) -> str:
    """Parse a chapter anchor id such as `K3` into `3`."""
    return _match(CHAPTER_ANCHOR_RE, "chapter anchor", anchor_id)


def parse_ministry_and_date(text: str) -> tuple[str, datetime]:
    """
    Parse a signature line into ministry name and signing date.

    "Sundheds- og Ældreministeriet, den 15. februar 2016" becomes
    ("Sundheds- og Ældreministeriet", 2016-02-15 00:00 UTC). The month is
    looked up by its first three letters; day and year are taken as printed.

    Raises PatternMismatchError for malformed lines and impossible dates,
    UnknownMonthError when the month is not in the Danish month table.
    """
    text = text.strip()
    m = MINISTRY_AND_DATE_RE.match(text)
    if not m:
        raise PatternMismatchError("ministry and date", text)

    ministry_name = m.group(1)
    day = int(m.group(2))
    month_name = m.group(3)
    year = int(m.group(4))

    month = DANISH_MONTH_ABBREVIATIONS.get(month_name[:3].lower())
    if month is None:
        raise UnknownMonthError(month_name, text)

    try:
        date = datetime(year, month, day, tzinfo=timezone.utc)
    except ValueError:
        raise PatternMismatchError("calendar date", text) from None

    return ministry_name, date
