"""Tests for label and signature-line extractors."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from retsinfo_parser.errors import ExtractionError, PatternMismatchError, UnknownMonthError
from retsinfo_parser.labels import (
    parse_centered_section_number,
    parse_chapter_anchor,
    parse_list_item_number,
    parse_ministry_and_date,
    parse_paragraph_number,
    parse_section_number,
)


def test_parse_ministry_and_date_returns_name_and_utc_midnight() -> None:
    ministry, date = parse_ministry_and_date("Sundheds- og Ældreministeriet, den 15. februar 2016")

    assert ministry == "Sundheds- og Ældreministeriet"
    assert date == datetime(2016, 2, 15, 0, 0, tzinfo=timezone.utc)
    assert date.isoformat() == "2016-02-15T00:00:00+00:00"


@pytest.mark.parametrize(
    ("text", "expected_month"),
    [
        ("Justitsministeriet, den 9. november 2015", 11),
        ("Skatteministeriet, den 1. maj 2010", 5),
        ("Finansministeriet, den 31. oktober 1999", 10),
        ("Kirkeministeriet, den 3. December 2001", 12),
    ],
)
def test_parse_ministry_and_date_month_lookup_uses_first_three_letters(text: str, expected_month: int) -> None:
    _ministry, date = parse_ministry_and_date(text)
    assert date.month == expected_month


def test_parse_ministry_and_date_rejects_unknown_month() -> None:
    with pytest.raises(UnknownMonthError) as exc:
        parse_ministry_and_date("Justitsministeriet, den 9. brumaire 2015")

    assert exc.value.month_name == "brumaire"
    assert isinstance(exc.value, PatternMismatchError)
    assert "Unknown month" in str(exc.value)


@pytest.mark.parametrize(
    "text",
    [
        "Justitsministeriet 9. november 2015",
        "Justitsministeriet, den ni. november 2015",
        "",
    ],
)
def test_parse_ministry_and_date_rejects_malformed_lines(text: str) -> None:
    with pytest.raises(PatternMismatchError):
        parse_ministry_and_date(text)


def test_parse_ministry_and_date_rejects_impossible_calendar_date() -> None:
    with pytest.raises(PatternMismatchError):
        parse_ministry_and_date("Justitsministeriet, den 31. februar 2015")


def test_ministry_name_stops_at_first_comma() -> None:
    ministry, _date = parse_ministry_and_date("Miljø- og Fødevareministeriet, den 2. marts 2016")
    assert ministry == "Miljø- og Fødevareministeriet"


def test_section_number_keeps_letter_suffix_as_string() -> None:
    assert parse_section_number("§ 4.") == "4"
    assert parse_section_number("§ 2 a.") == "2 a"
    assert parse_section_number("  §12.  ") == "12"


def test_centered_section_number_is_anchored() -> None:
    assert parse_centered_section_number("§ 167") == "167"
    with pytest.raises(PatternMismatchError):
        parse_centered_section_number("§ 167.")


@pytest.mark.parametrize(
    ("parse", "text", "expected"),
    [
        (parse_paragraph_number, "Stk. 2.", "2"),
        (parse_paragraph_number, "Stk.10.", "10"),
        (parse_list_item_number, "1)", "1"),
        (parse_list_item_number, "a)", "a"),
        (parse_chapter_anchor, "K3", "3"),
    ],
)
def test_marker_extractors(parse, text: str, expected: str) -> None:
    assert parse(text) == expected


@pytest.mark.parametrize(
    ("parse", "text"),
    [
        (parse_section_number, "Stk. 2."),
        (parse_paragraph_number, "Stk. 2"),
        (parse_list_item_number, "1."),
        (parse_chapter_anchor, "Kap1"),
    ],
)
def test_marker_extractors_raise_extraction_error(parse, text: str) -> None:
    with pytest.raises(ExtractionError):
        parse(text)
