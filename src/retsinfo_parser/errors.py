"""Exception hierarchy for extraction, parsing and portal retrieval."""

from __future__ import annotations


class RetsinfoError(Exception):
    """Base class for all errors raised by retsinfo-parser."""


class ExtractionError(RetsinfoError, ValueError):
    """A text fragment could not be turned into a structured value."""


class PatternMismatchError(ExtractionError):
    """Text does not match the grammar expected by an extractor."""

    def __init__(self, pattern_name: str, text: str):
        self.pattern_name = pattern_name
        self.text = text
        super().__init__(f"Invalid {pattern_name}: {text!r}")


class UnknownMonthError(PatternMismatchError):
    """Month name has no entry in the Danish month table."""

    def __init__(self, month_name: str, text: str):
        self.month_name = month_name
        self.pattern_name = "month"
        self.text = text
        ExtractionError.__init__(self, f'Unknown month "{month_name}" in {text!r}')


class DocumentParseError(RetsinfoError):
    """Fatal error while folding document blocks into a tree.

    Carries the position of the failing block in the filtered block stream
    and a short rendering of the block for diagnostics.
    """

    def __init__(self, reason: str, *, block_index: int | None = None, block: str | None = None):
        self.reason = reason
        self.block_index = block_index
        self.block = block
        location = f" (block {block_index})" if block_index is not None else ""
        super().__init__(f"{reason}{location}")


class PageStructureError(RetsinfoError):
    """A fetched page is missing markup the extractors depend on."""


class FetchError(RetsinfoError):
    """HTTP retrieval of a portal page failed."""
