"""Validation mixin comparing classified source blocks with the assembled document."""

from __future__ import annotations

from retsinfo_parser.models import Document
from retsinfo_parser.parser.classifier import SECTION_KINDS, BlockKind


class ValidationMixin:
    """Mixin with pre- and post-parse integrity counts."""

    def _count_expected_elements(self, kinds: list[BlockKind]) -> None:
        self.report.counts_expected = {
            "chapters": sum(1 for k in kinds if k is BlockKind.CHAPTER_START),
            "sections": sum(1 for k in kinds if k in SECTION_KINDS),
            "paragraphs": sum(1 for k in kinds if k is BlockKind.PARAGRAPH_START),
            "list_items": sum(1 for k in kinds if k is BlockKind.LIST_ITEM_START),
            "commencements": sum(1 for k in kinds if k is BlockKind.COMMENCEMENT_SEPARATOR),
            "footnotes": sum(1 for k in kinds if k is BlockKind.FOOTNOTE),
        }

    def _count_parsed_elements(self, document: Document) -> None:
        sections = list(document.iter_sections())
        paragraphs = [p for s in sections for p in s.paragraphs]
        self.report.counts_parsed = {
            "chapters": sum(1 for c in document.chapters if not c.synthetic),
            "sections": len(sections),
            "paragraphs": len(paragraphs),
            "list_items": sum(len(p.list_items) for p in paragraphs),
            "commencements": len(document.commencements),
            "footnotes": len(document.footnotes),
        }

    def _validate(self) -> None:
        expected = self.report.counts_expected
        parsed = self.report.counts_parsed
        for key in sorted(expected):
            if expected[key] != parsed.get(key, 0):
                self.report.mismatched_counts.append(
                    {"key": key, "expected": expected[key], "parsed": parsed.get(key, 0)}
                )
