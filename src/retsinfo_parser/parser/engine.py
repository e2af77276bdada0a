"""Parser engine folding classified document blocks into a Document tree."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from bs4 import Tag

from retsinfo_parser.errors import DocumentParseError, ExtractionError
from retsinfo_parser.labels import (
    parse_centered_section_number,
    parse_chapter_anchor,
    parse_list_item_number,
    parse_ministry_and_date,
    parse_paragraph_number,
    parse_section_number,
)
from retsinfo_parser.models import Chapter, Diagnostic, Document, ListItem, Paragraph, ParseReport, Section
from retsinfo_parser.page import extract_body_box, extract_document_blocks
from retsinfo_parser.parser.classifier import BlockKind, classify, is_navigation_block
from retsinfo_parser.parser.state import ParserState, SectionMode
from retsinfo_parser.parser.validation import ValidationMixin
from retsinfo_parser.text_utils import child_tags, joined_text, snippet, text_after

logger = logging.getLogger(__name__)

EXTRA_SIGNER_PREFIX = "/ "


class DocumentParser(ValidationMixin):
    """Parser for the body of one retsinformation.dk document page."""

    _HANDLERS: dict[BlockKind, str] = {
        BlockKind.TITLE: "_handle_title",
        BlockKind.PREAMBLE: "_handle_preamble",
        BlockKind.CHAPTER_START: "_handle_chapter_start",
        BlockKind.CHAPTER_TITLE: "_handle_chapter_title",
        BlockKind.SECTION_START: "_handle_section_start",
        BlockKind.CENTERED_SECTION_START: "_handle_centered_section_start",
        BlockKind.PARAGRAPH_START: "_handle_paragraph_start",
        BlockKind.LIST_ITEM_START: "_handle_list_item_start",
        BlockKind.COMMENCEMENT_SEPARATOR: "_handle_commencement_separator",
        BlockKind.COMMENCEMENT_INTRO_TEXT: "_handle_commencement_intro_text",
        BlockKind.SIGNATURE_BLOCK: "_handle_signature_block",
        BlockKind.FOOTNOTE: "_handle_footnote",
        BlockKind.UNRECOGNIZED: "_handle_unrecognized",
    }

    def __init__(self, source: str = "<memory>"):
        self.source = source
        self.report = ParseReport(source=source)
        self._state: Optional[ParserState] = None
        self._index: Optional[int] = None
        self._block: Optional[Tag] = None

    def parse_html(self, html_content: str | bytes) -> Document:
        """Parse a full document page (form R0710)."""
        return self.parse(extract_document_blocks(extract_body_box(html_content)))

    def parse(self, blocks: Iterable[Tag]) -> Document:
        """
        Fold the ordered body blocks of one document into a Document.

        Navigation blocks are dropped first; every remaining block is
        classified and handled in order, then all open nodes are closed.
        Non-fatal problems end up in `self.report.diagnostics`; fatal ones
        raise DocumentParseError.
        """
        self.report = ParseReport(source=self.source)
        self._state = ParserState()

        content = [b for b in blocks if isinstance(b, Tag) and not is_navigation_block(b)]
        kinds = [classify(b) for b in content]
        self._count_expected_elements(kinds)

        try:
            for index, (block, kind) in enumerate(zip(content, kinds)):
                self._index = index
                self._block = block
                getattr(self, self._HANDLERS[kind])(block)
            document = self._state.finish()
        finally:
            self._state = None
            self._index = None
            self._block = None

        self._count_parsed_elements(document)
        self._validate()
        return document

    # ------------------------------------------------------------------
    # Diagnostics

    def _fail(self, reason: str) -> DocumentParseError:
        return DocumentParseError(
            reason,
            block_index=self._index,
            block=snippet(self._block) if self._block is not None else None,
        )

    def _diagnose(self, kind: str, message: str) -> None:
        block = snippet(self._block) if self._block is not None else None
        logger.warning("%s: %s at block %s: %s", self.source, message, self._index, block)
        self.report.diagnostics.append(
            Diagnostic(kind=kind, message=message, block_index=self._index, block=block)
        )

    def _set_field(self, name: str, value: object) -> None:
        document = self._state.document
        if getattr(document, name) is not None:
            self._diagnose("duplicate_field", f"Document {name} set more than once")
        setattr(document, name, value)

    # ------------------------------------------------------------------
    # Handlers, one per BlockKind

    def _handle_title(self, block: Tag) -> None:
        self._set_field("title", joined_text(block))

    def _handle_preamble(self, block: Tag) -> None:
        self._set_field("preamble", joined_text(block))

    def _handle_chapter_start(self, block: Tag) -> None:
        """
        <p class="Kapitel" id="id74dcab74-...">
          <span id="K1"></span>
          <span id="Kap1">Kapitel 1</span>
        </p>
        """
        if self._state.mode is SectionMode.COMMENCEMENT:
            raise self._fail(
                "Chapter marker after commencement provisions; "
                "no chapter may be added once the first commencement separator is seen"
            )

        number = None
        for span in child_tags(block, "span"):
            try:
                number = parse_chapter_anchor(str(span.get("id") or ""))
            except ExtractionError:
                continue
            break
        if number is None:
            raise self._fail("Chapter marker without a K<number> anchor")

        self._state.open_chapter(Chapter(id=block.get("id"), number=number))

    def _handle_chapter_title(self, block: Tag) -> None:
        if self._state.chapter is None:
            raise self._fail("Chapter title without an open chapter")
        self._state.chapter.title = joined_text(block)

    def _handle_section_start(self, block: Tag) -> None:
        """
        <p class="Paragraf" id="id9c6dbd0a-...">
          <span id="P5"></span>
          <span class="ParagrafNr" id="Par5">§ 4.</span>
          Forældelsesfristen er 5 år ...
        </p>
        """
        marker = block.find("span", class_="ParagrafNr", recursive=False)
        if marker is None:
            spans = child_tags(block, "span")
            if len(spans) < 2:
                raise self._fail("Section without a section number span")
            marker = spans[1]

        try:
            number = parse_section_number(marker.get_text())
        except ExtractionError as e:
            raise self._fail(str(e)) from e

        self._state.open_section(Section(id=block.get("id"), number=number, text=text_after(block, marker)))

    def _handle_centered_section_start(self, block: Tag) -> None:
        # <p class="CentreretParagraf">§ 167</p>
        try:
            number = parse_centered_section_number(joined_text(block))
        except ExtractionError as e:
            raise self._fail(str(e)) from e

        self._state.open_section(Section(id=None, number=number, text=None))

    def _handle_paragraph_start(self, block: Tag) -> None:
        """
        <p class="Stk2">
          <span class="StkNr" id="idf870c1fd-...">Stk. 2.</span>
          Er der indrømmet skyldneren løbedage ...
        </p>
        """
        if self._state.section is None:
            raise self._fail("Paragraph without an open section")

        spans = child_tags(block, "span")
        if not spans:
            raise self._fail("Paragraph without a paragraph number span")
        marker = spans[0]

        try:
            number = parse_paragraph_number(marker.get_text())
        except ExtractionError as e:
            raise self._fail(str(e)) from e

        self._state.open_paragraph(
            Paragraph(id=marker.get("id"), number=number, text=text_after(block, marker))
        )

    def _handle_list_item_start(self, block: Tag) -> None:
        """
        <p class="Liste1">
          <span class="Liste1Nr" id="id6ddf7d14-...">1)</span>
          30 år efter den skadevoldende handlings ophør ...
        </p>
        """
        if self._state.paragraph is None:
            raise self._fail("List item without an open paragraph")

        spans = child_tags(block, "span")
        if not spans:
            raise self._fail("List item without an item number span")
        marker = spans[0]

        try:
            number = parse_list_item_number(marker.get_text())
        except ExtractionError as e:
            raise self._fail(str(e)) from e

        self._state.open_list_item(ListItem(id=marker.get("id"), number=number, text=joined_text(block)))

    def _handle_commencement_separator(self, block: Tag) -> None:
        self._state.open_commencement()

    def _handle_commencement_intro_text(self, block: Tag) -> None:
        """
        <p class="IkraftTekst">
          Lov nr. 1336 af 19. december 2008 (...)
          <a class="FodnoteHenvisning" href="#id0377...">1)</a>
          indeholder følgende ikrafttrædelses- og overgangsbestemmelse:
        </p>

        Footnote reference anchors are ignored.
        """
        if self._state.commencement is None:
            raise self._fail("Commencement text without an open commencement")
        self._state.commencement.text = joined_text(block)

    def _handle_signature_block(self, block: Tag) -> None:
        """
        <div class="Givet" id="Givet">
          <p class="Givet" align="center">Justitsministeriet, den 9. november 2015</p>
          <p class="Sign1" align="center">Søren Pind</p>
          <p class="Sign2" align="right">/ Mette Johansen</p>
        </div>
        """
        given = block.select("p.Givet")
        sign1 = block.select("p.Sign1")
        sign2 = block.select("p.Sign2")
        if len(given) != 1 or len(sign1) != 1 or len(sign2) != 1:
            self._diagnose(
                "signature_incomplete",
                "Unexpected signature part "
                f"(Givet={len(given)}, Sign1={len(sign1)}, Sign2={len(sign2)})",
            )
            return

        try:
            ministry_name, date = parse_ministry_and_date(joined_text(given[0]))
        except ExtractionError as e:
            self._diagnose("signature_unparsed", str(e))
            return

        self._set_field("ministry_name", ministry_name)
        self._set_field("date", date)
        self._set_field("signer", joined_text(sign1[0]))

        extra_signer = joined_text(sign2[0])
        if extra_signer.startswith(EXTRA_SIGNER_PREFIX):
            extra_signer = extra_signer[len(EXTRA_SIGNER_PREFIX):]
        self._state.document.extra_signers.append(extra_signer)

    def _handle_footnote(self, block: Tag) -> None:
        """
        <p class="Fodnote">
          <a class="FodnoteNr" name="id0377..." href="#Henvisning_id0377...">1)</a>
          Lovændringen vedrører § 18, stk. 4, og § 19, stk. 6, 2. pkt.
        </p>
        """
        self._state.document.footnotes.append(joined_text(block))

    def _handle_unrecognized(self, block: Tag) -> None:
        self._diagnose("unrecognized_block", f"Unknown element <{block.name}>")
