"""Per-document parser state: the open node path and the flush chain."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from retsinfo_parser.models import Chapter, Commencement, Document, ListItem, Paragraph, Section


class SectionMode(Enum):
    """Where closed sections are appended."""

    CHAPTER = "chapter"
    COMMENCEMENT = "commencement"


@dataclass
class ParserState:
    """
    Open nodes of the document under construction.

    At most one node of each level is open. Closing a node first closes its
    open descendants, so a node is appended to its parent exactly once and
    only after all of its children.
    """

    document: Document = field(default_factory=Document)
    mode: SectionMode = SectionMode.CHAPTER
    chapter: Optional[Chapter] = None
    section: Optional[Section] = None
    paragraph: Optional[Paragraph] = None
    list_item: Optional[ListItem] = None
    commencement: Optional[Commencement] = None

    def close_list_item(self) -> None:
        if self.list_item is None:
            return
        if self.paragraph is None:
            raise RuntimeError("open list item without an open paragraph")
        self.paragraph.list_items.append(self.list_item)
        self.list_item = None

    def close_paragraph(self) -> None:
        self.close_list_item()
        if self.paragraph is None:
            return
        if self.section is None:
            raise RuntimeError("open paragraph without an open section")
        self.section.paragraphs.append(self.paragraph)
        self.paragraph = None

    def close_section(self) -> None:
        self.close_paragraph()
        if self.section is None:
            return
        if self.mode is SectionMode.CHAPTER:
            if self.chapter is None:
                self.chapter = Chapter(id=None, number=None, synthetic=True)
            self.chapter.sections.append(self.section)
        else:
            # Commencement mode always has an open commencement
            self.commencement.sections.append(self.section)
        self.section = None

    def close_chapter(self) -> None:
        self.close_section()
        if self.chapter is None:
            return
        self.document.chapters.append(self.chapter)
        self.chapter = None

    def close_commencement(self) -> None:
        self.close_section()
        if self.commencement is None:
            return
        self.document.commencements.append(self.commencement)
        self.commencement = None

    def open_chapter(self, chapter: Chapter) -> None:
        self.close_chapter()
        self.chapter = chapter

    def open_section(self, section: Section) -> None:
        self.close_section()
        self.section = section

    def open_paragraph(self, paragraph: Paragraph) -> None:
        self.close_paragraph()
        self.paragraph = paragraph

    def open_list_item(self, list_item: ListItem) -> None:
        self.close_list_item()
        self.list_item = list_item

    def open_commencement(self) -> None:
        """Start a new commencement block, switching to commencement mode on first use."""
        self.close_section()
        if self.mode is SectionMode.CHAPTER:
            self.close_chapter()
            self.mode = SectionMode.COMMENCEMENT
        self.close_commencement()
        self.commencement = Commencement()

    def finish(self) -> Document:
        """Close every open node and return the assembled document."""
        self.close_chapter()
        self.close_commencement()
        return self.document
