"""Classification of document body blocks by their CSS class tokens."""

from __future__ import annotations

from enum import Enum

from bs4 import Tag

from retsinfo_parser.text_utils import class_tokens

NAVIGATION_CLASS_MARKERS = ("bjelke", "Indholdsfortegnelse")


class BlockKind(Enum):
    """Semantic kind of one document body block."""

    TITLE = "title"
    PREAMBLE = "preamble"
    CHAPTER_START = "chapter_start"
    CHAPTER_TITLE = "chapter_title"
    SECTION_START = "section_start"
    CENTERED_SECTION_START = "centered_section_start"
    PARAGRAPH_START = "paragraph_start"
    LIST_ITEM_START = "list_item_start"
    COMMENCEMENT_SEPARATOR = "commencement_separator"
    COMMENCEMENT_INTRO_TEXT = "commencement_intro_text"
    SIGNATURE_BLOCK = "signature_block"
    FOOTNOTE = "footnote"
    UNRECOGNIZED = "unrecognized"


SECTION_KINDS = frozenset({BlockKind.SECTION_START, BlockKind.CENTERED_SECTION_START})

# Checked in order after the title, preamble and chapter rules.
_CLASS_RULES: tuple[tuple[str, BlockKind], ...] = (
    ("KapitelOverskrift2", BlockKind.CHAPTER_TITLE),
    ("Paragraf", BlockKind.SECTION_START),
    ("CentreretParagraf", BlockKind.CENTERED_SECTION_START),
    ("Stk2", BlockKind.PARAGRAPH_START),
    ("Liste1", BlockKind.LIST_ITEM_START),
)


def is_navigation_block(tag: Tag) -> bool:
    """Return True for navigation scaffolding (table of contents, bars) that carries no content."""
    return any(marker in token for token in class_tokens(tag) for marker in NAVIGATION_CLASS_MARKERS)


def classify(tag: Tag) -> BlockKind:
    """Map one body block to its BlockKind. Never raises."""
    classes = class_tokens(tag)

    if "Titel2" in classes:
        return BlockKind.TITLE
    if "Indledning2" in classes:
        return BlockKind.PREAMBLE
    if "Kapitel" in classes and tag.get("id"):
        return BlockKind.CHAPTER_START

    for token, kind in _CLASS_RULES:
        if token in classes:
            return kind

    if tag.name == "hr" and "IKraftStreg" in classes:
        return BlockKind.COMMENCEMENT_SEPARATOR
    # Casing differs from the separator: IKraftStreg vs IkraftTekst
    if "IkraftTekst" in classes:
        return BlockKind.COMMENCEMENT_INTRO_TEXT
    if "Givet" in str(tag.get("id") or "").split():
        return BlockKind.SIGNATURE_BLOCK
    if "Fodnote" in classes:
        return BlockKind.FOOTNOTE

    return BlockKind.UNRECOGNIZED
