"""Core data models for parsed legal documents, portal listings and parse reports."""

from dataclasses import MISSING, asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional


def schema_field(
    description: str,
    *,
    default: Any = MISSING,
    default_factory: Any = MISSING,
    json_schema: dict[str, Any] | None = None,
) -> Any:
    """Create a dataclass field with reusable JSON Schema metadata."""

    metadata: dict[str, Any] = {"description": description}
    if json_schema is not None:
        metadata["json_schema"] = json_schema

    kwargs: dict[str, Any] = {"metadata": metadata}
    if default is not MISSING:
        kwargs["default"] = default
    if default_factory is not MISSING:
        kwargs["default_factory"] = default_factory
    return field(**kwargs)


@dataclass
class ListItem:
    """A numbered sub-point `N)` within a paragraph."""

    id: Optional[str] = schema_field("Source element id of the item number span, if present.")
    number: str = schema_field("Item label as printed, e.g. `1` or `a`.")
    text: str = schema_field("Item text with surrounding whitespace trimmed.")


@dataclass
class Paragraph:
    """A numbered `Stk.` clause within a section."""

    id: Optional[str] = schema_field("Source element id of the `Stk.` number span, if present.")
    number: str = schema_field("Paragraph number as printed, e.g. `2`.")
    text: str = schema_field("Paragraph text with surrounding whitespace trimmed.")
    list_items: list[ListItem] = schema_field(
        default_factory=list,
        description="Numbered list items in source order.",
    )


@dataclass
class Section:
    """A numbered `§` provision."""

    id: Optional[str] = schema_field("Source element id; null for centered section markers.")
    number: str = schema_field("Section number as printed, may carry a letter suffix, e.g. `2 a`.")
    text: Optional[str] = schema_field(
        "Section body text; null for a centered section marker whose content follows as paragraphs."
    )
    paragraphs: list[Paragraph] = schema_field(
        default_factory=list,
        description="`Stk.` paragraphs in source order.",
    )


@dataclass
class Chapter:
    """A chapter grouping sections.

    Synthetic chapters stand in for an implicit chapter boundary: they hold
    sections that appear before any explicit chapter marker.
    """

    id: Optional[str] = schema_field("Source element id; null for synthetic chapters.")
    number: Optional[str] = schema_field("Chapter number from the `K<number>` anchor; null for synthetic chapters.")
    title: Optional[str] = schema_field(default=None, description="Chapter heading, if present.")
    sections: list[Section] = schema_field(default_factory=list, description="Sections in source order.")
    synthetic: bool = schema_field(
        default=False,
        description="True when the chapter has no marker in the source and was created implicitly.",
    )


@dataclass
class Commencement:
    """One block of commencement and transitional provisions."""

    text: Optional[str] = schema_field(default=None, description="Introductory text of the block.")
    sections: list[Section] = schema_field(default_factory=list, description="Sections in source order.")


@dataclass
class Document:
    """One parsed legal act."""

    title: Optional[str] = schema_field(default=None, description="Document title.")
    preamble: Optional[str] = schema_field(default=None, description="Introductory text, if present.")
    signer: Optional[str] = schema_field(default=None, description="Primary signer name.")
    extra_signers: list[str] = schema_field(
        default_factory=list,
        description="Co-signer names with the leading `/ ` marker removed.",
    )
    ministry_name: Optional[str] = schema_field(default=None, description="Signing ministry name.")
    date: Optional[datetime] = schema_field(default=None, description="Signing date at UTC midnight.")
    chapters: list[Chapter] = schema_field(default_factory=list, description="Chapters in source order.")
    commencements: list[Commencement] = schema_field(
        default_factory=list,
        description="Commencement and transitional provision blocks in source order.",
    )
    footnotes: list[str] = schema_field(default_factory=list, description="Footnote texts in source order.")

    def iter_sections(self):
        for chapter in self.chapters:
            yield from chapter.sections
        for commencement in self.commencements:
            yield from commencement.sections


@dataclass
class Diagnostic:
    """A non-fatal problem recorded while parsing one document."""

    kind: str = schema_field(
        "Diagnostic category.",
        json_schema={
            "enum": [
                "unrecognized_block",
                "signature_incomplete",
                "signature_unparsed",
                "duplicate_field",
            ]
        },
    )
    message: str = schema_field("Human-readable description of the problem.")
    block_index: Optional[int] = schema_field(
        default=None,
        description="Position of the offending block in the filtered block stream.",
    )
    block: Optional[str] = schema_field(default=None, description="Truncated HTML of the offending block.")


@dataclass
class ParseReport:
    """Diagnostics and integrity counts for one parsed document."""

    source: str = schema_field("Source identifier (file path, URL or document id).")
    counts_expected: dict[str, int] = schema_field(
        default_factory=dict,
        description="Structural counts inferred from classified source blocks.",
    )
    counts_parsed: dict[str, int] = schema_field(
        default_factory=dict,
        description="Structural counts found in the assembled document.",
    )
    diagnostics: list[Diagnostic] = schema_field(
        default_factory=list,
        description="Non-fatal problems in block order.",
    )
    mismatched_counts: list[dict[str, object]] = schema_field(
        default_factory=list,
        description="Count keys whose expected and parsed values differ.",
    )

    def is_valid(self) -> bool:
        return not self.diagnostics and not self.mismatched_counts


@dataclass
class Ministry:
    """A ministry listed on the portal."""

    id: str = schema_field("Ministry id (the `res` query argument).")
    name: str = schema_field("Ministry name.")


@dataclass
class DocumentType:
    """Document count of one type published by a ministry."""

    id: int = schema_field("Document-type id (the `nres` query argument).")
    name: str = schema_field("Document-type name.")
    count: int = schema_field("Number of documents of this type.")


@dataclass
class MinistryInfo:
    """A ministry with its per-type document counts."""

    id: int = schema_field("Ministry id.")
    name: str = schema_field("Ministry name.")
    document_types: dict[int, DocumentType] = schema_field(
        default_factory=dict,
        description="Document types keyed by type id.",
    )


@dataclass
class DocumentListing:
    """One row of a ministry's document listing."""

    id: int = schema_field("Document id (the `id` query argument of the document form).")
    name: str = schema_field("Document name.")
    date: datetime = schema_field("Listing date at UTC midnight.")


def _jsonable(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


def to_dict(model: Any) -> dict[str, Any]:
    """Render a model dataclass as JSON-ready data with ISO-8601 UTC dates."""
    return _jsonable(asdict(model))
