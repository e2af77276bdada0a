"""Text and HTML helpers shared across the document parser and listing extractors."""

import re
from typing import Optional

from bs4 import Comment, NavigableString, Tag


def text_nodes(element: Tag) -> list[str]:
    """Return the direct text-node children of element, in order."""
    return [
        str(child)
        for child in element.children
        if isinstance(child, NavigableString) and not isinstance(child, Comment)
    ]


def joined_text(element: Tag) -> str:
    """Join the direct text nodes of element and trim the result."""
    return "".join(text_nodes(element)).strip()


def text_after(element: Tag, marker: Tag) -> str:
    """Join the direct text nodes that follow marker inside element and trim the result."""
    texts = []
    seen_marker = False
    for child in element.children:
        if child is marker:
            seen_marker = True
            continue
        if seen_marker and isinstance(child, NavigableString) and not isinstance(child, Comment):
            texts.append(str(child))
    return "".join(texts).strip()


def child_tags(element: Tag, name: Optional[str] = None) -> list[Tag]:
    """Return direct child tags of element, optionally filtered by tag name."""
    return [
        child
        for child in element.children
        if isinstance(child, Tag) and (name is None or child.name == name)
    ]


def class_tokens(element: Tag) -> list[str]:
    classes = element.get("class") or []
    if isinstance(classes, str):
        return classes.split()
    return list(classes)


def normalize_text(text: str) -> str:
    """Normalize whitespace and trim."""
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def snippet(element: Tag, limit: int = 200) -> str:
    """Short single-line rendering of element for diagnostics."""
    html = normalize_text(str(element))
    if len(html) > limit:
        return html[: limit - 3] + "..."
    return html
