"""
Unified document model for representing parsed documents.

This module provides a format-agnostic representation of extracted content that
is produced by the extraction adapter and consumed by every output writer.

It also holds the primitive fact records that input readers hand to the
extraction adapter (paragraph text, style id, run emphasis, table cell text).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any


@dataclass
class Heading:
    """A heading extracted from a paragraph with a Heading style."""
    level: int
    text: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level,
            "text": self.text,
        }


@dataclass
class Paragraph:
    """
    A body paragraph.

    Emphasis is aggregated over the whole paragraph: a paragraph is bold if any
    of its runs is bold, italic if any of its runs is italic.
    """
    text: str = ""
    is_bold: bool = False
    is_italic: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "isBold": self.is_bold,
            "isItalic": self.is_italic,
        }


@dataclass
class Table:
    """A table as rows of cell text. The first row is treated as the header."""
    rows: List[List[str]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rows": [list(row) for row in self.rows],
        }


@dataclass
class ParseResult:
    """
    A format-agnostic representation of an extracted document.

    Headings and paragraphs are kept in two separate lists, each in document
    order. The relative order between a heading and a body paragraph is not
    recorded.
    """
    raw_text: str = ""
    headings: List[Heading] = field(default_factory=list)
    paragraphs: List[Paragraph] = field(default_factory=list)
    tables: List[Table] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase dictionary used for JSON output."""
        return {
            "rawText": self.raw_text,
            "headings": [h.to_dict() for h in self.headings],
            "paragraphs": [p.to_dict() for p in self.paragraphs],
            "tables": [t.to_dict() for t in self.tables],
        }


# Primitive facts handed over by input readers

@dataclass
class RunFacts:
    """Emphasis flags of a single text run."""
    bold: bool = False
    italic: bool = False


@dataclass
class ParagraphFacts:
    """A paragraph as seen by a reader, before heading/emphasis classification."""
    text: str
    style_id: Optional[str] = None
    runs: List[RunFacts] = field(default_factory=list)


@dataclass
class TableFacts:
    """Flattened cell text of a table, row by row."""
    rows: List[List[str]] = field(default_factory=list)


@dataclass
class BodyFacts:
    """Everything a reader found in a document body, in document order."""
    paragraphs: List[ParagraphFacts] = field(default_factory=list)
    tables: List[TableFacts] = field(default_factory=list)
