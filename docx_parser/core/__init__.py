"""
Core document model and extraction policy.
"""

from docx_parser.core.document import (
    ParseResult,
    Heading,
    Paragraph,
    Table,
    RunFacts,
    ParagraphFacts,
    TableFacts,
    BodyFacts,
)
from docx_parser.core.extraction import (
    build_parse_result,
    parse_heading_level,
    EMPTY_BODY_TEXT,
)

__all__ = [
    # Document model
    "ParseResult",
    "Heading",
    "Paragraph",
    "Table",
    # Reader facts
    "RunFacts",
    "ParagraphFacts",
    "TableFacts",
    "BodyFacts",
    # Extraction
    "build_parse_result",
    "parse_heading_level",
    "EMPTY_BODY_TEXT",
]
