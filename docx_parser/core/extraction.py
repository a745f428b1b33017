"""
Extraction adapter: turns primitive reader facts into a ParseResult.

Policy:
- paragraphs with empty or whitespace-only text are dropped
- every kept paragraph goes into the raw text, whatever its classification
- a style id starting with "Heading" makes a heading; the rest of the id is
  the level (1 when it is not a number)
- any bold run makes the paragraph bold, any italic run makes it italic
"""

import logging
import re
from typing import Optional

from docx_parser.core.document import (
    BodyFacts,
    Heading,
    Paragraph,
    ParagraphFacts,
    ParseResult,
    Table,
    TableFacts,
)

logger = logging.getLogger(__name__)

HEADING_STYLE_PREFIX = "Heading"
DEFAULT_HEADING_LEVEL = 1

# Optional sign and ASCII digits, padded by whitespace; must fit a signed 32-bit int
LEVEL_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")
MIN_LEVEL = -2**31
MAX_LEVEL = 2**31 - 1

EMPTY_BODY_TEXT = "(Document body is empty)"


def parse_heading_level(style_id: Optional[str]) -> Optional[int]:
    """
    Get the heading level encoded in a paragraph style id.

    Returns None if the style is not a heading style. Levels are not clamped,
    so "Heading0" gives 0 and "Heading12" gives 12.

    Examples:
        "Heading2" -> 2
        "Heading" -> 1
        "HeadingTitle" -> 1
        "Heading1_0" -> 1
        "Normal" -> None
    """
    if not style_id or not style_id.startswith(HEADING_STYLE_PREFIX):
        return None

    suffix = style_id[len(HEADING_STYLE_PREFIX):]
    if not LEVEL_PATTERN.fullmatch(suffix):
        return DEFAULT_HEADING_LEVEL

    level = int(suffix)
    if not MIN_LEVEL <= level <= MAX_LEVEL:
        return DEFAULT_HEADING_LEVEL
    return level


def convert_paragraph(facts: ParagraphFacts):
    """Classify one non-empty paragraph as a Heading or a Paragraph."""
    level = parse_heading_level(facts.style_id)
    if level is not None:
        return Heading(level=level, text=facts.text)

    return Paragraph(
        text=facts.text,
        is_bold=any(run.bold for run in facts.runs),
        is_italic=any(run.italic for run in facts.runs),
    )


def convert_table(facts: TableFacts) -> Table:
    """Copy table rows, keeping row and cell order."""
    return Table(rows=[list(row) for row in facts.rows])


def build_parse_result(body: Optional[BodyFacts]) -> ParseResult:
    """
    Build a ParseResult from the facts a reader extracted.

    A missing body (None) is not an error: the result carries a fixed
    message as its raw text and no structured content.
    """
    if body is None:
        logger.warning("Document has no body, returning empty result")
        return ParseResult(raw_text=EMPTY_BODY_TEXT)

    result = ParseResult()
    raw_lines = []
    skipped = 0

    for facts in body.paragraphs:
        if not facts.text or not facts.text.strip():
            skipped += 1
            continue

        raw_lines.append(facts.text + "\n")

        element = convert_paragraph(facts)
        if isinstance(element, Heading):
            result.headings.append(element)
        else:
            result.paragraphs.append(element)

    for table_facts in body.tables:
        result.tables.append(convert_table(table_facts))

    result.raw_text = "".join(raw_lines)

    logger.debug(
        "Extracted %d heading(s), %d paragraph(s), %d table(s); skipped %d empty paragraph(s)",
        len(result.headings),
        len(result.paragraphs),
        len(result.tables),
        skipped,
    )
    return result
