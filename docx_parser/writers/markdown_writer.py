"""
Writer for Markdown output.
"""

from typing import List

from docx_parser.core.document import ParseResult, Paragraph, Table
from docx_parser.writers.base import OutputWriter, WriterRegistry


def emphasize(para: Paragraph) -> str:
    """Wrap paragraph text in Markdown emphasis markers. Text is not escaped."""
    if para.is_bold and para.is_italic:
        return f"***{para.text}***"
    if para.is_bold:
        return f"**{para.text}**"
    if para.is_italic:
        return f"*{para.text}*"
    return para.text


def _pipe_row(cells: List[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def _render_table(table: Table) -> List[str]:
    header = table.rows[0]
    lines = [
        _pipe_row(header),
        _pipe_row(["---"] * len(header)),
    ]
    for row in table.rows[1:]:
        lines.append(_pipe_row(row))
    lines.append("")
    return lines


def render_markdown(result: ParseResult) -> str:
    """
    Render a ParseResult as Markdown.

    Every heading and paragraph is followed by a blank line. Tables without
    rows are skipped. Trailing whitespace of the whole document is trimmed.
    """
    lines = []

    for heading in result.headings:
        lines.append(f"{'#' * heading.level} {heading.text}")
        lines.append("")

    for para in result.paragraphs:
        lines.append(emphasize(para))
        lines.append("")

    for table in result.tables:
        if not table.rows:
            continue
        lines.extend(_render_table(table))

    return "\n".join(lines).rstrip()


@WriterRegistry.register
class MarkdownWriter(OutputWriter):
    """Markdown with ATX headings, emphasis markers and pipe tables."""

    format_name = "markdown"
    extension = ".md"

    def render(self, result: ParseResult, **options) -> str:
        return render_markdown(result)
