"""
Writer for standalone HTML output.
"""

import html
from typing import List

from docx_parser.core.document import ParseResult, Paragraph, Table
from docx_parser.writers.base import OutputWriter, WriterRegistry

STYLESHEET = [
    "body { font-family: Arial, sans-serif; line-height: 1.6; padding: 20px; max-width: 800px; margin: 0 auto; }",
    "h1, h2, h3, h4, h5, h6 { color: #333; margin-top: 1.5em; }",
    "table { border-collapse: collapse; width: 100%; margin: 1em 0; }",
    "td, th { border: 1px solid #ddd; padding: 8px; text-align: left; }",
    "th { background-color: #f2f2f2; }",
    ".bold { font-weight: bold; }",
    ".italic { font-style: italic; }",
]


def _escape(text: str) -> str:
    return html.escape(text, quote=True)


def paragraph_class(para: Paragraph) -> str:
    """Return the CSS class list for a paragraph ("" when it has no emphasis)."""
    classes = []
    if para.is_bold:
        classes.append("bold")
    if para.is_italic:
        classes.append("italic")
    return " ".join(classes)


def _render_table(table: Table) -> List[str]:
    lines = ["<table>"]
    for i, row in enumerate(table.rows):
        tag = "th" if i == 0 else "td"
        lines.append("<tr>")
        for cell in row:
            lines.append(f"<{tag}>{_escape(cell)}</{tag}>")
        lines.append("</tr>")
    lines.append("</table>")
    return lines


def render_html(result: ParseResult) -> str:
    """
    Render a ParseResult as a complete HTML document.

    Headings come first, then paragraphs, then tables. Heading levels are
    used as-is in the tag name. All document text is entity-escaped.
    """
    lines = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '<meta charset="utf-8">',
        "<style>",
        *STYLESHEET,
        "</style>",
        "</head>",
        "<body>",
    ]

    for heading in result.headings:
        lines.append(f"<h{heading.level}>{_escape(heading.text)}</h{heading.level}>")

    for para in result.paragraphs:
        css_class = paragraph_class(para)
        if css_class:
            lines.append(f'<p class="{css_class}">{_escape(para.text)}</p>')
        else:
            lines.append(f"<p>{_escape(para.text)}</p>")

    for table in result.tables:
        lines.extend(_render_table(table))

    lines.append("</body>")
    lines.append("</html>")
    return "\n".join(lines) + "\n"


@WriterRegistry.register
class HtmlWriter(OutputWriter):
    """Standalone HTML page with an embedded stylesheet."""

    format_name = "html"
    extension = ".html"

    def render(self, result: ParseResult, **options) -> str:
        return render_html(result)
