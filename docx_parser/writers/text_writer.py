"""
Writer for the raw paragraph text.
"""

from docx_parser.core.document import ParseResult
from docx_parser.writers.base import OutputWriter, WriterRegistry


def render_text(result: ParseResult) -> str:
    """Return the raw text: every non-empty paragraph, one per line."""
    return result.raw_text


@WriterRegistry.register
class TextWriter(OutputWriter):
    """Plain text with one line per non-empty paragraph, headings included."""

    format_name = "text"
    extension = ".txt"

    def render(self, result: ParseResult, **options) -> str:
        return render_text(result)
