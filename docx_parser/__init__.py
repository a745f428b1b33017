"""
DOCX Parser - Extract structured content from Word documents.

This package reads a .docx package into a format-agnostic ParseResult
(raw text, headings, paragraphs with emphasis, tables) and renders it as
HTML, JSON, Markdown or plain text.

## Adding new capabilities:

1. To add a new input format (file type):
   - Create a new reader class inheriting from InputReader
   - Implement read_facts() and the extension checks
   - Register it with the reader registry

2. To add a new output format:
   - Create a new writer class inheriting from OutputWriter
   - Implement render()
   - Register it with the writer registry

Example:
    from docx_parser import ReaderRegistry, render_html, render_markdown

    reader = ReaderRegistry.get_reader_for_file(input_path)
    result = reader.read(input_path)

    html = render_html(result)
    markdown = render_markdown(result)
"""

from docx_parser.core.document import ParseResult, Heading, Paragraph, Table
from docx_parser.core.extraction import build_parse_result
from docx_parser.readers import ReaderRegistry, UnreadablePackageError
from docx_parser.writers import (
    WriterRegistry,
    render_html,
    render_json,
    render_markdown,
    render_text,
)

__version__ = "1.0.0"
__all__ = [
    "ParseResult",
    "Heading",
    "Paragraph",
    "Table",
    "build_parse_result",
    "ReaderRegistry",
    "UnreadablePackageError",
    "WriterRegistry",
    "render_html",
    "render_json",
    "render_markdown",
    "render_text",
]
