"""
Output writers package for document generation.

This package provides a plugin-based architecture for rendering a ParseResult
to different formats. Each writer module also exposes a plain render_*
function for callers that only need the string.

To add a new output format:

1. Create a new writer class inheriting from OutputWriter
2. Set the format_name and extension class attributes and implement render
3. Register it with the @WriterRegistry.register decorator

Example:
    from docx_parser.writers.base import OutputWriter, WriterRegistry

    @WriterRegistry.register
    class MyFormatWriter(OutputWriter):
        '''One-line summary shown by --list-formats.'''

        format_name = 'myformat'
        extension = '.myformat'

        def render(self, result: ParseResult, **options) -> str:
            ...
"""

from docx_parser.writers.base import OutputWriter, WriterRegistry
from docx_parser.writers.html_writer import HtmlWriter, render_html
from docx_parser.writers.json_writer import JsonWriter, render_json
from docx_parser.writers.markdown_writer import MarkdownWriter, render_markdown
from docx_parser.writers.text_writer import TextWriter, render_text

__all__ = [
    "OutputWriter",
    "WriterRegistry",
    "HtmlWriter",
    "JsonWriter",
    "MarkdownWriter",
    "TextWriter",
    "render_html",
    "render_json",
    "render_markdown",
    "render_text",
]
