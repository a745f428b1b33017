"""
Input readers package for document parsing.

This package provides a plugin-based architecture for reading document packages.
A reader only extracts primitive facts (paragraph text, style id, run emphasis,
table cell text); the heading and emphasis policy lives in
docx_parser.core.extraction and is shared by every reader.

To add a new input format:

1. Create a new reader class inheriting from InputReader
2. Set the extensions class attribute and implement read_facts
3. Register it with the @ReaderRegistry.register decorator

Example:
    from docx_parser.readers.base import InputReader, ReaderRegistry

    @ReaderRegistry.register
    class MyFormatReader(InputReader):
        extensions = ['.myformat']

        def read_facts(self, file_path: Path) -> Optional[BodyFacts]:
            ...
"""

from docx_parser.readers.base import InputReader, ReaderRegistry, UnreadablePackageError
from docx_parser.readers.docx_reader import DocxReader

__all__ = [
    "InputReader",
    "ReaderRegistry",
    "UnreadablePackageError",
    "DocxReader",
]
