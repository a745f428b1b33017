"""
Writer for JSON output format.
"""

import json
from typing import Dict, Any

from docx_parser.core.document import ParseResult
from docx_parser.writers.base import OutputWriter, WriterRegistry

DEFAULT_INDENT = 2


def render_json(result: ParseResult, indent: int = DEFAULT_INDENT, ensure_ascii: bool = False) -> str:
    """
    Render a ParseResult as pretty-printed JSON with camelCase keys.

    Empty collections are written as [] and never left out.
    """
    return json.dumps(result.to_dict(), indent=indent, ensure_ascii=ensure_ascii)


@WriterRegistry.register
class JsonWriter(OutputWriter):
    """
    Writer for JSON output format.

    Produces a JSON object with rawText, headings, paragraphs and tables.
    """

    format_name = "json"
    extension = ".json"

    @classmethod
    def get_default_options(cls) -> Dict[str, Any]:
        return {
            "indent": DEFAULT_INDENT,
            "ensure_ascii": False,
        }

    def render(self, result: ParseResult, **options) -> str:
        """
        Render document to a JSON string.

        Options:
            indent: JSON indentation level
            ensure_ascii: Whether to escape non-ASCII characters
        """
        opts = {**self.get_default_options(), **options}
        return render_json(
            result,
            indent=opts.get("indent", DEFAULT_INDENT),
            ensure_ascii=opts.get("ensure_ascii", False),
        )
