"""
Writer interface and lookup by format name.

Each writer turns a ParseResult into one string; writing files is shared.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Type, Any

from docx_parser.core.document import ParseResult


class OutputWriter(ABC):
    """Renders a ParseResult in one output format."""

    format_name: str = ""
    extension: str = ""

    @abstractmethod
    def render(self, result: ParseResult, **options) -> str:
        """Render without modifying the result; same input, same output."""

    @classmethod
    def get_default_options(cls) -> Dict[str, Any]:
        return {}

    def write(self, result: ParseResult, output_path: Path, **options) -> None:
        """Render and write as UTF-8, creating parent directories."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(self.render(result, **options))


class WriterRegistry:
    """
    Writers keyed by format name, registered with @WriterRegistry.register.

    The extension without its dot is accepted as an alias ("md" -> "markdown").
    """

    _writers: Dict[str, Type[OutputWriter]] = {}
    _aliases: Dict[str, str] = {}

    @classmethod
    def register(cls, writer_class: Type[OutputWriter]) -> Type[OutputWriter]:
        cls._writers[writer_class.format_name] = writer_class
        cls._aliases[writer_class.extension.lstrip(".")] = writer_class.format_name
        return writer_class

    @classmethod
    def get_writer(cls, format_name: str) -> Optional[OutputWriter]:
        """Return a writer instance for a format name or alias, or None."""
        key = format_name.lower()
        writer_cls = cls._writers.get(cls._aliases.get(key, key))
        if writer_cls:
            return writer_cls()
        return None

    @classmethod
    def get_supported_formats(cls) -> List[str]:
        return sorted(cls._writers)

    @classmethod
    def list_writers(cls) -> List[Dict]:
        """Format, extension and docstring summary of every writer, for --list-formats."""
        return [
            {
                "format": name,
                "extension": writer_cls.extension,
                "description": (writer_cls.__doc__ or "").strip().split("\n")[0],
            }
            for name, writer_cls in cls._writers.items()
        ]
