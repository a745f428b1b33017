"""
Reader interface and lookup by file extension.

A reader only pulls primitive facts out of a package. Turning those facts into
a ParseResult is the same for every reader and happens in InputReader.read().
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Type

from docx_parser.core.document import BodyFacts, ParseResult
from docx_parser.core.extraction import build_parse_result


class UnreadablePackageError(ValueError):
    """Raised when an input file cannot be opened as a document package."""

    def __init__(self, file_path: Path, reason: str):
        self.file_path = Path(file_path)
        self.reason = reason
        super().__init__(f"Cannot read {self.file_path}: {reason}")


class InputReader(ABC):
    """Reads a document package into BodyFacts."""

    extensions: List[str] = []

    @classmethod
    def supports_file(cls, file_path: Path) -> bool:
        return Path(file_path).suffix.lower() in cls.extensions

    @abstractmethod
    def read_facts(self, file_path: Path) -> Optional[BodyFacts]:
        """
        Return the paragraphs and tables of the body in document order.

        Returns None if the package has no body.

        Raises:
            UnreadablePackageError: If the file cannot be opened as a package
        """

    def read(self, file_path: Path) -> ParseResult:
        return build_parse_result(self.read_facts(Path(file_path)))


class ReaderRegistry:
    """Readers keyed by class name, registered with @ReaderRegistry.register."""

    _readers: Dict[str, Type[InputReader]] = {}

    @classmethod
    def register(cls, reader_class: Type[InputReader]) -> Type[InputReader]:
        cls._readers[reader_class.__name__] = reader_class
        return reader_class

    @classmethod
    def get_reader_for_file(cls, file_path: Path) -> Optional[InputReader]:
        """Return a reader instance for the file, or None if its extension is unknown."""
        for reader_cls in cls._readers.values():
            if reader_cls.supports_file(file_path):
                return reader_cls()
        return None

    @classmethod
    def get_supported_extensions(cls) -> List[str]:
        extensions = set()
        for reader_cls in cls._readers.values():
            extensions.update(reader_cls.extensions)
        return sorted(extensions)

    @classmethod
    def list_readers(cls) -> List[Dict]:
        """Name and extensions of every reader, for --list-formats."""
        return [
            {"name": name, "extensions": reader_cls.extensions}
            for name, reader_cls in cls._readers.items()
        ]
