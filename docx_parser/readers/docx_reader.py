"""
Reader for Microsoft Word .docx files.
"""

import logging
import zipfile
from pathlib import Path
from typing import Optional

from docx import Document as DocxDocument
from docx.opc.exceptions import PackageNotFoundError
from docx.oxml.ns import qn

from docx_parser.core.document import (
    BodyFacts,
    ParagraphFacts,
    RunFacts,
    TableFacts,
)
from docx_parser.readers.base import InputReader, ReaderRegistry, UnreadablePackageError

logger = logging.getLogger(__name__)


@ReaderRegistry.register
class DocxReader(InputReader):
    """Reader for Microsoft Word .docx files (Open XML format)."""

    extensions = [".docx", ".docm"]

    def read_facts(self, file_path: Path) -> Optional[BodyFacts]:
        """Read a .docx file and return the facts of its body."""
        source = self._open(file_path)

        body = source.element.body
        if body is None:
            logger.debug("No w:body element in %s", file_path)
            return None

        facts = BodyFacts()
        for src_para in source.paragraphs:
            facts.paragraphs.append(self._convert_paragraph(src_para))
        for src_table in source.tables:
            facts.tables.append(self._convert_table(src_table))

        logger.debug(
            "Read %d paragraph(s) and %d table(s) from %s",
            len(facts.paragraphs),
            len(facts.tables),
            file_path,
        )
        return facts

    def _open(self, file_path: Path):
        """Open the package, mapping python-docx failures to UnreadablePackageError."""
        if not Path(file_path).is_file():
            raise UnreadablePackageError(file_path, "file does not exist")
        try:
            return DocxDocument(str(file_path))
        except PackageNotFoundError as e:
            raise UnreadablePackageError(file_path, f"not a Word package ({e})") from e
        except zipfile.BadZipFile as e:
            raise UnreadablePackageError(file_path, f"corrupt package ({e})") from e
        except (KeyError, ValueError) as e:
            # python-docx raises these for zips that are not wordprocessing documents
            raise UnreadablePackageError(file_path, f"not a Word document ({e})") from e

    def _convert_paragraph(self, src_para) -> ParagraphFacts:
        """
        Convert a python-docx paragraph to ParagraphFacts.

        Text is the concatenation of every w:t descendant, the same flattening
        used for table cells. Breaks and tabs contribute nothing, and text
        inside insertions, content controls and simple fields is kept.
        """
        # Raw w:pStyle value (e.g. "Heading2"), not the display name ("Heading 2")
        style_id = src_para._element.style

        runs = [self._convert_run(src_run) for src_run in src_para.runs]
        text = "".join(t.text or "" for t in src_para._element.iter(qn("w:t")))
        return ParagraphFacts(text=text, style_id=style_id, runs=runs)

    def _convert_run(self, src_run) -> RunFacts:
        """
        Convert a python-docx run to RunFacts.

        Emphasis counts as set when the w:b / w:i element is present in the
        run properties, regardless of its w:val.
        """
        rPr = src_run._r.rPr
        if rPr is None:
            return RunFacts()
        return RunFacts(bold=rPr.b is not None, italic=rPr.i is not None)

    def _convert_table(self, src_table) -> TableFacts:
        """Convert a python-docx table to rows of flattened cell text."""
        table = TableFacts()
        for tr in src_table._tbl.tr_lst:
            row = []
            for tc in tr.tc_lst:
                row.append("".join(t.text or "" for t in tc.iter(qn("w:t"))))
            table.rows.append(row)
        return table
