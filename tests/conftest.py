"""Shared fixtures for docx_parser tests."""

import pytest
from docx import Document as DocxDocument

from docx_parser.core.document import Heading, Paragraph, ParseResult, Table


@pytest.fixture
def table_result():
    """A result holding only the two-row sample table."""
    return ParseResult(
        tables=[
            Table(rows=[["Header 1", "Header 2"], ["Cell 1", "Cell 2"]]),
        ]
    )


@pytest.fixture
def full_result():
    """A result with one of everything."""
    return ParseResult(
        raw_text="Title\nIntro\nFine print\n",
        headings=[Heading(level=1, text="Title")],
        paragraphs=[
            Paragraph(text="Intro", is_bold=True),
            Paragraph(text="Fine print", is_italic=True),
        ],
        tables=[Table(rows=[["Name", "Qty"], ["Apples", "3"]])],
    )


@pytest.fixture
def sample_docx(tmp_path):
    """A real .docx with headings, emphasis, blank paragraphs and a table."""
    doc = DocxDocument()
    doc.add_heading("Quarterly Report", level=1)
    doc.add_paragraph("Plain opening paragraph.")
    doc.add_paragraph("")
    doc.add_paragraph("   ")

    mixed = doc.add_paragraph()
    mixed.add_run("Partly bold").bold = True
    mixed.add_run(" and plain")

    italic = doc.add_paragraph()
    italic.add_run("Slanted").italic = True

    doc.add_heading("Details", level=2)

    table = doc.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Header 1"
    table.cell(0, 1).text = "Header 2"
    table.cell(1, 0).text = "Cell 1"
    table.cell(1, 1).text = "Cell 2"

    path = tmp_path / "report.docx"
    doc.save(str(path))
    return path
