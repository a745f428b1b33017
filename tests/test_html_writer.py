"""Tests for HTML rendering."""

import pytest

from docx_parser.core.document import Heading, Paragraph, ParseResult, Table
from docx_parser.writers.html_writer import HtmlWriter, paragraph_class, render_html


class TestHtmlShell:

    def test_document_shell(self):
        html = render_html(ParseResult())
        assert html.startswith("<!DOCTYPE html>\n<html>\n<head>\n")
        assert '<meta charset="utf-8">' in html
        assert "<style>" in html
        assert ".bold { font-weight: bold; }" in html
        assert ".italic { font-style: italic; }" in html
        assert "th { background-color: #f2f2f2; }" in html
        assert html.endswith("</body>\n</html>\n")

    def test_valid_result(self):
        result = ParseResult(
            raw_text="Sample text",
            headings=[Heading(level=1, text="Test Heading")],
            paragraphs=[Paragraph(text="Test paragraph")],
        )
        html = render_html(result)
        assert "<h1>Test Heading</h1>" in html
        assert "<p>Test paragraph</p>" in html
        # raw text is not part of the page
        assert "Sample text" not in html


class TestHtmlHeadings:

    def test_multiple_levels(self):
        result = ParseResult(headings=[
            Heading(level=1, text="H1 Heading"),
            Heading(level=2, text="H2 Heading"),
            Heading(level=3, text="H3 Heading"),
        ])
        html = render_html(result)
        assert "<h1>H1 Heading</h1>" in html
        assert "<h2>H2 Heading</h2>" in html
        assert "<h3>H3 Heading</h3>" in html

    @pytest.mark.parametrize("level", [0, 7, 12, -1])
    def test_levels_are_not_clamped(self, level):
        html = render_html(ParseResult(headings=[Heading(level=level, text="x")]))
        assert f"<h{level}>x</h{level}>" in html


class TestHtmlParagraphs:

    @pytest.mark.parametrize("bold, italic, expected", [
        (True, False, "bold"),
        (False, True, "italic"),
        (True, True, "bold italic"),
        (False, False, ""),
    ])
    def test_paragraph_class(self, bold, italic, expected):
        assert paragraph_class(Paragraph(text="t", is_bold=bold, is_italic=italic)) == expected

    def test_bold_paragraph(self):
        html = render_html(ParseResult(paragraphs=[Paragraph(text="Bold text", is_bold=True)]))
        assert '<p class="bold">Bold text</p>' in html
        assert "bold italic" not in html

    def test_italic_paragraph(self):
        html = render_html(ParseResult(paragraphs=[Paragraph(text="Italic text", is_italic=True)]))
        assert '<p class="italic">Italic text</p>' in html

    def test_bold_italic_paragraph(self):
        html = render_html(ParseResult(paragraphs=[Paragraph(text="Both", is_bold=True, is_italic=True)]))
        assert '<p class="bold italic">Both</p>' in html
        assert "italic bold" not in html

    def test_plain_paragraph_has_no_class(self):
        html = render_html(ParseResult(paragraphs=[Paragraph(text="Plain")]))
        assert "<p>Plain</p>" in html
        assert "<p class" not in html


class TestHtmlTables:

    def test_header_and_data_rows(self, table_result):
        html = render_html(table_result)
        assert "<table>" in html
        assert "<tr>\n<th>Header 1</th>\n<th>Header 2</th>\n</tr>" in html
        assert "<tr>\n<td>Cell 1</td>\n<td>Cell 2</td>\n</tr>" in html
        assert "<td>Header 1</td>" not in html
        assert "<th>Cell 1</th>" not in html

    def test_empty_table_shell(self):
        html = render_html(ParseResult(tables=[Table()]))
        assert "<table>\n</table>" in html
        assert "<tr>" not in html


class TestHtmlEscaping:

    def test_script_is_escaped(self):
        result = ParseResult(paragraphs=[Paragraph(text="<script>alert('XSS')</script>")])
        html = render_html(result)
        assert "<script>alert('XSS')</script>" not in html
        assert "&lt;script&gt;" in html
        assert "alert(&#x27;XSS&#x27;)" in html

    def test_all_text_is_escaped(self):
        nasty = 'a & b < c > d "e"'
        escaped = "a &amp; b &lt; c &gt; d &quot;e&quot;"
        result = ParseResult(
            headings=[Heading(level=1, text=nasty)],
            paragraphs=[Paragraph(text=nasty, is_bold=True)],
            tables=[Table(rows=[[nasty], [nasty]])],
        )
        html = render_html(result)
        assert nasty not in html
        assert f"<h1>{escaped}</h1>" in html
        assert f'<p class="bold">{escaped}</p>' in html
        assert f"<th>{escaped}</th>" in html
        assert f"<td>{escaped}</td>" in html


class TestHtmlLayout:

    def test_headings_then_paragraphs_then_tables(self, full_result):
        html = render_html(full_result)
        assert html.index("<h1>Title</h1>") < html.index('<p class="bold">Intro</p>')
        assert html.index('<p class="italic">Fine print</p>') < html.index("<table>")

    def test_deterministic(self, full_result):
        assert render_html(full_result) == render_html(full_result)

    def test_does_not_modify_result(self, full_result):
        before = full_result.to_dict()
        render_html(full_result)
        assert full_result.to_dict() == before


class TestHtmlWriter:

    def test_format(self):
        assert HtmlWriter.format_name == "html"
        assert HtmlWriter.extension == ".html"

    def test_write(self, tmp_path, full_result):
        path = tmp_path / "nested" / "out.html"
        HtmlWriter().write(full_result, path)
        assert path.read_text(encoding="utf-8") == render_html(full_result)
