#!/usr/bin/env python3
"""
DOCX Parser - Extract headings, paragraphs and tables from Word documents.

This is the main CLI entry point. It reads a .docx file (or every .docx file in
a folder) and writes one output file per requested format.

To add new input formats:
    See docx_parser/readers/base.py for the InputReader interface.

To add new output formats:
    See docx_parser/writers/base.py for the OutputWriter interface.
"""

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import Dict, List, Optional, Any

from docx_parser.core.document import ParseResult
from docx_parser.readers import ReaderRegistry
from docx_parser.writers import WriterRegistry
from docx_parser.utils import get_processable_files

DEFAULT_FORMATS = ["html", "json", "markdown"]


class DocumentProcessor:
    """
    Main document processing class.

    Handles reading documents and writing them out in every requested format.
    """

    def __init__(
        self,
        output_formats: Optional[List[str]] = None,
        writer_options: Optional[Dict[str, Dict[str, Any]]] = None,
    ):
        """
        Initialize processor.

        Args:
            output_formats: Output format names ('html', 'json', 'markdown', 'text').
                            Defaults to html, json and markdown.
            writer_options: Per-format options passed to the writers,
                            e.g. {'json': {'indent': 4}}.
        """
        self.output_formats = output_formats or list(DEFAULT_FORMATS)
        self.writer_options = writer_options or {}

        self.writers = []
        for format_name in self.output_formats:
            writer = WriterRegistry.get_writer(format_name)
            if not writer:
                available = ", ".join(WriterRegistry.get_supported_formats())
                raise ValueError(
                    f"Unknown output format: {format_name}. "
                    f"Available formats: {available}"
                )
            self.writers.append(writer)

    def read(self, input_path: Path) -> ParseResult:
        """Read a single input file into a ParseResult."""
        reader = ReaderRegistry.get_reader_for_file(input_path)
        if not reader:
            available = ", ".join(ReaderRegistry.get_supported_extensions()) or "none"
            raise ValueError(
                f"No reader found for: {input_path}. "
                f"Supported extensions: {available}"
            )
        return reader.read(input_path)

    def process_file(self, input_path: Path, out_dir: Path) -> List[Path]:
        """
        Process a single file.

        Args:
            input_path: Path to input file
            out_dir: Folder for the output files, named after the input stem

        Returns:
            Paths of the written files, in format order
        """
        result = self.read(input_path)

        written = []
        for writer in self.writers:
            output_path = out_dir / f"{input_path.stem}{writer.extension}"
            options = self.writer_options.get(writer.format_name, {})
            writer.write(result, output_path, **options)
            written.append(output_path)
        return written


def list_formats() -> None:
    print("Supported input formats (file types):")
    for info in ReaderRegistry.list_readers():
        print(f"  {info['name']}: {', '.join(info['extensions'])}")
    print("\nSupported output formats:")
    for info in WriterRegistry.list_writers():
        print(f"  {info['format']}: {info['extension']}  {info['description']}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract headings, paragraphs and tables from Word documents.",
        epilog="""
Supported input formats: .docx, .docm
Supported output formats: html, json, markdown (md), text (txt)

Output files are named after the input file, e.g. report.docx -> report.html.
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Input .docx file, or a folder containing .docx files",
    )
    parser.add_argument("--out", default="output", help="Output folder")
    parser.add_argument(
        "--format",
        dest="formats",
        action="append",
        metavar="FORMAT",
        help="Output format (repeatable). Defaults to html, json and markdown.",
    )
    parser.add_argument(
        "--json-indent",
        type=int,
        default=2,
        help="Indentation width for JSON output (default: 2)",
    )
    parser.add_argument(
        "--list-formats",
        action="store_true",
        help="List all supported input and output formats.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging from the reader and extractor.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.json_indent < 1:
        parser.error("--json-indent must be at least 1")

    if args.list_formats:
        list_formats()
        return 0

    if not args.input:
        parser.error("input is required unless using --list-formats")

    docs_path = Path(args.input)
    out_dir = Path(args.out)

    if not docs_path.exists():
        print(f"Error: Input path '{docs_path}' does not exist")
        return 1

    try:
        processor = DocumentProcessor(
            output_formats=args.formats,
            writer_options={"json": {"indent": args.json_indent}},
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if docs_path.is_file():
        files = [docs_path]
    else:
        files = get_processable_files(docs_path)
        if not files:
            print(f"No supported files found in {docs_path}")
            return 1

    print(f"📚 Processing {len(files)} file(s)...\n")

    success_count = 0
    for i, path in enumerate(files, 1):
        print(f"[{i}/{len(files)}] {path.name} → {out_dir} ...", end=" ")
        try:
            written = processor.process_file(path, out_dir)
            print("✓ done")
            for output_path in written:
                print(f"    {output_path.name}")
            success_count += 1
        except Exception as e:
            print(f"⚠️ error: {e}")
            if args.verbose:
                traceback.print_exc()

    print(
        f"\n✅ All done. Successfully processed {success_count}/{len(files)} file(s)."
    )
    return 0 if success_count == len(files) else 1


if __name__ == "__main__":
    sys.exit(main())
