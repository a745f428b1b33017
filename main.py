#!/usr/bin/env python3
"""
DOCX Parser - Entry point for the command line.

This file is a thin wrapper that delegates to the docx_parser package.

Usage:
    python main.py report.docx --out output
    python main.py docs/ --format markdown --format json
    python main.py --list-formats

You can also run:
    python -m docx_parser.cli [args]
"""

import sys

from docx_parser.cli import main

if __name__ == "__main__":
    sys.exit(main())
