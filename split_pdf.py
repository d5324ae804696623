#!/usr/bin/env python3
"""
PDF Split - Split a PDF file into multiple files according to its table of contents.

This is a thin wrapper that calls the main CLI module.
"""

import sys

from pdf_split.cli import main

if __name__ == "__main__":
    sys.exit(main())
