"""
PDF Split - Split a PDF into one file per top-level chapter using its bookmarks.
"""

__version__ = "0.1.0"

from pdf_split.chapters import extract_chapters
from pdf_split.exceptions import NoChaptersError, PdfSplitError
from pdf_split.pdf_utils import extract_bookmarks, split_pdf_by_chapters
from pdf_split.splitter import SplitConfig, split_pdf
from pdf_split.utils import sanitize_filename, format_bookmarks

__all__ = [
    "extract_chapters",
    "extract_bookmarks",
    "split_pdf_by_chapters",
    "split_pdf",
    "SplitConfig",
    "sanitize_filename",
    "format_bookmarks",
    "PdfSplitError",
    "NoChaptersError",
]
