"""PDF reading and page-range export built on PyMuPDF."""

import re
from pathlib import Path
from typing import Callable

import fitz  # PyMuPDF

from pdf_split.chapters import chapter_page_range
from pdf_split.exceptions import (
    BookmarkError,
    ExportError,
    InputFileError,
    OutputDirectoryError,
)
from pdf_split.utils import chapter_filename

# Errors raised by PyMuPDF calls; low-level MuPDF errors do not derive from RuntimeError
FITZ_ERRORS = (RuntimeError, OSError, ValueError, fitz.mupdf.FzErrorBase)

PAGE_RANGE_PATTERN = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*$")


def open_pdf(pdf_path: str) -> fitz.Document:
    """Open a PDF once for reading; the caller is responsible for closing it."""
    try:
        doc = fitz.open(pdf_path)
    except FITZ_ERRORS as e:
        raise InputFileError(f"open input file {pdf_path}: {e}") from e
    if not doc.is_pdf:
        doc.close()
        raise InputFileError(f"open input file {pdf_path}: not a PDF document")
    return doc


def extract_bookmarks(doc: fitz.Document) -> list[dict]:
    """Extract all bookmarks in document order with their page numbers and levels."""
    try:
        toc = doc.get_toc(simple=False)
    except FITZ_ERRORS as e:
        raise BookmarkError(f"failed to read PDF bookmarks: {e}") from e

    bookmarks = []
    for item in toc:
        level, title, page_num = item[0], item[1], item[2]
        bookmarks.append({
            "level": level,
            "title": title.strip(),
            "page": page_num
        })
    return bookmarks


def get_total_pages(doc: fitz.Document) -> int:
    """Get the total number of pages in a PDF."""
    return doc.page_count


def parse_page_range(page_range: str) -> tuple[int, int]:
    """Parse a 1-based inclusive ``"<start>-<end>"`` expression."""
    match = PAGE_RANGE_PATTERN.match(page_range)
    if not match:
        raise ExportError(f"invalid page range: '{page_range}'")
    return int(match.group(1)), int(match.group(2))


def export_page_range(doc: fitz.Document, page_range: str, output_path: Path) -> None:
    """Write the pages named by page_range into a new PDF at output_path."""
    start, end = parse_page_range(page_range)
    if start < 1 or end < start or end > doc.page_count:
        raise ExportError(
            f"invalid page range '{page_range}' for document with {doc.page_count} pages"
        )

    # PyMuPDF uses 0-indexed pages
    new_doc = fitz.open()
    try:
        new_doc.insert_pdf(doc, from_page=start - 1, to_page=end - 1)
        new_doc.save(str(output_path))
    except FITZ_ERRORS as e:
        raise ExportError(f"failed to write '{output_path}': {e}") from e
    finally:
        new_doc.close()


def split_pdf_by_chapters(
    doc: fitz.Document,
    chapters: list[dict],
    output_dir: Path,
    exclusive_end: bool = False,
    export: Callable[[fitz.Document, str, Path], None] = export_page_range,
) -> list[str]:
    """
    Split a PDF into separate files, one per chapter, in chapter order.

    The output directory is created first. The first failed export aborts
    the remaining chapters; files already written are kept.

    Returns:
        Paths of the written files.
    """
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirectoryError(f"fail to create output directory '{output_dir}': {e}") from e

    output_files = []
    for i, chapter in enumerate(chapters):
        start, end = chapter_page_range(chapter, is_last=i == len(chapters) - 1, exclusive_end=exclusive_end)
        page_range = f"{start}-{end}"
        output_path = output_dir / chapter_filename(chapter)

        try:
            export(doc, page_range, output_path)
        except ExportError as e:
            raise ExportError(f"failed to split chapter '{chapter['title']}': {e}") from e

        output_files.append(str(output_path))
        print(f"exported chapter: '{chapter['title']}' (pages: {page_range})")

    return output_files
