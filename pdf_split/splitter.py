"""Orchestration of a full split run."""

from dataclasses import dataclass
from pathlib import Path

from pdf_split.chapters import FILTER_OUTLINE, extract_chapters
from pdf_split.pdf_utils import (
    extract_bookmarks,
    get_total_pages,
    open_pdf,
    split_pdf_by_chapters,
)
from pdf_split.utils import format_chapters

DEFAULT_OUTPUT_DIR = "output"


@dataclass
class SplitConfig:
    """Settings for one split run."""

    input_path: str
    output_dir: str = DEFAULT_OUTPUT_DIR
    filter_mode: str = FILTER_OUTLINE
    exclusive_end: bool = False
    dry_run: bool = False


def split_pdf(config: SplitConfig) -> list[dict]:
    """
    Split config.input_path into one PDF per top-level chapter.

    The source document is opened once and reused for every chapter. Any
    failure raises a PdfSplitError subclass and stops the run.

    Returns:
        The chapter plan that was exported (or would be, for a dry run).
    """
    doc = open_pdf(config.input_path)
    try:
        bookmarks = extract_bookmarks(doc)
        total_pages = get_total_pages(doc)
        print(f"Found {len(bookmarks)} bookmarks in {total_pages} pages")

        chapters = extract_chapters(bookmarks, total_pages, mode=config.filter_mode)
        print(f"Identified {len(chapters)} chapters:")
        print(format_chapters(chapters))

        if config.dry_run:
            return chapters

        split_pdf_by_chapters(
            doc, chapters, Path(config.output_dir), exclusive_end=config.exclusive_end
        )
    finally:
        doc.close()

    print(f"\nDone! Created {len(chapters)} chapter PDF files in {config.output_dir}")
    return chapters
