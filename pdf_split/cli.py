"""Command-line interface for pdf-split."""

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from pdf_split import __version__
from pdf_split.chapters import FILTER_MODES, FILTER_OUTLINE
from pdf_split.exceptions import PdfSplitError
from pdf_split.pdf_utils import extract_bookmarks, open_pdf
from pdf_split.splitter import DEFAULT_OUTPUT_DIR, SplitConfig, split_pdf
from pdf_split.utils import format_bookmarks


# Load environment variables from .env file
load_dotenv()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="pdf-split",
        description="Split a PDF file into multiple files according to its table of contents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -i example.pdf
  %(prog)s -i example.pdf -o output_dir
  %(prog)s --input book.pdf --filter page --exclusive-end
        """
    )
    parser.add_argument(
        "--input", "-i",
        required=True,
        help="Path to the input PDF file"
    )
    parser.add_argument(
        "--output", "-o",
        default=os.environ.get("PDF_SPLIT_OUTPUT_DIR", DEFAULT_OUTPUT_DIR),
        help="Output directory, created if missing (default: %(default)s, "
             "can also use PDF_SPLIT_OUTPUT_DIR env var or .env file)"
    )
    parser.add_argument(
        "--filter", "-f",
        choices=FILTER_MODES,
        default=os.environ.get("PDF_SPLIT_FILTER", FILTER_OUTLINE),
        help="How nested bookmarks are detected: by outline level or by start page "
             "(default: %(default)s, can also use PDF_SPLIT_FILTER env var)"
    )
    parser.add_argument(
        "--exclusive-end", "-e",
        action="store_true",
        help="Do not repeat a chapter's boundary page at the start of the next file"
    )
    parser.add_argument(
        "--list-bookmarks", "-l",
        action="store_true",
        help="Just list all bookmarks and exit"
    )
    parser.add_argument(
        "--dry-run", "-n",
        action="store_true",
        help="Show the chapter plan without writing any files"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args(argv)
    if args.filter not in FILTER_MODES:
        parser.error(f"invalid PDF_SPLIT_FILTER value: {args.filter!r}")
    return args


def list_bookmarks(pdf_path: str) -> None:
    """Print the bookmark tree of a PDF."""
    doc = open_pdf(pdf_path)
    try:
        bookmarks = extract_bookmarks(doc)
    finally:
        doc.close()

    print(f"Found {len(bookmarks)} bookmarks")
    print("\nBookmark structure:")
    print(format_bookmarks(bookmarks))


def main(argv: list[str] | None = None) -> int:
    """Main entry point; returns the process exit status."""
    args = parse_args(argv)

    # Validate input file
    pdf_path = Path(args.input)
    if not pdf_path.exists():
        print(f"Error: File not found: {pdf_path}", file=sys.stderr)
        return 1

    try:
        if args.list_bookmarks:
            list_bookmarks(str(pdf_path))
            return 0

        config = SplitConfig(
            input_path=str(pdf_path),
            output_dir=args.output,
            filter_mode=args.filter,
            exclusive_end=args.exclusive_end,
            dry_run=args.dry_run,
        )
        print(f"Splitting PDF into chapters: {pdf_path.name}")
        split_pdf(config)
    except PdfSplitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
