"""Shared utility functions."""

import re

# Characters that are not allowed in filenames on common filesystems
ILLEGAL_FILENAME_CHARS = re.compile(r'[/\\:*?"<>|]')


def sanitize_filename(name: str) -> str:
    """Replace filesystem-illegal characters in a chapter title with underscores.

    Length and whitespace are left alone, so ``"A/B: Intro"`` becomes
    ``"A_B_ Intro"``.
    """
    return ILLEGAL_FILENAME_CHARS.sub("_", name)


def chapter_filename(chapter: dict) -> str:
    """Build the output filename for a chapter: ``{order:02d}_{title}.pdf``."""
    return f"{chapter['order']:02d}_{sanitize_filename(chapter['title'])}.pdf"


def format_bookmarks(bookmarks: list[dict]) -> str:
    """Format bookmarks as an indented tree, one line per bookmark."""
    lines = []
    for bm in bookmarks:
        level = bm.get("level", 1)
        indent = "  " * (level - 1)
        lines.append(f"{indent}[Level {level}] {bm['title']} (Page {bm['page']})")
    return "\n".join(lines)


def format_chapters(chapters: list[dict]) -> str:
    """Format a chapter plan for display."""
    lines = []
    for ch in chapters:
        lines.append(f"  {ch['order']:02d}. {ch['title']} (pages {ch['start_page']}-{ch['end_page']})")
    return "\n".join(lines)
