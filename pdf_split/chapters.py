"""Chapter extraction from a document's bookmark list."""

from pdf_split.exceptions import NoChaptersError

FILTER_OUTLINE = "outline"
FILTER_PAGE = "page"
FILTER_MODES = (FILTER_OUTLINE, FILTER_PAGE)


def _top_level(bookmarks: list[dict]) -> int:
    """Return the shallowest outline level among bookmarks with a page target."""
    levels = [bm.get("level", 1) for bm in bookmarks if bm["page"] >= 1]
    return min(levels) if levels else 1


def _is_nested(bm: dict, last: dict | None, top_level: int, mode: str) -> bool:
    """Decide whether a bookmark belongs inside the last retained chapter."""
    if mode == FILTER_OUTLINE and bm.get("level", 1) > top_level:
        # Sub-entries sit between their parent and the next bookmark at the
        # same or a shallower level, so anything deeper than the top is nested.
        return True
    return last is not None and bm["page"] < last["start_page"]


def extract_chapters(bookmarks: list[dict], total_pages: int, mode: str = FILTER_OUTLINE) -> list[dict]:
    """
    Turn a pre-order bookmark list into contiguous top-level chapter ranges.

    Args:
        bookmarks: Dicts with 'title', 'page' and optionally 'level' keys,
            in document order. Missing levels count as top level.
        total_pages: Page count of the source document.
        mode: 'outline' keeps only the shallowest outline level; 'page'
            keeps every bookmark that does not start before the previous
            retained one.

    Returns:
        Chapter dicts with 'title', 'order', 'start_page' and 'end_page'.
        'order' is the bookmark's 1-based position in the unfiltered list.
        Each chapter ends on the next chapter's start page; the last one
        ends on total_pages.

    Raises:
        NoChaptersError: if no bookmark survives filtering.
    """
    if mode not in FILTER_MODES:
        raise ValueError(f"unknown filter mode: {mode!r}")

    top_level = _top_level(bookmarks)
    chapters = []
    for i, bm in enumerate(bookmarks, 1):
        # Outline items without a page target
        if bm["page"] < 1:
            continue
        last = chapters[-1] if chapters else None
        if _is_nested(bm, last, top_level, mode):
            continue
        chapters.append({
            "title": bm["title"],
            "order": i,
            "start_page": bm["page"],
            "end_page": 0,
        })

    if not chapters:
        raise NoChaptersError()

    for current, following in zip(chapters, chapters[1:]):
        current["end_page"] = following["start_page"]
    chapters[-1]["end_page"] = total_pages

    return chapters


def chapter_page_range(chapter: dict, is_last: bool, exclusive_end: bool = False) -> tuple[int, int]:
    """
    Return the inclusive (start, end) pages to export for a chapter.

    By default the boundary page is shared with the following chapter. With
    exclusive_end, every chapter but the last stops one page short of its
    end_page, never ending before it starts.
    """
    start, end = chapter["start_page"], chapter["end_page"]
    if exclusive_end and not is_last:
        end = max(start, end - 1)
    return start, end
