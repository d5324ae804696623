import fitz  # PyMuPDF
import pytest


@pytest.fixture
def page_texts():
    """Return a reader for the stripped text of every page in a PDF."""

    def _read(path) -> list[str]:
        doc = fitz.open(str(path))
        texts = [page.get_text().strip() for page in doc]
        doc.close()
        return texts

    return _read


@pytest.fixture
def make_pdf(tmp_path):
    """Build a PDF whose page n reads 'Page n', with an optional outline."""

    def _make(page_count: int, toc: list | None = None, name: str = "book.pdf"):
        doc = fitz.open()
        for n in range(1, page_count + 1):
            page = doc.new_page()
            page.insert_text((72, 72), f"Page {n}")
        if toc:
            doc.set_toc(toc)
        path = tmp_path / name
        doc.save(str(path))
        doc.close()
        return path

    return _make


@pytest.fixture
def book_pdf(make_pdf):
    """A 20 page book with one nested section."""
    return make_pdf(20, [
        [1, "Intro", 1],
        [1, "Ch1", 3],
        [2, "Ch1.1", 5],
        [1, "Ch2", 10],
    ])
