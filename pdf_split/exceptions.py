"""Errors raised while splitting a PDF into chapters."""


class PdfSplitError(Exception):
    """Base class for all errors that abort a split."""


class InputFileError(PdfSplitError):
    """The input PDF is missing, unreadable or cannot be parsed."""


class BookmarkError(PdfSplitError):
    """The document outline could not be read."""


class NoChaptersError(PdfSplitError):
    """No chapters were left after filtering the bookmarks."""

    def __init__(self, message: str = "no chapters found in input file"):
        super().__init__(message)


class OutputDirectoryError(PdfSplitError):
    """The output directory could not be created."""


class ExportError(PdfSplitError):
    """A chapter's page range could not be written to its output file."""
