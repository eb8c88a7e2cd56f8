class PdfExtractorError(Exception):
    """Base class for failures the controller turns into status text."""


class DocumentOpenError(PdfExtractorError):
    """The file is missing, unreadable, password protected or not a PDF."""


class InvalidRangeError(PdfExtractorError, ValueError):
    def __init__(self, start: int, end: int):
        super().__init__(f"start page {start} is after end page {end}")
        self.start = start
        self.end = end


class ExtractionError(PdfExtractorError):
    """pypdf failed while pulling text out of an opened document."""


class ClipboardError(PdfExtractorError):
    pass
