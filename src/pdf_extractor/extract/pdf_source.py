from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Protocol

from pypdf import PasswordType, PdfReader
from pypdf.errors import PyPdfError

from pdf_extractor.extract.errors import DocumentOpenError, ExtractionError

logger = logging.getLogger(__name__)

# pypdf is not strict about its exception types on damaged files;
# unsupported stream filters surface as NotImplementedError.
_PDF_ERRORS = (PyPdfError, ValueError, KeyError, NotImplementedError)


class DocumentSource(Protocol):
    def page_count(self, pdf_path: Path) -> int: ...

    def extract_text(self, pdf_path: Path, start: int, end: int) -> str: ...


@contextmanager
def open_pdf(pdf_path: Path) -> Iterator[PdfReader]:
    """
    Open a PDF for the duration of a with-block.
    The underlying file is closed on every exit path, including parse errors.
    Encrypted documents are tried with an empty user password.
    """
    try:
        stream = pdf_path.open("rb")
    except OSError as exc:
        raise DocumentOpenError(exc.strerror or str(exc)) from exc

    with stream:
        try:
            reader = PdfReader(stream)
            if reader.is_encrypted and reader.decrypt("") == PasswordType.NOT_DECRYPTED:
                raise DocumentOpenError("document is password protected")
        except _PDF_ERRORS as exc:
            raise DocumentOpenError(f"not a readable PDF ({exc})") from exc
        yield reader


def extract_text_for_range(reader: PdfReader, start: int, end: int, separator: str = "\n") -> str:
    """
    Text of pages start..end (1-based, inclusive), joined with separator.
    """
    total_pages = len(reader.pages)
    if start < 1 or end > total_pages or start > end:
        raise ExtractionError(f"pages {start}-{end} are outside 1-{total_pages}")

    texts: list[str] = []
    for p in range(start, end + 1):
        page = reader.pages[p - 1]
        texts.append(page.extract_text() or "")
    return separator.join(texts)


class PypdfDocumentSource:
    def __init__(self, page_separator: str = "\n"):
        self.page_separator = page_separator

    def page_count(self, pdf_path: Path) -> int:
        with open_pdf(pdf_path) as reader:
            try:
                total_pages = len(reader.pages)
            except _PDF_ERRORS as exc:
                raise DocumentOpenError(f"page tree is damaged ({exc})") from exc

        logger.debug("%s has %d pages", pdf_path, total_pages)
        return total_pages

    def extract_text(self, pdf_path: Path, start: int, end: int) -> str:
        with open_pdf(pdf_path) as reader:
            try:
                return extract_text_for_range(reader, start, end, self.page_separator)
            except _PDF_ERRORS as exc:
                raise ExtractionError(str(exc)) from exc
