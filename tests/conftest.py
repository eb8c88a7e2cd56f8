from __future__ import annotations

from pathlib import Path

import pytest

from pdf_extractor.extract.errors import ClipboardError, DocumentOpenError


def build_pdf(page_texts: list[str], content_filter: str | None = None) -> bytes:
    """
    Minimal PDF with one Helvetica text line per page.
    """
    kids = " ".join(f"{4 + 2 * i} 0 R" for i in range(len(page_texts)))
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(page_texts)} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for i, text in enumerate(page_texts):
        content = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {5 + 2 * i} 0 R >>"
            ).encode()
        )
        filter_entry = f" /Filter /{content_filter}" if content_filter else ""
        stream_dict = f"<< /Length {len(content)}{filter_entry} >>\nstream\n".encode()
        objects.append(stream_dict + content + b"\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for num, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % num + body + b"\nendobj\n"

    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for off in offsets:
        out += b"%010d 00000 n \n" % off
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref_at)
    return bytes(out)


@pytest.fixture
def make_pdf(tmp_path):
    def _make(page_texts: list[str], name: str = "sample.pdf", content_filter: str | None = None) -> Path:
        path = tmp_path / name
        path.write_bytes(build_pdf(page_texts, content_filter))
        return path

    return _make


class FakeSource:
    def __init__(self, pages: dict[str, int] | None = None):
        self.pages = pages or {}
        self.extract_calls: list[tuple[Path, int, int]] = []
        self.extract_error: Exception | None = None

    def page_count(self, pdf_path: Path) -> int:
        if pdf_path.name not in self.pages:
            raise DocumentOpenError("not a readable PDF")
        return self.pages[pdf_path.name]

    def extract_text(self, pdf_path: Path, start: int, end: int) -> str:
        self.extract_calls.append((pdf_path, start, end))
        if self.extract_error is not None:
            raise self.extract_error
        return " ".join(f"page-{p}" for p in range(start, end + 1))


class FakeClipboard:
    def __init__(self):
        self.texts: list[str] = []
        self.fail = False

    def set_text(self, text: str) -> None:
        if self.fail:
            raise ClipboardError("clipboard unavailable")
        self.texts.append(text)


@pytest.fixture
def source():
    return FakeSource({"ten.pdf": 10, "five.pdf": 5, "empty.pdf": 0})


@pytest.fixture
def clipboard():
    return FakeClipboard()
