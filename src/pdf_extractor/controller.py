from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable

from pdf_extractor.clipboard import ClipboardSink
from pdf_extractor.extract.errors import (
    ClipboardError,
    DocumentOpenError,
    ExtractionError,
    InvalidRangeError,
)
from pdf_extractor.extract.models import DocumentInfo, ExtractionResult, PageRange
from pdf_extractor.extract.pdf_source import DocumentSource

logger = logging.getLogger(__name__)

INVALID_RANGE_STATUS = "Invalid page range."


@dataclass(frozen=True)
class ControllerState:
    document: DocumentInfo | None = None
    start: int = 1
    end: int = 1
    status: str = ""

    @property
    def can_extract(self) -> bool:
        return self.document is not None and self.document.page_count > 0


Listener = Callable[[ControllerState], None]


def parse_page_number(raw: str) -> int:
    """
    Best-effort parse of a page field. Anything that is not an integer becomes 1.
    """
    try:
        return int(raw.strip())
    except (AttributeError, ValueError):
        return 1


class RangeExtractionController:
    """
    Holds the dropped document, the selected page range and the status line.

    Every mutation replaces the state snapshot and notifies subscribers, which
    is how the window knows when to re-render.
    """

    def __init__(self, source: DocumentSource, clipboard: ClipboardSink):
        self.source = source
        self.clipboard = clipboard
        self._state = ControllerState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ControllerState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _update(self, **changes) -> None:
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            listener(self._state)

    def load_document(self, pdf_path: Path) -> bool:
        pdf_path = Path(pdf_path)
        try:
            total_pages = self.source.page_count(pdf_path)
        except DocumentOpenError as exc:
            logger.warning("Could not open %s: %s", pdf_path, exc)
            # the previously loaded document stays selected
            self._update(status=f"Could not open {pdf_path.name}: {exc}")
            return False

        logger.info("Loaded %s (%d pages)", pdf_path, total_pages)
        self._update(
            document=DocumentInfo(path=str(pdf_path), page_count=total_pages),
            start=1,
            end=total_pages,
            status="",
        )
        return True

    def set_start(self, raw: str) -> None:
        self._update(start=parse_page_number(raw))

    def set_end(self, raw: str) -> None:
        self._update(end=parse_page_number(raw))

    def extract(self) -> ExtractionResult | None:
        state = self._state
        if not state.can_extract:
            # range inputs are never shown for an empty or missing document
            logger.debug("Extract requested without a usable document")
            return None

        document = state.document
        try:
            page_range = PageRange.clamped(state.start, state.end, document.page_count)
        except InvalidRangeError as exc:
            logger.info("Rejected range for %s: %s", document.name, exc)
            self._update(status=INVALID_RANGE_STATUS)
            return None

        try:
            text = self.source.extract_text(Path(document.path), page_range.start, page_range.end)
        except (DocumentOpenError, ExtractionError) as exc:
            logger.warning("Extraction of %s pages %d-%d failed: %s",
                           document.name, page_range.start, page_range.end, exc)
            self._update(
                status=f"Could not extract pages {page_range.start} to {page_range.end}: {exc}"
            )
            return None

        try:
            self.clipboard.set_text(text)
        except ClipboardError as exc:
            logger.warning("Clipboard rejected %d chars: %s", len(text), exc)
            self._update(status=f"Could not copy to clipboard: {exc}")
            return None

        logger.info("Copied pages %d-%d of %s (%d chars)",
                    page_range.start, page_range.end, document.name, len(text))
        self._update(status=f"Copied pages {page_range.start} to {page_range.end}!")
        return ExtractionResult(page_range=page_range, text=text, char_count=len(text))
