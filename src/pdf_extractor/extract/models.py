from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, computed_field

from pdf_extractor.extract.errors import InvalidRangeError


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


class DocumentInfo(BaseModel):
    path: str
    page_count: int = Field(..., ge=0)

    @computed_field
    @property
    def name(self) -> str:
        return Path(self.path).name


class PageRange(BaseModel):
    start: int = Field(..., ge=1)
    end: int = Field(..., ge=1)

    @classmethod
    def clamped(cls, start: int, end: int, total_pages: int) -> PageRange:
        """
        Clamp raw bounds into [1, total_pages].
        Raises InvalidRangeError when the clamped start is after the clamped end;
        the bounds are never swapped.
        """
        if total_pages < 1:
            raise ValueError("total_pages must be >= 1")

        actual_start = clamp(start, 1, total_pages)
        actual_end = clamp(end, 1, total_pages)
        if actual_start > actual_end:
            raise InvalidRangeError(actual_start, actual_end)
        return cls(start=actual_start, end=actual_end)

    @property
    def page_count(self) -> int:
        return self.end - self.start + 1


class ExtractionResult(BaseModel):
    page_range: PageRange
    text: str
    char_count: int
