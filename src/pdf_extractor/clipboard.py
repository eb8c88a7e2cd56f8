from __future__ import annotations

import tkinter as tk
from typing import Protocol

from pdf_extractor.extract.errors import ClipboardError


class ClipboardSink(Protocol):
    def set_text(self, text: str) -> None: ...


class TkClipboard:
    """
    System clipboard through the application's Tk root.
    Tk owns the selection, so the contents stay available while the window lives.
    """

    def __init__(self, root: tk.Misc):
        self.root = root

    def set_text(self, text: str) -> None:
        try:
            self.root.clipboard_clear()
            self.root.clipboard_append(text)
            # flush to the window system before focus moves elsewhere
            self.root.update()
        except tk.TclError as exc:
            raise ClipboardError(str(exc)) from exc
