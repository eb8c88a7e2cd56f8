from __future__ import annotations

import logging
import tkinter as tk
from dataclasses import dataclass
from pathlib import Path
from tkinter import filedialog, ttk

from tkinterdnd2 import DND_FILES, TkinterDnD

from pdf_extractor.clipboard import TkClipboard
from pdf_extractor.controller import ControllerState, RangeExtractionController
from pdf_extractor.extract.models import DocumentInfo
from pdf_extractor.extract.pdf_source import PypdfDocumentSource
from pdf_extractor.log import setup_logging
from pdf_extractor.settings import settings

logger = logging.getLogger(__name__)

DROP_HINT = "<Drop a PDF here>"


def first_dropped_path(dropped: tuple[str, ...] | list[str]) -> Path | None:
    """
    Only the first file of a multi-file drop is used.
    """
    for candidate in dropped:
        candidate = candidate.strip().strip("{}")
        if candidate:
            return Path(candidate)
    return None


@dataclass(frozen=True)
class WindowView:
    file_label: str
    pages_label: str
    show_range: bool
    show_error: bool
    # new entry texts, only when a different document arrived
    fields: tuple[str, str] | None


def window_view(state: ControllerState, shown_document: DocumentInfo | None) -> WindowView:
    document = state.document
    fields = None
    if document is not shown_document:
        fields = (str(state.start), str(state.end))

    return WindowView(
        file_label=f"PDF File: {document.name if document else DROP_HINT}",
        pages_label=f"Total Pages: {document.page_count}" if state.can_extract else "",
        show_range=state.can_extract,
        show_error=not state.can_extract and bool(state.status),
        fields=fields,
    )


class PdfExtractorWindow:
    def __init__(self, root: tk.Tk, controller: RangeExtractionController):
        self.root = root
        self.controller = controller
        self._shown_document: DocumentInfo | None = None

        self.file_var = tk.StringVar(value=f"PDF File: {DROP_HINT}")
        self.pages_var = tk.StringVar()
        self.start_var = tk.StringVar(value="1")
        self.end_var = tk.StringVar(value="1")
        self.status_var = tk.StringVar()

        self._build()

        root.drop_target_register(DND_FILES)
        root.dnd_bind("<<Drop>>", self.on_drop)

        self.start_var.trace_add("write", lambda *_: controller.set_start(self.start_var.get()))
        self.end_var.trace_add("write", lambda *_: controller.set_end(self.end_var.get()))

        controller.subscribe(self.render)
        self.render(controller.state)

    def _build(self) -> None:
        body = ttk.Frame(self.root, padding=16)
        body.pack(fill="both", expand=True)

        header = ttk.Frame(body)
        header.pack(fill="x")
        ttk.Label(header, textvariable=self.file_var).pack(side="left")
        ttk.Button(header, text="Open PDF...", command=self.pick_file).pack(side="right")

        self.range_frame = ttk.Frame(body)
        ttk.Label(self.range_frame, textvariable=self.pages_var).pack(anchor="w", pady=(8, 8))

        fields = ttk.Frame(self.range_frame)
        fields.pack(anchor="w")
        ttk.Label(fields, text="Start Page").grid(row=0, column=0, sticky="w")
        ttk.Entry(fields, textvariable=self.start_var, width=10).grid(row=1, column=0, padx=(0, 16))
        ttk.Label(fields, text="End Page").grid(row=0, column=1, sticky="w")
        ttk.Entry(fields, textvariable=self.end_var, width=10).grid(row=1, column=1)

        ttk.Button(
            self.range_frame,
            text="Extract & Copy Pages",
            command=self.controller.extract,
        ).pack(anchor="w", pady=(16, 8))
        ttk.Label(self.range_frame, textvariable=self.status_var).pack(anchor="w")

        # shown even without a usable document so open errors are visible
        self.error_label = ttk.Label(body, textvariable=self.status_var)

    def on_drop(self, event) -> None:
        path = first_dropped_path(self.root.tk.splitlist(event.data))
        if path is None:
            return
        logger.debug("Dropped %s", path)
        self.controller.load_document(path)

    def pick_file(self) -> None:
        chosen = filedialog.askopenfilename(
            title="Select PDF",
            filetypes=[("PDF files", "*.pdf"), ("All files", "*.*")],
        )
        if chosen:
            self.controller.load_document(Path(chosen))

    def render(self, state: ControllerState) -> None:
        view = window_view(state, self._shown_document)
        self._shown_document = state.document
        self.file_var.set(view.file_label)
        self.pages_var.set(view.pages_label)
        self.status_var.set(state.status)

        if view.fields is not None:
            # partial typing survives until the next document
            self.start_var.set(view.fields[0])
            self.end_var.set(view.fields[1])

        if view.show_range:
            self.range_frame.pack(fill="x", anchor="w")
        else:
            self.range_frame.pack_forget()

        if view.show_error:
            self.error_label.pack(anchor="w", pady=(8, 0))
        else:
            self.error_label.pack_forget()


def main() -> None:
    setup_logging(settings.log_level)

    root = TkinterDnD.Tk()
    root.title(settings.window_title)
    root.geometry(f"{settings.window_width}x{settings.window_height}")

    controller = RangeExtractionController(
        source=PypdfDocumentSource(page_separator=settings.page_separator),
        clipboard=TkClipboard(root),
    )
    PdfExtractorWindow(root, controller)

    logger.info("Starting %s (env=%s)", settings.window_title, settings.app_env)
    root.mainloop()


if __name__ == "__main__":
    main()
