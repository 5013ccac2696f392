# app.py
# CustomTkinter GUI for corpus search (dark theme).
# - Load one corpus file on a background thread (keeps UI responsive).
# - Search with case-sensitive / whole-word toggles; live suggestions with debounce.
# - Results & event log panes.

from __future__ import annotations
import re
import threading
from typing import List, Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

# Project imports (ensure PYTHONPATH=src)
from backend.engine import Engine
from backend.errors import SearchError
from backend import config as CFG

_MARK = re.compile(re.escape(CFG.HIGHLIGHT_START) + "|" + re.escape(CFG.HIGHLIGHT_END))


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


def split_marks(snippet: str) -> List[tuple[str, bool]]:
    """Split a snippet into (text, highlighted) pieces on the highlight markers."""
    out: List[tuple[str, bool]] = []
    inside = False
    pos = 0
    for m in _MARK.finditer(snippet):
        if m.start() > pos:
            out.append((snippet[pos:m.start()], inside))
        inside = m.group(0) == CFG.HIGHLIGHT_START
        pos = m.end()
    if pos < len(snippet):
        out.append((snippet[pos:], inside))
    return out


# -------------------- main app --------------------

class SearchApp(ctk.CTk):
    """Dark-themed GUI that loads a corpus file and queries the engine."""

    def __init__(self) -> None:
        super().__init__()

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self.title("Corpus Search")
        self.geometry("900x650")
        self.minsize(820, 560)

        # State
        self._engine = Engine()
        self._loading_thread: Optional[threading.Thread] = None
        self._suggest_after_id: Optional[str] = None

        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # results
        self.grid_rowconfigure(4, weight=0)  # log

        self._build_header()
        self._build_source_bar()
        self._build_search()
        self._build_results()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        ctk.CTkLabel(header, text="Corpus Search", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(1, weight=1)

        ctk.CTkButton(bar, text="Choose Corpus", command=self._choose_file).grid(
            row=0, column=0, padx=(12, 6), pady=10
        )
        self.lbl_source = ctk.CTkLabel(bar, text="No corpus selected", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=1, sticky="ew", padx=6, pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate")
        self.progress.grid(row=0, column=2, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=3, sticky="e", padx=12, pady=10)

    def _build_search(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(0, weight=1)

        self.entry_query = ctk.CTkEntry(box, placeholder_text="Search terms (space separated)…")
        self.entry_query.grid(row=0, column=0, sticky="ew", padx=(12, 6), pady=10)
        self.entry_query.bind("<KeyRelease>", self._on_query_changed)
        self.entry_query.bind("<Return>", lambda _ev: self._do_search())

        self.var_cs = ctk.BooleanVar(value=False)
        self.var_ww = ctk.BooleanVar(value=False)
        ctk.CTkCheckBox(box, text="Case sensitive", variable=self.var_cs).grid(row=0, column=1, padx=6)
        ctk.CTkCheckBox(box, text="Whole word", variable=self.var_ww).grid(row=0, column=2, padx=6)
        ctk.CTkButton(box, text="Search", width=90, command=self._do_search).grid(
            row=0, column=3, padx=(6, 12)
        )

        self.lbl_suggest = ctk.CTkLabel(box, text="", anchor="w", font=self.font_label)
        self.lbl_suggest.grid(row=1, column=0, columnspan=4, sticky="ew", padx=12, pady=(0, 8))

    def _build_results(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=6)
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(0, weight=1)

        self.txt_results = ctk.CTkTextbox(frame, wrap="word", font=self.font_mono)
        self.txt_results.grid(row=0, column=0, sticky="nsew", padx=12, pady=12)
        self.txt_results.tag_config("mark", background="#1f4e5a", foreground="#6ee7ff")
        self.txt_results.configure(state="disabled")

    def _build_log(self) -> None:
        self.txt_log = ctk.CTkTextbox(self, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        self._log("GUI ready. Choose a corpus file to begin.")

    # --------- loading (threaded) ---------

    def _choose_file(self) -> None:
        path = fd.askopenfilename(
            title="Choose corpus",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")]
        )
        if path:
            self._start_loading(path)

    def _start_loading(self, path: str) -> None:
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "A corpus is already loading. Please wait.")
            return
        self.lbl_source.configure(text=shorten_path(path))
        self._set_status("Loading…")
        self.progress.start()
        self._loading_thread = threading.Thread(target=self._load_worker, args=(path,), daemon=True)
        self._loading_thread.start()

    def _load_worker(self, path: str) -> None:
        try:
            self._engine.load(path)
        except Exception as exc:
            self.after(0, lambda e=exc: self._on_load_error(e))
            return
        self.after(0, lambda: self._on_load_ok(self._engine.corpus_size))

    def _on_load_ok(self, n_bytes: int) -> None:
        self.progress.stop()
        self._set_status(f"Loaded {n_bytes:,} bytes.")
        self._log(f"Corpus ready ({n_bytes} bytes).")
        self.entry_query.focus_set()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while loading corpus.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", "Failed to load corpus.\nSee event log for details.")

    # --------- search / suggest ---------

    def _on_query_changed(self, _ev=None) -> None:
        if self._suggest_after_id is not None:
            self.after_cancel(self._suggest_after_id)
        self._suggest_after_id = self.after(160, self._do_suggest)

    def _do_suggest(self) -> None:
        self._suggest_after_id = None
        q = self.entry_query.get()
        if self._engine.index is None or not q.strip():
            self.lbl_suggest.configure(text="")
            return
        try:
            words = self._engine.suggest_query(q)
        except SearchError:
            words = []
        self.lbl_suggest.configure(text="  ·  ".join(words))

    def _do_search(self) -> None:
        q = self.entry_query.get()
        if self._engine.index is None:
            self._set_results([])
            self._log("Search attempted before corpus load.")
            return
        try:
            snippets = self._engine.search_query(
                q, case_sensitive=self.var_cs.get(), whole_word=self.var_ww.get()
            )
        except SearchError as exc:
            self._set_results([])
            self._log(f"ERROR in search: {exc}")
            return
        self._set_status(f"{len(snippets)} snippets.")
        self._set_results(snippets)

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_results(self, snippets: List[str]) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.delete("0.0", "end")
        for i, snippet in enumerate(snippets, 1):
            self.txt_results.insert("end", f"--- {i} ---\n")
            for text, marked in split_marks(snippet):
                self.txt_results.insert("end", text, "mark" if marked else None)
            self.txt_results.insert("end", "\n\n")
        self.txt_results.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    def _on_close(self) -> None:
        self._engine.shutdown()
        self.destroy()


if __name__ == "__main__":
    app = SearchApp()
    app.mainloop()
