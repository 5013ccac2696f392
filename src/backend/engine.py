# backend/engine.py
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from . import config as CFG
from . import search as S
from .DB.index import CorpusIndex
from .loader import read_corpus

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that owns the single process-wide corpus index.

    Public API (used by CLI/Flask/GUI):
      * load(path):        read corpus bytes from disk -> build index
      * load_bytes(data):  build index from bytes obtained elsewhere
      * search(terms, case_sensitive, whole_word): highlighted snippets
      * suggest(prefix):   word completions
      * search_query(q, ...) / suggest_query(q): same, from raw query strings
      * shutdown():        drop the index

    The index is built once and only read afterwards, so one Engine can serve
    concurrent requests without locking.
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.index: Optional[CorpusIndex] = None
        self.source: Optional[str] = None

    # /* ~~~ Read the corpus file and build the index ~~~ */
    def load(self, path: str = CFG.CORPUS_PATH, *, verbose: bool = False) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
        log.info("Loading corpus from %s", path)
        data = read_corpus(path)
        self.load_bytes(data)
        self.source = path

    def load_bytes(self, data: bytes, *, chunk_size: int = CFG.CHUNK_SIZE) -> None:
        idx = CorpusIndex.load(data, chunk_size=chunk_size)
        self.index = idx
        self.source = None
        log.info("Engine load() complete: bytes=%d", len(idx))

    # ------------- query -------------

    def search(self, terms: Iterable[str], *, case_sensitive: bool = False,
               whole_word: bool = False) -> List[str]:
        return S.search(self._require_index(), terms,
                        case_sensitive=case_sensitive, whole_word=whole_word)

    def search_query(self, q: str, *, case_sensitive: bool = False,
                     whole_word: bool = False) -> List[str]:
        return S.search_query(self._require_index(), q,
                              case_sensitive=case_sensitive, whole_word=whole_word)

    def suggest(self, prefix: str) -> List[str]:
        return S.suggest(self._require_index(), prefix)

    def suggest_query(self, q: str) -> List[str]:
        return S.suggest_query(self._require_index(), q)

    @property
    def corpus_size(self) -> int:
        return len(self.index) if self.index is not None else 0

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        self.source = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require_index(self) -> CorpusIndex:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call load() or load_bytes() first.")
        return self.index
