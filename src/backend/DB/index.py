from __future__ import annotations
import logging
import re
from array import array
from typing import Dict, Iterable, List, Set, Tuple, Union

from ..config import CHUNK_SIZE, ENCODING, GRAM
from ..errors import CorpusLoadError
from ..loader import iter_chunks
from ..models import MatchRange
from ..query import CompiledQuery

log = logging.getLogger(__name__)

Pattern = Union[CompiledQuery, "re.Pattern[bytes]"]


def kgrams(s: bytes, k: int) -> Set[bytes]:
    """Return distinct k-grams of s."""
    if k <= 0 or len(s) < k:
        return set()
    return {s[i:i+k] for i in range(len(s) - k + 1)}


class CorpusIndex:
    """
    Read-only pattern index over one immutable corpus.

    The corpus is split into newline-aligned chunks and a k-gram table maps
    each case-folded gram to the ascending ids of the chunks containing it.
    find_all() runs the regular expression over the whole corpus, or only over
    the candidate chunks when the compiled query names the literals every
    match must contain. Both paths report the same ranges.

    There is no mutation API: a new corpus means a new index.
    """

    def __init__(self, data: bytes, chunk_size: int = CHUNK_SIZE) -> None:
        self._data = bytes(data)
        self._chunks: List[Tuple[int, int]] = list(iter_chunks(self._data, chunk_size))
        self._grams: Dict[bytes, array] = {}

    @classmethod
    def load(cls, data: bytes, chunk_size: int = CHUNK_SIZE) -> "CorpusIndex":
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise CorpusLoadError(f"Load: corpus must be bytes, got {type(data).__name__}")
        idx = cls(data, chunk_size=chunk_size)
        idx.build()
        return idx

    # ---- Build (once) ----
    def build(self) -> None:
        buckets: Dict[bytes, array] = {}
        for cid, (start, end) in enumerate(self._chunks):
            for g in kgrams(self._data[start:end].lower(), GRAM):
                post = buckets.get(g)
                if post is None:
                    post = buckets[g] = array("I")
                post.append(cid)  # chunk ids arrive in order: postings stay sorted
        self._grams = buckets
        log.info("Built corpus index: bytes=%d chunks=%d grams=%d",
                 len(self._data), len(self._chunks), len(buckets))

    # ---- Corpus access ----
    @property
    def data(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def text(self, start: int, end: int) -> str:
        return self._data[start:end].decode(ENCODING, errors="replace")

    # ---- Query ----
    def candidate_chunks(self, literals: Iterable[str]) -> List[int]:
        """Ids of the chunks that contain every gram of at least one literal."""
        hits: Set[int] = set()
        for lit in literals:
            grams = kgrams(lit.lower().encode(ENCODING), GRAM)
            postings = [self._grams.get(g) for g in grams]
            if not postings or not all(postings):
                continue
            postings.sort(key=len)
            common = set(postings[0])
            for p in postings[1:]:
                common.intersection_update(p)
                if not common:
                    break
            hits |= common
        return sorted(hits)

    def find_all(self, pattern: Pattern) -> List[MatchRange]:
        """Every non-overlapping match of pattern, ascending by start offset."""
        if isinstance(pattern, CompiledQuery):
            rgx, literals = pattern.pattern, pattern.literals
        else:
            rgx, literals = pattern, ()

        if not literals or not self._grams:
            return [MatchRange(*m.span()) for m in rgx.finditer(self._data)]

        out: List[MatchRange] = []
        for cid in self.candidate_chunks(literals):
            start, end = self._chunks[cid]
            # one byte early: a pattern may consume the separator before a word
            for m in rgx.finditer(self._data, max(0, start - 1), end):
                s, e = m.span()
                if out and s < out[-1].end:
                    continue
                out.append(MatchRange(s, e))
        return out
