from __future__ import annotations
import re
from typing import Iterable, List, Set

from .config import SUGGESTION_LIMIT
from .models import MatchRange

# keep only ASCII letters, digits and spaces
_DROP = re.compile(rb"[^a-zA-Z0-9 ]+")
_WORD_BYTE = re.compile(rb"\w")


def collect_suggestions(matches: Iterable[MatchRange], corpus: bytes,
                        limit: int = SUGGESTION_LIMIT) -> List[str]:
    """
    Turn prefix matches into unique words, in the order they first appear.

    Each match starts with the non-word byte that anchored it (except at
    offset 0), which is skipped. Matches that leave nothing after stripping
    punctuation are ignored and do not count against `limit`, so the number of
    suggestions can be lower than the number of matches.
    """
    results: List[str] = []
    seen: Set[str] = set()
    if limit <= 0:
        return results

    for m in matches:
        start = m.start
        if start < m.end and not _WORD_BYTE.match(corpus, start):
            start += 1
        key = _DROP.sub(b"", corpus[start:m.end]).decode("ascii")
        if not key or key in seen:
            continue
        seen.add(key)
        results.append(key)
        if len(results) >= limit:
            break
    return results
