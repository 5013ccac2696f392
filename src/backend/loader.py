from __future__ import annotations
import logging
import os
from typing import Iterator, Tuple

from .config import CHUNK_SIZE
from .errors import CorpusLoadError

log = logging.getLogger(__name__)


def read_corpus(path: str) -> bytes:
    """
    Read the whole corpus file as raw bytes.

    The bytes are kept exactly as stored on disk (no decoding, no newline
    translation) so that every offset reported by the index is a file offset.
    Any OS-level failure is reported as CorpusLoadError.
    """
    path = os.path.abspath(path)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise CorpusLoadError(f"Load: cannot read corpus {path}: {exc}") from exc
    log.info("Read corpus %s (%d bytes)", path, len(data))
    return data


def iter_chunks(data: bytes, size: int = CHUNK_SIZE) -> Iterator[Tuple[int, int]]:
    """
    Yield (start, end) bounds of consecutive chunks covering data.

    Each chunk holds at least `size` bytes (except the last) and is extended to
    end right after a newline, so a match that cannot cross a line break never
    straddles two chunks.
    """
    size = max(1, int(size))
    n = len(data)
    start = 0
    while start < n:
        cut = start + size
        if cut >= n:
            end = n
        else:
            nl = data.find(b"\n", cut - 1)
            end = n if nl == -1 else nl + 1
        yield start, end
        start = end
