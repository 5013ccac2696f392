"""
Context windows and highlighted snippets.

Every match is widened by `radius` bytes on each side (clamped to the corpus).
Matches whose widened windows overlap or touch are merged into one window that
highlights all of them. Each closed window is then trimmed so it starts and
ends on whole words, and rendered with HIGHLIGHT_START / HIGHLIGHT_END around
every matched span.
"""

from __future__ import annotations
import logging
import re
from typing import Iterable, List, Optional

from .config import CHAR_LIMIT, ENCODING, HIGHLIGHT_END, HIGHLIGHT_START
from .models import MatchRange, Window

log = logging.getLogger(__name__)

_BLANK = re.compile(rb"\s")
_LAST_BLANK = re.compile(rb"\s(?=\S*\Z)")


def _ordered_spans(matches: Iterable[MatchRange]) -> List[MatchRange]:
    """Sort by start and coalesce overlapping ranges so markers never nest."""
    spans: List[MatchRange] = []
    for m in sorted(matches):
        if spans and m.start < spans[-1].end:
            prev = spans[-1]
            spans[-1] = MatchRange(prev.start, max(prev.end, m.end))
            continue
        spans.append(m)
    return spans


def _trim(win: Window, corpus: bytes) -> Window:
    """Drop the partial first/last word of a window whose edge is not a corpus edge."""
    n = len(corpus)
    start, end = win.start, win.end
    first, last = win.spans[0], win.spans[-1]

    if start > 0:
        m = _BLANK.search(corpus, start, first.start)
        start = m.end() if m else first.start

    if end < n:
        m = _LAST_BLANK.search(corpus, last.end, end)
        end = m.start() if m else last.end

    return Window(start=start, end=end, spans=list(win.spans))


def build_windows(matches: Iterable[MatchRange], corpus: bytes,
                  radius: int = CHAR_LIMIT) -> List[Window]:
    """
    Group matches into trimmed context windows.

    Input order does not matter. A match joins the current group when its
    widened start lies at or before the group's widened end.
    """
    n = len(corpus)
    out: List[Window] = []
    group: Optional[Window] = None

    for m in _ordered_spans(matches):
        lo = max(0, m.start - radius)
        hi = min(n, m.end + radius)
        if group is not None and lo <= group.end:
            group.end = max(group.end, hi)
            group.spans.append(m)
            continue
        if group is not None:
            out.append(_trim(group, corpus))
        group = Window(start=lo, end=hi, spans=[m])

    if group is not None:
        out.append(_trim(group, corpus))
    return out


def render(win: Window, corpus: bytes) -> str:
    """Corpus text of win with every span wrapped in highlight markers."""
    parts: List[str] = []
    pos = win.start
    for span in win.spans:
        parts.append(corpus[pos:span.start].decode(ENCODING, errors="replace"))
        parts.append(HIGHLIGHT_START)
        parts.append(corpus[span.start:span.end].decode(ENCODING, errors="replace"))
        parts.append(HIGHLIGHT_END)
        pos = span.end
    parts.append(corpus[pos:win.end].decode(ENCODING, errors="replace"))
    return "".join(parts)


def build_snippets(matches: Iterable[MatchRange], corpus: bytes,
                   radius: int = CHAR_LIMIT) -> List[str]:
    windows = build_windows(matches, corpus, radius=radius)
    log.debug("Built %d snippets", len(windows))
    return [render(w, corpus) for w in windows]
