from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True, order=True)
class MatchRange:
    start: int                # first byte of the match
    end: int                  # one past the last byte (half-open)

    def __len__(self) -> int:
        return self.end - self.start


@dataclass
class Window:
    start: int                # clamped [from, to) bounds into the corpus
    end: int
    spans: List[MatchRange] = field(default_factory=list)   # highlighted, ascending, disjoint

    @property
    def bounds(self) -> Tuple[int, int]:
        return (self.start, self.end)
