"""
Query compilation.

Turns user search options into a single compiled bytes regular expression:

- several terms are combined as an alternation (match any term),
- matching is case-insensitive unless case_sensitive is set,
- whole_word wraps the alternation (never the individual terms) in \\b anchors.

Terms are regular-expression fragments and are not escaped, so a term such as
"to(" is rejected with PatternCompileError rather than silently matched.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .config import ENCODING, GRAM
from .errors import InvalidQuery, PatternCompileError

# plain ASCII words are the only terms the trigram prefilter can vouch for
_LITERAL = re.compile(r"[A-Za-z0-9_]+")


@dataclass(frozen=True)
class CompiledQuery:
    pattern: re.Pattern            # bytes pattern run against the corpus
    literals: Tuple[str, ...] = () # every match contains one of these (case-folded); empty = unknown

    @property
    def source(self) -> str:
        return self.pattern.pattern.decode(ENCODING, errors="replace")


def parse_terms(q: str) -> List[str]:
    """Split a raw query string into terms; spaces separate terms."""
    return [t for t in q.split(" ") if t]


def _clean_terms(terms: Iterable[str]) -> List[str]:
    if isinstance(terms, str):
        terms = [terms]
    out = [t for t in terms if t]
    if not out:
        raise InvalidQuery("missing search query")
    return out


def _literals(terms: List[str]) -> Tuple[str, ...]:
    if all(len(t) >= GRAM and _LITERAL.fullmatch(t) for t in terms):
        return tuple(t.lower() for t in terms)
    return ()


def _compile(expr: str, flags: int = 0) -> re.Pattern:
    try:
        return re.compile(expr.encode(ENCODING), flags)
    except re.error as exc:
        raise PatternCompileError(expr, str(exc)) from exc


def compile_query(terms: Iterable[str], case_sensitive: bool = False,
                  whole_word: bool = False) -> CompiledQuery:
    """
    Compile search terms into one pattern.

    The case flag is scoped to the alternation group, e.g. "(?i:cat|dog)", and
    whole-word mode wraps that group: "\\b(?i:cat|dog)\\b".
    """
    terms = _clean_terms(terms)
    alternation = "|".join(terms)
    expr = f"({alternation})" if case_sensitive else f"(?i:{alternation})"
    if whole_word:
        expr = rf"\b{expr}\b"
    return CompiledQuery(pattern=_compile(expr), literals=_literals(terms))


def compile_prefix(term: str) -> CompiledQuery:
    """
    Compile the word-prefix pattern used for suggestions.

    Matches a non-word byte (or the start of the corpus) followed by the term
    and any trailing word characters; always case-insensitive.
    """
    term = _clean_terms([term])[0]
    expr = rf"(?:^|[^\w])({term})\w*"
    return CompiledQuery(pattern=_compile(expr, re.IGNORECASE), literals=_literals([term]))
