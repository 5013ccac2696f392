from __future__ import annotations
from typing import Iterable, List

from .config import CHAR_LIMIT, MIN_SUGGEST_CHARS, SUGGESTION_LIMIT
from .DB.index import CorpusIndex
from .errors import InvalidQuery
from .query import compile_prefix, compile_query, parse_terms
from .snippets import build_snippets
from .suggest import collect_suggestions


# Search: terms -> pattern -> match ranges -> merged, highlighted snippets.

def search(index: CorpusIndex, terms: Iterable[str], *, case_sensitive: bool = False,
           whole_word: bool = False, radius: int = CHAR_LIMIT) -> List[str]:
    query = compile_query(terms, case_sensitive=case_sensitive, whole_word=whole_word)
    matches = index.find_all(query)
    return build_snippets(matches, index.data, radius=radius)


def search_query(index: CorpusIndex, q: str, *, case_sensitive: bool = False,
                 whole_word: bool = False, radius: int = CHAR_LIMIT) -> List[str]:
    """Same as search() for a raw query string; spaces separate terms."""
    return search(index, parse_terms(q), case_sensitive=case_sensitive,
                  whole_word=whole_word, radius=radius)


# Suggest: prefix -> word-start pattern -> match ranges -> unique words.

def suggest(index: CorpusIndex, prefix: str, *, limit: int = SUGGESTION_LIMIT) -> List[str]:
    query = compile_prefix(prefix)
    matches = index.find_all(query)
    return collect_suggestions(matches, index.data, limit=limit)


def suggest_query(index: CorpusIndex, q: str, *, limit: int = SUGGESTION_LIMIT) -> List[str]:
    """
    Autocomplete for a raw query string: only the first token is used, and
    a first token shorter than MIN_SUGGEST_CHARS is rejected.
    """
    terms = parse_terms(q)
    if not terms:
        raise InvalidQuery("missing search query")
    prefix = terms[0]
    if len(prefix) < MIN_SUGGEST_CHARS:
        raise InvalidQuery(f"prefix must be at least {MIN_SUGGEST_CHARS} characters")
    return suggest(index, prefix, limit=limit)
