from __future__ import annotations


class SearchError(Exception):
    """Base class for every error raised by the search backend."""


class CorpusLoadError(SearchError, OSError):
    """The corpus could not be obtained or read. Fatal at startup."""


class InvalidQuery(SearchError, ValueError):
    """Empty or malformed query terms. The request is rejected."""


class PatternCompileError(SearchError, ValueError):
    """The regular expression built from the query terms does not compile."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"invalid pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason
