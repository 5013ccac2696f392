"""Full-text corpus search: pattern index, highlighted snippets and word suggestions."""
from .engine import Engine
from .errors import CorpusLoadError, InvalidQuery, PatternCompileError, SearchError

__version__ = "1.0.0"
__all__ = ["Engine", "SearchError", "CorpusLoadError", "InvalidQuery", "PatternCompileError"]
