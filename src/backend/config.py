import os

# Context window radius (bytes on each side of a match)
CHAR_LIMIT: int = 250

# Autocomplete caps
SUGGESTION_LIMIT: int = 10
MIN_SUGGEST_CHARS: int = 3

# Highlight markers wrapped around every matched span
HIGHLIGHT_START: str = "<mark>"
HIGHLIGHT_END: str = "</mark>"

# Index tuning: n-gram size and newline-aligned chunk size for the prefilter
GRAM: int = 3
CHUNK_SIZE: int = 4096

# Text decoding for emitted snippets
ENCODING: str = "utf-8"

# /* ~~~ process settings (env overrides) ~~~ */
CORPUS_PATH: str = os.environ.get("CORPUS_PATH", "completeworks.txt")
PORT: str = os.environ.get("PORT") or "3001"  # parsed by the front ends
VERBOSE: bool = os.environ.get("SEARCH_VERBOSE") == "1"
