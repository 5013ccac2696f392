from backend.DB.index import CorpusIndex
from backend.models import MatchRange
from backend.search import suggest
from backend.suggest import collect_suggestions


def test_duplicates_are_dropped_in_first_seen_order():
    idx = CorpusIndex.load(b"cat cats cat catalog")
    assert suggest(idx, "cat") == ["cat", "cats", "catalog"]


def test_case_is_kept_as_found():
    idx = CorpusIndex.load(b"The theatre, THE end. Other")
    assert suggest(idx, "the") == ["The", "theatre", "THE"]


def test_only_word_starts_are_suggested():
    idx = CorpusIndex.load(b"bother mother the")
    assert suggest(idx, "the") == ["the"]


def test_never_more_than_ten():
    words = " ".join(f"pre{i}" for i in range(15)).encode()
    idx = CorpusIndex.load(words)
    out = suggest(idx, "pre")
    assert out == [f"pre{i}" for i in range(10)]
    assert suggest(idx, "pre", limit=3) == ["pre0", "pre1", "pre2"]


def test_no_match_no_suggestion():
    idx = CorpusIndex.load(b"alpha beta")
    assert suggest(idx, "gam") == []


def test_anchor_byte_and_punctuation_are_stripped():
    corpus = b"x 'tis; y"
    # " 'tis" : anchor skipped, quote stripped
    assert collect_suggestions([MatchRange(1, 6)], corpus) == ["tis"]


def test_empty_keys_do_not_count_against_the_limit():
    corpus = b"a --- b -- word1 word2"
    matches = [MatchRange(1, 5), MatchRange(7, 10), MatchRange(10, 16), MatchRange(16, 22)]
    assert collect_suggestions(matches, corpus, limit=2) == ["word1", "word2"]


def test_zero_limit():
    assert collect_suggestions([MatchRange(0, 3)], b"cat", limit=0) == []
