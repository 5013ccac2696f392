import re
import pytest

from backend.errors import InvalidQuery, PatternCompileError
from backend.query import compile_prefix, compile_query, parse_terms


def test_terms_become_one_case_insensitive_alternation():
    q = compile_query(["cat", "dog"])
    assert q.pattern.pattern == rb"(?i:cat|dog)"
    assert q.source == "(?i:cat|dog)"


def test_case_sensitive_drops_the_flag():
    q = compile_query(["cat", "dog"], case_sensitive=True)
    assert q.pattern.pattern == rb"(cat|dog)"


def test_whole_word_wraps_the_group_not_each_term():
    q = compile_query(["cat", "dog"], whole_word=True)
    assert q.pattern.pattern == rb"\b(?i:cat|dog)\b"
    q = compile_query(["cat", "dog"], case_sensitive=True, whole_word=True)
    assert q.pattern.pattern == rb"\b(cat|dog)\b"


def test_whole_word_excludes_partial_words():
    q = compile_query(["cat"], whole_word=True)
    spans = [m.span() for m in q.pattern.finditer(b"category cat catalog")]
    assert spans == [(9, 12)]


@pytest.mark.parametrize("terms", [[], [""], ["", ""]])
def test_empty_terms_are_rejected(terms):
    with pytest.raises(InvalidQuery):
        compile_query(terms)


def test_bad_regex_raises_pattern_compile_error():
    with pytest.raises(PatternCompileError) as ei:
        compile_query(["to("])
    assert "to(" in str(ei.value)
    assert isinstance(ei.value, ValueError)


def test_literals_only_for_plain_words_of_three_or_more():
    assert compile_query(["Cat", "dog"]).literals == ("cat", "dog")
    assert compile_query(["cat", "ox"]).literals == ()
    assert compile_query(["c.t"]).literals == ()


def test_parse_terms_splits_on_spaces_and_drops_empties():
    assert parse_terms("to  be ") == ["to", "be"]
    assert parse_terms("") == []


def test_prefix_pattern_is_case_insensitive_and_anchored_on_word_start():
    q = compile_prefix("the")
    assert q.pattern.flags & re.IGNORECASE
    found = [m.group(0) for m in q.pattern.finditer(b"The other, theatre")]
    assert found == [b"The", b" theatre"]


def test_prefix_rejects_empty_and_invalid_terms():
    with pytest.raises(InvalidQuery):
        compile_prefix("")
    with pytest.raises(PatternCompileError):
        compile_prefix("ab[")
