import pytest
from rapidfuzz.distance import OSA, DamerauLevenshtein

from fuzzy_suggest.exceptions import ConfigurationError
from fuzzy_suggest.metric import (
    METRICS,
    damerau_levenshtein,
    get_metric,
    levenshtein,
    optimal_string_alignment,
)

PAIRS = [
    ("", ""),
    ("", "abc"),
    ("abc", "abc"),
    ("kitten", "sitting"),
    ("ca", "abc"),
    ("abcdef", "badcfe"),
    ("a cat", "an act"),
    ("Saturday", "Sunday"),
    ("apple", "APPLE"),
    ("héllo", "hello"),
    ("abcdefghij", "jihgfedcba"),
]


def test_distance_to_self_is_zero() -> None:
    for a, _ in PAIRS:
        assert damerau_levenshtein(a, a) == 0
        assert optimal_string_alignment(a, a) == 0


def test_distance_is_symmetric() -> None:
    for a, b in PAIRS:
        assert damerau_levenshtein(a, b) == damerau_levenshtein(b, a)
        assert optimal_string_alignment(a, b) == optimal_string_alignment(b, a)


def test_empty_string_distance_is_other_length() -> None:
    for s in ["", "a", "abc", "sitting"]:
        assert damerau_levenshtein("", s) == len(s)
        assert damerau_levenshtein(s, "") == len(s)
        assert optimal_string_alignment("", s) == len(s)
        assert optimal_string_alignment(s, "") == len(s)


def test_kitten_sitting() -> None:
    assert damerau_levenshtein("kitten", "sitting") == 3
    assert optimal_string_alignment("kitten", "sitting") == 3
    assert levenshtein("kitten", "sitting") == 3


def test_transposition_counts_as_one_edit() -> None:
    assert damerau_levenshtein("ab", "ba") == 1
    assert optimal_string_alignment("ab", "ba") == 1
    assert levenshtein("ab", "ba") == 2


def test_transposed_pair_can_be_edited_again() -> None:
    assert damerau_levenshtein("ca", "abc") == 2
    assert optimal_string_alignment("ca", "abc") == 3
    assert levenshtein("ca", "abc") == 3


def test_triangle_inequality_holds_for_damerau_levenshtein() -> None:
    words = ["ca", "ac", "abc", "kitten", "sitting", "", "bca"]
    for a in words:
        for b in words:
            for c in words:
                assert damerau_levenshtein(a, c) <= damerau_levenshtein(a, b) + damerau_levenshtein(b, c)


def test_agrees_with_rapidfuzz_reference() -> None:
    for a, b in PAIRS:
        assert damerau_levenshtein(a, b) == DamerauLevenshtein.distance(a, b)
        assert optimal_string_alignment(a, b) == OSA.distance(a, b)


def test_get_metric_by_name() -> None:
    assert get_metric("damerau_levenshtein") is damerau_levenshtein
    assert get_metric(" OSA ") is optimal_string_alignment
    assert set(METRICS) == {"damerau_levenshtein", "osa", "levenshtein"}


def test_get_metric_unknown_name() -> None:
    with pytest.raises(ConfigurationError):
        get_metric("jaro")
