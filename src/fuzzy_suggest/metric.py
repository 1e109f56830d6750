from __future__ import annotations

from typing import Callable

from rapidfuzz.distance import Levenshtein

from fuzzy_suggest.exceptions import ConfigurationError

Metric = Callable[[str, str], int]


def damerau_levenshtein(a: str, b: str) -> int:
    """Edit distance counting insertions, deletions, substitutions and
    transpositions of adjacent characters, each with cost 1.

    Unlike the restricted variant, a transposed pair may be edited again
    afterwards, so ``damerau_levenshtein("ca", "abc") == 2`` and the
    triangle inequality holds.
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    len_a, len_b = len(a), len(b)
    max_dist = len_a + len_b

    # Table shifted by one row and column; the extra border holds max_dist.
    d = [[0] * (len_b + 2) for _ in range(len_a + 2)]
    d[0][0] = max_dist
    for i in range(len_a + 1):
        d[i + 1][0] = max_dist
        d[i + 1][1] = i
    for j in range(len_b + 1):
        d[0][j + 1] = max_dist
        d[1][j + 1] = j

    # Last row of `a` in which each character was seen.
    last_row: dict[str, int] = {}
    for i in range(1, len_a + 1):
        ca = a[i - 1]
        last_match_col = 0
        for j in range(1, len_b + 1):
            cb = b[j - 1]
            k = last_row.get(cb, 0)
            m = last_match_col
            if ca == cb:
                cost = 0
                last_match_col = j
            else:
                cost = 1
            d[i + 1][j + 1] = min(
                d[i][j] + cost,
                d[i + 1][j] + 1,
                d[i][j + 1] + 1,
                d[k][m] + (i - k - 1) + 1 + (j - m - 1),
            )
        last_row[ca] = i

    return d[len_a + 1][len_b + 1]


def optimal_string_alignment(a: str, b: str) -> int:
    """Restricted Damerau-Levenshtein distance.

    Adjacent transpositions count as one edit but no substring is edited
    more than once. Only three rows of the table are kept, sized on the
    shorter string.
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    width = len(b) + 1
    two_back: list[int] = [0] * width
    prev = list(range(width))
    for i in range(1, len(a) + 1):
        cur = [i] + [0] * len(b)
        for j in range(1, width):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            cur[j] = min(prev[j] + 1, cur[j - 1] + 1, prev[j - 1] + cost)
            if i > 1 and j > 1 and a[i - 1] == b[j - 2] and a[i - 2] == b[j - 1]:
                cur[j] = min(cur[j], two_back[j - 2] + cost)
        two_back, prev = prev, cur
    return prev[-1]


def levenshtein(a: str, b: str) -> int:
    return Levenshtein.distance(a, b)


METRICS: dict[str, Metric] = {
    "damerau_levenshtein": damerau_levenshtein,
    "osa": optimal_string_alignment,
    "levenshtein": levenshtein,
}


def get_metric(name: str) -> Metric:
    try:
        return METRICS[name.strip().lower()]
    except (KeyError, AttributeError):
        choices = ", ".join(sorted(METRICS))
        raise ConfigurationError(f"unknown metric {name!r} (choose from: {choices})") from None
