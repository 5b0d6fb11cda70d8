from __future__ import annotations
from typing import List


def _common_prefix_len(a: str, b: str) -> int:
    n = min(len(a), len(b))
    i = 0
    while i < n and a[i] == b[i]:
        i += 1
    return i


def _common_suffix_len(a: str, b: str) -> int:
    n = min(len(a), len(b))
    i = 0
    while i < n and a[-1 - i] == b[-1 - i]:
        i += 1
    return i


def edit_distance(word: str, term: str, cost_limit: int) -> int:
    """
    Bounded Damerau-Levenshtein distance (adjacent transpositions only).

    Returns the exact distance when it is below cost_limit, otherwise cost_limit
    itself, meaning "at least this far". The matrix is abandoned as soon as every
    cell of a completed row is >= cost_limit. When one word is empty
    (before or after stripping the shared prefix/suffix) the other's length is
    returned uncapped, so callers must compare against their own limit.
    """
    if word == term:
        return 0
    if not word:
        return len(term)
    if not term:
        return len(word)

    # Shared prefix/suffix never change the distance; drop them to shrink the matrix
    p = _common_prefix_len(word, term)
    word, term = word[p:], term[p:]
    s = _common_suffix_len(word, term)
    if s:
        word, term = word[:-s], term[:-s]

    len1, len2 = len(word), len(term)
    if len1 == 0:
        return len2
    if len2 == 0:
        return len1

    matrix: List[List[int]] = [[0] * (len2 + 1) for _ in range(len1 + 1)]
    for i in range(len1 + 1):
        matrix[i][0] = i
    for j in range(len2 + 1):
        matrix[0][j] = j

    for i in range(1, len1 + 1):
        row = matrix[i]
        above = matrix[i - 1]
        best = cost_limit
        wc = word[i - 1]
        for j in range(1, len2 + 1):
            cost = 0 if wc == term[j - 1] else 1
            new = min(above[j] + 1, row[j - 1] + 1, above[j - 1] + cost)
            if i > 1 and j > 1 and word[i - 2] == term[j - 1] and wc == term[j - 2]:
                new = min(new, matrix[i - 2][j - 2] + cost)
            row[j] = new
            if new < best:
                best = new
        # row minimum (column 0 excluded) reached the limit: abandon
        if best >= cost_limit:
            return cost_limit

    # the last row can still end above the limit; report "at or above" as the limit
    return min(matrix[len1][len2], cost_limit)
