"""
Bounded edit distance for resemblance checks against the weak-password corpus.

Plain two-row Levenshtein, except that it gives up as soon as a finished row
proves the distance is above the cutoff. Cost is O(cutoff * len) for unrelated
strings instead of O(len_a * len_b).
"""


def bounded_levenshtein(a: str, b: str, cutoff: int) -> int:
    """
    Levenshtein distance capped at cutoff + 1.

    Returns the exact distance when it is <= cutoff, otherwise cutoff + 1.
    After each row of the DP matrix, if every cell in the row is already
    above cutoff the final cell must be too, so the row loop stops there.
    """
    if cutoff < 0:
        return 0 if a == b else 1
    if abs(len(a) - len(b)) > cutoff:
        return cutoff + 1
    m = len(b)
    prev = list(range(m + 1))
    curr = [0] * (m + 1)
    for i, ca in enumerate(a, start=1):
        curr[0] = i
        row_min = i
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            value = min(curr[j - 1] + 1, prev[j] + 1, prev[j - 1] + cost)
            curr[j] = value
            if value < row_min:
                row_min = value
        if row_min > cutoff:
            return cutoff + 1
        prev, curr = curr, prev
    result = prev[m]
    return result if result <= cutoff else cutoff + 1
