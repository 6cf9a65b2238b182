"""Edit distance over characters and over word sequences."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

AlignmentStep = Tuple[str, Optional[int], Optional[int]]


def _cost_table(a: Sequence, b: Sequence) -> List[List[int]]:
    # dp[i][j]: edits turning a[:i] into b[:j]
    n, m = len(a), len(b)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        dp[i][0] = i
    for j in range(m + 1):
        dp[0][j] = j

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            if a[i - 1] == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(
                    dp[i - 1][j - 1],  # substitute
                    dp[i][j - 1],  # insert
                    dp[i - 1][j],  # delete
                )
    return dp


def levenshtein_distance(a: Sequence, b: Sequence) -> int:
    """Minimum number of single-item insertions, deletions or substitutions.

    Works on any two sequences (strings compare character by character).
    Uses the full dynamic-programming table, O(len(a) * len(b)).

    Args:
        a: First sequence
        b: Second sequence

    Returns:
        Edit distance (0 when the sequences are equal)
    """
    return _cost_table(a, b)[len(a)][len(b)]


def align_sequences(ref: Sequence[str], hyp: Sequence[str]) -> List[AlignmentStep]:
    """Cheapest edit path between two token sequences.

    Each step is ``(op, ref_index, hyp_index)``:

      match -> same token on both sides
      sub   -> reference token heard as a different token
      del   -> reference token with nothing heard (hyp_index is None)
      ins   -> extra heard token (ref_index is None)

    When several paths cost the same, the diagonal step (match or sub) is
    taken before a deletion, and a deletion before an insertion.

    Args:
        ref: Reference tokens
        hyp: Tokens from the ASR

    Returns:
        Steps in reference order
    """
    dp = _cost_table(ref, hyp)
    steps: List[AlignmentStep] = []
    i, j = len(ref), len(hyp)
    while i > 0 or j > 0:
        if i > 0 and j > 0:
            same = ref[i - 1] == hyp[j - 1]
            if dp[i][j] == dp[i - 1][j - 1] + (0 if same else 1):
                steps.append(("match" if same else "sub", i - 1, j - 1))
                i -= 1
                j -= 1
                continue
        if i > 0 and dp[i][j] == dp[i - 1][j] + 1:
            steps.append(("del", i - 1, None))
            i -= 1
        else:
            steps.append(("ins", None, j - 1))
            j -= 1
    steps.reverse()
    return steps
