"""
LCS alignment of two token sequences.

The alignment pairs each expected token with the actual token it
corresponds to.  Tokens present on only one side are paired with a gap
placeholder, so both output sequences always have the same length.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from .tokenizer import Token


def tokens_match(a: Token, b: Token) -> bool:
    """Return True if two tokens have the same text, ignoring case.

    Case is folded character by character, so ``"Straße"`` does not
    match ``"STRASSE"``.
    """
    return a.text.lower() == b.text.lower()


@dataclass
class AlignmentPair:
    """Two parallel token sequences produced by :func:`align_tokens`."""
    expected: List[Token] = field(default_factory=list)
    actual: List[Token] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.expected) != len(self.actual):
            raise ValueError(
                f"alignment sides differ in length: {len(self.expected)} != {len(self.actual)}"
            )

    def __len__(self) -> int:
        return len(self.expected)

    def __iter__(self):
        return iter(zip(self.expected, self.actual))


def lcs_matrix(expected: Sequence[Token], actual: Sequence[Token]) -> List[List[int]]:
    """
    Build the longest-common-subsequence length matrix.

    Parameters
    ----------
    expected : Sequence[Token]
        Expected tokens (rows).
    actual : Sequence[Token]
        Actual tokens (columns).

    Returns
    -------
    List[List[int]]
        ``(len(expected)+1) x (len(actual)+1)`` matrix where entry
        ``[i][j]`` is the LCS length of the first ``i`` expected and the
        first ``j`` actual tokens.
    """
    rows, cols = len(expected), len(actual)
    matrix = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i in range(1, rows + 1):
        for j in range(1, cols + 1):
            if tokens_match(expected[i - 1], actual[j - 1]):
                matrix[i][j] = matrix[i - 1][j - 1] + 1
            else:
                matrix[i][j] = max(matrix[i][j - 1], matrix[i - 1][j])
    return matrix


def align_tokens(expected: Sequence[Token], actual: Sequence[Token]) -> AlignmentPair:
    """
    Align two token sequences along their longest common subsequence.

    The matrix is walked backwards from the bottom-right corner.  Matching
    tokens are consumed together.  Otherwise the side whose removal keeps
    the larger LCS is consumed; on a tie the expected token is consumed
    first, so the actual-only token ends up earlier in the output.

    Parameters
    ----------
    expected : Sequence[Token]
        Tokens of the expected value.
    actual : Sequence[Token]
        Tokens of the actual value.

    Returns
    -------
    AlignmentPair
        Parallel sequences with gap tokens for one-sided positions.
    """
    matrix = lcs_matrix(expected, actual)
    out_expected: List[Token] = []
    out_actual: List[Token] = []

    i, j = len(expected), len(actual)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and tokens_match(expected[i - 1], actual[j - 1]):
            out_expected.append(expected[i - 1])
            out_actual.append(actual[j - 1])
            i, j = i - 1, j - 1
        elif j > 0 and (i == 0 or matrix[i][j - 1] > matrix[i - 1][j]):
            out_expected.append(Token.gap())
            out_actual.append(actual[j - 1])
            j -= 1
        else:
            out_expected.append(expected[i - 1])
            out_actual.append(Token.gap())
            i -= 1

    out_expected.reverse()
    out_actual.reverse()
    return AlignmentPair(out_expected, out_actual)
