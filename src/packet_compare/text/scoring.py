"""
Penalty model and mask rendering for aligned token sequences.

Each paired position costs 0 (match), 1 (spacing or capitalisation
problem) or 2 (different word).  Extra and missing tokens are costed
separately and only the larger of the two totals counts, so that a
replaced phrase is not charged once for the removal and again for the
insertion.
"""

from __future__ import annotations

from typing import Tuple

from ..result import MASK_MAJOR, MASK_MATCH, MASK_MINOR
from .alignment import AlignmentPair, tokens_match
from .tokenizer import SEP_NEWLINE, SEP_NONE, SEP_SPACE, Token


def permit_soft_newlines(pair: AlignmentPair) -> AlignmentPair:
    """
    Forgive line breaks in the actual value where the expected has a space.

    Transmission may wrap long lines, so a single newline in place of a
    space is not an error.  A blank line still is.
    """
    actual = list(pair.actual)
    for idx, (exp, act) in enumerate(pair):
        if exp.separator != SEP_SPACE or act.separator != SEP_NEWLINE:
            continue
        if not tokens_match(exp, act):
            continue
        actual[idx] = Token(act.exact_case, act.text, SEP_SPACE)
    return AlignmentPair(list(pair.expected), actual)


def penalty(expected: Token, actual: Token) -> int:
    """
    Return the points lost by ``actual`` against ``expected``.

    Returns
    -------
    int
        0 if the tokens match; 1 for a separator difference or a
        capitalisation the expected token does not permit; 2 if the
        words differ.
    """
    if not tokens_match(expected, actual):
        return 2
    if expected.separator != actual.separator:
        return 1
    if expected.exact_case and expected.text != actual.text:
        return 1
    if actual.text not in (expected.text, expected.text.lower(), expected.text.upper()):
        return 1
    return 0


def overall_penalty(pair: AlignmentPair) -> int:
    """Total penalty: changes plus the larger of additions and removals."""
    changes = adds = removes = 0
    for exp, act in pair:
        pen = penalty(exp, act)
        if exp.is_gap:
            adds += pen
        elif act.is_gap:
            removes += pen
        else:
            changes += pen
    return changes + max(adds, removes)


def score_alignment(pair: AlignmentPair, expected_count: int) -> Tuple[int, int]:
    """
    Score an alignment.

    Parameters
    ----------
    pair : AlignmentPair
        Relaxed alignment of the two values.
    expected_count : int
        Number of tokens in the expected value.

    Returns
    -------
    Tuple[int, int]
        ``(score, out_of)``; two points per expected token, or one point
        when there are none.
    """
    out_of = expected_count * 2 or 1
    return max(0, out_of - overall_penalty(pair)), out_of


def make_masks(pair: AlignmentPair) -> Tuple[str, str]:
    """Render the expected and actual masks for an alignment.

    An exact-case marker stripped from an expected word gets a blank mark
    of its own, so the expected mask lines up with the value as written.
    """
    expected_mask = []
    actual_mask = []
    for exp, act in pair:
        if not exp.is_gap and not act.is_gap:
            word_penalty = penalty(
                Token(exp.exact_case, exp.text, SEP_NONE),
                Token(False, act.text, SEP_NONE),
            )
            mark = MASK_MINOR if word_penalty else MASK_MATCH
            expected_mask.append(MASK_MATCH * len(exp.marker) + mark * len(exp.text))
            actual_mask.append(mark * len(act.text))

            mark = MASK_MINOR if exp.separator != act.separator else MASK_MATCH
            expected_mask.append(mark * len(exp.separator))
            actual_mask.append(mark * len(act.separator))
        else:
            expected_mask.append(MASK_MAJOR * (len(exp.marker) + len(exp.text) + len(exp.separator)))
            actual_mask.append(MASK_MAJOR * (len(act.text) + len(act.separator)))
    return "".join(expected_mask), "".join(actual_mask)
