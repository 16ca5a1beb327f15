"""
Free-text comparison pipeline.

- `tokenizer`: split a value into tokens with separator classes.
- `alignment`: LCS alignment of two token sequences.
- `scoring`: soft-newline relaxation, penalties and masks.
"""

from .alignment import AlignmentPair, align_tokens, lcs_matrix
from .scoring import make_masks, overall_penalty, penalty, permit_soft_newlines, score_alignment
from .tokenizer import Token, tokenize

__all__ = [
    "Token",
    "tokenize",
    "AlignmentPair",
    "lcs_matrix",
    "align_tokens",
    "permit_soft_newlines",
    "penalty",
    "overall_penalty",
    "score_alignment",
    "make_masks",
]
