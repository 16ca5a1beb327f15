"""
Tokenizer for free-text field comparison.

A field value is split into word-like tokens.  Each token carries the
class of whitespace that followed it, so that line structure can be
scored separately from the words themselves.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

# Separator classes, by the whitespace that follows a token
SEP_NONE = ""
SEP_SPACE = " "
SEP_NEWLINE = "\n"
SEP_BLANK_LINE = "\n\n"

# Trailing punctuation that is split off into a token of its own
SPLIT_PUNCTUATION = ",:;?!"

_WORD_PATTERN = re.compile(r"[^ \n]+")


@dataclass(frozen=True)
class Token:
    """One word of a field value plus the whitespace class that follows it.

    ``marker`` holds the exact-case marker stripped from the word, so that
    masks still line up with the value as written.
    """
    exact_case: bool
    text: str
    separator: str = SEP_NONE
    marker: str = ""

    @classmethod
    def gap(cls) -> "Token":
        """Return the placeholder used where one side of an alignment has no token."""
        return cls(False, "", SEP_NONE)

    @property
    def is_gap(self) -> bool:
        return self.text == ""


def classify_separator(whitespace: str) -> str:
    """
    Classify a run of whitespace between two tokens.

    Parameters
    ----------
    whitespace : str
        The spaces and newlines between two tokens.  An empty string
        means the token ended the value.

    Returns
    -------
    str
        One of SEP_NONE, SEP_SPACE, SEP_NEWLINE or SEP_BLANK_LINE.
    """
    if not whitespace:
        return SEP_NONE
    newlines = whitespace.count("\n")
    if newlines == 0:
        return SEP_SPACE
    if newlines == 1:
        return SEP_NEWLINE
    return SEP_BLANK_LINE


def tokenize(text: str, exact_case_allowed: bool = False, marker: str = "¡") -> List[Token]:
    """
    Split a field value into tokens.

    Tokens are runs of characters other than space and newline.  A token
    that ends in one of ``,:;?!`` (and is longer than that one character)
    is split into the word and the punctuation mark, with no separator
    between them.  When ``exact_case_allowed`` is set, a token starting
    with ``marker`` is flagged for case-sensitive comparison and the
    marker is moved from the text to ``Token.marker``; neither carries to
    split-off punctuation.

    Parameters
    ----------
    text : str
        Field value.  Leading and trailing whitespace is ignored.
    exact_case_allowed : bool, default=False
        Honour the exact-case marker (only for expected values).
    marker : str, default="¡"
        The exact-case marker.

    Returns
    -------
    List[Token]
        Tokens in order; empty for a blank value.
    """
    text = text.strip()
    tokens: List[Token] = []

    matches = list(_WORD_PATTERN.finditer(text))
    for idx, match in enumerate(matches):
        word = match.group(0)
        if idx + 1 < len(matches):
            separator = classify_separator(text[match.end():matches[idx + 1].start()])
        else:
            separator = SEP_NONE

        exact_case = False
        prefix = ""
        if exact_case_allowed and word.startswith(marker) and len(word) > len(marker):
            exact_case = True
            prefix = marker
            word = word[len(marker):]

        if len(word) > 1 and word[-1] in SPLIT_PUNCTUATION:
            tokens.append(Token(exact_case, word[:-1], SEP_NONE, prefix))
            tokens.append(Token(False, word[-1], separator))
        else:
            tokens.append(Token(exact_case, word, separator, prefix))

    return tokens
