"""
comparators
===========

Typed field comparators.  Each field of a message type is given one
comparator when the type is defined; the comparator is then invoked once
per comparison with the field label and the expected and actual values.

The base class :class:`Comparator` defines the interface.  Available
comparators:

* :class:`ExactComparator` – values must be identical.
* :class:`ExactMapComparator` – identical, with coded values mapped to
  human text for display.
* :class:`TextComparator` – word-level alignment with tolerance for
  capitalisation and line wrapping.
* :class:`DateComparator` and :class:`TimeComparator` – tolerate a
  missing leading zero or a different separator.
* :class:`CardinalComparator` and :class:`RealComparator` – equal
  numeric values match regardless of spelling.
* :class:`PhoneNumberComparator` – digits must match; punctuation is a
  minor difference.
* :class:`CheckboxComparator` – checked/unchecked.
* :class:`NoneComparator` – excludes the field from comparison.

Comparators are stateless apart from their configuration and never
raise for any string input.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Mapping, Optional, Tuple

from .config import Settings, settings as default_settings
from .result import MASK_MAJOR, MASK_MATCH, MASK_MINOR, NOT_SET, CompareField
from .text import align_tokens, make_masks, permit_soft_newlines, score_alignment, tokenize
from .text.tokenizer import Token

logger = logging.getLogger(__name__)

# Patterns are applied with fullmatch and match ASCII digits only.
DATE_PATTERN = re.compile(r"(\d?\d)([-/.])(\d?\d)([-/.])(20)?(\d\d)", re.ASCII)
TIME_PATTERN = re.compile(r"(\d?\d)(:?)(\d\d)", re.ASCII)
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
REAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

HANDLING_ORDERS = {"R": "ROUTINE", "P": "PRIORITY", "I": "IMMEDIATE"}

NOT_CHECKED = "not checked"


class Comparator:
    """Base class for field comparators.

    Subclasses override :meth:`compare`.  Instances are callable, so a
    comparator can be used anywhere a plain comparison function is
    expected.
    """

    kind = "none"

    def __init__(self, config: Optional[Settings] = None) -> None:
        self._config = config

    @property
    def config(self) -> Settings:
        return self._config or default_settings

    def compare(self, label: str, expected: str, actual: str) -> Optional[CompareField]:
        """Compare an expected value of a field against an actual value.

        Parameters
        ----------
        label: str
            The field label.
        expected: str
            The value in the expected (model) message.
        actual: str
            The value in the received message.

        Returns
        -------
        Optional[CompareField]
            The comparison, or None to leave the field out of the
            message score.
        """
        raise NotImplementedError

    def __call__(self, label: str, expected: str, actual: str) -> Optional[CompareField]:
        return self.compare(label, expected, actual)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _match(label: str, expected: str, actual: str, out_of: int = 2) -> CompareField:
    return CompareField(
        label=label, score=out_of, out_of=out_of,
        expected=expected, expected_mask=MASK_MATCH,
        actual=actual, actual_mask=MASK_MATCH,
    )


def _mismatch(label: str, expected: str, actual: str, out_of: int = 2) -> CompareField:
    return CompareField(
        label=label, score=0, out_of=out_of,
        expected=expected or NOT_SET, expected_mask=MASK_MAJOR,
        actual=actual or NOT_SET, actual_mask=MASK_MAJOR,
    )


class NoneComparator(Comparator):
    """Leaves the field out of the comparison entirely."""

    kind = "none"

    def compare(self, label: str, expected: str, actual: str) -> Optional[CompareField]:
        return None


class ExactComparator(Comparator):
    """Values must be identical to score."""

    kind = "exact"

    def compare(self, label: str, expected: str, actual: str) -> CompareField:
        if expected == actual:
            return _match(label, expected, actual)
        return _mismatch(label, expected, actual)


class ExactMapComparator(Comparator):
    """Exact comparison, displaying values through a code-to-text mapping.

    Parameters
    ----------
    mapping: Mapping[str, str]
        Display text for coded values.  Values missing from the mapping
        are displayed unchanged.
    """

    kind = "exact"

    def __init__(self, mapping: Mapping[str, str], config: Optional[Settings] = None) -> None:
        super().__init__(config)
        self.mapping: Dict[str, str] = dict(mapping)

    def compare(self, label: str, expected: str, actual: str) -> CompareField:
        shown_expected = self.mapping.get(expected, expected)
        shown_actual = self.mapping.get(actual, actual)
        if expected == actual:
            return _match(label, shown_expected, shown_actual)
        return _mismatch(label, shown_expected, shown_actual)

    def __repr__(self) -> str:
        return f"ExactMapComparator({self.mapping!r})"


class CheckboxComparator(Comparator):
    """Checkbox values: empty or "false" means unchecked."""

    kind = "checkbox"

    def compare(self, label: str, expected: str, actual: str) -> CompareField:
        if expected == actual:
            if expected == "false":
                return _match(label, "", "")
            return _match(label, expected, actual)
        cf = _mismatch(label, expected, actual)
        if expected in ("", "false"):
            cf.expected = NOT_CHECKED
        if actual in ("", "false"):
            cf.actual = NOT_CHECKED
        return cf


class CardinalComparator(Comparator):
    """Whole numbers: equal values match even when spelled differently."""

    kind = "cardinal"

    def compare(self, label: str, expected: str, actual: str) -> CompareField:
        if INTEGER_PATTERN.fullmatch(expected) and INTEGER_PATTERN.fullmatch(actual):
            if int(expected) == int(actual):
                return _match(label, expected, actual)
        return ExactComparator(self._config).compare(label, expected, actual)


class RealComparator(Comparator):
    """Real numbers: equal values match even when spelled differently."""

    kind = "real"

    def compare(self, label: str, expected: str, actual: str) -> CompareField:
        if REAL_PATTERN.fullmatch(expected) and REAL_PATTERN.fullmatch(actual):
            if float(expected) == float(actual):
                return _match(label, expected, actual)
        return ExactComparator(self._config).compare(label, expected, actual)


class PhoneNumberComparator(Comparator):
    """Phone numbers: digits must match; punctuation is a minor difference."""

    kind = "phone"

    def compare(self, label: str, expected: str, actual: str) -> CompareField:
        if expected == actual:
            return _match(label, expected, actual)
        if _digits(expected) != _digits(actual):
            return _mismatch(label, expected, actual)
        score = 2 - self.config.phone_punctuation_penalty
        mark = MASK_MINOR if score < 2 else MASK_MATCH
        return CompareField(
            label=label, score=score, out_of=2,
            expected=expected, expected_mask=mark,
            actual=actual, actual_mask=mark,
        )


def _digits(value: str) -> str:
    return "".join(c for c in value if "0" <= c <= "9")


class _PartScorer:
    """Accumulates masks and the score for a date or time, part by part."""

    def __init__(self, leading_zero_penalty: int) -> None:
        self.expected_mask = ""
        self.actual_mask = ""
        self.score = 2
        self.leading_zero_penalty = leading_zero_penalty

    def cap(self, limit: int) -> None:
        self.score = min(self.score, limit)

    def number(self, exp: str, act: str) -> None:
        """Score a one- or two-digit number that may lack a leading zero."""
        if exp == act:
            self.expected_mask += MASK_MATCH * len(exp)
            self.actual_mask += MASK_MATCH * len(act)
        elif exp == "0" + act:
            self.expected_mask += MASK_MINOR + MASK_MATCH
            self.actual_mask += MASK_MATCH
            self.cap(2 - self.leading_zero_penalty)
        elif "0" + exp == act:
            self.expected_mask += MASK_MATCH
            self.actual_mask += MASK_MINOR + MASK_MATCH
            self.cap(2 - self.leading_zero_penalty)
        else:
            self.expected_mask += MASK_MAJOR * len(exp)
            self.actual_mask += MASK_MAJOR * len(act)
            self.score = 0

    def punctuation(self, exp: str, act: str) -> None:
        """Score a separator; a difference is minor."""
        mark = MASK_MATCH if exp == act else MASK_MINOR
        self.expected_mask += mark * len(exp)
        self.actual_mask += mark * len(act)
        if exp != act:
            self.cap(1)

    def exact(self, exp: str, act: str) -> None:
        """Score a part that must match exactly."""
        mark = MASK_MATCH if exp == act else MASK_MAJOR
        self.expected_mask += mark * len(exp)
        self.actual_mask += mark * len(act)
        if exp != act:
            self.score = 0

    def result(self, label: str, expected: str, actual: str) -> CompareField:
        return CompareField(
            label=label, score=self.score, out_of=2,
            expected=expected, expected_mask=self.expected_mask,
            actual=actual, actual_mask=self.actual_mask,
        )


class DateComparator(Comparator):
    """Dates in MM/DD/YYYY form, tolerating MM/DD/YY and other separators."""

    kind = "date"

    def compare(self, label: str, expected: str, actual: str) -> CompareField:
        if expected == actual:
            return _match(label, expected, actual)
        exp_match = DATE_PATTERN.fullmatch(expected)
        act_match = DATE_PATTERN.fullmatch(actual)
        if exp_match is None or act_match is None:
            return _mismatch(label, expected, actual)
        exp = _groups(exp_match)
        act = _groups(act_match)

        scorer = _PartScorer(self.config.leading_zero_penalty)
        scorer.number(exp[0], act[0])
        scorer.punctuation(exp[1], act[1])
        scorer.number(exp[2], act[2])
        scorer.punctuation(exp[3], act[3])
        if exp[4] != act[4]:
            # Century given on only one side.
            scorer.expected_mask += MASK_MINOR * len(exp[4])
            scorer.actual_mask += MASK_MINOR * len(act[4])
            scorer.cap(1)
        else:
            scorer.expected_mask += MASK_MATCH * len(exp[4])
            scorer.actual_mask += MASK_MATCH * len(act[4])
        scorer.exact(exp[5], act[5])
        return scorer.result(label, expected, actual)


class TimeComparator(Comparator):
    """Times in HH:MM form, tolerating a missing colon or leading zero."""

    kind = "time"

    def compare(self, label: str, expected: str, actual: str) -> CompareField:
        if expected == actual:
            return _match(label, expected, actual)
        exp_match = TIME_PATTERN.fullmatch(expected)
        act_match = TIME_PATTERN.fullmatch(actual)
        if exp_match is None or act_match is None:
            return _mismatch(label, expected, actual)
        exp = _groups(exp_match)
        act = _groups(act_match)

        scorer = _PartScorer(self.config.leading_zero_penalty)
        scorer.number(exp[0], act[0])
        scorer.punctuation(exp[1], act[1])
        scorer.exact(exp[2], act[2])
        return scorer.result(label, expected, actual)


def _groups(match: re.Match) -> Tuple[str, ...]:
    return tuple(g or "" for g in match.groups())


class TextComparator(Comparator):
    """Free text, compared word by word.

    - A word in the expected value prefixed with the exact-case marker
      must match case exactly.  Other words match when the actual has the
      same case, is all capitals or is all lower case.
    - Runs of spaces count as one space.
    - A newline in the expected value must be matched by a newline; a
      blank line by a blank line.
    - A single newline in the actual value may stand in for a space.
    """

    kind = "text"

    def compare(self, label: str, expected: str, actual: str) -> CompareField:
        config = self.config
        cf = CompareField(label=label, expected=expected, actual=actual)
        exp_tokens = tokenize(expected, exact_case_allowed=True, marker=config.exact_case_marker)
        act_tokens = tokenize(actual)

        if not exp_tokens and not act_tokens:
            cf.score, cf.out_of = 1, 1
            return cf
        if not exp_tokens:
            exp_tokens = [Token(False, NOT_SET)]
            cf.expected = NOT_SET
        if not act_tokens:
            act_tokens = [Token(False, NOT_SET)]
            cf.actual = NOT_SET

        if len(exp_tokens) * len(act_tokens) > config.max_alignment_cells:
            logger.warning(
                "Field %r too long to align (%d x %d tokens); comparing as a whole",
                label, len(exp_tokens), len(act_tokens),
            )
            return self._compare_whole(cf, exp_tokens, act_tokens)

        pair = permit_soft_newlines(align_tokens(exp_tokens, act_tokens))
        cf.score, cf.out_of = score_alignment(pair, len(exp_tokens))
        cf.expected_mask, cf.actual_mask = make_masks(pair)
        return cf

    @staticmethod
    def _compare_whole(cf: CompareField, exp_tokens, act_tokens) -> CompareField:
        cf.out_of = len(exp_tokens) * 2
        same = [t.text.lower() for t in exp_tokens] == [t.text.lower() for t in act_tokens]
        if same:
            cf.score = cf.out_of
            cf.expected_mask = cf.actual_mask = MASK_MATCH
        else:
            cf.score = 0
            cf.expected_mask = cf.actual_mask = MASK_MAJOR
        return cf


COMPARATORS: Dict[str, Comparator] = {
    "none": NoneComparator(),
    "exact": ExactComparator(),
    "text": TextComparator(),
    "date": DateComparator(),
    "time": TimeComparator(),
    "cardinal": CardinalComparator(),
    "real": RealComparator(),
    "phone": PhoneNumberComparator(),
    "checkbox": CheckboxComparator(),
    "handling": ExactMapComparator(HANDLING_ORDERS),
}


def comparator_for(kind: str) -> Comparator:
    """Return the shared comparator for a kind name (e.g. ``"date"``)."""
    try:
        return COMPARATORS[kind.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(COMPARATORS))
        raise ValueError(f"Unknown comparator kind {kind!r} (expected one of: {known})") from None


# Function forms, for direct use.
compare_none = COMPARATORS["none"].compare
compare_exact = COMPARATORS["exact"].compare
compare_text = COMPARATORS["text"].compare
compare_date = COMPARATORS["date"].compare
compare_time = COMPARATORS["time"].compare
compare_cardinal = COMPARATORS["cardinal"].compare
compare_real = COMPARATORS["real"].compare
compare_phone_number = COMPARATORS["phone"].compare
compare_checkbox = COMPARATORS["checkbox"].compare


def compare_exact_map(label: str, expected: str, actual: str, mapping: Mapping[str, str]) -> CompareField:
    """Exact comparison with display mapping; see :class:`ExactMapComparator`."""
    return ExactMapComparator(mapping).compare(label, expected, actual)
