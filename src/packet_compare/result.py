"""
result
======

Result types produced by the comparison engine.

A :class:`CompareField` describes the comparison of one field of an
expected message against the same field of an actual message.  A
:class:`MessageComparison` collects the field results for a whole
message together with the summed score.

Mask strings are parallel to the value they annotate.  A space marks a
character that matches, ``~`` marks a minor difference (case, spacing,
punctuation, a missing leading zero) and ``*`` marks a significant
difference or a missing/extra token.  When a mask is shorter than its
value, its last character applies to the rest of the value.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterator, List

MASK_MATCH = " "
MASK_MINOR = "~"
MASK_MAJOR = "*"

NOT_SET = "(not set)"


def expand_mask(value: str, mask: str) -> str:
    """Pad or trim ``mask`` to the length of ``value``.

    The last character of the mask is repeated to cover the rest of the
    value.  An empty mask expands to all spaces.
    """
    if len(mask) >= len(value):
        return mask[: len(value)]
    fill = mask[-1] if mask else MASK_MATCH
    return mask + fill * (len(value) - len(mask))


@dataclass
class CompareField:
    """Comparison of a single field.

    Parameters
    ----------
    label: str
        The field label, as displayed to the user.
    score: int
        Points awarded for this field; ``0 <= score <= out_of``.
    out_of: int
        Points available for this field, i.e. the score of an exact match.
    expected: str
        The value in the expected message, formatted for display.
    expected_mask: str
        Mask marking the characters of ``expected`` that differ.
    actual: str
        The value in the actual message, formatted for display.
    actual_mask: str
        Mask marking the characters of ``actual`` that differ.
    """

    label: str
    score: int = 0
    out_of: int = 0
    expected: str = ""
    expected_mask: str = ""
    actual: str = ""
    actual_mask: str = ""

    @property
    def is_match(self) -> bool:
        return self.score == self.out_of

    def expanded_expected_mask(self) -> str:
        return expand_mask(self.expected, self.expected_mask)

    def expanded_actual_mask(self) -> str:
        return expand_mask(self.actual, self.actual_mask)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class MessageComparison:
    """Comparison of a whole message.

    Unpacks as ``score, out_of, fields`` so callers can treat it as the
    plain triple.
    """

    score: int = 0
    out_of: int = 0
    fields: List[CompareField] = field(default_factory=list)

    def __iter__(self) -> Iterator[Any]:
        return iter((self.score, self.out_of, self.fields))

    @property
    def is_match(self) -> bool:
        return self.score == self.out_of

    @property
    def mismatches(self) -> List[CompareField]:
        """Return the fields that did not score full marks."""
        return [f for f in self.fields if not f.is_match]

    def add(self, cf: CompareField) -> None:
        """Add a field result, counting an empty maximum as one point."""
        if cf.out_of == 0:
            cf.out_of = 1
        self.score += cf.score
        self.out_of += cf.out_of
        self.fields.append(cf)
