"""
message
=======

The minimal message model the comparison engine works against, and the
message-level aggregator.

A :class:`Message` has a :class:`MessageType` and an ordered list of
:class:`Field` objects.  Messages of the same type have the same fields
in the same order, so field ``i`` of one message is the same logical
field as field ``i`` of another.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .comparators import Comparator, comparator_for
from .result import MASK_MAJOR, CompareField, MessageComparison

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MessageType:
    """Identifies a message type.  Types are equal when their tags are.

    Parameters
    ----------
    tag: str
        Short identifier of the type (e.g. ``"ICS213"``).
    name: str
        English name of the type, used in comparison output.
    """

    tag: str
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", self.tag)


@dataclass
class Field:
    """A single field of a message.

    Parameters
    ----------
    label: str
        Field name as displayed to the user.
    value: Optional[str]
        The field value.  None means the field has no stored value (e.g.
        a calculated field) and it is never compared.
    comparator: Comparator
        How the field is compared.  Defaults to the text comparator.
    """

    label: str
    value: Optional[str] = ""
    comparator: Comparator = field(default_factory=lambda: comparator_for("text"))

    @classmethod
    def of_kind(cls, label: str, kind: str, value: Optional[str] = "") -> "Field":
        """Create a field using the shared comparator for ``kind``."""
        return cls(label, value, comparator_for(kind))


@dataclass
class Message:
    """A message: its type plus its ordered fields."""

    type: MessageType
    fields: List[Field] = field(default_factory=list)

    def find_field(self, label: str) -> Optional[Field]:
        """Return the first field with the given label, or None."""
        for f in self.fields:
            if f.label == label:
                return f
        return None

    def compare(self, actual: "Message") -> MessageComparison:
        """Compare this (expected) message against ``actual``."""
        return compare_messages(self, actual)


def compare_messages(expected: Message, actual: Message) -> MessageComparison:
    """
    Compare two messages field by field.

    The comparison is not symmetric: ``expected`` is the model message
    and ``actual`` is the received one.  Each field is compared with the
    expected field's comparator when both sides have a stored value and
    at least one of them is non-empty.

    Parameters
    ----------
    expected : Message
        The model message.
    actual : Message
        The received message.

    Returns
    -------
    MessageComparison
        Summed score and the per-field comparisons.  Messages of
        different types score 0 out of 1 with a single "Message Type"
        field.

    Raises
    ------
    ValueError
        If two messages of the same type have different numbers of fields.
    """
    if expected.type != actual.type:
        logger.debug("Message type mismatch: %s != %s", expected.type.tag, actual.type.tag)
        return MessageComparison(0, 1, [CompareField(
            label="Message Type", score=0, out_of=1,
            expected=expected.type.name, expected_mask=MASK_MAJOR,
            actual=actual.type.name, actual_mask=MASK_MAJOR,
        )])
    if len(expected.fields) != len(actual.fields):
        raise ValueError(
            f"{expected.type.tag} messages have {len(expected.fields)} and "
            f"{len(actual.fields)} fields; field lists must be aligned"
        )

    result = MessageComparison()
    for exp_field, act_field in zip(expected.fields, actual.fields):
        if exp_field.value is None or act_field.value is None:
            continue
        if exp_field.value == "" and act_field.value == "":
            continue
        cf = exp_field.comparator.compare(exp_field.label, exp_field.value, act_field.value)
        if cf is None:
            continue
        logger.debug("%s: %d/%d", cf.label, cf.score, cf.out_of or 1)
        result.add(cf)
    return result
