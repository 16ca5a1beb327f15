"""
packet_compare
==============

Field-level comparison and scoring of packet radio messages.

Given a model ("expected") message and a received ("actual") message of
the same type, the engine scores every field and produces masks that
mark which characters differ and how badly.  It is used to grade
transcribed or retransmitted messages, such as net-practice exercises.

Key modules:

* :mod:`packet_compare.text` – tokenizer, LCS alignment and the
  penalty model for free-text fields.
* :mod:`packet_compare.comparators` – comparators for exact, text,
  date, time, numeric, phone number and checkbox fields.
* :mod:`packet_compare.message` – the message model and the
  message-level aggregator.
* :mod:`packet_compare.loader` – reading messages from YAML/JSON files.
* :mod:`packet_compare.report` – monospace rendering of results.
* :mod:`packet_compare.cli` – the ``packet-compare`` command.
"""

from .comparators import (
    CardinalComparator,
    CheckboxComparator,
    Comparator,
    DateComparator,
    ExactComparator,
    ExactMapComparator,
    NoneComparator,
    PhoneNumberComparator,
    RealComparator,
    TextComparator,
    TimeComparator,
    compare_cardinal,
    compare_checkbox,
    compare_date,
    compare_exact,
    compare_exact_map,
    compare_none,
    compare_phone_number,
    compare_real,
    compare_text,
    compare_time,
    comparator_for,
)
from .loader import MessageFormatError, load_message, message_from_dict
from .message import Field, Message, MessageType, compare_messages
from .result import CompareField, MessageComparison

__version__ = "0.1.0"

__all__ = [
    "CompareField",
    "MessageComparison",
    "Comparator",
    "NoneComparator",
    "ExactComparator",
    "ExactMapComparator",
    "TextComparator",
    "DateComparator",
    "TimeComparator",
    "CardinalComparator",
    "RealComparator",
    "PhoneNumberComparator",
    "CheckboxComparator",
    "comparator_for",
    "compare_none",
    "compare_exact",
    "compare_exact_map",
    "compare_text",
    "compare_date",
    "compare_time",
    "compare_cardinal",
    "compare_real",
    "compare_phone_number",
    "compare_checkbox",
    "Field",
    "Message",
    "MessageType",
    "compare_messages",
    "MessageFormatError",
    "load_message",
    "message_from_dict",
]
