"""
loader
======

Load messages from YAML or JSON files.

A message file names the message type and lists its fields in order.
Each field entry has a ``label``, an optional comparator ``kind``
(default ``text``), an optional ``display`` mapping (which makes the
field an exact comparison with mapped display values) and a ``value``.
An omitted or null value means the field has no stored value.  Quote
values such as times and zero-padded numbers: YAML would otherwise read
``12:30`` and ``007`` as integers.

Example::

    type: ICS213
    name: ICS-213 General Message
    fields:
      - label: Date
        kind: date
        value: 01/02/2024
      - label: Handling
        kind: exact
        display: {R: ROUTINE, P: PRIORITY, I: IMMEDIATE}
        value: R
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from .comparators import ExactMapComparator, comparator_for
from .message import Field, Message, MessageType


class MessageFormatError(ValueError):
    """Raised when a message file does not describe a valid message."""


def _value_to_str(value: Any) -> str:
    # YAML turns unquoted 7 into an int and yes/no into booleans.
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def message_from_dict(data: Mapping[str, Any]) -> Message:
    """Build a :class:`Message` from a parsed message document.

    Raises
    ------
    MessageFormatError
        If required keys are missing or have the wrong shape.
    """
    if not isinstance(data, Mapping):
        raise MessageFormatError("message document must be a mapping")
    tag = data.get("type")
    if not tag:
        raise MessageFormatError("message document has no 'type'")
    mtype = MessageType(str(tag), str(data.get("name") or ""))

    entries = data.get("fields") or []
    if not isinstance(entries, list):
        raise MessageFormatError("'fields' must be a list")

    fields = []
    for idx, entry in enumerate(entries):
        if not isinstance(entry, Mapping) or "label" not in entry:
            raise MessageFormatError(f"field {idx + 1} must be a mapping with a 'label'")
        display = entry.get("display")
        if display is not None:
            if not isinstance(display, Mapping):
                raise MessageFormatError(f"field {entry['label']!r}: 'display' must be a mapping")
            comparator = ExactMapComparator({str(k): str(v) for k, v in display.items()})
        else:
            try:
                comparator = comparator_for(str(entry.get("kind", "text")))
            except ValueError as exc:
                raise MessageFormatError(f"field {entry['label']!r}: {exc}") from exc
        value = entry.get("value")
        fields.append(Field(
            label=str(entry["label"]),
            value=None if value is None else _value_to_str(value),
            comparator=comparator,
        ))
    return Message(mtype, fields)


def load_message(path: str | Path) -> Message:
    """Load a message from a YAML or JSON file.

    Parameters
    ----------
    path: str or Path
        Path to the message file.  JSON is read by the YAML parser.

    Returns
    -------
    Message
        The loaded message.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MessageFormatError(f"{path}: cannot read file: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise MessageFormatError(f"{path}: {exc}") from exc
    try:
        return message_from_dict(data)
    except MessageFormatError as exc:
        raise MessageFormatError(f"{path}: {exc}") from exc
