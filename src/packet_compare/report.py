"""
Plain-text rendering of comparison results.

Masks are printed directly beneath the value they annotate, so the
output must be viewed in a monospace font.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .result import CompareField, MessageComparison, expand_mask

LABEL_WIDTH = 10


def _value_lines(value: str, mask: str) -> List[tuple]:
    """Split a value into lines, slicing the expanded mask to match.

    The mask character for a line break is shown just past the end of
    the line it ends.
    """
    full_mask = expand_mask(value, mask)
    lines = []
    offset = 0
    for line in value.split("\n"):
        lines.append((line, full_mask[offset:offset + len(line) + 1].rstrip()))
        offset += len(line) + 1
    return lines


def format_field(cf: CompareField) -> str:
    """
    Render one field comparison.

    Parameters
    ----------
    cf : CompareField
        The comparison to render.

    Returns
    -------
    str
        The label and score, then the expected and actual values, each
        followed by its mask line where the mask marks something.
    """
    out = [f"{cf.label} [{cf.score}/{cf.out_of}]"]
    for heading, value, mask in (
        ("expected", cf.expected, cf.expected_mask),
        ("actual", cf.actual, cf.actual_mask),
    ):
        prefix = f"  {heading}:".ljust(LABEL_WIDTH + 2)
        for line, line_mask in _value_lines(value, mask):
            out.append(prefix + line)
            if line_mask:
                out.append(" " * len(prefix) + line_mask)
            prefix = " " * len(prefix)
    return "\n".join(out)


def format_comparison(result: MessageComparison, show_all: bool = False) -> str:
    """Render a message comparison: a score line, then the fields.

    Only mismatched fields are listed unless ``show_all`` is set.
    """
    pct = 100.0 * result.score / result.out_of if result.out_of else 100.0
    out = [f"Score: {result.score}/{result.out_of} ({pct:.1f}%)"]
    fields = result.fields if show_all else result.mismatches
    for cf in fields:
        out.append("")
        out.append(format_field(cf))
    return "\n".join(out)


def comparison_to_dict(result: MessageComparison) -> Dict[str, Any]:
    """Return a JSON-serializable form of a message comparison."""
    return {
        "score": result.score,
        "out_of": result.out_of,
        "fields": [cf.to_dict() for cf in result.fields],
    }
