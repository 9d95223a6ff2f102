"""Row layout for entity block diagrams.

Inputs are drawn on the left side of the box and outputs on the right.
:func:`merge_ports` walks both port sequences in declaration order and
decides, row by row, which ports share a line.  Ports of the same
group are paired side by side; a blank separator row is inserted each
time the layout moves on to a new group.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .model import DiagramRow, PortRecord


def merge_ports(
    inputs: Sequence[PortRecord], outputs: Sequence[PortRecord]
) -> List[DiagramRow]:
    """Merge input and output ports into diagram rows.

    Args:
        inputs: Input ports in declaration order.
        outputs: Output ports in declaration order.

    Returns:
        One :class:`DiagramRow` per line of the box, separator rows
        included.  Every port appears in exactly one row.
    """
    rows: List[DiagramRow] = []
    i = 0
    o = 0
    last_group = 0

    while i < len(inputs) or o < len(outputs):
        inputs_done = i >= len(inputs)
        outputs_done = o >= len(outputs)

        if outputs_done:
            current_group = inputs[i].group
        elif inputs_done:
            current_group = outputs[o].group
        else:
            current_group = min(inputs[i].group, outputs[o].group)

        if current_group != last_group:
            rows.append(DiagramRow())
            last_group = current_group

        if outputs_done:
            rows.append(DiagramRow(left=inputs[i].label))
            i += 1
        elif inputs_done:
            rows.append(DiagramRow(right=outputs[o].label))
            o += 1
        elif inputs[i].group == outputs[o].group:
            rows.append(DiagramRow(left=inputs[i].label, right=outputs[o].label))
            i += 1
            o += 1
        elif inputs[i].group == current_group:
            rows.append(DiagramRow(left=inputs[i].label))
            i += 1
        else:
            rows.append(DiagramRow(right=outputs[o].label))
            o += 1

    return rows


def content_width(rows: Iterable[DiagramRow]) -> int:
    """Length of the longest ``left~right`` row text, 0 if there are none."""
    return max((len(row.text) for row in rows), default=0)
