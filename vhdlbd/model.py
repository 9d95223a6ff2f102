"""Data model for VHDL entity block diagrams.

The parser turns the port block of an entity into two ordered
sequences of :class:`PortRecord` objects, one for the left hand side
of the diagram (inputs) and one for the right hand side (outputs,
bidirectional and buffer ports).  The layout engine then merges both
sequences into :class:`DiagramRow` objects, one per line of the box.

All classes are immutable value objects.  A record's position in its
sequence is significant: it is the declaration order in the source
file, and the layout engine relies on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Port mode of an entity port."""

    IN = "in"
    OUT = "out"
    INOUT = "inout"
    BUFFER = "buffer"

    @classmethod
    def from_keyword(cls, keyword: str) -> "Direction":
        """Return the direction for a mode keyword, ignoring case."""
        return cls(keyword.lower())

    @property
    def is_input(self) -> bool:
        return self is Direction.IN


@dataclass(frozen=True)
class PortRecord:
    """A single ``std_logic`` or ``std_logic_vector`` port.

    ``group`` is the index of the blank-line delimited declaration
    group the port belongs to.  ``name`` is the bare identifier as it
    appears in the source; use :attr:`label` for the text shown in the
    diagram.
    """

    group: int
    name: str
    is_vector: bool = False
    direction: Direction = Direction.IN

    @property
    def label(self) -> str:
        """Name as drawn in the diagram, vectors marked with ``[]``."""
        if self.is_vector:
            return f"{self.name}[]"
        return self.name

    def __str__(self) -> str:
        return f"{self.group}~{self.label}"


@dataclass(frozen=True)
class ParseResult:
    """Ordered input and output ports of one entity."""

    inputs: Tuple[PortRecord, ...] = ()
    outputs: Tuple[PortRecord, ...] = ()

    def __iter__(self):
        # Allows ``inputs, outputs = result``
        yield self.inputs
        yield self.outputs

    @property
    def port_count(self) -> int:
        return len(self.inputs) + len(self.outputs)


@dataclass(frozen=True)
class DiagramRow:
    """One horizontal slot of the block diagram."""

    left: str = ""
    right: str = ""

    @property
    def text(self) -> str:
        """Row content with ``~`` marking the gap between both sides."""
        return f"{self.left}~{self.right}"

    @property
    def is_separator(self) -> bool:
        return not self.left and not self.right
