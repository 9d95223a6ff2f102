"""Top level package for the VHDL block diagram library.

This package turns the port clause of a VHDL entity into an ASCII
block diagram suitable for pasting into a comment header.  Inputs are
drawn on the left, outputs and bidirectional ports on the right, and
blank lines between port declarations become gaps in the box.

Key concepts:

* **Model classes** represent ports and diagram rows.  See
  :mod:`vhdlbd.model`.
* **Parser** scans a source file for the entity port clause.  See
  :mod:`vhdlbd.parser`.
* **Layout** merges inputs and outputs into rows.  See
  :mod:`vhdlbd.layout`.
* **Renderer** draws the rows as an ASCII box from a Jinja2 template.
  See :mod:`vhdlbd.renderer`.
"""

from .model import (
    Direction,
    PortRecord,
    ParseResult,
    DiagramRow,
)

from .errors import VBDError, MissingArgumentsError, UnreadableFileError, IncompleteParseError
from .parser import ParseState, VHDLPortParser
from .layout import merge_ports, content_width
from .renderer import AsciiDiagramRenderer, get_block_diagram

__all__ = [
    "Direction",
    "PortRecord",
    "ParseResult",
    "DiagramRow",
    "VBDError",
    "MissingArgumentsError",
    "UnreadableFileError",
    "IncompleteParseError",
    "ParseState",
    "VHDLPortParser",
    "merge_ports",
    "content_width",
    "AsciiDiagramRenderer",
    "get_block_diagram",
]
