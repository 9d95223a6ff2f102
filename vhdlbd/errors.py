"""Exceptions raised while turning VHDL files into block diagrams.

Every error is fatal to a ``vbd`` run.  The string form of each
exception is the single line reported to the user.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .parser import ParseState


class VBDError(Exception):
    """Base class for all block diagram errors."""


class MissingArgumentsError(VBDError):
    """No input files were given on the command line."""

    def __init__(self) -> None:
        super().__init__("Error, no files supplied")


class UnreadableFileError(VBDError):
    """An input file could not be opened or read."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"Error reading {filename}")
        self.filename = filename


class IncompleteParseError(VBDError):
    """End of input was reached before the entity port block ended.

    ``state`` is the :class:`vhdlbd.parser.ParseState` the scan stopped
    in, which tells whether the entity, its port clause or the end of
    the port clause was missing.
    """

    def __init__(self, filename: str, state: Optional["ParseState"] = None) -> None:
        super().__init__(f"Error parsing {filename}")
        self.filename = filename
        self.state = state
