"""VHDL entity port parser.

The :class:`VHDLPortParser` class extracts the ports of the first
entity found in a VHDL source file.  It is a line oriented scanner,
not a VHDL front end: it looks for the ``entity`` keyword, then for the
``port`` clause, and collects one declaration per line until a line
containing ``end``.  Only ``std_logic`` and ``std_logic_vector`` ports
are recognised; anything else inside the port clause is skipped.

Blank lines inside the port clause split the ports into groups.  The
group index of every port is kept so that the diagram can show the
same grouping.

Example usage::

    from vhdlbd import VHDLPortParser, get_block_diagram

    parser = VHDLPortParser()
    result = parser.parse_file("counter.vhd")
    for line in get_block_diagram(result.inputs, result.outputs):
        print(line)

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List

from .errors import IncompleteParseError, UnreadableFileError
from .model import Direction, ParseResult, PortRecord

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r'^\s*--')
_ENTITY_RE = re.compile(r'\bentity\b', re.IGNORECASE)
_PORT_RE = re.compile(r'\bport\b', re.IGNORECASE)
_END_RE = re.compile(r'\bend\b', re.IGNORECASE)
_BLANK_RE = re.compile(r'^\s*$')
_DECLARATION_RE = re.compile(
    r'^\s*(?P<name>\w+)\s*:\s*(?P<direction>in|out|inout|buffer)\s+std_logic(?P<vector>_vector)?',
    re.IGNORECASE,
)


class ParseState(Enum):
    """Position of the scanner relative to the entity port clause."""

    SEARCHING_FOR_ENTITY = "searching for entity"
    IN_ENTITY = "in entity"
    IN_ENTITY_PORT = "in entity port"
    COMPLETE = "complete"


@dataclass
class _ParseContext:
    """Mutable scanner state for a single parse."""

    state: ParseState = ParseState.SEARCHING_FOR_ENTITY
    group: int = 0
    group_empty: bool = True
    inputs: List[PortRecord] = field(default_factory=list)
    outputs: List[PortRecord] = field(default_factory=list)

    def enter(self, state: ParseState, lineno: int) -> None:
        logger.debug("line %d: %s -> %s", lineno, self.state.value, state.value)
        self.state = state


class VHDLPortParser:
    """Parser for the port clause of a VHDL entity."""

    def parse_file(self, path: str) -> ParseResult:
        """Parse a VHDL file.

        Args:
            path: File system path to the VHDL source.

        Returns:
            The ordered input and output ports of the entity.

        Raises:
            UnreadableFileError: If the file cannot be opened or read.
            IncompleteParseError: If the file ends before the end of
                the entity port clause.
        """
        try:
            with open(path, 'r', encoding='utf-8', errors='replace') as fh:
                return self.parse_lines(fh, source=path)
        except OSError as exc:
            raise UnreadableFileError(path) from exc

    def parse_text(self, text: str, source: str = "<string>") -> ParseResult:
        """Parse VHDL source from a string."""
        return self.parse_lines(text.split("\n"), source=source)

    def parse_lines(self, lines: Iterable[str], source: str = "<string>") -> ParseResult:
        """Run the scanner over ``lines``.

        Lines are consumed lazily and scanning stops at the line that
        closes the port clause, so the rest of the input is never read.

        Args:
            lines: Source lines, with or without trailing newlines.
            source: Name used in error and log messages.

        Returns:
            The ordered input and output ports of the entity.

        Raises:
            IncompleteParseError: If ``lines`` runs out before the
                scanner reaches :attr:`ParseState.COMPLETE`.
        """
        ctx = _ParseContext()
        for lineno, line in enumerate(lines, start=1):
            self._scan_line(ctx, line.rstrip('\r\n'), lineno)
            if ctx.state is ParseState.COMPLETE:
                break

        if ctx.state is not ParseState.COMPLETE:
            logger.debug("%s: input ended while %s", source, ctx.state.value)
            raise IncompleteParseError(source, ctx.state)

        logger.debug(
            "%s: %d inputs, %d outputs in %d groups",
            source, len(ctx.inputs), len(ctx.outputs), ctx.group + 1,
        )
        return ParseResult(inputs=tuple(ctx.inputs), outputs=tuple(ctx.outputs))

    # ------------------------------------------------------------------
    # Scanner

    def _scan_line(self, ctx: _ParseContext, line: str, lineno: int) -> None:
        # Comment lines never change state, whatever keywords they hold
        if _COMMENT_RE.match(line):
            return

        # The checks below fall through, so one line such as
        # "entity foo is port (" can advance the state more than once.
        if ctx.state is ParseState.SEARCHING_FOR_ENTITY:
            if _ENTITY_RE.search(line):
                ctx.enter(ParseState.IN_ENTITY, lineno)

        if ctx.state is ParseState.IN_ENTITY:
            if _PORT_RE.search(line):
                ctx.enter(ParseState.IN_ENTITY_PORT, lineno)

        if ctx.state is ParseState.IN_ENTITY_PORT:
            self._scan_port_line(ctx, line, lineno)

    def _scan_port_line(self, ctx: _ParseContext, line: str, lineno: int) -> None:
        if _END_RE.search(line):
            ctx.enter(ParseState.COMPLETE, lineno)
            return

        if _BLANK_RE.match(line):
            if ctx.group_empty:
                return
            ctx.group += 1
            ctx.group_empty = True
            logger.debug("line %d: starting port group %d", lineno, ctx.group)
            return

        m = _DECLARATION_RE.match(line)
        if not m:
            return

        ctx.group_empty = False
        direction = Direction.from_keyword(m.group('direction'))
        record = PortRecord(
            group=ctx.group,
            name=m.group('name'),
            is_vector=m.group('vector') is not None,
            direction=direction,
        )
        if direction.is_input:
            ctx.inputs.append(record)
        else:
            ctx.outputs.append(record)
        logger.debug("line %d: %s port %s", lineno, direction.value, record)
