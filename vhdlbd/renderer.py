"""ASCII block diagram renderer.

Renders merged :class:`~vhdlbd.model.DiagramRow` objects as a box
drawn with dashes and pipes.  Every line starts with ``--`` so that
the diagram can be pasted straight into a VHDL comment block::

    --
    --   --------------
    -- --|clk    valid|--
    -- --|rst         |--
    -- --|            |--
    -- --|data[]      |--
    --   --------------
    --

The box itself comes from a Jinja2 template; this module only works
out the widths and the padding of each row.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence

from jinja2 import Environment, FileSystemLoader

from .layout import content_width, merge_ports
from .model import DiagramRow, PortRecord

# Template directory
TEMPLATES_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "block_diagram.txt.j2"

# Extra dashes in the top and bottom border beyond the longest row
BORDER_MARGIN = 5
# Minimum gap between a row's left and right text, plus one for the "~"
ROW_PADDING = 4


class AsciiDiagramRenderer:
    """Render diagram rows as the lines of an ASCII box."""

    def __init__(self):
        """Initialize renderer with Jinja2 environment."""
        self._env = Environment(
            loader=FileSystemLoader(TEMPLATES_DIR),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._template = None

    @property
    def template(self):
        """Load and cache the box template."""
        if self._template is None:
            self._template = self._env.get_template(TEMPLATE_NAME)
        return self._template

    def _pad_row(self, row: DiagramRow, width: int) -> str:
        """Left-justify ``row.left`` and right-justify ``row.right``."""
        gap = width - len(row.text) + ROW_PADDING
        return row.left + " " * gap + row.right

    def render(self, rows: Iterable[DiagramRow]) -> str:
        """Render ``rows`` as a single newline separated string."""
        rows = list(rows)
        width = content_width(rows)
        return self.template.render(
            border="-" * (width + BORDER_MARGIN),
            rows=[self._pad_row(row, width) for row in rows],
        )

    def render_lines(self, rows: Iterable[DiagramRow]) -> List[str]:
        """Render ``rows`` as a list of printable lines."""
        return self.render(rows).splitlines()


def get_block_diagram(
    inputs: Sequence[PortRecord], outputs: Sequence[PortRecord]
) -> List[str]:
    """Return the block diagram lines for an entity's ports."""
    rows = merge_ports(inputs, outputs)
    return AsciiDiagramRenderer().render_lines(rows)
