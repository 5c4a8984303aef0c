"""Section number to township grid position lookup.

The Dominion Land Survey numbers the 36 sections of a township in a
snake pattern starting at the south-east corner, so positions come from
the fixed ``SECTION_GRID`` table rather than arithmetic.
"""

from __future__ import annotations

from typing import NamedTuple

from lld_converter.core.constants import SECTION_GRID, SECTIONS_PER_SIDE


class SectionGridPosition(NamedTuple):
    """Position of a section inside its township.

    ``row`` 0 is the northern row, ``col`` 0 the western column.
    """

    row: int
    col: int

    @property
    def rows_from_south(self) -> int:
        return SECTIONS_PER_SIDE - 1 - self.row


def find_section_in_grid(section: int) -> SectionGridPosition | None:
    """Return the grid position of *section*, or ``None`` if it is not in the table."""
    for row, numbers in enumerate(SECTION_GRID):
        for col, number in enumerate(numbers):
            if number == section:
                return SectionGridPosition(row, col)
    return None
