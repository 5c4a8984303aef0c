"""Survey constants used across the converter.

Distances are statute miles and angles are decimal degrees.  The
numeric values must not be tuned: converted coordinates are expected
to be reproducible to the fifth decimal place.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Grid dimensions and scale factors
# ---------------------------------------------------------------------------

BASE_LATITUDE: float = 49.0
"""Southern edge of Township 1 (the 49th parallel)."""

DEG_LAT_PER_MILE: float = 1 / 69.054
"""Degrees of latitude per statute mile (treated as constant)."""

DEG_LON_PER_MILE_AT_EQUATOR: float = 1 / 69.172
"""Degrees of longitude per statute mile before the latitude correction."""

MILES_PER_TOWNSHIP_SIDE: float = 6.0
MILES_PER_SECTION_SIDE: float = 1.0

SECTIONS_PER_SIDE: int = 6

COORDINATE_DECIMALS: int = 5

# ---------------------------------------------------------------------------
# Meridians (negative longitudes are west)
# ---------------------------------------------------------------------------

MERIDIAN_LONGITUDES: dict[int, float] = {
    4: -110.0,
    5: -114.0,
    6: -118.0,
}

# ---------------------------------------------------------------------------
# Field domains
# ---------------------------------------------------------------------------

MIN_SECTION: int = 1
MAX_SECTION: int = 36
MIN_TOWNSHIP: int = 1
MAX_TOWNSHIP: int = 126
MIN_RANGE: int = 1
MAX_RANGE: int = 34  # approximate; real ceilings vary by meridian

QUARTER_SECTIONS: tuple[str, ...] = ("NE", "NW", "SE", "SW")

# Canonical field order, also the fail-fast check order.
FIELD_ORDER: tuple[str, ...] = (
    "meridian",
    "township",
    "range",
    "section",
    "quarter_section",
)

FIELD_LABELS: dict[str, str] = {
    "quarter_section": "Quarter Section",
    "section": "Section",
    "township": "Township",
    "range": "Range",
    "meridian": "Meridian",
}

# ---------------------------------------------------------------------------
# Dominion Land Survey section numbering
# ---------------------------------------------------------------------------

# [row][col]: row 0 is the north edge, col 0 the west edge.  Section 1 sits
# in the south-east corner and numbering snakes west, then north.
SECTION_GRID: tuple[tuple[int, ...], ...] = (
    (31, 32, 33, 34, 35, 36),
    (30, 29, 28, 27, 26, 25),
    (19, 20, 21, 22, 23, 24),
    (18, 17, 16, 15, 14, 13),
    (7, 8, 9, 10, 11, 12),
    (6, 5, 4, 3, 2, 1),
)

# ---------------------------------------------------------------------------
# Advisory Alberta bounding box
# ---------------------------------------------------------------------------

ALBERTA_LAT_MIN: float = 49.0
ALBERTA_LAT_MAX: float = 60.0
ALBERTA_LON_MIN: float = -120.0
ALBERTA_LON_MAX: float = -110.0

CENTROID_NOTE: str = (
    "Coordinates are the approximate centre of the quarter section on an "
    "idealised survey grid. Actual boundaries may vary; consult official "
    "survey plans or a licensed Alberta Land Surveyor for precise locations."
)
