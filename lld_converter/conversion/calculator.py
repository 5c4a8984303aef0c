"""Quarter-section centroid calculator.

Converts a validated LLD into latitude/longitude in three nested stages,
each computing an offset in miles and converting it to degrees:

1. Township centroid: north from the 49th parallel, west from the meridian.
2. Section centroid: grid position inside the township, relative to the
   township centre.
3. Quarter-section centroid: a quarter-mile step from the section centre
   along both axes.

Longitude degrees per mile are scaled by ``1 / cos(latitude)`` using the
township-centre latitude for every stage.  This is a simplified
spherical model, not survey-grade geodesy: results are approximate
centroids of an idealised grid.

The result is rounded to five decimal places.  A centroid outside the
advisory bounding box is logged and reported on the result but is never
rejected.
"""

from __future__ import annotations

import logging
import math
from typing import NamedTuple

from lld_converter.conversion.section_grid import find_section_in_grid
from lld_converter.conversion.validation import validate_for_conversion
from lld_converter.core.constants import (
    ALBERTA_LAT_MAX,
    ALBERTA_LAT_MIN,
    ALBERTA_LON_MAX,
    ALBERTA_LON_MIN,
    BASE_LATITUDE,
    COORDINATE_DECIMALS,
    DEG_LAT_PER_MILE,
    DEG_LON_PER_MILE_AT_EQUATOR,
    MILES_PER_SECTION_SIDE,
    MILES_PER_TOWNSHIP_SIDE,
)
from lld_converter.core.exceptions import GridPositionError, SingularityError
from lld_converter.models.coordinate import ConversionResult, Coordinate
from lld_converter.models.lld import LegalLandDescription, Meridian, QuarterSection

logger = logging.getLogger("lld_converter.conversion.calculator")

DEFAULT_ADVISORY_BBOX: tuple[float, float, float, float] = (
    ALBERTA_LON_MIN,
    ALBERTA_LAT_MIN,
    ALBERTA_LON_MAX,
    ALBERTA_LAT_MAX,
)

# cos(90°) evaluates to ~6e-17 in floating point, not zero.
_MIN_COSINE = 1e-12

_HALF_TOWNSHIP_MILES = MILES_PER_TOWNSHIP_SIDE / 2


class TownshipCentroid(NamedTuple):
    """Township centre plus the longitude scale used by later stages."""

    latitude: float
    longitude: float
    deg_lon_per_mile: float


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------


def degrees_longitude_per_mile(latitude: float) -> float:
    """Degrees of longitude spanned by one statute mile at *latitude*.

    Raises:
        SingularityError: If the cosine of *latitude* is zero (a pole).
    """
    cos_lat = math.cos(math.radians(latitude))
    if abs(cos_lat) < _MIN_COSINE:
        msg = f"Cannot calculate longitude at latitude {latitude}: cosine is zero"
        raise SingularityError(msg)
    return DEG_LON_PER_MILE_AT_EQUATOR / cos_lat


def township_centroid(township: int, range_: int, meridian: Meridian | int) -> TownshipCentroid:
    """Centre of a township.

    Townships count north from ``BASE_LATITUDE`` and ranges count west
    from the meridian, each six miles on a side.
    """
    north_miles = (township - 1 + 0.5) * MILES_PER_TOWNSHIP_SIDE
    latitude = BASE_LATITUDE + north_miles * DEG_LAT_PER_MILE

    deg_lon_per_mile = degrees_longitude_per_mile(latitude)

    west_miles = (range_ - 1 + 0.5) * MILES_PER_TOWNSHIP_SIDE
    longitude = Meridian(meridian).base_longitude - west_miles * deg_lon_per_mile

    return TownshipCentroid(latitude, longitude, deg_lon_per_mile)


def section_centroid(township: TownshipCentroid, section: int) -> tuple[float, float]:
    """Centre of *section* as ``(lat, lon)`` given its township's centre.

    Raises:
        GridPositionError: If *section* is not in the section grid.
    """
    position = find_section_in_grid(section)
    if position is None:
        msg = f"Section {section} not found in grid. Should be 1-36."
        raise GridPositionError(msg, field="section")

    # Offsets from the township's south-west corner, then from its centre.
    east_miles = (position.col + 0.5) * MILES_PER_SECTION_SIDE - _HALF_TOWNSHIP_MILES
    north_miles = (position.rows_from_south + 0.5) * MILES_PER_SECTION_SIDE - _HALF_TOWNSHIP_MILES

    latitude = township.latitude + north_miles * DEG_LAT_PER_MILE
    longitude = township.longitude + east_miles * township.deg_lon_per_mile
    return (latitude, longitude)


def quarter_section_centroid(
    section_lat: float,
    section_lon: float,
    quarter: QuarterSection | str,
    deg_lon_per_mile: float,
) -> tuple[float, float]:
    """Centre of a quarter section as ``(lat, lon)`` given its section's centre."""
    east_miles, north_miles = QuarterSection(quarter).offset_miles
    return (
        section_lat + north_miles * DEG_LAT_PER_MILE,
        section_lon + east_miles * deg_lon_per_mile,
    )


def bounds_advisory(
    latitude: float,
    longitude: float,
    advisory_bbox: tuple[float, float, float, float] = DEFAULT_ADVISORY_BBOX,
) -> str:
    """Return a warning if the point lies outside *advisory_bbox*, else ``""``.

    Args:
        latitude: Point latitude in degrees.
        longitude: Point longitude in degrees.
        advisory_bbox: ``(min_lon, min_lat, max_lon, max_lat)``; edges count
            as inside.
    """
    from shapely.geometry import Point, box

    if box(*advisory_bbox).covers(Point(longitude, latitude)):
        return ""
    min_lon, min_lat, max_lon, max_lat = advisory_bbox
    return (
        f"Calculated coordinates ({latitude:.5f}, {longitude:.5f}) are outside "
        f"typical Alberta bounds (lat {min_lat} to {max_lat}, lon {min_lon} to {max_lon})"
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def convert_with_advisory(
    lld: LegalLandDescription,
    *,
    advisory_bbox: tuple[float, float, float, float] | None = None,
) -> ConversionResult:
    """Convert an LLD to its quarter-section centroid.

    Args:
        lld: The legal land description.
        advisory_bbox: ``(min_lon, min_lat, max_lon, max_lat)`` used for the
            non-fatal bounds advisory.  Defaults to the Alberta box.

    Returns:
        A ``ConversionResult`` with the rounded coordinate and, if the
        centroid falls outside *advisory_bbox*, a ``bounds_warning``.

    Raises:
        MissingFieldError: If any LLD field is absent.
        DomainError: If a field is outside its valid domain.
        GridPositionError: If the section has no grid position.
        SingularityError: If the longitude scale is undefined.
    """
    fields = validate_for_conversion(lld)

    township = township_centroid(fields.township, fields.range, fields.meridian)
    logger.debug(
        "Township centroid | lld=%s | lat=%.6f | lon=%.6f | deg_lon_per_mile=%.8f",
        lld,
        *township,
    )

    section_lat, section_lon = section_centroid(township, fields.section)
    logger.debug(
        "Section centroid | lld=%s | lat=%.6f | lon=%.6f",
        lld,
        section_lat,
        section_lon,
    )

    latitude, longitude = quarter_section_centroid(
        section_lat, section_lon, fields.quarter_section, township.deg_lon_per_mile
    )

    bounds_warning = bounds_advisory(latitude, longitude, advisory_bbox or DEFAULT_ADVISORY_BBOX)
    if bounds_warning:
        logger.warning("%s | lld=%s", bounds_warning, lld)

    coordinate = Coordinate(
        latitude=round(latitude, COORDINATE_DECIMALS),
        longitude=round(longitude, COORDINATE_DECIMALS),
    )
    return ConversionResult(lld=lld, coordinate=coordinate, bounds_warning=bounds_warning)


def convert(lld: LegalLandDescription) -> Coordinate:
    """Convert an LLD to the rounded latitude/longitude of its quarter-section centroid.

    Pure apart from the advisory log line; see ``convert_with_advisory``
    for the errors raised.
    """
    return convert_with_advisory(lld).coordinate
