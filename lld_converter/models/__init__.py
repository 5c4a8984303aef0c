"""Data models.

- LegalLandDescription: Quarter section, section, township, range, meridian
- QuarterSection / Meridian: Enumerated LLD components
- Coordinate: Latitude/longitude pair
- ConversionResult: Coordinate plus the bounds advisory
"""

from lld_converter.models.coordinate import ConversionResult, Coordinate
from lld_converter.models.lld import LegalLandDescription, Meridian, QuarterSection

__all__ = [
    "ConversionResult",
    "Coordinate",
    "LegalLandDescription",
    "Meridian",
    "QuarterSection",
]
