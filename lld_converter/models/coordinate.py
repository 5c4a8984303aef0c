"""Output models of a conversion.

All coordinates are decimal degrees, rounded to five places, negative
longitude is west.  No datum is implied: the grid model is a spherical
approximation, not WGS 84 geodesy.
"""

from __future__ import annotations

from dataclasses import dataclass

from lld_converter.models.lld import LegalLandDescription


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A latitude/longitude pair."""

    latitude: float
    longitude: float

    def to_dict(self) -> dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """A converted LLD together with its advisory signal.

    Attributes:
        lld: The input description.
        coordinate: Quarter-section centroid.
        bounds_warning: Non-empty when the centroid falls outside the
            advisory bounding box.  The coordinate is still valid.
    """

    lld: LegalLandDescription
    coordinate: Coordinate
    bounds_warning: str = ""

    @property
    def latitude(self) -> float:
        return self.coordinate.latitude

    @property
    def longitude(self) -> float:
        return self.coordinate.longitude

    def to_dict(self) -> dict[str, object]:
        """Serialise for the HTTP response body."""
        return {
            "lld": str(self.lld),
            "latitude": self.coordinate.latitude,
            "longitude": self.coordinate.longitude,
            "warning": self.bounds_warning,
        }
