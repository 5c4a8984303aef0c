"""Data model for an Alberta Legal Land Description (LLD).

An LLD addresses a quarter section on the Dominion Land Survey grid:
``NE-36-87-18-W4`` is the north-east quarter of Section 36, Township 87,
Range 18, west of the 4th Meridian.

``LegalLandDescription`` keeps the raw (coerced) field values rather
than enum members so that an out-of-domain value survives construction
and can be reported by the validator against the field it came from.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Any

from lld_converter.core.constants import (
    FIELD_ORDER,
    MERIDIAN_LONGITUDES,
    MILES_PER_SECTION_SIDE,
)
from lld_converter.core.exceptions import LLDFormatError
from lld_converter.utils.helpers import (
    coerce_meridian,
    coerce_optional_int,
    coerce_quarter_section,
)

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class QuarterSection(enum.Enum):
    """Quadrant of a section."""

    NE = "NE"
    NW = "NW"
    SE = "SE"
    SW = "SW"

    @property
    def offset_miles(self) -> tuple[float, float]:
        """``(east, north)`` offset of the quarter centroid from the section centroid."""
        step = MILES_PER_SECTION_SIDE / 4
        east = step if self.value.endswith("E") else -step
        north = step if self.value.startswith("N") else -step
        return (east, north)


class Meridian(enum.IntEnum):
    """Survey meridian; ranges are counted westward from it."""

    W4 = 4
    W5 = 5
    W6 = 6

    @property
    def base_longitude(self) -> float:
        """Longitude of the meridian in decimal degrees (negative is west)."""
        return MERIDIAN_LONGITUDES[self.value]


# ---------------------------------------------------------------------------
# Text form
# ---------------------------------------------------------------------------

_SEP = r"[\s\-]+"
_LLD_PATTERN = re.compile(
    rf"^\s*(?P<quarter_section>[A-Z]{{2}}){_SEP}(?P<section>\d{{1,3}}){_SEP}"
    rf"(?P<township>\d{{1,3}}){_SEP}(?P<range>\d{{1,3}}){_SEP}"
    rf"W(?P<meridian>\d)M?\s*$",
    re.IGNORECASE,
)

# Keys accepted by ``from_dict`` for each field (camelCase first).
_FIELD_KEYS: dict[str, tuple[str, ...]] = {
    "quarter_section": ("quarterSection", "quarter_section", "qs"),
    "section": ("section", "sec"),
    "township": ("township", "twp"),
    "range": ("range", "rge"),
    "meridian": ("meridian", "mer"),
}


@dataclass(frozen=True, slots=True)
class LegalLandDescription:
    """A (possibly incomplete) legal land description.

    Attributes:
        quarter_section: Upper-cased quadrant label (``"NE"`` ...), or ``None``.
        section: Section number, valid 1-36.
        township: Township number, valid 1-126, counted north from 49°N.
        range: Range number, valid 1-34, counted west from the meridian.
        meridian: Meridian number, valid 4, 5 or 6.
    """

    quarter_section: str | None = None
    section: int | None = None
    township: int | None = None
    range: int | None = None
    meridian: int | None = None

    def missing_fields(self) -> tuple[str, ...]:
        """Return the names of absent fields in canonical order."""
        return tuple(name for name in FIELD_ORDER if getattr(self, name) is None)

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    def __str__(self) -> str:
        def part(value: object) -> str:
            return "?" if value is None else str(getattr(value, "value", value))

        return (
            f"{part(self.quarter_section)}-{part(self.section)}-"
            f"{part(self.township)}-{part(self.range)}-W{part(self.meridian)}"
        )

    def to_dict(self) -> dict[str, object]:
        """Serialise with the camelCase keys used by HTTP clients."""
        return {
            "quarterSection": self.quarter_section,
            "section": self.section,
            "township": self.township,
            "range": self.range,
            "meridian": self.meridian,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LegalLandDescription:
        """Build from a form/JSON payload.

        Keys may be camelCase, snake_case or the survey abbreviations
        (``twp``, ``rge`` ...).  Values may be numbers or strings; blank
        values count as absent.

        Raises:
            ContractError: If a present value cannot be coerced.
        """
        raw = {name: _first_present(data, keys) for name, keys in _FIELD_KEYS.items()}
        return cls(
            quarter_section=coerce_quarter_section(raw["quarter_section"]),
            section=coerce_optional_int(raw["section"], "section"),
            township=coerce_optional_int(raw["township"], "township"),
            range=coerce_optional_int(raw["range"], "range"),
            meridian=coerce_meridian(raw["meridian"]),
        )

    @classmethod
    def parse(cls, text: str) -> LegalLandDescription:
        """Parse the conventional text form, e.g. ``NE-36-87-18-W4``.

        Dashes or whitespace separate the parts; case is ignored and a
        trailing ``M`` on the meridian (``W4M``) is accepted.  Only the
        shape is checked here, values are left to the validator.

        Raises:
            LLDFormatError: If *text* does not have the expected shape.
        """
        match = _LLD_PATTERN.match(text) if isinstance(text, str) else None
        if match is None:
            msg = f"Cannot parse LLD {text!r}; expected a form like 'NE-36-87-18-W4'"
            raise LLDFormatError(msg)
        return cls(
            quarter_section=match["quarter_section"].upper(),
            section=int(match["section"]),
            township=int(match["township"]),
            range=int(match["range"]),
            meridian=int(match["meridian"]),
        )


def _first_present(data: dict[str, Any], keys: tuple[str, ...]) -> object:
    for key in keys:
        if key in data:
            return data[key]
    return None
