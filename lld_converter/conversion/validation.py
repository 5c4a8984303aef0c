"""LLD input validation.

One per-field check, ``check_field``, backs two call sites:

- ``collect_field_issues`` runs every check and returns all violations,
  for interactive use where each field shows its own message.
- ``validate_for_conversion`` fails fast, raising on the first violated
  precondition, for programmatic use ahead of the calculator.

Checks run in the order meridian, township, range, section,
quarter section.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, NamedTuple

from lld_converter.conversion.section_grid import find_section_in_grid
from lld_converter.core.constants import (
    FIELD_LABELS,
    FIELD_ORDER,
    MAX_RANGE,
    MAX_SECTION,
    MAX_TOWNSHIP,
    MERIDIAN_LONGITUDES,
    MIN_RANGE,
    MIN_SECTION,
    MIN_TOWNSHIP,
    QUARTER_SECTIONS,
)
from lld_converter.core.exceptions import DomainError, MissingFieldError

if TYPE_CHECKING:
    from lld_converter.models.lld import LegalLandDescription

logger = logging.getLogger("lld_converter.conversion.validation")

MISSING_FIELD_CODE = "MISSING_FIELD"

_INT_BOUNDS: dict[str, tuple[int, int]] = {
    "township": (MIN_TOWNSHIP, MAX_TOWNSHIP),
    "range": (MIN_RANGE, MAX_RANGE),
    "section": (MIN_SECTION, MAX_SECTION),
}


@dataclass(frozen=True, slots=True)
class FieldIssue:
    """A single field-level validation problem.

    Attributes:
        field: LLD field name (snake_case).
        code: ``MISSING_FIELD`` or ``INVALID_<FIELD>``.
        message: Human-readable message suitable for display next to the field.
        value: The offending value (``None`` when missing).
    """

    field: str
    code: str
    message: str
    value: object = None

    def to_dict(self) -> dict[str, object]:
        return {
            "field": self.field,
            "code": self.code,
            "message": self.message,
            "value": self.value,
        }

    def to_exception(self) -> DomainError | MissingFieldError:
        if self.code == MISSING_FIELD_CODE:
            return MissingFieldError((self.field,))
        return DomainError(self.field, self.value, self.message)


def check_field(field: str, value: object) -> FieldIssue | None:
    """Check one LLD field against its domain.

    Returns:
        ``None`` when the value is acceptable, otherwise a ``FieldIssue``.

    Raises:
        KeyError: If *field* is not an LLD field name.
    """
    label = FIELD_LABELS[field]
    if value is None:
        return FieldIssue(field, MISSING_FIELD_CODE, f"{label} is required.")

    code = f"INVALID_{field.upper()}"

    if field == "meridian":
        if (
            isinstance(value, bool)
            or not isinstance(value, int)
            or value not in MERIDIAN_LONGITUDES
        ):
            allowed = ", ".join(str(m) for m in MERIDIAN_LONGITUDES)
            return FieldIssue(field, code, f"Invalid {label}: {value}. Must be {allowed}.", value)
        return None

    if field == "quarter_section":
        value = getattr(value, "value", value)
        if value not in QUARTER_SECTIONS:
            allowed = ", ".join(QUARTER_SECTIONS)
            return FieldIssue(field, code, f"Invalid {label}: {value}. Must be one of {allowed}.", value)
        return None

    low, high = _INT_BOUNDS[field]
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        return FieldIssue(
            field, code, f"Invalid {label}: {value}. Must be between {low} and {high}.", value
        )
    if field == "section" and find_section_in_grid(value) is None:
        return FieldIssue(field, code, f"Invalid {label}: {value}. Not found in section grid.", value)
    return None


def collect_field_issues(lld: LegalLandDescription) -> list[FieldIssue]:
    """Run every field check and return all violations (empty list = valid)."""
    issues = []
    for field in FIELD_ORDER:
        issue = check_field(field, getattr(lld, field))
        if issue is not None:
            issues.append(issue)
    return issues


class ValidatedFields(NamedTuple):
    """Field values of an LLD that passed ``validate_for_conversion``."""

    quarter_section: str
    section: int
    township: int
    range: int
    meridian: int


def validate_for_conversion(lld: LegalLandDescription) -> ValidatedFields:
    """Fail fast on the first violated precondition.

    Completeness is checked before any domain rule so that a partially
    filled description reports every absent field at once.

    Returns:
        The field values, with enum members reduced to their plain values.

    Raises:
        MissingFieldError: If any field is absent.
        DomainError: For the first field outside its domain.
    """
    missing = lld.missing_fields()
    if missing:
        raise MissingFieldError(missing)

    values: dict[str, Any] = {}
    for field in FIELD_ORDER:
        value = getattr(lld, field)
        issue = check_field(field, value)
        if issue is not None:
            logger.debug("LLD rejected | lld=%s | field=%s | code=%s", lld, field, issue.code)
            raise issue.to_exception()
        values[field] = getattr(value, "value", value)

    return ValidatedFields(**values)
