"""LLD to coordinate conversion.

- section_grid: Section number to township grid position
- validation: Per-field checks, collect-all and fail-fast call sites
- calculator: Township, section and quarter-section centroid stages
"""

from lld_converter.conversion.calculator import convert, convert_with_advisory
from lld_converter.conversion.validation import (
    FieldIssue,
    ValidatedFields,
    check_field,
    collect_field_issues,
    validate_for_conversion,
)

__all__ = [
    "FieldIssue",
    "ValidatedFields",
    "check_field",
    "collect_field_issues",
    "convert",
    "convert_with_advisory",
    "validate_for_conversion",
]
