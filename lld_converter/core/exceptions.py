"""Unified converter exception taxonomy.

Every domain exception inherits from ``ConverterError`` and carries
structured context fields so that callers (the HTTP layer, a form, a
batch job) can map failures to field-level or general messages.

Taxonomy categories
-------------------
- ``ValidationError``:   incomplete or out-of-domain LLD input.
- ``ComputationError``:  the geometric algorithm cannot proceed.
- ``ContractError``:     malformed transport payload.

The conversion is deterministic, so no failure is retryable: the same
input always fails the same way.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for HTTP responses and logging.
"""

from __future__ import annotations


class ConverterError(Exception):
    """Base exception for all converter-domain errors.

    Attributes:
        message: Human-readable error description.
        field: LLD field the error relates to (``""`` for general errors).
        stage: Processing stage where the error occurred
            (e.g. ``"validation"``, ``"calculator"``, ``"ingress"``).
        code: Machine-readable error code (e.g. ``"INVALID_TOWNSHIP"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        field: str = "",
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.field = field
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, ComputationError):
            return "computation"
        return "general"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "field": self.field,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(ConverterError):
    """LLD input is incomplete or outside its valid domain."""

    default_stage = "validation"
    default_code = "LLD_VALIDATION_FAILED"


class ComputationError(ConverterError):
    """The coordinate calculation cannot produce a result."""

    default_stage = "calculator"
    default_code = "COMPUTATION_FAILED"


class ContractError(ConverterError):
    """Transport payload does not match the expected shape."""

    default_stage = "ingress"
    default_code = "INVALID_PAYLOAD"


# ---------------------------------------------------------------------------
# Validation failures
# ---------------------------------------------------------------------------


class MissingFieldError(ValidationError):
    """Raised when one or more required LLD fields are absent.

    Attributes:
        missing_fields: Names of the absent fields, in canonical order.
    """

    default_code = "LLD_INCOMPLETE"

    def __init__(self, missing_fields: tuple[str, ...] | list[str], message: str = "") -> None:
        self.missing_fields = tuple(missing_fields)
        if not message:
            message = (
                "All LLD components must be provided; missing: "
                + ", ".join(self.missing_fields)
            )
        super().__init__(message)


class DomainError(ValidationError):
    """Raised when a present field lies outside its valid range or enumeration.

    The error code names the offending field, e.g. ``INVALID_SECTION``.

    Attributes:
        value: The rejected value.
    """

    def __init__(self, field: str, value: object, message: str) -> None:
        self.value = value
        super().__init__(message, field=field, code=f"INVALID_{field.upper()}")


class LLDFormatError(ValidationError):
    """Raised when a textual LLD such as ``NE-36-87-18-W4`` cannot be parsed."""

    default_stage = "parse"
    default_code = "LLD_FORMAT_INVALID"


# ---------------------------------------------------------------------------
# Computation failures
# ---------------------------------------------------------------------------


class GridPositionError(ComputationError):
    """Raised when a section number has no position in the section grid."""

    default_code = "INVALID_GRID_POSITION"


class SingularityError(ComputationError):
    """Raised when the longitude scale is undefined (zero cosine at a pole)."""

    default_code = "LONGITUDE_UNDEFINED"
