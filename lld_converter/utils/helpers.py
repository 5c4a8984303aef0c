"""Value coercion helpers shared by the LLD model and the ingress layer.

Form fields and query strings deliver numbers as text, JSON bodies as
numbers.  These helpers accept both and treat ``None`` or blank text as
an absent field.  Values that cannot be coerced raise ``ContractError``
naming the field.
"""

from __future__ import annotations

from lld_converter.core.exceptions import ContractError


def _type_error(field: str, value: object) -> ContractError:
    msg = f"Field '{field}' must be an integer, got {value!r}"
    return ContractError(msg, field=field, code="INVALID_FIELD_TYPE")


def is_blank(value: object) -> bool:
    """Return True for ``None`` and empty or whitespace-only strings."""
    return value is None or (isinstance(value, str) and not value.strip())


def coerce_optional_int(value: object, field: str) -> int | None:
    """Coerce an integer-like value, returning ``None`` when absent.

    Accepts ints, integral floats (``36.0``) and numeric strings
    (``" 36 "``).  Booleans are rejected even though they are ints.

    Raises:
        ContractError: If the value is present but not integral.
    """
    if is_blank(value):
        return None
    if isinstance(value, bool):
        raise _type_error(field, value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise _type_error(field, value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError as exc:
            raise _type_error(field, value) from exc
        if number.is_integer():
            return int(number)
    raise _type_error(field, value)


def coerce_meridian(value: object, field: str = "meridian") -> int | None:
    """Coerce a meridian designator (``5``, ``"5"``, ``"W5"``, ``"w5m"``).

    Raises:
        ContractError: If the value is present but has no meridian number.
    """
    if is_blank(value):
        return None
    if isinstance(value, str):
        text = value.strip().upper()
        if text.startswith("W"):
            text = text[1:]
        if text.endswith("M"):
            text = text[:-1]
        if is_blank(text):
            raise _type_error(field, value)
        return coerce_optional_int(text, field)
    return coerce_optional_int(value, field)


def coerce_quarter_section(value: object, field: str = "quarter_section") -> str | None:
    """Normalise a quarter-section label to upper case, ``None`` when absent.

    The label is not checked against the four quadrants here; that is
    the validator's job so that a bad label is reported as a field error.
    """
    if is_blank(value):
        return None
    if not isinstance(value, str):
        msg = f"Field '{field}' must be a string, got {type(value).__name__}"
        raise ContractError(msg, field=field, code="INVALID_FIELD_TYPE")
    return value.strip().upper()
