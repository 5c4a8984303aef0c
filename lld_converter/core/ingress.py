"""Thin ingress boundary helpers for the HTTP entrypoints.

Centralises transport concerns so that ``function_app.py`` contains
only trigger bindings and handoff:

- **deserialize_request_body**: normalises the raw request body
  (bytes, JSON string or already-parsed dict) to a plain dict.
- **merge_query_params**: lets GET requests supply fields on the
  query string, with the body taking precedence.
- **build_lld**: turns the payload into a ``LegalLandDescription``,
  either from the five fields or from a single ``lld`` text value.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from lld_converter.core.exceptions import ContractError
from lld_converter.models.lld import LegalLandDescription
from lld_converter.utils.helpers import is_blank

logger = logging.getLogger("lld_converter.core.ingress")

LLD_TEXT_KEY = "lld"


def deserialize_request_body(raw: bytes | str | dict[str, Any] | None) -> dict[str, Any]:
    """Normalise an HTTP request body to a plain dict.

    An empty body yields ``{}`` so that GET requests carrying only query
    parameters are accepted.

    Raises:
        ContractError: If the body is not a JSON object.
    """
    if raw is None:
        return {}
    if isinstance(raw, dict):
        return raw
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            msg = f"Request body is not valid UTF-8: {exc}"
            raise ContractError(msg, code="INVALID_ENCODING") from exc
    if isinstance(raw, str):
        if not raw.strip():
            return {}
        try:
            parsed = json.loads(raw)
        except (json.JSONDecodeError, ValueError) as exc:
            msg = f"Request body is not valid JSON: {exc}"
            raise ContractError(msg, code="INVALID_JSON") from exc
        if not isinstance(parsed, dict):
            msg = f"Request body JSON must be an object, got {type(parsed).__name__}"
            raise ContractError(msg, code="INVALID_INPUT_TYPE")
        return parsed
    msg = f"Unexpected request body type: {type(raw).__name__}"
    raise ContractError(msg, code="INVALID_INPUT_TYPE")


def merge_query_params(
    payload: dict[str, Any],
    params: Mapping[str, str] | None,
) -> dict[str, Any]:
    """Return *payload* with query-string values filled in for absent keys."""
    if not params:
        return payload
    merged = dict(params)
    merged.update(payload)
    return merged


def build_lld(payload: dict[str, Any]) -> LegalLandDescription:
    """Build a ``LegalLandDescription`` from a request payload.

    A non-blank ``lld`` value (``"NE-36-87-18-W4"``) takes precedence over
    the individual fields.

    Raises:
        ContractError: If a field value cannot be coerced.
        LLDFormatError: If the ``lld`` text cannot be parsed.
    """
    text = payload.get(LLD_TEXT_KEY)
    if not is_blank(text):
        if not isinstance(text, str):
            msg = f"Field '{LLD_TEXT_KEY}' must be a string, got {type(text).__name__}"
            raise ContractError(msg, field=LLD_TEXT_KEY, code="INVALID_FIELD_TYPE")
        lld = LegalLandDescription.parse(text)
    else:
        lld = LegalLandDescription.from_dict(payload)

    logger.debug("Built LLD from request | lld=%s", lld)
    return lld
