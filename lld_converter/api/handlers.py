"""Request handlers behind the Azure Functions HTTP triggers.

Handlers take the raw body and query parameters and return a
``HandlerResponse`` (status code plus JSON body).  They never raise for
bad input: every ``ConverterError`` is mapped to a status code here.

Status codes:
    200  conversion succeeded (possibly with a bounds warning)
    400  payload could not be read (``ContractError``)
    422  LLD is incomplete or out of domain (``ValidationError``)
    500  calculation failed (``ComputationError``)
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from lld_converter.conversion.calculator import convert_with_advisory
from lld_converter.conversion.validation import collect_field_issues
from lld_converter.core.config import ConverterConfig
from lld_converter.core.constants import CENTROID_NOTE
from lld_converter.core.exceptions import (
    ComputationError,
    ContractError,
    ConverterError,
    ValidationError,
)
from lld_converter.core.ingress import build_lld, deserialize_request_body, merge_query_params
from lld_converter.models.lld import LegalLandDescription

logger = logging.getLogger("lld_converter.api.handlers")

JSON_MIMETYPE = "application/json"


@dataclass(frozen=True, slots=True)
class HandlerResponse:
    """Status code and JSON-serialisable body of an HTTP response."""

    status_code: int
    body: dict[str, object] = field(default_factory=dict)

    def to_json(self) -> str:
        return json.dumps(self.body)


def _error_response(
    status_code: int,
    exc: ConverterError,
    lld: LegalLandDescription | None = None,
) -> HandlerResponse:
    body: dict[str, object] = {"error": exc.to_error_dict()}
    if isinstance(exc, ValidationError):
        issues = collect_field_issues(lld) if lld is not None else []
        body["errors"] = [issue.to_dict() for issue in issues]
    return HandlerResponse(status_code, body)


def handle_convert(
    body: bytes | str | dict[str, Any] | None,
    params: Mapping[str, str] | None = None,
    *,
    config: ConverterConfig | None = None,
) -> HandlerResponse:
    """Convert the LLD in a request to its quarter-section centroid."""
    config = config or ConverterConfig()
    lld: LegalLandDescription | None = None
    try:
        payload = merge_query_params(deserialize_request_body(body), params)
        lld = build_lld(payload)
        result = convert_with_advisory(lld, advisory_bbox=config.advisory_bbox)
    except ContractError as exc:
        logger.warning("Convert request rejected | code=%s | %s", exc.code, exc.message)
        return _error_response(400, exc)
    except ValidationError as exc:
        logger.warning(
            "Convert request invalid | lld=%s | code=%s | %s", lld, exc.code, exc.message
        )
        return _error_response(422, exc, lld)
    except ComputationError as exc:
        logger.error("Conversion failed | lld=%s | code=%s | %s", lld, exc.code, exc.message)
        return _error_response(500, exc, lld)

    logger.info(
        "LLD converted | lld=%s | lat=%.5f | lon=%.5f | warning=%s",
        result.lld,
        result.latitude,
        result.longitude,
        bool(result.bounds_warning),
    )
    return HandlerResponse(200, {**result.to_dict(), "note": CENTROID_NOTE})


def handle_validate(
    body: bytes | str | dict[str, Any] | None,
    params: Mapping[str, str] | None = None,
) -> HandlerResponse:
    """Report every field problem in a request without converting."""
    try:
        payload = merge_query_params(deserialize_request_body(body), params)
        lld = build_lld(payload)
    except ContractError as exc:
        logger.warning("Validate request rejected | code=%s | %s", exc.code, exc.message)
        return _error_response(400, exc)
    except ValidationError as exc:
        logger.warning("Validate request invalid | code=%s | %s", exc.code, exc.message)
        return _error_response(422, exc)

    issues = collect_field_issues(lld)
    if issues:
        logger.warning(
            "Validate request invalid | lld=%s | fields=%s",
            lld,
            ",".join(issue.field for issue in issues),
        )
    body_out: dict[str, object] = {
        "lld": str(lld),
        "valid": not issues,
        "errors": [issue.to_dict() for issue in issues],
    }
    return HandlerResponse(422 if issues else 200, body_out)
