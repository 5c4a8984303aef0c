"""Azure Functions entry point for the Alberta LLD converter.

This module registers the HTTP functions using the Python v2
programming model.

All business logic lives in the lld_converter package. This file is
purely the wiring layer between Azure Functions bindings and
application code.
"""

from __future__ import annotations

import logging

import azure.functions as func

from lld_converter.api.handlers import JSON_MIMETYPE, HandlerResponse, handle_convert, handle_validate
from lld_converter.core.config import ConverterConfig

app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)

logger = logging.getLogger("lld_converter.function_app")

# Fail fast on bad app settings at cold start.
config = ConverterConfig.from_env()
logging.getLogger("lld_converter").setLevel(config.log_level)


def _to_http_response(response: HandlerResponse) -> func.HttpResponse:
    return func.HttpResponse(
        response.to_json(),
        status_code=response.status_code,
        mimetype=JSON_MIMETYPE,
    )


# ---------------------------------------------------------------------------
# HTTP: Convert an LLD to its quarter-section centroid
# ---------------------------------------------------------------------------


@app.function_name("convert_lld")
@app.route(route="convert", methods=["GET", "POST"])
def convert_lld(req: func.HttpRequest) -> func.HttpResponse:
    """Convert an LLD supplied as JSON body or query parameters.

    Accepts the five fields (``quarterSection``, ``section``, ``township``,
    ``range``, ``meridian``) or a single ``lld`` text value such as
    ``NE-36-87-18-W4``.
    """
    response = handle_convert(req.get_body(), dict(req.params), config=config)
    return _to_http_response(response)


# ---------------------------------------------------------------------------
# HTTP: Field-level validation for interactive forms
# ---------------------------------------------------------------------------


@app.function_name("validate_lld")
@app.route(route="validate", methods=["GET", "POST"])
def validate_lld(req: func.HttpRequest) -> func.HttpResponse:
    """Return every field-level problem in an LLD without converting it."""
    response = handle_validate(req.get_body(), dict(req.params))
    return _to_http_response(response)
