"""
Router for the bank statement extraction endpoint.

Handles:
- CORS pre-flight (OPTIONS)
- Statement extraction (POST)

The route accepts every HTTP method so that the method gate, the CORS
headers and the error bodies all follow this endpoint's own contract
instead of the framework defaults.
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError

from ..config import get_settings
from ..models import ErrorResponse, StatementRequest, StatementResponse
from ..services.anthropic_client import AnthropicClient, get_anthropic_client
from ..services.exceptions import (
    InvalidRequestError,
    MethodNotAllowedError,
    MissingFieldsError,
    NoTransactionsError,
    StatementExtractionError,
)
from ..services.extraction import StatementExtractor

logger = logging.getLogger(__name__)

router = APIRouter(tags=["statements"])

# Sent on every response from this endpoint, errors included
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Content-Type": "application/json",
}

STATEMENT_PATHS = ("/process-statement", "/.netlify/functions/process-statement")

ROUTE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

CLIENT_ERRORS = (InvalidRequestError, MethodNotAllowedError, NoTransactionsError)


def get_statement_extractor(
    client: AnthropicClient = Depends(get_anthropic_client),
) -> StatementExtractor:
    """Build the extraction pipeline for one request."""
    settings = get_settings()
    return StatementExtractor(
        client,
        default_model=settings.default_model,
        max_tokens=settings.max_tokens,
    )


def json_response(status_code: int, content: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content, headers=CORS_HEADERS)


async def _read_payload(request: Request) -> StatementRequest:
    """Decode the JSON body into a request payload."""
    # Undecodable bodies propagate to the catch-all 500
    data = json.loads(await request.body())

    # Anything other than an object carries none of the required fields
    if not isinstance(data, dict):
        raise MissingFieldsError()

    try:
        return StatementRequest.model_validate(data)
    except ValidationError as e:
        raise InvalidRequestError(
            "Invalid request body: pdfBase64, apiKey and model must be strings"
        ) from e


@router.api_route(
    STATEMENT_PATHS[0],
    methods=ROUTE_METHODS,
    responses={
        200: {"model": StatementResponse},
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
@router.api_route(
    STATEMENT_PATHS[1],
    methods=ROUTE_METHODS,
    include_in_schema=False,
)
async def process_statement(
    request: Request,
    extractor: StatementExtractor = Depends(get_statement_extractor),
) -> Response:
    """
    Extract business expenses from a base64-encoded PDF bank statement.

    Expects a JSON body with ``pdfBase64``, ``apiKey`` and an optional
    ``model``. Returns the model's ``{"transactions": [...]}`` verbatim.
    """
    if request.method == "OPTIONS":
        return Response(content=b"", status_code=status.HTTP_200_OK, headers=CORS_HEADERS)

    try:
        if request.method != "POST":
            raise MethodNotAllowedError()

        payload = await _read_payload(request)
        result = await extractor.extract(payload)
        return json_response(status.HTTP_200_OK, result)

    except StatementExtractionError as e:
        if isinstance(e, CLIENT_ERRORS):
            logger.warning("Rejected statement request (%d): %s", e.status_code, e.message)
        else:
            logger.error("Statement extraction failed (%d): %s", e.status_code, e.message)
        return json_response(e.status_code, e.to_content())

    except Exception as e:
        logger.exception("Function error")
        return json_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            {"error": str(e) or "Internal server error"},
        )
