"""
Minimal async client for Anthropic's Messages API.

Uses httpx directly: one POST per extraction, a fresh client per call,
no retries. Non-success responses are surfaced as ``UpstreamAPIError``
carrying the upstream status code so the handler can mirror it.
"""

import logging
from typing import Any

import httpx

from ..config import get_settings
from .exceptions import UpstreamAPIError, UpstreamResponseError

logger = logging.getLogger(__name__)


class AnthropicClient:
    """
    Thin wrapper around ``POST /v1/messages``.

    The API key is supplied per call and never stored on the instance.
    """

    def __init__(
        self,
        api_url: str = "https://api.anthropic.com/v1/messages",
        api_version: str = "2023-06-01",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            api_url: Full Messages API endpoint URL.
            api_version: Value for the ``anthropic-version`` header.
            timeout: Request timeout in seconds. None disables it.
            transport: Optional httpx transport (used by tests).
        """
        self.api_url = api_url
        self.api_version = api_version
        self.timeout = timeout
        self._transport = transport

    def _headers(self, api_key: str) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "anthropic-version": self.api_version,
            "x-api-key": api_key,
        }

    async def create_message(self, api_key: str, body: dict[str, Any]) -> dict[str, Any]:
        """
        Send a Messages API request and return the decoded JSON envelope.

        Raises:
            UpstreamAPIError: If the API answers with a non-2xx status.
        """
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            response = await client.post(
                self.api_url,
                headers=self._headers(api_key),
                json=body,
            )

        if not response.is_success:
            message = _error_message(response)
            logger.error(
                "Anthropic API error: status=%d message=%s",
                response.status_code,
                message,
            )
            raise UpstreamAPIError(
                f"Anthropic API error: {message}",
                status_code=response.status_code,
            )

        return response.json()


def _error_message(response: httpx.Response) -> str:
    """Best-effort error message from an upstream failure response."""
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])

    return response.reason_phrase or "Unknown error"


def extract_text(envelope: dict[str, Any]) -> str:
    """
    Return the text of the first content block of a Messages API response.

    Raises:
        UpstreamResponseError: If the envelope has no text in its first block.
    """
    try:
        text = envelope["content"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise UpstreamResponseError(
            "Unexpected response format from Anthropic API"
        ) from e

    if not isinstance(text, str):
        raise UpstreamResponseError("Unexpected response format from Anthropic API")
    return text


def get_anthropic_client() -> AnthropicClient:
    """Build an Anthropic client from application settings."""
    settings = get_settings()
    return AnthropicClient(
        api_url=settings.anthropic_api_url,
        api_version=settings.anthropic_version,
        timeout=settings.upstream_timeout_seconds,
    )
