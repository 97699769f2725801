"""
Statement extraction pipeline.

build prompt -> call Anthropic -> recover JSON -> check transactions.
"""

import logging
from typing import Any

from ..models import StatementRequest
from .anthropic_client import AnthropicClient, extract_text
from .exceptions import MissingFieldsError
from .parsing import parse_model_output, require_transactions
from .prompt import build_messages_request

logger = logging.getLogger(__name__)


class StatementExtractor:
    """
    Runs one extraction per call. Holds configuration only, no request state.
    """

    def __init__(
        self,
        client: AnthropicClient,
        default_model: str = "claude-sonnet-4-20250514",
        max_tokens: int = 4000,
    ):
        self.client = client
        self.default_model = default_model
        self.max_tokens = max_tokens

    def resolve_model(self, requested: str | None) -> str:
        """Return the requested model, or the default when none was given."""
        return requested or self.default_model

    async def extract(self, payload: StatementRequest) -> dict[str, Any]:
        """
        Extract transactions from one statement.

        Args:
            payload: Validated request carrying the PDF and the caller's key.

        Returns:
            The parsed model output, unchanged.

        Raises:
            MissingFieldsError: If the PDF or API key is empty.
            UpstreamAPIError: If Anthropic answers with a failure status.
            UpstreamResponseError: If the success envelope has no text.
            ResponseParseError: If the text holds no parseable JSON.
            NoTransactionsError: If the JSON has no transactions.
        """
        if not payload.is_complete:
            raise MissingFieldsError()

        model = self.resolve_model(payload.model)
        logger.info("Processing bank statement with model: %s", model)

        body = build_messages_request(payload.pdf_base64, model, self.max_tokens)
        envelope = await self.client.create_message(payload.api_key, body)
        text = extract_text(envelope)
        logger.info("AI response received")

        parsed = parse_model_output(text)
        transactions = require_transactions(parsed)
        logger.info("Extracted %d transactions", len(transactions))

        return parsed
