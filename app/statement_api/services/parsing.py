"""
Recovery of the JSON result from free-form model output.

Models sometimes wrap the requested JSON in prose or formatting. The
greedy first-``{``-to-last-``}`` match tolerates that without trying to
repair the JSON itself.
"""

import json
import logging
import re
from typing import Any

from .exceptions import NoTransactionsError, ResponseParseError

logger = logging.getLogger(__name__)

# Greedy: spans from the first "{" to the last "}" across newlines
_JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_model_output(text: str) -> Any:
    """
    Parse the JSON document embedded in the model's text.

    If the text contains a ``{...}`` span, that span is parsed; otherwise
    the whole text is tried as JSON.

    Args:
        text: Raw text of the model's first content block.

    Returns:
        The decoded JSON value.

    Raises:
        ResponseParseError: If nothing parseable is found. Carries the
            original text for diagnosis.
    """
    match = _JSON_OBJECT_PATTERN.search(text)
    candidate = match.group(0) if match else text

    try:
        return json.loads(candidate, parse_constant=_reject_constant)
    except (json.JSONDecodeError, ValueError) as e:
        logger.error("Could not parse response: %s", text[:500])
        raise ResponseParseError(raw=text) from e


def require_transactions(parsed: Any) -> list[Any]:
    """
    Return the non-empty transaction list from a parsed result.

    Individual transactions are not inspected.

    Raises:
        NoTransactionsError: If ``transactions`` is missing, empty, or not a list.
    """
    transactions = parsed.get("transactions") if isinstance(parsed, dict) else None
    if not isinstance(transactions, list) or not transactions:
        raise NoTransactionsError()
    return transactions
