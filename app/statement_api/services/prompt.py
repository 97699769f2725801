"""
Extraction instruction and Messages API request construction.

The instruction is fixed: every request sends the same text, so the
category taxonomy and output contract cannot be changed by callers.
"""

from typing import Any

from ..models import TransactionCategory

PDF_MEDIA_TYPE = "application/pdf"


# =============================================================================
# Extraction Prompt
# =============================================================================

_PROMPT_TEMPLATE = """You are analyzing a bank statement PDF. Extract ALL transactions and categorize them for a restaurant business.

Extract each transaction with:
1. Date (YYYY-MM-DD format)
2. Description/Merchant
3. Amount (positive number, no currency symbols)
4. Suggested Category (from the list below)

CATEGORIES (choose most appropriate):
{categories}

IMPORTANT:
- Skip: payments to credit cards, transfers between accounts, deposits
- Only include: actual business expenses (purchases, bills, fees)
- If unsure about category, use "{fallback}"

Return ONLY valid JSON (no markdown, no backticks):
{{
  "transactions": [
    {{
      "date": "2026-02-15",
      "merchant": "SYSCO FOODS",
      "amount": 1234.56,
      "category": "Food & Supplies"
    }}
  ]
}}"""


def build_extraction_prompt() -> str:
    """Render the extraction instruction with the category taxonomy."""
    categories = "\n".join(f"- {category.value}" for category in TransactionCategory)
    return _PROMPT_TEMPLATE.format(
        categories=categories,
        fallback=TransactionCategory.OTHER.value,
    )


EXTRACTION_PROMPT = build_extraction_prompt()


# =============================================================================
# Request Body
# =============================================================================


def build_messages_request(
    pdf_base64: str,
    model: str,
    max_tokens: int = 4000,
) -> dict[str, Any]:
    """
    Build the Messages API body for one statement.

    The PDF goes first as a document block, followed by the instruction
    as a text block, in a single user message.

    Args:
        pdf_base64: Base64-encoded PDF, passed through untouched.
        model: Anthropic model identifier.
        max_tokens: Upper bound on the model's output tokens.

    Returns:
        JSON-serializable request body.
    """
    return {
        "model": model,
        "max_tokens": max_tokens,
        "messages": [
            {
                "role": "user",
                "content": [
                    {
                        "type": "document",
                        "source": {
                            "type": "base64",
                            "media_type": PDF_MEDIA_TYPE,
                            "data": pdf_base64,
                        },
                    },
                    {
                        "type": "text",
                        "text": EXTRACTION_PROMPT,
                    },
                ],
            }
        ],
    }
