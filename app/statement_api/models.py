"""
Pydantic models for the statement extraction endpoint.

The transaction models describe what the upstream model is asked to
return. They document the API surface; the handler relays the model's
output verbatim and never coerces it through these types.
"""

import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from . import __version__


class TransactionCategory(str, Enum):
    """Expense categories offered to the model, in prompt order."""

    FOOD_AND_SUPPLIES = "Food & Supplies"
    BEVERAGE = "Beverage"
    UTILITIES = "Utilities"
    RENT = "Rent"
    PAYROLL = "Payroll"
    EQUIPMENT = "Equipment"
    MARKETING = "Marketing"
    MAINTENANCE_AND_REPAIRS = "Maintenance & Repairs"
    INSURANCE = "Insurance"
    LICENSES_AND_PERMITS = "Licenses & Permits"
    PROFESSIONAL_SERVICES = "Professional Services"
    OFFICE_SUPPLIES = "Office Supplies"
    SALES_TAX = "Sales Tax"
    PAYROLL_TAXES = "Payroll Taxes"
    OTHER_TAXES = "Other Taxes"
    BANK_FEES = "Bank Fees"
    CREDIT_CARD_FEES = "Credit Card Fees"
    TRANSACTION_FEES = "Transaction Fees"
    OTHER = "Other"


class StatementRequest(BaseModel):
    """
    Inbound extraction request.

    Fields are optional at the model level so that a missing value is
    reported as a 400 with the endpoint's own message rather than a
    FastAPI validation error.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    pdf_base64: str | None = Field(
        default=None,
        alias="pdfBase64",
        description="Base64-encoded PDF bank statement",
    )
    api_key: str | None = Field(
        default=None,
        alias="apiKey",
        description="Anthropic API key, forwarded verbatim",
    )
    model: str | None = Field(
        default=None,
        description="Anthropic model identifier",
        examples=["claude-sonnet-4-20250514"],
    )

    @property
    def is_complete(self) -> bool:
        """True when both the document and the API key are non-empty."""
        return bool(self.pdf_base64) and bool(self.api_key)


class Transaction(BaseModel):
    """
    A single business expense extracted from a statement.

    Attributes:
        date: Transaction date (YYYY-MM-DD).
        merchant: Description or merchant name as printed.
        amount: Positive amount without currency symbols.
        category: One of the fixed expense categories.
    """

    date: datetime.date = Field(..., examples=["2026-02-15"])
    merchant: str = Field(..., examples=["SYSCO FOODS"])
    amount: float = Field(..., ge=0, examples=[1234.56])
    category: TransactionCategory = Field(..., examples=["Food & Supplies"])


class StatementResponse(BaseModel):
    """Successful extraction result."""

    transactions: list[Transaction] = Field(
        ...,
        min_length=1,
        description="Transactions in the order returned by the model",
    )


class ErrorResponse(BaseModel):
    """Error body returned on every failure."""

    error: str = Field(..., description="Human-readable error message")
    raw: str | None = Field(
        default=None,
        description="Unparsed model output, present only on parse failures",
    )


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="healthy")
    version: str = Field(default=__version__)
