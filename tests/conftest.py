"""Pytest configuration and fixtures."""

import base64
import json
from typing import Any, Generator

import httpx
import pytest
from fastapi.testclient import TestClient

from app.statement_api.main import app
from app.statement_api.services.anthropic_client import (
    AnthropicClient,
    get_anthropic_client,
)

SAMPLE_TRANSACTIONS_TEXT = (
    '{"transactions":[{"date":"2026-02-15","merchant":"SYSCO FOODS",'
    '"amount":1234.56,"category":"Food & Supplies"}]}'
)


class StubUpstream:
    """
    Stand-in for the Anthropic Messages API.

    Records every request it receives and answers with a configurable
    status and body.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = None
        self.exception: Exception | None = None
        self.reply_with_text(SAMPLE_TRANSACTIONS_TEXT)

    def reply_with_text(self, text: str) -> None:
        """Answer with a successful envelope whose first block holds *text*."""
        self.status_code = 200
        self.body = {
            "id": "msg_test",
            "type": "message",
            "role": "assistant",
            "content": [{"type": "text", "text": text}],
            "stop_reason": "end_turn",
        }

    def reply_with_error(self, status_code: int, body: Any = None) -> None:
        """Answer with a failure status and optional JSON or raw body."""
        self.status_code = status_code
        self.body = body

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exception is not None:
            raise self.exception
        if self.body is None:
            return httpx.Response(self.status_code)
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_request_json(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def upstream() -> Generator[StubUpstream, None, None]:
    """Route the app's Anthropic calls to an in-memory stub."""
    stub = StubUpstream()
    app.dependency_overrides[get_anthropic_client] = lambda: AnthropicClient(
        transport=httpx.MockTransport(stub.handler)
    )
    yield stub
    app.dependency_overrides.pop(get_anthropic_client, None)


@pytest.fixture
def client(upstream: StubUpstream) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """
    Create a minimal valid PDF for testing.

    This is a minimal PDF structure that should be recognized as a valid PDF.
    """
    pdf_content = b"""%PDF-1.4
1 0 obj
<< /Type /Catalog /Pages 2 0 R >>
endobj
2 0 obj
<< /Type /Pages /Kids [3 0 R] /Count 1 >>
endobj
3 0 obj
<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R >>
endobj
4 0 obj
<< /Length 44 >>
stream
BT
/F1 12 Tf
100 700 Td
(Test) Tj
ET
endstream
endobj
xref
0 5
0000000000 65535 f
0000000009 00000 n
0000000058 00000 n
0000000115 00000 n
0000000214 00000 n
trailer
<< /Size 5 /Root 1 0 R >>
startxref
306
%%EOF"""
    return pdf_content


@pytest.fixture
def sample_pdf_base64(sample_pdf_bytes: bytes) -> str:
    """Base64 encoding of the minimal PDF."""
    return base64.b64encode(sample_pdf_bytes).decode("ascii")


@pytest.fixture
def statement_payload(sample_pdf_base64: str) -> dict[str, str]:
    """A complete extraction request body."""
    return {"pdfBase64": sample_pdf_base64, "apiKey": "sk-test"}
