"""
Services package for statement extraction.

Contains:
- prompt: Fixed extraction instruction and Messages API body
- anthropic_client: httpx client for Anthropic's Messages API
- parsing: JSON recovery from model output
- extraction: The end-to-end extraction pipeline
"""

from .anthropic_client import AnthropicClient
from .extraction import StatementExtractor

__all__ = ["AnthropicClient", "StatementExtractor"]
