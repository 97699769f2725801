"""
Bank Statement Extraction API.

A FastAPI service that forwards PDF bank statements to Anthropic's
Messages API and returns the categorized business expenses as JSON.
"""

__version__ = "1.0.0"
