"""
Routers package for FastAPI endpoints.

- statements: Bank statement extraction endpoint
"""

from . import statements

__all__ = ["statements"]
