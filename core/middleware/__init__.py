"""
Core middleware package
"""

from .token_header import TokenHeaderMiddleware

__all__ = ["TokenHeaderMiddleware"]
