"""Core utilities for the POS review service layer.

This module exports commonly used utilities for easy importing:
    from core import get_logger
"""

from core.exceptions import DomainError, NotFoundError, ValidationError
from core.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
