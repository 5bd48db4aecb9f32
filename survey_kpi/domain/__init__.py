"""
Domain layer - error taxonomy for KPI detection.
"""

from .exceptions import (
    DomainException,
    LLMException,
    OutputMissingError,
    RateLimitExhaustedError,
)

__all__ = [
    "DomainException",
    "LLMException",
    "OutputMissingError",
    "RateLimitExhaustedError",
]
