"""LLM infrastructure package."""

from .langchain_client import LangChainClient, is_rate_limit_error
from .mock_client import MockLLMClient

__all__ = [
    "LangChainClient",
    "MockLLMClient",
    "is_rate_limit_error",
]
