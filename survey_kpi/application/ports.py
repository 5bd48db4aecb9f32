"""
Application ports - abstract interfaces for external dependencies.

These interfaces define the contracts that the application layer needs
from external systems, following the Dependency Inversion Principle.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Type

from langchain_core.messages import BaseMessage
from pydantic import BaseModel


class LLMServicePort(ABC):
    """Abstract interface for LLM operations."""

    @abstractmethod
    def create_messages(
        self, user_prompt: str, system_prompt: Optional[str] = None
    ) -> List[BaseMessage]:
        """Build the message list for a single-turn request."""
        pass

    @abstractmethod
    async def invoke_with_retry(
        self,
        messages: List[BaseMessage],
        response_model: Type[BaseModel],
        max_attempts: int = 3,
        initial_delay: float = 2.0,
    ) -> Any:
        """Invoke the model for structured output, retrying on rate limits."""
        pass
