"""
Pure infrastructure LLM client for LangChain integration.

This client provides message construction, structured invocation and the
rate-limit retry loop. Prompts and output models live in the Use Case layer.
"""

import asyncio
from typing import Any, List, Optional, Type, TypeVar

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI
from pydantic import BaseModel

from survey_kpi.application.ports import LLMServicePort
from survey_kpi.domain.exceptions import LLMException, RateLimitExhaustedError
from survey_kpi.infra.config.logging_config import get_logger
from survey_kpi.infra.config.settings import Settings, get_settings

T = TypeVar("T", bound=BaseModel)

RATE_LIMIT_STATUS = 429
RATE_LIMIT_MESSAGE = "429 Too Many Requests"


def is_rate_limit_error(error: BaseException) -> bool:
    """
    Decide whether an exception raised by the provider means HTTP 429.

    Checks a structured status code first (``status_code`` on the exception,
    as on ``openai.RateLimitError``, or on its ``response``) and only then
    falls back to the message text.
    """
    status = getattr(error, "status_code", None)
    if status is None:
        status = getattr(getattr(error, "response", None), "status_code", None)
    if status is not None:
        return status == RATE_LIMIT_STATUS
    return RATE_LIMIT_MESSAGE in str(error)


class LangChainClient(LLMServicePort):
    """
    Infrastructure-layer LLM client built on ``ChatOpenAI``.

    No domain knowledge or prompts should be included here.
    """

    def __init__(
        self,
        model_name: str = "gpt-4o-mini",
        temperature: float = 0.3,
        max_tokens: int = 4000,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        **kwargs,
    ):
        """Initialize LangChain client with LLM configuration."""
        llm_kwargs = {
            "model": model_name,
            "temperature": temperature,
            "max_tokens": max_tokens,
            # Rate-limit retries are handled by invoke_with_retry
            "max_retries": 0,
            **kwargs,
        }

        if api_key:
            llm_kwargs["api_key"] = api_key

        # Add base_url if provided (for OpenAI-compatible servers)
        if base_url:
            llm_kwargs["base_url"] = base_url

        self.llm = ChatOpenAI(**llm_kwargs)
        self._log = get_logger("infra.llm")

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "LangChainClient":
        """Build a client from application settings."""
        settings = settings or get_settings()
        if not settings.openai_api_key:
            raise LLMException("OpenAI API key not configured")

        try:
            client = cls(
                model_name=settings.openai_model,
                temperature=settings.llm_temperature,
                max_tokens=settings.llm_max_tokens,
                api_key=settings.openai_api_key,
                base_url=settings.openai_base_url,
                timeout=settings.openai_timeout,
            )
        except Exception as e:
            raise LLMException(f"LLM client initialization failed: {e}") from e

        client._log.info("llm.client.initialized", model=settings.openai_model)
        return client

    def create_messages(
        self, user_prompt: str, system_prompt: Optional[str] = None
    ) -> List[BaseMessage]:
        """
        Create message list for a single-turn request.

        Args:
            user_prompt: User's input message
            system_prompt: Optional system message

        Returns:
            List of BaseMessage objects ready for LLM invocation
        """
        messages: List[BaseMessage] = []

        if system_prompt:
            messages.append(SystemMessage(content=system_prompt))

        messages.append(HumanMessage(content=user_prompt))

        return messages

    async def invoke_structured(
        self, messages: List[BaseMessage], response_model: Type[T]
    ) -> Optional[T]:
        """
        Invoke LLM with structured output using Pydantic model.

        Args:
            messages: List of LangChain message objects
            response_model: Pydantic model class for structured output

        Returns:
            Parsed Pydantic model instance, or None if the model produced nothing
        """
        structured_llm = self.llm.with_structured_output(response_model)
        response = await structured_llm.ainvoke(messages)
        self._log.info("llm.invoke.structured", model=response_model.__name__)
        return response

    async def invoke_with_retry(
        self,
        messages: List[BaseMessage],
        response_model: Type[T],
        max_attempts: int = 3,
        initial_delay: float = 2.0,
    ) -> Any:
        """
        Invoke LLM with exponential backoff on rate-limit errors.

        Only HTTP 429 failures are retried; the delay starts at
        ``initial_delay`` seconds and doubles after every rate-limited
        attempt. Any other exception is re-raised untouched on the spot.

        Raises:
            RateLimitExhaustedError: every attempt was rate limited
        """
        delay = initial_delay
        attempt = 0

        while attempt < max_attempts:
            try:
                return await self.invoke_structured(messages, response_model)
            except Exception as e:
                if not is_rate_limit_error(e):
                    raise

                self._log.warning(
                    "llm.rate_limited",
                    attempt=attempt + 1,
                    max_attempts=max_attempts,
                    delay=delay,
                    message=f"Rate limit exceeded. Retrying in {delay:g} seconds...",
                )
                await asyncio.sleep(delay)
                delay *= 2
                attempt += 1

        self._log.error("llm.invoke.rate_limit_exhausted", attempts=max_attempts)
        raise RateLimitExhaustedError(max_attempts)

    def get_model_info(self) -> dict:
        """Get information about the current LLM configuration."""
        return {
            "model_name": self.llm.model_name,
            "temperature": self.llm.temperature,
            "max_tokens": self.llm.max_tokens,
        }
