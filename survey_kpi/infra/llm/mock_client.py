"""
Mock LLM client for testing purposes.
"""

import json
from typing import Any, Dict, List, Optional, Type

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from pydantic import BaseModel

from survey_kpi.application.ports import LLMServicePort
from survey_kpi.application.prompts.kpi_detection import (
    KpiDetectionResult,
    numeric_columns,
)

_DATA_MARKER = "Survey Data:"


class MockLLMClient(LLMServicePort):
    """Mock LLM client that returns fake KPI detection responses."""

    def __init__(self, result: Optional[Any] = None) -> None:
        self.result = result
        self.calls: List[List[BaseMessage]] = []

    def create_messages(
        self, user_prompt: str, system_prompt: Optional[str] = None
    ) -> List[BaseMessage]:
        messages: List[BaseMessage] = []
        if system_prompt:
            messages.append(SystemMessage(content=system_prompt))
        messages.append(HumanMessage(content=user_prompt))
        return messages

    async def invoke_with_retry(
        self,
        messages: List[BaseMessage],
        response_model: Type[BaseModel],
        max_attempts: int = 3,
        initial_delay: float = 2.0,
    ) -> Any:
        """Return the configured result, or guess KPIs from the prompt."""
        self.calls.append(messages)
        if self.result is not None:
            return self.result

        records = self._records_from_messages(messages)
        kpis = numeric_columns(records)
        return KpiDetectionResult(
            kpis=kpis,
            explanation=f"Mock analysis: numeric columns {', '.join(kpis) or 'none'}.",
        )

    @staticmethod
    def _records_from_messages(messages: List[BaseMessage]) -> List[Dict[str, Any]]:
        for message in reversed(messages):
            # Serialized records never contain a raw newline, so they are
            # always the final line of the prompt
            last_line = str(message.content).rstrip().rsplit("\n", 1)[-1]
            if last_line.startswith(_DATA_MARKER):
                return json.loads(last_line[len(_DATA_MARKER) :])
        return []
