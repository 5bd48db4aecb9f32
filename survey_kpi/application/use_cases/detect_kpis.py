"""
Use Case: Detect KPIs

Sends a batch of survey responses to the LLM and asks which numeric columns
are key performance indicators. Structured output is parsed into
KpiDetectionResult; rate-limit retries are delegated to the LLM client.
"""

import time
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from survey_kpi.application.ports import LLMServicePort
from survey_kpi.application.prompts.kpi_detection import (
    DetectKpisInput,
    KpiDetectionPrompts,
    KpiDetectionResult,
    collect_columns,
)
from survey_kpi.domain.exceptions import OutputMissingError
from survey_kpi.infra.config.logging_config import (
    bind_context,
    clear_context,
    ensure_logging,
    get_logger,
)
from survey_kpi.infra.config.settings import Settings, get_settings


class DetectKpisUseCase:
    """
    Identify KPI columns in survey data using LLM structured output.

    The result is returned as produced by the model unless
    ``kpi_restrict_to_columns`` is enabled, in which case KPI names that do
    not occur in the records are dropped.
    """

    def __init__(
        self, llm_client: LLMServicePort, settings: Optional[Settings] = None
    ):
        self.llm_client = llm_client
        self.settings = settings or get_settings()
        self._log = get_logger("usecase.detect_kpis")

    async def execute(
        self, request: Union[DetectKpisInput, Dict[str, Any]]
    ) -> KpiDetectionResult:
        """
        Execute KPI detection.

        Args:
            request: DetectKpisInput, or a plain dict validated into one

        Returns:
            KpiDetectionResult with KPI column names and an explanation
        """
        if not isinstance(request, DetectKpisInput):
            request = DetectKpisInput.model_validate(request)

        bind_context(
            record_count=len(request.records),
            language=request.language or "unspecified",
        )
        start_time = time.time()
        self._log.info("usecase.detect_kpis.start")

        try:
            system_prompt = KpiDetectionPrompts.get_system_prompt()
            user_prompt = KpiDetectionPrompts.get_user_prompt(
                records=request.records, language=request.language
            )
            messages = self.llm_client.create_messages(user_prompt, system_prompt)

            try:
                output = await self.llm_client.invoke_with_retry(
                    messages=messages,
                    response_model=KpiDetectionResult,
                    max_attempts=self.settings.kpi_max_attempts,
                    initial_delay=self.settings.kpi_retry_initial_delay,
                )
                result = self._parse_output(output)
            except Exception as e:
                self._log.exception(
                    "usecase.detect_kpis.error",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise

            if self.settings.kpi_restrict_to_columns:
                result = self._restrict_to_columns(result, request)

            self._log.info(
                "usecase.detect_kpis.complete",
                kpis=result.kpis,
                duration=f"{time.time() - start_time:.2f}s",
            )
            return result
        finally:
            clear_context()

    @staticmethod
    def _parse_output(output: Any) -> KpiDetectionResult:
        if output is None:
            raise OutputMissingError()
        if isinstance(output, KpiDetectionResult):
            return output
        try:
            if isinstance(output, dict):
                return KpiDetectionResult.model_validate(output)
            return KpiDetectionResult.model_validate(output, from_attributes=True)
        except ValidationError as e:
            raise OutputMissingError(f"output does not match schema: {e}") from e

    def _restrict_to_columns(
        self, result: KpiDetectionResult, request: DetectKpisInput
    ) -> KpiDetectionResult:
        columns = set(collect_columns(request.records))
        unknown = [kpi for kpi in result.kpis if kpi not in columns]
        if not unknown:
            return result

        self._log.warning("usecase.detect_kpis.unknown_kpis_dropped", unknown=unknown)
        return result.model_copy(
            update={"kpis": [kpi for kpi in result.kpis if kpi in columns]}
        )


async def detect_kpis(
    request: Union[DetectKpisInput, Dict[str, Any]],
    llm_client: Optional[LLMServicePort] = None,
    settings: Optional[Settings] = None,
) -> KpiDetectionResult:
    """Detect KPIs, building a LangChain client from settings when none is given."""
    settings = settings or get_settings()
    ensure_logging(settings)
    if llm_client is None:
        from survey_kpi.infra.llm.langchain_client import LangChainClient

        llm_client = LangChainClient.from_settings(settings)

    return await DetectKpisUseCase(llm_client, settings).execute(request)
