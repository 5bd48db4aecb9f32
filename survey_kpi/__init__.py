"""Survey KPI detection backed by an LLM structured-output call."""

from survey_kpi.application import (
    DetectKpisInput,
    DetectKpisUseCase,
    KpiDetectionResult,
    detect_kpis,
)
from survey_kpi.domain.exceptions import (
    LLMException,
    OutputMissingError,
    RateLimitExhaustedError,
)

__version__ = "0.1.0"

__all__ = [
    "DetectKpisInput",
    "DetectKpisUseCase",
    "KpiDetectionResult",
    "detect_kpis",
    "LLMException",
    "OutputMissingError",
    "RateLimitExhaustedError",
]
