"""
Application layer - Use cases and LLM orchestration.

This package contains the KPI detection use case, its prompts and the ports
it needs from external systems.
"""

from .ports import LLMServicePort
from .prompts import DetectKpisInput, KpiDetectionResult
from .use_cases import DetectKpisUseCase, detect_kpis

__all__ = [
    "LLMServicePort",
    "DetectKpisInput",
    "KpiDetectionResult",
    "DetectKpisUseCase",
    "detect_kpis",
]
