"""
Application-layer prompts and LLM response models.

This module contains all domain-specific prompts and structured output definitions
for LLM interactions. These belong in the Application layer, not Infrastructure.
"""

from .kpi_detection import (
    DetectKpisInput,
    KpiDetectionPrompts,
    KpiDetectionResult,
    SurveyRecord,
    SurveyValue,
    collect_columns,
    numeric_columns,
)

__all__ = [
    "DetectKpisInput",
    "KpiDetectionPrompts",
    "KpiDetectionResult",
    "SurveyRecord",
    "SurveyValue",
    "collect_columns",
    "numeric_columns",
]
