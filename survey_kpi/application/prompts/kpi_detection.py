"""
KPI detection prompts and structured output models.

Contains the input/output models for KPI detection and the prompt templates
that turn a batch of survey responses into an LLM request.
"""

import json
from typing import Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, Field


SurveyValue = Union[str, int, float, bool, None]
SurveyRecord = Dict[str, SurveyValue]


# ---------- INPUT / OUTPUT MODELS ----------
class DetectKpisInput(BaseModel):
    """A batch of survey responses to analyse."""

    records: List[SurveyRecord] = Field(
        ..., description="Array of survey responses; each response is an object."
    )
    language: Optional[str] = Field(
        default=None,
        description="Language of the survey data. Defaults to English (en).",
    )


class KpiDetectionResult(BaseModel):
    """Structured KPI detection answer returned by the LLM."""

    kpis: List[str] = Field(
        ..., description="List of identified key performance indicators."
    )
    explanation: str = Field(
        ..., description="Explanation of why these KPIs are important."
    )


def collect_columns(records: Sequence[SurveyRecord]) -> List[str]:
    """Column names across all records, in first-seen order."""
    seen: Dict[str, None] = {}
    for record in records:
        for column in record:
            seen.setdefault(column, None)
    return list(seen)


def numeric_columns(records: Sequence[SurveyRecord]) -> List[str]:
    """Columns holding at least one int/float value (booleans excluded)."""
    columns = []
    for column in collect_columns(records):
        if any(
            isinstance(record.get(column), (int, float))
            and not isinstance(record.get(column), bool)
            for record in records
        ):
            columns.append(column)
    return columns


# ---------- PROMPT TEMPLATES ----------
class KpiDetectionPrompts:
    """Centralized prompt templates for KPI detection."""

    @staticmethod
    def get_system_prompt() -> str:
        """System prompt for KPI detection."""
        return """
You are an expert data analyst specializing in survey data.

A KPI is a numerical data point which has the highest correlation to all the
other numerical data points. Consider only the numerical survey responses
when identifying KPIs.

Return only valid JSON matching the KpiDetectionResult schema.
"""

    @staticmethod
    def get_language_clause(language: Optional[str]) -> str:
        """Language note, empty when no language is given."""
        if not language:
            return ""
        return (
            f"\nNote: The survey data is in {language} language. "
            "Please consider language-specific nuances when identifying KPIs. "
            f"Column names and values may be in {language}.\n"
        )

    @staticmethod
    def serialize_records(records: Sequence[SurveyRecord]) -> str:
        return json.dumps(list(records), ensure_ascii=False, default=str)

    @classmethod
    def get_user_prompt(
        cls, records: Sequence[SurveyRecord], language: Optional[str] = None
    ) -> str:
        """Generate user prompt for KPI detection."""

        prompt = """
Analyze the provided survey data to identify the key performance indicators (KPIs).
Return a list of the names of the columns which have a numerical datatype, and are KPIs.
Only use column names that appear in the survey data.
Also explain the reasoning behind why these data points are KPIs.
"""

        prompt += cls.get_language_clause(language)
        prompt += f"\nSurvey Data: {cls.serialize_records(records)}\n"

        return prompt
