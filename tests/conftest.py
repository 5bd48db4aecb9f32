"""
Pytest configuration and fixtures.
"""

import os

import pytest

# Set test environment
os.environ["OPENAI_API_KEY"] = "test-openai-key"
os.environ["LOG_FORMAT"] = "console"

from survey_kpi.infra.config.settings import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings from the environment for every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_records():
    """Two survey responses with one numeric and one text column."""
    return [
        {"age": 30, "satisfaction": "high"},
        {"age": 45, "satisfaction": "low"},
    ]


@pytest.fixture
def survey_records():
    """A wider survey batch with several numeric columns."""
    return [
        {
            "respondent": "r-001",
            "nps": 9,
            "csat": 4.5,
            "wait_minutes": 3,
            "would_return": True,
            "comment": None,
        },
        {
            "respondent": "r-002",
            "nps": 6,
            "csat": 3.0,
            "wait_minutes": 12,
            "would_return": False,
            "comment": "slow checkout",
        },
    ]
