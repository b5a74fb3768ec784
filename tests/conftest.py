"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("ANTHROPIC_API_KEY", "test-key")

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_model_gateway
from src.app import app
from src.config.personas import DATING, TRADES
from src.config.settings import Settings
from src.infrastructure.llm.gateway import ModelGateway

from tests.sample_payloads import DATING_QUESTIONS, TRADES_QUESTIONS


@pytest.fixture
def settings():
    """Provide settings fixture."""
    return Settings(anthropic_api_key="test-key")


@pytest.fixture
def trades():
    return TRADES


@pytest.fixture
def dating():
    return DATING


@pytest.fixture
def trades_analysis():
    """A valid trades analysis payload."""
    return {
        "situation_type": "PLUMBING",
        "observations": ["a", "b"],
        "first_take": "x",
        "questions": [dict(q) for q in TRADES_QUESTIONS],
    }


@pytest.fixture
def dating_analysis():
    """A valid dating analysis payload."""
    return {
        "situation_type": "EARLY_TALKING",
        "observations": ["they reply fast", "plans keep slipping"],
        "first_take": "Hmm.",
        "questions": [{"q": q["q"], "options": list(q["options"])} for q in DATING_QUESTIONS],
    }


@pytest.fixture
def fake_gateway():
    """Gateway double; set ``complete.return_value`` or ``side_effect`` per test."""
    gateway = AsyncMock(spec=ModelGateway)
    return gateway


@pytest.fixture
def client(fake_gateway):
    """Test client with the model gateway replaced."""
    app.dependency_overrides[get_model_gateway] = lambda: fake_gateway
    yield TestClient(app)
    app.dependency_overrides.clear()
