"""Integration test fixtures for the live completion endpoint.

Tests here call the real Gemini API and are skipped unless GEMINI_API_KEY is
set (environment or project .env).

Run with:  pytest tests_integration/ -v
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from cooling_ai.assistant.client import RetryingCompletionClient
from cooling_ai.assistant.config import get_api_key

PROJECT_ROOT = Path(__file__).parent.parent.resolve()

load_dotenv(PROJECT_ROOT / ".env")


@pytest.fixture(scope="session")
def live_client():
    """A real client with a short schedule so a dead endpoint fails fast."""
    if not get_api_key():
        pytest.skip("GEMINI_API_KEY not set")
    with RetryingCompletionClient.from_env(schedule=(1.0, 2.0)) as client:
        yield client
