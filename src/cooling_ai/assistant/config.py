"""Shared configuration for the plant assistant and its completion client."""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# Credentials and model selection (set in .env or the environment)
API_KEY_ENV = "GEMINI_API_KEY"
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash-preview-09-2025")
GEMINI_BASE_URL = os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta").rstrip("/")

# Per-attempt HTTP timeout; the retry schedule below is applied on top of it
REQUEST_TIMEOUT = float(os.getenv("GEMINI_TIMEOUT_SECONDS", "60"))

# Seconds to wait before each retry.  One immediate attempt plus one per entry.
BACKOFF_SCHEDULE: tuple[float, ...] = (1.0, 2.0, 4.0, 8.0, 16.0)


def get_api_key() -> str:
    """Return the Gemini API key from the environment ("" when unset)."""
    return os.getenv(API_KEY_ENV, "")


def generate_content_url(model: str = GEMINI_MODEL, base_url: str = GEMINI_BASE_URL) -> str:
    """Return the generateContent endpoint for *model* (API key is sent as a query param)."""
    return f"{base_url}/models/{model}:generateContent"
