"""Gemini completion client with a fixed exponential backoff schedule.

One immediate attempt is followed by one retry per entry of the schedule,
each preceded by a plain wait of that many seconds (no jitter).  Every failed
attempt is a TransientServiceError handled inside complete(); only the final
ServiceUnavailable reaches the caller.

The HTTP client and the sleep function are injected so the retry loop can be
driven by ``httpx.MockTransport`` and a fake clock.
"""

import logging
import time
from typing import Callable, Iterator, NamedTuple, Sequence

import httpx

from cooling_ai.assistant.config import BACKOFF_SCHEDULE, GEMINI_BASE_URL, GEMINI_MODEL, REQUEST_TIMEOUT, generate_content_url, get_api_key
from cooling_ai.assistant.exceptions import ConfigurationError, ServiceUnavailable, TransientServiceError

logger = logging.getLogger(__name__)


class RetryAttempt(NamedTuple):
    """One scheduled attempt: its index and the wait (seconds) that precedes it."""

    attempt_index: int
    delay: float


def iter_attempts(schedule: Sequence[float]) -> Iterator[RetryAttempt]:
    """Yield the immediate first attempt, then one attempt per scheduled delay."""
    yield RetryAttempt(0, 0.0)
    for i, delay in enumerate(schedule):
        yield RetryAttempt(i + 1, float(delay))


def build_payload(prompt: str, system_instruction: str) -> dict:
    """Build the generateContent request body."""
    return {
        "contents": [{"parts": [{"text": prompt}]}],
        "systemInstruction": {"parts": [{"text": system_instruction}]},
    }


def extract_text(body: object) -> str:
    """Return ``candidates[0].content.parts[0].text`` or raise TransientServiceError."""
    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]  # type: ignore[index]
    except (KeyError, IndexError, TypeError) as exc:
        raise TransientServiceError(f"Response has no candidate text: {exc!r}") from exc
    if not isinstance(text, str):
        raise TransientServiceError(f"Candidate text is {type(text).__name__}, expected str")
    return text


class RetryingCompletionClient:
    """Call the text-generation endpoint, retrying on a fixed schedule.

    Attempts are strictly sequential; there is no cancellation and no timeout
    shorter than the full schedule.
    """

    def __init__(
        self,
        api_key: str,
        model: str = GEMINI_MODEL,
        *,
        base_url: str = GEMINI_BASE_URL,
        schedule: Sequence[float] = BACKOFF_SCHEDULE,
        http_client: httpx.Client | None = None,
        sleep: Callable[[float], None] = time.sleep,
        timeout: float = REQUEST_TIMEOUT,
    ):
        if not api_key:
            raise ConfigurationError("Gemini API key not configured. Set GEMINI_API_KEY or pass api_key.")
        self.model = model
        self.url = generate_content_url(model, base_url)
        self.schedule = tuple(float(d) for d in schedule)
        self._api_key = api_key
        self._sleep = sleep
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(timeout=timeout)

    @classmethod
    def from_env(cls, **kwargs) -> "RetryingCompletionClient":
        """Build a client from GEMINI_API_KEY / GEMINI_MODEL configuration."""
        return cls(get_api_key(), **kwargs)

    @property
    def max_attempts(self) -> int:
        return len(self.schedule) + 1

    def _attempt(self, payload: dict) -> str:
        """Send one request.  Every failure mode is a TransientServiceError."""
        try:
            response = self._http.post(self.url, params={"key": self._api_key}, json=payload)
        except httpx.HTTPError as exc:
            raise TransientServiceError(f"Network error: {exc}") from exc

        if not response.is_success:
            raise TransientServiceError(f"API Error: {response.status_code}")

        try:
            body = response.json()
        except ValueError as exc:
            raise TransientServiceError("Malformed JSON in response") from exc
        return extract_text(body)

    def complete(self, prompt: str, system_instruction: str) -> str:
        """Return the generated text, or raise ServiceUnavailable once the schedule is exhausted."""
        payload = build_payload(prompt, system_instruction)
        last_error: TransientServiceError | None = None

        for attempt in iter_attempts(self.schedule):
            if attempt.attempt_index:
                logger.warning(
                    "Completion attempt %d/%d failed (%s) -- retrying in %.0fs",
                    attempt.attempt_index,
                    self.max_attempts,
                    last_error,
                    attempt.delay,
                )
                self._sleep(attempt.delay)

            t0 = time.time()
            try:
                text = self._attempt(payload)
            except TransientServiceError as exc:
                last_error = exc
                continue

            logger.info("Completion succeeded on attempt %d/%d in %.1fs", attempt.attempt_index + 1, self.max_attempts, time.time() - t0)
            return text

        logger.error("Completion failed after %d attempts: %s", self.max_attempts, last_error)
        raise ServiceUnavailable(attempts=self.max_attempts) from last_error

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "RetryingCompletionClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
