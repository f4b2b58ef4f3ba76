"""Exception taxonomy for the plant assistant.

Distinguishes between failures of a single attempt (absorbed by the retry
loop) and the terminal failure reported to the caller once retries run out.
"""


class AssistantError(Exception):
    """Base class for assistant errors."""


class ConfigurationError(AssistantError):
    """The completion client cannot be built, e.g. no API key is configured."""


class TransientServiceError(AssistantError):
    """One attempt failed and SHOULD be retried.

    Examples: network error, timeout, non-2xx status, malformed or
    unexpected response body.  Never escapes RetryingCompletionClient.
    """


class ServiceUnavailable(AssistantError):
    """Every scheduled attempt failed.  The only error the client raises to callers."""

    DEFAULT_MESSAGE = "AI service unavailable, please try again later."

    def __init__(self, message: str = DEFAULT_MESSAGE, attempts: int = 0):
        super().__init__(message)
        self.attempts = attempts
