"""Append-only conversation with single-flight submission.

At most one completion request is outstanding per conversation.  send()
refuses new input while ``awaiting_response`` is set, and the flag is always
cleared once the request ends, whether it produced a reply or a
ServiceUnavailable notice.
"""

import logging
from typing import Any, Callable, Literal

from pydantic import BaseModel, ConfigDict, field_validator

from cooling_ai.assistant.client import RetryingCompletionClient
from cooling_ai.assistant.exceptions import ServiceUnavailable
from cooling_ai.assistant.prompts import build_system_instruction
from cooling_ai.markup.inline import strip_markdown
from cooling_ai.markup.render import render_document
from cooling_ai.markup.schema import RenderedUnit

logger = logging.getLogger(__name__)


class ChartAttachment(BaseModel):
    """Opaque chart payload shown beside an assistant reply."""

    model_config = ConfigDict(frozen=True)

    chart_type: str
    title: str = ""
    points: tuple[dict[str, Any], ...] = ()

    @field_validator("title")
    @classmethod
    def plain_title(cls, value: str) -> str:
        """Chart labels are drawn as plain text, so drop any markup."""
        return strip_markdown(value)


class ConversationMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    text: str
    chart: ChartAttachment | None = None


def render_message(message: ConversationMessage) -> list[RenderedUnit]:
    """Render a message's text.  Safe to call any number of times."""
    return render_document(message.text)


class Conversation:
    """Ordered user/assistant exchange backed by a completion client."""

    def __init__(
        self,
        client: RetryingCompletionClient,
        system_instruction: Callable[[], str] = build_system_instruction,
        chart_provider: Callable[[], ChartAttachment | None] | None = None,
        greeting: str | None = None,
    ):
        self._client = client
        self._system_instruction = system_instruction
        self._chart_provider = chart_provider
        self._messages: list[ConversationMessage] = []
        self.awaiting_response = False
        if greeting:
            self._messages.append(ConversationMessage(role="assistant", text=greeting, chart=self._chart()))

    @property
    def messages(self) -> tuple[ConversationMessage, ...]:
        return tuple(self._messages)

    def _chart(self) -> ChartAttachment | None:
        return self._chart_provider() if self._chart_provider is not None else None

    def send(self, text: str) -> ConversationMessage | None:
        """Submit user text and append the assistant's answer.

        Returns the appended assistant message, or None when the submission
        was refused (blank input, or a request already in flight).
        """
        user_text = text.strip()
        if not user_text or self.awaiting_response:
            logger.debug("Submission refused (blank=%s, awaiting=%s)", not user_text, self.awaiting_response)
            return None

        self._messages.append(ConversationMessage(role="user", text=user_text))
        self.awaiting_response = True
        try:
            reply_text = self._client.complete(user_text, self._system_instruction())
            reply = ConversationMessage(role="assistant", text=reply_text, chart=self._chart())
        except ServiceUnavailable as exc:
            logger.error("Assistant reply replaced by error notice: %s", exc)
            reply = ConversationMessage(role="assistant", text=f"Communication error: {exc}")
        finally:
            self.awaiting_response = False

        self._messages.append(reply)
        return reply
