from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from storefront_chat.chat.prompt import build_chat_completion_payload
from storefront_chat.chat.schemas import ChatResponse
from storefront_chat.core.metrics import chat_completions_total

logger = logging.getLogger("storefront_chat.chat_service")

NOT_CONFIGURED_MESSAGE = "Chat service is not configured. Please configure Azure AI settings."
GENERIC_ERROR_MESSAGE = "An error occurred while processing your request."
UPSTREAM_FAILURE_TEMPLATE = "Failed to get response from AI service. Status: {status_code}"
NO_RESPONSE_FALLBACK = "No response received."


class ChatCompletionClient(Protocol):
    async def create_chat_completion(self, payload: dict[str, Any]) -> httpx.Response: ...


def _extract_assistant_content(data: Any) -> str | None:
    """
    Return ``choices[0].message.content``.

    A missing choice or message, or non-string content, is a malformed body and
    raises; a missing, null or empty content field is reported as None.
    """

    message = data["choices"][0]["message"]
    content = message.get("content")
    if content is None or content == "":
        return None
    if not isinstance(content, str):
        raise TypeError(f"assistant content must be a string, got {type(content).__name__}")
    return content


class ChatService:
    """Turns one user message into one chat completion call and normalizes the outcome."""

    def __init__(self, *, llm_client: ChatCompletionClient | None):
        self._llm = llm_client

    async def complete(self, message: str) -> ChatResponse:
        # Never raises: every failure is folded into ChatResponse.
        if self._llm is None:
            logger.warning("Azure AI endpoint not configured")
            chat_completions_total.labels(outcome="not_configured").inc()
            return ChatResponse.failure(NOT_CONFIGURED_MESSAGE)

        try:
            payload = build_chat_completion_payload(message=message)
            resp = await self._llm.create_chat_completion(payload)

            if not resp.is_success:
                logger.error(
                    "Azure AI request failed",
                    extra={"status_code": resp.status_code, "upstream_error": resp.text},
                )
                chat_completions_total.labels(outcome="upstream_error").inc()
                return ChatResponse.failure(
                    UPSTREAM_FAILURE_TEMPLATE.format(status_code=resp.status_code)
                )

            content = _extract_assistant_content(resp.json())
        except Exception:  # noqa: BLE001 - network, auth and parsing failures share one outcome
            logger.exception("Error calling Azure AI service")
            chat_completions_total.labels(outcome="error").inc()
            return ChatResponse.failure(GENERIC_ERROR_MESSAGE)

        logger.info("Received successful response from Azure AI")
        chat_completions_total.labels(outcome="success").inc()
        return ChatResponse.ok(content or NO_RESPONSE_FALLBACK)
