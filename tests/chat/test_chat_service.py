from __future__ import annotations

import asyncio
from typing import Any

import httpx
import pytest

from storefront_chat.chat.prompt import SYSTEM_PROMPT, build_chat_completion_payload
from storefront_chat.chat.schemas import ChatResponse
from storefront_chat.chat.service import (
    GENERIC_ERROR_MESSAGE,
    NO_RESPONSE_FALLBACK,
    NOT_CONFIGURED_MESSAGE,
    ChatService,
)
from storefront_chat.core.llm.azure_openai_client import AzureOpenAIClient, AzureOpenAIConfig
from tests.chat._fakes import TEST_ENDPOINT, FakeCredential, RecordingUpstream, completion_body


def _complete(upstream: RecordingUpstream, message: str = "Hi") -> ChatResponse:
    async def run() -> ChatResponse:
        async with httpx.AsyncClient(transport=upstream.transport) as http:
            llm = AzureOpenAIClient(
                config=AzureOpenAIConfig(endpoint=TEST_ENDPOINT, deployment_name="gpt-4o"),
                http_client=http,
                credential=FakeCredential(),
            )
            return await ChatService(llm_client=llm).complete(message)

    return asyncio.run(run())


def test_not_configured_short_circuits() -> None:
    result = asyncio.run(ChatService(llm_client=None).complete("Hi"))
    assert result == ChatResponse.failure(NOT_CONFIGURED_MESSAGE)


def test_success_maps_first_choice_content() -> None:
    result = _complete(RecordingUpstream(body=completion_body("Hello")))
    assert result.success is True
    assert result.response == "Hello"
    assert result.error_message is None


@pytest.mark.parametrize("content", [None, ""])
def test_null_or_empty_content_uses_fallback(content: Any) -> None:
    result = _complete(RecordingUpstream(body=completion_body(content)))
    assert result == ChatResponse.ok(NO_RESPONSE_FALLBACK)


@pytest.mark.parametrize("status_code", [400, 401, 404, 429, 500, 503])
def test_non_success_status_is_reported(status_code: int) -> None:
    result = _complete(RecordingUpstream(status_code=status_code, body="upstream says no"))
    assert result.success is False
    assert result.response is None
    assert result.error_message == f"Failed to get response from AI service. Status: {status_code}"


@pytest.mark.parametrize(
    "body",
    [
        "not json at all",
        {"choices": []},
        {"choices": [{"index": 0}]},
        {"unexpected": True},
        completion_body(42),
        completion_body(["parts"]),
        completion_body({"text": "Hello"}),
    ],
)
def test_malformed_success_body_returns_generic_error(body: Any) -> None:
    result = _complete(RecordingUpstream(body=body))
    assert result == ChatResponse.failure(GENERIC_ERROR_MESSAGE)


def test_timeout_returns_generic_error() -> None:
    result = _complete(RecordingUpstream(exc=httpx.ReadTimeout("timed out")))
    assert result == ChatResponse.failure(GENERIC_ERROR_MESSAGE)


def test_payload_is_single_turn_with_fixed_parameters() -> None:
    payload = build_chat_completion_payload(message="Where is my order?")
    assert payload == {
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": "Where is my order?"},
        ],
        "max_tokens": 800,
        "temperature": 0.7,
    }
    assert "Zava Storefront" in SYSTEM_PROMPT


def test_each_call_fetches_a_fresh_token() -> None:
    upstream = RecordingUpstream(body=completion_body("ok"))
    credential = FakeCredential()

    async def run() -> None:
        async with httpx.AsyncClient(transport=upstream.transport) as http:
            llm = AzureOpenAIClient(
                config=AzureOpenAIConfig(endpoint=TEST_ENDPOINT, deployment_name="gpt-4o"),
                http_client=http,
                credential=credential,
            )
            service = ChatService(llm_client=llm)
            await asyncio.gather(service.complete("one"), service.complete("two"))

    asyncio.run(run())
    assert len(credential.calls) == 2
    assert len(upstream.requests) == 2
    assert sorted(upstream.sent_json(i)["messages"][1]["content"] for i in range(2)) == [
        "one",
        "two",
    ]
