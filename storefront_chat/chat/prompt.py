from __future__ import annotations

from typing import Any

SYSTEM_PROMPT = (
    "You are a helpful assistant for Zava Storefront, an e-commerce platform. "
    "Help customers with questions about products, pricing, and general inquiries. "
    "Keep responses concise and helpful."
)

MAX_TOKENS = 800
TEMPERATURE = 0.7


def build_chat_completion_payload(*, message: str) -> dict[str, Any]:
    """Single-turn request body: fixed system instruction plus the user's message."""

    return {
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": message},
        ],
        "max_tokens": MAX_TOKENS,
        "temperature": TEMPERATURE,
    }
