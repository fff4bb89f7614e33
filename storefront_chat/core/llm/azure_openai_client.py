from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx
from azure.core.credentials_async import AsyncTokenCredential

logger = logging.getLogger("storefront_chat.llm")

AZURE_OPENAI_API_VERSION = "2024-02-15-preview"
COGNITIVE_SERVICES_SCOPE = "https://cognitiveservices.azure.com/.default"


@dataclass(frozen=True)
class AzureOpenAIConfig:
    endpoint: str
    deployment_name: str
    api_version: str = AZURE_OPENAI_API_VERSION
    scope: str = COGNITIVE_SERVICES_SCOPE
    tenant_id: str | None = None

    @property
    def chat_completions_url(self) -> str:
        return (
            f"{self.endpoint.rstrip('/')}/openai/deployments/{self.deployment_name}"
            f"/chat/completions?api-version={self.api_version}"
        )


class AzureOpenAIClient:
    """
    Transport for Azure OpenAI chat completions.

    Each call fetches a fresh bearer token and issues a single POST. The shared
    ``httpx.AsyncClient`` and credential carry no per-call state, so one instance
    may serve concurrent requests. Errors propagate to the caller untouched.
    """

    def __init__(
        self,
        *,
        config: AzureOpenAIConfig,
        http_client: httpx.AsyncClient,
        credential: AsyncTokenCredential,
    ):
        self._config = config
        self._http = http_client
        self._credential = credential

    async def _get_bearer_token(self) -> str:
        kwargs: dict[str, Any] = {}
        if self._config.tenant_id:
            kwargs["tenant_id"] = self._config.tenant_id
        access_token = await self._credential.get_token(self._config.scope, **kwargs)
        return access_token.token

    async def create_chat_completion(self, payload: dict[str, Any]) -> httpx.Response:
        token = await self._get_bearer_token()
        url = self._config.chat_completions_url
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

        logger.info("Sending request to Azure AI", extra={"upstream_url": url})
        return await self._http.post(url, headers=headers, json=payload)
