from __future__ import annotations

from fastapi import Request

from storefront_chat.core.llm.azure_openai_client import AzureOpenAIClient, AzureOpenAIConfig
from storefront_chat.core.settings import get_settings


def get_azure_openai_client(request: Request) -> AzureOpenAIClient | None:
    """
    Dependency provider for AzureOpenAIClient.

    Returns None when no endpoint is configured so the chat service can answer with
    its "not configured" response without touching the network.
    """

    settings = get_settings()
    if not settings.azure_ai_endpoint:
        return None

    config = AzureOpenAIConfig(
        endpoint=settings.azure_ai_endpoint,
        deployment_name=settings.azure_ai_deployment_name,
        tenant_id=settings.azure_tenant_id,
    )
    return AzureOpenAIClient(
        config=config,
        http_client=request.app.state.http_client,
        credential=request.app.state.azure_credential,
    )
