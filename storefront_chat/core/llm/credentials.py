from __future__ import annotations

from azure.identity.aio import DefaultAzureCredential


def build_default_credential(*, tenant_id: str | None = None) -> DefaultAzureCredential:
    """
    Build the credential chain used to authenticate against Azure AI.

    Environment, workload/managed identity and Azure CLI credentials stay enabled;
    the VS Code credential is excluded so local development resolves through the CLI.
    When a tenant is configured, tokens are requested for it explicitly.
    """

    kwargs: dict[str, object] = {"exclude_visual_studio_code_credential": True}
    if tenant_id:
        kwargs["additionally_allowed_tenants"] = [tenant_id]
    return DefaultAzureCredential(**kwargs)
