from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DEPLOYMENT_NAME = "gpt-4o"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    app_name: str = "storefront-chat"
    app_env: str = Field(
        default="production",
        validation_alias=AliasChoices("APP_ENV", "app_env"),
        description="Runtime environment: development|production.",
    )
    host: str = Field(
        default="0.0.0.0",
        validation_alias=AliasChoices("HOST", "host"),
        description="Interface the HTTP server binds to.",
    )
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("PORT", "port"),
        description="Port the HTTP server listens on.",
    )

    # Azure AI (Azure OpenAI deployment behind an Azure AI Foundry endpoint).
    # Each setting has an explicit configuration key and a platform env var;
    # the first non-blank one wins (see the properties below).
    azureai_endpoint: str | None = Field(
        default=None,
        validation_alias=AliasChoices("AZUREAI__ENDPOINT", "azureai_endpoint"),
        description="Azure AI endpoint URL (configuration key).",
    )
    azure_ai_foundry_endpoint: str | None = Field(
        default=None,
        validation_alias=AliasChoices("AZURE_AI_FOUNDRY_ENDPOINT", "azure_ai_foundry_endpoint"),
        description="Azure AI endpoint URL (platform env var, used when the key is unset).",
    )
    azure_ai_deployment_name: str = Field(
        default=DEFAULT_DEPLOYMENT_NAME,
        validation_alias=AliasChoices(
            "AZUREAI__DEPLOYMENTNAME",
            "azure_ai_deployment_name",
        ),
        description="Model deployment used for chat completions.",
    )
    azureai_tenant_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("AZUREAI__TENANTID", "azureai_tenant_id"),
        description="Entra ID tenant for token acquisition (configuration key).",
    )
    platform_tenant_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("AZURE_TENANT_ID", "platform_tenant_id"),
        description="Entra ID tenant (platform env var, used when the key is unset).",
    )

    @field_validator(
        "azureai_endpoint",
        "azure_ai_foundry_endpoint",
        "azureai_tenant_id",
        "platform_tenant_id",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("azure_ai_deployment_name", mode="before")
    @classmethod
    def _blank_to_default_deployment(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_DEPLOYMENT_NAME
        return value

    @property
    def azure_ai_endpoint(self) -> str | None:
        """Chat is disabled when this resolves to None."""
        return self.azureai_endpoint or self.azure_ai_foundry_endpoint

    @property
    def azure_tenant_id(self) -> str | None:
        return self.azureai_tenant_id or self.platform_tenant_id


@lru_cache
def get_settings() -> Settings:
    return Settings()
