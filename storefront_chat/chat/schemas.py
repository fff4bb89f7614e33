from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class ChatRequest(BaseModel):
    """Inbound chat message. Emptiness is checked by the router, not here."""

    message: str | None = Field(
        default=None,
        description="User message text. Must contain at least one non-whitespace character.",
        examples=["Do you ship to Canada?"],
    )


class ChatResponse(BaseModel):
    """
    Outcome of a single chat completion.

    Exactly one of `response` / `errorMessage` is set, selected by `success`.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    success: bool
    response: str | None = Field(default=None, description="Assistant reply (success only).")
    error_message: str | None = Field(
        default=None, description="Human-readable failure reason (failure only)."
    )

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> ChatResponse:
        if self.success:
            if not self.response or self.error_message is not None:
                raise ValueError("successful responses carry a response and no error_message")
        elif not self.error_message or self.response is not None:
            raise ValueError("failed responses carry an error_message and no response")
        return self

    @classmethod
    def ok(cls, response: str) -> ChatResponse:
        return cls(success=True, response=response)

    @classmethod
    def failure(cls, error_message: str) -> ChatResponse:
        return cls(success=False, error_message=error_message)

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)
