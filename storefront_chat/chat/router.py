from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import FileResponse, JSONResponse

from storefront_chat.chat.schemas import ChatRequest, ChatResponse
from storefront_chat.chat.service import ChatService
from storefront_chat.core.llm.azure_openai_client import AzureOpenAIClient
from storefront_chat.core.llm.deps import get_azure_openai_client
from storefront_chat.domain.exceptions import EmptyMessageError

router = APIRouter(prefix="/chat", tags=["chat"])
logger = logging.getLogger("storefront_chat.chat")

_CHAT_PAGE = Path(__file__).resolve().parent.parent / "static" / "chat.html"


def get_chat_service(
    llm_client: AzureOpenAIClient | None = Depends(get_azure_openai_client),
) -> ChatService:
    return ChatService(llm_client=llm_client)


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None) or request.headers.get("X-Request-ID")


@router.get("", include_in_schema=False)
async def chat_index(request: Request) -> FileResponse:
    logger.info("Chat page accessed", extra={"request_id": _request_id(request)})
    return FileResponse(_CHAT_PAGE, media_type="text/html")


@router.post(
    "/send-message",
    response_model=ChatResponse,
    responses={400: {"model": ChatResponse, "description": "Empty message."}},
    summary="Send a chat message",
    description=(
        "Forward a single user message to the storefront assistant.\n\n"
        "Upstream and configuration failures are reported with HTTP 200 and "
        "`success=false`; only an empty message is rejected with HTTP 400."
    ),
)
async def send_message(
    request: Request,
    payload: ChatRequest | None = Body(default=None),
    chat_service: ChatService = Depends(get_chat_service),
) -> JSONResponse:
    message = payload.message if payload is not None else None
    if message is None or not message.strip():
        raise EmptyMessageError()

    # Length only; message content is never logged.
    logger.info(
        "Received chat message",
        extra={"request_id": _request_id(request), "message_length": len(message)},
    )

    result = await chat_service.complete(message)
    return JSONResponse(status_code=200, content=result.to_payload())
