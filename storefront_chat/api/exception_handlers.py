from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront_chat.chat.schemas import ChatResponse
from storefront_chat.core.middleware.route_labels import route_template
from storefront_chat.domain.exceptions import BusinessValidationError

logger = logging.getLogger("storefront_chat.business_validation")

# Routes whose callers expect every failure in the ChatResponse shape.
CHAT_RESPONSE_ROUTES = frozenset({"/chat/send-message"})
INVALID_CHAT_REQUEST_MESSAGE = "Request body must be a JSON object with a text 'message' field."


def _log_rejection(request: Request, *, error: str) -> None:
    # Do not log request bodies; customer messages stay out of logs.
    request_id = getattr(request.state, "request_id", None) or request.headers.get(
        "X-Request-ID"
    )
    logger.info(
        "Business validation failed",
        extra={
            "request_id": request_id,
            "http_method": request.method,
            "request_path": request.url.path,  # no query string
            "status_code": 400,
            "error": error,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register application exception handlers."""

    @app.exception_handler(BusinessValidationError)
    async def handle_business_validation_error(
        request: Request,
        exc: BusinessValidationError,
    ) -> JSONResponse:
        _log_rejection(request, error="business_validation")
        return JSONResponse(status_code=400, content=ChatResponse.failure(exc.message).to_payload())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        if route_template(request) not in CHAT_RESPONSE_ROUTES:
            return await request_validation_exception_handler(request, exc)

        _log_rejection(request, error="request_validation")
        return JSONResponse(
            status_code=400,
            content=ChatResponse.failure(INVALID_CHAT_REQUEST_MESSAGE).to_payload(),
        )
