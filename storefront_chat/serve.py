from __future__ import annotations

import uvicorn

from storefront_chat.core.settings import get_settings


def main() -> None:
    """Run the API with uvicorn using the configured host and port."""

    settings = get_settings()
    uvicorn.run(
        "storefront_chat.main:app",
        host=settings.host,
        port=settings.port,
        # Logging is configured by storefront_chat.core.logging; keep uvicorn's on the root handler.
        log_config=None,
    )


if __name__ == "__main__":
    main()
