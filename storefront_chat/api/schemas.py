from __future__ import annotations

from pydantic import BaseModel, Field


class HealthOut(BaseModel):
    """Liveness payload for load balancers."""

    status: str = Field(description="`ok` while the process is serving requests.", examples=["ok"])
    service: str = Field(description="Configured application name.", examples=["storefront-chat"])
