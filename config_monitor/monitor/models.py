"""Pydantic models for monitor notifications and refresh broadcasts."""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, Field


class PathNotification(BaseModel):
    """Changed file paths extracted from one webhook call."""

    paths: list[str] = Field(default_factory=list)


class RefreshEvent(BaseModel):
    """Remote refresh signal for one service identifier (`name`, `name:profile`, `*`, `*:profile`)."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    origin_service: str
    destination_service: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}
