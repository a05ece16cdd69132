"""Request bodies for the live panel and student endpoints."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from seiac.live_blocks import MAX_BLOCK_MINUTES


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Participant(_CamelModel):
    unique_code: str = Field(alias="uniqueCode")
    email: str


class SendMessageRequest(Participant):
    content: str
    ttl_ms: Optional[int] = Field(default=None, alias="ttlMs", ge=1)


class BroadcastRequest(_CamelModel):
    recipients: list[Participant] = Field(default_factory=list)
    content: str
    ttl_ms: Optional[int] = Field(default=None, alias="ttlMs", ge=1)


class BlockRequest(Participant):
    minutes: Optional[float] = Field(default=None, allow_inf_nan=False, le=MAX_BLOCK_MINUTES)


class AckRequest(Participant):
    id: str
