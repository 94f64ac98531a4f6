"""Change notifications published by the store."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from pyposts.models.error import ErrorMessage, Operation
from pyposts.models.post import Post


class StateSection(StrEnum):
    POSTS = "posts"
    ERROR = "error"


class StoreChange(BaseModel):
    """A snapshot of the store taken right after one state change."""

    model_config = ConfigDict(frozen=True)

    section: StateSection
    operation: Operation
    posts: tuple[Post, ...] = ()
    error: ErrorMessage | None = None
    observed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
