"""Error slot model published by the store."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class Operation(StrEnum):
    FETCH = "fetch"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    DISMISS = "dismiss"


class ErrorMessage(BaseModel):
    """The most recent unrecovered failure.

    ``id`` is a fresh token for every error, so two failures with the
    same text are still distinct notifications.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    message: str
    operation: Operation
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
