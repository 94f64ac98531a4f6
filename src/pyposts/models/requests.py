"""Pydantic request bodies for the write endpoints.

These models are validated before any request is sent, so a bad
argument raises :class:`pydantic.ValidationError` at the call site
instead of reaching the server.
"""

from __future__ import annotations

from pydantic import ConfigDict

from pyposts._constants import DEFAULT_USER_ID
from pyposts.models._base import PostsBaseModel


class CreatePostRequest(PostsBaseModel):
    """Body of ``POST {base_url}``. The server assigns the id."""

    model_config = ConfigDict(extra="forbid")

    title: str
    body: str
    user_id: int = DEFAULT_USER_ID


class UpdatePostRequest(CreatePostRequest):
    """Body of ``PUT {base_url}/{id}``."""

    id: int
