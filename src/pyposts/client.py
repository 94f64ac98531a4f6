"""Async client for the posts REST resource."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from pyposts._api import posts as _posts_api
from pyposts._transport import JsonTransport
from pyposts.config import PostsConfig
from pyposts.exceptions import PostsError
from pyposts.models.post import Post
from pyposts.models.requests import CreatePostRequest, UpdatePostRequest

_logger = logging.getLogger(__name__)


class PostsClient:
    """Async client for the posts API.

    Every method performs exactly one HTTP call and raises a
    :class:`~pyposts.exceptions.PostsError` subclass on failure.

    Usage::

        async with PostsClient(config) as client:
            posts = await client.list_posts()
    """

    def __init__(
        self,
        config: PostsConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config or PostsConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: JsonTransport | None = None

    @property
    def config(self) -> PostsConfig:
        return self._config

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def open(self) -> None:
        """Create the HTTP session (unless one was supplied) and the transport."""
        if self._transport is not None:
            return
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = JsonTransport(self._config, self._http_session)

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    async def __aenter__(self) -> PostsClient:
        await self.open()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    def _require_transport(self) -> JsonTransport:
        if self._transport is None:
            raise PostsError("Client not initialized. Use 'async with PostsClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def list_posts(self) -> list[Post]:
        """Fetch the whole collection."""
        return await _posts_api.list_posts(self._config, self._require_transport())

    async def create_post(self, title: str, body: str) -> Post:
        """Create a post owned by the default user."""
        request = CreatePostRequest(title=title, body=body)
        post = await _posts_api.create_post(self._config, self._require_transport(), request)
        _logger.debug("Created post %s", post.id)
        return post

    async def update_post(self, post: Post, title: str, body: str) -> Post:
        """Replace *post*'s title and body, keeping its id and owner."""
        request = UpdatePostRequest(id=post.id, title=title, body=body, user_id=post.user_id)
        return await _posts_api.update_post(self._config, self._require_transport(), request)

    async def delete_post(self, post: Post) -> None:
        """Delete *post* on the server."""
        await _posts_api.delete_post(self._config, self._require_transport(), post.id)
