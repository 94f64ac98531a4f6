"""Posts collection endpoints: list, create, update, delete."""

from __future__ import annotations

from pyposts._api._common import collection_url, decode_post, decode_posts, item_url
from pyposts._transport import Transport
from pyposts.config import PostsConfig
from pyposts.models.post import Post
from pyposts.models.requests import CreatePostRequest, UpdatePostRequest


async def list_posts(config: PostsConfig, transport: Transport) -> list[Post]:
    """``GET {base_url}``."""
    url = collection_url(config.base_url)
    data = await transport.request("GET", url)
    return decode_posts(data, url=url)


async def create_post(
    config: PostsConfig,
    transport: Transport,
    request: CreatePostRequest,
) -> Post:
    """``POST {base_url}``; returns the post with its server-assigned id."""
    url = collection_url(config.base_url)
    data = await transport.request("POST", url, request.to_wire())
    return decode_post(data, url=url)


async def update_post(
    config: PostsConfig,
    transport: Transport,
    request: UpdatePostRequest,
) -> Post:
    """``PUT {base_url}/{id}``; returns the post as stored by the server."""
    url = item_url(config.base_url, request.id)
    data = await transport.request("PUT", url, request.to_wire())
    return decode_post(data, url=url)


async def delete_post(config: PostsConfig, transport: Transport, post_id: int) -> None:
    """``DELETE {base_url}/{id}``. The response body is not inspected."""
    url = item_url(config.base_url, post_id)
    await transport.request("DELETE", url)
