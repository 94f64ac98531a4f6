from __future__ import annotations

import aiohttp
import pytest
from aiohttp import test_utils

from pyposts.client import PostsClient
from pyposts.config import PostsConfig
from pyposts.exceptions import InvalidEndpointError, PostsDecodeError, PostsError, PostsTransportError
from pyposts.models.post import Post

from tests.fakes import PostsApp


def _config(server: test_utils.TestServer, path: str = "/posts") -> PostsConfig:
    return PostsConfig(base_url=str(server.make_url(path)), fetch_on_start=False)


@pytest.mark.asyncio
async def test_crud_round_trip(posts_app: PostsApp) -> None:
    async with test_utils.TestServer(posts_app.build()) as server, PostsClient(_config(server)) as client:
        posts = await client.list_posts()
        assert [p.id for p in posts] == [1, 2, 3]

        created = await client.create_post("T", "B")
        assert created == Post(id=101, user_id=1, title="T", body="B")

        updated = await client.update_post(posts[1], "new title", "new body")
        assert updated == Post(id=2, user_id=3, title="new title", body="new body")

        await client.delete_post(posts[0])

    methods = [(r.method, r.path) for r in posts_app.requests]
    assert methods == [
        ("GET", "/posts"),
        ("POST", "/posts"),
        ("PUT", "/posts/2"),
        ("DELETE", "/posts/1"),
    ]
    assert posts_app.requests[1].payload == {"title": "T", "body": "B", "userId": 1}
    assert posts_app.requests[2].payload == {"id": 2, "title": "new title", "body": "new body", "userId": 3}


@pytest.mark.asyncio
async def test_trailing_slash_base_url(posts_app: PostsApp) -> None:
    async with test_utils.TestServer(posts_app.build()) as server, PostsClient(_config(server, "/posts/")) as client:
        await client.delete_post(Post(id=3, user_id=1, title="C", body="b3"))

    assert posts_app.requests[0].path == "/posts/3"


@pytest.mark.asyncio
async def test_non_2xx_delete_raises(posts_app: PostsApp) -> None:
    posts_app.force_status = 500
    async with test_utils.TestServer(posts_app.build()) as server, PostsClient(_config(server)) as client:
        with pytest.raises(PostsTransportError) as excinfo:
            await client.delete_post(Post(id=1, user_id=1, title="A", body="b1"))

    assert excinfo.value.status_code == 500


@pytest.mark.asyncio
async def test_empty_update_response_is_decode_error(posts_app: PostsApp) -> None:
    async with test_utils.TestServer(posts_app.build()) as server, PostsClient(_config(server, "/empty")) as client:
        with pytest.raises(PostsDecodeError, match="Empty response body"):
            await client.update_post(Post(id=1, user_id=1, title="A", body="b1"), "t", "b")


@pytest.mark.asyncio
@pytest.mark.parametrize("base_url", ["not a url", "ftp://example.com/posts", "http:///posts", ""])
async def test_invalid_base_url_sends_nothing(base_url: str) -> None:
    async with PostsClient(PostsConfig(base_url=base_url)) as client:
        with pytest.raises(InvalidEndpointError):
            await client.list_posts()


@pytest.mark.asyncio
async def test_requires_open() -> None:
    client = PostsClient(PostsConfig())
    with pytest.raises(PostsError, match="not initialized"):
        await client.list_posts()


@pytest.mark.asyncio
async def test_external_session_is_not_closed() -> None:
    async with aiohttp.ClientSession() as session:
        async with PostsClient(PostsConfig(), session=session):
            pass
        assert session.closed is False
