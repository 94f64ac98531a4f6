from __future__ import annotations

from typing import Any

import pytest

from tests.fakes import FakePostsBackend, PostsApp


@pytest.fixture
def posts_app() -> PostsApp:
    return PostsApp()


@pytest.fixture
def backend(monkeypatch: pytest.MonkeyPatch) -> FakePostsBackend:
    fake_backend = FakePostsBackend()

    async def fake_request(_self: Any, method: str, url: str, payload: Any = None) -> Any:
        return await fake_backend.request(method, url, payload)

    monkeypatch.setattr("pyposts._transport.JsonTransport.request", fake_request)
    return fake_backend
