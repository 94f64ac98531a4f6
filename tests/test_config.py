from __future__ import annotations

import pytest

from pyposts._constants import BASE_URL
from pyposts.config import PostsConfig
from pyposts.exceptions import PostsConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "POSTS_BASE_URL",
        "POSTS_REQUEST_TIMEOUT",
        "POSTS_FETCH_ON_START",
        "POSTS_STRICT_UPDATE_DECODE",
        "POSTS_USER_AGENT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    config = PostsConfig.from_env()
    assert config.base_url == BASE_URL
    assert config.request_timeout is None
    assert config.fetch_on_start is True
    assert config.strict_update_decode is False
    assert config.user_agent.startswith("pyposts/")


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POSTS_BASE_URL", " http://localhost:8080/posts ")
    monkeypatch.setenv("POSTS_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("POSTS_FETCH_ON_START", "off")
    monkeypatch.setenv("POSTS_STRICT_UPDATE_DECODE", "yes")
    monkeypatch.setenv("POSTS_USER_AGENT", "tests/1")

    config = PostsConfig.from_env()

    assert config.base_url == "http://localhost:8080/posts"
    assert config.request_timeout == 2.5
    assert config.fetch_on_start is False
    assert config.strict_update_decode is True
    assert config.user_agent == "tests/1"


def test_unrecognized_bool_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POSTS_FETCH_ON_START", "maybe")
    assert PostsConfig.from_env().fetch_on_start is True


def test_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POSTS_FETCH_ON_START", "1")
    monkeypatch.setenv("POSTS_REQUEST_TIMEOUT", "bogus")
    config = PostsConfig.from_env(fetch_on_start=False, request_timeout=1.0)
    assert config.fetch_on_start is False
    assert config.request_timeout == 1.0


@pytest.mark.parametrize("value", ["bogus", "-1", "0"])
def test_invalid_timeout_rejected(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("POSTS_REQUEST_TIMEOUT", value)
    with pytest.raises(PostsConfigError):
        PostsConfig.from_env()


def test_none_timeout_string(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POSTS_REQUEST_TIMEOUT", "none")
    assert PostsConfig.from_env().request_timeout is None
