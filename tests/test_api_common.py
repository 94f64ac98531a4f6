from __future__ import annotations

import pytest

from pyposts._api._common import collection_url, item_url
from pyposts.exceptions import InvalidEndpointError


@pytest.mark.parametrize(
    ("base_url", "expected"),
    [
        ("http://h/posts", "http://h/posts/2"),
        ("http://h/posts/", "http://h/posts/2"),
        ("http://h/posts?x=1", "http://h/posts/2?x=1"),
        ("http://h/posts#top", "http://h/posts/2"),
        ("https://h:8443/api/posts", "https://h:8443/api/posts/2"),
    ],
)
def test_item_url(base_url: str, expected: str) -> None:
    assert item_url(base_url, 2) == expected


def test_collection_url_returned_unchanged() -> None:
    assert collection_url("http://h/posts?x=1") == "http://h/posts?x=1"


@pytest.mark.parametrize("base_url", ["not a url", "ftp://h/posts", "http:///posts", ""])
def test_item_url_rejects_invalid_base(base_url: str) -> None:
    with pytest.raises(InvalidEndpointError):
        item_url(base_url, 2)
