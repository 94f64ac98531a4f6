"""Shared helpers for posts endpoint modules.

This module centralizes:
- validating the configured base URL and deriving item URLs
- decoding JSON payloads into :class:`Post` models

It is internal to pyposts and may change at any time.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError
from yarl import URL

from pyposts._constants import ALLOWED_SCHEMES
from pyposts.exceptions import InvalidEndpointError, PostsDecodeError
from pyposts.models.post import Post


def collection_url(base_url: str) -> str:
    """Return *base_url* if it is an absolute http(s) URL.

    Raises
    ------
    InvalidEndpointError
        If the URL cannot be parsed, has another scheme, or has no host.
    """
    try:
        url = URL(base_url)
    except (TypeError, ValueError) as exc:
        raise InvalidEndpointError(f"Invalid endpoint URL {base_url!r}: {exc}", url=str(base_url)) from exc
    if url.scheme not in ALLOWED_SCHEMES or not url.host:
        raise InvalidEndpointError(f"Invalid endpoint URL {base_url!r}", url=base_url)
    return base_url


def item_url(base_url: str, post_id: int) -> str:
    """URL of a single post: ``{base_url}/{post_id}``.

    The id is appended to the path; a query string on the base URL is
    kept and a fragment is dropped.
    """
    base = URL(collection_url(base_url))
    url = base.with_path(f"{base.path.rstrip('/')}/{post_id}")
    if base.query_string:
        url = url.with_query(base.query)
    return str(url)


def _summarize_validation(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    suffix = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
    return f"{location}: {first.get('msg', 'invalid value')}{suffix}"


def decode_post(data: Any, *, url: str) -> Post:
    """Decode one post, treating a missing body as a decode failure."""
    if data is None:
        raise PostsDecodeError(f"Empty response body from {url}", url=url)
    if not isinstance(data, dict):
        raise PostsDecodeError(f"Expected a post object from {url}, got {type(data).__name__}", url=url)
    try:
        return Post.model_validate(data)
    except ValidationError as exc:
        raise PostsDecodeError(f"Malformed post from {url}: {_summarize_validation(exc)}", url=url) from exc


def decode_posts(data: Any, *, url: str) -> list[Post]:
    """Decode a list of posts. One malformed element fails the whole list."""
    if not isinstance(data, list):
        raise PostsDecodeError(f"Expected a list of posts from {url}, got {type(data).__name__}", url=url)
    posts: list[Post] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise PostsDecodeError(f"Malformed post at index {index} from {url}", url=url)
        try:
            posts.append(Post.model_validate(item))
        except ValidationError as exc:
            raise PostsDecodeError(
                f"Malformed post at index {index} from {url}: {_summarize_validation(exc)}",
                url=url,
            ) from exc
    return posts
