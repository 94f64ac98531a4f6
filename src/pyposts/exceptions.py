"""Custom exception hierarchy for pyposts."""

from __future__ import annotations


class PostsError(Exception):
    """Base exception for all pyposts errors."""


class PostsConfigError(PostsError):
    """Invalid or missing configuration."""


class InvalidEndpointError(PostsError):
    """The configured base URL cannot be turned into a request URL."""

    def __init__(self, message: str, *, url: str = "") -> None:
        self.url = url
        super().__init__(message)


class PostsTransportError(PostsError):
    """HTTP-level failure (network, timeout, non-2xx status)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        method: str = "",
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.method = method
        self.url = url
        super().__init__(message)


class PostsDecodeError(PostsError):
    """Response body is missing, not JSON, or not shaped like a post.

    Raised for the same cases the remote API would consider a contract
    violation: the status was 2xx but the payload cannot be decoded
    into :class:`pyposts.models.Post` objects.
    """

    def __init__(self, message: str, *, url: str = "") -> None:
        self.url = url
        super().__init__(message)
