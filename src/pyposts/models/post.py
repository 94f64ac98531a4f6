"""Post model."""

from __future__ import annotations

from pyposts.models._base import PostsBaseModel


class Post(PostsBaseModel):
    """A post as returned by the remote collection resource.

    Identity is :attr:`id`, which is assigned by the server.
    """

    id: int
    """Server-assigned identifier."""
    user_id: int
    """Owner of the post (``userId`` on the wire)."""
    title: str
    body: str
